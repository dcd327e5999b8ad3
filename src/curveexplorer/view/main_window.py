from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMainWindow, QScrollArea, QSplitter, QStatusBar, QVBoxLayout, QWidget

from curveexplorer.config import VISIBLE_APP_NAME, AppConfig
from curveexplorer.model.state import RenderState, StateStore
from curveexplorer.render.renderer import ChartRenderer, RenderResult
from curveexplorer.view.chart import ChartWidget
from curveexplorer.view.panels import CurvePanel, DatasetPanel, SettingsPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Panels on the left, the chart on the right; re-renders on every publish."""

    def __init__(self, config: AppConfig, store: StateStore, renderer: ChartRenderer) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        self.config = config
        self.store = store
        self.renderer = renderer

        # ---- Left: scrollable panel column, Right: chart ----
        splitter = QSplitter(Qt.Orientation.Horizontal, self)

        column = QWidget(splitter)
        v = QVBoxLayout(column)
        self.dataset_panel = DatasetPanel(store, parent=column)
        self.curve_panel = CurvePanel(store, parent=column)
        self.settings_panel = SettingsPanel(store, parent=column)
        for panel in (self.dataset_panel, self.curve_panel, self.settings_panel):
            v.addWidget(panel)
        v.addStretch()

        scroll = QScrollArea(splitter)
        scroll.setWidgetResizable(True)
        scroll.setWidget(column)
        splitter.addWidget(scroll)

        self.chart = ChartWidget(config.layout, parent=splitter)
        splitter.addWidget(self.chart)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        self.setStatusBar(QStatusBar(self))

        self.renderer.attach(self.chart)
        self._unsubscribe = self.store.subscribe(self._on_state_changed)
        self._on_state_changed(self.store.state)

    def _on_state_changed(self, state: RenderState) -> None:
        self._show_result(self.renderer.render(state))

    def _show_result(self, result: RenderResult) -> None:
        if result.ok:
            self.statusBar().clearMessage()
        else:
            self.statusBar().showMessage(self.tr("Render rejected: {msg}").format(msg=result.message))

    def closeEvent(self, e) -> None:
        self._unsubscribe()
        self.chart.stop()
        super().closeEvent(e)
