"""
Control Panels
==============
Left-side panels for choosing the dataset, the curves and the settings.

Why is this file needed?
------------------------
1. Input: every ParameterSpec gets a spin box whose range is the parameter's
   domain, so the widget already clamps what the user types.
2. Decoupling: panels only write through the StateStore convenience
   operations. They never call the renderer.
3. Bulk actions: "Select All"/"Select None" update every checkbox with
   signals blocked and then publish exactly once.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import pyqtgraph as pg
from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import (
    QButtonGroup, QCheckBox, QDoubleSpinBox, QGridLayout, QGroupBox, QHBoxLayout, QLabel,
    QLineEdit, QPushButton, QRadioButton, QSizePolicy, QStackedWidget, QVBoxLayout, QWidget,
)

from curveexplorer.config import PREVIEW_PADDING, PREVIEW_SIZE, SettingSpec, SettingType
from curveexplorer.errors import CurveExplorerError
from curveexplorer.model.generators import DatasetGenerator
from curveexplorer.model.parameters import ParameterSpec
from curveexplorer.model.state import StateStore

logger = logging.getLogger(__name__)

CURVE_PARAMETER_STEP = 0.01


def _make_spin(
    spec: ParameterSpec,
    object_name: str,
    parent: QWidget,
    *,
    step: Optional[float] = None,
    decimals: int = 3,
) -> QDoubleSpinBox:
    w = QDoubleSpinBox(parent)
    w.setObjectName(object_name)
    w.setRange(spec.minimum, spec.maximum)
    w.setDecimals(0 if spec.round else decimals)
    w.setSingleStep(step if step is not None else spec.step)
    w.setValue(spec.default)
    w.setKeyboardTracking(False)
    w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
    return w


class BasePanel(QWidget):
    """Base class for left-side panels. Holds a reference to the state store."""
    def __init__(self, store: StateStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store


# ------------------------------------------------------------------------------
# Dataset selection
# ------------------------------------------------------------------------------

class ParameterForm(QWidget):
    """One spin box per generator parameter, named '<param>-<index>'."""
    value_changed = Signal(str, float)

    def __init__(self, parameters: Sequence[ParameterSpec], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._parameters = tuple(parameters)
        self._spins: dict[str, QDoubleSpinBox] = {}

        grid = QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setVerticalSpacing(8)
        for row, spec in enumerate(self._parameters):
            grid.addWidget(QLabel(spec.name, self), row, 0)
            spin = _make_spin(spec, f"{spec.name}-{row}", self)
            spin.valueChanged.connect(lambda v, name=spec.name: self.value_changed.emit(name, v))
            grid.addWidget(spin, row, 1)
            self._spins[spec.name] = spin

    def spin(self, name: str) -> QDoubleSpinBox:
        return self._spins[name]

    def params(self) -> dict[str, float]:
        return {k: w.value() for k, w in self._spins.items()}

    def reset(self) -> None:
        """Show the defaults again without publishing anything."""
        for spec in self._parameters:
            spin = self._spins[spec.name]
            spin.blockSignals(True)
            spin.setValue(spec.default)
            spin.blockSignals(False)


class DatasetPreview(pg.PlotWidget):
    """Small, non-interactive scatter of a dataset at its default parameters."""

    def __init__(self, generator: DatasetGenerator, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent, background="w")
        self.setFixedSize(PREVIEW_SIZE, PREVIEW_SIZE)
        self.hideAxis("bottom")
        self.hideAxis("left")
        self.hideButtons()
        self.setMouseEnabled(x=False, y=False)
        self.setMenuEnabled(False)

        try:
            data = generator.generate(generator.defaults())
        except CurveExplorerError as e:
            logger.warning(f"No preview for '{generator.name}': {e}")
            return

        self.plot(data[:, 0], data[:, 1], pen=None, symbol="o", symbolSize=3, symbolBrush="k", symbolPen=None)
        # Keep the points clear of the thumbnail border
        self.getViewBox().setDefaultPadding(PREVIEW_PADDING / PREVIEW_SIZE)
        self.autoRange()


class DatasetPanel(BasePanel):
    """
    Exclusive dataset selection.

    Top: one radio button with a preview thumbnail per registered generator.
    Below: the parameter form of the selected dataset.
    """
    def __init__(self, store: StateStore, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        root = QVBoxLayout(self)

        box = QGroupBox(self.tr("Dataset"), self)
        root.addWidget(box, 0)
        box_layout = QVBoxLayout(box)

        self.button_group = QButtonGroup(self)
        self.button_group.setExclusive(True)
        self.stack = QStackedWidget(self)

        self._names: list[str] = []
        self._forms: dict[str, ParameterForm] = {}
        for index, generator in enumerate(store.config.generators):
            row = QHBoxLayout()
            radio = QRadioButton(generator.label, box)
            radio.setObjectName(generator.name)
            self.button_group.addButton(radio, index)
            row.addWidget(radio, 1)
            row.addWidget(DatasetPreview(generator, box), 0)
            box_layout.addLayout(row)

            form = ParameterForm(generator.parameters, self.stack)
            form.value_changed.connect(self._on_param_changed)
            self.stack.addWidget(form)
            self._names.append(generator.name)
            self._forms[generator.name] = form

        root.addWidget(self.stack, 0)
        root.addStretch()

        active = store.state.active_dataset
        self.button_group.button(self._names.index(active)).setChecked(True)
        self.stack.setCurrentIndex(self._names.index(active))

        # wiring
        self.button_group.idToggled.connect(self._on_toggled)

    def form(self, name: str) -> ParameterForm:
        return self._forms[name]

    @Slot(int, bool)
    def _on_toggled(self, index: int, checked: bool) -> None:
        if not checked:
            return
        name = self._names[index]
        self._forms[name].reset()
        self.stack.setCurrentIndex(index)
        self.store.select_dataset(name)

    @Slot(str, float)
    def _on_param_changed(self, name: str, value: float) -> None:
        self.store.set_dataset_param(name, value)


# ------------------------------------------------------------------------------
# Curve selection
# ------------------------------------------------------------------------------

class CurvePanel(BasePanel):
    """One checkbox per curve type, a shape spin box where it has a parameter."""

    def __init__(self, store: StateStore, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        root = QVBoxLayout(self)

        box = QGroupBox(self.tr("Curves"), self)
        root.addWidget(box, 0)
        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(4)

        self.checkboxes: dict[str, QCheckBox] = {}
        self.spins: dict[str, QDoubleSpinBox] = {}
        active = set(store.state.active_curve_names)

        for index, curve_type in enumerate(store.config.curve_types):
            check = QCheckBox(curve_type.name, box)
            check.setObjectName(curve_type.name)
            check.setChecked(curve_type.name in active)
            check.toggled.connect(lambda on, name=curve_type.name: self.store.toggle_curve(name, on))
            self.grid.addWidget(check, index, 0)
            self.checkboxes[curve_type.name] = check

            for spec in curve_type.parameters:
                self.grid.addWidget(QLabel(spec.name, box), index, 1)
                spin = _make_spin(spec, f"{spec.name}-{index}", box, step=CURVE_PARAMETER_STEP, decimals=2)
                spin.valueChanged.connect(lambda v, name=curve_type.name: self.store.set_curve_param(name, v))
                self.grid.addWidget(spin, index, 2)
                self.spins[curve_type.name] = spin

        buttons = QHBoxLayout()
        self.btn_all = QPushButton(self.tr("Select All"), self)
        self.btn_all.clicked.connect(self.select_all)
        buttons.addWidget(self.btn_all)
        self.btn_none = QPushButton(self.tr("Select None"), self)
        self.btn_none.clicked.connect(self.select_none)
        buttons.addWidget(self.btn_none)
        root.addLayout(buttons)
        root.addStretch()

    @Slot()
    def select_all(self) -> None:
        self._set_all_checked(True)
        self.store.select_all_curves()

    @Slot()
    def select_none(self) -> None:
        self._set_all_checked(False)
        self.store.select_no_curves()

    def _set_all_checked(self, checked: bool) -> None:
        for check in self.checkboxes.values():
            check.blockSignals(True)
            check.setChecked(checked)
            check.blockSignals(False)


# ------------------------------------------------------------------------------
# Settings
# ------------------------------------------------------------------------------

class SettingsPanel(BasePanel):
    """One widget per SettingSpec; the widget's object name is the setting key."""

    def __init__(self, store: StateStore, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        root = QVBoxLayout(self)

        box = QGroupBox(self.tr("Settings"), self)
        root.addWidget(box, 0)
        self.grid = QGridLayout(box)
        self.widgets: dict[str, QWidget] = {}

        for row, spec in enumerate(store.config.settings):
            widget = self._make_widget(spec, box)
            widget.setObjectName(spec.key)
            if spec.type is SettingType.BOOLEAN:
                self.grid.addWidget(widget, row, 0, 1, 2)
            else:
                self.grid.addWidget(QLabel(spec.name, box), row, 0)
                self.grid.addWidget(widget, row, 1)
            self.widgets[spec.name] = widget

        root.addStretch()

    def _make_widget(self, spec: SettingSpec, parent: QWidget) -> QWidget:
        value = self.store.state.setting(spec.name, spec.default)
        match spec.type:
            case SettingType.BOOLEAN:
                w = QCheckBox(spec.name, parent)
                w.setChecked(bool(value))
                w.toggled.connect(lambda on, name=spec.name: self.store.set_setting(name, on))
            case SettingType.NUMBER:
                w = QDoubleSpinBox(parent)
                w.setRange(-1e9, 1e9)
                w.setValue(float(value))
                w.setKeyboardTracking(False)
                w.valueChanged.connect(lambda v, name=spec.name: self.store.set_setting(name, v))
            case _:
                w = QLineEdit(str(value), parent)
                w.editingFinished.connect(lambda name=spec.name, edit=w: self.store.set_setting(name, edit.text()))
        return w
