"""
Chart Widget
============
pyqtgraph backend of the Chart Renderer.

The view box works in scene units of the reference chart layout (pixels,
y growing downwards), so the screen coordinates in a ScenePlan are drawn as
they are. Axis tick positions are computed from the animated axis domains and
placed explicitly.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import pyqtgraph as pg
from PySide6.QtCore import QElapsedTimer, QTimer
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsPathItem, QWidget

from curveexplorer.config import AXIS_TICK_COUNT, FRAME_INTERVAL_MS, PATH_WIDTH
from curveexplorer.model.scale import create_scale
from curveexplorer.render.animation import Animator, Frame

if TYPE_CHECKING:
    from curveexplorer.config import ChartLayout
    from curveexplorer.render.scene import ScenePlan

logger = logging.getLogger(__name__)

POINT_COLOR = (40, 40, 40)


class ChartWidget(pg.PlotWidget):
    """
    Displays ScenePlans and animates between them.

    Implements the renderer's `SceneBackend` protocol (`present(plan)`).
    """

    def __init__(self, layout: ChartLayout, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent=parent, background="w")
        self._layout = layout
        self._animator = Animator()
        self._path_items: list[QGraphicsPathItem] = []

        # Frame clock
        self._clock = QElapsedTimer()
        self._clock.start()
        self._timer = QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._on_frame)

        self._configure_view()

        self._scatter = pg.ScatterPlotItem(pxMode=False, pen=None)
        self._scatter.setZValue(10)
        self.addItem(self._scatter)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def animator(self) -> Animator:
        return self._animator

    @property
    def is_animating(self) -> bool:
        return self._timer.isActive()

    def present(self, plan: ScenePlan) -> None:
        """Retarget the animation towards `plan` and replace the curve paths."""
        self._animator.apply(plan, self._now())
        self._set_paths(plan)
        self._on_frame()
        if not self._animator.is_idle(self._now()):
            self._timer.start()

    def stop(self) -> None:
        """Halt the frame clock and drop every in-flight transition."""
        self._timer.stop()
        self._animator.clear()
        self._scatter.clear()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _now(self) -> float:
        return float(self._clock.elapsed())

    def _configure_view(self) -> None:
        """Lock the view box to the fixed chart layout."""
        vb = self.getViewBox()
        vb.invertY(True)
        vb.setMouseEnabled(x=False, y=False)
        vb.setMenuEnabled(False)
        vb.setRange(xRange=(0, self._layout.width), yRange=(0, self._layout.height), padding=0)
        self.hideButtons()

        for name in ("bottom", "left"):
            axis = self.getAxis(name)
            axis.setPen("k")
            axis.setTextPen("k")

    def _on_frame(self) -> None:
        now = self._now()
        frame = self._animator.sample(now)
        self._draw_points(frame)
        self._draw_axes(frame)
        if self._animator.is_idle(now):
            self._timer.stop()

    def _draw_points(self, frame: Frame) -> None:
        if not len(frame):
            self._scatter.clear()
            return
        brushes = [
            pg.mkBrush(*POINT_COLOR, int(round(255 * min(max(alpha, 0.0), 1.0))))
            for alpha in frame.opacity
        ]
        self._scatter.setData(
            x=frame.x,
            y=frame.y,
            size=2 * frame.radius.clip(min=0.0),
            brush=brushes,
            pen=None,
        )

    def _draw_axes(self, frame: Frame) -> None:
        x_scale = create_scale(frame.x_domain, self._layout.x_range)
        y_scale = create_scale(frame.y_domain, self._layout.y_range)
        self.getAxis("bottom").setTicks([[(x_scale(v), f"{v:g}") for v in x_scale.ticks(AXIS_TICK_COUNT)]])
        self.getAxis("left").setTicks([[(y_scale(v), f"{v:g}") for v in y_scale.ticks(AXIS_TICK_COUNT)]])

    def _set_paths(self, plan: ScenePlan) -> None:
        for item in self._path_items:
            self.removeItem(item)
        self._path_items.clear()

        for curve in plan.paths:
            item = QGraphicsPathItem(curve.path.to_painter_path())
            item.setPen(pg.mkPen(QColor(curve.color), width=PATH_WIDTH))
            self.addItem(item)
            self._path_items.append(item)
        logger.debug(f"Chart shows {len(self._path_items)} curve(s)")
