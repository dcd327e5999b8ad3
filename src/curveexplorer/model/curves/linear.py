"""Straight segments between consecutive points, optionally closed."""
from __future__ import annotations

from curveexplorer.model.curves.base import Curve
from curveexplorer.model.curves.registry import register_curve


@register_curve
class Linear(Curve):
    NAME = "Linear"

    def line_start(self) -> None:
        self._point = 0

    def line_end(self) -> None:
        pass

    def point(self, x: float, y: float) -> None:
        if self._point == 0:
            self._point = 1
            self._context.move_to(x, y)
        else:
            self._context.line_to(x, y)


@register_curve
class LinearClosed(Linear):
    NAME = "LinearClosed"

    def line_end(self) -> None:
        if self._point:
            self._context.close_path()
