"""Uniform cubic B-spline curves (open-ended, closed, and clamped to the end points)."""
from __future__ import annotations

import math

from curveexplorer.model.curves.base import Curve
from curveexplorer.model.curves.registry import register_curve


@register_curve
class Basis(Curve):
    """B-spline through the control points, clamped so it starts and ends on them."""
    NAME = "Basis"

    def line_start(self) -> None:
        self._x0 = self._x1 = self._y0 = self._y1 = math.nan
        self._point = 0

    def line_end(self) -> None:
        if self._point == 3:
            self._bezier(self._x1, self._y1)
        if self._point in (2, 3):
            self._context.line_to(self._x1, self._y1)

    def point(self, x: float, y: float) -> None:
        if self._point == 0:
            self._point = 1
            self._context.move_to(x, y)
        elif self._point == 1:
            self._point = 2
        else:
            if self._point == 2:
                self._point = 3
                self._context.line_to((5 * self._x0 + self._x1) / 6, (5 * self._y0 + self._y1) / 6)
            self._bezier(x, y)
        self._x0, self._x1 = self._x1, x
        self._y0, self._y1 = self._y1, y

    def _bezier(self, x: float, y: float) -> None:
        self._context.bezier_curve_to(
            (2 * self._x0 + self._x1) / 3,
            (2 * self._y0 + self._y1) / 3,
            (self._x0 + 2 * self._x1) / 3,
            (self._y0 + 2 * self._y1) / 3,
            (self._x0 + 4 * self._x1 + x) / 6,
            (self._y0 + 4 * self._y1 + y) / 6,
        )


@register_curve
class BasisClosed(Basis):
    """Closed B-spline: the first three points are replayed at the end."""
    NAME = "BasisClosed"

    def line_start(self) -> None:
        self._x0 = self._x1 = self._x2 = self._x3 = self._x4 = math.nan
        self._y0 = self._y1 = self._y2 = self._y3 = self._y4 = math.nan
        self._point = 0

    def line_end(self) -> None:
        if self._point == 1:
            self._context.move_to(self._x2, self._y2)
            self._context.close_path()
        elif self._point == 2:
            self._context.move_to((self._x2 + 2 * self._x3) / 3, (self._y2 + 2 * self._y3) / 3)
            self._context.line_to((self._x3 + 2 * self._x2) / 3, (self._y3 + 2 * self._y2) / 3)
            self._context.close_path()
        elif self._point == 3:
            self.point(self._x2, self._y2)
            self.point(self._x3, self._y3)
            self.point(self._x4, self._y4)

    def point(self, x: float, y: float) -> None:
        if self._point == 0:
            self._point = 1
            self._x2, self._y2 = x, y
        elif self._point == 1:
            self._point = 2
            self._x3, self._y3 = x, y
        elif self._point == 2:
            self._point = 3
            self._x4, self._y4 = x, y
            self._context.move_to((self._x0 + 4 * self._x1 + x) / 6, (self._y0 + 4 * self._y1 + y) / 6)
        else:
            self._bezier(x, y)
        self._x0, self._x1 = self._x1, x
        self._y0, self._y1 = self._y1, y


@register_curve
class BasisOpen(Basis):
    """B-spline that does not reach the first and last points."""
    NAME = "BasisOpen"

    def line_end(self) -> None:
        pass

    def point(self, x: float, y: float) -> None:
        if self._point == 0:
            self._point = 1
        elif self._point == 1:
            self._point = 2
        elif self._point == 2:
            self._point = 3
            self._context.move_to((self._x0 + 4 * self._x1 + x) / 6, (self._y0 + 4 * self._y1 + y) / 6)
        else:
            self._point = 4
            self._bezier(x, y)
        self._x0, self._x1 = self._x1, x
        self._y0, self._y1 = self._y1, y
