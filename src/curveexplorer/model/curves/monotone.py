"""
Monotone cubic interpolation (Steffen's method).

The curve never overshoots the data along its independent axis: MonotoneX
assumes points ordered by x, MonotoneY by y (implemented by mirroring x/y).
"""
from __future__ import annotations

import math

from curveexplorer.model.curves.base import Curve
from curveexplorer.model.curves.registry import register_curve
from curveexplorer.model.path import PathRecorder, ReflectedRecorder


def _sign(value: float) -> int:
    return -1 if value < 0 else 1


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: x/0 is a signed infinity and 0/0 is NaN instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@register_curve
class MonotoneX(Curve):
    NAME = "MonotoneX"

    def line_start(self) -> None:
        self._x0 = self._x1 = self._y0 = self._y1 = self._t0 = math.nan
        self._point = 0

    def line_end(self) -> None:
        if self._point == 2:
            self._context.line_to(self._x1, self._y1)
        elif self._point == 3:
            self._bezier(self._t0, self._slope2(self._t0))

    def point(self, x: float, y: float) -> None:
        t1 = math.nan
        if x == self._x1 and y == self._y1:
            return  # coincident points

        if self._point == 0:
            self._point = 1
            self._context.move_to(x, y)
        elif self._point == 1:
            self._point = 2
        elif self._point == 2:
            self._point = 3
            t1 = self._slope3(x, y)
            self._bezier(self._slope2(t1), t1)
        else:
            t1 = self._slope3(x, y)
            self._bezier(self._t0, t1)

        self._x0, self._x1 = self._x1, x
        self._y0, self._y1 = self._y1, y
        self._t0 = t1

    def _slope3(self, x2: float, y2: float) -> float:
        """Tangent at (x1, y1) from the neighbouring secant slopes."""
        h0 = self._x1 - self._x0
        h1 = x2 - self._x1
        s0 = _divide(self._y1 - self._y0, h0 or (-0.0 if h1 < 0 else 0.0))
        s1 = _divide(y2 - self._y1, h1 or (-0.0 if h0 < 0 else 0.0))
        p = _divide(s0 * h1 + s1 * h0, h0 + h1)

        candidates = (abs(s0), abs(s1), 0.5 * abs(p))
        if any(math.isnan(c) for c in candidates):
            return 0.0
        slope = (_sign(s0) + _sign(s1)) * min(candidates)
        return 0.0 if math.isnan(slope) else slope

    def _slope2(self, t: float) -> float:
        """Tangent at an end point, from a one-sided secant."""
        h = self._x1 - self._x0
        return (3 * (self._y1 - self._y0) / h - t) / 2 if h else t

    def _bezier(self, t0: float, t1: float) -> None:
        x0, y0, x1, y1 = self._x0, self._y0, self._x1, self._y1
        dx = (x1 - x0) / 3
        self._context.bezier_curve_to(x0 + dx, y0 + dx * t0, x1 - dx, y1 - dx * t1, x1, y1)


@register_curve
class MonotoneY(MonotoneX):
    """MonotoneX run on mirrored coordinates, drawn through a mirroring recorder."""
    NAME = "MonotoneY"

    def __init__(self, context: PathRecorder) -> None:
        super().__init__(ReflectedRecorder(context))

    def point(self, x: float, y: float) -> None:
        super().point(y, x)
