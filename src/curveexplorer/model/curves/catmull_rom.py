"""
Catmull-Rom splines parameterized by `alpha`.

alpha 0.5 is the centripetal spline (no cusps or self-intersections within a
segment), 1 the chordal one. alpha 0 is the uniform spline, which is exactly a
cardinal spline with tension 0, so that case is delegated to the Cardinal family.
"""
from __future__ import annotations

import math
from typing import ClassVar, Optional

from curveexplorer.model.curves.base import Curve
from curveexplorer.model.curves.cardinal import Cardinal, CardinalClosed, CardinalOpen
from curveexplorer.model.curves.registry import register_curve
from curveexplorer.model.parameters import ParameterSpec
from curveexplorer.model.path import PathRecorder

ALPHA = ParameterSpec("alpha", default=0.5, domain=(0, 1))
EPSILON = 1e-12


@register_curve
class CatmullRom(Curve):
    NAME = "CatmullRom"
    PARAMETER = ALPHA
    UNIFORM: ClassVar[type[Cardinal]] = Cardinal

    def __init__(self, context: PathRecorder, alpha: float) -> None:
        super().__init__(context)
        self._alpha = alpha

    @classmethod
    def create(cls, context: PathRecorder, value: Optional[float] = None) -> Curve:
        alpha = ALPHA.default if value is None else value
        if not alpha:
            return cls.UNIFORM(context, 0.0)
        return cls(context, alpha)

    def line_start(self) -> None:
        self._x0 = self._x1 = self._x2 = math.nan
        self._y0 = self._y1 = self._y2 = math.nan
        self._reset_lengths()
        self._point = 0

    def line_end(self) -> None:
        if self._point == 2:
            self._context.line_to(self._x2, self._y2)
        elif self._point == 3:
            self.point(self._x2, self._y2)

    def point(self, x: float, y: float) -> None:
        self._measure(x, y)
        if self._point == 0:
            self._point = 1
            self._context.move_to(x, y)
        elif self._point == 1:
            self._point = 2
        else:
            self._point = 3
            self._bezier(x, y)
        self._shift(x, y)

    # ---- shared segment math ----

    def _reset_lengths(self) -> None:
        self._l01_a = self._l12_a = self._l23_a = 0.0
        self._l01_2a = self._l12_2a = self._l23_2a = 0.0

    def _measure(self, x: float, y: float) -> None:
        """Store |P2 - P| ** alpha (and its square) for the incoming point."""
        if self._point:
            x23, y23 = self._x2 - x, self._y2 - y
            self._l23_2a = (x23 * x23 + y23 * y23) ** self._alpha
            self._l23_a = math.sqrt(self._l23_2a)

    def _shift(self, x: float, y: float) -> None:
        self._l01_a, self._l12_a = self._l12_a, self._l23_a
        self._l01_2a, self._l12_2a = self._l12_2a, self._l23_2a
        self._x0, self._x1, self._x2 = self._x1, self._x2, x
        self._y0, self._y1, self._y2 = self._y1, self._y2, y

    def _bezier(self, x: float, y: float) -> None:
        x1, y1, x2, y2 = self._x1, self._y1, self._x2, self._y2

        if self._l01_a > EPSILON:
            a = 2 * self._l01_2a + 3 * self._l01_a * self._l12_a + self._l12_2a
            n = 3 * self._l01_a * (self._l01_a + self._l12_a)
            x1 = (x1 * a - self._x0 * self._l12_2a + self._x2 * self._l01_2a) / n
            y1 = (y1 * a - self._y0 * self._l12_2a + self._y2 * self._l01_2a) / n

        if self._l23_a > EPSILON:
            b = 2 * self._l23_2a + 3 * self._l23_a * self._l12_a + self._l12_2a
            m = 3 * self._l23_a * (self._l23_a + self._l12_a)
            x2 = (x2 * b + self._x1 * self._l23_2a - x * self._l12_2a) / m
            y2 = (y2 * b + self._y1 * self._l23_2a - y * self._l12_2a) / m

        self._context.bezier_curve_to(x1, y1, x2, y2, self._x2, self._y2)


@register_curve
class CatmullRomClosed(CatmullRom):
    NAME = "CatmullRomClosed"
    UNIFORM = CardinalClosed

    def line_start(self) -> None:
        self._x0 = self._x1 = self._x2 = self._x3 = self._x4 = self._x5 = math.nan
        self._y0 = self._y1 = self._y2 = self._y3 = self._y4 = self._y5 = math.nan
        self._reset_lengths()
        self._point = 0

    def line_end(self) -> None:
        if self._point == 1:
            self._context.move_to(self._x3, self._y3)
            self._context.close_path()
        elif self._point == 2:
            self._context.line_to(self._x3, self._y3)
            self._context.close_path()
        elif self._point == 3:
            self.point(self._x3, self._y3)
            self.point(self._x4, self._y4)
            self.point(self._x5, self._y5)

    def point(self, x: float, y: float) -> None:
        self._measure(x, y)
        if self._point == 0:
            self._point = 1
            self._x3, self._y3 = x, y
        elif self._point == 1:
            self._point = 2
            self._x4, self._y4 = x, y
            self._context.move_to(x, y)
        elif self._point == 2:
            self._point = 3
            self._x5, self._y5 = x, y
        else:
            self._bezier(x, y)
        self._shift(x, y)


@register_curve
class CatmullRomOpen(CatmullRom):
    NAME = "CatmullRomOpen"
    UNIFORM = CardinalOpen

    def line_end(self) -> None:
        pass

    def point(self, x: float, y: float) -> None:
        self._measure(x, y)
        if self._point == 0:
            self._point = 1
        elif self._point == 1:
            self._point = 2
        elif self._point == 2:
            self._point = 3
            self._context.move_to(self._x2, self._y2)
        else:
            self._point = 4
            self._bezier(x, y)
        self._shift(x, y)
