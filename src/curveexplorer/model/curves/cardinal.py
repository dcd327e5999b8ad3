"""Cardinal splines; `tension` 1 gives straight segments, 0 a Catmull-Rom-like spline."""
from __future__ import annotations

import math
from typing import Optional

from curveexplorer.model.curves.base import Curve
from curveexplorer.model.curves.registry import register_curve
from curveexplorer.model.parameters import ParameterSpec
from curveexplorer.model.path import PathRecorder

TENSION = ParameterSpec("tension", default=0.0, domain=(0, 1))


@register_curve
class Cardinal(Curve):
    NAME = "Cardinal"
    PARAMETER = TENSION

    def __init__(self, context: PathRecorder, tension: float = 0.0) -> None:
        super().__init__(context)
        self._k = (1 - tension) / 6

    @classmethod
    def create(cls, context: PathRecorder, value: Optional[float] = None) -> Curve:
        return cls(context, TENSION.default if value is None else value)

    def line_start(self) -> None:
        self._x0 = self._x1 = self._x2 = math.nan
        self._y0 = self._y1 = self._y2 = math.nan
        self._point = 0

    def line_end(self) -> None:
        if self._point == 2:
            self._context.line_to(self._x2, self._y2)
        elif self._point == 3:
            self._bezier(self._x1, self._y1)

    def point(self, x: float, y: float) -> None:
        if self._point == 0:
            self._point = 1
            self._context.move_to(x, y)
        elif self._point == 1:
            self._point = 2
            self._x1, self._y1 = x, y
        else:
            self._point = 3
            self._bezier(x, y)
        self._shift(x, y)

    def _shift(self, x: float, y: float) -> None:
        self._x0, self._x1, self._x2 = self._x1, self._x2, x
        self._y0, self._y1, self._y2 = self._y1, self._y2, y

    def _bezier(self, x: float, y: float) -> None:
        self._context.bezier_curve_to(
            self._x1 + self._k * (self._x2 - self._x0),
            self._y1 + self._k * (self._y2 - self._y0),
            self._x2 + self._k * (self._x1 - x),
            self._y2 + self._k * (self._y1 - y),
            self._x2,
            self._y2,
        )


@register_curve
class CardinalClosed(Cardinal):
    NAME = "CardinalClosed"

    def line_start(self) -> None:
        self._x0 = self._x1 = self._x2 = self._x3 = self._x4 = self._x5 = math.nan
        self._y0 = self._y1 = self._y2 = self._y3 = self._y4 = self._y5 = math.nan
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
class CardinalOpen(Cardinal):
    NAME = "CardinalOpen"

    def line_end(self) -> None:
        pass

    def point(self, x: float, y: float) -> None:
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
