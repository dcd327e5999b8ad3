"""Piecewise constant curves; `T` places the vertical step between two points."""
from __future__ import annotations

import math
from typing import ClassVar

from curveexplorer.model.curves.base import Curve
from curveexplorer.model.curves.registry import register_curve


@register_curve
class Step(Curve):
    """Vertical step halfway between the points."""
    NAME = "Step"
    T: ClassVar[float] = 0.5

    def line_start(self) -> None:
        self._x = self._y = math.nan
        self._point = 0

    def line_end(self) -> None:
        if 0 < self.T < 1 and self._point == 2:
            self._context.line_to(self._x, self._y)

    def point(self, x: float, y: float) -> None:
        if self._point == 0:
            self._point = 1
            self._context.move_to(x, y)
        else:
            self._point = 2
            if self.T <= 0:
                self._context.line_to(self._x, y)
                self._context.line_to(x, y)
            else:
                x1 = self._x * (1 - self.T) + x * self.T
                self._context.line_to(x1, self._y)
                self._context.line_to(x1, y)
        self._x, self._y = x, y


@register_curve
class StepAfter(Step):
    """Horizontal first, the step sits at the next point's x."""
    NAME = "StepAfter"
    T = 1.0


@register_curve
class StepBefore(Step):
    """Vertical first, the step sits at the previous point's x."""
    NAME = "StepBefore"
    T = 0.0
