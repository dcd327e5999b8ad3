"""Bundle curve: a B-spline straightened towards the chord by `beta`."""
from __future__ import annotations

from typing import Optional

from curveexplorer.model.curves.base import Curve
from curveexplorer.model.curves.basis import Basis
from curveexplorer.model.curves.registry import register_curve
from curveexplorer.model.parameters import ParameterSpec
from curveexplorer.model.path import PathRecorder


@register_curve
class Bundle(Curve):
    NAME = "Bundle"
    PARAMETER = ParameterSpec("beta", default=0.85, domain=(0, 1))

    def __init__(self, context: PathRecorder, beta: float) -> None:
        super().__init__(context)
        self._basis = Basis(context)
        self._beta = beta

    @classmethod
    def create(cls, context: PathRecorder, value: Optional[float] = None) -> Curve:
        return cls(context, cls.PARAMETER.default if value is None else value)

    def line_start(self) -> None:
        self._xs: list[float] = []
        self._ys: list[float] = []
        self._basis.line_start()

    def line_end(self) -> None:
        xs, ys = self._xs, self._ys
        j = len(xs) - 1

        if j > 0:
            x0, y0 = xs[0], ys[0]
            dx, dy = xs[j] - x0, ys[j] - y0
            for i in range(j + 1):
                t = i / j
                self._basis.point(
                    self._beta * xs[i] + (1 - self._beta) * (x0 + t * dx),
                    self._beta * ys[i] + (1 - self._beta) * (y0 + t * dy),
                )

        self._xs, self._ys = [], []
        self._basis.line_end()

    def point(self, x: float, y: float) -> None:
        self._xs.append(x)
        self._ys.append(y)
