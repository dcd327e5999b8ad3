"""
Natural cubic spline.

Each axis is interpolated separately over the point index with a natural
(zero second derivative at both ends) cubic spline; every segment is then
emitted as the equivalent cubic Bezier.
"""
from __future__ import annotations

import numpy as np
from scipy.interpolate import CubicSpline

from curveexplorer.model.curves.base import Curve
from curveexplorer.model.curves.registry import register_curve


@register_curve
class Natural(Curve):
    NAME = "Natural"

    def line_start(self) -> None:
        self._points: list[tuple[float, float]] = []

    def point(self, x: float, y: float) -> None:
        self._points.append((x, y))

    def line_end(self) -> None:
        n = len(self._points)
        if n == 0:
            return

        pts = np.asarray(self._points, dtype=np.float64)
        self._context.move_to(*pts[0])

        if n == 2:
            self._context.line_to(*pts[1])
        elif n > 2:
            t = np.arange(n, dtype=np.float64)
            slopes = CubicSpline(t, pts, axis=0, bc_type="natural")(t, 1)

            # Hermite -> Bezier: control points sit a third of the tangent away
            c1 = pts[:-1] + slopes[:-1] / 3
            c2 = pts[1:] - slopes[1:] / 3
            for a, b, end in zip(c1, c2, pts[1:]):
                self._context.bezier_curve_to(a[0], a[1], b[0], b[1], end[0], end[1])

        self._points = []
