"""
Linear Scales
=============
Pure mappings from a data domain onto a screen (or parameter) range.

Why is this file needed?
------------------------
1. Screen mapping: the renderer rebuilds one scale per axis on every render
   pass to turn generated data into viewport coordinates.
2. Parameter handling: every ParameterSpec clamps/rounds raw input through a
   scale before it reaches a generator or a curve.
3. Axes: `ticks()` produces the "nice" values used to label the chart axes.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from curveexplorer.utils import round_half_up

if TYPE_CHECKING:
    import numpy.typing as npt

# Thresholds deciding between steps of 1, 2, 5 and 10 times a power of ten
_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


@dataclass(frozen=True)
class LinearScale:
    """
    Maps `domain` linearly onto `range`.

    A degenerate domain (both ends equal) maps every input to the start of
    the range instead of dividing by zero.
    """
    domain: tuple[float, float] = (0.0, 1.0)
    range: tuple[float, float] = (0.0, 1.0)
    clamp: bool = False
    round: bool = False

    def __call__(self, value: float) -> float:
        return self.map(value)

    def map(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        value = float(value)

        if math.isnan(value):
            return math.nan
        if d0 == d1:
            return self._finish(r0)
        if self.clamp:
            value = min(max(value, min(d0, d1)), max(d0, d1))

        t = (value - d0) / (d1 - d0)
        return self._finish(r0 + t * (r1 - r0))

    def map_array(self, values: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Vectorized `map` for numpy input."""
        d0, d1 = self.domain
        r0, r1 = self.range
        arr = np.asarray(values, dtype=np.float64)

        if d0 == d1:
            out = np.where(np.isnan(arr), np.nan, r0)
        else:
            if self.clamp:
                arr = np.clip(arr, min(d0, d1), max(d0, d1))
            out = r0 + (arr - d0) / (d1 - d0) * (r1 - r0)

        if self.round:
            out = np.floor(out + 0.5)
        return out

    def ticks(self, count: int = 10) -> list[float]:
        """Roughly `count` evenly spaced, human-friendly values inside the domain."""
        return ticks(self.domain[0], self.domain[1], count)

    def _finish(self, value: float) -> float:
        return round_half_up(value) if self.round else value


def create_scale(
    domain: tuple[float, float],
    range: tuple[float, float],
    clamp: bool = False,
    round: bool = False,
) -> LinearScale:
    """Build a LinearScale; the returned object is callable as `map(v)`."""
    return LinearScale(
        domain=(float(domain[0]), float(domain[1])),
        range=(float(range[0]), float(range[1])),
        clamp=clamp,
        round=round,
    )


# ------------------------------------------------------------------------------
# Tick generation
# ------------------------------------------------------------------------------

def _tick_spec(start: float, stop: float, count: float) -> tuple[int, int, float]:
    step = (stop - start) / max(0.0, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1

    if power < 0:
        inc = 10 ** -power / factor
        i1 = int(round_half_up(start * inc))
        i2 = int(round_half_up(stop * inc))
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = 10 ** power * factor
        i1 = int(round_half_up(start / inc))
        i2 = int(round_half_up(stop / inc))
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def ticks(start: float, stop: float, count: int = 10) -> list[float]:
    """
    Nice tick values between `start` and `stop` (inclusive).

    Args:
        start: First domain bound.
        stop: Second domain bound, may be smaller than `start`.
        count: Approximate number of ticks wanted.

    Returns:
        Tick values ordered from `start` towards `stop`.
    """
    if not count > 0 or not (math.isfinite(start) and math.isfinite(stop)):
        return []
    if start == stop:
        return [float(start)]

    reverse = stop < start
    lo, hi = (stop, start) if reverse else (start, stop)
    i1, i2, inc = _tick_spec(lo, hi, count)
    if i2 < i1:
        return []

    n = i2 - i1 + 1
    if inc < 0:
        values = [(i1 + i) / -inc for i in range(n)]
    else:
        values = [(i1 + i) * inc for i in range(n)]

    return values[::-1] if reverse else values
