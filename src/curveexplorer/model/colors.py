"""
Curve Colors
============
Parameterized curves are colored from a fixed ramp at the (wrapped) sum of
their normalized parameter values, so the same bound parameters always give
the same color. Distinct parameter sets can collide on one color; the color
is a visual aid, not an identifier.

Parameterless curves take a color from a rainbow ramp at a value picked per
render call.
"""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from matplotlib import colormaps
from matplotlib.colors import to_hex

PARAMETER_RAMP = "viridis"
RAINBOW_RAMP = "rainbow"


def ramp_color(ramp: str, value: float) -> str:
    """Hex color of matplotlib colormap `ramp` at `value` in [0, 1]."""
    return to_hex(colormaps[ramp](float(np.clip(value, 0.0, 1.0))))


def parameter_color(values: Sequence[float]) -> str:
    """Deterministic color for a set of bound parameter values."""
    return ramp_color(PARAMETER_RAMP, math.fsum(values) % 1.0)


def curve_color(values: Sequence[float], rng: np.random.Generator) -> str:
    """Pick the color of one curve for the current render pass."""
    if values:
        return parameter_color(values)
    return ramp_color(RAINBOW_RAMP, rng.random())
