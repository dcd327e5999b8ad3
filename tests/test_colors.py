"""Tests for curve coloring."""

from __future__ import annotations

import re

import numpy as np

from curveexplorer.model.colors import curve_color, parameter_color, ramp_color

HEX = re.compile(r"^#[0-9a-f]{6}$")


def test_identical_parameters_give_identical_colors() -> None:
    """The color of a parameterized curve only depends on its values."""

    rng = np.random.default_rng()
    assert curve_color((0.25,), rng) == curve_color((0.25,), rng) == parameter_color((0.25,))


def test_parameter_colors_wrap_and_may_collide() -> None:
    """Values are summed modulo 1, so distinct sets can share a color."""

    assert parameter_color((0.3, 0.7)) == parameter_color((0.0,))
    assert parameter_color((0.2,)) != parameter_color((0.6,))


def test_parameterless_curves_draw_from_the_rng() -> None:
    """Zero-parameter colors come from the rainbow ramp at a random value."""

    colors = {curve_color((), np.random.default_rng(seed)) for seed in range(10)}
    assert all(HEX.match(c) for c in colors)
    assert len(colors) > 1
    assert curve_color((), np.random.default_rng(3)) == curve_color((), np.random.default_rng(3))


def test_ramp_color_clips_to_unit_interval() -> None:
    """Values outside [0, 1] use the ramp ends."""

    assert ramp_color("viridis", -1) == ramp_color("viridis", 0)
    assert ramp_color("viridis", 2) == ramp_color("viridis", 1)
