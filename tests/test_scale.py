"""Tests for linear scales, tick generation and extents."""

from __future__ import annotations

import math

import numpy as np
import pytest

from curveexplorer.model.extent import extent, point_extents
from curveexplorer.model.scale import create_scale, ticks


@pytest.mark.parametrize(
    ("domain", "range_", "value", "expected"),
    [
        ((0, 10), (0, 100), 5, 50),
        ((0, 10), (0, 100), 2.5, 25),
        ((-1, 1), (470, 20), 0, 245),
        ((10, 0), (0, 1), 10, 0),
    ],
)
def test_scale_interpolates_linearly_inside_domain(domain, range_, value, expected) -> None:
    """Values inside the domain map linearly onto the range."""

    assert create_scale(domain, range_)(value) == pytest.approx(expected)


def test_scale_extrapolates_without_clamp() -> None:
    """Without clamping, out-of-domain values extend the line."""

    scale = create_scale((0, 10), (0, 100))
    assert scale(20) == pytest.approx(200)
    assert scale(-5) == pytest.approx(-50)


def test_clamped_scale_returns_nearest_range_boundary() -> None:
    """With clamping, out-of-domain values hit the nearest range end."""

    scale = create_scale((0, 10), (0, 100), clamp=True)
    assert scale(20) == 100
    assert scale(-5) == 0


def test_degenerate_domain_maps_to_range_start() -> None:
    """A domain with equal ends always maps to r0, never divides by zero."""

    scale = create_scale((3, 3), (10, 20))
    for value in (-100, 3, 7, 1e9):
        assert scale(value) == 10
    assert np.all(scale.map_array([1, 2, 3]) == 10)


def test_scale_rounds_half_up() -> None:
    """Rounding scales round halves towards positive infinity."""

    scale = create_scale((0, 10), (0, 10), round=True)
    assert scale(2.5) == 3
    assert scale(2.4) == 2
    assert scale(-2.5) == -2


def test_nan_maps_to_nan() -> None:
    """NaN input stays NaN, even on a degenerate domain."""

    assert math.isnan(create_scale((0, 1), (0, 1))(math.nan))
    assert math.isnan(create_scale((1, 1), (0, 1))(math.nan))


def test_map_array_matches_scalar_map() -> None:
    """The vectorized mapping agrees with the scalar mapping."""

    scale = create_scale((-3, 7), (50, 780))
    values = np.linspace(-10, 10, 21)
    expected = [scale(v) for v in values]
    assert scale.map_array(values) == pytest.approx(expected)


def test_ticks_are_nice_values_within_domain() -> None:
    """Ticks are evenly spaced round numbers inside the domain."""

    assert ticks(0, 10, 10) == pytest.approx([float(i) for i in range(11)])
    assert ticks(0, 1, 5) == pytest.approx([0.0, 0.2, 0.4, 0.6, 0.8, 1.0])

    values = ticks(-0.93, 0.97, 10)
    assert values
    assert all(-0.93 <= v <= 0.97 for v in values)


def test_ticks_follow_domain_direction() -> None:
    """A reversed domain yields the same ticks in reverse order."""

    assert ticks(10, 0, 5) == pytest.approx(list(reversed(ticks(0, 10, 5))))


def test_scale_ticks_use_its_domain() -> None:
    """LinearScale.ticks delegates to the domain bounds."""

    scale = create_scale((0, 100), (50, 780))
    assert scale.ticks(5) == pytest.approx([0, 20, 40, 60, 80, 100])


def test_extent_ignores_nan_and_handles_empty_input() -> None:
    """Extents are (min, max) over the finite values, or None."""

    assert extent([3, 1, 2]) == (1, 3)
    assert extent([math.nan, 2]) == (2, 2)
    assert extent([]) is None
    assert extent([math.nan, math.nan]) is None


def test_point_extents_split_axes() -> None:
    """Point extents are computed per axis."""

    points = np.array([[0, 5], [2, -1], [1, 3]], dtype=float)
    assert point_extents(points) == ((0, 2), (-1, 5))
