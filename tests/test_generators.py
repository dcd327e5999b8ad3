"""Tests for the dataset generators and their registry."""

from __future__ import annotations

import numpy as np
import pytest

from curveexplorer.errors import GenerationError
from curveexplorer.model.generators import get_generator, list_generators


def test_registered_generators() -> None:
    """The three datasets are registered in definition order."""

    assert [g.name for g in list_generators()] == ["Sinusoidal", "PseudoRandom", "Ring"]


def test_unknown_generator_raises_key_error() -> None:
    """Looking up an unregistered dataset fails loudly."""

    with pytest.raises(KeyError):
        get_generator("Spiral")


def test_sinusoidal_point_count_and_amplitude() -> None:
    """Sinusoidal yields cycles*density points bounded by the amplitude."""

    generator = get_generator("Sinusoidal")
    params = {"cycles": 2, "density": 4, "period": 4, "amplitude": 10}
    data = generator.generate_raw(params)

    assert data.shape == (8, 2)
    assert np.all(np.abs(data[:, 1]) <= 10 + 1e-9)
    assert data[:, 0] == pytest.approx(np.arange(8))
    assert np.array_equal(data, generator.generate_raw(params))


def test_sinusoidal_defaults() -> None:
    """At its defaults the sinusoid spans one unit period with 16 points."""

    generator = get_generator("Sinusoidal")
    data = generator.generate(generator.defaults())

    assert len(data) == 16
    assert data[0] == pytest.approx([0, 0])
    assert data[4, 1] == pytest.approx(1)
    assert data[12, 1] == pytest.approx(-1)


def test_sinusoidal_zero_period_or_cycles_is_a_generation_error() -> None:
    """A zero period or zero points violates the generator invariant."""

    generator = get_generator("Sinusoidal")
    with pytest.raises(GenerationError):
        generator.generate_raw({"period": 0})
    with pytest.raises(GenerationError):
        generator.generate_raw({"cycles": 0})


@pytest.mark.parametrize(("seed", "amplitude", "points"), [(42, 10, 24), (7, 3, 4), (123456, 500, 100)])
def test_pseudo_random_is_deterministic_and_non_negative(seed, amplitude, points) -> None:
    """Identical (seed, amplitude, points) give bit-identical data with y >= 0."""

    generator = get_generator("PseudoRandom")
    params = {"seed": seed, "amplitude": amplitude, "points": points}
    first = generator.generate_raw(params)
    second = generator.generate_raw(params)

    assert first.shape == (points, 2)
    assert np.array_equal(first, second)
    assert np.all(first[:, 1] >= 0)
    assert np.all(first[:, 1] <= amplitude)
    assert first[:, 0] == pytest.approx(np.arange(points))


def test_pseudo_random_seed_changes_the_data() -> None:
    """Different seeds give different sequences."""

    generator = get_generator("PseudoRandom")
    a = generator.generate_raw({"seed": 1})
    b = generator.generate_raw({"seed": 2})
    assert not np.array_equal(a, b)


@pytest.mark.parametrize(("r1", "r2", "n"), [(5, 10, 12), (1, 3, 3), (20, 2, 50)])
def test_ring_interleaves_two_radii(r1, r2, n) -> None:
    """Ring output alternates between the two radii, n points each."""

    data = get_generator("Ring").generate_raw({"radius1": r1, "radius2": r2, "density": n})
    distances = np.hypot(data[:, 0], data[:, 1])

    assert len(data) == 2 * n
    assert distances[0::2] == pytest.approx(np.full(n, r1))
    assert distances[1::2] == pytest.approx(np.full(n, r2))


def test_generators_clamp_their_parameters() -> None:
    """Raw values outside the domain are clamped before generation."""

    data = get_generator("Ring").generate_raw({"density": 1})
    assert len(data) == 2 * 3
