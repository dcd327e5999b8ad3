"""
Dataset Generators
==================
Named parametric functions that produce 2D point sequences.

Why is this file needed?
------------------------
1. Test data: each generator stresses interpolation curves differently
   (smooth periodic data, sharp random jumps, points doubling back on x).
2. Registry: generators register themselves by name with `@register_generator`,
   so the configuration and the dataset panel can list them without knowing
   the concrete functions.

Every generator is pure: identical parameter values always produce an
identical (N, 2) array. Parameter values arrive already clamped/rounded by
their ParameterSpec.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping

import numpy as np

from curveexplorer.errors import GenerationError
from curveexplorer.model.parameters import ParameterSpec, default_values, transform_values
from curveexplorer.utils import round_half_up

if TYPE_CHECKING:
    import numpy.typing as npt

GeneratorFunction = Callable[..., "npt.NDArray[np.float64]"]


@dataclass(frozen=True)
class DatasetGenerator:
    """A registered generator: its name, its parameters and the function itself."""
    name: str
    label: str
    parameters: tuple[ParameterSpec, ...]
    method: GeneratorFunction

    def generate(self, values: Mapping[str, float]) -> npt.NDArray[np.float64]:
        """Call the generator with effective (already transformed) values."""
        kwargs = {spec.name: values[spec.name] for spec in self.parameters}
        return self.method(**kwargs)

    def generate_raw(self, raw_values: Mapping[str, Any]) -> npt.NDArray[np.float64]:
        """Validate and transform raw values through the specs, then generate."""
        return self.generate(transform_values(self.parameters, raw_values))

    def defaults(self) -> dict[str, float]:
        return default_values(self.parameters)


_REGISTRY: dict[str, DatasetGenerator] = {}


def register_generator(
    name: str, parameters: list[ParameterSpec], label: str | None = None
) -> Callable[[GeneratorFunction], GeneratorFunction]:
    """Function decorator to register a generator under `name`."""
    if not name:
        raise ValueError("A generator must have a name")

    def decorator(func: GeneratorFunction) -> GeneratorFunction:
        _REGISTRY[name] = DatasetGenerator(
            name=name,
            label=label or name,
            parameters=tuple(parameters),
            method=func,
        )
        return func

    return decorator


def get_generator(name: str) -> DatasetGenerator:
    generator = _REGISTRY.get(name)
    if generator is None:
        raise KeyError(f"No generator registered for name '{name}'")
    return generator


def list_generators() -> list[DatasetGenerator]:
    return list(_REGISTRY.values())


# ------------------------------------------------------------------------------
# Generators
# ------------------------------------------------------------------------------

@register_generator("Sinusoidal", label="Sinusoidal Curve", parameters=[
    ParameterSpec("amplitude", default=1, domain=(0, 100000)),
    ParameterSpec("period", default=1, domain=(0, 50)),
    ParameterSpec("cycles", default=1, domain=(0, 50), round=True),
    ParameterSpec("density", default=16, domain=(1, 100), round=True),
])
def generate_sin(amplitude: float, period: float, cycles: float, density: float) -> npt.NDArray[np.float64]:
    """
    Points constrained to a sine curve.

    Args:
        amplitude: How "tall" the sine curve is.
        period: Length of one cycle along x.
        cycles: How many times the sinusoid repeats.
        density: Number of discrete points per cycle.
    """
    point_count = int(cycles * density)
    if point_count <= 0:
        raise GenerationError(f"Sinusoidal needs at least one point, got cycles={cycles}, density={density}.")
    if period == 0:
        raise GenerationError("Sinusoidal period must not be zero.")

    x = np.arange(point_count, dtype=np.float64) * (cycles * period / point_count)
    y = amplitude * np.sin(x * 2 * math.pi / period)
    return np.column_stack([x, y])


@register_generator("PseudoRandom", label="Seeded Random Distribution", parameters=[
    ParameterSpec("seed", default=42, domain=(0, 1e7)),
    ParameterSpec("amplitude", default=10, domain=(0, 10000)),
    ParameterSpec("points", default=24, domain=(4, 1000), round=True),
])
def generate_random(seed: float, amplitude: float, points: float) -> npt.NDArray[np.float64]:
    """
    A deterministic "random" dataset, useful to see how a curve handles sharp changes.

    The same (seed, points) pair always yields the same y values. This is a
    sine-mixing transform, not a statistical random source.
    """
    count = int(points)
    if count <= 0:
        raise GenerationError(f"PseudoRandom needs at least one point, got points={points}.")

    mixed_seed = round_half_up(seed * seed / 3 * 10000)

    data = np.empty((count, 2), dtype=np.float64)
    for i in range(count):
        acc = float(i)
        for k in range(10):
            angle = math.fmod(acc * i * k * mixed_seed + 1, 10000) / 1000
            acc = math.sin(angle)
        data[i, 0] = round_half_up(i)
        data[i, 1] = amplitude * abs(acc)
    return data


@register_generator("Ring", label="Rings", parameters=[
    ParameterSpec("radius1", default=5, domain=(0, 1e7)),
    ParameterSpec("radius2", default=10, domain=(0, 1e7)),
    ParameterSpec("density", default=12, domain=(3, 100), round=True),
])
def generate_ring(radius1: float, radius2: float, density: float) -> npt.NDArray[np.float64]:
    """
    Two concentric rings, the second rotated half a step, zig-zagging between them.

    Args:
        radius1: Radius of the first ring (even-indexed points).
        radius2: Radius of the second ring (odd-indexed points).
        density: Number of points per ring.
    """
    count = int(density)
    if count <= 0:
        raise GenerationError(f"Ring needs at least one point per ring, got density={density}.")

    theta = 2 * math.pi / count
    angles = np.arange(count, dtype=np.float64) * theta

    # Polar -> Cartesian, ring B offset by half a step
    ring_a = np.column_stack([radius1 * np.cos(angles), radius1 * np.sin(angles)])
    ring_b = np.column_stack([radius2 * np.cos(angles + theta / 2), radius2 * np.sin(angles + theta / 2)])

    data = np.empty((2 * count, 2), dtype=np.float64)
    data[0::2] = ring_a
    data[1::2] = ring_b
    return data
