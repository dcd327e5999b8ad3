"""
Parameter Specs
===============
Declarative descriptors for every numeric input the user can change:
dataset generator arguments and curve shape parameters.

A ParameterSpec owns the valid domain of its value. Raw input is first checked to be a
finite number (anything else is a ValidationError), then clamped/rounded by
the parameter's scale. Out-of-domain numbers are never an error.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from curveexplorer.errors import ValidationError
from curveexplorer.model.scale import LinearScale, create_scale
from curveexplorer.utils import is_finite_number

logger = logging.getLogger(__name__)

_FRACTION_DIGITS = re.compile(r"\.([0-9]+)$")


@dataclass(frozen=True)
class ParameterSpec:
    """A named numeric parameter with its default and valid domain."""
    name: str
    default: float
    domain: tuple[float, float]
    clamp: bool = True
    round: bool = False

    def scale(self) -> LinearScale:
        """Identity mapping over the domain, carrying the clamp/round flags."""
        return create_scale(self.domain, self.domain, clamp=self.clamp, round=self.round)

    def transform(self, raw: Any) -> float:
        """
        Turn a raw input value into the effective value handed to a generator/curve.

        Raises:
            ValidationError: If `raw` is not a number, or is NaN/infinite
                before or after scaling.
        """
        value = coerce_number(raw, self.name)
        effective = self.scale()(value)
        if not math.isfinite(effective):
            raise ValidationError(f"Parameter '{self.name}' produced a non-finite value ({effective}).")
        return effective

    @property
    def minimum(self) -> float:
        return min(self.domain)

    @property
    def maximum(self) -> float:
        return max(self.domain)

    @property
    def step(self) -> float:
        return calibrate_step_size(self.default)


def coerce_number(raw: Any, name: str = "value") -> float:
    """
    Accept ints, floats and numeric strings; reject everything else.

    Raises:
        ValidationError: If the input is not a finite number.
    """
    value = raw
    if isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            raise ValidationError(f"Parameter '{name}' is not a number: {raw!r}.") from None

    if not is_finite_number(value):
        raise ValidationError(f"Parameter '{name}' must be a finite number, got {raw!r}.")
    return float(value)


def transform_values(specs: Sequence[ParameterSpec], raw_values: Mapping[str, Any]) -> dict[str, float]:
    """
    Transform a raw value map through the matching specs.

    Missing values fall back to the default. Keys without a ParameterSpec are ignored.
    """
    effective: dict[str, float] = {}
    for spec in specs:
        raw = raw_values.get(spec.name, spec.default)
        effective[spec.name] = spec.transform(raw)
    return effective


def default_values(specs: Sequence[ParameterSpec]) -> dict[str, float]:
    return {spec.name: spec.default for spec in specs}


def calibrate_step_size(number: float) -> float:
    """
    Infer how large the step of a numeric input should be from its default.

    A default with k fractional digits steps by 1/(10*k); an integer default
    steps by 2 above 10 and by 1 otherwise.
    """
    match = _FRACTION_DIGITS.search(_format_number(number))
    if match is not None:
        return 1 / (10 * len(match.group(1)))
    return 2 if number > 10 else 1


def _format_number(number: float) -> str:
    # Integral floats print without a trailing ".0"
    if float(number).is_integer():
        return str(int(number))
    return repr(float(number))
