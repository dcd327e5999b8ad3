"""
Curve Base Classes
==================
Every interpolation variant is a small state machine in the style of a
canvas line generator: `line_start()`, one `point(x, y)` per input point,
then `line_end()`. It draws into a PathRecorder.

`CurveType` is the immutable registry entry for a variant. Binding its shape
parameter returns a new `CurveBuilder`; the registry entry is never touched.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Optional

import numpy as np

from curveexplorer.errors import ValidationError
from curveexplorer.model.parameters import ParameterSpec
from curveexplorer.model.path import Path, PathRecorder

if TYPE_CHECKING:
    import numpy.typing as npt


class Curve(ABC):
    """Base class for interpolation variants."""
    NAME: ClassVar[str] = "base"  # Override in subclass
    PARAMETER: ClassVar[Optional[ParameterSpec]] = None

    def __init__(self, context: PathRecorder) -> None:
        self._context = context

    @classmethod
    def create(cls, context: PathRecorder, value: Optional[float] = None) -> Curve:
        """Instantiate the state machine; parameterized variants override this."""
        return cls(context)

    # ---- abstract API for subclasses ----

    @abstractmethod
    def line_start(self) -> None:
        raise NotImplementedError("`line_start` must be implemented in subclass.")

    @abstractmethod
    def line_end(self) -> None:
        raise NotImplementedError("`line_end` must be implemented in subclass.")

    @abstractmethod
    def point(self, x: float, y: float) -> None:
        raise NotImplementedError("`point` must be implemented in subclass.")


@dataclass(frozen=True)
class CurveBuilder:
    """A curve type with its shape parameter bound; builds paths over screen points."""
    curve_type: CurveType
    values: tuple[float, ...] = ()

    @property
    def name(self) -> str:
        return self.curve_type.name

    def build(self, points: npt.ArrayLike) -> Path:
        """
        Run the curve over an ordered sequence of (x, y) pairs.

        Args:
            points: (N, 2) screen-space coordinates.

        Returns:
            The recorded path (empty for an empty input).
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        recorder = PathRecorder()
        value = self.values[0] if self.values else None
        curve = self.curve_type.curve_class.create(recorder, value)

        curve.line_start()
        for x, y in pts:
            curve.point(float(x), float(y))
        curve.line_end()
        return recorder.path()


@dataclass(frozen=True)
class CurveType:
    """Registry entry: the curve's name, its 0 or 1 parameter specs and its class."""
    name: str
    parameters: tuple[ParameterSpec, ...]
    curve_class: type[Curve]

    def bind(self, *values: Any) -> CurveBuilder:
        """
        Bind shape parameter values (raw; they are validated and clamped here).

        Missing values fall back to the parameter defaults.

        Raises:
            ValidationError: On a value that is not a finite number, or on
                more values than the curve has parameters.
        """
        if len(values) > len(self.parameters):
            raise ValidationError(
                f"Curve '{self.name}' takes {len(self.parameters)} parameter(s), got {len(values)}."
            )
        bound = []
        for i, spec in enumerate(self.parameters):
            raw = values[i] if i < len(values) else spec.default
            bound.append(spec.transform(raw))
        return CurveBuilder(curve_type=self, values=tuple(bound))

    def defaults(self) -> tuple[float, ...]:
        return tuple(spec.default for spec in self.parameters)
