from __future__ import annotations

from curveexplorer.model.curves.base import Curve, CurveType

_REGISTRY: dict[str, CurveType] = {}


def register_curve(cls: type[Curve]) -> type[Curve]:
    """Class decorator to register a curve variant by its NAME."""
    name = getattr(cls, "NAME", None)
    if not name or name == Curve.NAME:
        raise ValueError(f"{cls.__name__} must define NAME")
    parameters = (cls.PARAMETER,) if cls.PARAMETER is not None else ()
    _REGISTRY[name] = CurveType(name=name, parameters=parameters, curve_class=cls)
    return cls


def get_curve_type(name: str) -> CurveType:
    curve_type = _REGISTRY.get(name)
    if curve_type is None:
        raise KeyError(f"No curve registered for name '{name}'")
    return curve_type


def list_curve_types() -> list[CurveType]:
    return list(_REGISTRY.values())
