"""
Auto-import all curve modules to ensure registration side-effects run.

After importing this package, `registry.list_curve_types()` knows about every
interpolation variant, in module (alphabetical) then definition order.
"""
from __future__ import annotations

import importlib
import pkgutil

from curveexplorer.model.curves.base import Curve, CurveBuilder, CurveType
from curveexplorer.model.curves.registry import get_curve_type, list_curve_types, register_curve

for _module in pkgutil.iter_modules(__path__, __name__ + "."):
    importlib.import_module(_module.name)

__all__ = [
    "Curve",
    "CurveBuilder",
    "CurveType",
    "get_curve_type",
    "list_curve_types",
    "register_curve",
]
