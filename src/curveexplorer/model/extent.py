"""Per-axis [min, max] bounds of a point sequence."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

Extent = tuple[float, float]


def extent(values: npt.ArrayLike) -> Optional[Extent]:
    """
    Min and max of `values`, ignoring NaN.

    Returns:
        (min, max), or None when there is no finite value to bound.
    """
    arr = np.asarray(values, dtype=np.float64).ravel()
    arr = arr[~np.isnan(arr)]
    if arr.size == 0:
        return None
    return float(arr.min()), float(arr.max())


def point_extents(points: npt.NDArray[np.float64]) -> tuple[Optional[Extent], Optional[Extent]]:
    """X and Y extents of an (N, 2) point array."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return extent(pts[:, 0]), extent(pts[:, 1])
