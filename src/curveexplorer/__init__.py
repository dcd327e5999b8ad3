"""Curve Explorer: interactive comparison of curve interpolation methods."""

__version__ = "0.1.0"
