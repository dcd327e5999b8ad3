"""
Error Types
===========
Exceptions raised by the generation and rendering pipeline.

The renderer catches these at its boundary and turns them into a failed
`RenderResult`, so the scene on screen is never left half updated.
"""


class CurveExplorerError(Exception):
    """Base class for all application errors."""


class ValidationError(CurveExplorerError, ValueError):
    """A parameter value is not a number, or is NaN/infinite after scaling."""


class GenerationError(CurveExplorerError, RuntimeError):
    """A dataset generator could not produce a valid point sequence."""
