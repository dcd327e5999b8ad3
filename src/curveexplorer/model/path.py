"""
Drawable Paths
==============
Curves draw into a `PathRecorder` using canvas-like commands (move, line,
cubic Bezier, close). The result is an immutable `Path` that can be compared,
exported to SVG path data, or turned into a `QPainterPath` for display.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from PySide6.QtGui import QPainterPath


class Command(StrEnum):
    MOVE = "M"
    LINE = "L"
    CUBIC = "C"
    CLOSE = "Z"


@dataclass(frozen=True)
class PathCommand:
    command: Command
    coords: tuple[float, ...] = ()


@dataclass(frozen=True)
class Path:
    """An ordered, immutable list of drawing commands."""
    commands: tuple[PathCommand, ...] = ()

    def __len__(self) -> int:
        return len(self.commands)

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def to_svg(self, precision: int = 6) -> str:
        """SVG path data, e.g. 'M0,0L10,5Z'."""
        parts: list[str] = []
        for cmd in self.commands:
            coords = ",".join(f"{c:.{precision}g}" for c in cmd.coords)
            parts.append(f"{cmd.command.value}{coords}")
        return "".join(parts)

    def to_painter_path(self) -> QPainterPath:
        qpath = QPainterPath()
        for cmd in self.commands:
            match cmd.command:
                case Command.MOVE:
                    qpath.moveTo(*cmd.coords)
                case Command.LINE:
                    qpath.lineTo(*cmd.coords)
                case Command.CUBIC:
                    qpath.cubicTo(*cmd.coords)
                case Command.CLOSE:
                    qpath.closeSubpath()
        return qpath


class PathRecorder:
    """Mutable drawing context handed to a curve while it runs."""

    def __init__(self) -> None:
        self._commands: list[PathCommand] = []

    def move_to(self, x: float, y: float) -> None:
        self._commands.append(PathCommand(Command.MOVE, (float(x), float(y))))

    def line_to(self, x: float, y: float) -> None:
        self._commands.append(PathCommand(Command.LINE, (float(x), float(y))))

    def bezier_curve_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> None:
        self._commands.append(PathCommand(
            Command.CUBIC, (float(x1), float(y1), float(x2), float(y2), float(x), float(y))
        ))

    def close_path(self) -> None:
        self._commands.append(PathCommand(Command.CLOSE))

    def path(self) -> Path:
        return Path(tuple(self._commands))


class ReflectedRecorder:
    """Wraps a recorder and swaps x/y on every command (used by MonotoneY)."""

    def __init__(self, context: PathRecorder) -> None:
        self._context = context

    def move_to(self, x: float, y: float) -> None:
        self._context.move_to(y, x)

    def line_to(self, x: float, y: float) -> None:
        self._context.line_to(y, x)

    def bezier_curve_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> None:
        self._context.bezier_curve_to(y1, x1, y2, x2, y, x)

    def close_path(self) -> None:
        self._context.close_path()
