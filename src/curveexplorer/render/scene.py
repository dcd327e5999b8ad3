"""
Scene Plan
==========
The output of one render pass: what every point should animate to, which
curve paths to draw, and the axis scales. A plan is immutable and replaces
the previous one wholesale.

Points are joined by index: point i of the previous pass is point i of the
new pass.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Optional

import numpy as np

from curveexplorer.config import AnimationTimings
from curveexplorer.model.path import Path
from curveexplorer.model.scale import LinearScale

if TYPE_CHECKING:
    import numpy.typing as npt


class TransitionKind(StrEnum):
    ENTER = "enter"
    UPDATE = "update"
    EXIT = "exit"


@dataclass(frozen=True)
class PointMark:
    """A drawn point in screen space."""
    x: float
    y: float
    radius: float
    opacity: float = 1.0

    def as_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.radius, self.opacity], dtype=np.float64)


@dataclass(frozen=True)
class PointTransition:
    """
    How one point moves during this pass.

    `start` is only set for entering points (where they appear); `target` is
    None for exiting points, which shrink in place from wherever they are.
    """
    index: int
    kind: TransitionKind
    duration: float
    delay: float = 0.0
    start: Optional[PointMark] = None
    target: Optional[PointMark] = None
    fade: bool = False


@dataclass(frozen=True)
class CurvePath:
    name: str
    values: tuple[float, ...]
    path: Path
    color: str


@dataclass(frozen=True)
class ScenePlan:
    data: npt.NDArray[np.float64]
    screen_points: npt.NDArray[np.float64]
    transitions: tuple[PointTransition, ...]
    paths: tuple[CurvePath, ...]
    x_scale: LinearScale
    y_scale: LinearScale
    timings: AnimationTimings
    show_points: bool = True

    @property
    def point_count(self) -> int:
        """Number of points on screen once every transition has finished."""
        return sum(1 for t in self.transitions if t.kind is not TransitionKind.EXIT)

    @property
    def path_count(self) -> int:
        return len(self.paths)

    def of_kind(self, kind: TransitionKind) -> tuple[PointTransition, ...]:
        return tuple(t for t in self.transitions if t.kind is kind)


def diff_points(
    previous_count: int,
    screen_points: npt.NDArray[np.float64],
    radius: float,
    timings: AnimationTimings,
    show_points: bool = True,
    baseline_y: float = 0.0,
) -> tuple[PointTransition, ...]:
    """
    Compare the currently rendered points with the new screen positions.

    Args:
        previous_count: Number of points currently on screen.
        screen_points: (N, 2) new screen coordinates.
        radius: Final radius of a visible point.
        timings: Durations in effect for this pass.
        show_points: When False, every current point fades out and nothing enters.
        baseline_y: Screen y where entering points appear.

    Returns:
        One transition per affected index, ordered by index.
    """
    pts = np.asarray(screen_points, dtype=np.float64).reshape(-1, 2)

    if not show_points:
        return tuple(
            PointTransition(index=i, kind=TransitionKind.EXIT, duration=timings.point_exit, fade=True)
            for i in range(previous_count)
        )

    new_count = len(pts)
    enter_x = float(np.median(pts[:, 0])) if new_count else 0.0
    transitions: list[PointTransition] = []

    for i in range(max(previous_count, new_count)):
        delay = i * timings.delay_per_point
        if i >= new_count:
            transitions.append(PointTransition(index=i, kind=TransitionKind.EXIT, duration=timings.point_exit))
            continue

        target = PointMark(float(pts[i, 0]), float(pts[i, 1]), radius)
        if i < previous_count:
            transitions.append(PointTransition(
                index=i, kind=TransitionKind.UPDATE, duration=timings.point_update, delay=delay, target=target
            ))
        else:
            transitions.append(PointTransition(
                index=i,
                kind=TransitionKind.ENTER,
                duration=timings.point_enter,
                delay=delay,
                start=PointMark(enter_x, baseline_y, 0.0),
                target=target,
            ))

    return tuple(transitions)
