"""
Transitions
===========
Time-based interpolation of the drawn scene. The animator holds one tween per
point and one per axis domain; the chart widget samples it on every frame.

Times are plain milliseconds supplied by the caller (the widget's frame
clock), so the animator itself owns no timer. Applying a new plan while
tweens are in flight restarts each affected tween from its current sampled
value towards the new target.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from curveexplorer.render.scene import ScenePlan, TransitionKind

if TYPE_CHECKING:
    import numpy.typing as npt


def ease_cubic_in_out(t: float) -> float:
    t *= 2
    if t <= 1:
        return t * t * t / 2
    t -= 2
    return (t * t * t + 2) / 2


@dataclass
class Tween:
    """Interpolates a value vector from `start` to `end`."""
    start: npt.NDArray[np.float64]
    end: npt.NDArray[np.float64]
    start_time: float
    duration: float
    delay: float = 0.0

    def progress(self, now: float) -> float:
        elapsed = now - self.start_time - self.delay
        if self.duration <= 0:
            return 1.0 if elapsed >= 0 else 0.0
        return float(np.clip(elapsed / self.duration, 0.0, 1.0))

    def value(self, now: float) -> npt.NDArray[np.float64]:
        k = ease_cubic_in_out(self.progress(now))
        return self.start + (self.end - self.start) * k

    def finished(self, now: float) -> bool:
        return self.progress(now) >= 1.0

    @classmethod
    def still(cls, value: npt.ArrayLike, now: float) -> Tween:
        arr = np.asarray(value, dtype=np.float64)
        return cls(start=arr, end=arr, start_time=now, duration=0.0)


@dataclass
class _Sprite:
    tween: Tween
    exiting: bool = False


@dataclass
class Frame:
    """Sampled scene at one instant: point attributes as parallel arrays."""
    indices: npt.NDArray[np.int_]
    x: npt.NDArray[np.float64]
    y: npt.NDArray[np.float64]
    radius: npt.NDArray[np.float64]
    opacity: npt.NDArray[np.float64]
    x_domain: tuple[float, float]
    y_domain: tuple[float, float]

    def __len__(self) -> int:
        return len(self.indices)


class Animator:
    """Tweens for every point on screen and for both axis domains."""

    def __init__(self) -> None:
        self._points: dict[int, _Sprite] = {}
        self._x_domain: Optional[Tween] = None
        self._y_domain: Optional[Tween] = None

    def apply(self, plan: ScenePlan, now: float) -> None:
        """Retarget the scene towards `plan`, starting from what is on screen at `now`."""
        for transition in plan.transitions:
            sprite = self._points.get(transition.index)
            current = sprite.tween.value(now) if sprite is not None else None

            if transition.kind is TransitionKind.EXIT:
                if current is None:
                    continue
                end = current.copy()
                end[2] = 0.0
                if transition.fade:
                    end[3] = 0.0
                self._points[transition.index] = _Sprite(
                    Tween(current, end, now, transition.duration, transition.delay), exiting=True
                )
                continue

            if current is None:
                source = transition.start if transition.start is not None else transition.target
                current = source.as_array()
            self._points[transition.index] = _Sprite(
                Tween(current, transition.target.as_array(), now, transition.duration, transition.delay)
            )

        axis_duration = plan.timings.axis_update
        self._x_domain = self._retarget_axis(self._x_domain, plan.x_scale.domain, now, axis_duration)
        self._y_domain = self._retarget_axis(self._y_domain, plan.y_scale.domain, now, axis_duration)

    def sample(self, now: float) -> Frame:
        """Current value of every live point; finished exits are discarded."""
        done = [i for i, s in self._points.items() if s.exiting and s.tween.finished(now)]
        for i in done:
            del self._points[i]

        indices = sorted(self._points)
        values = np.array([self._points[i].tween.value(now) for i in indices], dtype=np.float64).reshape(-1, 4)
        return Frame(
            indices=np.asarray(indices, dtype=np.int_),
            x=values[:, 0],
            y=values[:, 1],
            radius=values[:, 2],
            opacity=values[:, 3],
            x_domain=self._domain_at(self._x_domain, now),
            y_domain=self._domain_at(self._y_domain, now),
        )

    def is_idle(self, now: float) -> bool:
        tweens = [s.tween for s in self._points.values()]
        tweens += [t for t in (self._x_domain, self._y_domain) if t is not None]
        return all(t.finished(now) for t in tweens)

    def clear(self) -> None:
        self._points.clear()
        self._x_domain = self._y_domain = None

    @staticmethod
    def _retarget_axis(tween: Optional[Tween], domain: tuple[float, float], now: float, duration: float) -> Tween:
        end = np.asarray(domain, dtype=np.float64)
        if tween is None:
            return Tween.still(end, now)
        return Tween(tween.value(now), end, now, duration)

    @staticmethod
    def _domain_at(tween: Optional[Tween], now: float) -> tuple[float, float]:
        if tween is None:
            return 0.0, 1.0
        d0, d1 = tween.value(now)
        return float(d0), float(d1)
