"""
Chart Renderer
==============
Turns a RenderState snapshot into a ScenePlan and hands it to the display.

Why is this file needed?
------------------------
1. Pipeline: generation -> extents -> scales -> point diff -> curve paths,
   in one synchronous pass per published state.
2. Atomicity: the whole plan is computed before anything is presented. A
   rejected pass (bad parameter, failed generator) returns a failed
   RenderResult and leaves the current scene untouched.
3. Decoupling: the renderer is pure Python/NumPy. Drawing and animation
   happen in a `SceneBackend` (the Qt chart widget in the application,
   nothing at all in tests).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Optional, Protocol

import numpy as np

from curveexplorer.config import SETTING_PLAY_ANIMATIONS, SETTING_SHOW_POINTS, AnimationTimings
from curveexplorer.errors import CurveExplorerError, GenerationError, ValidationError
from curveexplorer.model.colors import curve_color
from curveexplorer.model.extent import point_extents
from curveexplorer.model.parameters import transform_values
from curveexplorer.model.scale import create_scale
from curveexplorer.render.scene import CurvePath, ScenePlan, diff_points

if TYPE_CHECKING:
    from curveexplorer.config import AppConfig
    from curveexplorer.model.state import RenderState

logger = logging.getLogger(__name__)


class RendererStatus(StrEnum):
    EMPTY = "empty"
    RENDERED = "rendered"


class SceneBackend(Protocol):
    """Anything that can display (and animate) a ScenePlan."""

    def present(self, plan: ScenePlan) -> None: ...


@dataclass(frozen=True)
class RenderResult:
    ok: bool
    plan: Optional[ScenePlan] = None
    error: Optional[CurveExplorerError] = None

    @classmethod
    def success(cls, plan: ScenePlan) -> RenderResult:
        return cls(ok=True, plan=plan)

    @classmethod
    def failure(cls, error: CurveExplorerError) -> RenderResult:
        return cls(ok=False, error=error)

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""


class ChartRenderer:
    """Owns the rendered scene; replaces it wholesale on every successful pass."""

    def __init__(
        self,
        config: AppConfig,
        backend: Optional[SceneBackend] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._config = config
        self._backend = backend
        self._rng = rng if rng is not None else np.random.default_rng()
        self._scene: Optional[ScenePlan] = None
        self._rendered_count = 0
        self._status = RendererStatus.EMPTY

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def status(self) -> RendererStatus:
        return self._status

    @property
    def scene(self) -> Optional[ScenePlan]:
        return self._scene

    def attach(self, backend: SceneBackend) -> None:
        """Set the display; the current scene (if any) is presented immediately."""
        self._backend = backend
        if self._scene is not None:
            backend.present(self._scene)

    def render(self, state: RenderState) -> RenderResult:
        """
        Run one render pass.

        Returns:
            A successful result carrying the new plan, or a failed result
            carrying the ValidationError/GenerationError that rejected the pass.
        """
        try:
            plan = self._build_plan(state)
        except CurveExplorerError as e:
            logger.warning(f"Render of '{state.active_dataset}' rejected: {e}")
            return RenderResult.failure(e)

        self._scene = plan
        self._rendered_count = plan.point_count
        self._status = RendererStatus.RENDERED
        logger.debug(
            f"Rendered '{state.active_dataset}': {plan.point_count} points, {plan.path_count} paths"
        )

        if self._backend is not None:
            self._backend.present(plan)
        return RenderResult.success(plan)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _build_plan(self, state: RenderState) -> ScenePlan:
        layout = self._config.layout

        # 1. Parameters -> data
        try:
            generator = self._config.generator(state.active_dataset)
        except KeyError as e:
            raise ValidationError(str(e)) from None
        values = transform_values(generator.parameters, state.dataset_params)
        data = np.asarray(generator.generate(values), dtype=np.float64).reshape(-1, 2)
        if len(data) == 0:
            raise GenerationError(f"'{generator.name}' produced no points.")
        if not np.all(np.isfinite(data)):
            raise GenerationError(f"'{generator.name}' produced non-finite coordinates.")

        # 2. Extents, 3. Scales
        x_extent, y_extent = point_extents(data)
        x_scale = create_scale(x_extent, layout.x_range)
        y_scale = create_scale(y_extent, layout.y_range)
        screen = np.column_stack([x_scale.map_array(data[:, 0]), y_scale.map_array(data[:, 1])])

        # 4. Point transitions
        play = bool(state.setting(SETTING_PLAY_ANIMATIONS, True))
        show_points = bool(state.setting(SETTING_SHOW_POINTS, True))
        timings = self._config.timings if play else AnimationTimings.disabled()
        baseline_y = create_scale(y_extent, layout.y_range, clamp=True)(0.0)
        transitions = diff_points(
            self._rendered_count, screen, layout.point_radius, timings, show_points, baseline_y
        )

        # 5. Curve paths (bind everything first so a bad value rejects the whole pass)
        builders = []
        for selection in state.active_curves:
            try:
                curve_type = self._config.curve_type(selection.name)
            except KeyError as e:
                raise ValidationError(str(e)) from None
            builders.append(curve_type.bind(*selection.values))

        paths = tuple(
            CurvePath(
                name=builder.name,
                values=builder.values,
                path=builder.build(screen),
                color=curve_color(builder.values, self._rng),
            )
            for builder in builders
        )

        return ScenePlan(
            data=data,
            screen_points=screen,
            transitions=transitions,
            paths=paths,
            x_scale=x_scale,
            y_scale=y_scale,
            timings=timings,
            show_points=show_points,
        )
