"""
The RENDER layer turns a RenderState into a ScenePlan (what to draw, where
every point goes) and samples the transitions between plans over time.
"""
from curveexplorer.render.animation import Animator, Frame
from curveexplorer.render.renderer import ChartRenderer, RenderResult, RendererStatus, SceneBackend
from curveexplorer.render.scene import ScenePlan, TransitionKind

__all__ = [
    "Animator",
    "ChartRenderer",
    "Frame",
    "RenderResult",
    "RendererStatus",
    "SceneBackend",
    "ScenePlan",
    "TransitionKind",
]
