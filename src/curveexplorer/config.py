"""
Configuration & Global Constants
================================
This module is the central place for layout constants, transition durations
and the application configuration value.

Why is this file needed?
------------------------
1. Abstraction: chart margins, point radius and animation durations are named
   constants instead of numbers scattered through the renderer and widgets.
2. Injection: `build_default_config()` assembles one immutable `AppConfig`
   (generators, curves, settings, layout, timings) that main.py hands to the
   State Store, the Renderer and the UI. Nothing reads a global config object.

Exports:
    AppConfig: The immutable configuration value.
    build_default_config: Factory for the default AppConfig.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any

from curveexplorer.errors import ValidationError
from curveexplorer.model.curves import CurveType, list_curve_types
from curveexplorer.model.generators import DatasetGenerator, list_generators
from curveexplorer.utils import is_finite_number, wordify

APP_ID = "curve-explorer"
VISIBLE_APP_NAME = "Curve Explorer"

# Chart layout (scene units, i.e. pixels of the reference viewport)
CHART_WIDTH: float = 800.0
CHART_HEIGHT: float = 500.0
MARGIN_TOP: float = 20.0
MARGIN_RIGHT: float = 20.0
MARGIN_BOTTOM: float = 30.0
MARGIN_LEFT: float = 50.0
POINT_RADIUS: float = 4.0
PATH_WIDTH: float = 2.0
AXIS_TICK_COUNT: int = 10

# Transition durations in milliseconds
POINT_ENTER_DURATION: float = 500.0
POINT_UPDATE_DURATION: float = 750.0
POINT_EXIT_DURATION: float = 300.0
AXIS_UPDATE_DURATION: float = 750.0
DELAY_PER_POINT: float = 8.0

# Frame clock of the chart widget (~60 FPS)
FRAME_INTERVAL_MS: int = 16

# Dataset preview thumbnails
PREVIEW_SIZE: int = 130
PREVIEW_PADDING: int = 30

SETTING_PLAY_ANIMATIONS = "Play animations"
SETTING_SHOW_POINTS = "Show data points"

DEFAULT_DATASET = "Sinusoidal"


class SettingType(StrEnum):
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"


@dataclass(frozen=True)
class SettingSpec:
    """A named application setting with its type and default."""
    name: str
    type: SettingType
    default: Any

    @property
    def key(self) -> str:
        return wordify(self.name)

    def validate(self, value: Any) -> Any:
        """
        Check a new value against the setting type.

        Raises:
            ValidationError: If the value does not fit the type.
        """
        match self.type:
            case SettingType.BOOLEAN:
                if not isinstance(value, bool):
                    raise ValidationError(f"Setting '{self.name}' expects a boolean, got {value!r}.")
            case SettingType.NUMBER:
                if not is_finite_number(value):
                    raise ValidationError(f"Setting '{self.name}' expects a finite number, got {value!r}.")
            case SettingType.TEXT:
                if not isinstance(value, str):
                    raise ValidationError(f"Setting '{self.name}' expects text, got {value!r}.")
        return value


DEFAULT_SETTINGS: tuple[SettingSpec, ...] = (
    SettingSpec(SETTING_PLAY_ANIMATIONS, SettingType.BOOLEAN, True),
    SettingSpec(SETTING_SHOW_POINTS, SettingType.BOOLEAN, True),
)


@dataclass(frozen=True)
class ChartLayout:
    """Viewport size and the fixed margins reserved around the plot area."""
    width: float = CHART_WIDTH
    height: float = CHART_HEIGHT
    margin_top: float = MARGIN_TOP
    margin_right: float = MARGIN_RIGHT
    margin_bottom: float = MARGIN_BOTTOM
    margin_left: float = MARGIN_LEFT
    point_radius: float = POINT_RADIUS

    @property
    def x_range(self) -> tuple[float, float]:
        return self.margin_left, self.width - self.margin_right

    @property
    def y_range(self) -> tuple[float, float]:
        # Screen y grows downwards: the largest value maps to the top margin
        return self.height - self.margin_bottom, self.margin_top


@dataclass(frozen=True)
class AnimationTimings:
    """Durations (ms) of every transition kind."""
    point_enter: float = POINT_ENTER_DURATION
    point_update: float = POINT_UPDATE_DURATION
    point_exit: float = POINT_EXIT_DURATION
    axis_update: float = AXIS_UPDATE_DURATION
    delay_per_point: float = DELAY_PER_POINT

    @classmethod
    def disabled(cls) -> AnimationTimings:
        return cls(point_enter=0.0, point_update=0.0, point_exit=0.0, axis_update=0.0, delay_per_point=0.0)

    @property
    def is_instant(self) -> bool:
        return not any((self.point_enter, self.point_update, self.point_exit, self.axis_update, self.delay_per_point))


@dataclass(frozen=True)
class AppConfig:
    """Everything the store, renderer and UI need to know, fixed at startup."""
    generators: tuple[DatasetGenerator, ...]
    curve_types: tuple[CurveType, ...]
    settings: tuple[SettingSpec, ...] = DEFAULT_SETTINGS
    layout: ChartLayout = field(default_factory=ChartLayout)
    timings: AnimationTimings = field(default_factory=AnimationTimings)
    default_dataset: str = DEFAULT_DATASET

    def generator(self, name: str) -> DatasetGenerator:
        for generator in self.generators:
            if generator.name == name:
                return generator
        raise KeyError(f"Unknown dataset '{name}'")

    def curve_type(self, name: str) -> CurveType:
        for curve_type in self.curve_types:
            if curve_type.name == name:
                return curve_type
        raise KeyError(f"Unknown curve '{name}'")

    def setting(self, name: str) -> SettingSpec:
        for spec in self.settings:
            if spec.name == name:
                return spec
        raise KeyError(f"Unknown setting '{name}'")


def build_default_config(**overrides: Any) -> AppConfig:
    """
    Assemble the configuration from the registered generators and curves.

    Args:
        overrides: AppConfig fields to replace, e.g. `timings=AnimationTimings.disabled()`.
    """
    config = AppConfig(
        generators=tuple(list_generators()),
        curve_types=tuple(list_curve_types()),
    )
    if overrides:
        config = replace(config, **overrides)
    # Fail early on a default dataset that is not registered
    config.generator(config.default_dataset)
    return config
