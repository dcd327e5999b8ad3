"""
Render State (Data Model)
=========================
This module defines the current selection of the running application and the
store that publishes it.

Why is this file needed?
------------------------
1. State Management: one immutable `RenderState` snapshot holds the active
   dataset and its parameters, the toggled curves and their parameters, and
   the settings.
2. Publishing: `StateStore.publish()` is the only way to change it. Every
   subscriber is called synchronously, in subscription order, with the
   complete new snapshot.
3. Decoupling: panels write through the store; the renderer only reads the
   snapshots it is handed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping

from PySide6.QtCore import QObject, Signal

if TYPE_CHECKING:
    from curveexplorer.config import AppConfig

logger = logging.getLogger(__name__)

Subscriber = Callable[["RenderState"], None]


def _frozen(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class CurveSelection:
    """An active curve and its raw (not yet validated) parameter values."""
    name: str
    values: tuple[Any, ...] = ()


@dataclass(frozen=True)
class RenderState:
    """Snapshot of everything a render pass depends on."""
    active_dataset: str
    dataset_params: Mapping[str, Any] = field(default_factory=dict)
    active_curve_names: tuple[str, ...] = ()
    curve_params: Mapping[str, tuple[Any, ...]] = field(default_factory=dict)
    settings: Mapping[str, Any] = field(default_factory=dict)

    @property
    def active_curves(self) -> tuple[CurveSelection, ...]:
        return tuple(
            CurveSelection(name, tuple(self.curve_params.get(name, ())))
            for name in self.active_curve_names
        )

    def setting(self, name: str, default: Any = None) -> Any:
        return self.settings.get(name, default)


class StateStore(QObject):
    """Owns the RenderState and publishes every change atomically."""
    state_changed = Signal(object)

    def __init__(self, config: AppConfig) -> None:
        super().__init__()
        self._config = config
        generator = config.generator(config.default_dataset)
        self._state = RenderState(
            active_dataset=generator.name,
            dataset_params=_frozen(generator.defaults()),
            active_curve_names=(),
            curve_params=_frozen({c.name: c.defaults() for c in config.curve_types}),
            settings=_frozen({s.name: s.default for s in config.settings}),
        )

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def state(self) -> RenderState:
        return self._state

    # ------------------------------------------------------------------------------
    # Publish / subscribe
    # ------------------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Call `callback(state)` after every publish.

        A subscriber that raises is logged with its traceback; the remaining
        subscribers are still called.

        Returns:
            A function that removes the subscription (safe to call twice).
        """
        def deliver(state: RenderState) -> None:
            try:
                callback(state)
            except Exception:
                logger.exception(f"Subscriber {callback!r} failed on state '{state.active_dataset}'")

        self.state_changed.connect(deliver)
        subscribed = True

        def unsubscribe() -> None:
            nonlocal subscribed
            if subscribed:
                subscribed = False
                self.state_changed.disconnect(deliver)

        return unsubscribe

    def publish(self, **partial: Any) -> RenderState:
        """
        Merge `partial` into the current state and notify every subscriber.

        Args:
            partial: RenderState fields to replace.

        Returns:
            The new state.

        Raises:
            KeyError: On an unknown field, dataset, curve, parameter or setting.
            ValidationError: On a setting value of the wrong type.
        """
        known = {f.name for f in fields(RenderState)}
        unknown = set(partial) - known
        if unknown:
            raise KeyError(f"Unknown state field(s): {', '.join(sorted(unknown))}")

        # Validate everything before touching the current state
        new_state = replace(self._state, **self._normalized(partial))
        self._state = new_state
        logger.debug(f"Publishing state: dataset={new_state.active_dataset}, curves={new_state.active_curve_names}")
        self.state_changed.emit(new_state)
        return new_state

    # ------------------------------------------------------------------------------
    # Convenience operations (each is exactly one publish)
    # ------------------------------------------------------------------------------

    def select_dataset(self, name: str) -> RenderState:
        """Make `name` the single active dataset, with its default parameters."""
        generator = self._config.generator(name)
        return self.publish(active_dataset=name, dataset_params=generator.defaults())

    def set_dataset_param(self, name: str, value: Any) -> RenderState:
        params = dict(self._state.dataset_params)
        params[name] = value
        return self.publish(dataset_params=params)

    def toggle_curve(self, name: str, active: bool) -> RenderState:
        self._config.curve_type(name)
        names = [n for n in self._state.active_curve_names if n != name]
        if active:
            names.append(name)
        return self.publish(active_curve_names=tuple(names))

    def set_curve_param(self, name: str, *values: Any) -> RenderState:
        params = dict(self._state.curve_params)
        params[name] = tuple(values)
        return self.publish(curve_params=params)

    def select_all_curves(self) -> RenderState:
        return self.publish(active_curve_names=tuple(c.name for c in self._config.curve_types))

    def select_no_curves(self) -> RenderState:
        return self.publish(active_curve_names=())

    def set_setting(self, name: str, value: Any) -> RenderState:
        settings = dict(self._state.settings)
        settings[name] = value
        return self.publish(settings=settings)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _normalized(self, partial: dict[str, Any]) -> dict[str, Any]:
        out = dict(partial)
        dataset = out.get("active_dataset", self._state.active_dataset)
        generator = self._config.generator(dataset)

        if "active_dataset" in out and out["active_dataset"] != self._state.active_dataset:
            out.setdefault("dataset_params", generator.defaults())

        if "dataset_params" in out:
            allowed = {spec.name for spec in generator.parameters}
            unknown = set(out["dataset_params"]) - allowed
            if unknown:
                raise KeyError(f"Dataset '{dataset}' has no parameter(s): {', '.join(sorted(unknown))}")
            out["dataset_params"] = _frozen(out["dataset_params"])

        if "active_curve_names" in out:
            requested = set(out["active_curve_names"])
            for name in requested:
                self._config.curve_type(name)
            # Keep the configuration order so paths are drawn in a stable order
            out["active_curve_names"] = tuple(c.name for c in self._config.curve_types if c.name in requested)

        if "curve_params" in out:
            for name in out["curve_params"]:
                self._config.curve_type(name)
            out["curve_params"] = _frozen({k: tuple(v) for k, v in out["curve_params"].items()})

        if "settings" in out:
            for name, value in out["settings"].items():
                self._config.setting(name).validate(value)
            out["settings"] = _frozen(out["settings"])

        return out
