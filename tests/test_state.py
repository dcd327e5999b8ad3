"""Tests for the publish/subscribe state store."""

from __future__ import annotations

import logging

import pytest

from curveexplorer.config import SETTING_PLAY_ANIMATIONS, SETTING_SHOW_POINTS, AppConfig
from curveexplorer.errors import ValidationError
from curveexplorer.model.state import RenderState, StateStore


@pytest.fixture
def store(qapp, config: AppConfig) -> StateStore:
    """Return a fresh store built from the default configuration."""

    return StateStore(config)


def test_initial_state_uses_defaults(store: StateStore, config: AppConfig) -> None:
    """The store starts on the default dataset with no active curves."""

    state = store.state
    assert state.active_dataset == "Sinusoidal"
    assert dict(state.dataset_params) == config.generator("Sinusoidal").defaults()
    assert state.active_curve_names == ()
    assert state.curve_params["Bundle"] == (0.85,)
    assert state.setting(SETTING_PLAY_ANIMATIONS) is True
    assert state.setting(SETTING_SHOW_POINTS) is True


def test_subscribers_are_called_in_order_with_full_state(store: StateStore) -> None:
    """Every subscriber gets the complete new state, in subscription order."""

    calls: list[tuple[str, RenderState]] = []
    store.subscribe(lambda s: calls.append(("first", s)))
    store.subscribe(lambda s: calls.append(("second", s)))

    new_state = store.publish(active_curve_names=("Linear",))

    assert [name for name, _ in calls] == ["first", "second"]
    assert all(s is new_state for _, s in calls)
    assert new_state.active_dataset == "Sinusoidal"
    assert new_state.active_curve_names == ("Linear",)


def test_unsubscribe_stops_delivery_and_is_idempotent(store: StateStore) -> None:
    """After unsubscribing a callback receives nothing, and a second call is harmless."""

    calls: list[RenderState] = []
    unsubscribe = store.subscribe(lambda s: calls.append(s))
    store.select_all_curves()
    unsubscribe()
    unsubscribe()
    store.select_no_curves()

    assert len(calls) == 1


def test_failing_subscriber_is_logged_and_others_still_run(store: StateStore, caplog) -> None:
    """A subscriber error is logged with its traceback; later subscribers still get the state."""

    def broken(state: RenderState) -> None:
        raise RuntimeError("chart went away")

    calls: list[RenderState] = []
    store.subscribe(broken)
    store.subscribe(lambda s: calls.append(s))

    with caplog.at_level(logging.ERROR, logger="curveexplorer.model.state"):
        new_state = store.select_all_curves()

    assert calls == [new_state]
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].exc_info[0] is RuntimeError
    assert "chart went away" in caplog.text


def test_select_dataset_resets_parameters(store: StateStore, config: AppConfig) -> None:
    """Switching dataset replaces the parameters with the new defaults."""

    store.set_dataset_param("amplitude", 7)
    state = store.select_dataset("Ring")

    assert state.active_dataset == "Ring"
    assert dict(state.dataset_params) == config.generator("Ring").defaults()


def test_curves_toggle_independently_in_configuration_order(store: StateStore) -> None:
    """Curve toggles are independent and kept in registry order."""

    store.toggle_curve("Step", True)
    store.toggle_curve("Basis", True)
    store.toggle_curve("Natural", True)
    state = store.toggle_curve("Step", False)

    assert state.active_curve_names == ("Basis", "Natural")


def test_select_all_and_none(store: StateStore, config: AppConfig) -> None:
    """Bulk selection is a single publish each."""

    calls: list[RenderState] = []
    store.subscribe(lambda s: calls.append(s))

    assert store.select_all_curves().active_curve_names == tuple(c.name for c in config.curve_types)
    assert store.select_no_curves().active_curve_names == ()
    assert len(calls) == 2


def test_curve_parameters_are_stored_raw(store: StateStore) -> None:
    """Curve values are stored as given; validation happens at render time."""

    state = store.set_curve_param("Cardinal", 0.4)
    assert state.curve_params["Cardinal"] == (0.4,)
    assert state.active_curves == ()

    state = store.toggle_curve("Cardinal", True)
    assert [(c.name, c.values) for c in state.active_curves] == [("Cardinal", (0.4,))]


@pytest.mark.parametrize(
    "action",
    [
        lambda s: s.select_dataset("Spiral"),
        lambda s: s.toggle_curve("Spline", True),
        lambda s: s.set_dataset_param("radius1", 3),
        lambda s: s.set_setting("Dark mode", True),
        lambda s: s.publish(unknown_field=1),
    ],
)
def test_unknown_names_raise_without_delivery(store: StateStore, action) -> None:
    """Unknown names raise KeyError and nothing is published."""

    before = store.state
    calls: list[RenderState] = []
    store.subscribe(lambda s: calls.append(s))

    with pytest.raises(KeyError):
        action(store)

    assert store.state is before
    assert calls == []


def test_setting_type_is_validated(store: StateStore) -> None:
    """A boolean setting rejects non-boolean values."""

    with pytest.raises(ValidationError):
        store.set_setting(SETTING_PLAY_ANIMATIONS, "yes")
    assert store.set_setting(SETTING_PLAY_ANIMATIONS, False).setting(SETTING_PLAY_ANIMATIONS) is False


def test_published_state_is_immutable(store: StateStore) -> None:
    """Snapshots cannot be changed after delivery."""

    state = store.set_dataset_param("amplitude", 3)
    with pytest.raises(TypeError):
        state.dataset_params["amplitude"] = 4
    with pytest.raises(AttributeError):
        state.active_dataset = "Ring"
