"""Smoke tests for the main window, panels and chart widget (offscreen)."""

from __future__ import annotations

import time

import pytest
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QCheckBox, QDoubleSpinBox, QRadioButton

from curveexplorer.config import AppConfig
from curveexplorer.model.state import RenderState, StateStore
from curveexplorer.render.renderer import ChartRenderer, RendererStatus
from curveexplorer.view.main_window import MainWindow


@pytest.fixture
def window(qapp, config: AppConfig):
    """Return a main window wired to a fresh store and renderer."""

    store = StateStore(config)
    win = MainWindow(config, store, ChartRenderer(config))
    yield win
    win.close()
    win.deleteLater()


def test_window_renders_the_initial_state(window: MainWindow) -> None:
    """Opening the window renders the default dataset once."""

    assert window.renderer.status is RendererStatus.RENDERED
    assert window.renderer.scene.point_count == 16
    assert window.chart.is_animating


def test_dataset_inputs_follow_their_specs(window: MainWindow) -> None:
    """Spin boxes are named '<param>-<index>' with the parameter's range and step."""

    form = window.dataset_panel.form("Sinusoidal")
    density = form.findChild(QDoubleSpinBox, "density-3")
    amplitude = form.findChild(QDoubleSpinBox, "amplitude-0")

    assert (density.minimum(), density.maximum()) == (1, 100)
    assert density.singleStep() == 2
    assert density.value() == 16
    assert amplitude.singleStep() == 1


def test_changing_a_parameter_publishes_and_renders(window: MainWindow) -> None:
    """A spin box edit goes through the store and triggers a render."""

    window.dataset_panel.form("Sinusoidal").spin("density").setValue(10)

    assert window.store.state.dataset_params["density"] == 10
    assert window.renderer.scene.point_count == 10


def test_selecting_a_dataset(window: MainWindow, config: AppConfig) -> None:
    """Checking another radio button switches the active dataset."""

    window.dataset_panel.findChild(QRadioButton, "Ring").setChecked(True)

    assert window.store.state.active_dataset == "Ring"
    assert window.renderer.scene.point_count == 2 * 12


def test_select_all_publishes_once(window: MainWindow, config: AppConfig) -> None:
    """Bulk selection checks every box and publishes a single state."""

    calls: list[RenderState] = []
    window.store.subscribe(lambda s: calls.append(s))
    window.curve_panel.select_all()

    assert len(calls) == 1
    assert all(check.isChecked() for check in window.curve_panel.checkboxes.values())
    assert window.renderer.scene.path_count == len(config.curve_types)

    window.curve_panel.select_none()
    assert window.renderer.scene.path_count == 0


def test_curve_toggle_and_parameter(window: MainWindow) -> None:
    """Checking a curve draws it; its spin box sets the bound value."""

    window.curve_panel.checkboxes["Bundle"].setChecked(True)
    window.curve_panel.spins["Bundle"].setValue(0.5)

    plan = window.renderer.scene
    assert [(p.name, p.values) for p in plan.paths] == [("Bundle", (0.5,))]
    assert window.curve_panel.spins["Bundle"].objectName() == "beta-3"


def test_settings_widgets_use_wordified_ids(window: MainWindow) -> None:
    """Boolean settings are checkboxes named after the setting key."""

    check = window.settings_panel.findChild(QCheckBox, "play-animations")
    check.setChecked(False)

    assert window.store.state.setting("Play animations") is False
    assert window.renderer.scene.timings.is_instant


def test_rejected_render_is_reported_in_the_status_bar(window: MainWindow) -> None:
    """Invalid input keeps the chart and shows the error message."""

    scene = window.renderer.scene
    window.store.set_dataset_param("amplitude", "loud")

    assert window.renderer.scene is scene
    assert "loud" in window.statusBar().currentMessage()


def _settle_time_ms(config: AppConfig, point_count: int) -> float:
    t = config.timings
    return max(t.point_enter, t.point_update, t.point_exit, t.axis_update) + t.delay_per_point * point_count


def _pump(chart, duration_ms: float, *, until_idle: bool = False) -> None:
    """Run the Qt event loop for `duration_ms`, or until the chart stops animating."""
    deadline = time.monotonic() + duration_ms / 1000
    while time.monotonic() < deadline:
        if until_idle and not chart.is_animating:
            return
        QCoreApplication.processEvents()
        time.sleep(0.005)


def test_frame_timer_stops_once_the_animation_settles(window: MainWindow, config: AppConfig) -> None:
    """The chart's frame timer runs during the entry animation and stops afterwards."""

    assert window.chart.is_animating
    _pump(window.chart, _settle_time_ms(config, 16) + 2000, until_idle=True)

    assert not window.chart.is_animating
    assert len(window.chart.animator.sample(1e12)) == 16


def test_superseding_render_retargets_and_still_settles(window: MainWindow, config: AppConfig) -> None:
    """A render arriving mid-animation keeps the timer running, then it stops once idle."""

    _pump(window.chart, 100)
    assert window.chart.is_animating

    window.dataset_panel.form("Sinusoidal").spin("density").setValue(10)
    assert window.chart.is_animating

    _pump(window.chart, _settle_time_ms(config, 16) + 2000, until_idle=True)

    assert not window.chart.is_animating
    assert len(window.chart.animator.sample(1e12)) == 10


def test_instant_render_does_not_start_the_timer(window: MainWindow) -> None:
    """With animations off a render lands in one frame and leaves no timer running."""

    window.settings_panel.findChild(QCheckBox, "play-animations").setChecked(False)
    window.store.set_dataset_param("density", 12)

    assert not window.chart.is_animating
    assert len(window.chart.animator.sample(1e12)) == 12


def test_closing_the_window_stops_the_chart(window: MainWindow) -> None:
    """Closing halts the frame timer, clears the animation and stops listening to the store."""

    window.show()
    assert window.chart.is_animating
    window.close()

    assert not window.chart.is_animating
    assert len(window.chart.animator.sample(1e12)) == 0

    window.store.set_dataset_param("density", 10)
    assert window.renderer.scene.point_count == 16
