"""Pytest fixtures shared across the test suite."""

from __future__ import annotations

import os

# Must be set before any Qt module creates a platform integration
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from curveexplorer.config import AppConfig, build_default_config
from curveexplorer.model.state import RenderState


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """Return the process-wide Qt application object (created once)."""

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def config() -> AppConfig:
    """Return the default configuration assembled from the registries."""

    return build_default_config()


@pytest.fixture
def sinusoidal_state(config: AppConfig) -> RenderState:
    """Return the Sinusoidal dataset at its defaults with the Linear curve active."""

    return RenderState(
        active_dataset="Sinusoidal",
        dataset_params=config.generator("Sinusoidal").defaults(),
        active_curve_names=("Linear",),
        settings={"Play animations": True, "Show data points": True},
    )
