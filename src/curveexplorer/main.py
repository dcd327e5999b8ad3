"""
Application Initialization
==========================
This module wires the application together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Builds the immutable AppConfig.
2. Instantiates the State Store and the Chart Renderer from it.
3. Passes all three into the Main Window (View).
4. Prevents circular import errors by being the orchestrator.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

import pyqtgraph as pg
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from curveexplorer.config import APP_ID, VISIBLE_APP_NAME, build_default_config
from curveexplorer.logging_config import setup_logging
from curveexplorer.model.state import StateStore
from curveexplorer.render.renderer import ChartRenderer
from curveexplorer.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=APP_ID, description=VISIBLE_APP_NAME)
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser.parse_args(argv)


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv[:1])
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")
    pg.setConfigOption("antialias", True)
    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Model and renderer
    config = build_default_config()
    store = StateStore(config)
    renderer = ChartRenderer(config)
    logger.info(
        f"Loaded {len(config.generators)} datasets and {len(config.curve_types)} curve types"
    )

    # 4. Main Window
    window = MainWindow(config, store, renderer)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
