"""
Logging Configuration
=====================
Sets up the application logger and routes Qt's own messages into it.

Qt and pyqtgraph report problems from the chart's frame timer and painter
through Qt's message handler, which prints to stderr by default. After
`setup_logging` they reach the same console and file handlers as the
application's records, under the `<package>.qt` logger.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from PySide6.QtCore import QMessageLogContext, QtMsgType, qInstallMessageHandler

APP_LOGGER_NAME = __package__ or "curveexplorer"
QT_LOGGER_NAME = f"{APP_LOGGER_NAME}.qt"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def qt_message_handler(mode: QtMsgType, context: QMessageLogContext, message: str) -> None:
    """Forward one Qt message to the `<package>.qt` logger."""
    level = _QT_LEVELS.get(mode, logging.WARNING)
    where = f" ({context.file}:{context.line})" if context.file else ""
    logging.getLogger(QT_LOGGER_NAME).log(level, f"{message}{where}")


def install_qt_message_handler() -> Optional[Callable]:
    """Route Qt messages into logging. Returns the previously installed handler."""
    return qInstallMessageHandler(qt_message_handler)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the application logger and captures Qt messages.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured application logger.
    """
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(level)

    # A second call replaces the handlers instead of duplicating output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    install_qt_message_handler()
    logger.info(f"Logging initialized at {logging.getLevelName(level)}" + (f", writing to {log_file}" if log_file else ""))
    return logger
