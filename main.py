#!/usr/bin/env python3
"""
Module: main.py

Author: Michael Economou
Date: 2026-10-19

This module serves as the entry point for the clickbus application.
It sets up logging, creates the Qt application with its publisher and demo
subscriber, shows the window and runs the application's main event loop.

Functions:
    main: Initializes and runs the application, returning its exit code.
"""

import os
import platform
import signal
import sys

# Add the project root to the path FIRST - before any local imports
project_root = os.path.normpath(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from PyQt5.QtCore import QTimer  # noqa: E402

from clickbus.boot import create_demo_app  # noqa: E402
from clickbus.config import APP_ID, APP_NAME, APP_VERSION  # noqa: E402
from clickbus.ui.application import LowUi  # noqa: E402
from clickbus.utils.logging.logger_factory import get_cached_logger  # noqa: E402
from clickbus.utils.logging.logger_setup import ConfigureLogger  # noqa: E402

logger = get_cached_logger(__name__)

# Interval at which the Qt loop hands control back to Python so that
# signal handlers get a chance to run (milliseconds)
SIGNAL_POLL_INTERVAL = 250


def get_user_config_dir(app_name: str = APP_NAME) -> str:
    """Get user configuration directory based on OS."""
    if os.name == "nt":
        base_dir = os.environ.get("APPDATA", os.path.expanduser("~"))
        return os.path.join(base_dir, app_name)
    base_dir = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(base_dir, app_name)


def install_signal_handlers(ui: LowUi) -> QTimer:
    """Quit the event loop on SIGINT/SIGTERM.

    Returns the keep-alive timer; the caller must hold a reference to it.
    """

    def signal_handler(signum, _frame) -> None:
        logger.info("Received signal %s, quitting...", signum)
        ui.quit()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    timer = QTimer()
    timer.timeout.connect(lambda: None)
    timer.start(SIGNAL_POLL_INTERVAL)
    return timer


def main() -> int:
    """
    Entry point for the clickbus application.

    Configures logging, creates the application with the demo subscriber
    attached to Event.TEST, and enters the application's main loop.
    """
    logs_dir = os.path.join(get_user_config_dir(), "logs")
    ConfigureLogger(log_name=APP_NAME, log_dir=logs_dir)

    try:
        logger.info("Starting %s %s (%s)", APP_NAME, APP_VERSION, APP_ID)
        logger.debug(
            "Platform: %s %s, Python %s",
            platform.system(),
            platform.release(),
            sys.version.split()[0],
            extra={"dev_only": True},
        )

        ui = create_demo_app(sys.argv)
        _signal_timer = install_signal_handlers(ui)

        exit_code = ui.run()
        logger.info("Application shutting down with exit code: %s", exit_code)
        return exit_code

    except Exception as e:
        logger.critical("Fatal error in main: %s", e, exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
