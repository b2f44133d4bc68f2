"""Module: application.py

Author: Michael Economou
Date: 2026-10-19

LowUi - owns the QApplication and the shared publisher, builds the main
window on activation and runs the Qt event loop.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from PyQt5.QtWidgets import QApplication

from clickbus.config import APP_AUTHOR, APP_ID, APP_NAME, APP_VERSION
from clickbus.domain.event import Event
from clickbus.ui.main_window import MainWindow
from clickbus.utils.events import Publisher, Subscriber
from clickbus.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def build_qt_app(argv: Sequence[str] | None = None) -> QApplication:
    """Return the process QApplication, creating it if needed.

    The application is identified by APP_ID (used as the desktop file name,
    which is what the window manager groups windows by).
    """
    app = QApplication.instance()
    if app is None:
        app = QApplication(list(argv) if argv is not None else sys.argv)
        logger.debug("[LowUi] QApplication created", extra={"dev_only": True})
    else:
        logger.debug("[LowUi] Reusing existing QApplication", extra={"dev_only": True})

    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(APP_AUTHOR)
    QApplication.setDesktopFileName(APP_ID)
    return app


class LowUi:
    """Qt application wrapper sharing one Publisher with its window."""

    def __init__(self, argv: Sequence[str] | None = None) -> None:
        """Create the publisher and the Qt application.

        Args:
            argv: Command line passed to QApplication (defaults to sys.argv)

        """
        self.publisher: Publisher[Event] = Publisher()
        self.app = build_qt_app(argv)
        self.window: MainWindow | None = None

    def subscribe(self, listener: Subscriber[Event], event_type: Event) -> None:
        """Register listener for event_type on the shared publisher."""
        self.publisher.subscribe(event_type, listener)

    def build_ui(self) -> MainWindow:
        """Create and show the main window. Subsequent calls return the same window."""
        if self.window is None:
            self.window = MainWindow(self.publisher)
            logger.info("[LowUi] Main window created (%s)", APP_ID)

        self.window.show()
        return self.window

    def run(self) -> int:
        """Show the window and enter the Qt event loop.

        Returns:
            The exit code returned by the event loop

        """
        self.build_ui()
        exit_code = self.app.exec_()
        logger.info("[LowUi] Event loop finished with exit code: %s", exit_code)
        return exit_code

    def quit(self) -> None:
        """Ask the event loop to exit."""
        self.app.quit()
