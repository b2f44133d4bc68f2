"""Module: main_window.py

Author: Michael Economou
Date: 2026-10-19

Main application window: a single padded button whose click publishes
Event.TEST through the shared publisher.
"""

from __future__ import annotations

from PyQt5.QtWidgets import QMainWindow, QPushButton, QVBoxLayout, QWidget

from clickbus.config import BUTTON_LABEL, GAP, WINDOW_TITLE
from clickbus.domain.event import Event
from clickbus.utils.events import Publisher
from clickbus.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class MainWindow(QMainWindow):
    """Window holding the single test button."""

    def __init__(self, publisher: Publisher[Event], parent: QWidget | None = None):
        """Initialize the window.

        Args:
            publisher: Shared publisher notified on every click (not owned)
            parent: Parent widget

        """
        super().__init__(parent)
        self._publisher = publisher

        self.setWindowTitle(WINDOW_TITLE)

        self.button = QPushButton(BUTTON_LABEL)

        container = QWidget(self)
        layout = QVBoxLayout(container)
        layout.setContentsMargins(GAP, GAP, GAP, GAP)
        layout.addWidget(self.button)
        self.setCentralWidget(container)

        self.button.clicked.connect(self._on_button_clicked)

        logger.debug("[MainWindow] Built with title %r", WINDOW_TITLE, extra={"dev_only": True})

    @property
    def publisher(self) -> Publisher[Event]:
        return self._publisher

    def _on_button_clicked(self, _checked: bool = False) -> None:
        logger.info("Input handler called...")
        self._publisher.notify(Event.TEST)
