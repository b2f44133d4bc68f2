"""
Tests for MainWindow.

Author: Michael Economou
Date: 2026-10-19
"""

import logging

import pytest
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QPushButton

from clickbus.config import BUTTON_LABEL, GAP, WINDOW_TITLE
from clickbus.domain import Event
from clickbus.ui.main_window import MainWindow
from clickbus.utils.events import Publisher

pytestmark = pytest.mark.gui


@pytest.fixture
def publisher():
    return Publisher()


@pytest.fixture
def window(qtbot, publisher):
    win = MainWindow(publisher)
    qtbot.addWidget(win)
    return win


class TestMainWindowLayout:
    """Test the widgets the window is built from."""

    def test_title_and_label(self, window):
        assert window.windowTitle() == WINDOW_TITLE
        assert window.button.text() == BUTTON_LABEL

    def test_single_button_with_gap_margins(self, window):
        buttons = window.findChildren(QPushButton)
        assert buttons == [window.button]

        margins = window.centralWidget().layout().contentsMargins()
        assert (margins.left(), margins.top(), margins.right(), margins.bottom()) == (
            GAP,
            GAP,
            GAP,
            GAP,
        )

    def test_window_shares_the_publisher(self, window, publisher):
        assert window.publisher is publisher


class TestMainWindowClick:
    """Test that clicking publishes Event.TEST."""

    def test_click_notifies_test_subscribers(self, window, publisher):
        received = []
        publisher.subscribe(Event.TEST, received.append)

        window.button.click()

        assert received == [Event.TEST]

    def test_click_does_not_reach_nothing_subscribers(self, window, publisher):
        received = []
        publisher.subscribe(Event.NOTHING, received.append)

        window.button.click()

        assert received == []

    def test_click_without_subscribers_is_harmless(self, window, caplog):
        with caplog.at_level(logging.INFO):
            window.button.click()

        assert "Input handler called..." in caplog.text

    def test_mouse_click_on_shown_window(self, qtbot, window, publisher):
        received = []
        publisher.subscribe(Event.TEST, received.append)

        window.show()
        qtbot.waitExposed(window)
        qtbot.mouseClick(window.button, Qt.LeftButton)

        assert received == [Event.TEST]
