"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-19

Global pytest configuration and fixtures for the clickbus test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os
import sys

# Add project root to sys.path so 'main' and 'clickbus' can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Headless by default; a developer can still export another platform
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip local-only tests on CI."""
    _ = session
    _ = config

    if "CI" in os.environ or "GITHUB_ACTIONS" in os.environ:
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")
        for item in items:
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication for all GUI tests."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])

    yield app


@pytest.fixture(autouse=True)
def qt_cleanup(qapp):
    """Close leftover top-level widgets between tests."""
    yield

    from PyQt5.QtCore import QCoreApplication
    from PyQt5.QtWidgets import QApplication

    QCoreApplication.processEvents()
    for widget in QApplication.topLevelWidgets():
        try:
            widget.close()
            widget.deleteLater()
        except RuntimeError:
            pass
    QCoreApplication.processEvents()


@pytest.fixture
def recorder():
    """Callable that records every event it receives, plus a label per call."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def make(self, label):
            def listener(event):
                self.calls.append((label, event))

            return listener

    return Recorder()
