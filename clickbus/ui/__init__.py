"""UI layer - Qt widgets and the application wrapper.

Author: Michael Economou
Date: 2026-10-19
"""

from clickbus.ui.application import LowUi
from clickbus.ui.main_window import MainWindow

__all__ = ["LowUi", "MainWindow"]
