"""Boot layer - Application composition root.

This package is the only place where the publisher, the Qt application and
the demo subscriber are wired together. main.py gets a ready-to-run
application via boot.create_demo_app().

Author: Michael Economou
Date: 2026-10-19
"""

from __future__ import annotations

from clickbus.boot.app_factory import create_app, create_demo_app, input_handler

__all__ = [
    "create_app",
    "create_demo_app",
    "input_handler",
]
