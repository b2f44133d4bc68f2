"""Module: event.py

Author: Michael Economou
Date: 2026-10-19

Event tags published by the UI.
"""

from enum import Enum


class Event(Enum):
    """Kinds of notification the window can publish.

    Members carry no payload. NOTHING exists as a second tag but the
    application never publishes it.
    """

    TEST = "test"
    NOTHING = "nothing"

    def __str__(self) -> str:
        return f"Event.{self.name}"
