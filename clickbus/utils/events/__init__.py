"""Module: __init__.py.

Author: Michael Economou
Date: 2026-10-19

Infrastructure - Event System.

Pure Python publish/subscribe implementation for decoupling event sources
from their handlers. Has no Qt dependency.
"""

from clickbus.utils.events.publisher import Publisher, Subscriber

__all__ = ["Publisher", "Subscriber"]
