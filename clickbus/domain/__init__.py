"""Domain layer - pure types with no Qt or logging dependencies.

Author: Michael Economou
Date: 2026-10-19
"""

from clickbus.domain.event import Event

__all__ = ["Event"]
