"""Application factory - Creates the configured application.

Author: Michael Economou
Date: 2026-10-19
"""

from __future__ import annotations

from collections.abc import Sequence

from clickbus.domain.event import Event
from clickbus.ui.application import LowUi
from clickbus.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def input_handler(event: Event) -> None:
    """Demo subscriber: reports that the click reached the publisher."""
    logger.info("It's working! %s", event)


def create_app(argv: Sequence[str] | None = None) -> LowUi:
    """Create the application with an empty publisher."""
    ui = LowUi(argv)
    logger.info("[boot] Application created")
    return ui


def create_demo_app(argv: Sequence[str] | None = None) -> LowUi:
    """Create the application with input_handler subscribed to Event.TEST."""
    ui = create_app(argv)
    ui.subscribe(input_handler, Event.TEST)
    return ui
