"""Module: clickbus.config

Author: Michael Economou
Date: 2026-10-19

Configuration package for the clickbus application.

- app: Application identity, window settings, logging

All settings are re-exported from this module:
    from clickbus.config import APP_ID, WINDOW_TITLE
"""

from clickbus.config.app import *  # noqa: F401, F403
