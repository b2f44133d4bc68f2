"""Module: clickbus.config.app

Author: Michael Economou
Date: 2026-10-19

Application-level configuration: app info, window settings, logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_ID = "com.turgu.test"
APP_NAME = "clickbus"
APP_VERSION = "0.1.0"
APP_AUTHOR = "Michael Economou"

# =====================================
# WINDOW
# =====================================

WINDOW_TITLE = "Qt Trials"
BUTTON_LABEL = "This is a Qt Test"

# Margin around the button on every side (pixels)
GAP = 24

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 1_000_000  # 1MB per file
LOG_FILE_BACKUP_COUNT = 3

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_MAX_BYTES = 2_000_000
LOG_DEBUG_FILE_BACKUP_COUNT = 2

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
