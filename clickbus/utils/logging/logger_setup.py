"""
Module: logger_setup.py

Author: Michael Economou
Date: 2026-10-19

logger_setup.py
This module provides the ConfigureLogger class for setting up logging in the application.
The root logger is configured to log INFO and higher to the console, the configured file
level to a per-session log file, and DEBUG+ to a debug log file (optional).
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from clickbus import config
from clickbus.utils.logging.logger_file_helper import add_file_handler
from clickbus.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """
    Configures application-wide logging on the root logger.

    Handlers are only installed when the root logger has none yet, so
    constructing this more than once is harmless.
    """

    def __init__(
        self,
        log_name: str = "app",
        log_dir: str = "logs",
        console_enabled: bool | None = None,
        file_enabled: bool | None = None,
        debug_enabled: bool | None = None,
    ):
        """
        Initializes and configures the logger.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str): Directory to store log files.
            console_enabled (bool, optional): Override config.LOG_TO_CONSOLE.
            file_enabled (bool, optional): Override config.LOG_TO_FILE.
            debug_enabled (bool, optional): Override config.LOG_DEBUG_FILE_ENABLED.
        """
        if console_enabled is None:
            console_enabled = config.LOG_TO_CONSOLE
        if file_enabled is None:
            file_enabled = config.LOG_TO_FILE
        if debug_enabled is None:
            debug_enabled = config.LOG_DEBUG_FILE_ENABLED

        console_level = getattr(logging, config.LOG_CONSOLE_LEVEL, logging.INFO)
        file_level = getattr(logging, config.LOG_FILE_LEVEL, logging.INFO)

        self.log_file_path: str | None = None
        self.debug_file_path: str | None = None

        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels

        if self.logger.hasHandlers():
            return

        # Unique file names per session
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if console_enabled:
            self._setup_console_handler(console_level)

        if file_enabled:
            self.log_file_path = os.path.join(log_dir, f"{log_name}_{timestamp}.log")
            add_file_handler(
                logger=self.logger,
                log_path=self.log_file_path,
                level=file_level,
                max_bytes=config.LOG_FILE_MAX_BYTES,
                backup_count=config.LOG_FILE_BACKUP_COUNT,
            )

        if debug_enabled:
            self.debug_file_path = os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log")
            add_file_handler(
                logger=self.logger,
                log_path=self.debug_file_path,
                level=logging.DEBUG,
                max_bytes=config.LOG_DEBUG_FILE_MAX_BYTES,
                backup_count=config.LOG_DEBUG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int):
        """Sets up console handler with UTF-8-safe formatting and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")  # type: ignore[union-attr]

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)
