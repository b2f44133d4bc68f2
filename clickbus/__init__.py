"""clickbus - a single-button Qt window wired to an in-process publisher.

Author: Michael Economou
Date: 2026-10-19
"""

from clickbus.config.app import APP_VERSION as __version__

__all__ = ["__version__"]
