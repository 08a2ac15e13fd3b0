"""Logging utilities for rmenu.

Usage:
    >>> from rmenu.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Loaded %s", path)  # Use %-style formatting

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers (only the `rmenu` root
       logger has handlers, attached by setup_logging())
    4. Never use f-strings in log calls
    5. Library modules never call setup_logging(); only entry points do
"""

from rmenu.logger.config import load_log_settings
from rmenu.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from rmenu.logger.handlers import ConfigurationError
from rmenu.logger.logger import (
    clear_logger_state,
    get_logger,
    setup_logging,
)
from rmenu.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "get_logger",
    "get_state",
    "load_log_settings",
    "setup_logging",
]
