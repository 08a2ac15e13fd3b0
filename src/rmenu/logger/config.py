"""Default settings for the logging system.

Environment Variable Overrides:
    RMENU_LOG_DIR: Directory for the log file. Used by the test suite to
        keep test logs out of ~/.config/rmenu/logs.
    LOG_LEVEL: Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
"""

import logging
import os
from pathlib import Path

from rmenu.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV,
    LOG_FILE_NAME,
    LOG_LEVEL_ENV,
)


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Returns:
        Tuple of (console_level, file_level, log_path) where:
            - console_level: Console level (default: WARNING, or LOG_LEVEL)
            - file_level: File level (default: INFO)
            - log_path: Path to log file (overridable via RMENU_LOG_DIR)

    """
    console_level = normalize_level(
        os.getenv(LOG_LEVEL_ENV, DEFAULT_CONSOLE_LOG_LEVEL)
    )

    env_log_dir = os.getenv(LOG_DIR_ENV)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / CONFIG_DIR_NAME
            / DEFAULT_CONFIG_SUBDIR
            / "logs"
            / LOG_FILE_NAME
        )

    return console_level, DEFAULT_LOG_LEVEL, log_path


def normalize_level(level: str) -> str:
    """Return an upper-case level name, falling back to WARNING."""
    name = level.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_CONSOLE_LOG_LEVEL
