"""Centralized constants module for rmenu.

This module serves as the single source of truth for all shared constants
across the rmenu codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from rmenu.constants import SECTION_DESKTOP_ENTRY
"""

from typing import Final

# =============================================================================
# Desktop Entry format constants
# =============================================================================

# Section headers
SECTION_DESKTOP_ENTRY: Final[str] = "Desktop Entry"
SECTION_ACTION_PREFIX: Final[str] = "Desktop Action "

# Value syntax
LIST_SEPARATOR: Final[str] = ";"
LOCALE_OPEN: Final[str] = "["
LOCALE_CLOSE: Final[str] = "]"
DEFAULT_LOCALE_TAG: Final[str] = ""
COMMENT_PREFIX: Final[str] = "#"
KEY_VALUE_SEPARATOR: Final[str] = "="
BOOLEAN_TRUE_VALUES: Final[frozenset[str]] = frozenset({"true", "1"})
BOOLEAN_FALSE_VALUES: Final[frozenset[str]] = frozenset({"false", "0"})

# Entry type launched by the catalog
TYPE_APPLICATION: Final[str] = "Application"

DESKTOP_FILE_SUFFIX: Final[str] = ".desktop"

# =============================================================================
# XDG directory constants
# =============================================================================

XDG_DATA_HOME_ENV: Final[str] = "XDG_DATA_HOME"
XDG_DATA_DIRS_ENV: Final[str] = "XDG_DATA_DIRS"
DEFAULT_XDG_DATA_DIRS: Final[tuple[str, ...]] = (
    "/usr/local/share",
    "/usr/share",
)
APPLICATIONS_SUBDIR: Final[str] = "applications"

# Environment variables consulted for the process locale, in priority order
LOCALE_ENV_VARS: Final[tuple[str, ...]] = ("LC_ALL", "LC_MESSAGES", "LANG")

# =============================================================================
# Configuration constants
# =============================================================================

# Application-specific subdirectory under ~/.config
DEFAULT_CONFIG_SUBDIR: Final[str] = "rmenu"
CONFIG_DIR_NAME: Final[str] = ".config"
CONFIG_DIR_ENV: Final[str] = "RMENU_CONFIG_DIR"

APP_CONFIG_FILE_NAME: Final[str] = "app.conf"
COLORS_CONFIG_FILE_NAME: Final[str] = "colors.conf"

SECTION_WINDOW: Final[str] = "window"
SECTION_COLORS: Final[str] = "colors"

KEY_POSITION: Final[str] = "position"
KEY_FONT_NAME: Final[str] = "font_name"
KEY_BACKGROUND: Final[str] = "background"
KEY_TEXT: Final[str] = "text"
KEY_HIGHLIGHT: Final[str] = "highlight"
KEY_FONT_SIZE: Final[str] = "font_size"

DEFAULT_POSITION: Final[tuple[float, float]] = (100.0, 100.0)
DEFAULT_FONT_NAME: Final[str] = "Ubuntu-M"
DEFAULT_BACKGROUND: Final[tuple[float, float, float]] = (0.1, 0.1, 0.1)
DEFAULT_TEXT_COLOR: Final[tuple[float, float, float]] = (1.0, 1.0, 1.0)
DEFAULT_HIGHLIGHT: Final[tuple[float, float, float]] = (0.3, 0.3, 0.7)
DEFAULT_FONT_SIZE: Final[float] = 16.0

# Separator used for tuple values in settings files
SETTINGS_TUPLE_SEPARATOR: Final[str] = ","
INLINE_COMMENT_MARKER: Final[str] = "  #"

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# Logging constants
# =============================================================================

LOGGER_ROOT_NAME: Final[str] = "rmenu"
LOG_DIR_ENV: Final[str] = "RMENU_LOG_DIR"
LOG_LEVEL_ENV: Final[str] = "LOG_LEVEL"
LOG_FILE_NAME: Final[str] = "rmenu.log"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(funcName)s:%(lineno)d] - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# CLI constants
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_INTERRUPTED: Final[int] = 130
