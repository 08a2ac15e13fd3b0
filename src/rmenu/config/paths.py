"""Path constants and utilities for rmenu configuration."""

import os
from pathlib import Path

from rmenu.constants import (
    APP_CONFIG_FILE_NAME,
    COLORS_CONFIG_FILE_NAME,
    CONFIG_DIR_ENV,
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_BASE_DIR = HOME_DIR / CONFIG_DIR_NAME
    CONFIG_DIR = CONFIG_BASE_DIR / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def config_dir(cls) -> Path:
        """Return the settings directory, honoring RMENU_CONFIG_DIR."""
        override = os.environ.get(CONFIG_DIR_ENV)
        if override:
            return Path(override).expanduser()
        return cls.CONFIG_DIR

    @classmethod
    def app_config_file(cls, config_dir: Path | None = None) -> Path:
        """Return path of the window/font settings file."""
        return (config_dir or cls.config_dir()) / APP_CONFIG_FILE_NAME

    @classmethod
    def colors_config_file(cls, config_dir: Path | None = None) -> Path:
        """Return path of the color theme settings file."""
        return (config_dir or cls.config_dir()) / COLORS_CONFIG_FILE_NAME
