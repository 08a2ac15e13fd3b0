"""Configuration management - settings store and path utilities.

This package provides:
- SettingsStore: AppConfig/ColorsConfig persistence (from settings.py)
- Paths: Path constants and utilities (from paths.py)
- Parser utilities: INI parser helpers (from parser.py)
"""

from rmenu.config.parser import CommentAwareConfigParser
from rmenu.config.paths import Paths
from rmenu.config.settings import AppConfig, ColorsConfig, SettingsStore

__all__ = [
    "AppConfig",
    "ColorsConfig",
    "CommentAwareConfigParser",
    "Paths",
    "SettingsStore",
]
