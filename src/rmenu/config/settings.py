"""Settings store for the launcher front end.

Two independent preference blobs are kept in two human-editable INI
files. Loading never fails: a missing, unreadable or malformed file
yields the built-in defaults for that blob, and the reason is logged.
"""

import configparser
from dataclasses import dataclass
from pathlib import Path

from rmenu.config.parser import CommentAwareConfigParser, file_header
from rmenu.config.paths import Paths
from rmenu.constants import (
    DEFAULT_BACKGROUND,
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_HIGHLIGHT,
    DEFAULT_POSITION,
    DEFAULT_TEXT_COLOR,
    INLINE_COMMENT_MARKER,
    KEY_BACKGROUND,
    KEY_FONT_NAME,
    KEY_FONT_SIZE,
    KEY_HIGHLIGHT,
    KEY_POSITION,
    KEY_TEXT,
    SECTION_COLORS,
    SECTION_WINDOW,
    SETTINGS_TUPLE_SEPARATOR,
)
from rmenu.exceptions import SettingsError
from rmenu.logger import get_logger

logger = get_logger(__name__)

RGB = tuple[float, float, float]


@dataclass(frozen=True)
class AppConfig:
    """Window placement and font."""

    position: tuple[float, float] = DEFAULT_POSITION
    font_name: str = DEFAULT_FONT_NAME


@dataclass(frozen=True)
class ColorsConfig:
    """Color theme; each color is an RGB triple in the 0.0-1.0 range."""

    background: RGB = DEFAULT_BACKGROUND
    text: RGB = DEFAULT_TEXT_COLOR
    highlight: RGB = DEFAULT_HIGHLIGHT
    font_size: float = DEFAULT_FONT_SIZE


def _parse_float(value: str, key: str) -> float:
    try:
        return float(value)
    except ValueError as e:
        msg = f"{key} must be a number, got {value!r}"
        raise SettingsError(msg) from e


def _parse_floats(value: str, count: int, key: str) -> tuple[float, ...]:
    """Parse a comma separated tuple of exactly count floats."""
    parts = [part.strip() for part in value.split(SETTINGS_TUPLE_SEPARATOR)]
    if len(parts) != count:
        msg = f"{key} needs {count} comma separated numbers, got {value!r}"
        raise SettingsError(msg)
    return tuple(_parse_float(part, key) for part in parts)


def _format_floats(values: tuple[float, ...]) -> str:
    return f"{SETTINGS_TUPLE_SEPARATOR} ".join(str(v) for v in values)


def _check_text(value: str, key: str) -> str:
    """Return value if it reads back unchanged from an INI file."""
    if (
        INLINE_COMMENT_MARKER in value
        or value != value.strip()
        or len(value.splitlines()) > 1
    ):
        msg = f"{key} cannot be saved as {value!r}"
        raise SettingsError(msg)
    return value


class SettingsStore:
    """Loads and saves AppConfig and ColorsConfig."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize settings store.

        Args:
            config_dir: Settings directory (defaults to Paths.config_dir())

        """
        self.config_dir = config_dir or Paths.config_dir()
        self.app_file = Paths.app_config_file(self.config_dir)
        self.colors_file = Paths.colors_config_file(self.config_dir)

    def config_paths(self) -> tuple[Path, Path]:
        """Create the settings directory and return (colors, app) paths."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        return self.colors_file, self.app_file

    def _read(
        self, path: Path, section: str
    ) -> CommentAwareConfigParser | None:
        parser = CommentAwareConfigParser()
        try:
            with path.open(encoding="utf-8") as f:
                parser.read_file(f)
        except FileNotFoundError:
            logger.debug("Settings file %s not found, using defaults", path)
            return None
        except (OSError, UnicodeDecodeError, configparser.Error) as e:
            logger.warning("Cannot read %s, using defaults: %s", path, e)
            return None

        if not parser.has_section(section):
            logger.warning(
                "Settings file %s has no [%s] section, using defaults",
                path,
                section,
            )
            return None
        return parser

    def load_app_config(self) -> AppConfig:
        """Load window settings, or defaults on any failure."""
        parser = self._read(self.app_file, SECTION_WINDOW)
        if parser is None:
            return AppConfig()

        try:
            x, y = _parse_floats(
                parser.get(SECTION_WINDOW, KEY_POSITION), 2, KEY_POSITION
            )
            font_name = parser.get(SECTION_WINDOW, KEY_FONT_NAME)
        except (configparser.Error, SettingsError) as e:
            logger.warning("Invalid %s, using defaults: %s", self.app_file, e)
            return AppConfig()

        return AppConfig(position=(x, y), font_name=font_name)

    def load_colors_config(self) -> ColorsConfig:
        """Load color theme, or defaults on any failure."""
        parser = self._read(self.colors_file, SECTION_COLORS)
        if parser is None:
            return ColorsConfig()

        try:
            colors = {
                key: _parse_floats(parser.get(SECTION_COLORS, key), 3, key)
                for key in (KEY_BACKGROUND, KEY_TEXT, KEY_HIGHLIGHT)
            }
            font_size = _parse_float(
                parser.get(SECTION_COLORS, KEY_FONT_SIZE), KEY_FONT_SIZE
            )
        except (configparser.Error, SettingsError) as e:
            logger.warning(
                "Invalid %s, using defaults: %s", self.colors_file, e
            )
            return ColorsConfig()

        return ColorsConfig(
            background=colors[KEY_BACKGROUND],
            text=colors[KEY_TEXT],
            highlight=colors[KEY_HIGHLIGHT],
            font_size=font_size,
        )

    def _write(
        self,
        path: Path,
        title: str,
        section: str,
        values: dict[str, str],
        descriptions: dict[str, str],
    ) -> bool:
        lines = [file_header(title, descriptions), f"[{section}]"]
        lines.extend(f"{key} = {value}" for key, value in values.items())
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as e:
            logger.warning("Cannot save %s: %s", path, e)
            return False
        logger.debug("Saved settings to %s", path)
        return True

    def save_app_config(self, config: AppConfig) -> bool:
        """Save window settings.

        Returns:
            False if the write failed

        Raises:
            SettingsError: If font_name contains an inline comment marker,
                a line break or surrounding whitespace

        """
        font_name = _check_text(config.font_name, KEY_FONT_NAME)
        return self._write(
            self.app_file,
            "window settings",
            SECTION_WINDOW,
            {
                KEY_POSITION: _format_floats(config.position),
                KEY_FONT_NAME: font_name,
            },
            {
                KEY_POSITION: "initial window position as x, y",
                KEY_FONT_NAME: "font family name",
            },
        )

    def save_colors_config(self, config: ColorsConfig) -> bool:
        """Save color theme. Returns False if the write failed."""
        return self._write(
            self.colors_file,
            "color theme",
            SECTION_COLORS,
            {
                KEY_BACKGROUND: _format_floats(config.background),
                KEY_TEXT: _format_floats(config.text),
                KEY_HIGHLIGHT: _format_floats(config.highlight),
                KEY_FONT_SIZE: str(config.font_size),
            },
            {
                KEY_BACKGROUND: "background color as r, g, b (0.0-1.0)",
                KEY_TEXT: "text color as r, g, b (0.0-1.0)",
                KEY_HIGHLIGHT: "selection color as r, g, b (0.0-1.0)",
                KEY_FONT_SIZE: "font size in points",
            },
        )
