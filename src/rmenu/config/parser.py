"""INI parser utilities for rmenu settings files."""

import configparser
from datetime import UTC, datetime
from typing import Any

from rmenu.constants import INLINE_COMMENT_MARKER, ISO_DATETIME_FORMAT


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments from configuration values.

    Args:
        value: Configuration value that may contain inline comment

    Returns:
        Value with inline comment removed (anything after '  #')
    """
    if INLINE_COMMENT_MARKER in value:
        return value.split(INLINE_COMMENT_MARKER)[0].strip()
    return value


class CommentAwareConfigParser(configparser.ConfigParser):
    """ConfigParser that strips inline comments when reading values."""

    def __init__(self) -> None:
        super().__init__(interpolation=None)

    def get(  # type: ignore[override]
        self,
        section: str,
        option: str,
        **kwargs: Any,  # noqa: ANN401
    ) -> str:
        """Get a configuration value with inline comments stripped."""
        value = super().get(section, option, **kwargs)
        return _strip_inline_comment(value)


def file_header(title: str, keys: dict[str, str]) -> str:
    """Generate a header comment describing a settings file.

    Args:
        title: Human readable file title
        keys: Key name to one-line description

    Returns:
        Header comment block ending with a blank line
    """
    timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
    lines = [
        f"# rmenu {title}",
        "# Edit freely; invalid values fall back to built-in defaults.",
        "#",
    ]
    lines.extend(
        f"# {key}: {description}" for key, description in keys.items()
    )
    lines.extend(["#", f"# Last updated: {timestamp}", ""])
    return "\n".join(lines)
