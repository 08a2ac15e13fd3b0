"""Scalar value codecs for desktop entry fields.

Booleans accept ``true``/``1`` and ``false``/``0`` in any case and are
always written as ``true``/``false``.

Lists are semicolon separated. Reading drops every empty fragment, so a
trailing or doubled separator never yields an empty item; writing always
ends a non-empty list with a separator::

    >>> decode_list("AudioVideo;Video;;")
    ['AudioVideo', 'Video']
    >>> encode_list(["AudioVideo", "Video"])
    'AudioVideo;Video;'
"""

from collections.abc import Iterable

from rmenu.constants import (
    BOOLEAN_FALSE_VALUES,
    BOOLEAN_TRUE_VALUES,
    LIST_SEPARATOR,
)
from rmenu.exceptions import InvalidBooleanError


def decode_bool(text: str) -> bool:
    """Decode a boolean value.

    Args:
        text: Raw value from the file

    Returns:
        The decoded boolean

    Raises:
        InvalidBooleanError: If text is not true/false/1/0

    """
    lowered = text.lower()
    if lowered in BOOLEAN_TRUE_VALUES:
        return True
    if lowered in BOOLEAN_FALSE_VALUES:
        return False
    raise InvalidBooleanError(text)


def encode_bool(value: bool) -> str:  # noqa: FBT001
    """Encode a boolean as ``true`` or ``false``."""
    return "true" if value else "false"


def decode_list(text: str) -> list[str]:
    """Split a semicolon list, dropping empty fragments. Never fails."""
    return [item for item in text.split(LIST_SEPARATOR) if item]


def encode_list(items: Iterable[str]) -> str:
    """Join items with semicolons and a trailing separator.

    An empty list is written as an empty string.
    """
    joined = LIST_SEPARATOR.join(items)
    if joined and not joined.endswith(LIST_SEPARATOR):
        joined += LIST_SEPARATOR
    return joined
