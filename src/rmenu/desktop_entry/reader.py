"""Line-oriented reader and writer for desktop entry text.

The reader turns text into ordered ``(header, key/value mapping)`` pairs
and knows nothing about section types. Within one section a repeated key
overwrites the earlier value (last write wins). Repeated headers are kept
as separate pairs so document aggregation can reject them.
"""

from collections.abc import Iterable, Mapping

from rmenu.constants import COMMENT_PREFIX, KEY_VALUE_SEPARATOR
from rmenu.exceptions import MalformedLineError
from rmenu.logger import get_logger

logger = get_logger(__name__)

_BOM = "\ufeff"


def read_sections(text: str) -> list[tuple[str, dict[str, str]]]:
    """Split desktop entry text into sections.

    Args:
        text: Whole file content

    Returns:
        Sections in file order with their key/value mappings

    Raises:
        MalformedLineError: For key/value lines before the first header and
            for lines that are neither header, comment, blank nor key=value

    """
    sections: list[tuple[str, dict[str, str]]] = []
    current: dict[str, str] | None = None

    lines = text.removeprefix(_BOM).splitlines()
    for line_number, raw_line in enumerate(lines, 1):
        stripped = raw_line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        if stripped.startswith("[") and stripped.endswith("]"):
            current = {}
            sections.append((stripped[1:-1], current))
            continue

        key, sep, value = raw_line.partition(KEY_VALUE_SEPARATOR)
        key = key.strip()
        if not sep or not key or current is None:
            raise MalformedLineError(line_number, raw_line)

        if key in current:
            logger.debug(
                "Line %d: duplicate key %s overrides earlier value",
                line_number,
                key,
            )
        current[key] = value.lstrip()

    return sections


def write_sections(sections: Iterable[tuple[str, Mapping[str, str]]]) -> str:
    """Render sections as desktop entry text.

    Sections are separated by a blank line and the text ends with a
    newline; no sections render as an empty string.
    """
    blocks = []
    for header, values in sections:
        lines = [f"[{header}]"]
        lines.extend(f"{key}={value}" for key, value in values.items())
        blocks.append("\n".join(lines) + "\n")
    return "\n".join(blocks)
