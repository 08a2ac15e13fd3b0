"""Reading and writing desktop entry documents as text and files."""

from pathlib import Path

from rmenu.desktop_entry.document import parse_document, serialize_document
from rmenu.desktop_entry.models import Document
from rmenu.desktop_entry.reader import read_sections, write_sections
from rmenu.exceptions import DesktopFileReadError
from rmenu.logger import get_logger

logger = get_logger(__name__)


def loads(text: str) -> Document:
    """Parse desktop entry text into a document.

    Raises:
        FormatError: If the text or any section is invalid

    """
    return parse_document(read_sections(text))


def dumps(doc: Document) -> str:
    """Serialize a document to desktop entry text."""
    return write_sections(serialize_document(doc))


def load_desktop_file(path: Path | str) -> Document:
    """Load and parse a desktop file.

    Args:
        path: Path to a .desktop file

    Returns:
        Parsed document

    Raises:
        DesktopFileReadError: If the file cannot be read or decoded
        FormatError: If the content is not a valid desktop entry file

    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DesktopFileReadError(path, str(e)) from e

    logger.debug("Loaded desktop file %s", path)
    return loads(text)


def save_desktop_file(path: Path | str, doc: Document) -> Path:
    """Serialize a document and write it to path.

    Parent directories are created as needed.

    Returns:
        The path written

    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(doc), encoding="utf-8")
    logger.debug("Saved desktop file %s", path)
    return path
