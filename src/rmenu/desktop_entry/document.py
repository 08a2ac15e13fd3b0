"""Document aggregation over classified sections.

Classification is purely lexical and happens before any binding: the
header alone decides whether a section is the main entry, an action, or
an opaque passthrough. Opaque sections read from text never fail.
"""

from collections.abc import Iterable, Mapping

from rmenu.constants import SECTION_ACTION_PREFIX, SECTION_DESKTOP_ENTRY
from rmenu.desktop_entry.models import (
    ActionSection,
    Document,
    EntrySection,
    OpaqueSection,
    Section,
    SectionKind,
    action_header,
    classify_section,
)
from rmenu.desktop_entry.schema import (
    parse_action,
    parse_entry,
    serialize_action,
    serialize_entry,
)
from rmenu.exceptions import DuplicateMainEntryError, DuplicateSectionError
from rmenu.logger import get_logger

logger = get_logger(__name__)

RawSections = Iterable[tuple[str, Mapping[str, str]]]


def _bind_section(header: str, raw: Mapping[str, str]) -> Section:
    kind = classify_section(header)
    if kind is SectionKind.ENTRY:
        return EntrySection(parse_entry(dict(raw), header))
    if kind is SectionKind.ACTION:
        action_id = header[len(SECTION_ACTION_PREFIX) :]
        action_id, action = parse_action(dict(raw), action_id)
        return ActionSection(action_id, action)
    return OpaqueSection(dict(raw))


def parse_document(sections: RawSections) -> Document:
    """Build a document from ordered ``(header, key/value mapping)`` pairs.

    Args:
        sections: Sections in file order, as produced by read_sections()

    Returns:
        Fully bound document

    Raises:
        DuplicateMainEntryError: If two [Desktop Entry] sections exist
        DuplicateSectionError: If any other header repeats
        FormatError: If any section fails to bind

    """
    bound: dict[str, Section] = {}
    for header, raw in sections:
        if header in bound:
            if header == SECTION_DESKTOP_ENTRY:
                raise DuplicateMainEntryError(header)
            raise DuplicateSectionError(header)
        bound[header] = _bind_section(header, raw)

    logger.debug("Parsed document with %d sections", len(bound))
    return Document(bound)


def serialize_section(section: Section) -> dict[str, str]:
    """Serialize one section body."""
    if isinstance(section, EntrySection):
        return serialize_entry(section.entry)
    if isinstance(section, ActionSection):
        return serialize_action(section.action)
    return dict(section.values)


def serialize_document(doc: Document) -> list[tuple[str, dict[str, str]]]:
    """Serialize a document into ordered ``(header, mapping)`` pairs.

    Action headers are re-derived from the action ID.
    """
    out = []
    for header, section in doc.items():
        if isinstance(section, ActionSection):
            header = action_header(section.action_id)  # noqa: PLW2901
        out.append((header, serialize_section(section)))
    return out


def build_document(
    entry: EntrySection | None = None,
    actions: Iterable[ActionSection] = (),
    opaque: Mapping[str, Mapping[str, str]] | None = None,
) -> Document:
    """Assemble a document from typed sections.

    The main entry comes first, then actions in the given order, then
    opaque sections. Useful for tools that generate desktop files rather
    than read them.

    Raises:
        DuplicateSectionError: If two sections share a header
        MissingActionIdError: If an action has an empty action ID
        UnclassifiableSectionError: If an opaque header would classify as
            an entry or action

    """
    sections: dict[str, Section] = {}
    if entry is not None:
        sections[SECTION_DESKTOP_ENTRY] = entry
    for action in actions:
        header = action_header(action.action_id)
        if header in sections:
            raise DuplicateSectionError(header)
        sections[header] = action
    for header, values in (opaque or {}).items():
        if header in sections:
            raise DuplicateSectionError(header)
        sections[header] = OpaqueSection(dict(values))
    return Document(sections)
