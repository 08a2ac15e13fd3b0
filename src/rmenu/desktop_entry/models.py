"""Typed records for desktop entry files.

A Document is an ordered mapping from section header to one of three
section variants:

    EntrySection   the single ``[Desktop Entry]`` section
    ActionSection  a ``[Desktop Action <ID>]`` section
    OpaqueSection  anything else, kept as raw key/value text

Records are built once per parse and are not mutated afterwards. Every
record checks its values on construction, so any record that exists can
be serialized and read back unchanged.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum

from rmenu.constants import SECTION_ACTION_PREFIX, SECTION_DESKTOP_ENTRY
from rmenu.desktop_entry.fields import ACTION_FIELDS, ENTRY_FIELDS
from rmenu.desktop_entry.locale import LocaleMap
from rmenu.desktop_entry.validation import (
    check_pair,
    has_line_break,
    validate_record,
)
from rmenu.exceptions import (
    DuplicateMainEntryError,
    MissingActionIdError,
    UnclassifiableSectionError,
)


class SectionKind(Enum):
    """Section classification by header text."""

    ENTRY = "entry"
    ACTION = "action"
    OPAQUE = "opaque"


def classify_section(header: str) -> SectionKind:
    """Classify a section by its header text.

    Raises:
        UnclassifiableSectionError: If the header is empty or blank

    """
    if not header.strip():
        raise UnclassifiableSectionError(header)
    if header == SECTION_DESKTOP_ENTRY:
        return SectionKind.ENTRY
    if header.startswith(SECTION_ACTION_PREFIX):
        return SectionKind.ACTION
    return SectionKind.OPAQUE


def action_header(action_id: str) -> str:
    """Return the section header for an action ID."""
    return f"{SECTION_ACTION_PREFIX}{action_id}"


@dataclass(frozen=True)
class EntryRecord:
    """The ``[Desktop Entry]`` section.

    Optional fields are None when the key is absent. ``extra`` holds every
    key outside the standard set (vendor ``X-`` keys, unknown casings),
    byte-for-byte.
    """

    entry_type: str
    name: LocaleMap
    version: str | None = None
    generic_name: LocaleMap | None = None
    no_display: bool | None = None
    comment: LocaleMap | None = None
    icon: LocaleMap | None = None
    hidden: bool | None = None
    only_show_in: list[str] | None = None
    not_show_in: list[str] | None = None
    dbus_activatable: bool | None = None
    try_exec: str | None = None
    exec: str | None = None
    path: str | None = None
    terminal: bool | None = None
    actions: list[str] | None = None
    mime_type: list[str] | None = None
    categories: list[str] | None = None
    implements: list[str] | None = None
    keywords: LocaleMap | None = None
    startup_notify: bool | None = None
    startup_wm_class: str | None = None
    url: str | None = None
    prefers_non_default_gpu: bool | None = None
    extra: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        validate_record(ENTRY_FIELDS, self, SECTION_DESKTOP_ENTRY)


@dataclass(frozen=True)
class ActionRecord:
    """A ``[Desktop Action <ID>]`` section body.

    The action ID belongs to the section header and is carried by
    ActionSection.
    """

    name: LocaleMap
    icon: LocaleMap | None = None
    exec: str | None = None
    extra: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        validate_record(ACTION_FIELDS, self)


@dataclass(frozen=True)
class EntrySection:
    entry: EntryRecord
    kind = SectionKind.ENTRY


@dataclass(frozen=True)
class ActionSection:
    action_id: str
    action: ActionRecord
    kind = SectionKind.ACTION


@dataclass(frozen=True)
class OpaqueSection:
    values: dict[str, str]
    kind = SectionKind.OPAQUE

    def __post_init__(self) -> None:
        for key, value in self.values.items():
            check_pair(key, value)


Section = EntrySection | ActionSection | OpaqueSection


def _check_placement(
    header: str,
    section: Section,
    has_entry: bool,  # noqa: FBT001
) -> None:
    """Check that header is the one section would be read back under."""
    if has_line_break(header):
        raise UnclassifiableSectionError(header, "header has a line break")
    kind = classify_section(header)

    if isinstance(section, EntrySection) and has_entry:
        raise DuplicateMainEntryError(header)
    if isinstance(section, ActionSection):
        if not section.action_id:
            raise MissingActionIdError(header)
        if header != action_header(section.action_id):
            raise UnclassifiableSectionError(
                header, f"does not name action {section.action_id!r}"
            )
    elif section.kind is not kind:
        raise UnclassifiableSectionError(
            header, f"holds an {section.kind.value} section"
        )


class Document(Mapping[str, Section]):
    """Ordered, read-only mapping of section header to section.

    Every header must classify as the kind of section it holds, action
    headers must name their action ID and at most one main entry may
    exist, so serializing a document always reads back to an equal one.

    Raises:
        DuplicateMainEntryError: If more than one EntrySection is given
        MissingActionIdError: If an ActionSection has an empty action ID
        UnclassifiableSectionError: If a header is blank, has a line break
            or does not match its section

    """

    def __init__(self, sections: Mapping[str, Section] | None = None) -> None:
        self._sections: dict[str, Section] = dict(sections or {})
        has_entry = False
        for header, section in self._sections.items():
            _check_placement(header, section, has_entry)
            has_entry = has_entry or isinstance(section, EntrySection)

    def __getitem__(self, header: str) -> Section:
        return self._sections[header]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return list(self._sections.items()) == list(other._sections.items())

    def __repr__(self) -> str:
        return f"Document({self._sections!r})"

    @property
    def entry(self) -> EntryRecord | None:
        """The main entry, or None if the file has no [Desktop Entry]."""
        for section in self._sections.values():
            if isinstance(section, EntrySection):
                return section.entry
        return None

    def actions(self) -> list[tuple[str, ActionRecord]]:
        """Return ``(action_id, record)`` pairs in file order."""
        return [
            (section.action_id, section.action)
            for section in self._sections.values()
            if isinstance(section, ActionSection)
        ]

    def opaque(self) -> list[tuple[str, dict[str, str]]]:
        """Return ``(header, values)`` pairs of uninterpreted sections."""
        return [
            (header, section.values)
            for header, section in self._sections.items()
            if isinstance(section, OpaqueSection)
        ]
