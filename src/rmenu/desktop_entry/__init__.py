"""Desktop Entry format engine.

Parses and serializes freedesktop ``.desktop`` files into typed records
while keeping vendor keys and unknown sections intact.
"""

from rmenu.desktop_entry.codecs import (
    decode_bool,
    decode_list,
    encode_bool,
    encode_list,
)
from rmenu.desktop_entry.document import (
    build_document,
    classify_section,
    parse_document,
    serialize_document,
)
from rmenu.desktop_entry.files import (
    dumps,
    load_desktop_file,
    loads,
    save_desktop_file,
)
from rmenu.desktop_entry.locale import (
    LocaleMap,
    extract_localized,
    fold_localized,
    resolve_localized,
)
from rmenu.desktop_entry.models import (
    ActionRecord,
    ActionSection,
    Document,
    EntryRecord,
    EntrySection,
    OpaqueSection,
    Section,
    SectionKind,
)
from rmenu.desktop_entry.reader import read_sections, write_sections
from rmenu.desktop_entry.schema import (
    action_header,
    parse_action,
    parse_entry,
    serialize_action,
    serialize_entry,
)

__all__ = [
    "ActionRecord",
    "ActionSection",
    "Document",
    "EntryRecord",
    "EntrySection",
    "LocaleMap",
    "OpaqueSection",
    "Section",
    "SectionKind",
    "action_header",
    "build_document",
    "classify_section",
    "decode_bool",
    "decode_list",
    "dumps",
    "encode_bool",
    "encode_list",
    "extract_localized",
    "fold_localized",
    "load_desktop_file",
    "loads",
    "parse_action",
    "parse_document",
    "parse_entry",
    "read_sections",
    "resolve_localized",
    "save_desktop_file",
    "serialize_action",
    "serialize_document",
    "serialize_entry",
    "write_sections",
]
