"""Show command handler: print a parsed desktop file as JSON."""

from argparse import Namespace
from typing import Any

import orjson

from rmenu.cli.commands.base import BaseCommandHandler
from rmenu.constants import EXIT_SUCCESS
from rmenu.desktop_entry import (
    ActionSection,
    Document,
    EntrySection,
    load_desktop_file,
    resolve_localized,
)

_LOCALIZED_ENTRY_FIELDS = (
    "name",
    "generic_name",
    "comment",
    "icon",
    "keywords",
)


def document_to_json(doc: Document, locale: str | None = None) -> bytes:
    """Render a document as indented JSON.

    Records are dataclasses, which orjson serializes natively. When locale
    is given, entry and action sections also carry a ``resolved`` object
    with the best translation of each localizable field.
    """
    sections: list[dict[str, Any]] = []
    for header, section in doc.items():
        item: dict[str, Any] = {"header": header, "kind": section.kind.value}
        if isinstance(section, EntrySection):
            item["entry"] = section.entry
            fields = _LOCALIZED_ENTRY_FIELDS
            record: Any = section.entry
        elif isinstance(section, ActionSection):
            item["action_id"] = section.action_id
            item["action"] = section.action
            fields = ("name", "icon")
            record = section.action
        else:
            item["values"] = section.values
            fields = ()
            record = None

        if locale and record is not None:
            item["resolved"] = {
                field: resolve_localized(getattr(record, field), locale)
                for field in fields
            }
        sections.append(item)

    return orjson.dumps(
        {"sections": sections},
        option=orjson.OPT_INDENT_2,
    )


class ShowHandler(BaseCommandHandler):
    """Handler for the show command."""

    def execute(self, args: Namespace) -> int:
        doc = load_desktop_file(args.file)
        print(document_to_json(doc, args.locale).decode("utf-8"))
        return EXIT_SUCCESS
