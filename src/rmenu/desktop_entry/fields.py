"""Declared keys of the entry and action records."""

from dataclasses import dataclass
from enum import Enum


class FieldKind(Enum):
    """Value type of a declared key."""

    STRING = "string"
    BOOLEAN = "boolean"
    LIST = "list"
    LOCALIZED = "localized"


@dataclass(frozen=True)
class FieldSpec:
    """One declared key of a record type."""

    attr: str
    key: str
    kind: FieldKind
    required: bool = False


_S = FieldKind.STRING
_B = FieldKind.BOOLEAN
_L = FieldKind.LIST
_LOC = FieldKind.LOCALIZED

# Order follows the "Recognized desktop entry keys" table of the
# freedesktop specification and is the serialization order.
ENTRY_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("entry_type", "Type", _S, required=True),
    FieldSpec("version", "Version", _S),
    FieldSpec("name", "Name", _LOC, required=True),
    FieldSpec("generic_name", "GenericName", _LOC),
    FieldSpec("no_display", "NoDisplay", _B),
    FieldSpec("comment", "Comment", _LOC),
    FieldSpec("icon", "Icon", _LOC),
    FieldSpec("hidden", "Hidden", _B),
    FieldSpec("only_show_in", "OnlyShowIn", _L),
    FieldSpec("not_show_in", "NotShowIn", _L),
    FieldSpec("dbus_activatable", "DBusActivatable", _B),
    FieldSpec("try_exec", "TryExec", _S),
    FieldSpec("exec", "Exec", _S),
    FieldSpec("path", "Path", _S),
    FieldSpec("terminal", "Terminal", _B),
    FieldSpec("actions", "Actions", _L),
    FieldSpec("mime_type", "MimeType", _L),
    FieldSpec("categories", "Categories", _L),
    FieldSpec("implements", "Implements", _L),
    FieldSpec("keywords", "Keywords", _LOC),
    FieldSpec("startup_notify", "StartupNotify", _B),
    FieldSpec("startup_wm_class", "StartupWMClass", _S),
    FieldSpec("url", "URL", _S),
    FieldSpec("prefers_non_default_gpu", "PrefersNonDefaultGPU", _B),
)

ACTION_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("name", "Name", _LOC, required=True),
    FieldSpec("icon", "Icon", _LOC),
    FieldSpec("exec", "Exec", _S),
)
