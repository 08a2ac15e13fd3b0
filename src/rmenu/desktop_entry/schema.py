"""Binding between raw section mappings and typed records.

Each record type declares its keys once, in emission order. Parsing runs
in two passes over a private copy of the raw mapping:

1. every localizable key is extracted by the locale folder, so that
   ``Name[de]`` never reaches the scalar pass;
2. every remaining declared key is decoded by its codec.

What is left after both passes becomes the record's ``extra`` mapping.
Serialization walks the same table, then appends ``extra`` in lexical
key order, so output is reproducible for identical records.
"""

from typing import Any

from rmenu.constants import SECTION_DESKTOP_ENTRY
from rmenu.desktop_entry.codecs import (
    decode_bool,
    decode_list,
    encode_bool,
    encode_list,
)
from rmenu.desktop_entry.fields import (
    ACTION_FIELDS,
    ENTRY_FIELDS,
    FieldKind,
    FieldSpec,
)
from rmenu.desktop_entry.locale import extract_localized, fold_localized
from rmenu.desktop_entry.models import (
    ActionRecord,
    EntryRecord,
    action_header,
)
from rmenu.exceptions import (
    InvalidBooleanError,
    InvalidFieldValueError,
    MissingActionIdError,
    MissingRequiredFieldError,
)
from rmenu.logger import get_logger

logger = get_logger(__name__)


def _check_required(
    spec: FieldSpec, values: dict[str, Any], header: str
) -> None:
    if spec.required and values.get(spec.attr) is None:
        logger.debug("Section %s lacks required key %s", header, spec.key)
        raise MissingRequiredFieldError(spec.key, header)


def _decode(spec: FieldSpec, text: str, header: str) -> Any:  # noqa: ANN401
    if spec.kind is FieldKind.BOOLEAN:
        try:
            return decode_bool(text)
        except InvalidBooleanError as e:
            logger.debug(
                "Section %s has invalid boolean %s=%r", header, spec.key, text
            )
            raise InvalidFieldValueError(spec.key, text, header) from e
    if spec.kind is FieldKind.LIST:
        return decode_list(text)
    return text


def _encode(
    spec: FieldSpec,
    value: Any,  # noqa: ANN401
) -> list[tuple[str, str]]:
    if spec.kind is FieldKind.LOCALIZED:
        return fold_localized(spec.key, value)
    if spec.kind is FieldKind.BOOLEAN:
        return [(spec.key, encode_bool(value))]
    if spec.kind is FieldKind.LIST:
        return [(spec.key, encode_list(value))]
    return [(spec.key, value)]


def bind_fields(
    fields: tuple[FieldSpec, ...], raw: dict[str, str], header: str
) -> tuple[dict[str, Any], dict[str, str]]:
    """Bind raw section values against a field table.

    Args:
        fields: Declared keys of the record type
        raw: Section key/value mapping (not modified)
        header: Section header, used in error messages

    Returns:
        Tuple of (decoded values by attribute name, leftover raw keys)

    Raises:
        MissingRequiredFieldError: If a required key is absent
        InvalidFieldValueError: If a boolean key cannot be decoded

    """
    remaining = dict(raw)
    values: dict[str, Any] = {}

    localized = [spec for spec in fields if spec.kind is FieldKind.LOCALIZED]
    scalars = [spec for spec in fields if spec.kind is not FieldKind.LOCALIZED]

    for spec in localized:
        values[spec.attr] = extract_localized(spec.key, remaining)
    for spec in localized:
        _check_required(spec, values, header)

    for spec in scalars:
        text = remaining.pop(spec.key, None)
        if text is not None:
            values[spec.attr] = _decode(spec, text, header)
    for spec in scalars:
        _check_required(spec, values, header)

    return values, remaining


def unbind_fields(
    fields: tuple[FieldSpec, ...], record: EntryRecord | ActionRecord
) -> dict[str, str]:
    """Serialize a record into raw key/value pairs in declared order."""
    out: dict[str, str] = {}
    for spec in fields:
        value = getattr(record, spec.attr)
        if value is None:
            continue
        out.update(_encode(spec, value))
    for key in sorted(record.extra):
        out[key] = record.extra[key]
    return out


def parse_entry(
    raw: dict[str, str], header: str = SECTION_DESKTOP_ENTRY
) -> EntryRecord:
    """Bind a ``[Desktop Entry]`` section.

    Raises:
        MissingRequiredFieldError: If Name (checked first) or Type is absent
        InvalidFieldValueError: If a boolean key is malformed

    """
    values, extra = bind_fields(ENTRY_FIELDS, raw, header)
    return EntryRecord(**values, extra=extra)


def serialize_entry(entry: EntryRecord) -> dict[str, str]:
    """Serialize an entry, Type first and extra keys last."""
    return unbind_fields(ENTRY_FIELDS, entry)


def parse_action(
    raw: dict[str, str], action_id: str | None
) -> tuple[str, ActionRecord]:
    """Bind a ``[Desktop Action <ID>]`` section body.

    Args:
        raw: Section key/value mapping (not modified)
        action_id: ID taken from the section header

    Returns:
        Tuple of (action_id, bound record)

    Raises:
        MissingActionIdError: If no action ID was supplied
        MissingRequiredFieldError: If Name is absent

    """
    if not action_id:
        raise MissingActionIdError(action_header(action_id or ""))
    values, extra = bind_fields(ACTION_FIELDS, raw, action_header(action_id))
    return action_id, ActionRecord(**values, extra=extra)


def serialize_action(action: ActionRecord) -> dict[str, str]:
    """Serialize an action body; the header comes from action_header()."""
    return unbind_fields(ACTION_FIELDS, action)
