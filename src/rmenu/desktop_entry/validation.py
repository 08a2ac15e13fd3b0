"""Checks that keep records writable.

Whatever a record holds must come back unchanged from dumps() followed
by loads(). The reader splits text with str.splitlines(), strips keys
and strips leading whitespace from values, so records reject values
those steps would alter. Anything the reader itself produces passes.
"""

from collections.abc import Mapping
from typing import Any

from rmenu.constants import (
    COMMENT_PREFIX,
    KEY_VALUE_SEPARATOR,
    LIST_SEPARATOR,
    LOCALE_OPEN,
)
from rmenu.desktop_entry.fields import FieldKind, FieldSpec
from rmenu.desktop_entry.locale import locale_key, split_locale_key
from rmenu.exceptions import InvalidRecordError, MissingRequiredFieldError


def has_line_break(text: str) -> bool:
    """Return True if str.splitlines() would split text.

    >>> has_line_break("a\\x85b")
    True
    """
    return len((text + "x").splitlines()) > 1


def check_value(key: str, value: str, target: str | None = None) -> None:
    """Reject a raw value that would not read back unchanged."""
    if has_line_break(value):
        raise InvalidRecordError(key, "value contains a line break", target)
    if value[:1].isspace():
        raise InvalidRecordError(
            key, "value starts with whitespace", target
        )


def check_pair(key: str, value: str, target: str | None = None) -> None:
    """Reject a raw key/value pair that would not read back unchanged."""
    if (
        not key
        or key != key.strip()
        or KEY_VALUE_SEPARATOR in key
        or key.startswith(COMMENT_PREFIX)
        or has_line_break(key)
    ):
        raise InvalidRecordError(key, "not a valid key", target)
    if key.startswith(LOCALE_OPEN) and value.endswith("]"):
        raise InvalidRecordError(key, "line would read as a header", target)
    check_value(key, value, target)


def _check_list(key: str, items: list[str], target: str | None) -> None:
    for item in items:
        if not item:
            raise InvalidRecordError(key, "empty list item", target)
        if LIST_SEPARATOR in item:
            raise InvalidRecordError(
                key, f"list item {item!r} contains {LIST_SEPARATOR!r}", target
            )
        if has_line_break(item):
            raise InvalidRecordError(
                key, "list item contains a line break", target
            )


def _check_locale_map(
    prefix: str, locale_map: Mapping[str, str], target: str | None
) -> None:
    for locale, text in locale_map.items():
        key = locale_key(prefix, locale)
        if split_locale_key(prefix, key) != locale:
            raise InvalidRecordError(
                key, f"invalid locale tag {locale!r}", target
            )
        check_pair(key, text, target)


def _is_missing(spec: FieldSpec, value: Any) -> bool:  # noqa: ANN401
    if spec.kind is FieldKind.LOCALIZED:
        return not value
    return value is None


def validate_record(
    fields: tuple[FieldSpec, ...],
    record: Any,  # noqa: ANN401
    target: str | None = None,
) -> None:
    """Check record values against a field table.

    Args:
        fields: Declared keys of the record type
        record: Entry or action record with an ``extra`` mapping
        target: Section header used in error messages

    Raises:
        MissingRequiredFieldError: If a required field is None or, for
            localized fields, empty (Name is checked before Type)
        InvalidRecordError: If a value, list item, locale tag or extra key
            would not survive serialization

    """
    localized_first = sorted(
        fields, key=lambda spec: spec.kind is not FieldKind.LOCALIZED
    )
    for spec in localized_first:
        if spec.required and _is_missing(spec, getattr(record, spec.attr)):
            raise MissingRequiredFieldError(spec.key, target)

    for spec in fields:
        value = getattr(record, spec.attr)
        if value is None:
            continue
        if spec.kind is FieldKind.LOCALIZED:
            _check_locale_map(spec.key, value, target)
        elif spec.kind is FieldKind.LIST:
            _check_list(spec.key, value, target)
        elif spec.kind is FieldKind.STRING:
            check_value(spec.key, value, target)

    for key, value in record.extra.items():
        check_pair(key, value, target)
        for spec in fields:
            shadowed = (
                key == spec.key
                if spec.kind is not FieldKind.LOCALIZED
                else split_locale_key(spec.key, key) is not None
            )
            if shadowed:
                raise InvalidRecordError(
                    key, f"extra key shadows declared key {spec.key!r}", target
                )
