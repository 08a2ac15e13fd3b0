"""Tests for record construction checks."""

import pytest

from rmenu.desktop_entry import (
    ActionRecord,
    EntryRecord,
    EntrySection,
    OpaqueSection,
    build_document,
    dumps,
    loads,
)
from rmenu.desktop_entry.validation import has_line_break
from rmenu.exceptions import (
    FormatError,
    InvalidRecordError,
    MissingRequiredFieldError,
)


def make_entry(**fields):
    return EntryRecord(entry_type="Application", name={"": "A"}, **fields)


def dumps_entry(entry):
    return dumps(build_document(entry=EntrySection(entry)))


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("plain", False),
        ("", False),
        ("a\nb", True),
        ("a\rb", True),
        ("trailing\n", True),
        ("a\x85b", True),
        ("a\u2028b", True),
        ("tab\tseparated", False),
    ],
)
def test_has_line_break(text, expected):
    assert has_line_break(text) is expected


class TestListValues:
    """List fields hold only writable items."""

    @pytest.mark.parametrize(
        "items",
        [["a", ""], [""], ["a;b"], ["a\nb"]],
    )
    def test_rejected_items(self, items):
        with pytest.raises(InvalidRecordError) as exc_info:
            make_entry(mime_type=items)
        assert exc_info.value.key == "MimeType"
        assert exc_info.value.target == "Desktop Entry"

    def test_valid_items(self):
        entry = make_entry(categories=["Utility", " Spaced"])
        assert loads(dumps_entry(entry)).entry == entry


class TestTextValues:
    """String and localized values carry no line breaks."""

    @pytest.mark.parametrize(
        "value",
        ["foo\nHidden=true", "foo\r", "foo\u2028bar", " foo", "\tfoo"],
    )
    def test_rejected_exec(self, value):
        with pytest.raises(InvalidRecordError) as exc_info:
            make_entry(exec=value)
        assert exc_info.value.key == "Exec"

    def test_rejected_localized_value(self):
        with pytest.raises(InvalidRecordError) as exc_info:
            make_entry(comment={"": "ok", "de": "zwei\nZeilen"})
        assert exc_info.value.key == "Comment[de]"

    @pytest.mark.parametrize("tag", ["a=b", "x\ny"])
    def test_rejected_locale_tag(self, tag):
        with pytest.raises(InvalidRecordError):
            make_entry(generic_name={tag: "Viewer"})

    def test_action_values(self):
        with pytest.raises(InvalidRecordError):
            ActionRecord(name={"": "New"}, exec="foo\n[Desktop Entry]")

    def test_trailing_whitespace_is_kept(self):
        entry = make_entry(exec="foo  ")
        assert loads(dumps_entry(entry)).entry == entry


class TestExtraKeys:
    """Extra keys cannot stand in for declared keys."""

    @pytest.mark.parametrize(
        "key",
        ["Exec", "Type", "Name", "Name[de]", "Keywords[fr]", "Icon"],
    )
    def test_shadowing_declared_key(self, key):
        with pytest.raises(InvalidRecordError) as exc_info:
            make_entry(exec="real", extra={key: "shadow"})
        assert exc_info.value.key == key

    def test_action_extra_shadowing(self):
        with pytest.raises(InvalidRecordError):
            ActionRecord(name={"": "New"}, extra={"Name[de]": "Neu"})

    @pytest.mark.parametrize(
        "key",
        ["Exec[de]", "exec", "NameX", "X-Name[de]", "Name[]"],
    )
    def test_distinct_keys_are_allowed(self, key):
        entry = make_entry(exec="real", extra={key: "value"})
        assert loads(dumps_entry(entry)).entry == entry

    @pytest.mark.parametrize(
        "key",
        ["", " X-Pad", "X-Pad ", "X=Y", "#X", "X\nY"],
    )
    def test_malformed_keys(self, key):
        with pytest.raises(InvalidRecordError):
            make_entry(extra={key: "value"})

    def test_key_that_reads_as_header(self):
        with pytest.raises(InvalidRecordError):
            make_entry(extra={"[X": "Y]"})

    def test_extra_value_line_break(self):
        with pytest.raises(InvalidRecordError):
            make_entry(extra={"X-Foo": "a\nX-Bar=b"})


class TestRequiredName:
    """The display name must be present."""

    def test_empty_entry_name(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            EntryRecord(entry_type="Application", name={})
        assert exc_info.value.field == "Name"

    def test_empty_action_name(self):
        with pytest.raises(MissingRequiredFieldError):
            ActionRecord(name={})

    def test_missing_type(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            EntryRecord(entry_type=None, name={"": "A"})
        assert exc_info.value.field == "Type"


class TestOpaqueValues:
    """Opaque sections apply the same key/value checks."""

    @pytest.mark.parametrize(
        "values",
        [{"k": "a\nb"}, {"": "v"}, {"k=v": "x"}, {"k": " lead"}],
    )
    def test_rejected(self, values):
        with pytest.raises(InvalidRecordError):
            OpaqueSection(values)

    def test_raw_text_is_allowed(self):
        section = OpaqueSection({"List": "a;;b", "Flag": "maybe"})
        assert section.values == {"List": "a;;b", "Flag": "maybe"}


def test_construction_errors_are_format_errors():
    with pytest.raises(FormatError):
        make_entry(mime_type=[""])


def test_parsed_records_pass_checks(foo_viewer_text):
    doc = loads(foo_viewer_text)
    assert loads(dumps(doc)) == doc
