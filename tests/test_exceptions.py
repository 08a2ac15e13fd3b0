"""Tests for exception classes."""

from pathlib import Path

import pytest

from rmenu.exceptions import (
    DesktopFileReadError,
    DuplicateMainEntryError,
    DuplicateSectionError,
    FormatError,
    InvalidBooleanError,
    InvalidFieldValueError,
    InvalidRecordError,
    MalformedLineError,
    MissingActionIdError,
    MissingRequiredFieldError,
    RMenuError,
    SettingsError,
    UnclassifiableSectionError,
)


class TestRMenuError:
    """Test RMenuError base class."""

    def test_basic_initialization(self):
        """Test basic error initialization."""
        error = RMenuError("Test error")
        assert error.message == "Test error"
        assert error.target is None
        assert str(error) == "Operation failed: Test error"

    def test_initialization_with_target(self):
        """Test initialization with target parameter."""
        error = RMenuError("Broken", target="foo.desktop")
        assert error.target == "foo.desktop"
        assert str(error) == "Operation failed for 'foo.desktop': Broken"


class TestFormatErrors:
    """Test the desktop entry format error family."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidBooleanError("yes"),
            MissingRequiredFieldError("Name"),
            InvalidFieldValueError("Terminal", "yes"),
            MissingActionIdError(),
            DuplicateMainEntryError(),
            DuplicateSectionError("X-A"),
            UnclassifiableSectionError(""),
            MalformedLineError(3, "junk"),
            InvalidRecordError("Exec", "value contains a line break"),
        ],
    )
    def test_all_are_format_errors(self, error):
        assert isinstance(error, FormatError)
        assert isinstance(error, RMenuError)
        assert str(error).startswith("Invalid desktop entry")

    def test_invalid_boolean(self):
        error = InvalidBooleanError("yes")
        assert error.text == "yes"
        assert str(error) == (
            "Invalid desktop entry: invalid boolean value 'yes'"
        )

    def test_missing_required_field(self):
        error = MissingRequiredFieldError("Name", "Desktop Entry")
        assert error.field == "Name"
        assert str(error) == (
            "Invalid desktop entry for 'Desktop Entry': "
            "missing required field 'Name'"
        )

    def test_invalid_field_value(self):
        error = InvalidFieldValueError("Terminal", "yes", "Desktop Entry")
        assert error.key == "Terminal"
        assert error.raw_text == "yes"
        assert "'yes'" in str(error)
        assert "'Terminal'" in str(error)

    def test_duplicate_section_targets_header(self):
        error = DuplicateSectionError("Desktop Action A")
        assert error.header == "Desktop Action A"
        assert error.target == "Desktop Action A"

    def test_invalid_record(self):
        error = InvalidRecordError(
            "MimeType", "empty list item", "Desktop Entry"
        )
        assert error.key == "MimeType"
        assert error.reason == "empty list item"
        assert str(error) == (
            "Invalid desktop entry for 'Desktop Entry': "
            "MimeType: empty list item"
        )

    def test_unclassifiable_with_reason(self):
        error = UnclassifiableSectionError("X-A", "holds an entry section")
        assert error.reason == "holds an entry section"
        assert str(error).endswith(": holds an entry section")

    def test_malformed_line(self):
        error = MalformedLineError(7, "oops")
        assert error.line_number == 7
        assert error.line == "oops"
        assert "line 7" in str(error)


class TestOtherErrors:
    """Test errors outside the format family."""

    def test_desktop_file_read_error(self):
        error = DesktopFileReadError(Path("/x/a.desktop"), "No such file")
        assert error.path == Path("/x/a.desktop")
        assert not isinstance(error, FormatError)
        assert str(error) == (
            "Cannot read desktop file for '/x/a.desktop': No such file"
        )

    def test_settings_error(self):
        error = SettingsError("bad float", target="font_size")
        assert str(error) == "Invalid settings for 'font_size': bad float"
