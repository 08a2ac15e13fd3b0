"""Tests for launcher command records."""

import pytest

from rmenu.command import Command


def test_from_string():
    command = Command.from_string("firefox")
    assert command == Command("firefox", "firefox", "firefox")


def test_str_is_display_text():
    assert str(Command("k", "Firefox", "firefox %u")) == "Firefox"


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("fire", True),
        ("FIRE", True),
        ("Web Browser", False),
        ("", True),
        ("fox w", False),
    ],
)
def test_matches(query, expected):
    command = Command("firefox", "Firefox", "firefox %u")
    assert command.matches(query) is expected


def test_is_immutable():
    command = Command.from_string("x")
    with pytest.raises(AttributeError):
        command.display = "y"
