"""Tests for console formatters."""

import logging

import pytest

from rmenu.logger import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)


def make_record(level, msg="hello %s", args=("world",)):
    return logging.LogRecord(
        "rmenu.test", level, __file__, 1, msg, args, None
    )


def test_simple_formatter_shows_message_only():
    record = make_record(logging.WARNING)
    assert SimpleConsoleFormatter().format(record) == "hello world"


def test_colored_formatter_restores_levelname():
    record = make_record(logging.ERROR)
    text = ColoredConsoleFormatter("%(levelname)s %(message)s").format(record)

    assert text == "\033[31mERROR\033[0m hello world"
    assert record.levelname == "ERROR"


@pytest.mark.parametrize(
    ("level", "structured"),
    [
        (logging.INFO, False),
        (logging.WARNING, True),
        (logging.DEBUG, True),
    ],
)
def test_hybrid_formatter(level, structured):
    formatter = HybridConsoleFormatter("%(name)s - %(message)s")
    text = formatter.format(make_record(level))

    assert text.endswith("hello world")
    assert ("rmenu.test - " in text) is structured
