"""Pytest configuration and fixtures for rmenu tests."""

import logging
from pathlib import Path

import pytest

from rmenu.logger import clear_logger_state

FOO_VIEWER = """\
# This is a comment
[Desktop Entry]
Version=1.0
Type=Application
Name=Foo Viewer
Name[de]=Foo Betrachter
Comment=The best viewer for Foo objects available!
TryExec=fooview
Exec=fooview %F
Icon=fooview
MimeType=image/x-foo;
Actions=Gallery;Create;

[Desktop Action Gallery]
Name=Browse Gallery
Exec=fooview --gallery

[Desktop Action Create]
Name=Create a new Foo!
Icon=fooview-new
Exec=fooview --create-new
"""


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep logs, settings and locale lookups away from the real user."""
    monkeypatch.setenv("RMENU_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("RMENU_CONFIG_DIR", str(tmp_path / "config"))
    for var in ("LC_ALL", "LC_MESSAGES", "LANG", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    yield
    clear_logger_state()


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("rmenu"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def foo_viewer_text() -> str:
    """Desktop file from the freedesktop specification example."""
    return FOO_VIEWER


@pytest.fixture
def foo_viewer_file(tmp_path: Path) -> Path:
    """Write the Foo Viewer example to a file."""
    path = tmp_path / "fooview.desktop"
    path.write_text(FOO_VIEWER, encoding="utf-8")
    return path
