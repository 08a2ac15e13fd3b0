"""Discovery of installed applications as launcher commands.

Scans the XDG application directories, parses every ``.desktop`` file
with the format engine and turns visible entries and their actions into
Command records. Files that fail to read or parse are skipped with a
warning.
"""

import os
from collections.abc import Iterable
from pathlib import Path

from rmenu.command import Command
from rmenu.constants import (
    APPLICATIONS_SUBDIR,
    DEFAULT_XDG_DATA_DIRS,
    DESKTOP_FILE_SUFFIX,
    TYPE_APPLICATION,
    XDG_DATA_DIRS_ENV,
    XDG_DATA_HOME_ENV,
)
from rmenu.desktop_entry import Document, load_desktop_file, resolve_localized
from rmenu.exceptions import RMenuError
from rmenu.logger import get_logger

logger = get_logger(__name__)


def application_dirs() -> list[Path]:
    """Return XDG application directories in lookup priority order.

    ``$XDG_DATA_HOME/applications`` first, then every
    ``$XDG_DATA_DIRS/applications``.
    """
    data_home = os.environ.get(XDG_DATA_HOME_ENV) or str(
        Path.home() / ".local" / "share"
    )
    data_dirs = os.environ.get(XDG_DATA_DIRS_ENV) or ":".join(
        DEFAULT_XDG_DATA_DIRS
    )

    dirs: list[Path] = []
    for base in [data_home, *data_dirs.split(":")]:
        if not base:
            continue
        path = Path(base).expanduser() / APPLICATIONS_SUBDIR
        if path not in dirs:
            dirs.append(path)
    return dirs


def desktop_file_id(path: Path, base_dir: Path) -> str:
    """Derive the desktop-file ID of path relative to base_dir.

    >>> desktop_file_id(Path("/a/kde/konsole.desktop"), Path("/a"))
    'kde-konsole'
    """
    relative = path.relative_to(base_dir).as_posix()
    return relative.removesuffix(DESKTOP_FILE_SUFFIX).replace("/", "-")


def commands_from_document(
    doc: Document, key: str, locale: str | None = None
) -> list[Command]:
    """Build launcher commands for a parsed desktop file.

    Args:
        doc: Parsed desktop file
        key: Desktop-file ID used as the command key
        locale: Locale for display names (defaults to the process locale)

    Returns:
        The entry's command followed by one command per action; empty
        for hidden, NoDisplay or non-Application entries

    """
    entry = doc.entry
    if entry is None or entry.entry_type != TYPE_APPLICATION:
        return []
    if entry.hidden or entry.no_display:
        return []

    name = resolve_localized(entry.name, locale) or key
    commands = []
    if entry.exec:
        commands.append(Command(key, name, entry.exec))

    for action_id, action in doc.actions():
        if not action.exec:
            continue
        action_name = resolve_localized(action.name, locale) or action_id
        commands.append(
            Command(
                f"{key}:{action_id}", f"{name}: {action_name}", action.exec
            )
        )
    return commands


class DesktopCatalog:
    """Launchable commands collected from desktop files."""

    def __init__(
        self,
        dirs: Iterable[Path] | None = None,
        locale: str | None = None,
    ) -> None:
        """Initialize catalog.

        Args:
            dirs: Application directories in priority order
                (defaults to application_dirs())
            locale: Locale for display names

        """
        self.dirs = list(dirs) if dirs is not None else application_dirs()
        self.locale = locale
        self.commands: list[Command] = []
        self.skipped: dict[Path, str] = {}

    def _iter_desktop_files(self) -> Iterable[tuple[str, Path]]:
        for base_dir in self.dirs:
            if not base_dir.is_dir():
                continue
            for path in sorted(base_dir.rglob(f"*{DESKTOP_FILE_SUFFIX}")):
                yield desktop_file_id(path, base_dir), path

    def scan(self) -> list[Command]:
        """Parse every desktop file and rebuild the command list.

        The first file that loads for a desktop-file ID shadows later ones
        with the same ID. A file that fails to load does not, so a broken
        user copy leaves the system file visible.

        Returns:
            Commands sorted by display text

        """
        commands: list[Command] = []
        seen: set[str] = set()
        self.skipped = {}
        for file_id, path in self._iter_desktop_files():
            if file_id in seen:
                logger.debug("Shadowed desktop file %s", path)
                continue
            try:
                doc = load_desktop_file(path)
            except RMenuError as e:
                logger.warning("Skipping %s: %s", path, e)
                self.skipped[path] = str(e)
                continue
            seen.add(file_id)
            commands.extend(commands_from_document(doc, file_id, self.locale))

        commands.sort(key=lambda command: command.display.lower())
        self.commands = commands
        logger.info(
            "Found %d commands (%d files skipped)",
            len(commands),
            len(self.skipped),
        )
        return commands

    def filter(self, query: str) -> list[Command]:
        """Return commands whose display text contains query."""
        if not query:
            return list(self.commands)
        return [
            command for command in self.commands if command.matches(query)
        ]
