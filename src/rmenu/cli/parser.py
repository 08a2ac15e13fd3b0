"""CLI argument parser for rmenu.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path


class CLIParser:
    """Command-line argument parser for rmenu."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments without the program name (defaults to sys.argv)

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self.build_parser()
        return parser.parse_args(argv)

    def build_parser(self) -> argparse.ArgumentParser:
        """Create the main parser with global options and subcommands."""
        parser = argparse.ArgumentParser(
            prog="rmenu",
            description="Desktop Entry (.desktop) file tool and launcher menu",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s show /usr/share/applications/firefox.desktop
  %(prog)s show org.gnome.Nautilus.desktop --locale de_DE
  %(prog)s check ~/.local/share/applications/*.desktop
  %(prog)s format foo.desktop -o foo.normalized.desktop
  %(prog)s list term
  %(prog)s config --reset
            """,
        )
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show rmenu version and exit",
        )
        parser.add_argument(
            "--log-level",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            type=str.upper,
            default=None,
            help="Console log level (default: WARNING)",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )
        self._add_show_command(subparsers)
        self._add_check_command(subparsers)
        self._add_format_command(subparsers)
        self._add_list_command(subparsers)
        self._add_config_command(subparsers)

    def _add_show_command(self, subparsers) -> None:  # noqa: ANN001
        show_parser = subparsers.add_parser(
            "show", help="Parse a desktop file and print it as JSON"
        )
        show_parser.add_argument("file", type=Path, help="Desktop file")
        show_parser.add_argument(
            "--locale",
            help="Also print display values resolved for this locale",
        )

    def _add_check_command(self, subparsers) -> None:  # noqa: ANN001
        check_parser = subparsers.add_parser(
            "check", help="Validate one or more desktop files"
        )
        check_parser.add_argument(
            "files", type=Path, nargs="+", help="Desktop files"
        )

    def _add_format_command(self, subparsers) -> None:  # noqa: ANN001
        format_parser = subparsers.add_parser(
            "format", help="Re-serialize a desktop file in canonical order"
        )
        format_parser.add_argument("file", type=Path, help="Desktop file")
        format_parser.add_argument(
            "-o",
            "--output",
            type=Path,
            help="Write to this file instead of stdout",
        )

    def _add_list_command(self, subparsers) -> None:  # noqa: ANN001
        list_parser = subparsers.add_parser(
            "list", help="List launchable commands from installed apps"
        )
        list_parser.add_argument(
            "query", nargs="?", default="", help="Case-insensitive filter"
        )
        list_parser.add_argument("--locale", help="Locale for display names")
        list_parser.add_argument(
            "--dir",
            dest="dirs",
            type=Path,
            action="append",
            help="Application directory to scan (repeatable; "
            "defaults to the XDG application directories)",
        )

    def _add_config_command(self, subparsers) -> None:  # noqa: ANN001
        config_parser = subparsers.add_parser(
            "config", help="Show launcher settings"
        )
        config_parser.add_argument(
            "--reset",
            action="store_true",
            help="Write default settings to both settings files",
        )
