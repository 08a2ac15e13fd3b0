"""CLI runner for rmenu.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers.
"""

from argparse import Namespace
from collections.abc import Sequence

from rmenu import __version__
from rmenu.cli.commands import (
    BaseCommandHandler,
    CheckHandler,
    ConfigHandler,
    FormatHandler,
    ListHandler,
    ShowHandler,
)
from rmenu.cli.parser import CLIParser
from rmenu.config import SettingsStore
from rmenu.constants import EXIT_FAILURE, EXIT_SUCCESS
from rmenu.exceptions import RMenuError
from rmenu.logger import get_logger, setup_logging

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, settings_store: SettingsStore | None = None) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            settings_store: Settings store injected into handlers
                (defaults to the user's settings directory)

        """
        self.settings_store = settings_store or SettingsStore()
        self.command_handlers: dict[str, BaseCommandHandler] = {
            "show": ShowHandler(self.settings_store),
            "check": CheckHandler(self.settings_store),
            "format": FormatHandler(self.settings_store),
            "list": ListHandler(self.settings_store),
            "config": ConfigHandler(self.settings_store),
        }

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Parses arguments, handles global flags, validates commands,
        and routes to the appropriate handler.

        Args:
            argv: Arguments without the program name (defaults to sys.argv)

        Returns:
            Process exit code

        """
        args = CLIParser().parse_args(argv)
        setup_logging(console_level=args.log_level)

        if args.version:
            print(__version__)
            return EXIT_SUCCESS

        if not args.command:
            print("No command specified. Use --help.")
            return EXIT_FAILURE

        return self._execute_command(args)

    def _execute_command(self, args: Namespace) -> int:
        """Execute the specified command with the appropriate handler.

        Errors raised by the format engine or settings store are reported
        and turned into a failure exit code.
        """
        handler = self.command_handlers.get(args.command)
        if handler is None:
            print(f"Unknown command: {args.command}")
            return EXIT_FAILURE

        logger.debug("Running command %s", args.command)
        try:
            return handler.execute(args)
        except RMenuError as e:
            logger.error("%s", e)
            print(f"Error: {e}")
            return EXIT_FAILURE
