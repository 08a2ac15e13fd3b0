"""Check command handler: validate desktop files."""

from argparse import Namespace

from rmenu.cli.commands.base import BaseCommandHandler
from rmenu.constants import EXIT_FAILURE, EXIT_SUCCESS
from rmenu.desktop_entry import load_desktop_file
from rmenu.exceptions import RMenuError
from rmenu.logger import get_logger

logger = get_logger(__name__)


class CheckHandler(BaseCommandHandler):
    """Handler for the check command.

    Every file is checked even after a failure; the exit code reports
    whether any file failed.
    """

    def execute(self, args: Namespace) -> int:
        failed = 0
        for path in args.files:
            try:
                load_desktop_file(path)
            except RMenuError as e:
                failed += 1
                logger.debug("Check failed for %s: %s", path, e)
                print(f"{path}: {e}")
            else:
                print(f"{path}: OK")

        logger.info("%d of %d files failed", failed, len(args.files))
        return EXIT_FAILURE if failed else EXIT_SUCCESS
