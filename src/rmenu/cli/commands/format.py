"""Format command handler: re-serialize a desktop file."""

import sys
from argparse import Namespace

from rmenu.cli.commands.base import BaseCommandHandler
from rmenu.constants import EXIT_SUCCESS
from rmenu.desktop_entry import dumps, load_desktop_file, save_desktop_file
from rmenu.logger import get_logger

logger = get_logger(__name__)


class FormatHandler(BaseCommandHandler):
    """Handler for the format command."""

    def execute(self, args: Namespace) -> int:
        doc = load_desktop_file(args.file)
        if args.output is None:
            sys.stdout.write(dumps(doc))
        else:
            save_desktop_file(args.output, doc)
            logger.info("Wrote %s", args.output)
        return EXIT_SUCCESS
