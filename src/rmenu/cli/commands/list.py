"""List command handler: show launchable commands."""

from argparse import Namespace

from rmenu.catalog import DesktopCatalog
from rmenu.cli.commands.base import BaseCommandHandler
from rmenu.constants import EXIT_SUCCESS


class ListHandler(BaseCommandHandler):
    """Handler for the list command.

    Prints one tab separated ``key, display, command`` line per match.
    """

    def execute(self, args: Namespace) -> int:
        catalog = DesktopCatalog(dirs=args.dirs, locale=args.locale)
        catalog.scan()
        for command in catalog.filter(args.query):
            print(f"{command.key}\t{command.display}\t{command.command}")
        return EXIT_SUCCESS
