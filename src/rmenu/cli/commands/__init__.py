"""Command handlers for the rmenu CLI."""

from rmenu.cli.commands.base import BaseCommandHandler
from rmenu.cli.commands.check import CheckHandler
from rmenu.cli.commands.config import ConfigHandler
from rmenu.cli.commands.format import FormatHandler
from rmenu.cli.commands.list import ListHandler
from rmenu.cli.commands.show import ShowHandler

__all__ = [
    "BaseCommandHandler",
    "CheckHandler",
    "ConfigHandler",
    "FormatHandler",
    "ListHandler",
    "ShowHandler",
]
