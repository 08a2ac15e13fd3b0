"""Command-line interface for rmenu."""

from rmenu.cli.parser import CLIParser
from rmenu.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
