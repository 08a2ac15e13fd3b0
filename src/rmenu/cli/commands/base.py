"""Base command handler for rmenu CLI commands.

Concrete handlers implement execute() and return a process exit code.
CLIRunner acts as the composition root and injects shared dependencies.
"""

from abc import ABC, abstractmethod
from argparse import Namespace

from rmenu.config import SettingsStore
from rmenu.logger import get_logger

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers."""

    def __init__(self, settings_store: SettingsStore) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            settings_store: Launcher settings persistence

        """
        self.settings_store = settings_store

    @abstractmethod
    def execute(self, args: Namespace) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments

        Returns:
            Process exit code

        """
