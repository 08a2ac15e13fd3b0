"""Main CLI entry point for rmenu.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to specialized command
handlers and CLI components.
"""

import sys

from rmenu.cli import CLIRunner
from rmenu.constants import EXIT_FAILURE, EXIT_INTERRUPTED
from rmenu.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with its status code."""
    try:
        code = CLIRunner().run()
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(EXIT_INTERRUPTED)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(EXIT_FAILURE)
    sys.exit(code)


if __name__ == "__main__":
    main()
