"""Main logger module providing public API functions.

- setup_logging(): Attach console/file handlers to the rmenu root logger
- get_logger(): Get a module logger (never configures handlers)
- clear_logger_state(): Clear global logger state for testing
"""

import logging
from pathlib import Path

from rmenu.constants import LOGGER_ROOT_NAME
from rmenu.logger.config import load_log_settings, normalize_level
from rmenu.logger.handlers import setup_root_logger
from rmenu.logger.state import get_state

# Silent until setup_logging() attaches real handlers.
logging.getLogger(LOGGER_ROOT_NAME).addHandler(logging.NullHandler())


def setup_logging(
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = False,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure the rmenu root logger once per process.

    Called by the CLI entry point. Subsequent calls only update the
    console level so `--log-level` can be applied after startup.

    Args:
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
            (default: ~/.config/rmenu/logs/rmenu.log)
        enable_file_logging: Whether to enable file logging

    Returns:
        The rmenu root logger

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    cfg_console, cfg_file, cfg_path = load_log_settings()
    console_level = normalize_level(console_level or cfg_console)

    with state.lock:
        if not state.root_initialized:
            setup_root_logger(
                state,
                console_level,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )
        else:
            for handler in state.handlers:
                if type(handler) is logging.StreamHandler:
                    handler.setLevel(getattr(logging, console_level))

    return logging.getLogger(LOGGER_ROOT_NAME)


def get_logger(name: str = LOGGER_ROOT_NAME) -> logging.Logger:
    """Get a logger in the rmenu hierarchy.

    Best Practice:
        Use __name__ as the logger name for proper hierarchical logging:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Parsed %d sections", count)  # %-style only

    Args:
        name: Logger name, typically __name__ for module loggers

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    """
    return logging.getLogger(name)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Closes and removes every handler attached by setup_logging() and
    resets the initialization flag so the next test starts clean.

    Warning:
        This function is intended for testing only.

    """
    state = get_state()
    with state.lock:
        root_logger = logging.getLogger(LOGGER_ROOT_NAME)
        for handler in state.handlers:
            handler.close()
            root_logger.removeHandler(handler)
        state.handlers = []
        state.root_initialized = False
        root_logger.propagate = True
