"""Logger state management module.

This module provides the global logger state singleton used by rmenu.
Only the `rmenu` root logger ever receives handlers, so initialization
must happen exactly once per process.
"""

import logging
import threading


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock for singleton initialization
        root_initialized: Whether root logger handlers have been attached
        handlers: Handlers currently attached to the root logger

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.handlers: list[logging.Handler] = []


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton.

    Returns:
        The global logger state instance

    """
    return _state
