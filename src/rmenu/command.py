"""Launcher command records consumed by menu front ends."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """A selectable menu item.

    Attributes:
        key: Stable identifier (desktop-file ID, ``id:action`` for actions)
        display: Text shown to the user and matched by filters
        command: Command line handed to the operating system

    """

    key: str
    display: str
    command: str

    @classmethod
    def from_string(cls, text: str) -> "Command":
        """Create a command whose key, display and command are all text."""
        return cls(text, text, text)

    def __str__(self) -> str:
        return self.display

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on the display text."""
        return query.lower() in self.display.lower()
