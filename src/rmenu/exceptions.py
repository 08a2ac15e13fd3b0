"""Exception classes for rmenu operations."""

from pathlib import Path


class RMenuError(Exception):
    """Base exception for rmenu operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed, usually the
                section header or file the error belongs to.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class FormatError(RMenuError):
    """Raised when desktop entry sections cannot be turned into a document."""

    error_prefix = "Invalid desktop entry"


class InvalidBooleanError(FormatError):
    """Raised when a boolean value is not one of true/false/1/0."""

    def __init__(self, text: str, target: str | None = None) -> None:
        super().__init__(f"invalid boolean value {text!r}", target)
        self.text = text


class MissingRequiredFieldError(FormatError):
    """Raised when a mandatory key such as Name is absent."""

    def __init__(self, field: str, target: str | None = None) -> None:
        super().__init__(f"missing required field {field!r}", target)
        self.field = field


class InvalidFieldValueError(FormatError):
    """Raised when a declared key carries a value that cannot be decoded."""

    def __init__(
        self, key: str, raw_text: str, target: str | None = None
    ) -> None:
        super().__init__(f"invalid value {raw_text!r} for key {key!r}", target)
        self.key = key
        self.raw_text = raw_text


class MissingActionIdError(FormatError):
    """Raised when an action section is bound without an action ID."""

    def __init__(self, target: str | None = None) -> None:
        super().__init__("action section has no action ID", target)


class DuplicateMainEntryError(FormatError):
    """Raised when more than one [Desktop Entry] section is present."""

    def __init__(self, target: str | None = None) -> None:
        super().__init__("more than one main entry section", target)


class DuplicateSectionError(FormatError):
    """Raised when a section header appears more than once."""

    def __init__(self, header: str) -> None:
        super().__init__("section header appears more than once", header)
        self.header = header


class UnclassifiableSectionError(FormatError):
    """Raised when a section header cannot be classified at all.

    Also raised when a section sits under a header that classifies as a
    different kind of section.
    """

    def __init__(self, header: str, reason: str | None = None) -> None:
        message = f"cannot classify section header {header!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.header = header
        self.reason = reason


class InvalidRecordError(FormatError):
    """Raised when a record holds a value that cannot be written back.

    Covers list items that are empty or contain the separator, values
    with line breaks or leading whitespace, malformed extra keys and
    extra keys that collide with declared keys.
    """

    def __init__(
        self, key: str, reason: str, target: str | None = None
    ) -> None:
        super().__init__(f"{key}: {reason}", target)
        self.key = key
        self.reason = reason


class MalformedLineError(FormatError):
    """Raised by the section reader for lines it cannot interpret."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(f"line {line_number}: cannot parse {line!r}")
        self.line_number = line_number
        self.line = line


class DesktopFileReadError(RMenuError):
    """Raised when a desktop file cannot be read from disk."""

    error_prefix = "Cannot read desktop file"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(reason, str(path))
        self.path = path


class SettingsError(RMenuError):
    """Raised when a settings file holds values that cannot be decoded."""

    error_prefix = "Invalid settings"
