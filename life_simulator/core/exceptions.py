"""Custom exceptions used throughout the life_simulator package."""

from typing import Any, Optional


def _printable(character: str) -> str:
    """Show bytes that failed UTF-8 decoding as \\xNN instead of a lone surrogate."""
    if "\udc80" <= character <= "\udcff":
        return f"\\x{ord(character) - 0xDC00:02x}"
    return character


class LifeSimulatorError(Exception):
    """Base exception for all simulator errors.

    All simulator-specific exceptions should inherit from this class.
    This allows catching all simulator errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(LifeSimulatorError):
    """Raised when there's an error in configuration.

    This includes:
    - Invalid settings value
    - Malformed board file content
    - Configuration validation failures
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class EmptyBoardError(ConfigurationError):
    """Raised when a board source contains no characters at all."""

    def __init__(self, details: Optional[dict[str, Any]] = None):
        super().__init__("board", "board source is empty", details=details)


class InconsistentColumnCountError(ConfigurationError):
    """Raised when a board line disagrees with the established column count.

    Examples:
    - "##\\n#\\n" (second line is one column short)
    """

    def __init__(
        self,
        expected: int,
        actual: int,
        line: int,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details.update({"expected": expected, "actual": actual, "line": line})
        message = (
            f"inconsistent column count detected on line {line}: "
            f"expected {expected}, got {actual}"
        )
        super().__init__("board", message, details=details)
        self.expected = expected
        self.actual = actual
        self.line = line


class InvalidCharacterError(ConfigurationError):
    """Raised when a board line contains something other than the two markers."""

    def __init__(
        self,
        character: str,
        line: int,
        column: int,
        details: Optional[dict[str, Any]] = None,
    ):
        shown = _printable(character)
        details = details or {}
        details.update({"character": shown, "line": line, "column": column})
        message = f'invalid char "{shown}" detected at line {line}, column {column}'
        super().__init__("board", message, details=details)
        self.character = character
        self.line = line
        self.column = column


class BoardDimensionError(ConfigurationError):
    """Raised when a board's height or width falls outside the supported range."""

    def __init__(
        self,
        height: int,
        width: int,
        limit: int,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details.update({"height": height, "width": width, "limit": limit})
        message = (
            f"board dimensions {height}x{width} out of range "
            f"(rows and columns must be between 1 and {limit})"
        )
        super().__init__("board", message, details=details)
        self.height = height
        self.width = width


class BoardFileNotFoundError(LifeSimulatorError):
    """Raised when the board configuration file cannot be opened."""

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["path"] = path
        if reason is None:
            message = f'Configuration file "{path}" does not exist!'
        else:
            details["reason"] = reason
            message = f'Configuration file "{path}" cannot be opened: {reason}'
        super().__init__(message=message, details=details)
        self.path = path
        self.reason = reason
