"""Exceptions for asciigrid."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class AsciiGridError(Exception):
    """
    Base exception for all asciigrid errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Input Exceptions
# ---------------------------------------------------------------------------


class InvalidInputError(AsciiGridError, ValueError):
    """
    Raised when table data or layout options have an unusable shape.

    Only structure is rejected. Scalar cell values are always coerced to
    text, and an unknown style silently falls back to ``simple``.

    Attributes:
        field: Name of the offending input (e.g. "headers", "max_column_width")
        value: The rejected value
        reason: Human readable explanation
    """

    def __init__(self, field: str, reason: str, value: Any = None) -> None:
        self.field = field
        self.reason = reason
        self.value = value
        super().__init__(f"Invalid {field}: {reason}")


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ConfigError(AsciiGridError):
    """Raised when a layout options file cannot be loaded."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot load options from '{path}': {message}")
