"""Rate index error types."""

from __future__ import annotations


class RateIndexError(Exception):
    """Base class for rate index errors."""


class IndexValidationError(RateIndexError, ValueError):
    """Raised when an index is built with a missing or empty field.

    Attributes:
        field: Name of the offending field.
    """

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"Index field '{field}' must be set")
        self.field = field


class IndexLookupError(RateIndexError, LookupError):
    """Raised when no index is registered under the requested name.

    Attributes:
        name: The name that was looked up.
    """

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(message or f"Unknown rate index: {name}")
        self.name = name


class InvalidArgumentError(RateIndexError, ValueError):
    """Raised when a required argument is None or empty.

    Attributes:
        argument: Name of the offending argument.
    """

    def __init__(self, argument: str) -> None:
        super().__init__(f"Argument '{argument}' must not be None or empty")
        self.argument = argument
