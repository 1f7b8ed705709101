"""Custom exceptions for the stream search client.

Every failure that should end a run is raised as one of these exceptions and
converted into a single diagnostic line by the entry point.

Exception Hierarchy:
    StreamSearchError (base)
    ├── ConfigError
    ├── NetworkError
    ├── ProtocolError
    └── DecodeError
"""

from __future__ import annotations


class StreamSearchError(Exception):
    """Base exception for all stream search errors.

    Attributes:
        message: Human-readable error description.
        details: Optional additional context about the error.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional additional context about the error.
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigError(StreamSearchError):
    """Raised when a required setting is missing or invalid."""

    def __init__(self, message: str, variable: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            variable: Name of the offending environment variable.
        """
        super().__init__(message)
        self.variable = variable

    @classmethod
    def missing(cls, variable: str, description: str) -> ConfigError:
        """Build the error for an unset environment variable."""
        return cls(
            f"{description} missing. Please set the {variable} environment variable.",
            variable=variable,
        )


class NetworkError(StreamSearchError):
    """Raised when a request cannot be completed."""

    def __init__(
        self,
        message: str,
        reason: str | None = None,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            reason: Underlying transport error text.
            status_code: HTTP status code if a response was received.
            url: The URL that failed.
        """
        details: list[str] = []
        if reason:
            details.append(reason)
        if status_code is not None:
            details.append(f"Status: {status_code}")
        super().__init__(message, " | ".join(details) if details else None)
        self.status_code = status_code
        self.url = url


class ProtocolError(StreamSearchError):
    """Raised when a response does not have the expected shape."""

    pass


class DecodeError(StreamSearchError):
    """Raised when a stream record is missing a field or has the wrong type."""

    def __init__(self, field_name: str, expected: str) -> None:
        """Initialize the exception.

        Args:
            field_name: Name of the offending field.
            expected: Description of the expected type.
        """
        super().__init__(
            "Failed to decode stream record",
            f"field '{field_name}' must be {expected}",
        )
        self.field_name = field_name
        self.expected = expected
