"""xsdatetime exception hierarchy with structured diagnostics.

parse() never raises. These exceptions belong to the explicit conversion
path (DateTimeValue.to_datetime, ZoneOffset.to_tzinfo) only.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["DateTimeConversionError", "XSDateTimeError"]


class XSDateTimeError(Exception):
    """Base exception for all xsdatetime errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize XSDateTimeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DateTimeConversionError(XSDateTimeError, ValueError):
    """A parsed value cannot be represented by Python's datetime types.

    Subclasses ValueError so callers already catching datetime's own
    ValueError keep working.

    Attributes:
        value: The object that failed to convert (DateTimeValue or ZoneOffset)
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        """Initialize DateTimeConversionError.

        Args:
            message: Error message string OR Diagnostic object
            value: The object that failed to convert
        """
        super().__init__(message)
        self.value = value
