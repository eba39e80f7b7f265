"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def field_out_of_range(value: str, reason: str) -> Diagnostic:
        """Date/time fields cannot form a Python datetime.

        Args:
            value: repr-style rendering of the DateTimeValue
            reason: Message from the datetime constructor

        Returns:
            Diagnostic for CONVERSION_FIELD_OUT_OF_RANGE
        """
        msg = f"Cannot convert {value} to datetime: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_FIELD_OUT_OF_RANGE,
            message=msg,
            hint=(
                "The parser does not check calendar validity; leap seconds, "
                "day-of-month overflow and year 0000 are rejected by datetime"
            ),
        )

    @staticmethod
    def offset_out_of_range(name: str, minutes: int) -> Diagnostic:
        """Zone offset is outside the range datetime.timezone accepts.

        Args:
            name: Zone name (e.g. "GMT+99:00")
            minutes: Signed offset in minutes

        Returns:
            Diagnostic for CONVERSION_OFFSET_OUT_OF_RANGE
        """
        msg = f"Zone offset {name} ({minutes} minutes) is outside -23:59..+23:59"
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_OFFSET_OUT_OF_RANGE,
            message=msg,
            hint="Use ZoneOffset.minutes directly for offsets of 24 hours or more",
        )
