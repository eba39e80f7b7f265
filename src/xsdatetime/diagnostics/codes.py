"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for the conversion layer.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = ["Diagnostic", "DiagnosticCode"]

# C0 control characters and DEL, escaped when rendering so that values
# copied from untrusted input cannot forge extra log lines.
_CONTROL_ESCAPES: dict[int, str] = {
    **{code: f"\\x{code:02x}" for code in range(0x20)},
    0x7F: "\\x7f",
    0x0A: "\\n",
    0x0D: "\\r",
    0x09: "\\t",
}


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Conversion errors (DateTimeValue -> datetime)
    """

    # Conversion errors (1000-1999)
    CONVERSION_FIELD_OUT_OF_RANGE = 1001
    CONVERSION_OFFSET_OUT_OF_RANGE = 1002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[CONVERSION_FIELD_OUT_OF_RANGE]: Cannot convert ... second=60
              = help: Python datetime does not represent leap seconds
        """
        message = self.message.translate(_CONTROL_ESCAPES)
        parts = [f"{self.severity}[{self.code.name}]: {message}"]
        if self.hint:
            parts.append(f"  = help: {self.hint.translate(_CONTROL_ESCAPES)}")
        return "\n".join(parts)
