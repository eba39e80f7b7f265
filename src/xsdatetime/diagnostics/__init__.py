"""Diagnostic system for xsdatetime errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import DateTimeConversionError, XSDateTimeError
from .templates import ErrorTemplate

__all__ = [
    "DateTimeConversionError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "XSDateTimeError",
]
