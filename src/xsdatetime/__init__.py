"""xsdatetime - Lightweight parser for XML Schema dateTime strings.

Parses the XML Schema dateTime lexical form (a constrained profile of
ISO 8601) into an immutable, calendar-neutral value. Malformed input never
raises; it yields None.

Public API:
    parse - Parse to DateTimeValue | None
    parse_datetime - Parse to aware datetime.datetime | None
    recognize - Grammar match only, returns CapturedGroups | None
    DateTimeValue - Parsed fields (year .. millisecond) plus zone
    ZoneOffset - Resolved offset from UTC in minutes
    UTC - The UTC ZoneOffset
    is_valid_datetime_value - TypeIs guard for parse() results

Exceptions:
    XSDateTimeError - Base exception class
    DateTimeConversionError - DateTimeValue not representable as datetime

Example:
    >>> from xsdatetime import parse
    >>> value = parse("2005-11-14T02:16:38Z")
    >>> value.year, value.hour, value.zone.is_utc
    (2005, 2, True)
"""

from .diagnostics import (
    DateTimeConversionError,
    Diagnostic,
    DiagnosticCode,
    XSDateTimeError,
)
from .guards import is_valid_datetime_value
from .parser import parse, parse_datetime
from .recognizer import CapturedGroups, recognize
from .value import DateTimeValue
from .zones import UTC, ZoneOffset

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("xsdatetime")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# XML Schema Part 2 conformance (dateTime lexical space, section 3.2.7)
__xsd_spec_url__ = "https://www.w3.org/TR/xmlschema-2/#dateTime"

__all__ = [
    "UTC",
    "CapturedGroups",
    "DateTimeConversionError",
    "DateTimeValue",
    "Diagnostic",
    "DiagnosticCode",
    "XSDateTimeError",
    "ZoneOffset",
    "__version__",
    "__xsd_spec_url__",
    "is_valid_datetime_value",
    "parse",
    "parse_datetime",
    "recognize",
]
