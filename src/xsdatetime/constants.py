"""Shared constants for xsdatetime.

Single source of truth for the fixed XML Schema dateTime grammar. Everything
here is built once at import time and never mutated, which is what makes the
parser safe to call from any number of threads.

Constants are grouped by domain:
- Character classes: what counts as whitespace and as a digit
- Field widths: digit counts of each grammar group
- Zone designators: literals used by the time-zone resolver
- Logging: limits for input echoed into log records

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Character classes
    "XML_WHITESPACE",
    "FINAL_LINE_TERMINATORS",
    "ASCII_DIGITS",
    # Field widths
    "YEAR_DIGITS",
    "FIELD_DIGITS",
    "MAX_FRACTION_DIGITS",
    # Zone designators
    "UTC_DESIGNATOR",
    "UTC_ZONE_NAME",
    "CUSTOM_ZONE_PREFIX",
    "ZONE_SIGNS",
    # Logging
    "LOG_REPR_LIMIT",
]

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# Whitespace trimmed from both ends of the input: the regex \s class
# (space, tab, newline, vertical tab, form feed, carriage return).
# str.strip() without arguments would also remove Unicode spaces such as
# U+00A0 and U+2028, which the grammar does not allow.
XML_WHITESPACE: str = " \t\n\x0b\f\r"

# Line terminators outside XML_WHITESPACE that may still end the input once,
# after any trailing whitespace (end-of-input anchor semantics: NEL, LINE
# SEPARATOR, PARAGRAPH SEPARATOR). '\n', '\r' and '\r\n' are whitespace.
FINAL_LINE_TERMINATORS: str = "\u0085\u2028\u2029"

# Digits are ASCII only. str.isdigit() accepts Arabic-Indic and other
# Unicode digits, so membership in this set is used instead.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

# ============================================================================
# FIELD WIDTHS
# ============================================================================

# Years are exactly four digits; 5+ digit years are not supported.
YEAR_DIGITS: int = 4

# Month, day, hour, minute, second and zone hh/mm are exactly two digits.
FIELD_DIGITS: int = 2

# Fractional seconds carry 1 to 3 digits (millisecond precision).
MAX_FRACTION_DIGITS: int = 3

# ============================================================================
# ZONE DESIGNATORS
# ============================================================================

UTC_DESIGNATOR: str = "Z"

UTC_ZONE_NAME: str = "UTC"

# Name prefix for fixed-offset zones, e.g. "GMT-09:00".
CUSTOM_ZONE_PREFIX: str = "GMT"

ZONE_SIGNS: frozenset[str] = frozenset("+-")

# ============================================================================
# LOGGING
# ============================================================================

# Maximum characters of rejected input repeated in DEBUG log records.
# Input is attacker-controlled and may be arbitrarily long.
LOG_REPR_LIMIT: int = 50
