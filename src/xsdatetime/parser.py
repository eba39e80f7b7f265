"""XML Schema dateTime parsing.

- parse() returns DateTimeValue | None
- parse_datetime() returns datetime | None
- Functions NEVER raise: malformed input of any kind yields None

Pipeline:
    recognize -> extract fields -> scale fraction -> resolve zone -> assemble

Supported form:
    '-'? yyyy '-' mm '-' dd 'T' hh ':' mm ':' ss ('.' s{1,3})? ('Z' | ('+'|'-') hh ':' mm)?

    Examples:
        2005-11-14T02:16:38Z
        2005-11-14T02:16:38-09:00
        2005-11-14T02:16:38.125

Known Limitations:
    - Years are exactly four digits; 5+ digit years are rejected.
    - A leading '-' (B.C. year) is accepted but ignored: "-2005-..." yields
      year 2005. The sign is not applied so that existing callers see the
      same year they always have.
    - Fractional seconds are limited to 1-3 digits.
    - Calendar validity (Feb 30, second 60, hour 99) is not checked by
      parse(). parse_datetime() returns None for such values because
      datetime cannot represent them.

Thread-safe. Pure functions; the only shared state is immutable constants.

Python 3.13+.
"""

import logging
from datetime import datetime

from xsdatetime.constants import LOG_REPR_LIMIT
from xsdatetime.diagnostics import DateTimeConversionError
from xsdatetime.fields import fraction_to_milliseconds, to_int_or_zero
from xsdatetime.recognizer import recognize
from xsdatetime.value import DateTimeValue
from xsdatetime.zones import resolve_zone

__all__ = ["parse", "parse_datetime"]

logger = logging.getLogger(__name__)


def _loggable(value: object) -> str:
    """Render input for a log record without running caller code.

    Strings are truncated so hostile input cannot flood logs. Other objects
    are reported by type name only: their __repr__ may be slow or raise.
    """
    if not isinstance(value, str):
        return f"<{type(value).__name__}>"
    if len(value) > LOG_REPR_LIMIT:
        return repr(value[:LOG_REPR_LIMIT]) + "..."
    return repr(value)


def parse(value: str | None) -> DateTimeValue | None:
    """Parse an XML Schema dateTime string.

    Leading and trailing whitespace is ignored.

    Args:
        value: dateTime string (e.g., "2005-11-14T02:16:38Z"). None and
            non-string values are accepted and yield None.

    Returns:
        DateTimeValue on success, None if value is None or does not match
        the dateTime grammar

    Examples:
        >>> result = parse("2005-11-14T02:16:38-09:00")
        >>> result.year, result.month, result.day, result.offset_minutes
        (2005, 11, 14, -540)

        >>> parse("2005-11-14T02:16:38.5").millisecond
        500

        >>> parse("2005-11-14 02:16:38") is None
        True

    Thread Safety:
        Thread-safe. No global state.
    """
    groups = recognize(value)
    if groups is None:
        if value is not None and logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rejected dateTime input %s", _loggable(value))
        return None

    if groups.negative_year and logger.isEnabledFor(logging.DEBUG):
        logger.debug("Ignoring leading '-' on year in %s", _loggable(value))

    return DateTimeValue(
        year=to_int_or_zero(groups.year),
        month=to_int_or_zero(groups.month),
        day=to_int_or_zero(groups.day),
        hour=to_int_or_zero(groups.hour),
        minute=to_int_or_zero(groups.minute),
        second=to_int_or_zero(groups.second),
        millisecond=fraction_to_milliseconds(groups.fraction),
        zone=resolve_zone(groups),
    )


def parse_datetime(value: str | None) -> datetime | None:
    """Parse an XML Schema dateTime string to an aware datetime.

    Same grammar as parse(). Values that match the grammar but that
    datetime cannot represent (second 60, day 31 in a 30-day month,
    year 0000, offsets of 24 hours or more) also yield None.

    Args:
        value: dateTime string, or None

    Returns:
        Timezone-aware datetime, or None

    Example:
        >>> parse_datetime("2005-11-14T02:16:38Z")
        datetime.datetime(2005, 11, 14, 2, 16, 38, tzinfo=datetime.timezone.utc)
    """
    parsed = parse(value)
    if parsed is None:
        return None
    try:
        return parsed.to_datetime()
    except DateTimeConversionError as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("dateTime %s not representable: %s", _loggable(value), e.diagnostic)
        return None
