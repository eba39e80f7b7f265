"""Grammar recognizer for the XML Schema dateTime lexical form.

Grammar (each ``d`` is one ASCII decimal digit)::

    ['-']? dddd '-' dd '-' dd 'T' dd ':' dd ':' dd ('.' d{1,3})?
        ( 'Z' | ('+'|'-') dd ':' dd )?

Whitespace around the whole string is ignored, as is one final NEL
(U+0085), LINE SEPARATOR (U+2028) or PARAGRAPH SEPARATOR (U+2029) after
any trailing whitespace. The match is anchored at
both ends: trailing garbage, internal whitespace and partial matches are all
rejected. Recognition walks the grammar positionally with an immutable
Cursor instead of a regular expression, so it runs in linear time on any
input.

recognize() never raises. A None result is the only failure signal; no
detail about which grammar element failed is produced.

Thread-safe. No mutable module state.
"""

from dataclasses import dataclass

from xsdatetime.constants import (
    FINAL_LINE_TERMINATORS,
    FIELD_DIGITS,
    MAX_FRACTION_DIGITS,
    UTC_DESIGNATOR,
    XML_WHITESPACE,
    YEAR_DIGITS,
    ZONE_SIGNS,
)
from xsdatetime.cursor import Cursor

__all__ = ["CapturedGroups", "recognize"]


@dataclass(frozen=True, slots=True)
class CapturedGroups:
    """Raw lexical groups of a recognized dateTime string.

    Date and time fields are fixed-width digit strings exactly as they
    appeared in the input. ``zone`` is the whole designator (``"Z"`` or
    ``"+hh:mm"``/``"-hh:mm"``); the three ``zone_*`` fields decompose a
    signed designator and are None for ``"Z"`` or when no designator is
    present.

    Attributes:
        negative_year: True if the input carried a leading '-'
        year: 4 digits
        month: 2 digits
        day: 2 digits
        hour: 2 digits
        minute: 2 digits
        second: 2 digits
        fraction: 1-3 fractional-second digits, or None
        zone: Zone designator, or None
        zone_sign: '+' or '-', or None
        zone_hour: 2 digits, or None
        zone_minute: 2 digits, or None
    """

    negative_year: bool
    year: str
    month: str
    day: str
    hour: str
    minute: str
    second: str
    fraction: str | None = None
    zone: str | None = None
    zone_sign: str | None = None
    zone_hour: str | None = None
    zone_minute: str | None = None


def _trim(text: str) -> str:
    """Strip surrounding whitespace plus one final NEL/LS/PS terminator.

    The end-of-input anchor also matches just before a single final line
    terminator, so "...Z \\u2028" is accepted but "...Z\\u2028\\u2028" is not.
    """
    text = text.lstrip(XML_WHITESPACE)
    if text.endswith(tuple(FINAL_LINE_TERMINATORS)):
        text = text[:-1]
    return text.rstrip(XML_WHITESPACE)


def recognize(text: str | None) -> CapturedGroups | None:
    """Match text against the dateTime grammar.

    Args:
        text: Candidate string. None and non-string values are accepted
            and yield None.

    Returns:
        CapturedGroups on a full anchored match, None otherwise

    Example:
        >>> groups = recognize(" 2005-11-14T02:16:38.5-09:00 ")
        >>> groups.year, groups.fraction, groups.zone_sign, groups.zone_hour
        ('2005', '5', '-', '09')
        >>> recognize("2005-11-14 02:16:38") is None
        True
    """
    if not isinstance(text, str):
        return None

    cursor = Cursor(_trim(text), 0)

    negative_year = cursor.peek() == "-"
    if negative_year:
        cursor = cursor.advance()

    # Date and time of day: (width, separator that follows) per field.
    fields: list[str] = []
    for width, separator in (
        (YEAR_DIGITS, "-"),
        (FIELD_DIGITS, "-"),
        (FIELD_DIGITS, "T"),
        (FIELD_DIGITS, ":"),
        (FIELD_DIGITS, ":"),
        (FIELD_DIGITS, None),
    ):
        end = cursor.digits(width)
        if end is None:
            return None
        fields.append(cursor.slice_to(end.pos))
        cursor = end
        if separator is not None:
            after = cursor.expect(separator)
            if after is None:
                return None
            cursor = after

    year, month, day, hour, minute, second = fields

    fraction: str | None = None
    after_dot = cursor.expect(".")
    if after_dot is not None:
        end = after_dot.digit_run(MAX_FRACTION_DIGITS)
        if end.pos == after_dot.pos:
            return None
        fraction = after_dot.slice_to(end.pos)
        cursor = end

    zone: str | None = None
    zone_sign: str | None = None
    zone_hour: str | None = None
    zone_minute: str | None = None

    if cursor.peek() == UTC_DESIGNATOR:
        zone = UTC_DESIGNATOR
        cursor = cursor.advance()
    elif cursor.peek() in ZONE_SIGNS:
        zone_start = cursor
        zone_sign = cursor.current
        cursor = cursor.advance()

        hour_end = cursor.digits(FIELD_DIGITS)
        if hour_end is None:
            return None
        zone_hour = cursor.slice_to(hour_end.pos)

        after_colon = hour_end.expect(":")
        if after_colon is None:
            return None

        minute_end = after_colon.digits(FIELD_DIGITS)
        if minute_end is None:
            return None
        zone_minute = after_colon.slice_to(minute_end.pos)

        cursor = minute_end
        zone = zone_start.slice_to(cursor.pos)

    # Anchored: anything left over (a 4th fraction digit, trailing text,
    # internal whitespace) rejects the whole input.
    if not cursor.is_eof:
        return None

    return CapturedGroups(
        negative_year=negative_year,
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        fraction=fraction,
        zone=zone,
        zone_sign=zone_sign,
        zone_hour=zone_hour,
        zone_minute=zone_minute,
    )
