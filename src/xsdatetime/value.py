"""Parsed dateTime value.

DateTimeValue is a neutral, immutable record of the fields extracted by the
parser. It is deliberately not a datetime.datetime: the parser does not
check calendar validity, so values such as second=60 or February 30 are
representable here but not in datetime. to_datetime() performs that
conversion on request and reports failures with DateTimeConversionError.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from xsdatetime.diagnostics import DateTimeConversionError, ErrorTemplate
from xsdatetime.zones import UTC, ZoneOffset

__all__ = ["DateTimeValue"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DateTimeValue:
    """Fields of an XML Schema dateTime.

    Attributes:
        year: Four-digit year, always non-negative (a leading '-' is ignored)
        month: 1-12 as written (not validated)
        day: 1-31 as written (not validated)
        hour: 0-23 as written (not validated)
        minute: 0-59 as written (not validated)
        second: 0-60 as written (not validated)
        millisecond: 0-999, scaled from 1-3 fractional digits
        zone: Resolved UTC offset
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int = 0
    zone: ZoneOffset = UTC

    @property
    def offset_minutes(self) -> int:
        """Signed offset from UTC in minutes."""
        return self.zone.minutes

    def to_datetime(self) -> datetime:
        """Convert to a timezone-aware datetime.datetime.

        Returns:
            Aware datetime; millisecond becomes microsecond * 1000

        Raises:
            DateTimeConversionError: If any field is outside the range
                datetime supports (leap second, day overflow, year 0000,
                zone offset of 24 hours or more)

        Example:
            >>> DateTimeValue(2005, 11, 14, 2, 16, 38, 125).to_datetime()
            datetime.datetime(2005, 11, 14, 2, 16, 38, 125000, tzinfo=datetime.timezone.utc)
        """
        tz = self.zone.to_tzinfo()
        try:
            return datetime(
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                self.second,
                self.millisecond * 1000,
                tzinfo=tz,
            )
        except ValueError as e:
            logger.debug("Conversion of %r to datetime failed: %s", self, e)
            raise DateTimeConversionError(
                ErrorTemplate.field_out_of_range(repr(self), str(e)), value=self
            ) from e
