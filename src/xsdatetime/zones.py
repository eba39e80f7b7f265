"""Time-zone resolution for recognized dateTime groups.

Decision table (per call, no state carried between calls):
    - No designator, or the literal 'Z' -> UTC (offset 0, name "UTC")
    - Signed 'hh:mm' -> sign * (hh * 60 + mm) minutes, named "GMT" + designator

Only an explicit '-' sign yields a negative offset. Offsets are not range
checked: "+99:99" resolves to 6039 minutes. Range limits of
datetime.timezone apply only when converting with ZoneOffset.to_tzinfo().

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from datetime import UTC as _UTC_TZINFO
from datetime import timedelta, timezone, tzinfo

from xsdatetime.constants import CUSTOM_ZONE_PREFIX, UTC_DESIGNATOR, UTC_ZONE_NAME
from xsdatetime.diagnostics import DateTimeConversionError, ErrorTemplate
from xsdatetime.fields import is_negative, to_int_or_zero
from xsdatetime.recognizer import CapturedGroups

__all__ = ["UTC", "ZoneOffset", "resolve_zone"]

# datetime.timezone requires -timedelta(hours=24) < offset < timedelta(hours=24).
_MAX_TZINFO_MINUTES = 24 * 60 - 1


@dataclass(frozen=True, slots=True)
class ZoneOffset:
    """Fixed offset from UTC in whole minutes.

    Attributes:
        minutes: Signed offset from UTC (east positive)
        name: "UTC" for the UTC zone, otherwise e.g. "GMT-09:00"
    """

    minutes: int
    name: str

    @property
    def is_utc(self) -> bool:
        """True for the UTC zone selected by 'Z' or an absent designator."""
        return self.minutes == 0 and self.name == UTC_ZONE_NAME

    def to_tzinfo(self) -> tzinfo:
        """Convert to a datetime tzinfo.

        Returns:
            datetime.UTC for the UTC zone, otherwise a named datetime.timezone

        Raises:
            DateTimeConversionError: If the offset is 24 hours or more
        """
        if self.is_utc:
            return _UTC_TZINFO
        if abs(self.minutes) > _MAX_TZINFO_MINUTES:
            raise DateTimeConversionError(
                ErrorTemplate.offset_out_of_range(self.name, self.minutes), value=self
            )
        return timezone(timedelta(minutes=self.minutes), self.name)


UTC = ZoneOffset(0, UTC_ZONE_NAME)


def resolve_zone(groups: CapturedGroups) -> ZoneOffset:
    """Resolve the zone designator captured by the recognizer.

    Example:
        >>> from xsdatetime.recognizer import recognize
        >>> resolve_zone(recognize("2005-11-14T02:16:38-09:00"))
        ZoneOffset(minutes=-540, name='GMT-09:00')
        >>> resolve_zone(recognize("2005-11-14T02:16:38Z")) is UTC
        True
    """
    if not groups.zone or groups.zone == UTC_DESIGNATOR:
        return UTC

    sign = -1 if is_negative(groups.zone_sign) else 1
    hours = to_int_or_zero(groups.zone_hour)
    minutes = to_int_or_zero(groups.zone_minute)
    return ZoneOffset(sign * (hours * 60 + minutes), CUSTOM_ZONE_PREFIX + groups.zone)
