"""The real-time clock, set from GPS time once that time is plausible."""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass

YEAR_OFFSET = 1954
SYNC_YEAR_THRESHOLD = 30
UPDATE_PERIOD_MS = 24 * 60 * 60 * 1000

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RtcTime:
    """A calendar time in UTC."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    def timestamp(self) -> int:
        """Seconds since the Unix epoch."""
        return calendar.timegm(
            (self.year, self.month, self.day, self.hour, self.minute, self.second, 0, 0, 0)
        )


def parse_gps_time(value: int) -> RtcTime:
    """Split a GPS time given as the number ``yyyymmddhhmmss``."""
    if value < 0:
        raise ValueError(f"GPS time must not be negative: {value}")
    year, rest = divmod(value, 10**10)
    month, rest = divmod(rest, 10**8)
    day, rest = divmod(rest, 10**6)
    hour, rest = divmod(rest, 10**4)
    minute, second = divmod(rest, 100)
    return RtcTime(year, month, day, hour, minute, second)


@dataclass
class RtcClock:
    """Holds the clock time and whether it has been synchronised from GPS."""

    time: RtcTime | None = None
    synced: bool = False
    update_period_ms: int = UPDATE_PERIOD_MS

    def update(self, value: int) -> bool:
        """Set the clock from GPS time ``value``; a receiver's default time is ignored.

        Returns True when the clock was set.
        """
        parsed = parse_gps_time(value)
        if parsed.year - YEAR_OFFSET <= SYNC_YEAR_THRESHOLD:
            logger.debug("GPS's time is blocked: %d", value)
            return False
        self.synced = True
        self.time = parsed
        logger.debug(
            "set RTC to: %04d-%02d-%02d,%02d:%02d:%02d",
            parsed.year, parsed.month, parsed.day, parsed.hour, parsed.minute, parsed.second,
        )
        return True