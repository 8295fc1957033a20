"""
Time query service.

Orchestrates the three tool operations on top of the zone resolver, the
injected clock and the offset/DST evaluator. A service instance holds only
read-only state, so one instance may serve concurrent calls.
"""

from datetime import datetime, tzinfo
from typing import Optional, Tuple

from loguru import logger

from .clock import Clock, SystemClock
from .errors import InvalidTimeFormatError
from .models import TimeConversionResult, TimeResult
from .natural import GrammarEngine, NaturalLanguageResolver
from .offsets import attach_zone, difference_hours, is_dst, to_iso
from .zones import detect_local_timezone, resolve


def parse_hhmm(value: str) -> Tuple[int, int]:
    """Strictly parse ``HH:MM`` into (hour, minute)."""
    parts = value.split(":")
    if len(parts) != 2:
        raise InvalidTimeFormatError(value)
    hour_str, minute_str = parts
    if not (hour_str.isascii() and hour_str.isdigit()) or not 0 <= int(hour_str) <= 23:
        raise InvalidTimeFormatError(value, f"invalid hour: {hour_str}")
    if not (minute_str.isascii() and minute_str.isdigit()) or not 0 <= int(minute_str) <= 59:
        raise InvalidTimeFormatError(value, f"invalid minute: {minute_str}")
    return int(hour_str), int(minute_str)


class TimeService:
    """
    Answers current-time, conversion and natural-language queries.

    Args:
        local_timezone (str): Zone used whenever a caller passes an empty
            identifier. Detected from the host when empty.
        clock (Clock, optional): Source of "now". Defaults to the system clock.
        engine (GrammarEngine, optional): Natural-language grammar engine.
            Defaults to the parsedatetime adapter.
    """

    def __init__(
        self,
        local_timezone: str = "",
        clock: Optional[Clock] = None,
        engine: Optional[GrammarEngine] = None,
    ) -> None:
        self.local_timezone = local_timezone or detect_local_timezone()
        self.clock = clock or SystemClock()
        self.natural = NaturalLanguageResolver(engine)
        logger.debug(f"TimeService: local timezone '{self.local_timezone}', clock {self.clock!r}")

    def _zone(self, identifier: str) -> Tuple[str, tzinfo]:
        name = identifier or self.local_timezone
        return name, resolve(name)

    @staticmethod
    def _result(name: str, zone: tzinfo, instant: datetime) -> TimeResult:
        local = instant.astimezone(zone)
        return TimeResult(timezone=name, datetime=to_iso(local), is_dst=is_dst(zone, local))

    def get_current_time(self, timezone: str = "") -> TimeResult:
        name, zone = self._zone(timezone)
        return self._result(name, zone, self.clock())

    def convert_time(self, source_timezone: str, time: str, target_timezone: str) -> TimeConversionResult:
        """Convert ``time`` on today's date from the source to the target zone.

        "Today" is the calendar date the clock reports in its own zone, not
        the date in the source zone, so near midnight the source date can
        differ from the source zone's actual date.
        """
        source_name, source_zone = self._zone(source_timezone)
        target_name, target_zone = self._zone(target_timezone)
        hour, minute = parse_hhmm(time)

        now = self.clock()
        wall_clock = datetime(now.year, now.month, now.day, hour, minute)
        # gap/fold handling is whatever zoneinfo's normalization yields
        source_time = attach_zone(wall_clock, source_zone)

        return TimeConversionResult(
            source=self._result(source_name, source_zone, source_time),
            target=self._result(target_name, target_zone, source_time),
            time_difference=difference_hours(source_zone, target_zone, source_time),
        )

    def parse_natural(self, expression: str, timezone: str = "") -> TimeResult:
        name, zone = self._zone(timezone)
        instant = self.natural.resolve(expression, zone, self.clock())
        return self._result(name, zone, instant)
