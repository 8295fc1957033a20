"""
UTC offset and DST evaluation.

DST policy: a zone's standard offset for a year is the offset in effect at
local midnight on January 1 of that year, and DST is reported whenever the
offset at the instant differs from it. Zones whose January is itself summer
time (most of the southern hemisphere) come out inverted.
"""

from datetime import datetime, timezone, tzinfo


def offset_seconds(zone: tzinfo, instant: datetime) -> int:
    """Signed UTC offset, in seconds, in effect at ``instant`` in ``zone``."""
    offset = instant.astimezone(zone).utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


def standard_offset_seconds(zone: tzinfo, year: int) -> int:
    january_first = datetime(year, 1, 1, tzinfo=zone)
    offset = january_first.utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


def is_dst(zone: tzinfo, instant: datetime) -> bool:
    local = instant.astimezone(zone)
    return offset_seconds(zone, local) != standard_offset_seconds(zone, local.year)


def format_hours(seconds: int) -> str:
    """Format an offset delta as a sign-prefixed hour string.

    Whole hours render without a fractional part (``+9h``, ``+0h``); anything
    else keeps at most two decimals with trailing zeros dropped (``+5.75h``,
    ``-3.5h``).
    """
    hours = seconds / 3600
    if seconds % 3600 == 0:
        return f"{hours:+.0f}h"
    return f"{hours:+.2f}".rstrip("0").rstrip(".") + "h"


def difference_hours(zone_a: tzinfo, zone_b: tzinfo, instant: datetime) -> str:
    """Offset of ``zone_b`` minus offset of ``zone_a`` at ``instant``."""
    return format_hours(offset_seconds(zone_b, instant) - offset_seconds(zone_a, instant))


def to_iso(instant: datetime) -> str:
    # isoformat never emits "Z"; UTC renders as +00:00
    return instant.isoformat(timespec="seconds")


def attach_zone(wall_clock: datetime, zone: tzinfo) -> datetime:
    """Turn a naive wall-clock time into an instant in ``zone``.

    The round trip through UTC applies zoneinfo's normalization: a time in a
    spring-forward gap moves forward past the gap, and a repeated fall-back
    time resolves to its first occurrence.
    """
    local = wall_clock.replace(tzinfo=zone, fold=0)
    return local.astimezone(timezone.utc).astimezone(zone)
