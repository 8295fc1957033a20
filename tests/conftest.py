"""Shared fixtures: services pinned to fixed instants."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from time_mcp import FixedClock, TimeService

NEW_YORK = ZoneInfo("America/New_York")

# Saturday, May 17, 2025, 10:30 EDT (14:30 UTC)
FIXED_NOW = datetime(2025, 5, 17, 10, 30, tzinfo=NEW_YORK)


def service_at(instant: datetime, local_timezone: str = "UTC") -> TimeService:
    return TimeService(local_timezone=local_timezone, clock=FixedClock(instant))


@pytest.fixture
def fixed_service():
    return service_at(FIXED_NOW)


@pytest.fixture
def chicago_service():
    return service_at(FIXED_NOW, local_timezone="America/Chicago")


@pytest.fixture
def winter_service():
    """Wednesday, January 15, 2025, 12:00 EST. No zone used here is near a transition."""
    return service_at(datetime(2025, 1, 15, 12, 0, tzinfo=NEW_YORK))
