"""
Sources of "now".

A clock is any zero-argument callable returning a timezone-aware datetime.
The service receives its clock at construction, so two services with
different clocks can run side by side.
"""

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


class SystemClock:
    """Reads the host clock on every call, in the host's local zone."""

    def __call__(self) -> datetime:
        return datetime.now().astimezone()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Always returns the same instant. Used for reproducible results."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._instant = instant

    def __call__(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"
