"""
Time MCP Server
===============
Current time, timezone conversion and natural-language time parsing
exposed as MCP tools.
"""

__version__ = "0.3.2"

from .clock import FixedClock, SystemClock
from .errors import (
    InvalidArgumentsError,
    InvalidTimeFormatError,
    TimeServerError,
    UnknownZoneError,
    UnparseableExpressionError,
)
from .models import TimeConversionResult, TimeResult
from .service import TimeService

__all__ = [
    "__version__",
    "FixedClock",
    "SystemClock",
    "TimeServerError",
    "UnknownZoneError",
    "InvalidTimeFormatError",
    "UnparseableExpressionError",
    "InvalidArgumentsError",
    "TimeResult",
    "TimeConversionResult",
    "TimeService",
]
