"""
Error types raised by the time-resolution engine.

Every error carries the offending input verbatim so the MCP layer can echo it
back to the caller without re-formatting.
"""

from typing import Optional


class TimeServerError(Exception):
    """Base class for all errors reported back to the tool caller."""


class UnknownZoneError(TimeServerError):
    """The timezone identifier is not known to the host timezone database."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"unknown time zone {identifier}")


class InvalidTimeFormatError(TimeServerError):
    """The HH:MM argument of convert_time is malformed or out of range."""

    def __init__(self, value: str, message: str = "time must be HH:MM"):
        self.value = value
        super().__init__(message)


class UnparseableExpressionError(TimeServerError):
    """The grammar engine could not turn the expression into an instant."""

    def __init__(self, expression: str, cause: Optional[BaseException] = None):
        self.expression = expression
        self.cause = cause
        message = f"could not parse expression '{expression}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class InvalidArgumentsError(TimeServerError):
    """A tool call argument is missing or has the wrong type."""
