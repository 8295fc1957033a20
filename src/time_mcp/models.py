"""
Result and argument models.

Results are what the tools return to the caller. Argument models are the
strict shape each tool's loosely typed argument mapping is coerced into
before anything reaches the service.
"""

from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from .errors import InvalidArgumentsError


class TimeResult(BaseModel):
    """A single instant as seen from one zone."""

    model_config = ConfigDict(frozen=True)

    timezone: str = Field(..., description="Zone identifier as supplied by the caller")
    datetime: str = Field(..., description="RFC 3339 timestamp with numeric UTC offset")
    is_dst: bool = Field(..., description="Offset differs from the zone's January 1 offset")


class TimeConversionResult(BaseModel):
    """The same instant in the source and target zones."""

    model_config = ConfigDict(frozen=True)

    source: TimeResult
    target: TimeResult
    time_difference: str = Field(..., description="Target offset minus source offset, e.g. +17h")


# ==========  Tool arguments ========

class _Arguments(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class GetCurrentTimeArgs(_Arguments):
    timezone: StrictStr = ""


class ConvertTimeArgs(_Arguments):
    source_timezone: StrictStr
    time: StrictStr
    target_timezone: StrictStr


class ParseNaturalTimeArgs(_Arguments):
    expression: StrictStr
    timezone: StrictStr = ""


ArgsT = TypeVar("ArgsT", bound=_Arguments)


def parse_arguments(model: Type[ArgsT], arguments: Optional[Mapping[str, Any]]) -> ArgsT:
    """Validate a tool's raw argument mapping into ``model``.

    ``None`` values are treated as absent so optional arguments fall back to
    their defaults.
    """
    cleaned = {k: v for k, v in (arguments or {}).items() if v is not None}
    try:
        return model.model_validate(cleaned)
    except ValidationError as e:
        error = e.errors()[0]
        name = ".".join(str(part) for part in error["loc"]) or "arguments"
        if error["type"] == "missing":
            raise InvalidArgumentsError(f'required argument "{name}" not found') from e
        raise InvalidArgumentsError(f'argument "{name}" must be a string') from e
