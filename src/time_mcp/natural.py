"""
Natural-language time resolution.

The grammar itself lives in ``parsedatetime``; this module only feeds it a
reference instant and turns whatever it returns into an instant in the
requested zone.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Optional

import parsedatetime

from .errors import UnparseableExpressionError
from .offsets import attach_zone

# (expression, zone-local reference) -> aware or naive datetime, or None
GrammarEngine = Callable[[str, datetime], Optional[datetime]]

# how far the reference is nudged to tell "now + duration" phrases apart
_REFERENCE_NUDGE = timedelta(minutes=1)
_DAY = timedelta(days=1)


class ParsedatetimeEngine:
    """English ``parsedatetime`` adapter returning naive wall-clock results."""

    def __call__(self, expression: str, reference: datetime) -> Optional[datetime]:
        if not expression.strip():
            return None
        # Calendar keeps per-parse state, one per call keeps threads apart
        calendar = parsedatetime.Calendar(version=parsedatetime.VERSION_CONTEXT_STYLE)
        parsed, context = calendar.parseDT(expression, sourceTime=reference.replace(tzinfo=None))
        if not context.hasDateOrTime:
            return None
        return parsed


class NaturalLanguageResolver:
    """Resolves free-form expressions against a reference instant."""

    def __init__(self, engine: Optional[GrammarEngine] = None):
        self.engine = engine or ParsedatetimeEngine()

    def _parse(self, expression: str, reference: datetime) -> datetime:
        try:
            parsed = self.engine(expression, reference)
        except Exception as e:
            raise UnparseableExpressionError(expression, e) from e
        if parsed is None:
            raise UnparseableExpressionError(expression)
        return parsed

    def _is_elapsed_duration(self, expression: str, reference: datetime, parsed: datetime) -> bool:
        """True for "in 2 hours" style phrases that move with the reference.

        Whole-day offsets ("in 3 days", "in 1 week") keep their calendar
        meaning and are not treated as elapsed time.
        """
        offset = parsed - reference.replace(tzinfo=None)
        if offset % _DAY == timedelta(0) and offset:
            return False
        shifted = self._parse(expression, reference + _REFERENCE_NUDGE)
        if shifted.tzinfo is not None:
            return False
        return shifted - parsed == _REFERENCE_NUDGE

    def resolve(self, expression: str, zone: tzinfo, now: datetime) -> datetime:
        """Return the instant ``expression`` denotes, projected into ``zone``.

        ``now`` is projected into ``zone`` before being handed to the engine so
        that "tomorrow" or "next Monday" follow that zone's calendar date.
        Durations relative to now ("in 90 minutes", "2 hours ago") elapse in
        absolute time, so a DST change inside the span is accounted for.
        """
        reference = now.astimezone(zone).replace(microsecond=0)
        parsed = self._parse(expression, reference)

        if parsed.tzinfo is not None and parsed.utcoffset() is not None:
            return parsed.astimezone(zone)
        if self._is_elapsed_duration(expression, reference, parsed):
            elapsed = parsed - reference.replace(tzinfo=None)
            return (reference.astimezone(timezone.utc) + elapsed).astimezone(zone)
        # other naive results are wall-clock times in the reference zone
        return attach_zone(parsed, zone)
