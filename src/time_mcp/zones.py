"""Timezone identifier resolution and host local-zone detection."""

from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzlocal import get_localzone_name

from .errors import UnknownZoneError


def resolve(identifier: str) -> ZoneInfo:
    """Resolve an IANA timezone identifier into a zone handle.

    The host database is read on every call (``ZoneInfo.no_cache``) so rule
    updates applied out of band are picked up by the next request. An empty
    identifier is rejected; callers substitute their default zone first.
    """
    if not identifier:
        raise UnknownZoneError(identifier)
    try:
        return ZoneInfo.no_cache(identifier)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise UnknownZoneError(identifier) from e


def format_utc_offset(offset_seconds: int) -> str:
    """Render an offset as ``UTC+H`` or ``UTC+H:MM``."""
    sign = "-" if offset_seconds < 0 else "+"
    hours, remainder = divmod(abs(offset_seconds), 3600)
    minutes = remainder // 60
    if minutes == 0:
        return f"UTC{sign}{hours}"
    return f"UTC{sign}{hours}:{minutes:02d}"


def detect_local_timezone() -> str:
    """Return the host's zone name, or a ``UTC±H[:MM]`` string if it has none."""
    name = get_localzone_name()
    if name:
        return name
    offset = datetime.now().astimezone().utcoffset()
    return format_utc_offset(int(offset.total_seconds()) if offset else 0)
