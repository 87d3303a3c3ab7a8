from __future__ import annotations

from datetime import tzinfo

from dateutil import tz as dateutil_tz


def resolve_timezone(zone: str | tzinfo | None) -> tzinfo:
    """Return a tzinfo for an IANA name, a tzinfo, or ``None`` (UTC)."""
    if zone is None:
        return dateutil_tz.UTC
    if isinstance(zone, tzinfo):
        return zone
    resolved = dateutil_tz.gettz(zone)
    if resolved is None:
        raise ValueError(f"Unknown time zone: {zone!r}")
    return resolved
