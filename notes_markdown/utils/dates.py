from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as dateparser


def parse_timestamp(dt_str: str) -> Optional[datetime]:
    """Parse an ISO (or otherwise dateutil-readable) timestamp.

    Naive values are taken as UTC. Returns None if parsing fails.
    """
    if not dt_str:
        return None
    try:
        dt = dateparser.parse(dt_str)
    except (ValueError, OverflowError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_display(dt_str: str) -> str:
    """Human form used in note headers, e.g. ``Jan 02, 2006 3:04 PM``."""
    dt = parse_timestamp(dt_str)
    if dt is None:
        return dt_str
    hour = dt.hour % 12 or 12
    return f"{dt:%b %d, %Y} {hour}:{dt:%M %p}"


def format_iso_utc(dt_str: str) -> str:
    dt = parse_timestamp(dt_str)
    if dt is None:
        return dt_str
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
