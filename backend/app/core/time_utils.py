import re
from datetime import date, datetime, timezone

from app.core.constants import DATE_PATTERN

_DATE_RE = re.compile(DATE_PATTERN)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime (microsecond resolution)."""
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Today's calendar date in UTC, i.e. now truncated to midnight UTC."""
    return utc_now().date()


def parse_ymd(value: str) -> date:
    """Parse a strict 'YYYY-MM-DD' string into a date.

    Only the exact layout is accepted: '2026-1-5', '2026/01/05', '20260105'
    and '2026-01-05T00:00:00' all raise ValueError, as does a well-formed
    string naming a non-existent day such as '2026-02-30'.
    """
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValueError("Date must be in YYYY-MM-DD format")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid calendar date")


def format_ymd(d: date) -> str:
    """Format date -> 'YYYY-MM-DD'."""
    return d.isoformat()


def format_timestamp(dt: datetime | None) -> str | None:
    """Format a stored timestamp as ISO-8601 UTC with a 'Z' suffix.

    SQLite hands DateTime columns back naive; those are stored in UTC, so a
    missing tzinfo is read as UTC. Returns None if dt is None.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def rfc3339_now() -> str:
    """Current UTC time as RFC 3339 with second precision, e.g. '2026-01-15T08:30:00Z'."""
    return utc_now().strftime("%Y-%m-%dT%H:%M:%SZ")
