from __future__ import annotations

from datetime import datetime, timezone

# Dropbox accepts and emits second precision, always in UTC.
SERVICE_TIME_FORMAT: str = "%Y-%m-%dT%H:%M:%SZ"


def parse_timestamp(value: str) -> datetime:
    """
    Parse a service timestamp into a tz-aware UTC datetime.

    Accepts strings like:
      - 2025-01-01T12:34:56Z
      - 2025-01-01T12:34:56.123Z
      - 2025-01-01T12:34:56+09:00
    """
    if not isinstance(value, str) or not value:
        raise ValueError("timestamp must be a non-empty string")

    s = value.strip()
    # Python's fromisoformat doesn't accept 'Z' in 3.10, so normalize.
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    dt = datetime.fromisoformat(s)  # raises ValueError if invalid
    return normalize_dt(dt).astimezone(timezone.utc)


def parse_optional_timestamp(value: object) -> datetime | None:
    """Parse `value` if it is a valid timestamp string, else return None."""
    if not isinstance(value, str):
        return None
    try:
        return parse_timestamp(value)
    except ValueError:
        return None


def to_service_time(dt: datetime) -> str:
    """Format a tz-aware datetime the way the upload endpoint expects it."""
    return normalize_dt(dt).astimezone(timezone.utc).strftime(SERVICE_TIME_FORMAT)


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt
