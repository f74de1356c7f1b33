"""Timestamp helpers."""

from datetime import datetime, timezone


def to_iso(value: datetime) -> str:
    """Render an aware datetime as UTC ISO-8601 with milliseconds, e.g. 2026-01-01T12:00:00.000Z."""
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_iso() -> str:
    """Current UTC time in stored timestamp format."""
    return to_iso(datetime.now(timezone.utc))
