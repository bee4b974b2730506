"""UTC datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def ensure_aware(value: datetime | None) -> datetime:
    """Default a missing timestamp to now; treat naive datetimes as UTC."""
    if value is None:
        return utc_now()
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def iso_or_none(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
