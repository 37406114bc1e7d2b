from __future__ import annotations

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/inject a fixed clock.
    """
    return datetime.now(timezone.utc)


def to_epoch_millis(value: datetime) -> int:
    return (value - EPOCH) // timedelta(milliseconds=1)


def to_iso_utc(value: datetime) -> str:
    """Format as ISO-8601 UTC with millisecond precision, e.g. 2024-09-02T08:00:00.000Z."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
