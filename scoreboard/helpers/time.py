from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_iso_timestamp(dt: Optional[datetime] = None) -> str:
    """
    ISO-8601 UTC with millisecond precision and a trailing "Z",
    e.g. 2025-03-01T09:15:02.123Z
    """
    if dt is None:
        dt = utcnow()

    # Treat naive values as UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
