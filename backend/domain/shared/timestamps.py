"""UTC timestamps as stored in the JSON documents."""

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value: Optional[str]) -> datetime:
    """Parse an ISO-8601 timestamp, None or empty meaning now.

    Example:
        >>> parse_timestamp("2024-03-01T12:00:00Z").isoformat()
        '2024-03-01T12:00:00+00:00'
    """
    if not value:
        return utcnow()
    # Stored documents use the JavaScript "Z" suffix
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_timestamp(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")
