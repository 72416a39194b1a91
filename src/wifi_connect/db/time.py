"""Time utilities for database models."""

from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def localnow() -> datetime:
    """Return the current server-local time as a naive datetime."""
    return datetime.now()


def format_timestamp(value: datetime) -> str:
    """Render a stored timestamp the way the API exposes it."""
    return value.strftime(TIMESTAMP_FORMAT)
