"""
Time helpers for model timestamps.

Rows store naive UTC datetimes; pass the callable as a column default:
default=utcnow_naive, onupdate=utcnow_naive.
"""

from datetime import datetime, timezone


def utcnow_naive() -> datetime:
    """Current UTC time without tzinfo (replacement for datetime.utcnow())."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
