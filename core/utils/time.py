"""
Time Utilities

Both exchanges want plain integer epoch timestamps, but in different units:
- Fcoin: milliseconds since epoch in the FC-ACCESS-TIMESTAMP header
- Gate.io: seconds since epoch for history ranges (start / end)

The helpers here are the single place those values are produced, which
also makes them easy to monkeypatch in tests.
"""

import time
from datetime import datetime, timezone
from typing import Union


def current_timestamp_ms() -> int:
    """
    Current time as integer milliseconds since epoch.

    Example:
        >>> current_timestamp_ms()
        1704110400123
    """
    return int(round(time.time() * 1000))


def current_timestamp() -> int:
    """
    Current time as integer seconds since epoch.

    Example:
        >>> current_timestamp()
        1704110400
    """
    return int(time.time())


def to_utc_datetime(timestamp: Union[int, float]) -> datetime:
    """
    Convert a timestamp (seconds or milliseconds) to UTC datetime.

    Values above 1e12 are treated as milliseconds (Fcoin), anything else as
    seconds (Gate.io).

    Raises:
        ValueError: For negative or out-of-range values

    Examples:
        >>> to_utc_datetime(1704110400000)  # Fcoin server-time
        datetime.datetime(2024, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)

        >>> to_utc_datetime(1704110400)  # Gate.io history timestamps
        datetime.datetime(2024, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)
    """
    if timestamp < 0:
        raise ValueError(f"Timestamp cannot be negative: {timestamp}")

    if timestamp > 1e12:
        timestamp = timestamp / 1000.0

    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OSError, OverflowError, ValueError) as e:
        raise ValueError(f"Invalid timestamp: {timestamp}. Error: {e}")
