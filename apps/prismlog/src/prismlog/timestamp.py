"""
Timestamp generators keyed by a timestamp option.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Callable, Literal, Union

TimestampMode = Literal["ISO8601", "RFC3339", "locale", "unix"]
TimestampOption = Union[TimestampMode, str, bool]

TimestampGenerator = Callable[[], str]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso8601_timestamp() -> str:
    """Second precision UTC time without zone, e.g. ``2024-05-01T12:30:45``."""
    return _utc_now().strftime("%Y-%m-%dT%H:%M:%S")


def rfc3339_timestamp() -> str:
    """Millisecond precision UTC time with zone, e.g. ``2024-05-01T12:30:45.123Z``."""
    return _utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def unix_timestamp() -> str:
    return str(time.time_ns() // 1_000_000)


def locale_timestamp() -> str:
    return datetime.now().strftime("%x, %X")


def time_of_day_timestamp() -> str:
    return _utc_now().strftime("%H:%M:%S")


def empty_timestamp() -> str:
    return ""


def build_timestamp_generator(timestamp: TimestampOption | None = None) -> TimestampGenerator:
    """Select the generator for a timestamp option.

    ``True`` yields time of day only, ``False`` disables timestamps, and any
    string that is not a known mode is used as a ``strftime`` pattern against
    local time.
    """
    if timestamp is None or timestamp == "ISO8601":
        return iso8601_timestamp
    if timestamp is True:
        return time_of_day_timestamp
    if timestamp is False:
        return empty_timestamp
    if timestamp == "RFC3339":
        return rfc3339_timestamp
    if timestamp == "unix":
        return unix_timestamp
    if timestamp == "locale":
        return locale_timestamp

    pattern = str(timestamp)

    def custom_timestamp() -> str:
        return datetime.now().strftime(pattern)

    return custom_timestamp
