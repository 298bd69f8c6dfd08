from datetime import datetime, timedelta
from typing import Protocol

import pytz


EPOCH = datetime(1970, 1, 1, tzinfo=pytz.utc)


def datetime_to_millis(dt: datetime) -> int:
    """Convert an aware datetime to epoch milliseconds."""
    return (dt - EPOCH) // timedelta(milliseconds=1)


def millis_to_datetime(timestamp_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=timestamp_ms)


class Clock(Protocol):
    """Source of the current instant in epoch milliseconds."""

    def now(self) -> int:
        ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> int:
        return datetime_to_millis(datetime.now(pytz.utc))


class FixedClock:
    """Clock pinned to a single instant, for tests and reproducible CLI runs."""

    def __init__(self, now_ms: int):
        self.now_ms = now_ms

    def now(self) -> int:
        return self.now_ms

    def __repr__(self) -> str:
        return f"FixedClock({self.now_ms})"
