# src/weekrunner/availability/intervals.py

from __future__ import annotations

"""
Interval indexer.

A day is cut into fixed-width blocks of `interval_size` minutes. These helpers
convert between a block index and the time-of-day range it covers.

The conversion is many-to-one in the time -> index direction: every time
inside a block floors to the same index.
"""

from datetime import time

from ..core.errors import ConfigurationError

MINUTES_PER_DAY = 24 * 60
MAX_INTERVAL_MINUTES = 60
DEFAULT_INTERVAL_MINUTES = 15

# A time-of-day cannot represent midnight of the next day.
END_OF_DAY = time(23, 59, 59)


def validate_interval_size(interval_size: int) -> int:
    if isinstance(interval_size, bool) or not isinstance(interval_size, int):
        raise ConfigurationError(f"Interval size must be an integer, got {interval_size!r}")
    if interval_size <= 0:
        raise ConfigurationError(f"Interval size must be positive, got {interval_size}")
    if interval_size > MAX_INTERVAL_MINUTES:
        raise ConfigurationError(
            f"Interval size cannot be greater than {MAX_INTERVAL_MINUTES} minutes, got {interval_size}"
        )
    if MAX_INTERVAL_MINUTES % interval_size:
        raise ConfigurationError(f"Interval size must evenly divide 60, got {interval_size}")
    return interval_size


def blocks_per_day(interval_size: int) -> int:
    return MINUTES_PER_DAY // validate_interval_size(interval_size)


def _minutes_to_time(minutes: int) -> time:
    return time(minutes // 60, minutes % 60)


def index_to_time_range(index: int, interval_size: int) -> tuple[time, time]:
    """
    Return (start, end) of block `index`.

    The end of the last block is clamped to 23:59:59 instead of wrapping to 00:00.
    """
    count = blocks_per_day(interval_size)
    if index < 0 or index >= count:
        raise ConfigurationError(f"Time index {index} out of range [0, {count})")

    start_minute = index * interval_size
    end_minute = (index + 1) * interval_size

    start = _minutes_to_time(start_minute)
    end = END_OF_DAY if end_minute >= MINUTES_PER_DAY else _minutes_to_time(end_minute)
    return start, end


def time_to_range_index(at: time, interval_size: int) -> int:
    validate_interval_size(interval_size)
    minute = at.hour * 60 + at.minute
    return minute // interval_size
