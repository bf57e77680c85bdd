# src/weekrunner/availability/day_schedule.py

from __future__ import annotations

import logging
from datetime import time
from enum import StrEnum
from itertools import groupby

from .intervals import (
    DEFAULT_INTERVAL_MINUTES,
    blocks_per_day,
    index_to_time_range,
    time_to_range_index,
)

logger = logging.getLogger(__name__)


class TimeStatus(StrEnum):
    FREE = "free"
    BUSY = "busy"

    @classmethod
    def parse(cls, raw: str | None) -> TimeStatus:
        """Lenient parse for config values ("Free", " busy ", ...). Unknown -> FREE."""
        if not raw:
            return cls.FREE
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.FREE


class TimeBlock:
    """One grid cell. start/end are fixed at construction; status is mutable."""

    __slots__ = ("_start", "_end", "status")

    def __init__(self, start: time, end: time, status: TimeStatus) -> None:
        self._start = start
        self._end = end
        self.status = status

    @property
    def start(self) -> time:
        return self._start

    @property
    def end(self) -> time:
        return self._end

    def __repr__(self) -> str:
        return f"TimeBlock({self._start:%H:%M}-{self._end:%H:%M:%S}, {self.status.value})"


class DaySchedule:
    """
    Free/busy grid for a single day.

    Blocks partition the 24 hours without gap or overlap:
    - block i covers [i * interval_size, (i + 1) * interval_size) minutes
    - the last block ends at 23:59:59

    Range writes are half-open on block indices, so [t1, t2) followed by
    [t2, t3) never writes the block at t2 twice.
    """

    def __init__(
        self,
        interval_size: int = DEFAULT_INTERVAL_MINUTES,
        default_status: TimeStatus = TimeStatus.FREE,
    ) -> None:
        count = blocks_per_day(interval_size)
        self._interval_size = interval_size
        self._blocks: list[TimeBlock] = []
        for i in range(count):
            start, end = index_to_time_range(i, interval_size)
            self._blocks.append(TimeBlock(start, end, default_status))

    @property
    def interval_size(self) -> int:
        return self._interval_size

    @property
    def blocks(self) -> tuple[TimeBlock, ...]:
        return tuple(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def block_at(self, at: time) -> TimeBlock:
        return self._blocks[time_to_range_index(at, self._interval_size)]

    def get_time_status(self, at: time) -> TimeStatus:
        return self.block_at(at).status

    def set_time_status(self, start_time: time, end_time: time | None, status: TimeStatus) -> None:
        """
        Set `status` on every block in [index(start_time), index(end_time)).

        Unaligned times are floored to the start of their block.
        end_time=None runs through the last block of the day.
        An empty or inverted range changes nothing.
        """
        start_index = time_to_range_index(start_time, self._interval_size)
        if end_time is None:
            end_index = len(self._blocks)
        else:
            end_index = time_to_range_index(end_time, self._interval_size)

        if start_index >= end_index:
            logger.debug(
                "Empty range %s-%s, nothing to set", start_time, "end" if end_time is None else end_time
            )
            return

        for block in self._blocks[start_index:end_index]:
            block.status = status

    def ranges(self, status: TimeStatus) -> list[tuple[time, time]]:
        """Merge consecutive blocks with `status` into (start, end) spans."""
        out: list[tuple[time, time]] = []
        for block_status, group in groupby(self._blocks, key=lambda b: b.status):
            if block_status != status:
                continue
            run = list(group)
            out.append((run[0].start, run[-1].end))
        return out
