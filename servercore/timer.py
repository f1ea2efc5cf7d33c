"""Millisecond clocks and countdown/interval timers."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

_UINT32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - 0x100000000 if value & 0x80000000 else value


def get_ms_time_diff(old_ms_time: int, new_ms_time: int) -> int:
    """Difference between two 32-bit millisecond stamps, tolerating wrap-around."""
    if old_ms_time > new_ms_time:
        diff_1 = ((_UINT32 - old_ms_time) + new_ms_time) & _UINT32
        diff_2 = (old_ms_time - new_ms_time) & _UINT32
        return min(diff_1, diff_2)
    return (new_ms_time - old_ms_time) & _UINT32


class WorldTimer:
    """Server clock counting milliseconds since its creation."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start = clock()
        self._time = 0
        self._prev_time = 0

    def get_ms_time(self) -> int:
        """Milliseconds elapsed since start, modulo 2**32 - 1."""
        diff = max(0, int((self._clock() - self._start) * 1000))
        return diff % _UINT32

    def tick_time(self) -> int:
        """Time of the last world tick."""
        return self._time

    def tick_prev_time(self) -> int:
        """Time of the world tick before the last one."""
        return self._prev_time

    def tick(self) -> int:
        """Advance the world tick and return the elapsed milliseconds."""
        self._prev_time = self._time
        self._time = self.get_ms_time()
        return get_ms_time_diff(self._prev_time, self._time)


@dataclass
class IntervalTimer:
    """Accumulating timer that never drops below zero."""

    interval: int = 0
    current: int = 0

    def update(self, diff: int) -> None:
        self.current += diff
        if self.current < 0:
            self.current = 0

    def passed(self) -> bool:
        return self.current >= self.interval

    def reset(self) -> None:
        if self.current >= self.interval:
            self.current -= self.interval


@dataclass
class ShortIntervalTimer:
    """Accumulating timer on unsigned 32-bit values."""

    interval: int = 0
    current: int = 0

    def update(self, diff: int) -> None:
        self.current = (self.current + diff) & _UINT32

    def passed(self) -> bool:
        return self.current >= self.interval

    def reset(self) -> None:
        if self.current >= self.interval:
            self.current = (self.current - self.interval) & _UINT32


@dataclass
class TimeTracker:
    """Countdown to an expiry time."""

    expiry: int

    def update(self, diff: int) -> None:
        self.expiry -= diff

    def passed(self) -> bool:
        return self.expiry <= 0

    def reset(self, interval: int) -> None:
        self.expiry = interval


@dataclass
class ShortTimeTracker:
    """Countdown on signed 32-bit values."""

    expiry: int = 0

    def update(self, diff: int) -> None:
        self.expiry = _to_int32(self.expiry - diff)

    def passed(self) -> bool:
        return self.expiry <= 0

    def reset(self, interval: int) -> None:
        self.expiry = _to_int32(interval)