"""Kernel time – Clock protocol + implementations.

A clock answers two different questions: *what time is it* (``time``, epoch
milliseconds, used to stamp results) and *how much time passed* (``tick``,
monotonic nanoseconds, used to measure check duration). The two readings are
never mixed.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from time import monotonic_ns, thread_time_ns, time_ns
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def time(self) -> int: ...
    def tick(self) -> int: ...


class SystemClock:
    """Production clock: wall time from ``time_ns``, ticks from ``monotonic_ns``."""

    def time(self) -> int:
        return time_ns() // 1_000_000

    def tick(self) -> int:
        return monotonic_ns()


class CpuTimeClock(SystemClock):
    """Ticks in CPU time consumed by the calling thread.

    Useful to see how much work a check does, as opposed to how long it
    spent waiting on I/O.
    """

    def tick(self) -> int:
        return thread_time_ns()


class FrozenClock:
    """Test clock pinned to a fixed point in time.

    ``tick`` starts at *tick* nanoseconds (zero by default) and only moves
    when :meth:`advance` is called. A naive *fixed* is taken as local time,
    like :meth:`datetime.timestamp`.
    """

    def __init__(self, fixed: datetime, *, tick: int = 0) -> None:
        self._fixed = fixed
        self._ticks = tick

    def now(self) -> datetime:
        return self._fixed

    def time(self) -> int:
        return _epoch_millis(self._fixed)

    def tick(self) -> int:
        return self._ticks

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        delta = timedelta(**kwargs)
        self._fixed += delta
        self._ticks += delta // timedelta(microseconds=1) * 1_000


def _epoch_millis(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return (moment - datetime(1970, 1, 1, tzinfo=UTC)) // timedelta(milliseconds=1)


_DEFAULT_CLOCK = SystemClock()


def default_clock() -> Clock:
    """Return the process-wide clock used when none is injected."""
    return _DEFAULT_CLOCK


__all__ = ["Clock", "CpuTimeClock", "FrozenClock", "SystemClock", "default_clock"]
