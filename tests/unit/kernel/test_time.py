"""Unit tests for kernel time utilities."""

from __future__ import annotations

import time
from datetime import UTC, datetime

from healthcheck_core.kernel.time import (
    Clock,
    CpuTimeClock,
    FrozenClock,
    SystemClock,
    default_clock,
)


# ---------------------------------------------------------------------------
# SystemClock
# ---------------------------------------------------------------------------


class TestSystemClock:
    def test_time_is_epoch_millis(self) -> None:
        before = int(time.time() * 1000)
        stamp = SystemClock().time()
        after = int(time.time() * 1000)
        assert isinstance(stamp, int)
        assert before - 1 <= stamp <= after + 1

    def test_tick_is_monotonic(self) -> None:
        clk = SystemClock()
        first = clk.tick()
        second = clk.tick()
        assert second >= first

    def test_satisfies_protocol(self) -> None:
        clk: Clock = SystemClock()
        assert isinstance(clk.time(), int)
        assert isinstance(clk.tick(), int)


class TestCpuTimeClock:
    def test_tick_counts_cpu_time(self) -> None:
        clk = CpuTimeClock()
        first = clk.tick()
        sum(i * i for i in range(20_000))
        assert clk.tick() >= first

    def test_wall_time_matches_system_clock(self) -> None:
        assert abs(CpuTimeClock().time() - SystemClock().time()) < 1000


# ---------------------------------------------------------------------------
# FrozenClock
# ---------------------------------------------------------------------------


class TestFrozenClock:
    def _fixed(self) -> datetime:
        return datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)

    def test_now_returns_fixed_time(self) -> None:
        assert FrozenClock(self._fixed()).now() == self._fixed()

    def test_time_is_epoch_millis_of_fixed(self) -> None:
        assert FrozenClock(self._fixed()).time() == 1718452800000

    def test_naive_datetime_is_local_time(self, local_zone) -> None:
        local_zone("EST5")
        naive = datetime(2024, 6, 15, 7, 0, 0)
        assert FrozenClock(naive).time() == 1718452800000
        assert FrozenClock(naive).time() == int(naive.timestamp() * 1000)

    def test_initial_tick(self) -> None:
        clk = FrozenClock(self._fixed(), tick=5_000)
        clk.advance(microseconds=1)
        assert clk.tick() == 6_000

    def test_tick_starts_at_zero(self) -> None:
        assert FrozenClock(self._fixed()).tick() == 0

    def test_tick_does_not_move_on_its_own(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.tick()
        assert clk.tick() == 0

    def test_advance_moves_time_and_tick(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.advance(seconds=30, milliseconds=5)
        assert clk.now() == datetime(2024, 6, 15, 12, 0, 30, 5000, tzinfo=UTC)
        assert clk.time() == 1718452830005
        assert clk.tick() == 30_005_000_000


class TestDefaultClock:
    def test_is_a_system_clock(self) -> None:
        assert isinstance(default_clock(), SystemClock)

    def test_is_process_wide(self) -> None:
        assert default_clock() is default_clock()
