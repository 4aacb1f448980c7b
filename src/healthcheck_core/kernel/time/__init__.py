"""Kernel time – Clock port + implementations."""
from healthcheck_core.kernel.time.clock import (
    Clock,
    CpuTimeClock,
    FrozenClock,
    SystemClock,
    default_clock,
)

__all__ = ["Clock", "CpuTimeClock", "FrozenClock", "SystemClock", "default_clock"]
