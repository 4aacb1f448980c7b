"""Testing fakes."""
from healthcheck_core.testing.fakes.clock import FakeClock

__all__ = ["FakeClock"]
