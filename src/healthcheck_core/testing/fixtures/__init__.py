"""Testing fixtures – pytest plugin."""
from healthcheck_core.testing.fixtures.clock import fake_clock, step_clock

__all__ = ["fake_clock", "step_clock"]
