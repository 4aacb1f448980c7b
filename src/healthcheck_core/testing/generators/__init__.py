"""Testing generators – deterministic clocks."""
from healthcheck_core.testing.generators.step_clock import StepClock

__all__ = ["StepClock"]
