"""Testing support – fake clocks and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["healthcheck_core.testing.fixtures"]
"""

from healthcheck_core.testing.fakes import FakeClock
from healthcheck_core.testing.generators import StepClock

__all__ = ["FakeClock", "StepClock"]
