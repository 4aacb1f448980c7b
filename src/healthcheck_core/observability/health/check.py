"""Observability – HealthCheck base class and the ``execute`` runner."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from healthcheck_core.config import HealthCheckSettings, default_settings
from healthcheck_core.kernel.time import Clock, default_clock
from healthcheck_core.observability.health.result import Result, unhealthy
from healthcheck_core.observability.logging import get_logger

__all__ = ["HealthCheck", "execute"]

_log = get_logger(__name__)

_NANOS_PER_MILLI = 1_000_000


def execute(
    check: HealthCheck | Callable[[], Result],
    *,
    clock: Clock | None = None,
    name: str | None = None,
    settings: HealthCheckSettings | None = None,
) -> Result:
    """Run ``check`` once and return its :class:`Result` stamped with a duration.

    ``check`` is a :class:`HealthCheck` or any zero-argument callable. For a
    :class:`HealthCheck`, its own clock, name and settings fill in whatever
    is not passed explicitly. Settings otherwise come from the
    ``HEALTHCHECK_*`` environment (:func:`~healthcheck_core.config.default_settings`).

    Never raises for a failing check: any :class:`Exception` raised by
    ``check`` (or a return value that is not a :class:`Result`) becomes
    ``unhealthy(exc)`` with the original error attached. ``KeyboardInterrupt``
    and ``SystemExit`` propagate.

    Duration is measured with ``clock.tick()`` and truncated to whole
    milliseconds.
    """
    if isinstance(check, HealthCheck):
        clock = clock or check.clock
        name = name or check.name
        settings = settings or check.settings
        check = check.check
    clock = clock or default_clock()
    settings = settings or default_settings()
    name = name or getattr(check, "__qualname__", None) or type(check).__name__

    start = clock.tick()
    try:
        result = check()
        if not isinstance(result, Result):
            raise TypeError(
                f"health check returned {type(result).__name__}, expected Result"
            )
    except Exception as exc:  # noqa: BLE001
        if settings.log_faults:
            _log.warning("health_check.fault", check=name, error=exc)
        result = unhealthy(exc, clock=clock)
    duration = (clock.tick() - start) // _NANOS_PER_MILLI

    if 0 < settings.slow_threshold_ms < duration:
        _log.warning(
            "health_check.slow",
            check=name,
            duration_ms=duration,
            threshold_ms=settings.slow_threshold_ms,
        )
    _log.debug(
        "health_check.executed",
        check=name,
        healthy=result.healthy,
        duration_ms=duration,
    )
    return result.with_duration(duration)


class HealthCheck(ABC):
    """Base class for all health checks.

    Subclasses implement :meth:`check`; callers use :meth:`execute` (or pass
    the instance to :func:`execute`), which times the check and turns
    exceptions into unhealthy results.
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        settings: HealthCheckSettings | None = None,
    ) -> None:
        self._clock = clock
        self._settings = settings

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def clock(self) -> Clock:
        return getattr(self, "_clock", None) or default_clock()

    @property
    def settings(self) -> HealthCheckSettings | None:
        return getattr(self, "_settings", None)

    @abstractmethod
    def check(self) -> Result:
        """Evaluate the component.

        Return ``healthy(...)`` or ``unhealthy(...)``; raising is also fine and
        is reported as an unhealthy result carrying the error.
        """

    def execute(self) -> Result:
        return execute(self)
