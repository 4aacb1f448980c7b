from __future__ import annotations

from typing import Callable

from healthcheck_core.config import HealthCheckSettings
from healthcheck_core.kernel.time import Clock
from healthcheck_core.observability.health.check import HealthCheck
from healthcheck_core.observability.health.result import Result

__all__ = ["FunctionHealthCheck"]


class FunctionHealthCheck(HealthCheck):
    """Health check backed by a plain callable returning a :class:`Result`."""

    def __init__(
        self,
        name_: str,
        fn: Callable[[], Result],
        *,
        clock: Clock | None = None,
        settings: HealthCheckSettings | None = None,
    ) -> None:
        super().__init__(clock=clock, settings=settings)
        self._name = name_
        self._fn = fn

    @property
    def name(self) -> str:
        return self._name

    def check(self) -> Result:
        return self._fn()
