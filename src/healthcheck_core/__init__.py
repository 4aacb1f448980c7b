"""
healthcheck_core – single-shot health checks with immutable results.

Import path convention::

    from healthcheck_core import healthy, unhealthy, execute
    from healthcheck_core.observability.health import HealthCheck, Result
    from healthcheck_core.kernel.time import FrozenClock
"""

from healthcheck_core.observability.health import (
    FunctionHealthCheck,
    HealthCheck,
    Result,
    ResultBuilder,
    builder,
    execute,
    healthy,
    unhealthy,
)

__version__ = "0.1.0"
__all__ = [
    "FunctionHealthCheck",
    "HealthCheck",
    "Result",
    "ResultBuilder",
    "__version__",
    "builder",
    "execute",
    "healthy",
    "unhealthy",
]
