"""Observability – Health Checks."""
from healthcheck_core.observability.health.builtin import FunctionHealthCheck
from healthcheck_core.observability.health.check import HealthCheck, execute
from healthcheck_core.observability.health.result import (
    DEFAULT_NESTED_DETAILS_NAME,
    Result,
    ResultBuilder,
    builder,
    healthy,
    unhealthy,
)

__all__ = [
    "DEFAULT_NESTED_DETAILS_NAME",
    "FunctionHealthCheck",
    "HealthCheck",
    "Result",
    "ResultBuilder",
    "builder",
    "execute",
    "healthy",
    "unhealthy",
]
