"""Observability – health checks and structured logging."""

from healthcheck_core.observability.health import HealthCheck, Result, execute
from healthcheck_core.observability.logging import JsonLoggerFactory, Logger, get_logger

__all__ = [
    "HealthCheck",
    "JsonLoggerFactory",
    "Logger",
    "Result",
    "execute",
    "get_logger",
]
