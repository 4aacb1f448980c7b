"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from healthcheck_core.config import HealthCheckSettings, default_settings
from healthcheck_core.observability.logging.processors import repr_exceptions


class JsonLoggerFactory:
    """Configure structlog for JSON output through stdlib logging."""

    @staticmethod
    def configure(level: int = logging.INFO) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            repr_exceptions,
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)

    @classmethod
    def configure_from_settings(cls, settings: HealthCheckSettings | None = None) -> None:
        """Configure using ``settings.log_level`` (env-loaded when omitted)."""
        settings = settings or default_settings()
        cls.configure(settings.level)


__all__ = ["JsonLoggerFactory"]
