"""Observability – structured logging ports and helpers."""
from healthcheck_core.observability.logging.factory import JsonLoggerFactory
from healthcheck_core.observability.logging.processors import get_logger
from healthcheck_core.observability.logging.protocol import Logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
