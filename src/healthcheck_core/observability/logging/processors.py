"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from healthcheck_core.observability.logging.protocol import Logger


def repr_exceptions(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor: render exception values bound to events as ``repr``.

    The runner binds the raised error under ``error``; JSON renderers cannot
    serialise exception instances.
    """
    for key, value in event_dict.items():
        if isinstance(value, BaseException):
            event_dict[key] = repr(value)
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Logger:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["repr_exceptions", "get_logger"]
