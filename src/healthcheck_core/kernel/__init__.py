"""Kernel – framework-agnostic building blocks (errors, time)."""

from healthcheck_core.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    MessageFormatError,
    ValidationError,
)
from healthcheck_core.kernel.time import Clock, FrozenClock, SystemClock, default_clock

__all__ = [
    "ApplicationError",
    "BaseError",
    "Clock",
    "DomainError",
    "FrozenClock",
    "MessageFormatError",
    "SystemClock",
    "ValidationError",
    "default_clock",
]
