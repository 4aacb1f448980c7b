"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── MessageFormatError
    └── ApplicationError     (application.py)
        └── ConfigError      (healthcheck_core.config.validation)
"""

from healthcheck_core.kernel.errors.application import ApplicationError
from healthcheck_core.kernel.errors.base import BaseError
from healthcheck_core.kernel.errors.domain import (
    DomainError,
    MessageFormatError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "MessageFormatError",
    "ValidationError",
]
