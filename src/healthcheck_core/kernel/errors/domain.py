"""Domain errors – mistakes in how a health check is defined."""

from __future__ import annotations

from typing import Any

from healthcheck_core.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class MessageFormatError(ValidationError):
    """A result message template did not accept its arguments.

    Raised eagerly by the result factories and the builder; a broken template
    is a bug in the check definition, never an unhealthy outcome.
    """

    default_code = "message_format_error"

    def __init__(
        self,
        template: str,
        args: tuple[Any, ...],
        *,
        cause: BaseException | None = None,
    ) -> None:
        reason = str(cause) if cause is not None else "invalid arguments"
        super().__init__(
            f"Cannot format message {template!r} with {len(args)} argument(s): {reason}",
            errors=[{"field": "message", "template": template, "reason": reason}],
            cause=cause,
        )
        self.template = template
        self.arguments = args


__all__ = ["DomainError", "MessageFormatError", "ValidationError"]
