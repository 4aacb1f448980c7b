"""Observability – health check Result value object and ResultBuilder.

A :class:`Result` is the immutable outcome of one health evaluation. Build one
with the module factories::

    healthy()
    healthy("replication lag %dms", lag)
    unhealthy("disk full")
    unhealthy(exc)

or with :func:`builder` when details are needed::

    builder().unhealthy().with_detail("free_bytes", 0).build()

``duration`` is always ``0`` on a freshly built result. The check runner
returns a copy stamped with the measured duration (see :meth:`Result.with_duration`).
"""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime, timedelta
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from healthcheck_core.kernel.errors import MessageFormatError
from healthcheck_core.kernel.time import Clock, default_clock

DEFAULT_NESTED_DETAILS_NAME = "details"

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@dataclasses.dataclass(frozen=True)
class Result:
    """Outcome of a single health check evaluation.

    Equality and hashing consider ``healthy``, ``message``, ``error`` and
    ``time`` only; diagnostic details and ``duration`` never affect identity.

    ``details`` and ``nested_details`` are read-only views. ``None`` means no
    detail map was attached, which is different from an empty one.
    """

    healthy: bool
    message: str | None = None
    error: BaseException | None = None
    details: Mapping[str, Any] | None = dataclasses.field(default=None, compare=False)
    nested_details_name: str = dataclasses.field(
        default=DEFAULT_NESTED_DETAILS_NAME, compare=False
    )
    nested_details: Mapping[str, Any] | None = dataclasses.field(default=None, compare=False)
    time: int = dataclasses.field(default_factory=lambda: default_clock().time())
    duration: int = dataclasses.field(default=0, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "details", _freeze(self.details))
        object.__setattr__(self, "nested_details", _freeze(self.nested_details))

    @staticmethod
    def builder() -> ResultBuilder:
        return ResultBuilder()

    @property
    def timestamp(self) -> str:
        """``time`` as ``YYYY-MM-DDTHH:MM:SS.mmm+HH:MM``.

        Rendered in the local system time zone at the moment this property is
        read, not the zone in effect when the result was created. Only the
        instant is stored.
        """
        moment = _EPOCH + timedelta(milliseconds=self.time)
        return moment.astimezone().isoformat(timespec="milliseconds")

    def with_duration(self, duration: int) -> Result:
        """Return a copy carrying ``duration`` milliseconds; ``time`` is kept."""
        return dataclasses.replace(self, duration=duration)

    def __str__(self) -> str:
        parts = [f"isHealthy={self.healthy}"]
        if self.message is not None:
            parts.append(f"message={self.message}")
        if self.error is not None:
            parts.append(f"error={self.error!r}")
        parts.append(f"duration={self.duration}")
        parts.append(f"timestamp={self.timestamp}")
        parts.extend(_render_details(self.details, ""))
        parts.extend(_render_details(self.nested_details, f"{self.nested_details_name}."))
        return "Result{" + ", ".join(parts) + "}"


class ResultBuilder:
    """Mutable scratchpad for a :class:`Result`.

    Starts healthy, with empty detail maps, the nested group named
    ``"details"`` and the default clock. Every method returns the builder;
    when calls conflict the last one wins. :meth:`build` may be called any
    number of times, each call snapshotting the current state.

    Not safe for concurrent mutation.
    """

    def __init__(self) -> None:
        self._healthy = True
        self._message: str | None = None
        self._error: BaseException | None = None
        self._details: dict[str, Any] = {}
        self._nested_details_name = DEFAULT_NESTED_DETAILS_NAME
        self._nested_details: dict[str, Any] = {}
        self._clock: Clock = default_clock()

    def healthy(self) -> ResultBuilder:
        self._healthy = True
        return self

    def unhealthy(self, error: BaseException | None = None) -> ResultBuilder:
        """Mark unhealthy; with ``error`` also record it and use its description as message."""
        self._healthy = False
        if error is not None:
            self._error = error
            self._message = describe_error(error)
        return self

    def with_message(self, message: str, *args: Any) -> ResultBuilder:
        """Set the message; ``args`` are applied printf-style (``message % args``)."""
        self._message = format_message(message, args)
        return self

    def with_detail(self, key: str, value: Any) -> ResultBuilder:
        self._details[key] = value
        return self

    def with_nested_details_name(self, name: str) -> ResultBuilder:
        self._nested_details_name = name
        return self

    def with_nested_detail(self, key: str, value: Any) -> ResultBuilder:
        self._nested_details[key] = value
        return self

    def using_clock(self, clock: Clock) -> ResultBuilder:
        """Stamp built results from ``clock`` instead of the default clock."""
        self._clock = clock
        return self

    def build(self) -> Result:
        return Result(
            healthy=self._healthy,
            message=self._message,
            error=self._error,
            details=self._details,
            nested_details_name=self._nested_details_name,
            nested_details=self._nested_details,
            time=self._clock.time(),
        )


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def healthy(message: str | None = None, *args: Any, clock: Clock | None = None) -> Result:
    """Return a healthy :class:`Result`, optionally with a (formatted) message."""
    if message is not None:
        message = format_message(message, args)
    elif args:
        raise TypeError("format arguments given without a message")
    return Result(healthy=True, message=message, time=(clock or default_clock()).time())


def unhealthy(
    message: str | BaseException,
    *args: Any,
    clock: Clock | None = None,
) -> Result:
    """Return an unhealthy :class:`Result`.

    ``message`` is either a message (formatted with ``args`` when given) or
    the error raised while checking, in which case it is stored as ``error``
    and its description becomes the message.
    """
    stamp = (clock or default_clock()).time()
    if isinstance(message, BaseException):
        if args:
            raise TypeError("format arguments are not accepted with an error")
        return Result(healthy=False, message=describe_error(message), error=message, time=stamp)
    return Result(healthy=False, message=format_message(message, args), time=stamp)


def builder() -> ResultBuilder:
    """Return a new :class:`ResultBuilder` in its default state."""
    return ResultBuilder()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def format_message(template: str, args: tuple[Any, ...]) -> str:
    """Apply printf-style ``args`` to ``template``.

    Without ``args`` the template is returned untouched. A single mapping
    argument feeds ``%(name)s`` placeholders. Any mismatch raises
    :class:`~healthcheck_core.kernel.errors.MessageFormatError`.
    """
    if not args:
        return template
    values: Any = args[0] if len(args) == 1 and isinstance(args[0], Mapping) else args
    try:
        return template % values
    except (TypeError, ValueError, KeyError) as exc:
        raise MessageFormatError(template, args, cause=exc) from exc


def describe_error(error: BaseException) -> str | None:
    """Human-readable description of ``error``, ``None`` when it has none."""
    return str(error) or None


def _freeze(details: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    if details is None:
        return None
    return MappingProxyType(dict(details))


def _render_details(details: Mapping[str, Any] | None, prefix: str) -> Iterator[str]:
    if not details:
        return
    for key, value in details.items():
        yield f"{prefix}{key}={value}"


__all__ = [
    "DEFAULT_NESTED_DETAILS_NAME",
    "Result",
    "ResultBuilder",
    "builder",
    "describe_error",
    "format_message",
    "healthy",
    "unhealthy",
]
