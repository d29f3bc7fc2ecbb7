# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Base abstractions shared by the facade and its clients."""

from datetime import datetime, timezone
from typing import Any, Callable, Mapping, NamedTuple, Protocol, Sequence, TypeAlias, runtime_checkable


class MetricEvent(NamedTuple):
    """A single metric event handed to the transport.

    Created per call and discarded after dispatch. Being a tuple, an event
    can be splatted straight into a sender's positional arguments.
    """

    name: str
    value: float
    agg_type: str
    meta: Mapping[str, Any] | None
    time: str
    extra: Mapping[str, Any]


@runtime_checkable
class MetricClient(Protocol):
    """Protocol for clients that transmit metric events to a backend."""

    def send(
        self,
        name: str,
        value: float,
        agg_type: str,
        meta: Mapping[str, Any] | None,
        time: str,
        extra: Mapping[str, Any],
    ) -> Any: ...


SendFunction: TypeAlias = Callable[[str, float, str, Mapping[str, Any] | None, str, Mapping[str, Any]], Any]
FormatArgs: TypeAlias = Callable[..., Sequence[Any]]
Clock: TypeAlias = Callable[[], datetime]


def _system_clock() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso(clock: Clock | None = None) -> str:
    """Return the current instant as an ISO-8601 UTC string.

    Uses millisecond precision and a ``Z`` suffix, e.g. ``2025-01-01T12:00:00.000Z``.

    Args:
        clock: Optional clock to read instead of the system clock
    """
    now = (clock or _system_clock)()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
