# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Metric facade that turns semantic calls into uniform metric events."""

import logging
import time as _time
from contextlib import contextmanager
from typing import Any, Iterator, Mapping

from .agg_type import DEFAULT_AGG_TYPES, resolve_agg_types
from .base import MetricEvent, utc_now_iso
from .config import MetricConfig, merge_config

logger = logging.getLogger(__name__)

# Default for meta; an explicit None is passed through to the transport
_UNSET: Any = object()


class Metric:
    """Facade for emitting metrics with fixed aggregation semantics.

    Every recording method resolves to a single ``send`` call carrying the
    metric name, value, aggregation tag, metadata, ISO-8601 time and extra
    payload. Transport is delegated to the configured ``send`` override or,
    when none is set, to ``client.send``. Return values of the transport are
    passed back untouched and failures are never intercepted.
    """

    AGG_TYPE: Mapping[str, str] = DEFAULT_AGG_TYPES

    def __init__(self, config: MetricConfig | Mapping[str, Any] | None = None, **overrides: Any):
        """Initialize the facade.

        Args:
            config: ``MetricConfig`` or mapping of options merged over the defaults
            **overrides: Individual options (``client``, ``format_args``, ``send``,
                ``agg_type``, ``clock``) merged last

        Raises:
            ValueError: If an option is unknown or the aggregation override is incomplete
            TypeError: If an aggregation tag is not a string
        """
        self.config = merge_config(config, **overrides)
        self.agg_type = resolve_agg_types(self.config.agg_type)

        if self.config.send is not None and self.config.client is not None:
            logger.warning("Metric: send override configured; client.send will not be used")

    def _now(self) -> str:
        return utc_now_iso(self.config.clock)

    def send(
        self,
        name: str,
        value: float,
        agg_type: str,
        meta: Mapping[str, Any] | None = _UNSET,
        time: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send a metric event to the configured transport.

        Args:
            name: Name of the metric
            value: Value for the event
            agg_type: Aggregation tag for the event
            meta: Metadata to attach to the event, or None (default: empty)
            time: ISO-8601 time of the event (default: now)
            extra: Extra data appended to the outgoing message (default: empty)

        Returns:
            Whatever the transport returns, often a pending-completion handle
        """
        event = MetricEvent(
            name,
            value,
            agg_type,
            {} if meta is _UNSET else meta,
            self._now() if time is None else time,
            {} if extra is None else extra,
        )

        args: Any = event
        if self.config.format_args is not None:
            args = self.config.format_args(*event)

        logger.debug(f"Metric: send {name} value {value} agg_type {agg_type}")

        if self.config.send is not None:
            return self.config.send(*args)
        return self.config.client.send(*args)  # type: ignore[union-attr]

    def increment(
        self,
        name: str,
        value: float = 1,
        meta: Mapping[str, Any] | None = _UNSET,
        time: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> Any:
        """Increment a counter.

        Args:
            name: Name of the metric
            value: Amount to increment by (default: 1)
            meta: Metadata to attach to the event
            time: ISO-8601 time of the event, defaults to now
            extra: Extra data appended to the outgoing message
        """
        return self.send(name, value, self.agg_type["SUM"], meta, time, extra)

    def decrement(
        self,
        name: str,
        value: float = 1,
        meta: Mapping[str, Any] | None = _UNSET,
        time: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> Any:
        """Decrement a counter by sending a negated increment.

        Args:
            name: Name of the metric
            value: Amount to decrement by (default: 1)
            meta: Metadata to attach to the event
            time: ISO-8601 time of the event, defaults to now
            extra: Extra data appended to the outgoing message
        """
        return self.increment(name, value * -1, meta, time, extra)

    def min(
        self,
        name: str,
        value: float,
        meta: Mapping[str, Any] | None = _UNSET,
        time: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> Any:
        """Track the minimum value."""
        return self.send(name, value, self.agg_type["MIN"], meta, time, extra)

    def max(
        self,
        name: str,
        value: float,
        meta: Mapping[str, Any] | None = _UNSET,
        time: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> Any:
        """Track the maximum value."""
        return self.send(name, value, self.agg_type["MAX"], meta, time, extra)

    def mean(
        self,
        name: str,
        value: float,
        meta: Mapping[str, Any] | None = _UNSET,
        time: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> Any:
        """Track the mean value."""
        return self.send(name, value, self.agg_type["MEAN"], meta, time, extra)

    def average(self, *args: Any, **kwargs: Any) -> None:
        """Deprecated alias for :meth:`mean`; the transport result is discarded."""
        self.mean(*args, **kwargs)

    def gauge(
        self,
        name: str,
        value: float,
        meta: Mapping[str, Any] | None = _UNSET,
        time: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> Any:
        """Set a gauge.

        A gauge is always set to the last value it was given; the backend
        enforces that, not this facade.
        """
        return self.send(name, value, self.agg_type["GAUGE"], meta, time, extra)

    def timing(
        self,
        name: str,
        value: float,
        meta: Mapping[str, Any] | None = _UNSET,
        time: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> Any:
        """Track the mean, standard deviation, min, max and count of durations."""
        return self.send(name, value, self.agg_type["TIMING"], meta, time, extra)

    def unique(
        self,
        name: str,
        value: float,
        meta: Mapping[str, Any] | None = _UNSET,
        time: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> Any:
        """Track the count of unique values."""
        return self.send(name, value, self.agg_type["UNIQUE"], meta, time, extra)

    @contextmanager
    def timer(
        self,
        name: str,
        meta: Mapping[str, Any] | None = _UNSET,
        extra: Mapping[str, Any] | None = None,
    ) -> Iterator[None]:
        """Time a block and record the elapsed milliseconds as a timing.

        The timing is recorded even if the block raises; the exception is re-raised.

        Example:
            >>> with metric.timer("db_query_ms", meta={"table": "users"}):
            ...     run_query()
        """
        started = _time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = (_time.perf_counter() - started) * 1000.0
            self.timing(name, elapsed_ms, meta, extra=extra)
