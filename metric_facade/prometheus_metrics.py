# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Prometheus-backed metric client."""

import logging
from typing import Any, Mapping, Optional

from .agg_type import resolve_agg_types

logger = logging.getLogger(__name__)

# Import prometheus_client with graceful fallback
try:
    from prometheus_client import REGISTRY, CollectorRegistry, Gauge, Histogram, Summary
    PROMETHEUS_AVAILABLE = True
except ImportError:
    PROMETHEUS_AVAILABLE = False
    logger.warning("prometheus_client not installed. Install with: pip install prometheus-client")


class PrometheusMetricClient:
    """Metric client that records events into Prometheus instruments.

    Aggregation tags map onto instruments as follows:

    - SUM: gauge ``<name>_total`` incremented by the value (a running sum that
      can go down, since ``decrement`` sends negative values)
    - GAUGE: gauge ``<name>`` set to the value
    - MIN / MAX: gauges ``<name>_min`` / ``<name>_max`` holding the extreme seen
    - MEAN: summary ``<name>``
    - TIMING: histogram ``<name>``
    - UNIQUE: gauge ``<name>_unique`` set to the number of distinct values seen

    Event ``meta`` becomes the label set. All calls to the same metric name
    must use consistent meta keys, otherwise Prometheus rejects the metric.

    UNIQUE keeps every distinct value seen for each label set in memory for
    the lifetime of the client, so memory grows with the number of distinct
    values and label sets. Prefer low-cardinality values for unique metrics.

    Note: Requires prometheus_client to be installed.
    Install with: pip install prometheus-client
    """

    def __init__(
        self,
        registry: Optional['CollectorRegistry'] = None,
        namespace: str = "metric_facade",
        raise_on_error: bool = False,
        agg_types: Mapping[str, str] | None = None,
    ):
        """Initialize Prometheus metric client.

        Args:
            registry: Prometheus registry (uses the global default registry if None)
            namespace: Namespace prefix for all metrics (default: "metric_facade")
            raise_on_error: If True, raise exceptions on metric errors (useful for testing).
                           If False, log errors and continue (default, safer for production)
            agg_types: Aggregation tag table the facade was configured with, when it
                       overrides the built-in tags
        """
        if not PROMETHEUS_AVAILABLE:
            raise ImportError(
                "prometheus_client is required for PrometheusMetricClient. "
                "Install with: pip install prometheus-client"
            )

        self.registry = registry if registry is not None else REGISTRY
        self.namespace = namespace
        self.raise_on_error = raise_on_error
        self._tag_to_key = {tag: key for key, tag in resolve_agg_types(agg_types).items()}
        self._instruments: dict[tuple[str, str, tuple[str, ...]], Any] = {}
        self._extremes: dict[tuple[str, str, tuple[str, ...], tuple[str, ...]], float] = {}
        self._uniques: dict[tuple[str, tuple[str, ...], tuple[str, ...]], set] = {}
        self._metrics_errors_count = 0

    def _get_or_create(self, kind: type, name: str, labelnames: tuple[str, ...]) -> Any:
        cache_key = (kind.__name__, name, labelnames)
        if cache_key not in self._instruments:
            self._instruments[cache_key] = kind(
                name=name,
                documentation=f"{kind.__name__} metric: {name}",
                labelnames=labelnames,
                namespace=self.namespace,
                registry=self.registry,
            )
        return self._instruments[cache_key]

    @staticmethod
    def _bind(instrument: Any, labels: dict[str, str]) -> Any:
        return instrument.labels(**labels) if labels else instrument

    def send(
        self,
        name: str,
        value: float,
        agg_type: str,
        meta: Mapping[str, Any] | None,
        time: str,
        extra: Mapping[str, Any],
    ) -> None:
        """Record a metric event.

        Raises:
            ValueError: If ``agg_type`` is not a known aggregation tag
        """
        key = self._tag_to_key.get(agg_type)
        if key is None:
            raise ValueError(f"Unknown aggregation type: {agg_type}")

        labels = {str(k): str(v) for k, v in (meta or {}).items()}
        labelnames = tuple(sorted(labels))
        series = tuple(labels[label] for label in labelnames)

        try:
            if key == "SUM":
                self._bind(self._get_or_create(Gauge, f"{name}_total", labelnames), labels).inc(value)
            elif key == "GAUGE":
                self._bind(self._get_or_create(Gauge, name, labelnames), labels).set(value)
            elif key in ("MIN", "MAX"):
                self._record_extreme(key, name, value, labelnames, labels, series)
            elif key == "MEAN":
                self._bind(self._get_or_create(Summary, name, labelnames), labels).observe(value)
            elif key == "TIMING":
                self._bind(self._get_or_create(Histogram, name, labelnames), labels).observe(value)
            else:
                seen = self._uniques.setdefault((name, labelnames, series), set())
                seen.add(value)
                self._bind(self._get_or_create(Gauge, f"{name}_unique", labelnames), labels).set(len(seen))
            logger.debug(f"PrometheusMetricClient: {agg_type} {name} value {value} with labels {labels}")
        except Exception as e:
            self._metrics_errors_count += 1
            logger.error(f"Failed to record {agg_type} metric {name}: {e}")
            if self.raise_on_error:
                raise

    def _record_extreme(
        self,
        key: str,
        name: str,
        value: float,
        labelnames: tuple[str, ...],
        labels: dict[str, str],
        series: tuple[str, ...],
    ) -> None:
        suffix = key.lower()
        state_key = (suffix, name, labelnames, series)
        current = self._extremes.get(state_key)
        if current is not None:
            if key == "MIN" and value >= current:
                return
            if key == "MAX" and value <= current:
                return
        self._extremes[state_key] = value
        self._bind(self._get_or_create(Gauge, f"{name}_{suffix}", labelnames), labels).set(value)

    def get_errors_count(self) -> int:
        """Get the count of metrics recording errors."""
        return self._metrics_errors_count
