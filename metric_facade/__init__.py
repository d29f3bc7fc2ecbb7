# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Metric facade.

A small client-side library that turns semantic metric calls (increment,
gauge, timing, ...) into uniform events and forwards them to a pluggable
client.

Example:
    >>> from metric_facade import Metric, NoOpMetricClient
    >>>
    >>> client = NoOpMetricClient()
    >>> metric = Metric(client=client)
    >>> metric.increment("requests")
    >>> metric.gauge("cpu_pct", 42.5, meta={"host": "web-1"})
"""

__version__ = "0.1.0"

from .agg_type import DEFAULT_AGG_TYPES, AggType, resolve_agg_types
from .base import MetricClient, MetricEvent, utc_now_iso
from .config import DEFAULT_CONFIG, MetricConfig, merge_config
from .factory import create_metric, create_metric_client
from .logging_client import LoggingMetricClient
from .metric import Metric
from .noop_client import NoOpMetricClient

# prometheus_metrics imports without prometheus_client; the client raises ImportError on construction
from .prometheus_metrics import PROMETHEUS_AVAILABLE, PrometheusMetricClient

__all__ = [
    # Version
    "__version__",
    # Facade
    "Metric",
    "MetricConfig",
    "DEFAULT_CONFIG",
    "merge_config",
    # Aggregation types
    "AggType",
    "DEFAULT_AGG_TYPES",
    "resolve_agg_types",
    # Clients
    "MetricClient",
    "MetricEvent",
    "NoOpMetricClient",
    "LoggingMetricClient",
    "create_metric",
    "create_metric_client",
    "utc_now_iso",
]

# Only export PrometheusMetricClient if prometheus_client is available
if PROMETHEUS_AVAILABLE:
    __all__.append("PrometheusMetricClient")
