# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Factory functions for creating metric clients and facades."""

import logging
import os
from typing import Any, Mapping, Optional

from .base import MetricClient
from .config import MetricConfig, merge_config
from .metric import Metric

logger = logging.getLogger(__name__)


def create_metric_client(backend: Optional[str] = None, **kwargs: Any) -> MetricClient:
    """Create a metric client based on backend type.

    Supported backends:
    - "noop": In-memory client for testing
    - "logging": Structured JSON log records via stdlib logging
    - "prometheus": Prometheus instruments (requires prometheus-client)

    Args:
        backend: Backend name, or None to read METRIC_CLIENT_BACKEND (default: "noop")
        **kwargs: Additional backend-specific arguments

    Returns:
        Client exposing ``send``

    Raises:
        ValueError: If backend type is unknown
        ImportError: If required packages for the backend are not installed
    """
    if backend is None:
        backend = os.getenv("METRIC_CLIENT_BACKEND", "noop")

    backend = backend.lower()
    logger.debug(f"Creating metric client for backend {backend}")

    if backend == "noop":
        from .noop_client import NoOpMetricClient
        return NoOpMetricClient(**kwargs)
    elif backend == "logging":
        from .logging_client import LoggingMetricClient
        return LoggingMetricClient(**kwargs)
    elif backend == "prometheus":
        from .prometheus_metrics import PrometheusMetricClient
        return PrometheusMetricClient(**kwargs)
    else:
        raise ValueError(f"Unknown metric client backend: {backend}")


def create_metric(
    backend: Optional[str] = None,
    config: MetricConfig | Mapping[str, Any] | None = None,
    **client_kwargs: Any,
) -> Metric:
    """Create a metric facade wired to a newly created client.

    Args:
        backend: Backend name passed to :func:`create_metric_client`
        config: Other facade options (``format_args``, ``send``, ``agg_type``, ``clock``)
        **client_kwargs: Backend-specific arguments for the client

    Returns:
        Configured ``Metric`` instance
    """
    merged = merge_config(config)
    if backend is None:
        backend = os.getenv("METRIC_CLIENT_BACKEND", "noop")

    # The Prometheus client must understand the same tag table the facade sends
    if backend.lower() == "prometheus" and merged.agg_type is not None:
        client_kwargs.setdefault("agg_types", merged.agg_type)

    client = create_metric_client(backend, **client_kwargs)
    return Metric(merged, client=client)
