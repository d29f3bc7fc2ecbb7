# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""No-op metric client for testing and local development."""

import logging
from typing import Any, List, Mapping, Optional

from .agg_type import AggType
from .base import MetricEvent

logger = logging.getLogger(__name__)


class NoOpMetricClient:
    """Metric client that keeps events in memory instead of sending them.

    Useful for:
    - Testing and local development
    - Environments where metrics delivery is not needed
    - Debugging metrics instrumentation
    """

    def __init__(self, **kwargs):
        """Initialize no-op metric client.

        Args:
            **kwargs: Ignored (for compatibility with factory method)
        """
        self.events: List[MetricEvent] = []

    def send(
        self,
        name: str,
        value: float,
        agg_type: str,
        meta: Optional[Mapping[str, Any]],
        time: str,
        extra: Mapping[str, Any],
    ) -> None:
        """Store the event in memory."""
        self.events.append(MetricEvent(name, value, agg_type, meta, time, extra))
        logger.debug(f"NoOpMetricClient: {agg_type} {name} value {value} at {time} with meta {meta}")

    def clear(self) -> None:
        """Clear all stored events (useful for testing)."""
        self.events.clear()

    def get_events(self, name: Optional[str] = None, agg_type: Optional[str] = None) -> List[MetricEvent]:
        """Get stored events, optionally filtered by name and aggregation tag."""
        return [
            event for event in self.events
            if (name is None or event.name == name) and (agg_type is None or event.agg_type == agg_type)
        ]

    def get_values(self, name: str, agg_type: Optional[str] = None) -> List[float]:
        """Get all values recorded for a metric."""
        return [event.value for event in self.get_events(name, agg_type)]

    def get_total(self, name: str, agg_type: str = AggType.SUM.value) -> float:
        """Get the running sum of a counter.

        Args:
            name: Name of the counter metric
            agg_type: Tag counters are sent with (override when using a custom tag table)

        Returns:
            Sum of all values sent with the given tag
        """
        return sum(self.get_values(name, agg_type), 0.0)

    def get_last_value(self, name: str, agg_type: Optional[str] = None) -> Optional[float]:
        """Get the most recent value of a metric, or None if it was never sent."""
        values = self.get_values(name, agg_type)
        return values[-1] if values else None
