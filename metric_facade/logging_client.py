# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Metric client that writes events as structured JSON log records."""

import json
import logging
from typing import Any, Mapping


class LoggingMetricClient:
    """Metric client that emits each event through stdlib logging.

    The log message is the event serialized as JSON, and the event dict is
    also attached to the record as ``record.metric`` so handlers and caplog
    can inspect it.
    """

    _level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
    }

    def __init__(self, logger_name: str = "metric_facade.events", level: str = "INFO"):
        """Initialize logging metric client.

        Args:
            logger_name: Name of the stdlib logger events are written to
            level: Level events are logged at (DEBUG, INFO, WARNING, ERROR)
        """
        self.level = level.upper()
        if self.level not in self._level_map:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(self._level_map.keys())}")

        self.logger_name = logger_name
        self._logger = logging.getLogger(logger_name)

    def send(
        self,
        name: str,
        value: float,
        agg_type: str,
        meta: Mapping[str, Any] | None,
        time: str,
        extra: Mapping[str, Any],
    ) -> None:
        """Log a metric event."""
        entry = {
            "timestamp": time,
            "name": name,
            "value": value,
            "agg_type": agg_type,
            "meta": meta,
            "extra": extra,
        }
        self._logger.log(
            self._level_map[self.level],
            json.dumps(entry, default=str),
            extra={"metric": entry},
        )
