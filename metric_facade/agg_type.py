# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Aggregation types understood by the event-collection backend."""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class AggType(str, Enum):
    """Tells the backend how to combine repeated values for one metric name."""

    SUM = "sum"
    MIN = "min"
    MAX = "max"
    MEAN = "mean"
    TIMING = "timing"
    GAUGE = "gauge"
    UNIQUE = "unique"


DEFAULT_AGG_TYPES: Mapping[str, str] = MappingProxyType(
    {member.name: member.value for member in AggType}
)


def _normalize_key(key: Any) -> str:
    if isinstance(key, AggType):
        return key.name
    return str(key).upper()


def resolve_agg_types(override: Mapping[Any, str] | None = None) -> Mapping[str, str]:
    """Build the aggregation tag table a facade uses for its lifetime.

    Args:
        override: Optional mapping from aggregation key (``"SUM"``, ``AggType.SUM``, ...)
            to the transport-level tag string. Must cover exactly the built-in keys.

    Returns:
        Read-only mapping keyed by upper-case aggregation name

    Raises:
        ValueError: If the override is missing keys or carries unknown ones
        TypeError: If a tag is not a string
    """
    if override is None:
        return DEFAULT_AGG_TYPES

    table = {_normalize_key(key): tag for key, tag in override.items()}

    missing = set(DEFAULT_AGG_TYPES) - set(table)
    unknown = set(table) - set(DEFAULT_AGG_TYPES)
    if missing or unknown:
        raise ValueError(
            f"Invalid aggregation type override. Missing keys: {sorted(missing)}, "
            f"unknown keys: {sorted(unknown)}. Expected exactly {sorted(DEFAULT_AGG_TYPES)}"
        )

    for key, tag in table.items():
        if not isinstance(tag, str):
            raise TypeError(f"Aggregation tag for {key} must be a string, got {type(tag).__name__}")

    return MappingProxyType(table)
