# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Configuration for the metric facade."""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from .base import Clock, FormatArgs, MetricClient, SendFunction

# camelCase option names accepted alongside the field names
_ALIASES = {
    "formatArgs": "format_args",
    "aggType": "agg_type",
}


@dataclass(frozen=True)
class MetricConfig:
    """Options consumed once when a facade is created.

    Attributes:
        client: Client whose ``send`` transmits events to the backend
        format_args: Optional transform applied to the six event fields before
            dispatch. Called positionally; must return the positional arguments
            for the dispatch target.
        send: Optional function replacing client dispatch entirely
        agg_type: Optional mapping overriding the built-in aggregation tags.
            Must have the same keys as ``AggType``.
        clock: Optional clock used for default event timestamps
    """

    client: MetricClient | None = None
    format_args: FormatArgs | None = None
    send: SendFunction | None = None
    agg_type: Mapping[str, str] | None = None
    clock: Clock | None = None


DEFAULT_CONFIG = MetricConfig()

_FIELD_NAMES = frozenset(f.name for f in fields(MetricConfig))


def _normalize(options: Mapping[str, Any]) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    for key, value in options.items():
        name = _ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            raise ValueError(
                f"Unknown metric config option: {key}. Supported options: {sorted(_FIELD_NAMES)}"
            )
        normalized[name] = value
    return normalized


def merge_config(config: MetricConfig | Mapping[str, Any] | None = None, **overrides: Any) -> MetricConfig:
    """Layer caller-supplied options over the defaults.

    Args:
        config: A ``MetricConfig`` or a mapping of options (snake_case or camelCase keys)
        **overrides: Individual options; these win over ``config``

    Returns:
        A new immutable ``MetricConfig``

    Raises:
        ValueError: If an option name is not recognized
    """
    if isinstance(config, MetricConfig):
        base = config
    elif config is None:
        base = DEFAULT_CONFIG
    else:
        base = replace(DEFAULT_CONFIG, **_normalize(config))

    if overrides:
        base = replace(base, **_normalize(overrides))
    return base
