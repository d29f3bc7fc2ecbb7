# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Tests for metric configuration and timestamps."""

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from metric_facade import DEFAULT_CONFIG, MetricConfig, NoOpMetricClient, merge_config, utc_now_iso


class TestMergeConfig:
    """Tests for merge_config."""

    def test_defaults(self):
        """Test every option is unset by default."""
        config = merge_config()

        assert config == DEFAULT_CONFIG
        assert config.client is None
        assert config.format_args is None
        assert config.send is None
        assert config.agg_type is None
        assert config.clock is None

    def test_mapping_over_defaults(self):
        """Test mapping values are layered over the defaults."""
        client = NoOpMetricClient()

        config = merge_config({"client": client})

        assert config.client is client
        assert config.send is None

    def test_camel_case_aliases(self):
        """Test formatArgs and aggType map onto the snake_case fields."""
        def fmt(*args):
            return args
        agg = {"SUM": "s"}

        config = merge_config({"formatArgs": fmt, "aggType": agg})

        assert config.format_args is fmt
        assert config.agg_type is agg

    def test_keyword_overrides_win(self):
        """Test keyword overrides replace values from the config argument."""
        first = NoOpMetricClient()
        second = NoOpMetricClient()

        config = merge_config(MetricConfig(client=first), client=second)

        assert config.client is second

    def test_config_object_not_mutated(self):
        """Test merging returns a new config."""
        original = MetricConfig()

        merged = merge_config(original, send=print)

        assert original.send is None
        assert merged.send is print

    def test_unknown_key_rejected(self):
        """Test unknown option names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown metric config option: transport"):
            merge_config({"transport": None})

    def test_config_is_immutable(self):
        """Test a config cannot be modified after creation."""
        config = merge_config()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.client = NoOpMetricClient()  # type: ignore[misc]


class TestUtcNowIso:
    """Tests for utc_now_iso."""

    def test_format(self):
        """Test millisecond precision with a Z suffix."""
        clock = lambda: datetime(2025, 3, 4, 5, 6, 7, 891234, tzinfo=timezone.utc)

        assert utc_now_iso(clock) == "2025-03-04T05:06:07.891Z"

    def test_converts_to_utc(self):
        """Test aware datetimes in other zones are converted to UTC."""
        plus_two = timezone(timedelta(hours=2))
        clock = lambda: datetime(2025, 3, 4, 12, 0, 0, tzinfo=plus_two)

        assert utc_now_iso(clock) == "2025-03-04T10:00:00.000Z"

    def test_naive_treated_as_utc(self):
        """Test naive datetimes are assumed to be UTC."""
        clock = lambda: datetime(2025, 3, 4, 12, 0, 0)

        assert utc_now_iso(clock) == "2025-03-04T12:00:00.000Z"

    def test_system_clock(self):
        """Test the default clock reads the current time."""
        value = utc_now_iso()

        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        assert abs((datetime.now(timezone.utc) - parsed).total_seconds()) < 0.3
