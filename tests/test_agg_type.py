# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Tests for aggregation type resolution."""

import pytest

from metric_facade import DEFAULT_AGG_TYPES, AggType, resolve_agg_types


class TestDefaultAggTypes:
    """Tests for the built-in aggregation table."""

    def test_default_tags(self):
        """Test the built-in keys and tags."""
        assert dict(DEFAULT_AGG_TYPES) == {
            "SUM": "sum",
            "MIN": "min",
            "MAX": "max",
            "MEAN": "mean",
            "TIMING": "timing",
            "GAUGE": "gauge",
            "UNIQUE": "unique",
        }

    def test_default_table_is_frozen(self):
        """Test the built-in table cannot be modified."""
        with pytest.raises(TypeError):
            DEFAULT_AGG_TYPES["SUM"] = "total"  # type: ignore[index]

    def test_enum_members_are_strings(self):
        """Test AggType members compare equal to their tag strings."""
        assert AggType.GAUGE == "gauge"
        assert AggType("timing") is AggType.TIMING


class TestResolveAggTypes:
    """Tests for resolve_agg_types."""

    def test_none_returns_defaults(self):
        """Test no override yields the built-in table."""
        assert resolve_agg_types(None) is DEFAULT_AGG_TYPES

    def test_complete_override(self):
        """Test a complete override is accepted and frozen."""
        override = {key: f"x_{tag}" for key, tag in DEFAULT_AGG_TYPES.items()}

        table = resolve_agg_types(override)

        assert table["SUM"] == "x_sum"
        with pytest.raises(TypeError):
            table["SUM"] = "y"  # type: ignore[index]

    def test_override_is_copied(self):
        """Test later changes to the caller's mapping do not leak in."""
        override = dict(DEFAULT_AGG_TYPES)
        table = resolve_agg_types(override)

        override["SUM"] = "changed"

        assert table["SUM"] == "sum"

    def test_enum_and_lowercase_keys(self):
        """Test keys may be AggType members or lower-case names."""
        override = {AggType.SUM: "s", "min": "mn", "Max": "mx", "MEAN": "m",
                    "timing": "t", AggType.GAUGE: "g", "unique": "u"}

        table = resolve_agg_types(override)

        assert table["SUM"] == "s"
        assert table["MIN"] == "mn"
        assert table["MAX"] == "mx"

    def test_missing_keys_rejected(self):
        """Test an incomplete override names the missing keys."""
        override = dict(DEFAULT_AGG_TYPES)
        del override["UNIQUE"]

        with pytest.raises(ValueError, match="UNIQUE"):
            resolve_agg_types(override)

    def test_unknown_keys_rejected(self):
        """Test an override with extra keys is rejected."""
        override = dict(DEFAULT_AGG_TYPES, COUNT="count")

        with pytest.raises(ValueError, match="COUNT"):
            resolve_agg_types(override)

    def test_non_string_tag_rejected(self):
        """Test tags must be strings."""
        override = dict(DEFAULT_AGG_TYPES, SUM=1)

        with pytest.raises(TypeError, match="SUM"):
            resolve_agg_types(override)
