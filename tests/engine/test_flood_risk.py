"""Tests for flood risk tiering."""

import math

import pytest

from parkwatch.engine.flood_risk import (
    FloodTier,
    feature_flood_zone,
    flood_tier,
    tier_color,
    zone_risk,
    zone_tier,
)


class TestFloodTier:
    @pytest.mark.parametrize("risk,expected", [
        (1, FloodTier.GREEN),
        (0, FloodTier.GREEN),
        (1.9, FloodTier.GREEN),
        (2, FloodTier.YELLOW),
        ("2", FloodTier.YELLOW),
        (3, FloodTier.RED),
        (5, FloodTier.RED),
    ])
    def test_thresholds(self, risk, expected):
        assert flood_tier(risk) == expected

    @pytest.mark.parametrize("risk", [None, "", "high", math.nan, math.inf])
    def test_unknown_is_conservative(self, risk):
        assert flood_tier(risk) == FloodTier.YELLOW


class TestTierColor:
    def test_known_tiers(self):
        assert tier_color(FloodTier.GREEN) == "#22c55e"
        assert tier_color("red") == "#ef4444"

    def test_unknown_falls_back_to_yellow(self):
        assert tier_color("purple") == "#eab308"
        assert tier_color(None) == "#eab308"


class TestZoneRisk:
    def test_known_zones(self):
        assert zone_risk("VE") == 5
        assert zone_risk("AE") == 4
        assert zone_risk(" ae ") == 4
        assert zone_risk("X") == 1

    def test_unknown_zone(self):
        assert zone_risk("OPEN WATER") is None
        assert zone_risk(None) is None

    def test_zone_tiers(self):
        assert zone_tier("AE") == FloodTier.RED
        assert zone_tier("X500") == FloodTier.YELLOW
        assert zone_tier("X") == FloodTier.GREEN
        assert zone_tier(None) == FloodTier.YELLOW


class TestFeatureFloodZone:
    def test_reads_fld_zone(self):
        assert feature_flood_zone({"properties": {"FLD_ZONE": "AE"}}) == "AE"

    def test_x_with_0_2_pct_subtype_is_x500(self):
        props = {"FLD_ZONE": "X", "ZONE_SUBTY": "0.2 PCT ANNUAL CHANCE FLOOD HAZARD"}
        assert feature_flood_zone({"properties": props}) == "X500"

    def test_missing(self):
        assert feature_flood_zone(None) is None
        assert feature_flood_zone({"properties": None}) is None
        assert feature_flood_zone({"properties": {"FLD_ZONE": "  "}}) is None
