"""Tests for volatility scoring."""

import logging
import math

import pytest

from trend_engine.indicators import round_half_up, volatility_risk, volatility_score
from trend_engine.models import TrendEngineConfig, VolatilityRisk


class TestVolatilityScore:
    """Tests for volatility_score()."""

    def test_constant_series_is_zero(self):
        assert volatility_score([42] * 10) == 0

    def test_two_points(self):
        """stddev 5 over mean 15 -> 33.3 -> 33."""
        assert volatility_score([10, 20]) == 33

    def test_linear_series(self):
        """Population stddev of 1..30 is ~8.655, mean 15.5 -> 55.8 -> 56."""
        assert volatility_score(list(range(1, 31))) == 56

    def test_capped_at_100(self):
        assert volatility_score([1, 1000]) == 100
        assert volatility_score([0.001, 1000, -999]) == 100

    def test_zero_mean_scores_zero(self):
        assert volatility_score([-1, 1]) == 0
        assert volatility_score([0, 0, 0]) == 0

    def test_negative_mean_uses_absolute_value(self):
        assert volatility_score([-10, -20]) == 33

    def test_ignores_invalid_values(self):
        assert volatility_score([10, math.nan, 20, None]) == 33

    @pytest.mark.parametrize("series", [None, [], [5], [5, math.nan], "abc"])
    def test_insufficient_points(self, series):
        assert volatility_score(series) == 0

    def test_large_values_do_not_overflow(self):
        """Deviations are scaled by the mean before squaring."""
        assert volatility_score([1e200, 3e200]) == 50
        assert volatility_score([1.7e308, 1.7e308, 1.7e308]) == 0

    def test_large_values_log_nothing(self, caplog):
        with caplog.at_level(logging.WARNING):
            volatility_score([1e200, 3e200])
        assert caplog.records == []

    def test_tiny_mean_hits_cap(self):
        """A mean near zero makes relative dispersion unrepresentable."""
        assert volatility_score([-1e300, 1e300, 1e-300]) == 100

    def test_custom_cap(self):
        config = TrendEngineConfig(volatility_cap=50)
        assert volatility_score([1, 100], config) == 50
        assert volatility_score([10, 20], config) == 33


class TestVolatilityRisk:
    """Tests for risk banding."""

    @pytest.mark.parametrize(
        "score, expected",
        [
            (0, VolatilityRisk.LOW),
            (20, VolatilityRisk.LOW),
            (21, VolatilityRisk.MEDIUM),
            (50, VolatilityRisk.MEDIUM),
            (51, VolatilityRisk.HIGH),
            (100, VolatilityRisk.HIGH),
        ],
    )
    def test_default_bands(self, score, expected):
        assert volatility_risk(score) == expected

    def test_custom_bands(self):
        config = TrendEngineConfig(low_risk_max=5, medium_risk_max=10)
        assert volatility_risk(8, config) == VolatilityRisk.MEDIUM
        assert volatility_risk(11, config) == VolatilityRisk.HIGH


class TestRoundHalfUp:
    """Tests for dashboard-style rounding."""

    def test_halves_round_away_from_zero(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(-2.5) == -3

    def test_large_values_pass_through(self):
        assert round_half_up(1e300, 2) == 1e300

    def test_precision_beyond_decimal_context(self):
        """Too many digits for the decimal context leaves the value as is."""
        assert round_half_up(12345.6, 25) == 12345.6

    @pytest.mark.parametrize("places", [1.5, -1, "2", None, True])
    def test_invalid_places_leave_value_unrounded(self, places):
        assert round_half_up(2.345, places) == 2.345
