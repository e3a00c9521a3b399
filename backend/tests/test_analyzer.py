"""Tests for the trend analysis orchestrator."""

import logging
import math
from unittest.mock import patch

import pytest

from trend_engine.analysis import TrendAnalyzer, summarize_metric, trend_analysis
from trend_engine.models import (
    CrossoverSignal,
    MetricTrend,
    ThresholdBreach,
    TrendDirection,
    TrendEngineConfig,
    TrendReport,
    VolatilityRisk,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

RISING = [float(i) for i in range(1, 31)]

# SMA(2) ends [1.0, 3.5] and SMA(3) ends [1.33, 2.67]: short crosses above long
REBOUND = [5, 4, 3, 2, 1, 1, 6]


# ---------------------------------------------------------------------------
# trend_analysis
# ---------------------------------------------------------------------------

class TestTrendAnalysis:
    """Tests for trend_analysis()."""

    def test_rising_series(self):
        report = trend_analysis(RISING)

        assert len(report.short_ma) == 30 - 7 + 1
        assert len(report.long_ma) == 30 - 21 + 1
        assert len(report.ema_short) == 30
        assert len(report.ema_long) == 30
        assert report.trend_direction == TrendDirection.UP
        assert report.volatility_score == 56
        # Short average is above the long one throughout: no crossover
        assert report.crossover_signal == CrossoverSignal.NEUTRAL
        assert report.confidence == 0

    def test_bullish_rebound(self):
        """gap = (3.5 - 2.667) / 2.667 = 0.3125 -> 60 + 31.25 -> 91."""
        report = trend_analysis(REBOUND, short_period=2, long_period=3)

        assert report.crossover_signal == CrossoverSignal.BULLISH
        assert report.confidence == 91

    def test_bearish_reversal(self):
        report = trend_analysis([1, 2, 3, 4, 5, 5, 0], short_period=2, long_period=3)
        assert report.crossover_signal == CrossoverSignal.BEARISH

    def test_too_short_for_long_window(self):
        """Long averages are empty, so no crossover can be detected."""
        report = trend_analysis([1, 2, 3, 4, 5, 6, 7, 8])

        assert len(report.short_ma) == 2
        assert report.long_ma == []
        assert report.ema_long == []
        assert report.crossover_signal == CrossoverSignal.NEUTRAL

    @pytest.mark.parametrize("series", [None, [], [math.nan] * 30, "abc", 7])
    def test_unusable_input_gives_default_report(self, series):
        assert trend_analysis(series) == TrendReport()

    def test_invalid_periods_degrade(self):
        report = trend_analysis(RISING, short_period=0, long_period=-5)

        assert report.short_ma == []
        assert report.long_ma == []
        assert report.crossover_signal == CrossoverSignal.NEUTRAL
        # Volatility still comes from the raw series
        assert report.volatility_score == 56

    def test_unexpected_failure_is_contained(self, caplog):
        """An internal error is logged and the default report returned."""
        with patch(
            "trend_engine.analysis.analyzer.sma",
            side_effect=RuntimeError("boom"),
        ):
            with caplog.at_level(logging.ERROR):
                report = trend_analysis(RISING)

        assert report == TrendReport()
        assert any("Trend analysis failed" in r.getMessage() for r in caplog.records)

    def test_all_numbers_finite(self):
        report = trend_analysis([1e-3, 5e6, math.inf, -2.5, 7, 8, 9, 10] * 4)
        for values in (report.short_ma, report.long_ma, report.ema_short, report.ema_long):
            assert all(math.isfinite(v) for v in values)

    def test_dashboard_serialization(self):
        """camelCase aliases match the dashboard contract."""
        payload = trend_analysis(RISING).model_dump(mode="json", by_alias=True)

        assert set(payload) == {
            "shortMA",
            "longMA",
            "emaShort",
            "emaLong",
            "trendDirection",
            "volatilityScore",
            "crossoverSignal",
            "confidence",
        }
        assert payload["trendDirection"] == "up"
        assert payload["crossoverSignal"] == "neutral"


# ---------------------------------------------------------------------------
# summarize_metric
# ---------------------------------------------------------------------------

class TestSummarizeMetric:
    """Tests for KPI trend summaries."""

    def test_flat_metric(self):
        summary = summarize_metric([10] * 14, period=7)

        assert summary.trend == TrendDirection.NEUTRAL
        assert summary.latest_average == pytest.approx(10)
        assert summary.points == 14

    def test_growing_metric(self):
        summary = summarize_metric([10, 12, 14, 16, 18, 20, 22, 24], period=3, precision=0)

        assert summary.trend == TrendDirection.UP
        assert summary.latest_average == round(summary.latest_average)

    @pytest.mark.parametrize("precision", [25, 2.5, -1])
    def test_unusual_precision_never_raises(self, precision):
        summary = summarize_metric([12345.6] * 10, period=7, precision=precision)

        assert summary.latest_average == pytest.approx(12345.6)
        assert summary.points == 10

    def test_not_enough_history(self):
        assert summarize_metric([1, 2], period=7) == MetricTrend()
        assert summarize_metric([], period=7).latest_average is None


# ---------------------------------------------------------------------------
# TrendAnalyzer
# ---------------------------------------------------------------------------

class TestTrendAnalyzer:
    """Tests for the configured analyzer facade."""

    def test_defaults_match_functions(self):
        analyzer = TrendAnalyzer()

        assert analyzer.analyze(RISING) == trend_analysis(RISING)
        assert analyzer.sma(RISING, 3) == trend_analysis(RISING, 3).short_ma

    def test_uses_config_windows(self):
        config = TrendEngineConfig(short_period=2, long_period=3)
        report = TrendAnalyzer(config).analyze(REBOUND)

        assert report.crossover_signal == CrossoverSignal.BULLISH

    def test_uses_injected_logger(self, caplog):
        log = logging.getLogger("tests.analyzer")
        analyzer = TrendAnalyzer(logger=log)

        with caplog.at_level(logging.WARNING, logger="tests.analyzer"):
            assert analyzer.ema([], 5) == []

        assert [r.name for r in caplog.records] == ["tests.analyzer"]

    def test_threshold_round_trip(self):
        analyzer = TrendAnalyzer()
        threshold = analyzer.adaptive_threshold([10] * 14)

        assert analyzer.classify_value(20, threshold) == ThresholdBreach.ABOVE
        assert analyzer.classify_value(10, threshold) == ThresholdBreach.WITHIN

    def test_volatility_helpers(self):
        analyzer = TrendAnalyzer()

        score = analyzer.volatility_score([1, 100])
        assert score == 98
        assert analyzer.volatility_risk(score) == VolatilityRisk.HIGH

    def test_other_calculators(self):
        analyzer = TrendAnalyzer()

        assert analyzer.wma([1, 2, 3], 3) == pytest.approx([14 / 6])
        assert analyzer.smoothed_sma([1, 2, 3, 4, 5, 6], 2, 2) == [2, 3, 4, 5]
        assert analyzer.dma([10, 20, 30], 0.5) == [10, 15, 22.5]
        assert analyzer.trend_direction([100, 103]) == TrendDirection.UP
        assert analyzer.crossover_signal([9, 11], [10, 10]).confidence == 70
        assert analyzer.summarize_metric([10] * 7).points == 7
