"""Trend analysis orchestration.

Composes the moving average calculators, trend classifier, volatility
scorer and crossover detector into a single TrendReport per series.
"""

from __future__ import annotations

import logging
from typing import Any

from trend_engine.analysis.crossover import crossover_signal
from trend_engine.analysis.threshold import adaptive_threshold, classify_value
from trend_engine.analysis.trend import trend_direction
from trend_engine.indicators.moving_averages import dma, ema, sma, smoothed_sma, wma
from trend_engine.indicators.volatility import (
    round_half_up,
    volatility_risk,
    volatility_score,
)
from trend_engine.models.config import DEFAULT_CONFIG, TrendEngineConfig
from trend_engine.models.trend import (
    AdaptiveThreshold,
    CrossoverResult,
    MetricTrend,
    ThresholdBreach,
    TrendDirection,
    TrendReport,
    VolatilityRisk,
)

logger = logging.getLogger(__name__)


def trend_analysis(
    series: Any,
    short_period: int | None = None,
    long_period: int | None = None,
    config: TrendEngineConfig | None = None,
    *,
    log: logging.Logger | None = None,
) -> TrendReport:
    """
    Build the full trend report for one series.

    - short/long SMA and EMA over the series
    - trend direction from the short EMA
    - volatility from the raw series
    - crossover signal from the short/long SMA

    Never raises: an unexpected failure is logged and yields the default
    (empty, neutral, zero) report.

    Args:
        series: Sequence of observations
        short_period: Short window (default 7)
        long_period: Long window (default 21)
        config: Engine configuration
        log: Logger for diagnostics

    Returns:
        TrendReport
    """
    config = config or DEFAULT_CONFIG
    log = log or logger
    if short_period is None:
        short_period = config.short_period
    if long_period is None:
        long_period = config.long_period

    try:
        short_ma = sma(series, short_period, log=log)
        long_ma = sma(series, long_period, log=log)
        ema_short = ema(series, short_period, log=log)
        ema_long = ema(series, long_period, log=log)

        crossover = crossover_signal(short_ma, long_ma, config, log=log)

        return TrendReport(
            short_ma=short_ma,
            long_ma=long_ma,
            ema_short=ema_short,
            ema_long=ema_long,
            trend_direction=trend_direction(ema_short, config=config, log=log),
            volatility_score=volatility_score(series, config, log=log),
            crossover_signal=crossover.signal,
            confidence=crossover.confidence,
        )
    except Exception:
        log.exception("Trend analysis failed, returning neutral report")
        return TrendReport()


def summarize_metric(
    series: Any,
    period: int = 7,
    precision: int = 1,
    config: TrendEngineConfig | None = None,
    *,
    log: logging.Logger | None = None,
) -> MetricTrend:
    """
    Summarize a KPI history as its latest EMA value and direction.

    Used to enrich dashboard KPI cards (e.g. 14 days of order counts with
    a 7-day EMA). latest_average is None when the EMA cannot be computed.
    """
    log = log or logger
    smoothed = ema(series, period, log=log)
    if not smoothed:
        return MetricTrend()

    return MetricTrend(
        trend=trend_direction(smoothed, config=config, log=log),
        latest_average=round_half_up(smoothed[-1], precision),
        points=len(smoothed),
    )


class TrendAnalyzer:
    """Trend engine bound to one configuration and logger.

    Every method is a pure calculation; instances hold no per-call state
    and can be shared between threads.
    """

    def __init__(
        self,
        config: TrendEngineConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.logger = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Moving averages
    # ------------------------------------------------------------------

    def sma(self, series: Any, period: int) -> list[float]:
        return sma(series, period, log=self.logger)

    def ema(self, series: Any, period: int) -> list[float]:
        return ema(series, period, log=self.logger)

    def smoothed_sma(self, series: Any, period: int, times: int = 1) -> list[float]:
        return smoothed_sma(series, period, times, log=self.logger)

    def wma(self, series: Any, period: int) -> list[float]:
        return wma(series, period, log=self.logger)

    def dma(
        self,
        series: Any,
        alpha: float | list[float],
        no_head: bool = False,
    ) -> list[float]:
        return dma(series, alpha, no_head, log=self.logger)

    # ------------------------------------------------------------------
    # Signals
    # ------------------------------------------------------------------

    def trend_direction(self, series: Any, lookback: int | None = None) -> TrendDirection:
        return trend_direction(series, lookback, self.config, log=self.logger)

    def volatility_score(self, series: Any) -> int:
        return volatility_score(series, self.config, log=self.logger)

    def volatility_risk(self, score: float) -> VolatilityRisk:
        return volatility_risk(score, self.config)

    def crossover_signal(self, short_series: Any, long_series: Any) -> CrossoverResult:
        return crossover_signal(short_series, long_series, self.config, log=self.logger)

    def adaptive_threshold(
        self,
        series: Any,
        period: int | None = None,
        multiplier: float | None = None,
    ) -> AdaptiveThreshold:
        return adaptive_threshold(
            series, period, multiplier, self.config, log=self.logger
        )

    def classify_value(self, value: Any, threshold: AdaptiveThreshold) -> ThresholdBreach:
        return classify_value(value, threshold)

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    def analyze(
        self,
        series: Any,
        short_period: int | None = None,
        long_period: int | None = None,
    ) -> TrendReport:
        """Build the full TrendReport for a series."""
        return trend_analysis(
            series, short_period, long_period, self.config, log=self.logger
        )

    def summarize_metric(
        self,
        series: Any,
        period: int = 7,
        precision: int = 1,
    ) -> MetricTrend:
        return summarize_metric(
            series, period, precision, self.config, log=self.logger
        )
