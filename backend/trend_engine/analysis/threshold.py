"""Adaptive anomaly thresholds around an EMA baseline."""

from __future__ import annotations

import logging
import math
from typing import Any

from trend_engine.indicators.moving_averages import ema
from trend_engine.indicators.sanitize import as_finite_float, sanitize
from trend_engine.indicators.volatility import round_half_up, volatility_score
from trend_engine.models.config import DEFAULT_CONFIG, TrendEngineConfig
from trend_engine.models.trend import AdaptiveThreshold, ThresholdBreach

logger = logging.getLogger(__name__)


def adaptive_threshold(
    series: Any,
    period: int | None = None,
    multiplier: float | None = None,
    config: TrendEngineConfig | None = None,
    *,
    log: logging.Logger | None = None,
) -> AdaptiveThreshold:
    """
    Derive anomaly bounds that follow the recent level of a series.

    baseline = last EMA(period) value
    upper    = baseline * multiplier
    lower    = baseline / multiplier
    confidence = max(min_confidence, 100 - volatility of last `period` points)

    Args:
        series: Sequence of observations
        period: EMA period (default 14)
        multiplier: Bound multiplier (default 1.25)
        config: Engine configuration
        log: Logger for diagnostics

    Returns:
        AdaptiveThreshold rounded to 2 decimals; all zeros with confidence 0
        when it cannot be computed
    """
    config = config or DEFAULT_CONFIG
    log = log or logger
    if period is None:
        period = config.threshold_period
    if multiplier is None:
        multiplier = config.threshold_multiplier

    factor = as_finite_float(multiplier)
    if factor is None or factor <= 0:
        log.warning(f"Adaptive threshold: invalid multiplier {multiplier!r}")
        return AdaptiveThreshold()

    values = sanitize(series)
    baseline_series = ema(values, period, log=log)
    if not baseline_series:
        return AdaptiveThreshold()

    baseline = baseline_series[-1]
    upper = baseline * factor
    lower = baseline / factor
    if not (math.isfinite(upper) and math.isfinite(lower)):
        log.warning("Adaptive threshold: bounds overflowed")
        return AdaptiveThreshold()

    volatility = volatility_score(values[-period:], config, log=log)
    confidence = max(config.threshold_min_confidence, 100 - volatility)

    return AdaptiveThreshold(
        baseline=round_half_up(baseline, 2),
        upper_threshold=round_half_up(upper, 2),
        lower_threshold=round_half_up(lower, 2),
        confidence=int(round_half_up(confidence)),
    )


def classify_value(value: Any, threshold: AdaptiveThreshold) -> ThresholdBreach:
    """
    Place an observation relative to adaptive bounds.

    Uncomputable thresholds and non-finite observations never flag.
    """
    observed = as_finite_float(value)
    if observed is None or threshold.is_empty:
        return ThresholdBreach.WITHIN

    # A negative baseline puts the "upper" bound below the "lower" one
    high = max(threshold.upper_threshold, threshold.lower_threshold)
    low = min(threshold.upper_threshold, threshold.lower_threshold)
    if observed > high:
        return ThresholdBreach.ABOVE
    if observed < low:
        return ThresholdBreach.BELOW
    return ThresholdBreach.WITHIN
