"""Short/long moving average crossover detection.

- Short MA crosses above long MA -> BULLISH
- Short MA crosses below long MA -> BEARISH

Confidence grows with the relative gap between the two averages at the
latest point: min(max_confidence, base_confidence + gap * 100).
"""

from __future__ import annotations

import logging
import math
from typing import Any

from trend_engine.indicators.sanitize import sanitize
from trend_engine.indicators.volatility import round_half_up
from trend_engine.models.config import DEFAULT_CONFIG, TrendEngineConfig
from trend_engine.models.trend import CrossoverResult, CrossoverSignal

logger = logging.getLogger(__name__)


def _confidence(
    short_current: float,
    long_current: float,
    config: TrendEngineConfig,
) -> int:
    if long_current == 0:
        gap = 0.0
    else:
        gap = abs(short_current - long_current) / abs(long_current)

    confidence = config.crossover_base_confidence + gap * 100
    if not math.isfinite(confidence):
        confidence = config.crossover_max_confidence
    return int(round_half_up(min(config.crossover_max_confidence, confidence)))


def crossover_signal(
    short_series: Any,
    long_series: Any,
    config: TrendEngineConfig | None = None,
    *,
    log: logging.Logger | None = None,
) -> CrossoverResult:
    """
    Detect a crossover between the last two points of two averages.

    Args:
        short_series: Short-period moving average
        long_series: Long-period moving average
        config: Engine configuration
        log: Logger for diagnostics

    Returns:
        CrossoverResult; NEUTRAL with confidence 0 when either series has
        fewer than 2 valid points or no crossover happened
    """
    config = config or DEFAULT_CONFIG
    log = log or logger

    short_values = sanitize(short_series)
    long_values = sanitize(long_series)
    if len(short_values) < 2 or len(long_values) < 2:
        log.debug(
            f"Crossover: need 2 points per series, got "
            f"{len(short_values)} short / {len(long_values)} long"
        )
        return CrossoverResult()

    short_prev, short_curr = short_values[-2], short_values[-1]
    long_prev, long_curr = long_values[-2], long_values[-1]

    if short_prev <= long_prev and short_curr > long_curr:
        signal = CrossoverSignal.BULLISH
    elif short_prev >= long_prev and short_curr < long_curr:
        signal = CrossoverSignal.BEARISH
    else:
        return CrossoverResult()

    return CrossoverResult(
        signal=signal,
        confidence=_confidence(short_curr, long_curr, config),
    )
