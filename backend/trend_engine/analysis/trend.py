"""Trend direction classification."""

from __future__ import annotations

import logging
from typing import Any

from trend_engine.indicators.sanitize import is_valid_period, sanitize
from trend_engine.models.config import DEFAULT_CONFIG, TrendEngineConfig
from trend_engine.models.trend import TrendDirection

logger = logging.getLogger(__name__)


def trend_direction(
    series: Any,
    lookback: int | None = None,
    config: TrendEngineConfig | None = None,
    *,
    log: logging.Logger | None = None,
) -> TrendDirection:
    """
    Classify the latest movement of a series as up, down or neutral.

    Only the last two valid points are compared. A change no larger than
    |previous| * config.noise_threshold is treated as noise.

    Args:
        series: Sequence of values, typically an EMA
        lookback: Minimum number of valid points required (default 2)
        config: Engine configuration
        log: Logger for diagnostics

    Returns:
        TrendDirection
    """
    config = config or DEFAULT_CONFIG
    log = log or logger
    if lookback is None:
        lookback = config.lookback

    if not is_valid_period(lookback):
        log.warning(f"Trend direction: invalid lookback {lookback!r}")
        return TrendDirection.NEUTRAL

    values = sanitize(series)
    if len(values) < max(lookback, 2):
        return TrendDirection.NEUTRAL

    previous, current = values[-2], values[-1]
    difference = current - previous
    threshold = abs(previous) * config.noise_threshold

    if abs(difference) <= threshold:
        return TrendDirection.NEUTRAL
    return TrendDirection.UP if difference > 0 else TrendDirection.DOWN
