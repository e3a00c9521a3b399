"""Volatility scoring."""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

import numpy as np

from trend_engine.indicators.sanitize import is_valid_places, sanitize
from trend_engine.models.config import DEFAULT_CONFIG, TrendEngineConfig
from trend_engine.models.trend import VolatilityRisk

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int = 0) -> float:
    """Round with halves away from zero (dashboard rounding, not banker's)."""
    # Floats this large carry no fractional digits
    if not math.isfinite(value) or abs(value) >= 2**52:
        return float(value)
    if not is_valid_places(places):
        return float(value)

    exponent = Decimal(1).scaleb(-places)
    try:
        rounded = Decimal(str(float(value))).quantize(exponent, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # More digits than the decimal context holds; already exact enough
        return float(value)
    return float(rounded)


def volatility_score(
    series: Any,
    config: TrendEngineConfig | None = None,
    *,
    log: logging.Logger | None = None,
) -> int:
    """
    Score the relative dispersion of a series on a 0-100 scale.

    score = round(population_stddev / |mean| * 100), capped at
    config.volatility_cap. A zero mean scores 0.

    Args:
        series: Sequence of observations (invalid values are dropped)
        config: Engine configuration (defaults apply when None)
        log: Logger for diagnostics

    Returns:
        Integer volatility score, 0 when fewer than 2 valid points
    """
    config = config or DEFAULT_CONFIG
    log = log or logger

    values = sanitize(series)
    if len(values) < 2:
        return 0

    arr = np.asarray(values, dtype=np.float64)
    # Scale before summing so finite inputs cannot overflow the mean
    mean = float(np.sum(arr / len(arr)))
    if not math.isfinite(mean):
        log.warning("Volatility calculation: mean overflowed, scoring as 0")
        return 0

    if mean == 0:
        return 0

    with np.errstate(over="ignore", invalid="ignore"):
        relative_std = float(np.std(arr / abs(mean)))

    # Dispersion too large to represent is still far above the cap
    if not math.isfinite(relative_std):
        return int(round_half_up(config.volatility_cap))

    score = min(relative_std * 100, config.volatility_cap)
    return int(round_half_up(score))


def volatility_risk(
    score: float,
    config: TrendEngineConfig | None = None,
) -> VolatilityRisk:
    """Band a volatility score into low / medium / high risk."""
    config = config or DEFAULT_CONFIG
    if score <= config.low_risk_max:
        return VolatilityRisk.LOW
    if score <= config.medium_risk_max:
        return VolatilityRisk.MEDIUM
    return VolatilityRisk.HIGH
