"""Series sanitization, moving averages and volatility (pure math, no I/O)."""

from trend_engine.indicators.moving_averages import (
    dma,
    ema,
    sma,
    smoothed_sma,
    wma,
)
from trend_engine.indicators.sanitize import (
    as_finite_float,
    is_valid_period,
    sanitize,
    sanitize_with_index,
)
from trend_engine.indicators.volatility import (
    round_half_up,
    volatility_risk,
    volatility_score,
)

__all__ = [
    "dma",
    "ema",
    "sma",
    "smoothed_sma",
    "wma",
    "as_finite_float",
    "is_valid_period",
    "sanitize",
    "sanitize_with_index",
    "round_half_up",
    "volatility_risk",
    "volatility_score",
]
