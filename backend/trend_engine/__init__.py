"""Trend, volatility and adaptive-threshold engine for dashboard metrics.

Pure numeric logic with no I/O: callers hand in raw metric histories
(inventory levels, cost variances, SLA percentages, order counts) and get
back structured signals ready for rendering or alerting.
"""

from trend_engine.analysis import (
    TrendAnalyzer,
    adaptive_threshold,
    classify_value,
    crossover_signal,
    summarize_metric,
    trend_analysis,
    trend_direction,
)
from trend_engine.indicators import (
    dma,
    ema,
    sanitize,
    sanitize_with_index,
    sma,
    smoothed_sma,
    volatility_risk,
    volatility_score,
    wma,
)
from trend_engine.models import (
    AdaptiveThreshold,
    CrossoverResult,
    CrossoverSignal,
    MetricTrend,
    SanitizedSeries,
    ThresholdBreach,
    TrendDirection,
    TrendEngineConfig,
    TrendReport,
    VolatilityRisk,
)

__all__ = [
    "TrendAnalyzer",
    "adaptive_threshold",
    "classify_value",
    "crossover_signal",
    "summarize_metric",
    "trend_analysis",
    "trend_direction",
    "dma",
    "ema",
    "sanitize",
    "sanitize_with_index",
    "sma",
    "smoothed_sma",
    "volatility_risk",
    "volatility_score",
    "wma",
    "AdaptiveThreshold",
    "CrossoverResult",
    "CrossoverSignal",
    "MetricTrend",
    "SanitizedSeries",
    "ThresholdBreach",
    "TrendDirection",
    "TrendEngineConfig",
    "TrendReport",
    "VolatilityRisk",
]
