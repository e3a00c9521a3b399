"""Result models and engine configuration."""

from trend_engine.models.config import DEFAULT_CONFIG, TrendEngineConfig
from trend_engine.models.trend import (
    AdaptiveThreshold,
    CrossoverResult,
    CrossoverSignal,
    MetricTrend,
    SanitizedSeries,
    ThresholdBreach,
    TrendDirection,
    TrendReport,
    VolatilityRisk,
)

__all__ = [
    "DEFAULT_CONFIG",
    "TrendEngineConfig",
    "AdaptiveThreshold",
    "CrossoverResult",
    "CrossoverSignal",
    "MetricTrend",
    "SanitizedSeries",
    "ThresholdBreach",
    "TrendDirection",
    "TrendReport",
    "VolatilityRisk",
]
