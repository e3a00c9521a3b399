"""Trend, crossover and threshold analysis built on the indicators."""

from trend_engine.analysis.analyzer import (
    TrendAnalyzer,
    summarize_metric,
    trend_analysis,
)
from trend_engine.analysis.crossover import crossover_signal
from trend_engine.analysis.threshold import adaptive_threshold, classify_value
from trend_engine.analysis.trend import trend_direction

__all__ = [
    "TrendAnalyzer",
    "summarize_metric",
    "trend_analysis",
    "crossover_signal",
    "adaptive_threshold",
    "classify_value",
    "trend_direction",
]
