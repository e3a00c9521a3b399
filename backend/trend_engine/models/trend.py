"""Trend analysis result models.

Field names are snake_case in Python; dashboards consume the camelCase
aliases via ``model_dump(by_alias=True)``.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TrendDirection(str, Enum):
    """Direction of the most recent movement in a series."""

    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


class CrossoverSignal(str, Enum):
    """Short/long moving average crossover signal."""

    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class VolatilityRisk(str, Enum):
    """Risk band for a volatility score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ThresholdBreach(str, Enum):
    """Position of an observation relative to adaptive bounds."""

    ABOVE = "above"
    BELOW = "below"
    WITHIN = "within"


class SanitizedSeries(NamedTuple):
    """Finite values of a series together with their original positions."""

    values: list[float]
    indices: list[int]


class _DashboardModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CrossoverResult(_DashboardModel):
    """Crossover signal and its heuristic confidence (0-100)."""

    signal: CrossoverSignal = CrossoverSignal.NEUTRAL
    confidence: int = Field(default=0, ge=0, le=100)


class AdaptiveThreshold(_DashboardModel):
    """EMA baseline with multiplier-scaled anomaly bounds."""

    baseline: float = 0.0
    upper_threshold: float = 0.0
    lower_threshold: float = 0.0
    confidence: int = Field(default=0, ge=0, le=100)

    @property
    def is_empty(self) -> bool:
        """True when the threshold could not be computed."""
        return self.confidence == 0


class TrendReport(_DashboardModel):
    """Combined moving average, trend, volatility and crossover report."""

    short_ma: list[float] = Field(default_factory=list, alias="shortMA")
    long_ma: list[float] = Field(default_factory=list, alias="longMA")
    ema_short: list[float] = Field(default_factory=list)
    ema_long: list[float] = Field(default_factory=list)
    trend_direction: TrendDirection = TrendDirection.NEUTRAL
    volatility_score: int = Field(default=0, ge=0, le=100)
    crossover_signal: CrossoverSignal = CrossoverSignal.NEUTRAL
    confidence: int = Field(default=0, ge=0, le=100)


class MetricTrend(_DashboardModel):
    """Latest smoothed value and direction of a KPI history."""

    trend: TrendDirection = TrendDirection.NEUTRAL
    latest_average: float | None = None
    points: int = 0
