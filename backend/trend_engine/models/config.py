"""Engine configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TrendEngineConfig(BaseModel):
    """Heuristic constants used by the trend engine.

    The defaults reproduce the dashboard's historical behaviour. None of
    them are empirically fitted; they are exposed so deployments can tune
    them without code changes.
    """

    model_config = ConfigDict(frozen=True)

    # Trend classifier: relative change below this fraction is noise (1%)
    noise_threshold: float = Field(default=0.01, ge=0)
    lookback: int = Field(default=2, ge=2)

    # Volatility score is capped at this value
    volatility_cap: float = Field(default=100.0, gt=0, le=100)

    # Crossover confidence = min(max, base + relative_gap * 100)
    crossover_base_confidence: float = Field(default=60.0, ge=0, le=100)
    crossover_max_confidence: float = Field(default=95.0, ge=0, le=100)

    # Adaptive threshold bounds
    threshold_period: int = Field(default=14, gt=0)
    threshold_multiplier: float = Field(default=1.25, gt=0)
    threshold_min_confidence: float = Field(default=50.0, ge=0, le=100)

    # Orchestrator windows
    short_period: int = Field(default=7, gt=0)
    long_period: int = Field(default=21, gt=0)

    # Volatility risk bands (upper bound, inclusive)
    low_risk_max: float = Field(default=20.0, ge=0)
    medium_risk_max: float = Field(default=50.0, ge=0)

    @model_validator(mode="after")
    def _check_bands(self) -> "TrendEngineConfig":
        if self.crossover_base_confidence > self.crossover_max_confidence:
            raise ValueError(
                "crossover_base_confidence must not exceed crossover_max_confidence"
            )
        if self.low_risk_max > self.medium_risk_max:
            raise ValueError("low_risk_max must not exceed medium_risk_max")
        return self


DEFAULT_CONFIG = TrendEngineConfig()
