"""Trend engine settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from trend_engine.models.config import TrendEngineConfig


class Settings(BaseSettings):
    """Deployment-level overrides for the engine heuristics.

    Every field maps to a TREND_* environment variable, e.g.
    TREND_NOISE_THRESHOLD=0.02.
    """

    model_config = SettingsConfigDict(
        env_prefix="TREND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Trend classifier
    noise_threshold: float = 0.01
    lookback: int = 2

    # Volatility
    volatility_cap: float = 100.0
    low_risk_max: float = 20.0
    medium_risk_max: float = 50.0

    # Crossover confidence
    crossover_base_confidence: float = 60.0
    crossover_max_confidence: float = 95.0

    # Adaptive thresholds
    threshold_period: int = 14
    threshold_multiplier: float = 1.25
    threshold_min_confidence: float = 50.0

    # Report windows
    short_period: int = 7
    long_period: int = 21

    # Logging
    log_level: str = "WARNING"

    def engine_config(self) -> TrendEngineConfig:
        """Build the validated engine configuration."""
        return TrendEngineConfig(
            **self.model_dump(include=set(TrendEngineConfig.model_fields))
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
