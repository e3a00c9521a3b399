"""Moving average calculators.

Every calculator sanitizes its input first and never raises: empty input,
bad parameters or too few valid points produce an empty list and a
warning on the supplied logger.

Output lengths for n valid points and window p:
- sma / wma: n - p + 1
- ema / dma: n
- smoothed_sma: n - times * (p - 1)
"""

from __future__ import annotations

import logging
import numbers
from typing import Any

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from trend_engine.indicators.sanitize import (
    as_finite_float,
    as_items,
    is_valid_period,
    sanitize,
    sanitize_with_index,
)

logger = logging.getLogger(__name__)


def _prepare(
    series: Any,
    period: Any,
    name: str,
    log: logging.Logger,
) -> np.ndarray | None:
    """Sanitize a series and validate the window against it."""
    values = sanitize(series)
    if not values:
        log.warning(f"{name} calculation: empty or invalid data provided")
        return None

    if not is_valid_period(period):
        log.warning(
            f"{name} calculation: invalid period {period!r} for data length {len(values)}"
        )
        return None

    if len(values) < period:
        log.warning(
            f"{name} calculation: insufficient valid data points ({len(values)} < {period})"
        )
        return None

    return np.asarray(values, dtype=np.float64)


def _to_list(result: np.ndarray, name: str, log: logging.Logger) -> list[float]:
    """Convert a result array, rejecting overflowed values."""
    if not np.all(np.isfinite(result)):
        log.warning(f"{name} calculation: result overflowed to a non-finite value")
        return []
    return result.tolist()


def _weighted_average(
    arr: np.ndarray,
    weights: np.ndarray,
    no_head: bool,
) -> np.ndarray:
    """Run s[i] = w[i] * x[i] + (1 - w[i]) * s[i-1], seeded with x[0]."""
    result = np.empty_like(arr)
    result[0] = 0.0 if no_head else arr[0]

    s = arr[0]
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(1, len(arr)):
            w = weights[i]
            s = w * arr[i] + (1 - w) * s
            result[i] = s

    return result


def sma(series: Any, period: int, *, log: logging.Logger | None = None) -> list[float]:
    """
    Calculate Simple Moving Average.

    Args:
        series: Sequence of observations (invalid values are dropped)
        period: Window size
        log: Logger for diagnostics (defaults to this module's logger)

    Returns:
        Rolling means, one per full window
    """
    log = log or logger
    arr = _prepare(series, period, "SMA", log)
    if arr is None:
        return []

    windows = sliding_window_view(arr, period)
    with np.errstate(over="ignore", invalid="ignore"):
        result = windows.mean(axis=1)
        if not np.all(np.isfinite(result)):
            # Large windows overflow the running sum; scale each point first
            result = sliding_window_view(arr / period, period).sum(axis=1)
    return _to_list(result, "SMA", log)


def ema(series: Any, period: int, *, log: logging.Logger | None = None) -> list[float]:
    """
    Calculate Exponential Moving Average.

    Smoothing factor is 2 / (period + 1) and the average is seeded with the
    first valid value, so the result has one entry per valid point.

    Args:
        series: Sequence of observations (invalid values are dropped)
        period: EMA period
        log: Logger for diagnostics

    Returns:
        EMA values (same length as the sanitized input)
    """
    log = log or logger
    arr = _prepare(series, period, "EMA", log)
    if arr is None:
        return []

    alpha = 2.0 / (period + 1)
    weights = np.full(len(arr), alpha, dtype=np.float64)
    return _to_list(_weighted_average(arr, weights, no_head=False), "EMA", log)


def smoothed_sma(
    series: Any,
    period: int,
    times: int = 1,
    *,
    log: logging.Logger | None = None,
) -> list[float]:
    """
    Apply the simple moving average `times` times in a row.

    Each pass shortens the result by period - 1 points; if any pass runs
    out of points the whole calculation is abandoned.
    """
    log = log or logger
    if not is_valid_period(times):
        log.warning(f"Smoothed SMA calculation: invalid times parameter {times!r}")
        return []

    result = sanitize(series)
    # A one-point window leaves the series unchanged, so one pass suffices
    passes = 1 if period == 1 else times
    for n in range(passes):
        result = sma(result, period, log=log)
        if not result:
            if n > 0:
                log.warning(
                    f"Smoothed SMA calculation: pass {n + 1} of {times} had too few points"
                )
            return []

    return result


def wma(series: Any, period: int, *, log: logging.Logger | None = None) -> list[float]:
    """
    Calculate Weighted Moving Average.

    Weights run linearly from 1 (oldest) to period (newest) within each
    window.

    Args:
        series: Sequence of observations (invalid values are dropped)
        period: Window size
        log: Logger for diagnostics

    Returns:
        Weighted rolling means, one per full window
    """
    log = log or logger
    arr = _prepare(series, period, "WMA", log)
    if arr is None:
        return []

    weights = np.arange(1, period + 1, dtype=np.float64)
    windows = sliding_window_view(arr, period)
    with np.errstate(over="ignore", invalid="ignore"):
        result = windows @ weights / weights.sum()
        if not np.all(np.isfinite(result)):
            result = windows @ (weights / weights.sum())
    return _to_list(result, "WMA", log)


def _valid_alpha(value: Any) -> float | None:
    alpha = as_finite_float(value)
    if alpha is None or alpha < 0 or alpha > 1:
        return None
    return alpha


def dma(
    series: Any,
    alpha: float | list[float],
    no_head: bool = False,
    *,
    log: logging.Logger | None = None,
) -> list[float]:
    """
    Calculate Dynamic Moving Average.

    s[i] = alpha[i] * x[i] + (1 - alpha[i]) * s[i-1]

    `alpha` is either a single weight in [0, 1] or one weight per raw
    observation. Per-step weights are filtered together with the series,
    so each weight stays attached to its own observation when invalid
    values are dropped.

    Args:
        series: Sequence of observations (invalid values are dropped)
        alpha: Scalar weight or per-step weights, each within [0, 1]
        no_head: Emit 0 instead of the unweighted first value
        log: Logger for diagnostics

    Returns:
        DMA values (same length as the sanitized input)
    """
    log = log or logger
    items = as_items(series)
    sanitized = sanitize_with_index(items)
    if not sanitized.values:
        log.warning("DMA calculation: no valid data points")
        return []

    arr = np.asarray(sanitized.values, dtype=np.float64)

    if isinstance(alpha, numbers.Number) or alpha is None:
        scalar = _valid_alpha(alpha)
        if scalar is None:
            log.warning(f"DMA calculation: invalid alpha value {alpha!r}")
            return []
        if scalar == 1:
            return list(sanitized.values)
        weights = np.full(len(arr), scalar, dtype=np.float64)
    else:
        raw_weights = as_items(alpha)
        step_weights = [_valid_alpha(a) for a in raw_weights]
        if not raw_weights or any(w is None for w in step_weights):
            log.warning("DMA calculation: invalid alpha array values")
            return []
        if len(step_weights) != len(items):
            log.warning(
                f"DMA calculation: alpha length {len(step_weights)} does not match "
                f"data length {len(items)}"
            )
            return []
        weights = np.asarray(
            [step_weights[i] for i in sanitized.indices], dtype=np.float64
        )

    return _to_list(_weighted_average(arr, weights, no_head), "DMA", log)
