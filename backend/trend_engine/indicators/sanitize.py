"""Input sanitization for raw metric series."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from trend_engine.models.trend import SanitizedSeries


def as_finite_float(value: Any) -> float | None:
    """Return value as a finite float, or None if it is not usable."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
    elif not isinstance(value, numbers.Real):
        return None
    try:
        result = float(value)
    except (OverflowError, ValueError):
        return None
    return result if math.isfinite(result) else None


def _iter_series(series: Any) -> Iterable[Any]:
    if series is None or isinstance(series, (str, bytes)):
        return ()
    try:
        return iter(series)
    except TypeError:
        return ()


def as_items(series: Any) -> list[Any]:
    """Materialize a series into a list; non-iterables become empty."""
    return list(_iter_series(series))


def sanitize_with_index(series: Any) -> SanitizedSeries:
    """
    Filter a series down to its finite numeric values.

    NaN, infinities, None, booleans and non-numeric entries are dropped.
    The original position of every kept value is returned alongside it so
    results can be mapped back onto the raw series (e.g. calendar dates).

    Args:
        series: Any iterable of observations; None is treated as empty

    Returns:
        SanitizedSeries of (values, indices)
    """
    values: list[float] = []
    indices: list[int] = []
    for i, raw in enumerate(_iter_series(series)):
        value = as_finite_float(raw)
        if value is not None:
            values.append(value)
            indices.append(i)
    return SanitizedSeries(values, indices)


def sanitize(series: Any) -> list[float]:
    """Return the finite numeric values of a series, in order."""
    return sanitize_with_index(series).values


def is_valid_period(period: Any) -> bool:
    """Check that a window size is a positive integer."""
    return (
        isinstance(period, numbers.Integral)
        and not isinstance(period, bool)
        and period > 0
    )


def is_valid_places(places: Any) -> bool:
    """Check that a rounding precision is a non-negative integer."""
    return (
        isinstance(places, numbers.Integral)
        and not isinstance(places, bool)
        and places >= 0
    )
