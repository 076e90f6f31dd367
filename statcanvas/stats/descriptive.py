"""Descriptive statistics over a finite numeric sample.

All functions accept any sequence convertible to a 1-D float array and never
reorder the caller's data; sorting happens on a private copy using numeric
comparison. Insufficient data yields ``nan`` rather than an exception, so
callers must check ``math.isfinite`` where it matters.
"""

from __future__ import annotations

import math
from typing import Iterable, List

import numpy as np


def as_sample(sample: Iterable[float]) -> np.ndarray:
    """Convert ``sample`` into a new 1-D float array.

    One-shot iterables such as generators are materialised first.

    Raises:
        ValueError: If ``sample`` is not one-dimensional.
    """
    if not hasattr(sample, "__len__"):
        sample = list(sample)
    arr = np.array(sample, dtype=float)
    if arr.ndim != 1:
        raise ValueError(
            f"Sample must be one-dimensional; got shape {arr.shape}."
        )
    return arr


def mean(sample: Iterable[float]) -> float:
    """Arithmetic mean; ``nan`` for an empty sample."""
    arr = as_sample(sample)
    if arr.size == 0:
        return math.nan
    return float(np.sum(arr) / arr.size)


def median(sample: Iterable[float]) -> float:
    """Return the middle value of the numerically sorted sample.

    For an even number of observations the two middle values are averaged.
    """
    arr = np.sort(as_sample(sample))
    n = arr.size
    if n == 0:
        return math.nan
    mid = n // 2
    if n % 2 == 1:
        return float(arr[mid])
    return float((arr[mid - 1] + arr[mid]) / 2)


def mode(sample: Iterable[float]) -> List[float]:
    """Return every value that occurs with the highest frequency.

    Values are returned in ascending order. When every value is unique, every
    value is a mode. An empty sample has no modes.

    Args:
        sample: Observations to summarise.

    Returns:
        list[float]: The modal values, possibly empty.
    """
    arr = as_sample(sample)
    if arr.size == 0:
        return []
    values, counts = np.unique(arr, return_counts=True)
    return [float(v) for v in values[counts == counts.max()]]


def variance(sample: Iterable[float]) -> float:
    """Sample variance with an ``n - 1`` denominator; ``nan`` when ``n < 2``."""
    arr = as_sample(sample)
    n = arr.size
    if n < 2:
        return math.nan
    xbar = np.sum(arr) / n
    return float(np.sum((arr - xbar) ** 2) / (n - 1))


def std_dev(sample: Iterable[float]) -> float:
    """Sample standard deviation, the square root of :func:`variance`."""
    return math.sqrt(variance(sample))
