"""Normal-approximation confidence intervals for a mean and a mean difference."""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple

from ..options import DEFAULT_CONFIDENCE, critical_value, resolve_confidence_level
from .descriptive import as_sample, mean, std_dev, variance


class Interval(NamedTuple):
    lower: float
    upper: float

    @property
    def midpoint(self) -> float:
        return (self.lower + self.upper) / 2

    @property
    def width(self) -> float:
        return self.upper - self.lower


def confidence_interval(
    sample: Iterable[float], level=DEFAULT_CONFIDENCE
) -> Interval:
    """Confidence interval for the population mean of ``sample``.

    Args:
        sample: Observations, at least two for a finite interval.
        level: ``95`` or ``99``. Anything else falls back to ``95`` with an
            :class:`~statcanvas.options.UnsupportedOptionWarning`.

    Returns:
        Interval: ``mean -/+ z * s / sqrt(n)``.

    Note:
        Uses fixed z critical values rather than Student's t, so intervals for
        small samples are narrower than an exact t interval would be.
    """
    level = resolve_confidence_level(level, "confidence_interval")
    arr = as_sample(sample)
    xbar = mean(arr)
    if arr.size == 0:
        return Interval(math.nan, math.nan)
    margin = critical_value(level) * std_dev(arr) / math.sqrt(arr.size)
    return Interval(xbar - margin, xbar + margin)


def confidence_interval_for_mean_difference(
    sample_a: Iterable[float], sample_b: Iterable[float], level=DEFAULT_CONFIDENCE
) -> Interval:
    """Confidence interval for ``mean(a) - mean(b)`` from independent samples.

    The standard error is ``sqrt(var(a)/na + var(b)/nb)``; the unsupported
    level policy is the same as :func:`confidence_interval`.
    """
    level = resolve_confidence_level(level, "confidence_interval_for_mean_difference")
    a = as_sample(sample_a)
    b = as_sample(sample_b)
    diff = mean(a) - mean(b)
    if a.size == 0 or b.size == 0:
        return Interval(math.nan, math.nan)
    margin = critical_value(level) * math.sqrt(
        variance(a) / a.size + variance(b) / b.size
    )
    return Interval(diff - margin, diff + margin)


ci_mean_difference = confidence_interval_for_mean_difference
