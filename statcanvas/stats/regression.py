"""Provide straight-line fits for paired observations.

Two methods are supported:
- ``simple``: ordinary least squares of y on x, and
- ``model2``: reduced major axis regression, appropriate when both variables
  carry measurement error. This is the default.

Both lines pass through the mean centre ``(xbar, ybar)``. Fitting is
independent of rendering; charts draw a fitted line through the coordinate
mapper.
"""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Sequence

import numpy as np

from ..options import DEFAULT_REGRESSION, RegressionMethod, resolve_regression_method
from .correlation import as_pairs, pmcc
from .descriptive import mean, std_dev


class RegressionLine(NamedTuple):
    """Straight line ``y = slope * x + intercept``."""

    slope: float
    intercept: float

    def y_at(self, x: float) -> float:
        return self.slope * x + self.intercept


_UNDEFINED = RegressionLine(math.nan, math.nan)


def _through_mean_centre(slope: float, xbar: float, ybar: float) -> RegressionLine:
    # y - ybar = slope * (x - xbar)
    return RegressionLine(float(slope), float(ybar - slope * xbar))


def simple_regression(pairs: Iterable[Sequence[float]]) -> RegressionLine:
    """Fit an ordinary least-squares line to paired data.

    Args:
        pairs: ``(x, y)`` observations.

    Returns:
        RegressionLine: Slope ``(n*Sxy - Sx*Sy) / (n*Sxx - Sx**2)`` and the
        intercept through the mean centre. Both are ``nan`` when fewer than
        two pairs are given or all ``x`` are equal.
    """
    x, y = as_pairs(pairs)
    n = x.size
    if n < 2:
        return _UNDEFINED

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_xx = float(np.sum(x * x))

    denom = n * sum_xx - sum_x * sum_x
    if denom == 0:
        return _UNDEFINED
    slope = (n * sum_xy - sum_x * sum_y) / denom
    return _through_mean_centre(slope, sum_x / n, sum_y / n)


def model2_regression(pairs: Iterable[Sequence[float]]) -> RegressionLine:
    """Fit a reduced major axis (model II) line to paired data.

    The slope magnitude is ``s_y / s_x`` and its sign follows the Pearson
    correlation: negative correlation gives a negative slope, zero or
    positive correlation a positive one.

    Returns:
        RegressionLine: ``nan`` slope and intercept when fewer than two pairs
        are given or all ``x`` are equal.
    """
    x, y = as_pairs(pairs)
    if x.size < 2:
        return _UNDEFINED

    sx = std_dev(x)
    if sx == 0:
        return _UNDEFINED
    slope = std_dev(y) / sx
    # Zero or undefined correlation keeps the positive slope.
    if pmcc(np.column_stack((x, y))) < 0:
        slope = -slope
    return _through_mean_centre(slope, mean(x), mean(y))


def line_of_best_fit(
    pairs: Iterable[Sequence[float]], method=DEFAULT_REGRESSION
) -> RegressionLine:
    """Fit a line with the named ``method``.

    Args:
        pairs: ``(x, y)`` observations.
        method: ``"simple"`` or ``"model2"``. Unrecognised names fall back to
            ``"model2"`` with an
            :class:`~statcanvas.options.UnsupportedOptionWarning`.

    Returns:
        RegressionLine: The fitted line.
    """
    if resolve_regression_method(method) is RegressionMethod.SIMPLE:
        return simple_regression(pairs)
    return model2_regression(pairs)
