"""Bivariate correlation coefficients for paired observations.

Paired data is any sequence of ``(x, y)`` pairs, e.g.
``[[x1, y1], [x2, y2], ...]``, or an ``(n, 2)`` array.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

import numpy as np
from scipy.stats import rankdata

TIE_METHODS = ("ordinal", "average")


def as_pairs(pairs: Iterable[Sequence[float]]) -> Tuple[np.ndarray, np.ndarray]:
    """Split paired observations into new ``x`` and ``y`` float arrays.

    One-shot iterables such as generators are materialised first.

    Raises:
        ValueError: If the data is not a sequence of two-element pairs.
    """
    if not hasattr(pairs, "__len__"):
        pairs = list(pairs)
    arr = np.array(pairs, dtype=float)
    if arr.size == 0:
        return np.empty(0), np.empty(0)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(
            f"Paired data must be a sequence of (x, y) pairs; got shape {arr.shape}."
        )
    return arr[:, 0].copy(), arr[:, 1].copy()


def pmcc(pairs: Iterable[Sequence[float]]) -> float:
    """Pearson product-moment correlation coefficient.

    Applicable to interval and ratio scale data.

    Returns:
        float: A value in ``[-1, 1]``, or ``nan`` when fewer than two pairs
        are given or either variable is constant.
    """
    x, y = as_pairs(pairs)
    if x.size < 2:
        return math.nan
    dx = x - np.mean(x)
    dy = y - np.mean(y)
    sxy = float(np.sum(dx * dy))
    denom = math.sqrt(float(np.sum(dx**2)) * float(np.sum(dy**2)))
    if denom == 0:
        return math.nan
    return sxy / denom


def rank(values: Iterable[float], ties: str = "ordinal") -> np.ndarray:
    """Return 0-based ranks aligned with the original positions of ``values``.

    With ``ties="ordinal"`` equal values keep their order of appearance and
    receive distinct consecutive ranks (a stable ascending sort). With
    ``ties="average"`` equal values share the mean of their ranks.

    Raises:
        ValueError: For an unknown ``ties`` method.
    """
    if ties not in TIE_METHODS:
        raise ValueError(f"ties must be one of {TIE_METHODS}; got {ties!r}.")
    return rankdata(np.asarray(values, dtype=float), method=ties) - 1.0


def srcc(pairs: Iterable[Sequence[float]], ties: str = "ordinal") -> float:
    """Spearman rank correlation coefficient.

    Applicable to ordinal, interval and ratio scale data. Each variable is
    ranked independently and ``1 - 6 * sum(d**2) / (n * (n**2 - 1))`` is
    returned, where ``d`` is the per-observation rank difference.

    Args:
        pairs: Paired observations.
        ties: ``"ordinal"`` (default) ranks tied values by order of
            appearance, which biases the coefficient when ties are present.
            ``"average"`` assigns tied values their mean rank.

    Returns:
        float: A value in ``[-1, 1]``, or ``nan`` for fewer than two pairs.
    """
    x, y = as_pairs(pairs)
    n = x.size
    if n < 2:
        return math.nan
    d = rank(x, ties) - rank(y, ties)
    return 1.0 - 6.0 * float(np.sum(d**2)) / (n * (n * n - 1))
