"""
Statistical routines for samples and paired observations.

This subpackage provides the numerical core of statcanvas. All functions are
pure: they operate on their arguments only and never mutate them.

Modules:
    descriptive:
        Mean, median, mode, sample variance and standard deviation.

    confidence:
        z-based confidence intervals for a mean and for the difference of two
        means.

    correlation:
        Pearson (PMCC) and Spearman (SRCC) correlation coefficients and the
        ranking step used by SRCC.

    regression:
        Ordinary least squares and reduced major axis (model II) lines.

Design Principle:
    This subpackage has no dependencies on the charts/ subpackage. Too little
    data produces ``nan`` instead of raising.
"""

from .confidence import (
    Interval,
    ci_mean_difference,
    confidence_interval,
    confidence_interval_for_mean_difference,
)
from .correlation import pmcc, rank, srcc
from .descriptive import mean, median, mode, std_dev, variance
from .regression import (
    RegressionLine,
    line_of_best_fit,
    model2_regression,
    simple_regression,
)

__all__ = [
    "mean",
    "median",
    "mode",
    "variance",
    "std_dev",
    "Interval",
    "confidence_interval",
    "confidence_interval_for_mean_difference",
    "ci_mean_difference",
    "pmcc",
    "srcc",
    "rank",
    "RegressionLine",
    "simple_regression",
    "model2_regression",
    "line_of_best_fit",
]
