"""
Descriptive statistics, correlation and simple charts for small datasets.

Computes summary statistics and confidence intervals for samples, Pearson and
Spearman correlation and regression lines for paired data, and draws
scatterplots, line graphs, pie charts and bar charts on a canvas-like surface.

Modules:
    - stats: Descriptive statistics, confidence intervals, correlation and
      regression.
    - charts: Coordinate mapping, drawing surfaces and chart renderers.
    - options: Supported confidence levels and regression methods.
    - summary: pandas summary tables.
    - output: CSV and figure export.
"""

__version__ = "1.0.0"

from .charts import (
    AxisSpec,
    BarChart,
    DrawingSurface,
    LineGraph,
    MatplotlibSurface,
    PieChart,
    Point,
    Scatterplot,
    to_pixel,
)
from .options import (
    Z95,
    Z99,
    ConfidenceLevel,
    RegressionMethod,
    UnsupportedOptionWarning,
    critical_value,
)
from .stats import (
    Interval,
    RegressionLine,
    ci_mean_difference,
    confidence_interval,
    confidence_interval_for_mean_difference,
    line_of_best_fit,
    mean,
    median,
    mode,
    model2_regression,
    pmcc,
    simple_regression,
    srcc,
    std_dev,
    variance,
)

__all__ = [
    # Options
    "Z95",
    "Z99",
    "ConfidenceLevel",
    "RegressionMethod",
    "UnsupportedOptionWarning",
    "critical_value",
    # Statistics
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
    "RegressionLine",
    "simple_regression",
    "model2_regression",
    "line_of_best_fit",
    # Charts
    "AxisSpec",
    "Point",
    "to_pixel",
    "DrawingSurface",
    "MatplotlibSurface",
    "Scatterplot",
    "LineGraph",
    "PieChart",
    "BarChart",
]
