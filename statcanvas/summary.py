"""Tabulate statistics as pandas objects for printing and export."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from .options import DEFAULT_CONFIDENCE, resolve_confidence_level
from .stats import (
    confidence_interval,
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

DESCRIBE_FIELDS = [
    "n",
    "mean",
    "median",
    "mode",
    "variance",
    "std_dev",
    "ci_level",
    "ci_lower",
    "ci_upper",
]


def describe(
    sample: Iterable[float], level=DEFAULT_CONFIDENCE, name: str | None = None
) -> pd.Series:
    """Summarise one sample.

    Args:
        sample: Observations. Non-finite values are dropped first.
        level: Confidence level for the interval columns.
        name: Optional name for the returned Series.

    Returns:
        pandas.Series: Indexed by :data:`DESCRIBE_FIELDS`; ``mode`` holds a
        list.
    """
    level = resolve_confidence_level(level, "describe")
    arr = np.asarray(sample, dtype=float)
    arr = arr[np.isfinite(arr)]
    interval = confidence_interval(arr, level)
    return pd.Series(
        {
            "n": int(arr.size),
            "mean": mean(arr),
            "median": median(arr),
            "mode": mode(arr),
            "variance": variance(arr),
            "std_dev": std_dev(arr),
            "ci_level": int(level),
            "ci_lower": interval.lower,
            "ci_upper": interval.upper,
        },
        index=DESCRIBE_FIELDS,
        name=name,
        dtype=object,
    )


def describe_columns(frame: pd.DataFrame, level=DEFAULT_CONFIDENCE) -> pd.DataFrame:
    """Apply :func:`describe` to every numeric column of ``frame``.

    Returns:
        pandas.DataFrame: One row per numeric column, named ``column``.
    """
    level = resolve_confidence_level(level, "describe_columns")
    numeric = frame.select_dtypes(include="number")
    if numeric.empty:
        return pd.DataFrame(columns=["column"] + DESCRIBE_FIELDS)
    rows = [
        describe(numeric[col].to_numpy(dtype=float), level, name=col)
        for col in numeric.columns
    ]
    return pd.DataFrame(rows).rename_axis("column").reset_index()


def correlation_table(pairs: Iterable[Sequence[float]]) -> pd.DataFrame:
    """Correlation coefficients and both regression lines for paired data.

    Returns:
        pandas.DataFrame: A single row with ``n``, ``pmcc``, ``srcc`` and the
        slope/intercept of the simple and model 2 lines.
    """
    data = np.asarray(list(pairs), dtype=float)
    simple = simple_regression(data)
    model2 = model2_regression(data)
    return pd.DataFrame.from_records(
        [
            {
                "n": int(len(data)),
                "pmcc": pmcc(data),
                "srcc": srcc(data),
                "simple_slope": simple.slope,
                "simple_intercept": simple.intercept,
                "model2_slope": model2.slope,
                "model2_intercept": model2.intercept,
            }
        ]
    )


def print_summary(summary: pd.DataFrame) -> None:
    print("\nDescriptive statistics:")
    if summary.empty:
        print("  (no data)")
        return

    for _, row in summary.iterrows():
        modes = ", ".join(f"{m:g}" for m in row["mode"])
        print(
            f" - {row['column']}: n={int(row['n'])} | mean={row['mean']:.3f} | "
            f"median={row['median']:.3f} | sd={row['std_dev']:.3f} | mode=[{modes}]"
        )
        print(
            f"     {int(row['ci_level'])}% CI: "
            f"[{row['ci_lower']:.3f}, {row['ci_upper']:.3f}]"
        )
