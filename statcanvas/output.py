"""Write summary tables and rendered charts to disk."""

from __future__ import annotations

import logging
import os
from typing import Iterable, List

import pandas as pd

from .charts.surface import MatplotlibSurface

logger = logging.getLogger(__name__)

OUTPUT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")


def save_summary_to_csv(
    summary: pd.DataFrame, output_dir: str = "output", name: str = "summary.csv"
) -> str:
    """Save a summary table as CSV.

    List-valued cells (the ``mode`` column) are written as ``;``-separated
    values so the file stays one row per record.

    Returns:
        str: Path of the written file.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, name)

    report = summary.copy()
    for col in report.columns:
        if report[col].map(lambda v: isinstance(v, (list, tuple))).any():
            report[col] = report[col].map(
                lambda v: ";".join(f"{x:g}" for x in v)
                if isinstance(v, (list, tuple))
                else v
            )
    report.to_csv(path, index=False)
    logger.info("Saved summary table to %s", path)
    return path


def save_chart(
    surface: MatplotlibSurface,
    png_path: str,
    formats: Iterable[str] = ("png",),
) -> List[str]:
    """Save a rendered surface once per requested format.

    Args:
        surface: The surface charts were drawn on.
        png_path: Target path; other formats reuse its basename.
        formats: Any of :data:`OUTPUT_FORMATS`.

    Returns:
        list[str]: Paths written, in ``formats`` order.

    Raises:
        ValueError: If a format is not supported.
    """
    base, _ = os.path.splitext(png_path)
    directory = os.path.dirname(png_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    paths = []
    for fmt in formats:
        if fmt not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output format {fmt!r}; use one of {OUTPUT_FORMATS}."
            )
        paths.append(surface.savefig(f"{base}.{fmt}", format=fmt))
    logger.info("Saved chart bundle: %s", ", ".join(paths))
    return paths
