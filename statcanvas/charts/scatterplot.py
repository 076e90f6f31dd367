"""Scatterplot with an optional fitted or user-supplied straight line."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from ..options import DEFAULT_REGRESSION
from ..stats.correlation import as_pairs
from ..stats.regression import RegressionLine, line_of_best_fit
from .axes import draw_frame, draw_line, draw_x_ticks, draw_y_ticks
from .mapping import AxisSpec, Point, to_pixel
from .style import STYLE
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


class Scatterplot:
    """Scatterplot anchored at the pixel ``(x, y)`` origin of its axes.

    Args:
        title: Chart title.
        x: Pixel x-coordinate of the axes origin.
        y: Pixel y-coordinate of the axes origin.
    """

    def __init__(self, title: str, x: float, y: float):
        self.title = title
        self.anchor = Point(x, y)
        self.x_axis = AxisSpec()
        self.y_axis = AxisSpec()
        self.data: List[Tuple[float, float]] = []

    def set_x(
        self,
        title: str,
        start: float,
        value_spacing: float,
        tick_spacing: float,
        tick_count: int,
    ) -> None:
        self.x_axis = AxisSpec(title, start, value_spacing, tick_spacing, tick_count)

    def set_y(
        self,
        title: str,
        start: float,
        value_spacing: float,
        tick_spacing: float,
        tick_count: int,
    ) -> None:
        self.y_axis = AxisSpec(title, start, value_spacing, tick_spacing, tick_count)

    def add_data(self, data: Iterable[Sequence[float]]) -> None:
        """Replace the plotted points with a copy of ``data``."""
        xs, ys = as_pairs(data)
        self.data = list(zip(xs.tolist(), ys.tolist()))

    def visible_points(self) -> List[Tuple[float, float]]:
        """Points that lie at or beyond the start of both axes."""
        return [
            (px, py)
            for px, py in self.data
            if px >= self.x_axis.start and py >= self.y_axis.start
        ]

    def draw(self, surface: DrawingSurface) -> None:
        draw_frame(surface, self.title, self.anchor, self.x_axis, self.y_axis)
        draw_x_ticks(surface, self.anchor, self.x_axis)
        draw_y_ticks(surface, self.anchor, self.y_axis)

        surface.set_fill_style(STYLE.TEXT_COLOR)
        points = self.visible_points()
        for point in points:
            px, py = to_pixel(self.x_axis, self.y_axis, self.anchor, point)
            surface.begin_path()
            surface.ellipse(
                px, py, STYLE.DOT_RADIUS, STYLE.DOT_RADIUS, 0, 0, 2 * math.pi
            )
            surface.fill()
            surface.stroke()
        logger.debug(
            "Drew scatterplot %r: %d of %d points visible",
            self.title,
            len(points),
            len(self.data),
        )

    def line_of_best_fit(
        self, method=DEFAULT_REGRESSION, surface: Optional[DrawingSurface] = None
    ) -> RegressionLine:
        """Fit a line to the plotted data and optionally draw it.

        Args:
            method: ``"simple"`` or ``"model2"`` (default). Unrecognised
                names fall back to ``"model2"`` with a warning.
            surface: When given, the fitted line is drawn across the x axis.

        Returns:
            RegressionLine: The fitted ``(slope, intercept)``.
        """
        line = line_of_best_fit(self.data, method)
        if surface is not None:
            self.custom_line(line.slope, line.intercept, surface)
        return line

    def custom_line(
        self, slope: float, intercept: float, surface: DrawingSurface
    ) -> None:
        """Draw ``y = slope * x + intercept`` from the x axis start.

        The line spans ``x = start`` to ``x = start + tick_count``.
        """
        if not (math.isfinite(slope) and math.isfinite(intercept)):
            logger.warning(
                "Skipping undefined line y = %s * x + %s on %r",
                slope,
                intercept,
                self.title,
            )
            return
        line = RegressionLine(slope, intercept)
        x1 = self.x_axis.start
        x2 = self.x_axis.start + self.x_axis.tick_count
        p1 = to_pixel(self.x_axis, self.y_axis, self.anchor, (x1, line.y_at(x1)))
        p2 = to_pixel(self.x_axis, self.y_axis, self.anchor, (x2, line.y_at(x2)))
        surface.set_fill_style(STYLE.LINE_COLOR)
        draw_line(surface, p1.x, p1.y, p2.x, p2.y)
