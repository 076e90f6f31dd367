"""Line graph connecting points in order of increasing x."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from ..stats.correlation import as_pairs
from .axes import draw_frame, draw_line, draw_x_ticks, draw_y_ticks
from .mapping import AxisSpec, Point, to_pixel
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


class LineGraph:
    """Line graph anchored at the pixel ``(x, y)`` origin of its axes."""

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
        """Store a sorted copy of ``data``.

        Points are ordered by ascending x; points sharing an x are ordered by
        descending y. The caller's sequence is left untouched.
        """
        xs, ys = as_pairs(data)
        self.data = sorted(zip(xs.tolist(), ys.tolist()), key=lambda p: (p[0], -p[1]))

    def draw(self, surface: DrawingSurface) -> None:
        draw_frame(surface, self.title, self.anchor, self.x_axis, self.y_axis)
        draw_x_ticks(surface, self.anchor, self.x_axis)
        draw_y_ticks(surface, self.anchor, self.y_axis)

        pixels = [
            to_pixel(self.x_axis, self.y_axis, self.anchor, point)
            for point in self.data
        ]
        for start, end in zip(pixels, pixels[1:]):
            draw_line(surface, start.x, start.y, end.x, end.y)
        logger.debug(
            "Drew line graph %r with %d segments", self.title, max(len(pixels) - 1, 0)
        )
