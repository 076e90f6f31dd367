"""Bar chart with one bar per labelled category."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Sequence, Tuple

from .axes import draw_frame, draw_y_ticks
from .mapping import AxisSpec, Point, to_pixel_y
from .style import STYLE, color_for_index
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


class BarChart:
    """Bar chart anchored at the pixel ``(x, y)`` origin of its axes.

    Categories are laid out left to right in input order, one x tick per
    category; only the y axis carries numeric ticks.
    """

    def __init__(self, title: str, x: float, y: float):
        self.title = title
        self.anchor = Point(x, y)
        self.x_axis = AxisSpec(title="Season", tick_spacing=60, tick_count=4)
        self.y_axis = AxisSpec(
            title="Percentage",
            start=0,
            value_spacing=25,
            tick_spacing=60,
            tick_count=3,
        )
        self.data: List[Tuple[str, float]] = []

    def set_x(self, title: str, tick_spacing: float, tick_count: int) -> None:
        self.x_axis = AxisSpec(
            title=title, tick_spacing=tick_spacing, tick_count=tick_count
        )

    def set_y(
        self,
        title: str,
        start: float,
        value_spacing: float,
        tick_spacing: float,
        tick_count: int,
    ) -> None:
        self.y_axis = AxisSpec(title, start, value_spacing, tick_spacing, tick_count)

    def add_data(self, data: Iterable[Sequence]) -> None:
        """Store ``(label, value)`` categories in the given order."""
        entries = []
        for label, value in data:
            value = float(value)
            if not math.isfinite(value):
                raise ValueError(f"Value for {label!r} must be finite.")
            entries.append((str(label), value))
        self.data = entries

    def bar_rect(self, index: int, value: float) -> Tuple[float, float, float, float]:
        """Pixel rectangle ``(x, y, width, height)`` of the bar at ``index``."""
        tick = self.x_axis.tick_spacing
        top = to_pixel_y(self.y_axis, self.anchor, value)
        return (
            self.anchor.x + tick * index + tick / 4,
            top,
            tick / 2,
            self.anchor.y - top,
        )

    def draw(self, surface: DrawingSurface) -> None:
        draw_frame(surface, self.title, self.anchor, self.x_axis, self.y_axis)
        draw_y_ticks(surface, self.anchor, self.y_axis)

        tick = self.x_axis.tick_spacing
        label_y = self.anchor.y + self.y_axis.tick_spacing / 4
        for i, (label, value) in enumerate(self.data):
            surface.begin_path()
            surface.set_fill_style(color_for_index(i))
            surface.fill_rect(*self.bar_rect(i, value))
            surface.close_path()

            surface.set_fill_style(STYLE.TEXT_COLOR)
            surface.fill_text(label, self.anchor.x + tick * i + tick / 2, label_y)
        if len(self.data) > self.x_axis.tick_count:
            logger.warning(
                "Bar chart %r has %d categories but only %d x ticks",
                self.title,
                len(self.data),
                self.x_axis.tick_count,
            )
