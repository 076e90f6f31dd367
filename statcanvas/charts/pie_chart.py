"""Pie chart with a colour-keyed legend of labels and percentages."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Sequence, Tuple

from .mapping import Point
from .style import STYLE, color_for_index
from .surface import DrawingSurface

logger = logging.getLogger(__name__)

TITLE_GAP = 20.0


class PieChart:
    """Pie chart centred on the pixel ``(x, y)``.

    Args:
        title: Chart title, drawn above the pie.
        x: Pixel x-coordinate of the centre.
        y: Pixel y-coordinate of the centre.
        radius: Pie radius in pixels.
    """

    def __init__(self, title: str, x: float, y: float, radius: float):
        if radius <= 0:
            raise ValueError("Pie radius must be positive.")
        self.title = title
        self.anchor = Point(x, y)
        self.radius = radius
        self.data: List[Tuple[str, float]] = []

    def add_data(self, data: Iterable[Sequence]) -> None:
        """Store ``(label, proportion)`` entries, largest proportion first.

        Proportions are fractions of the whole (``0.25`` is a quarter). Equal
        proportions keep their input order.

        Raises:
            ValueError: If an entry is not a pair or a proportion is negative
                or not finite.
        """
        entries = []
        for entry in data:
            if len(entry) != 2:
                raise ValueError(
                    f"Pie entries must be (label, proportion); got {entry!r}."
                )
            label, proportion = entry
            proportion = float(proportion)
            if not math.isfinite(proportion) or proportion < 0:
                raise ValueError(
                    f"Proportion for {label!r} must be finite and non-negative."
                )
            entries.append((str(label), proportion))
        total = sum(p for _, p in entries)
        if entries and not math.isclose(total, 1.0, abs_tol=1e-6):
            logger.warning("Pie proportions sum to %.4f, not 1", total)
        self.data = sorted(entries, key=lambda e: e[1], reverse=True)

    def legend_labels(self) -> List[str]:
        return [f"{label} ({proportion * 100:.2f}%)" for label, proportion in self.data]

    def draw(self, surface: DrawingSurface) -> None:
        cx, cy = self.anchor
        r = self.radius

        surface.set_font(STYLE.TITLE_FONT)
        surface.set_fill_style(STYLE.TEXT_COLOR)
        surface.set_text_align("center")
        surface.fill_text(self.title, cx, cy - r - TITLE_GAP)

        # Wedges start at 12 o'clock and sweep clockwise.
        angle = -math.pi / 2
        for i, (_, proportion) in enumerate(self.data):
            sweep = 2 * math.pi * proportion
            surface.begin_path()
            surface.set_fill_style(color_for_index(i))
            surface.move_to(cx, cy)
            surface.ellipse(cx, cy, r, r, 0, angle, angle + sweep)
            surface.fill()
            surface.close_path()
            angle += sweep

        surface.set_text_align("left")
        surface.set_font(STYLE.LEGEND_FONT)
        dot = STYLE.LEGEND_DOT_RADIUS
        for i, text in enumerate(self.legend_labels()):
            row_y = cy + r / 3 + i * STYLE.LEGEND_ROW_HEIGHT
            surface.begin_path()
            surface.set_fill_style(color_for_index(i))
            surface.ellipse(
                cx + r + STYLE.LEGEND_GAP, row_y - dot, dot, dot, 0, 0, 2 * math.pi
            )
            surface.fill()
            surface.set_fill_style(STYLE.TEXT_COLOR)
            surface.fill_text(text, cx + r + STYLE.LEGEND_GAP + 10, row_y)
            surface.close_path()
