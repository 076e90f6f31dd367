"""Shared frame, tick and line drawing for the axis-based charts."""

from __future__ import annotations

import math

from .mapping import AxisSpec, Point
from .style import STYLE, format_tick
from .surface import DrawingSurface


def draw_line(
    surface: DrawingSurface, from_x: float, from_y: float, to_x: float, to_y: float
) -> None:
    surface.begin_path()
    surface.move_to(from_x, from_y)
    surface.line_to(to_x, to_y)
    surface.stroke()
    surface.close_path()


def draw_frame(
    surface: DrawingSurface,
    title: str,
    anchor: Point,
    x_axis: AxisSpec,
    y_axis: AxisSpec,
) -> None:
    """Draw the chart title, both axis titles and the two axis lines.

    The title sits half a tick above the top of the y axis and the y axis
    title is rotated to read bottom to top.
    """
    mid_x = anchor.x + x_axis.length / 2

    surface.set_font(STYLE.TITLE_FONT)
    surface.set_fill_style(STYLE.TEXT_COLOR)
    surface.set_text_align("center")
    surface.fill_text(
        title, mid_x, anchor.y - y_axis.tick_spacing * (y_axis.tick_count + 0.5)
    )

    surface.set_font(STYLE.AXIS_TITLE_FONT)
    surface.fill_text(x_axis.title, mid_x, anchor.y + STYLE.X_TITLE_OFFSET)

    surface.save()
    surface.translate(anchor.x - STYLE.Y_TITLE_OFFSET, anchor.y - y_axis.length / 2)
    surface.rotate(3 * math.pi / 2)
    surface.fill_text(y_axis.title, 0, 0)
    surface.restore()

    draw_line(surface, anchor.x, anchor.y, anchor.x, anchor.y - y_axis.length)
    draw_line(surface, anchor.x, anchor.y, anchor.x + x_axis.length, anchor.y)


def draw_x_ticks(surface: DrawingSurface, anchor: Point, axis: AxisSpec) -> None:
    """Label every x tick and mark every tick after the origin."""
    half = STYLE.TICK_HALF_LENGTH
    surface.set_font(STYLE.TICK_FONT)
    for i, value in enumerate(axis.tick_values()):
        px = anchor.x + i * axis.tick_spacing
        surface.fill_text(
            format_tick(value), px - half, anchor.y + STYLE.TICK_LABEL_OFFSET
        )
        if i > 0:
            draw_line(surface, px, anchor.y - half, px, anchor.y + half)


def draw_y_ticks(surface: DrawingSurface, anchor: Point, axis: AxisSpec) -> None:
    half = STYLE.TICK_HALF_LENGTH
    surface.set_font(STYLE.TICK_FONT)
    for i, value in enumerate(axis.tick_values()):
        py = anchor.y - i * axis.tick_spacing
        surface.fill_text(
            format_tick(value), anchor.x - STYLE.TICK_LABEL_OFFSET, py + half
        )
        if i > 0:
            draw_line(surface, anchor.x - half, py, anchor.x + half, py)
