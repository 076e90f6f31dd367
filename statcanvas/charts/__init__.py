"""
Chart renderers that draw onto a canvas-like drawing surface.

Each chart owns its title, anchor pixel, axis configuration and a private
copy of its data, and emits primitive calls (paths, ellipses, rectangles,
text) to whatever surface is passed to ``draw``.

Modules:
    mapping:
        ``AxisSpec`` and the data-to-pixel mapping shared by every chart.

    surface:
        The ``DrawingSurface`` protocol and ``MatplotlibSurface``, which
        renders the primitives into a matplotlib figure.

    axes:
        Frame, tick and line helpers for the axis-based charts.

    scatterplot, line_graph, pie_chart, bar_chart:
        The chart types. Scatterplots can also fit and draw a regression line.

Design Principles:
    1. No statistics in drawing code beyond calling ``statcanvas.stats``.

    2. Charts are independent classes; they share behaviour through the
       mapping and axes helpers rather than a common base class.
"""

from .bar_chart import BarChart
from .line_graph import LineGraph
from .mapping import AxisSpec, Point, axis_offset, to_pixel, to_pixel_x, to_pixel_y
from .pie_chart import PieChart
from .scatterplot import Scatterplot
from .surface import DrawingSurface, MatplotlibSurface

__all__ = [
    "AxisSpec",
    "Point",
    "axis_offset",
    "to_pixel",
    "to_pixel_x",
    "to_pixel_y",
    "DrawingSurface",
    "MatplotlibSurface",
    "Scatterplot",
    "LineGraph",
    "PieChart",
    "BarChart",
]
