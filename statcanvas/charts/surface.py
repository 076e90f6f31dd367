"""Drawing surfaces that chart renderers emit primitive calls to.

Charts only rely on the :class:`DrawingSurface` protocol, a small subset of
the HTML canvas 2D context expressed in snake_case. Coordinates are pixels
with the origin at the top left and y increasing downward.

:class:`MatplotlibSurface` implements the protocol on top of a matplotlib
:class:`~matplotlib.figure.Figure` so charts can be saved as PNG/PDF/SVG.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field, replace
from typing import List, Protocol, Tuple

import numpy as np
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Polygon
from matplotlib.transforms import Affine2D

logger = logging.getLogger(__name__)


class DrawingSurface(Protocol):
    def begin_path(self) -> None: ...

    def close_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def ellipse(
        self,
        x: float,
        y: float,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
    ) -> None: ...

    def stroke(self) -> None: ...

    def fill(self) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...

    def set_font(self, font: str) -> None: ...

    def set_text_align(self, align: str) -> None: ...

    def set_fill_style(self, color: str) -> None: ...

    def set_stroke_style(self, color: str) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def rotate(self, angle: float) -> None: ...


_FONT_RE = re.compile(
    r"^\s*(?:(?P<style>italic|oblique|normal)\s+)?"
    r"(?:(?P<weight>bold|normal|\d{3})\s+)?"
    r"(?P<size>\d+(?:\.\d+)?)px\s+(?P<family>.+?)\s*$"
)
_RGB_RE = re.compile(
    r"^\s*rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)\s*$"
)
_TEXT_ALIGN = {
    "left": "left",
    "start": "left",
    "center": "center",
    "right": "right",
    "end": "right",
}
ARC_SEGMENTS = 96
LINE_WIDTH = 1.0


def to_mpl_color(color: str):
    """Translate a CSS colour into something matplotlib accepts.

    ``rgb(r, g, b)`` and ``rgba(r, g, b, a)`` become RGBA tuples; names and
    hex strings pass through unchanged.
    """
    match = _RGB_RE.match(str(color))
    if match is None:
        return color
    r, g, b, a = match.groups()
    return (
        float(r) / 255.0,
        float(g) / 255.0,
        float(b) / 255.0,
        float(a) if a is not None else 1.0,
    )


def parse_font(font: str) -> Tuple[float, str, str, str]:
    """Split a CSS font shorthand such as ``"bold 12px serif"``.

    Returns:
        tuple: ``(size_px, family, weight, style)``.

    Raises:
        ValueError: If ``font`` does not contain a pixel size and family.
    """
    match = _FONT_RE.match(font)
    if match is None:
        raise ValueError(f"Unsupported font specification: {font!r}")
    return (
        float(match.group("size")),
        match.group("family").strip("'\""),
        match.group("weight") or "normal",
        match.group("style") or "normal",
    )


@dataclass
class _DrawState:
    transform: Affine2D = field(default_factory=Affine2D)
    fill_style: str = "black"
    stroke_style: str = "black"
    font: str = "10px sans-serif"
    text_align: str = "start"


class MatplotlibSurface:
    """Canvas-style drawing surface backed by a matplotlib figure.

    Args:
        width: Surface width in pixels.
        height: Surface height in pixels.
        dpi: Figure resolution; one pixel equals ``72 / dpi`` points.
        background: Figure face colour.

    Note:
        Artists are stacked in call order so later primitives paint over
        earlier ones, as on a canvas.
    """

    def __init__(
        self,
        width: int = 600,
        height: int = 400,
        dpi: int = 100,
        background: str = "white",
    ):
        if width <= 0 or height <= 0:
            raise ValueError("Surface dimensions must be positive.")
        self.width = width
        self.height = height
        self.dpi = dpi
        self.figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.figure.patch.set_facecolor(to_mpl_color(background))
        self.ax = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_axis_off()

        self._state = _DrawState()
        self._saved: List[_DrawState] = []
        self._subpaths: List[List[Tuple[float, float]]] = []
        self._zorder = 0

    def _px_to_pt(self, px: float) -> float:
        return px * 72.0 / self.dpi

    def _next_zorder(self) -> int:
        self._zorder += 1
        return self._zorder

    def _map(self, x: float, y: float) -> Tuple[float, float]:
        tx, ty = self._state.transform.transform((x, y))
        return float(tx), float(ty)

    def begin_path(self) -> None:
        self._subpaths = []

    def close_path(self) -> None:
        if self._subpaths and len(self._subpaths[-1]) > 1:
            first = self._subpaths[-1][0]
            self._subpaths[-1].append(first)
            self._subpaths.append([first])

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([self._map(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].append(self._map(x, y))

    def ellipse(
        self,
        x: float,
        y: float,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
    ) -> None:
        if radius_x < 0 or radius_y < 0:
            raise ValueError("Ellipse radii cannot be negative.")
        sweep = end_angle - start_angle
        if sweep >= 2 * math.pi:
            sweep = 2 * math.pi
        steps = max(2, int(math.ceil(ARC_SEGMENTS * abs(sweep) / (2 * math.pi))) + 1)
        angles = np.linspace(start_angle, start_angle + sweep, steps)
        cos_r, sin_r = math.cos(rotation), math.sin(rotation)
        ex = radius_x * np.cos(angles)
        ey = radius_y * np.sin(angles)
        points = [
            self._map(x + px * cos_r - py * sin_r, y + px * sin_r + py * cos_r)
            for px, py in zip(ex, ey)
        ]
        if self._subpaths:
            self._subpaths[-1].extend(points)
        else:
            self._subpaths.append(points)

    def stroke(self) -> None:
        for subpath in self._subpaths:
            if len(subpath) < 2:
                continue
            xs, ys = zip(*subpath)
            self.ax.add_line(
                Line2D(
                    xs,
                    ys,
                    color=to_mpl_color(self._state.stroke_style),
                    linewidth=self._px_to_pt(LINE_WIDTH),
                    zorder=self._next_zorder(),
                )
            )

    def fill(self) -> None:
        for subpath in self._subpaths:
            if len(subpath) < 3:
                continue
            self._add_polygon(subpath)

    def _add_polygon(self, points) -> None:
        self.ax.add_patch(
            Polygon(
                np.asarray(points, dtype=float),
                closed=True,
                facecolor=to_mpl_color(self._state.fill_style),
                edgecolor="none",
                zorder=self._next_zorder(),
            )
        )

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        corners = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
        self._add_polygon([self._map(cx, cy) for cx, cy in corners])

    def fill_text(self, text: str, x: float, y: float) -> None:
        size_px, family, weight, style = parse_font(self._state.font)
        tx, ty = self._map(x, y)
        ox, oy = self._map(0.0, 0.0)
        ux, uy = self._map(1.0, 0.0)
        # Pixel space points down, matplotlib rotates counterclockwise.
        rotation = -math.degrees(math.atan2(uy - oy, ux - ox))
        self.ax.text(
            tx,
            ty,
            str(text),
            fontsize=self._px_to_pt(size_px),
            family=family,
            fontweight=weight,
            fontstyle=style,
            ha=_TEXT_ALIGN.get(self._state.text_align, "left"),
            va="baseline",
            rotation=rotation % 360,
            rotation_mode="anchor",
            color=to_mpl_color(self._state.fill_style),
            zorder=self._next_zorder(),
        )

    def set_font(self, font: str) -> None:
        parse_font(font)
        self._state.font = font

    def set_text_align(self, align: str) -> None:
        if align not in _TEXT_ALIGN:
            raise ValueError(f"Unsupported text alignment: {align!r}")
        self._state.text_align = align

    def set_fill_style(self, color: str) -> None:
        self._state.fill_style = color

    def set_stroke_style(self, color: str) -> None:
        self._state.stroke_style = color

    def save(self) -> None:
        self._saved.append(replace(self._state))

    def restore(self) -> None:
        if self._saved:
            self._state = self._saved.pop()

    def translate(self, x: float, y: float) -> None:
        self._state.transform = Affine2D().translate(x, y) + self._state.transform

    def rotate(self, angle: float) -> None:
        self._state.transform = Affine2D().rotate(angle) + self._state.transform

    def savefig(self, path: str, **kwargs) -> str:
        kwargs.setdefault("dpi", self.dpi)
        kwargs.setdefault("facecolor", self.figure.get_facecolor())
        self.figure.savefig(path, **kwargs)
        logger.debug("Saved surface to %s", path)
        return path
