"""Map dataset coordinates onto surface pixels.

Every chart positions its content relative to an anchor pixel, the origin of
its axes. Along an axis, a data value ``v`` lies
``(v - start) * tick_spacing / value_spacing`` pixels from the anchor; x grows
to the right and y grows upward, which on a surface whose y axis points down
means subtracting the offset.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, NamedTuple, Sequence


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class AxisSpec:
    """Configuration of one chart axis.

    Attributes:
        title: Axis title drawn beside the axis.
        start: Data value at the anchor.
        value_spacing: Data units between consecutive ticks.
        tick_spacing: Pixels between consecutive ticks.
        tick_count: Number of tick intervals drawn after the anchor.
    """

    title: str = ""
    start: float = 0
    value_spacing: float = 1
    tick_spacing: float = 10
    tick_count: int = 3

    def __post_init__(self) -> None:
        if not math.isfinite(self.value_spacing) or self.value_spacing == 0:
            raise ValueError("value_spacing must be finite and non-zero.")
        if self.tick_count < 0:
            raise ValueError("tick_count cannot be negative.")

    @property
    def end(self) -> float:
        """Data value at the last tick."""
        return self.start + self.tick_count * self.value_spacing

    @property
    def length(self) -> float:
        """Axis length in pixels."""
        return self.tick_count * self.tick_spacing

    def tick_values(self) -> List[float]:
        return [
            self.start + i * self.value_spacing for i in range(self.tick_count + 1)
        ]


def axis_offset(axis: AxisSpec, value: float) -> float:
    """Pixel distance of ``value`` from the anchor along ``axis``."""
    return (value - axis.start) * axis.tick_spacing / axis.value_spacing


def to_pixel_x(axis: AxisSpec, anchor: Point, value: float) -> float:
    return anchor.x + axis_offset(axis, value)


def to_pixel_y(axis: AxisSpec, anchor: Point, value: float) -> float:
    return anchor.y - axis_offset(axis, value)


def to_pixel(
    x_axis: AxisSpec, y_axis: AxisSpec, anchor: Point, point: Sequence[float]
) -> Point:
    """Map a data point ``(x, y)`` to its pixel position."""
    return Point(
        to_pixel_x(x_axis, anchor, point[0]), to_pixel_y(y_axis, anchor, point[1])
    )
