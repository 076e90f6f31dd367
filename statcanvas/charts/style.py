"""Centralized chart fonts, colours and layout offsets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChartStyle:
    TITLE_FONT: str = "20px serif"
    AXIS_TITLE_FONT: str = "17px serif"
    TICK_FONT: str = "12px serif"
    LEGEND_FONT: str = "15px serif"
    TEXT_COLOR: str = "black"
    LINE_COLOR: str = "black"
    DOT_RADIUS: float = 2.0
    TICK_HALF_LENGTH: float = 3.0
    TICK_LABEL_OFFSET: float = 20.0
    X_TITLE_OFFSET: float = 40.0
    Y_TITLE_OFFSET: float = 40.0
    LEGEND_DOT_RADIUS: float = 4.0
    LEGEND_GAP: float = 30.0
    LEGEND_ROW_HEIGHT: float = 20.0


STYLE = ChartStyle()

PALETTE: tuple[str, ...] = (
    "rgb(66, 135, 245)",
    "rgb(245, 66, 75)",
    "rgb(102, 190, 114)",
    "rgb(189, 187, 80)",
    "rgb(133, 101, 13)",
)


def color_for_index(index: int) -> str:
    """Cycle through :data:`PALETTE`."""
    return PALETTE[index % len(PALETTE)]


def format_tick(value: float) -> str:
    """Render a tick value without trailing zeros (``2.0`` -> ``"2"``)."""
    return f"{value:g}"
