"""
Column based grid formatting for terminal output.

    [---------------------]     [---------------------]     [---------------------]
    [---------------------]     [---------------------]     [---------------------]
    <----------1---------->                            <-2->

    1: Grid column
    2: Grid padding

Each cell spans one or more columns, may hold several lines of text (or the
rendered text of another grid), and is aligned horizontally with HAlign and
vertically with VAlign inside the space it covers.

Example:
    >>> grid = (
    ...     Grid.builder([
    ...         Row.new([Cell.new("1", 1), Cell.new("1", 1), Cell.new("1", 1)]),
    ...         Row.new([Cell.new("2", 2), Cell.new("1", 1)]),
    ...         Row.new([Cell.new("3", 3)]),
    ...     ])
    ...     .default_blank_char(".")
    ...     .column_width(5)
    ...     .build()
    ... )
    >>> print(grid, end="")
    1.... 1.... 1....
    2.......... 1....
    3................
"""

from __future__ import annotations

from grid_builder import CellBuilder, GridBuilder, RowBuilder
from grid_types import (
    DEFAULT_BLANK_CHAR,
    DEFAULT_COLSPAN,
    DEFAULT_COLUMN_PADDING,
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_H_ALIGN,
    DEFAULT_V_ALIGN,
    Cell,
    Grid,
    HAlign,
    Options,
    Row,
    VAlign,
)
from text_render import render_grid, render_row

__all__ = [
    "Cell",
    "CellBuilder",
    "DEFAULT_BLANK_CHAR",
    "DEFAULT_COLSPAN",
    "DEFAULT_COLUMN_PADDING",
    "DEFAULT_COLUMN_WIDTH",
    "DEFAULT_H_ALIGN",
    "DEFAULT_V_ALIGN",
    "Grid",
    "GridBuilder",
    "HAlign",
    "Options",
    "Row",
    "RowBuilder",
    "VAlign",
    "render",
    "render_grid",
    "render_row",
]


def render(target: Grid | Row) -> str:
    """Render a grid, or a single row on its own."""
    if isinstance(target, Grid):
        return render_grid(target)
    return render_row(target)
