"""
Plain-text rendering for cli_grid structures.

Each row is laid out independently:
1. The row height is the largest line count among its cells
2. Every cell becomes a rectangle of (cell width) x (row height) characters,
   with its content placed by the vertical and horizontal alignment
3. The rectangles are joined line by line with the column padding

Nested grids need no special handling: a rendered grid is just multi-line
content for a cell of the parent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from grid_types import (
    DEFAULT_COLUMN_PADDING,
    DEFAULT_COLUMN_WIDTH,
    Cell,
    Grid,
    HAlign,
    Options,
    Row,
    VAlign,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Resolved Layout
# =============================================================================


@dataclass(frozen=True)
class Geometry:
    """Column geometry shared by every cell of a row."""

    column_width: int
    column_padding: str
    total_columns: int


@dataclass(frozen=True)
class CellLayout:
    """A cell with all inherited settings resolved."""

    lines: tuple[str, ...]
    width: int
    h_align: HAlign
    v_align: VAlign
    blank_char: str


def split_lines(content: str) -> list[str]:
    """
    Split content into its lines.

    Only line feeds break a line, and a carriage return before one is
    dropped. Empty content still occupies one line, and a trailing line feed
    does not start an extra line, so the output of a rendered grid splits
    back into exactly its rows.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines] or [""]


def cell_width(colspan: int, column_width: int, padding_size: int) -> int:
    """Width of a cell covering colspan columns and the paddings between them."""
    return colspan * column_width + (colspan - 1) * padding_size


def row_span(row: Row, defaults: Options) -> int:
    """Sum of the resolved colspans of a row, ignoring cells that span everything."""
    options = row.default_options.merged(defaults)
    return sum(
        cell.options.merged(options).resolved().colspan
        for cell in row.cells
        if not cell.span_all
    )


def total_columns(grid: Grid) -> int:
    """Widest row span of the grid, at least 1."""
    return max(max((row_span(row, grid.default_options) for row in grid.rows), default=0), 1)


def resolve_geometry(row: Row, grid: Grid | None = None, columns: int | None = None) -> Geometry:
    """Grid settings win over row settings, which win over the module defaults."""
    column_width = grid.column_width if grid is not None else None
    if column_width is None:
        column_width = row.column_width
    if column_width is None:
        column_width = DEFAULT_COLUMN_WIDTH

    column_padding = grid.column_padding if grid is not None else None
    if column_padding is None:
        column_padding = row.column_padding
    if column_padding is None:
        column_padding = DEFAULT_COLUMN_PADDING

    if columns is None:
        columns = max(row_span(row, Options()), 1)
    return Geometry(column_width, column_padding, columns)


def layout_cell(cell: Cell, row_options: Options, geometry: Geometry) -> CellLayout:
    """Resolve a cell against its row's (already merged) options and geometry."""
    options = cell.options.merged(row_options).resolved()
    colspan = geometry.total_columns if cell.span_all else options.colspan
    width = cell_width(colspan, geometry.column_width, len(geometry.column_padding))
    lines = tuple(split_lines(cell.content))

    widest = max(len(line) for line in lines)
    if widest > width:
        logger.warning(
            "Cell content overflows its width: %d > %d characters (content not truncated)",
            widest,
            width,
        )

    return CellLayout(lines, width, options.h_align, options.v_align, options.blank_char)


# =============================================================================
# Line Rendering
# =============================================================================


def pad(line: str, width: int, h_align: HAlign, blank_char: str) -> str:
    """
    Pad a single content line to exactly width characters.

    Lines already at least width long are returned unchanged: overflowing
    content is shown in full rather than silently cut.
    """
    length = len(line)
    if length >= width:
        return line
    blanks = width - length

    match h_align:
        case HAlign.LEFT:
            return line + blank_char * blanks
        case HAlign.RIGHT:
            return blank_char * blanks + line
        case HAlign.CENTER:
            left = blanks // 2
            return blank_char * left + line + blank_char * (blanks - left)
        case HAlign.FILL:
            if not line:
                return blank_char * width
            repeats = width // length + 1
            return (line * repeats)[:width]
        case _:
            raise ValueError(f"Unknown horizontal alignment: {h_align}")


def content_line_index(
    v_align: VAlign, line_count: int, row_height: int, line_index: int
) -> int | None:
    """
    Map an output line of the row to a line of the cell content.

    Returns None when the output line lies outside the content, i.e. it is a
    blank line of the cell.
    """
    match v_align:
        case VAlign.TOP:
            start = 0
        case VAlign.BOTTOM:
            start = row_height - line_count
        case VAlign.MIDDLE:
            start = (row_height - line_count) // 2  # Odd blank line goes below
        case _:
            raise ValueError(f"Unknown vertical alignment: {v_align}")

    offset = line_index - start
    if 0 <= offset < line_count:
        return offset
    return None


def cell_line(layout: CellLayout, row_height: int, line_index: int) -> str:
    """The fixed-width text a cell contributes to one output line of its row."""
    index = content_line_index(layout.v_align, len(layout.lines), row_height, line_index)
    if index is None:
        return layout.blank_char * layout.width
    return pad(layout.lines[index], layout.width, layout.h_align, layout.blank_char)


def render_row_lines(row: Row, geometry: Geometry, defaults: Options | None = None) -> list[str]:
    """Render a row into its output lines (without line terminators)."""
    if not row.cells:
        return [""]

    row_options = row.default_options.merged(defaults if defaults is not None else Options())
    layouts = [layout_cell(cell, row_options, geometry) for cell in row.cells]
    row_height = max(len(layout.lines) for layout in layouts)

    return [
        geometry.column_padding.join(cell_line(layout, row_height, i) for layout in layouts)
        for i in range(row_height)
    ]


# =============================================================================
# Public Entry Points
# =============================================================================


def render_row(row: Row) -> str:
    """Render a row on its own, using only its own settings."""
    lines = render_row_lines(row, resolve_geometry(row))
    return "".join(f"{line}\n" for line in lines)


def render_grid(grid: Grid) -> str:
    """
    Render a grid to text.

    Every output line is newline-terminated, including the last one. Rows are
    never padded out to the width of the widest row.

    Args:
        grid: The grid to render

    Returns:
        The rendered grid
    """
    columns = total_columns(grid)
    logger.debug(
        "render_grid: rows=%d, total_columns=%d, column_width=%s",
        len(grid.rows),
        columns,
        grid.column_width,
    )

    lines: list[str] = []
    for row in grid.rows:
        geometry = resolve_geometry(row, grid, columns)
        lines.extend(render_row_lines(row, geometry, grid.default_options))
    return "".join(f"{line}\n" for line in lines)
