"""
Shared type definitions for the cli_grid system.

Cells hold content and layout hints, rows hold cells, and a grid holds rows
plus the global geometry. Every value is frozen; rendering lives in
text_render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grid_builder import CellBuilder, GridBuilder, RowBuilder


class HAlign(Enum):
    """Horizontal alignment of cell content."""

    LEFT = "left"  # Pad on the right (default)
    RIGHT = "right"  # Pad on the left
    CENTER = "center"  # Split padding, odd blank goes right
    FILL = "fill"  # Repeat content across the whole width


class VAlign(Enum):
    """Vertical alignment of cell content."""

    TOP = "top"
    BOTTOM = "bottom"
    MIDDLE = "middle"


DEFAULT_COLSPAN = 1
DEFAULT_H_ALIGN = HAlign.LEFT
DEFAULT_V_ALIGN = VAlign.TOP
DEFAULT_BLANK_CHAR = " "
DEFAULT_COLUMN_WIDTH = 1
DEFAULT_COLUMN_PADDING = " "


def check_colspan(colspan: int | None) -> None:
    """Raise ValueError unless colspan is unset or at least 1."""
    if colspan is not None and colspan < 1:
        raise ValueError(f"Column span must be at least 1, got {colspan}")


def check_blank_char(blank_char: str | None) -> None:
    """Raise ValueError unless blank_char is unset or one non-line-break character."""
    if blank_char is not None and len(blank_char) != 1:
        raise ValueError(f"Blank char must be a single character, got {blank_char!r}")
    if blank_char is not None and blank_char.splitlines() != [blank_char]:
        raise ValueError(f"Blank char cannot be a line break, got {blank_char!r}")


def check_column_width(column_width: int | None) -> None:
    if column_width is not None and column_width < 0:
        raise ValueError(f"Column width cannot be negative, got {column_width}")


# =============================================================================
# Default Propagation
# =============================================================================


@dataclass(frozen=True)
class Options:
    """
    Layout settings that cascade from grid to row to cell.

    A field left as None inherits from the next, less specific level; whatever
    is still unset after the grid level falls back to the module defaults.
    """

    colspan: int | None = None
    h_align: HAlign | None = None
    v_align: VAlign | None = None
    blank_char: str | None = None

    def __post_init__(self) -> None:
        check_colspan(self.colspan)
        check_blank_char(self.blank_char)

    def merged(self, fallback: Options) -> Options:
        """Return a copy where every unset field is taken from fallback."""
        return Options(
            colspan=self.colspan if self.colspan is not None else fallback.colspan,
            h_align=self.h_align if self.h_align is not None else fallback.h_align,
            v_align=self.v_align if self.v_align is not None else fallback.v_align,
            blank_char=self.blank_char if self.blank_char is not None else fallback.blank_char,
        )

    def resolved(self) -> Options:
        """Return a copy with every field set, using module defaults for gaps."""
        return self.merged(
            Options(
                colspan=DEFAULT_COLSPAN,
                h_align=DEFAULT_H_ALIGN,
                v_align=DEFAULT_V_ALIGN,
                blank_char=DEFAULT_BLANK_CHAR,
            )
        )


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class Cell:
    """
    One cell of a row.

    The content may span several lines, and may be the rendered text of
    another grid. Alignment and blank char left as None are inherited.
    """

    content: str = ""
    colspan: int | None = None
    h_align: HAlign | None = None
    v_align: VAlign | None = None
    blank_char: str | None = None
    span_all: bool = False  # Span every column of the enclosing grid

    def __post_init__(self) -> None:
        check_colspan(self.colspan)
        check_blank_char(self.blank_char)

    @property
    def options(self) -> Options:
        return Options(self.colspan, self.h_align, self.v_align, self.blank_char)

    @classmethod
    def new(cls, content: str, colspan: int) -> Cell:
        return cls(content, colspan)

    @classmethod
    def new_empty(cls, colspan: int) -> Cell:
        """A cell with no content, rendered entirely in its blank char."""
        return cls("", colspan)

    @classmethod
    def new_fill(cls, content: str = "", colspan: int | None = None) -> Cell:
        """
        A cell whose content is repeated across its whole width.

        With colspan None the cell spans every column of the grid.
        """
        if colspan is None:
            return cls(content, h_align=HAlign.FILL, span_all=True)
        return cls(content, colspan, h_align=HAlign.FILL)

    @classmethod
    def builder(cls, content: str, colspan: int) -> CellBuilder:
        from grid_builder import CellBuilder

        return CellBuilder(cls.new(content, colspan))


@dataclass(frozen=True)
class Row:
    """A left-to-right sequence of cells."""

    cells: tuple[Cell, ...] = ()
    default_options: Options = field(default_factory=Options)
    column_width: int | None = None
    column_padding: str | None = None

    def __post_init__(self) -> None:
        check_column_width(self.column_width)

    @classmethod
    def new(cls, cells: list[Cell] | tuple[Cell, ...]) -> Row:
        return cls(tuple(cells))

    @classmethod
    def new_empty(cls) -> Row:
        """A row without cells; renders as one empty line."""
        return cls(())

    @classmethod
    def new_fill(cls, content: str = "", colspan: int | None = None) -> Row:
        """
        A row holding a single fill cell.

        With colspan None the cell spans every column of the grid, so an empty
        content yields a full-width line of the blank char and content such as
        "-" yields a horizontal rule.
        """
        return cls((Cell.new_fill(content, colspan),))

    @classmethod
    def builder(cls, cells: list[Cell] | tuple[Cell, ...]) -> RowBuilder:
        from grid_builder import RowBuilder

        return RowBuilder(cls.new(cells))

    def __str__(self) -> str:
        from text_render import render_row

        return render_row(self)


@dataclass(frozen=True)
class Grid:
    """A top-to-bottom sequence of rows plus the shared column geometry."""

    rows: tuple[Row, ...] = ()
    default_options: Options = field(default_factory=Options)
    column_width: int | None = None
    column_padding: str | None = None

    def __post_init__(self) -> None:
        check_column_width(self.column_width)

    @classmethod
    def new(cls, rows: list[Row] | tuple[Row, ...]) -> Grid:
        return cls(tuple(rows))

    @classmethod
    def builder(cls, rows: list[Row] | tuple[Row, ...]) -> GridBuilder:
        from grid_builder import GridBuilder

        return GridBuilder(cls.new(rows))

    @property
    def total_columns(self) -> int:
        from text_render import total_columns

        return total_columns(self)

    def __str__(self) -> str:
        from text_render import render_grid

        return render_grid(self)
