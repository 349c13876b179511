"""
Fluent builders for cells, rows and grids.

Each setter validates its argument, stores it and returns the builder, so the
last call for a setting wins. build() hands back the frozen value; no layout
work happens here.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TypeVar

from grid_types import (
    Cell,
    Grid,
    HAlign,
    Options,
    Row,
    VAlign,
    check_blank_char,
    check_colspan,
    check_column_width,
)

__all__ = ["CellBuilder", "RowBuilder", "GridBuilder"]

_B = TypeVar("_B", bound="_LayoutBuilder")


def _padding_of_size(padding_size: int) -> str:
    if padding_size < 0:
        raise ValueError(f"Padding size cannot be negative, got {padding_size}")
    return " " * padding_size


class CellBuilder:
    """Builds a Cell one setting at a time."""

    def __init__(self, cell: Cell) -> None:
        self._inner = cell

    def build(self) -> Cell:
        return self._inner

    def content(self, content: str) -> CellBuilder:
        self._inner = replace(self._inner, content=content)
        return self

    def colspan(self, colspan: int) -> CellBuilder:
        check_colspan(colspan)
        self._inner = replace(self._inner, colspan=colspan)
        return self

    def h_align(self, h_align: HAlign) -> CellBuilder:
        self._inner = replace(self._inner, h_align=h_align)
        return self

    def v_align(self, v_align: VAlign) -> CellBuilder:
        self._inner = replace(self._inner, v_align=v_align)
        return self

    def blank_char(self, blank_char: str) -> CellBuilder:
        check_blank_char(blank_char)
        self._inner = replace(self._inner, blank_char=blank_char)
        return self


class _LayoutBuilder:
    """
    Setters shared by RowBuilder and GridBuilder.

    Both rows and grids carry default options for their cells plus the column
    geometry, so the setters only differ in the value they rebuild.
    """

    _inner: Row | Grid

    def _set_default(self, **changes: object) -> None:
        options = replace(self._inner.default_options, **changes)
        self._inner = replace(self._inner, default_options=options)

    def default_colspan(self: _B, default_colspan: int) -> _B:
        check_colspan(default_colspan)
        self._set_default(colspan=default_colspan)
        return self

    def default_h_align(self: _B, default_h_align: HAlign) -> _B:
        self._set_default(h_align=default_h_align)
        return self

    def default_v_align(self: _B, default_v_align: VAlign) -> _B:
        self._set_default(v_align=default_v_align)
        return self

    def default_blank_char(self: _B, default_blank_char: str) -> _B:
        check_blank_char(default_blank_char)
        self._set_default(blank_char=default_blank_char)
        return self

    def default_options(self: _B, default_options: Options) -> _B:
        self._inner = replace(self._inner, default_options=default_options)
        return self

    def column_width(self: _B, column_width: int) -> _B:
        check_column_width(column_width)
        self._inner = replace(self._inner, column_width=column_width)
        return self

    def column_padding(self: _B, column_padding: str) -> _B:
        self._inner = replace(self._inner, column_padding=column_padding)
        return self

    def padding_size(self: _B, padding_size: int) -> _B:
        """Use padding_size spaces between adjacent columns."""
        return self.column_padding(_padding_of_size(padding_size))


class RowBuilder(_LayoutBuilder):
    """Builds a Row; its geometry is used when the grid leaves it unset."""

    def __init__(self, row: Row) -> None:
        self._inner = row

    def build(self) -> Row:
        return self._inner

    def cells(self, cells: list[Cell] | tuple[Cell, ...]) -> RowBuilder:
        self._inner = replace(self._inner, cells=tuple(cells))
        return self


class GridBuilder(_LayoutBuilder):
    """Builds a Grid from rows and global settings."""

    def __init__(self, grid: Grid) -> None:
        self._inner = grid

    def build(self) -> Grid:
        return self._inner

    def rows(self, rows: list[Row] | tuple[Row, ...]) -> GridBuilder:
        self._inner = replace(self._inner, rows=tuple(rows))
        return self
