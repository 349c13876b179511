"""
Demonstration scripts for the cli_grid formatting system.
"""

import logging
import sys

import simple_chalk as chalk  # type: ignore[import-untyped]

from cli_grid import Cell, Grid, HAlign, Row, VAlign, render


def heading(title: str) -> None:
    print(chalk.cyan("=" * 48))
    print(chalk.cyan(title))
    print(chalk.cyan("=" * 48))


def spans_demo() -> None:
    """Cells spanning one, two and three columns."""
    grid = (
        Grid.builder(
            [
                Row.new([Cell.new("1", 1), Cell.new("1", 1), Cell.new("1", 1)]),
                Row.new([Cell.new("2", 2), Cell.new("1", 1)]),
                Row.new([Cell.new("3", 3)]),
            ]
        )
        .default_blank_char(".")
        .column_width(15)
        .build()
    )
    heading("Column spans:")
    print(render(grid))


def multi_line_demo() -> None:
    """A multi-line cell stretches its whole row."""
    grid = (
        Grid.builder(
            [
                Row.new([Cell.new("1", 1), Cell.new("1\n1\n1", 1), Cell.new("1", 1)]),
                Row.new([Cell.new("2", 2), Cell.new("1", 1)]),
                Row.new([Cell.new("3", 3)]),
            ]
        )
        .default_blank_char(".")
        .column_width(15)
        .build()
    )
    heading("Multi-line cell:")
    print(render(grid))


def nested_demo() -> None:
    """A rendered grid used as the content of another grid's cell."""
    nested = (
        Grid.builder([Row.new([Cell.new("1", 1), Cell.new("1", 1)]) for _ in range(3)])
        .default_h_align(HAlign.CENTER)
        .default_blank_char("-")
        .column_width(5)
        .build()
    )
    grid = (
        Grid.builder(
            [
                Row.new([Cell.new("2", 2), Cell.new("1", 1)]),
                Row.new([Cell.new("1", 1), Cell.new(str(nested), 1), Cell.new("1", 1)]),
                Row.new([Cell.new("3", 3)]),
            ]
        )
        .default_h_align(HAlign.CENTER)
        .default_v_align(VAlign.MIDDLE)
        .default_blank_char(".")
        .column_width(15)
        .build()
    )
    heading("Nested grid:")
    print(render(grid))


def table_demo() -> None:
    """A small report framed by fill rows."""
    grid = (
        Grid.builder(
            [
                Row.new_fill("="),
                Row.new([Cell.new("Name", 2), Cell.new("Qty", 1), Cell.new("Price", 1)]),
                Row.new_fill("-"),
                Row.builder([Cell.new("Widget", 2), Cell.new("3", 1), Cell.new("4.50", 1)])
                .default_h_align(HAlign.RIGHT)
                .build(),
                Row.builder([Cell.new("Gadget\n(large)", 2), Cell.new("12", 1), Cell.new("19.99", 1)])
                .default_h_align(HAlign.RIGHT)
                .default_v_align(VAlign.BOTTOM)
                .build(),
                Row.new_empty(),
                Row.new([Cell.new("Total", 3), Cell.builder("85.38", 1).h_align(HAlign.RIGHT).build()]),
                Row.new_fill("="),
            ]
        )
        .column_width(8)
        .column_padding(" | ")
        .build()
    )
    heading("Report with fill rows:")
    print(render(grid))


def main() -> None:
    spans_demo()
    multi_line_demo()
    nested_demo()
    table_demo()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "verbose":
        # Show render summaries and overflow warnings
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    main()
