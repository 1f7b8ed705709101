"""Fixed-width text table for search results.

Rows have exactly five cells. The first four columns are padded to the
widest cell seen in that column and followed by a `` | `` separator; the last
column is printed as-is. Widths are measured in characters, the same unit
``str.ljust``/``str.rjust`` pad in, so multi-byte text stays aligned.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from models.types import TABLE_COLUMNS, Align, TableRow

if TYPE_CHECKING:
    from rich.console import Console

SEPARATOR = " | "


def pad_cell(text: str, width: int, align: Align) -> str:
    """Pad text to width according to the alignment.

    Centered text puts the odd leftover space on the right.
    """
    if align is Align.RIGHT:
        return text.rjust(width)
    if align is Align.CENTER:
        total = max(0, width - len(text))
        left = total // 2
        return " " * left + text + " " * (total - left)
    return text.ljust(width)


class Table:
    """Accumulates rows and renders them with per-column alignment."""

    def __init__(self) -> None:
        self.align: list[Align] = [Align.LEFT] * TABLE_COLUMNS
        self._widths: list[int] = [0] * (TABLE_COLUMNS - 1)
        self._rows: list[TableRow] = []

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def widths(self) -> tuple[int, ...]:
        """Current width of each padded column (all but the last)."""
        return tuple(self._widths)

    @property
    def rows(self) -> tuple[TableRow, ...]:
        return tuple(self._rows)

    def row_count(self) -> int:
        return len(self._rows)

    def set_align(self, column: int, align: Align) -> None:
        """Set the alignment of a column.

        Raises:
            IndexError: If column is out of range.
        """
        if not 0 <= column < TABLE_COLUMNS:
            raise IndexError(f"column must be between 0 and {TABLE_COLUMNS - 1}")
        self.align[column] = align

    def push(self, row: Sequence[str]) -> None:
        """Append a row and widen padded columns as needed.

        Raises:
            ValueError: If the row does not have exactly five cells.
        """
        if len(row) != TABLE_COLUMNS:
            raise ValueError(f"table rows need {TABLE_COLUMNS} cells, got {len(row)}")

        cells: TableRow = (row[0], row[1], row[2], row[3], row[4])
        for i in range(TABLE_COLUMNS - 1):
            self._widths[i] = max(self._widths[i], len(cells[i]))
        self._rows.append(cells)

    def render_row(self, row: TableRow) -> str:
        """Format one row using the current column widths."""
        padded = [
            pad_cell(cell, width, align)
            for cell, width, align in zip(row, self._widths, self.align)
        ]
        return SEPARATOR.join(padded) + SEPARATOR + row[-1]

    def render(self) -> list[str]:
        """Format every row in insertion order."""
        return [self.render_row(row) for row in self._rows]

    def print(self, console: Console) -> None:
        """Print the table through a Rich console.

        Markup, highlighting and wrapping are disabled so titles are printed
        exactly as rendered.
        """
        for line in self.render():
            console.print(
                line,
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
