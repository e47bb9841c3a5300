"""Validation of partially filled 9x9 Sudoku boards."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain

EMPTY = "."
SIZE = 9
BOX = 3


def _no_repeats(unit: Iterable[str]) -> bool:
    """Return True if no filled cell in ``unit`` repeats another."""
    seen: set[str] = set()
    for cell in unit:
        if cell == EMPTY:
            continue
        if cell in seen:
            return False
        seen.add(cell)
    return True


def _boxes(rows: list[list[str]]) -> Iterable[list[str]]:
    """Yield the cells of each 3x3 box, boxes in reading order."""
    for top in range(0, SIZE, BOX):
        for left in range(0, SIZE, BOX):
            yield [
                cell
                for row in rows[top : top + BOX]
                for cell in row[left : left + BOX]
            ]


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Return True if no row, column or 3x3 box repeats a filled cell.

    Cells holding ``"."`` are empty; every other value counts as filled.
    Rows may be sequences of single characters or strings of length 9.
    Raises ValueError if the board is not 9 by 9.
    """
    rows = [list(row) for row in board]
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError(f"board must be {SIZE} rows of {SIZE} cells")
    columns = (list(column) for column in zip(*rows))
    return all(_no_repeats(unit) for unit in chain(rows, columns, _boxes(rows)))