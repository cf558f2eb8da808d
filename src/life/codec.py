"""
Conversion between a Grid and the two forms it travels in.

* Text form (storage): one token per cell, cells separated by "," and rows by ";".
    ex) a 2x3 grid with a diagonal: "1,0,0;0,1,0"
  Decoding is lenient: missing rows or missing cells are dead, any token other than "1" is dead.

* Array form (API): a list of equally long lists of booleans.
  Decoding is strict: a ragged array is rejected.

The two contracts are kept apart on purpose. Do not route one through the other.
"""

from typing import Sequence

import numpy as np

from src.core.exceptions import GridShapeError
from src.core.shared_types import Cell
from src.life.grid import Grid

ROW_DELIMITER = ";"
CELL_DELIMITER = ","


def encode_grid(grid: Grid) -> str:
    """Text form of the grid. A grid without rows gives an empty string."""
    tokens = np.where(grid.cells, Cell.ALIVE.value, Cell.DEAD.value)
    return ROW_DELIMITER.join(CELL_DELIMITER.join(row) for row in tokens.tolist())


def decode_grid(text: str, rows: int, columns: int) -> Grid:
    """
    Rebuild a `rows` x `columns` grid from its text form.

    Never raises on malformed text: whatever cannot be read is a dead cell, and surplus rows/tokens are ignored.
    """
    cells = np.zeros((rows, columns), dtype=bool)
    for row_idx, row_data in enumerate(text.split(ROW_DELIMITER)[:rows]):
        tokens = row_data.split(CELL_DELIMITER)[:columns]
        cells[row_idx, : len(tokens)] = [token == Cell.ALIVE.value for token in tokens]
    return Grid(cells)


def grid_from_rows(rows: Sequence[Sequence[bool]]) -> Grid:
    """Array form -> Grid. Every row must be as long as the first one."""
    expected_columns = len(rows[0]) if len(rows) > 0 else 0
    for row_idx, row in enumerate(rows):
        if len(row) != expected_columns:
            raise GridShapeError(
                f"All rows must have the same number of columns: row {row_idx} has {len(row)}, expected {expected_columns}."
            )
    return Grid(np.array(rows, dtype=bool).reshape(len(rows), expected_columns))


def grid_to_rows(grid: Grid) -> list[list[bool]]:
    """Grid -> array form"""
    return grid.cells.tolist()
