"""
Dense grid of cells.

(placed in its own module as the codec, rules and validation modules all need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Grid:
    """Rectangular matrix of cell states, indexed as (row, column) from the top-left corner.

    Cells are held in a read-only boolean array: a grid never changes once created, every generation is a new Grid.
    """

    cells: np.ndarray

    def __post_init__(self) -> None:
        cells = np.array(self.cells, dtype=bool)
        # a grid without rows comes in as a 1-d empty array
        if cells.size == 0 and cells.ndim != 2:
            cells = cells.reshape(0, 0)
        cells.flags.writeable = False
        object.__setattr__(self, "cells", cells)

    @classmethod
    def dead(cls, rows: int, columns: int) -> Grid:
        return cls(np.zeros((rows, columns), dtype=bool))

    @property
    def rows(self) -> int:
        return self.cells.shape[0]

    @property
    def columns(self) -> int:
        return self.cells.shape[1]

    def is_alive(self, row: int, column: int) -> bool:
        return bool(self.cells[row, column])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))
