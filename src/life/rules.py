"""Conway's Game of Life: how one generation turns into the next."""

import numpy as np

from src.life.grid import Grid

# Moore neighborhood: the 8 cells around (0, 0)
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (row_offset, column_offset)
    for row_offset in (-1, 0, 1)
    for column_offset in (-1, 0, 1)
    if (row_offset, column_offset) != (0, 0)
)


def neighbor_counts(grid: Grid) -> np.ndarray:
    """
    Number of live neighbors of every cell.

    The grid is padded with a border of dead cells and the 8 shifted views are added up.
    Edges are hard boundaries: nothing wraps around (which is why np.roll is not used here).
    """
    padded = np.pad(grid.cells.astype(np.uint8), 1)
    counts = np.zeros((grid.rows, grid.columns), dtype=np.uint8)
    for row_offset, column_offset in NEIGHBOR_OFFSETS:
        counts += padded[
            1 + row_offset : 1 + row_offset + grid.rows,
            1 + column_offset : 1 + column_offset + grid.columns,
        ]
    return counts


def count_live_neighbors(grid: Grid, row: int, column: int) -> int:
    """Live cells in the (at most) 3x3 window around one cell, not counting the cell itself."""
    window = grid.cells[max(row - 1, 0) : row + 2, max(column - 1, 0) : column + 2]
    return int(window.sum()) - int(grid.cells[row, column])


def next_cell_state(alive, live_neighbors):
    """
    * a live cell with 2 or 3 live neighbors survives, otherwise it dies (under- or overpopulation)
    * a dead cell with exactly 3 live neighbors comes alive (reproduction)

    Works on single cells as well as on whole arrays of cells.
    """
    alive = np.asarray(alive, dtype=bool)
    live_neighbors = np.asarray(live_neighbors)
    return (alive & ((live_neighbors == 2) | (live_neighbors == 3))) | (
        ~alive & (live_neighbors == 3)
    )


def next_generation(grid: Grid) -> Grid:
    """
    Compute the next generation.

    All cells are updated simultaneously: every neighbor count is taken from the input grid, which is never modified.
    """
    return Grid(next_cell_state(grid.cells, neighbor_counts(grid)))
