"""
Running a grid through several generations.

Both algorithms are generators: every computed generation is handed to the caller (who records it) before the next one is computed.
Steps are strictly sequential, generation k+1 is computed from generation k.
"""

from typing import Iterator

from src.life.grid import Grid
from src.life.rules import next_generation

# Upper bound on the number of steps taken while looking for a stable state
MAX_STABLE_ITERATIONS = 1000


def advance(grid: Grid, generations: int) -> Iterator[Grid]:
    """Yield each of the next `generations` grids, in order."""
    current = grid
    for _ in range(generations):
        current = next_generation(current)
        yield current


def run_until_stable(
    grid: Grid, max_iterations: int = MAX_STABLE_ITERATIONS
) -> Iterator[Grid]:
    """
    Keep stepping until a step no longer changes the grid, or until `max_iterations` steps have been taken.
    ----

    * At least one step is always taken: each new grid is compared to the grid right before it, never to the starting grid alone.
    * Only one-step fixed points are detected. An oscillator (period >= 2) runs until the cap and the last grid is yielded as if final.
    """
    previous = grid
    for _ in range(max_iterations):
        current = next_generation(previous)
        yield current
        if current == previous:
            return
        previous = current


def is_fixed_point(grid: Grid) -> bool:
    """True if a step leaves the grid unchanged."""
    return next_generation(grid) == grid
