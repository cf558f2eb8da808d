"""
Checks on request data, run before anything is simulated or stored.

All checks are pure. Failures are collected rather than stopping at the first one,
except for a missing grid which makes the structural checks meaningless.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence
from uuid import UUID

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import NIL_BOARD_ID

MAX_GRID_SIZE = 1000
MAX_GENERATIONS = 100
MAX_HISTORY_PAGE = 100


@dataclass(frozen=True)
class ValidationResult:
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, *errors: str) -> ValidationResult:
        return cls(tuple(errors))

    def merge(self, *others: ValidationResult) -> ValidationResult:
        """Combine with other results, keeping every error message in order."""
        errors = list(self.errors)
        for other in others:
            errors.extend(other.errors)
        return ValidationResult(tuple(errors))

    def raise_if_invalid(self) -> None:
        if not self.is_valid:
            raise InvalidRequestError("; ".join(self.errors))


def validate_upload(
    rows: int, columns: int, grid: Optional[Sequence[Sequence[bool]]]
) -> ValidationResult:
    """Declared dimensions must be within [1, MAX_GRID_SIZE] and match the actual grid (in its array form)."""
    if grid is None:
        return ValidationResult.failure("Grid cannot be null")

    errors: list[str] = []
    if rows <= 0:
        errors.append("Rows must be greater than 0")
    if columns <= 0:
        errors.append("Columns must be greater than 0")
    if rows > MAX_GRID_SIZE:
        errors.append(f"Rows cannot exceed {MAX_GRID_SIZE}")
    if columns > MAX_GRID_SIZE:
        errors.append(f"Columns cannot exceed {MAX_GRID_SIZE}")
    grid_rows = len(grid)
    grid_columns = len(grid[0]) if grid_rows > 0 else 0
    if grid_rows != rows:
        errors.append("Grid row count does not match specified rows")
    if grid_columns != columns:
        errors.append("Grid column count does not match specified columns")
    return ValidationResult.failure(*errors)


def validate_generations(generations: int) -> ValidationResult:
    if generations <= 0:
        return ValidationResult.failure("Generations must be greater than 0")
    if generations > MAX_GENERATIONS:
        return ValidationResult.failure(f"Generations cannot exceed {MAX_GENERATIONS}")
    return ValidationResult.success()


def validate_board_id(board_id: UUID) -> ValidationResult:
    if board_id == NIL_BOARD_ID:
        return ValidationResult.failure("Board ID cannot be empty")
    return ValidationResult.success()


def validate_page(offset: int, limit: int) -> ValidationResult:
    errors: list[str] = []
    if offset < 0:
        errors.append("Offset cannot be negative")
    if limit <= 0:
        errors.append("Limit must be greater than 0")
    if limit > MAX_HISTORY_PAGE:
        errors.append(f"Limit cannot exceed {MAX_HISTORY_PAGE}")
    return ValidationResult.failure(*errors)
