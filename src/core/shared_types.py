"""
Type definitions used across layers
"""

from enum import StrEnum
from uuid import UUID

# Nil UUID is never handed out by a repository, so it is rejected as a board ID
NIL_BOARD_ID = UUID(int=0)


class Cell(StrEnum):
    """Single-character token of one cell in the encoded grid."""

    ALIVE = "1"
    DEAD = "0"
