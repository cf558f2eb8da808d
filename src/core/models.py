"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the API layer (higher) and the db layer (lower) use the models defined here to send to/receive from the Service.
A board does not hold its history: history entries are stored separately and looked up by board ID.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class BoardModel:
    """Transport-safe representation of a board. The grid is kept in its encoded (text) form."""

    grid_data: str
    rows: int
    columns: int
    generation: int
    created_at: datetime
    last_modified_at: datetime


@dataclass(frozen=True)
class HistoryEntryModel:
    """The encoded grid of a board at one generation. Written once, never changed."""

    board_id: UUID
    grid_data: str
    generation: int
    created_at: datetime
