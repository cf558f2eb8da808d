"""Protocol repository (implemented with SQLAlchemy in sql_repository.py and with plain dicts in memory_repository.py)"""

from typing import Protocol
from uuid import UUID

from src.core.models import BoardModel, HistoryEntryModel


class BoardRepository(Protocol):
    """Persistence layer orchestration. Any method may raise StorageError."""

    def get_board(self, board_id: UUID) -> BoardModel | None:
        """Get board by ID, if record exists."""
        ...

    def create_board(self, board: BoardModel) -> tuple[BoardModel, UUID]:
        """Store new board and return the stored data + newly created board ID."""
        ...

    def update_board(self, board_id: UUID, board: BoardModel) -> BoardModel | None:
        """Overwrite current state of an existing record."""
        ...

    def delete_board(self, board_id: UUID) -> BoardModel | None:
        """Remove a board's record, together with its history."""
        ...

    def list_boards(self, offset: int, limit: int) -> list[tuple[UUID, BoardModel]]:
        """Boards ordered by last modification, most recent first."""
        ...

    def append_history(self, entry: HistoryEntryModel) -> HistoryEntryModel:
        """Record the grid of a board at one generation."""
        ...

    def list_history(
        self, board_id: UUID, offset: int, limit: int
    ) -> list[HistoryEntryModel]:
        """History of a board ordered by generation, most recent first."""
        ...
