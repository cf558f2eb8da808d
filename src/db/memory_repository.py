"""Implementation of (Board)Repository keeping everything in dictionaries. Useful for tests and quick local runs."""

from dataclasses import replace
from uuid import UUID, uuid4

from src.core.models import BoardModel, HistoryEntryModel


class InMemoryBoardRepository:
    """Boards keyed by ID, history kept in a separate list per board."""

    def __init__(self) -> None:
        self._boards: dict[UUID, BoardModel] = {}
        self._history: dict[UUID, list[HistoryEntryModel]] = {}

    def get_board(self, board_id: UUID) -> BoardModel | None:
        """Get board by ID, if record exists."""
        board = self._boards.get(board_id)
        # hand out copies, so callers cannot change stored state behind the repository's back
        return replace(board) if board is not None else None

    def create_board(self, board: BoardModel) -> tuple[BoardModel, UUID]:
        """Store new board and return the stored data + newly created board ID."""
        board_id = uuid4()
        self._boards[board_id] = replace(board)
        self._history[board_id] = []
        return replace(board), board_id

    def update_board(self, board_id: UUID, board: BoardModel) -> BoardModel | None:
        """Overwrite current state of an existing record. Dimensions and creation time are never touched."""
        stored = self._boards.get(board_id)
        if stored is None:
            return None
        updated = replace(
            stored,
            grid_data=board.grid_data,
            generation=board.generation,
            last_modified_at=board.last_modified_at,
        )
        self._boards[board_id] = updated
        return replace(updated)

    def delete_board(self, board_id: UUID) -> BoardModel | None:
        """Remove a board's record, together with its history."""
        self._history.pop(board_id, None)
        return self._boards.pop(board_id, None)

    def list_boards(self, offset: int, limit: int) -> list[tuple[UUID, BoardModel]]:
        """Boards ordered by last modification, most recent first."""
        ordered = sorted(
            self._boards.items(),
            key=lambda item: item[1].last_modified_at,
            reverse=True,
        )
        return [
            (board_id, replace(board))
            for board_id, board in ordered[offset : offset + limit]
        ]

    def append_history(self, entry: HistoryEntryModel) -> HistoryEntryModel:
        """Record the grid of a board at one generation."""
        self._history.setdefault(entry.board_id, []).append(entry)
        return entry

    def list_history(
        self, board_id: UUID, offset: int, limit: int
    ) -> list[HistoryEntryModel]:
        """History of a board ordered by generation, most recent first."""
        entries = sorted(
            self._history.get(board_id, []),
            key=lambda entry: entry.generation,
            reverse=True,
        )
        return entries[offset : offset + limit]

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._boards.clear()
        self._history.clear()
