"""Implementation of (Board)Repository using SQLAlchemy"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import StorageError
from src.core.models import BoardModel, HistoryEntryModel
from src.db.schema import DBBoard, DBHistoryEntry

logger = logging.getLogger(__name__)


class SQLBoardRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_board(self, board_id: UUID) -> BoardModel | None:
        """Get board by ID, if record exists."""
        with self._storage_errors(f"reading board {board_id}"):
            board_db = self._fetch_board(board_id)
            if board_db:
                return self._to_model(board_db)
            return None

    def create_board(self, board: BoardModel) -> tuple[BoardModel, UUID]:
        """Store new board and return the stored data + newly created board ID."""
        new_id = uuid4()
        with self._storage_errors("creating board"):
            board_db = DBBoard(
                id=new_id,
                grid_data=board.grid_data,
                rows=board.rows,
                columns=board.columns,
                generation=board.generation,
                created_at=board.created_at,
                last_modified_at=board.last_modified_at,
            )
            self.db.add(board_db)
            self.db.commit()
            self.db.refresh(board_db)
            return self._to_model(board_db), new_id

    def update_board(self, board_id: UUID, board: BoardModel) -> BoardModel | None:
        """Overwrite current state of an existing record. Dimensions and creation time are never touched."""
        with self._storage_errors(f"updating board {board_id}"):
            board_db = self._fetch_board(board_id)
            if not board_db:
                return None
            board_db.grid_data = board.grid_data
            board_db.generation = board.generation
            board_db.last_modified_at = board.last_modified_at
            self.db.commit()
            self.db.refresh(board_db)
            return self._to_model(board_db)

    def delete_board(self, board_id: UUID) -> BoardModel | None:
        """Remove a board's record, together with its history."""
        with self._storage_errors(f"deleting board {board_id}"):
            board_db = self._fetch_board(board_id)
            if not board_db:
                return None
            board_model = self._to_model(board_db)
            # SQLite does not enforce ON DELETE CASCADE unless told to, so remove history explicitly
            self.db.execute(
                delete(DBHistoryEntry).where(DBHistoryEntry.board_id == board_id)
            )
            self.db.delete(board_db)
            self.db.commit()
            return board_model

    def list_boards(self, offset: int, limit: int) -> list[tuple[UUID, BoardModel]]:
        """Boards ordered by last modification, most recent first."""
        with self._storage_errors("listing boards"):
            query = (
                select(DBBoard)
                .order_by(DBBoard.last_modified_at.desc())
                .offset(offset)
                .limit(limit)
            )
            return [
                (board_db.id, self._to_model(board_db))
                for board_db in self.db.scalars(query)
            ]

    def append_history(self, entry: HistoryEntryModel) -> HistoryEntryModel:
        """Record the grid of a board at one generation."""
        with self._storage_errors(f"adding history entry for board {entry.board_id}"):
            entry_db = DBHistoryEntry(
                id=uuid4(),
                board_id=entry.board_id,
                grid_data=entry.grid_data,
                generation=entry.generation,
                created_at=entry.created_at,
            )
            self.db.add(entry_db)
            self.db.commit()
            self.db.refresh(entry_db)
            return self._to_history_model(entry_db)

    def list_history(
        self, board_id: UUID, offset: int, limit: int
    ) -> list[HistoryEntryModel]:
        """History of a board ordered by generation, most recent first."""
        with self._storage_errors(f"reading history of board {board_id}"):
            query = (
                select(DBHistoryEntry)
                .where(DBHistoryEntry.board_id == board_id)
                .order_by(DBHistoryEntry.generation.desc())
                .offset(offset)
                .limit(limit)
            )
            return [self._to_history_model(entry_db) for entry_db in self.db.scalars(query)]

    @contextmanager
    def _storage_errors(self, action: str) -> Iterator[None]:
        """Undo the pending transaction and report any SQLAlchemy failure as a StorageError."""
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Storage failure while %s", action)
            raise StorageError(f"Storage failure while {action}.") from exc

    def _fetch_board(self, board_id: UUID) -> DBBoard | None:
        query = select(DBBoard).where(DBBoard.id == board_id)
        return self.db.scalar(query)

    def _to_model(self, board_db: DBBoard) -> BoardModel:
        """Convert SQLAlchemy model to data transfer model."""
        return BoardModel(
            grid_data=board_db.grid_data,
            rows=board_db.rows,
            columns=board_db.columns,
            generation=board_db.generation,
            created_at=_as_utc(board_db.created_at),
            last_modified_at=_as_utc(board_db.last_modified_at),
        )

    def _to_history_model(self, entry_db: DBHistoryEntry) -> HistoryEntryModel:
        return HistoryEntryModel(
            board_id=entry_db.board_id,
            grid_data=entry_db.grid_data,
            generation=entry_db.generation,
            created_at=_as_utc(entry_db.created_at),
        )


def _as_utc(moment: datetime) -> datetime:
    """SQLite hands back naive datetimes. Everything stored here is UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
