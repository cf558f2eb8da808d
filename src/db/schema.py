"""Database tables / schema"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import ForeignKey, Index, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBBoard(Base):
    __tablename__ = "boards"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    grid_data: Mapped[str] = mapped_column(Text)
    rows: Mapped[int]
    columns: Mapped[int]
    generation: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default=utc_now, index=True)
    last_modified_at: Mapped[datetime] = mapped_column(
        default=utc_now, onupdate=utc_now, index=True
    )


class DBHistoryEntry(Base):
    """One row per computed generation. Rows are only ever inserted."""

    __tablename__ = "board_history"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    board_id: Mapped[UUID] = mapped_column(
        ForeignKey("boards.id", ondelete="CASCADE"), index=True
    )
    grid_data: Mapped[str] = mapped_column(Text)
    generation: Mapped[int]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)

    __table_args__ = (Index("ix_board_history_board_generation", "board_id", "generation"),)
