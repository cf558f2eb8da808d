"""Requests and Response models"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.life.codec import grid_from_rows
from src.life.validation import MAX_HISTORY_PAGE

GridRows = list[list[bool]]


# --- REQUEST MODELS ---
class UploadBoardRequest(BaseModel):
    rows: int
    columns: int
    grid: Optional[GridRows] = None

    @field_validator("grid")
    @classmethod
    def validate_rectangular(cls, value: Optional[GridRows]) -> Optional[GridRows]:
        """A grid with ragged rows cannot be interpreted. Raises GridShapeError."""
        if value is None:
            return value
        grid_from_rows(value)
        return value


class BoardRequest(BaseModel):
    board_id: UUID


class AdvanceRequest(BaseModel):
    board_id: UUID
    generations: int


class HistoryRequest(BaseModel):
    board_id: UUID
    offset: int = 0
    limit: int = MAX_HISTORY_PAGE


class ListBoardsRequest(BaseModel):
    offset: int = 0
    limit: int = MAX_HISTORY_PAGE


# --- RESPONSE MODELS ---
class UploadBoardResponse(BaseModel):
    board_id: UUID
    message: str
    created_at: datetime


class BoardStateResponse(BaseModel):
    board_id: UUID
    grid: GridRows
    rows: int
    columns: int
    generation: int
    last_modified_at: datetime


class HistoryEntryResponse(BaseModel):
    generation: int
    grid: GridRows
    created_at: datetime


class HistoryResponse(BaseModel):
    board_id: UUID
    entries: list[HistoryEntryResponse]


class BoardSummaryResponse(BaseModel):
    board_id: UUID
    rows: int
    columns: int
    generation: int
    created_at: datetime
    last_modified_at: datetime
