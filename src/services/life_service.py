"""Orchestration of communication from API router to simulation logic and persistence layers (and the reverse direction)."""

import logging
from datetime import datetime, timezone
from uuid import UUID

from src.api.models import (
    AdvanceRequest,
    BoardRequest,
    BoardStateResponse,
    BoardSummaryResponse,
    HistoryEntryResponse,
    HistoryRequest,
    HistoryResponse,
    ListBoardsRequest,
    UploadBoardRequest,
    UploadBoardResponse,
)
from src.core.exceptions import BoardNotFoundError, InvalidRequestError
from src.core.models import BoardModel, HistoryEntryModel
from src.db.repository import BoardRepository
from src.life.codec import decode_grid, encode_grid, grid_from_rows, grid_to_rows
from src.life.grid import Grid
from src.life.rules import next_generation
from src.life.simulation import MAX_STABLE_ITERATIONS, advance, run_until_stable
from src.life.validation import (
    validate_board_id,
    validate_generations,
    validate_page,
    validate_upload,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GameOfLifeService:
    """Orchestration of layers for the Game of Life boards."""

    def __init__(self, repository: BoardRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def upload_board(self, request: UploadBoardRequest) -> UploadBoardResponse:
        """Store a new board at generation 0."""

        # Validate the request before anything gets built or stored
        validate_upload(request.rows, request.columns, request.grid).raise_if_invalid()
        if request.grid is None:
            raise InvalidRequestError("Grid cannot be null")
        grid = grid_from_rows(request.grid)

        now = utc_now()
        new_board = BoardModel(
            grid_data=encode_grid(grid),
            rows=request.rows,
            columns=request.columns,
            generation=0,
            created_at=now,
            last_modified_at=now,
        )
        stored_board, board_id = self.repo.create_board(new_board)

        logger.info(
            "Board uploaded with ID: %s, Size: %dx%d",
            board_id,
            request.rows,
            request.columns,
        )
        return UploadBoardResponse(
            board_id=board_id,
            message=f"Board uploaded successfully. Size: {request.rows}x{request.columns}",
            created_at=stored_board.created_at,
        )

    def get_board_state(self, request: BoardRequest) -> BoardStateResponse:
        """Current state of the board, without advancing it."""
        validate_board_id(request.board_id).raise_if_invalid()
        board = self._fetch_board(request.board_id)
        return self._create_state_response(request.board_id, board)

    def advance_one(self, request: BoardRequest) -> BoardStateResponse:
        """Advance the board by a single generation."""
        validate_board_id(request.board_id).raise_if_invalid()

        board = self._fetch_board(request.board_id)
        grid = next_generation(self._current_grid(board))
        generation = board.generation + 1
        self._record_generation(request.board_id, grid, generation)
        updated = self._store_state(request.board_id, board, grid, generation)

        logger.info(
            "Advanced board %s to generation %d", request.board_id, generation
        )
        return self._create_state_response(request.board_id, updated)

    def advance_by(self, request: AdvanceRequest) -> BoardStateResponse:
        """
        Advance the board by `generations` generations.

        Every intermediate generation goes into the history, the board itself is only written once at the end.
        """
        validate_board_id(request.board_id).merge(
            validate_generations(request.generations)
        ).raise_if_invalid()

        board = self._fetch_board(request.board_id)
        grid = self._current_grid(board)
        generation = board.generation
        for grid in advance(grid, request.generations):
            generation += 1
            self._record_generation(request.board_id, grid, generation)
        updated = self._store_state(request.board_id, board, grid, generation)

        logger.info(
            "Advanced board %s by %d generations to generation %d",
            request.board_id,
            request.generations,
            generation,
        )
        return self._create_state_response(request.board_id, updated)

    def advance_to_stable(self, request: BoardRequest) -> BoardStateResponse:
        """
        Advance the board until a step no longer changes it.
        ----
        Gives up after MAX_STABLE_ITERATIONS steps and returns whatever state was reached, which is not an error.
        The response looks the same in both cases.
        """
        validate_board_id(request.board_id).raise_if_invalid()

        board = self._fetch_board(request.board_id)
        previous = grid = self._current_grid(board)
        generation = board.generation
        iterations = 0
        for next_grid in run_until_stable(grid):
            previous, grid = grid, next_grid
            generation += 1
            iterations += 1
            self._record_generation(request.board_id, grid, generation)

        if grid != previous:
            logger.warning(
                "Maximum iterations (%d) reached for board %s. Returning current state.",
                MAX_STABLE_ITERATIONS,
                request.board_id,
            )
        updated = self._store_state(request.board_id, board, grid, generation)

        logger.info(
            "Calculated final state for board %s after %d iterations",
            request.board_id,
            iterations,
        )
        return self._create_state_response(request.board_id, updated)

    def get_history(self, request: HistoryRequest) -> HistoryResponse:
        """Recorded generations of a board, most recent first."""
        validate_board_id(request.board_id).merge(
            validate_page(request.offset, request.limit)
        ).raise_if_invalid()

        board = self._fetch_board(request.board_id)
        entries = self.repo.list_history(request.board_id, request.offset, request.limit)
        return HistoryResponse(
            board_id=request.board_id,
            entries=[
                HistoryEntryResponse(
                    generation=entry.generation,
                    grid=grid_to_rows(
                        decode_grid(entry.grid_data, board.rows, board.columns)
                    ),
                    created_at=entry.created_at,
                )
                for entry in entries
            ],
        )

    def list_boards(self, request: ListBoardsRequest) -> list[BoardSummaryResponse]:
        """Show recorded boards, most recently modified first."""
        validate_page(request.offset, request.limit).raise_if_invalid()
        return [
            BoardSummaryResponse(
                board_id=board_id,
                rows=board.rows,
                columns=board.columns,
                generation=board.generation,
                created_at=board.created_at,
                last_modified_at=board.last_modified_at,
            )
            for board_id, board in self.repo.list_boards(request.offset, request.limit)
        ]

    def delete_board(self, request: BoardRequest) -> None:
        """Handle a request to delete a board record (and its history)."""
        validate_board_id(request.board_id).raise_if_invalid()
        if self.repo.delete_board(request.board_id) is None:
            raise BoardNotFoundError(f"Board with ID {request.board_id} not found.")
        logger.info("Deleted board %s", request.board_id)

    # -- Internal helpers --
    def _create_state_response(
        self, board_id: UUID, board: BoardModel
    ) -> BoardStateResponse:
        """Convert info in BoardModel to a BoardStateResponse (for board with given ID.)"""
        return BoardStateResponse(
            board_id=board_id,
            grid=grid_to_rows(self._current_grid(board)),
            rows=board.rows,
            columns=board.columns,
            generation=board.generation,
            last_modified_at=board.last_modified_at,
        )

    def _current_grid(self, board: BoardModel) -> Grid:
        return decode_grid(board.grid_data, board.rows, board.columns)

    def _record_generation(self, board_id: UUID, grid: Grid, generation: int) -> None:
        self.repo.append_history(
            HistoryEntryModel(
                board_id=board_id,
                grid_data=encode_grid(grid),
                generation=generation,
                created_at=utc_now(),
            )
        )

    def _store_state(
        self, board_id: UUID, board: BoardModel, grid: Grid, generation: int
    ) -> BoardModel:
        """Write the final grid + generation of an advancement back to the repository."""
        board.grid_data = encode_grid(grid)
        board.generation = generation
        board.last_modified_at = utc_now()
        updated = self.repo.update_board(board_id, board)
        if updated is None:
            # board got deleted while it was being advanced
            raise BoardNotFoundError(f"Board with ID {board_id} not found.")
        return updated

    def _fetch_board(self, board_id: UUID) -> BoardModel:
        """Attempt to find the board in the repository and raise error if it fails."""
        board = self.repo.get_board(board_id)
        if board is None:
            raise BoardNotFoundError(f"Board with ID {board_id} not found.")
        return board
