"""Unit tests for src/db/memory_repository.py"""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from src.core.models import BoardModel, HistoryEntryModel
from src.db.memory_repository import InMemoryBoardRepository

CREATED = datetime(2025, 8, 29, 15, 39, 31, tzinfo=timezone.utc)


def mock_board(**changes) -> BoardModel:
    data = dict(
        grid_data="1,0;0,1",
        rows=2,
        columns=2,
        generation=0,
        created_at=CREATED,
        last_modified_at=CREATED,
    )
    data.update(changes)
    return BoardModel(**data)


def mock_entry(board_id: UUID, generation: int) -> HistoryEntryModel:
    return HistoryEntryModel(
        board_id=board_id,
        grid_data=f"generation {generation}",
        generation=generation,
        created_at=CREATED + timedelta(seconds=generation),
    )


def test_create_and_get_board(memory_repository: InMemoryBoardRepository) -> None:
    stored, board_id = memory_repository.create_board(mock_board())
    assert stored == mock_board()
    assert memory_repository.get_board(board_id) == mock_board()


def test_get_unknown_board(memory_repository: InMemoryBoardRepository) -> None:
    assert memory_repository.get_board(uuid4()) is None


def test_returned_board_is_a_copy(memory_repository: InMemoryBoardRepository) -> None:
    """Changing a fetched model does not change what is stored"""
    _, board_id = memory_repository.create_board(mock_board())
    fetched = memory_repository.get_board(board_id)
    assert fetched is not None
    fetched.generation = 42
    stored = memory_repository.get_board(board_id)
    assert stored is not None
    assert stored.generation == 0


def test_update_board(memory_repository: InMemoryBoardRepository) -> None:
    _, board_id = memory_repository.create_board(mock_board())
    later = CREATED + timedelta(minutes=1)
    updated = memory_repository.update_board(
        board_id,
        mock_board(grid_data="0,0;0,0", generation=7, last_modified_at=later, rows=9),
    )
    assert updated == mock_board(grid_data="0,0;0,0", generation=7, last_modified_at=later)


def test_update_unknown_board(memory_repository: InMemoryBoardRepository) -> None:
    assert memory_repository.update_board(uuid4(), mock_board()) is None


def test_delete_board(memory_repository: InMemoryBoardRepository) -> None:
    _, board_id = memory_repository.create_board(mock_board())
    memory_repository.append_history(mock_entry(board_id, 1))
    assert memory_repository.delete_board(board_id) == mock_board()
    assert memory_repository.get_board(board_id) is None
    assert memory_repository.list_history(board_id, 0, 100) == []
    assert memory_repository.delete_board(board_id) is None


def test_list_boards(memory_repository: InMemoryBoardRepository) -> None:
    ids = []
    for minutes in (1, 3, 2):
        _, board_id = memory_repository.create_board(
            mock_board(last_modified_at=CREATED + timedelta(minutes=minutes))
        )
        ids.append(board_id)
    listed = memory_repository.list_boards(0, 2)
    assert [board_id for board_id, _ in listed] == [ids[1], ids[2]]


def test_history_newest_first(memory_repository: InMemoryBoardRepository) -> None:
    _, board_id = memory_repository.create_board(mock_board())
    for generation in range(1, 5):
        memory_repository.append_history(mock_entry(board_id, generation))

    history = memory_repository.list_history(board_id, 0, 100)
    assert [entry.generation for entry in history] == [4, 3, 2, 1]
    page = memory_repository.list_history(board_id, 2, 5)
    assert [entry.generation for entry in page] == [2, 1]


def test_history_of_unknown_board(memory_repository: InMemoryBoardRepository) -> None:
    assert memory_repository.list_history(uuid4(), 0, 100) == []
