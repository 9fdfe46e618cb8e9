"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

from sqlalchemy.orm import Session

from src.chess.board import STARTING_SYMBOLS
from src.db.sql_repository import GameModel, SQLGameRepository

STARTING_BOARD = [list(row) for row in STARTING_SYMBOLS]


def new_model() -> GameModel:
    return GameModel(board=STARTING_BOARD, side_to_move="white", selection=None)


def test_create_game(db_session_repo: Session) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    model = new_model()
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_get_game_by_id(db_session_repo: Session) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(new_model())
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_get_unknown_game(db_session_repo: Session) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(new_model())
    assert repo.get_game(uuid4()) is None


def test_update_game(db_session_repo: Session) -> None:
    """Update an earlier created record: a pawn moved and black is to move."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(new_model())

    board = [list(row) for row in STARTING_BOARD]
    board[4][4], board[6][4] = "♙", " "
    updated = GameModel(board=board, side_to_move="black", selection=None)
    assert repo.update_game(game_id, updated) == updated
    assert repo.get_game(game_id) == updated


def test_update_selection(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(new_model())

    selected = GameModel(board=STARTING_BOARD, side_to_move="white", selection=[6, 4])
    repo.update_game(game_id, selected)
    found = repo.get_game(game_id)
    assert found is not None
    assert found.selection == [6, 4]

    repo.update_game(game_id, new_model())
    found = repo.get_game(game_id)
    assert found is not None
    assert found.selection is None


def test_update_unknown_game(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), new_model()) is None


def test_delete_game(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    model, game_id = repo.create_game(new_model())
    assert repo.delete_game(game_id) == model
    assert repo.get_game(game_id) is None
    assert repo.delete_game(game_id) is None


def test_list_games(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.list_games() == []
    _, first = repo.create_game(new_model())
    _, second = repo.create_game(new_model())
    assert set(repo.list_games()) == {first, second}
