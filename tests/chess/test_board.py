"""Unit tests for /src/chess/board.py"""

import pytest

from src.chess.board import STARTING_SYMBOLS, Board, place
from src.chess.pieces import EMPTY, Color, Piece, PieceType
from src.chess.square import Square
from src.core.exceptions import InvalidBoardError, InvalidSquareError

EMPTY_ROWS = [" " * 8] * 8


def test_starting_position() -> None:
    """Black on top (rows 0-1), white at the bottom (rows 6-7), nothing in between"""
    board = Board.starting_position()
    assert board.to_symbols() == [list(row) for row in STARTING_SYMBOLS]
    assert board.piece(Square(0, 0)) == Piece(PieceType.ROOK, Color.BLACK)
    assert board.piece(Square(0, 4)) == Piece(PieceType.KING, Color.BLACK)
    assert board.piece(Square(7, 3)) == Piece(PieceType.QUEEN, Color.WHITE)
    assert board.piece(Square(7, 4)) == Piece(PieceType.KING, Color.WHITE)
    assert all(board.piece_at(1, col) == Piece(PieceType.PAWN, Color.BLACK) for col in range(8))
    assert all(board.piece_at(6, col) == Piece(PieceType.PAWN, Color.WHITE) for col in range(8))
    assert all(board.piece_at(row, col) is EMPTY for row in range(2, 6) for col in range(8))


def test_count_pieces_per_color() -> None:
    board = Board.starting_position()
    assert len(board.locate_color(Color.WHITE)) == 16
    assert len(board.locate_color(Color.BLACK)) == 16
    assert all(sq.row in (6, 7) for sq in board.locate_color(Color.WHITE))


def test_empty_board() -> None:
    board = Board.empty()
    assert board == Board.from_symbols(EMPTY_ROWS)
    assert board.locate_color(Color.WHITE) == []
    assert board.locate_color(Color.BLACK) == []


def test_from_symbols_accepts_lists() -> None:
    rows = [list(row) for row in STARTING_SYMBOLS]
    assert Board.from_symbols(rows) == Board.starting_position()


@pytest.mark.parametrize(
    "rows",
    [
        [" " * 8] * 7,
        [" " * 8] * 9,
        [" " * 8] * 7 + [" " * 7],
        [" " * 8] * 7 + [" " * 9],
    ],
)
def test_board_must_be_8_by_8(rows: list[str]) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_symbols(rows)


def test_move_piece_returns_new_snapshot() -> None:
    """The old board stays exactly as it was"""
    board = Board.starting_position()
    after = board.move_piece(Square(6, 4), Square(4, 4))

    assert after.piece(Square(4, 4)) == Piece(PieceType.PAWN, Color.WHITE)
    assert after.piece(Square(6, 4)) is EMPTY
    assert board == Board.starting_position()
    assert board.piece(Square(4, 4)) is EMPTY


def test_move_piece_captures() -> None:
    board = place(Board.empty(), {"a1": "♖", "a8": "♜"})
    after = board.move_piece(Square.from_algebraic("a1"), Square.from_algebraic("a8"))
    assert after.piece(Square.from_algebraic("a8")) == Piece(PieceType.ROOK, Color.WHITE)
    assert after.locate_color(Color.BLACK) == []


def test_move_only_changes_two_squares() -> None:
    board = Board.starting_position()
    after = board.move_piece(Square(7, 6), Square(5, 5))
    changed = [
        (row, col)
        for row in range(8)
        for col in range(8)
        if board.piece_at(row, col) != after.piece_at(row, col)
    ]
    assert sorted(changed) == [(5, 5), (7, 6)]


def test_place_piece_off_the_board() -> None:
    with pytest.raises(InvalidSquareError):
        Board.empty().place_piece(Piece.from_symbol("♙"), Square(8, 0))


def test_place_empty_removes_piece() -> None:
    board = Board.starting_position().place_piece(EMPTY, Square(0, 0))
    assert board.is_empty(Square(0, 0))


@pytest.mark.parametrize(
    "origin, destination, clear",
    [
        ("a1", "a8", False),  # blocked by the pawns
        ("a3", "h3", True),
        ("a3", "a6", True),
        ("c1", "h6", False),  # blocked by d2
        ("c3", "f6", True),
        ("d4", "d5", True),  # neighbours: nothing in between
    ],
)
def test_is_path_clear(origin: str, destination: str, clear: bool) -> None:
    board = Board.starting_position()
    assert board.is_path_clear(Square.from_algebraic(origin), Square.from_algebraic(destination)) == clear


def test_string_drawing() -> None:
    assert str(Board.starting_position()).splitlines() == STARTING_SYMBOLS
