"""
Movement rules: is a proposed (origin, destination) pair allowed for the piece standing on origin?

Key idea: Use strategy pattern to define the movement rule for each piece type.

The rules are purely local to the one proposed move: nothing here looks at check, king safety, castling,
en passant or promotion. A rejected move is simply `False`, never an error.

NOTE two rules deliberately differ from tournament chess:
* the queen does NOT need a clear path (it may jump over pieces), unlike the rook and bishop
* the pawn double step does not check the square it passes over, and pawns only capture enemy pawns
"""

from dataclasses import dataclass
from typing import Callable

from src.chess.board import Board
from src.chess.pieces import Color, Piece, PieceType, opposite, same_color
from src.chess.square import BOARD_DIMENSIONS, Square

# The rank the pawns of each color start on, and the direction (in rows) they walk
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


@dataclass(frozen=True)
class Move:
    """A proposed move. Gets evaluated once, never stored."""

    origin: Square
    destination: Square

    @property
    def d_row(self) -> int:
        return self.destination.row - self.origin.row

    @property
    def d_col(self) -> int:
        return self.destination.col - self.origin.col

    def to_algebraic(self) -> str:
        return f"{self.origin.to_algebraic()}{self.destination.to_algebraic()}"


# --- MOVEMENT RULES ---
def is_valid_pawn_move(piece: Piece, move: Move, board: Board) -> bool:
    """
    A pawn:
    - moves a single square forward onto an empty square
    - may move two squares forward onto an empty square from its starting row (the square in between is not checked)
    - takes diagonally forward, but only an enemy PAWN
    """
    forward = PAWN_DIRECTION[piece.color]
    target = board.piece(move.destination)

    # single push
    if move.d_col == 0 and target is None and move.d_row == forward:
        return True

    # capture: only the opponent's pawn can be taken this way
    enemy_pawn = Piece(PieceType.PAWN, opposite(piece.color))
    if abs(move.d_col) == 1 and target == enemy_pawn and move.d_row == forward:
        return True

    # double push from the starting row
    on_start_row = move.origin.row == PAWN_START_ROW[piece.color]
    if on_start_row and move.d_col == 0 and target is None and move.d_row == 2 * forward:
        return True

    return False


def is_valid_knight_move(piece: Piece, move: Move, board: Board) -> bool:
    """Knights jump such that {|delta_row|, |delta_col|} = {1, 2}"""
    return {abs(move.d_row), abs(move.d_col)} == {1, 2}


def is_valid_bishop_move(piece: Piece, move: Move, board: Board) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|, and may not jump over pieces"""
    if abs(move.d_row) != abs(move.d_col):
        return False
    return board.is_path_clear(move.origin, move.destination)


def is_valid_rook_move(piece: Piece, move: Move, board: Board) -> bool:
    """Rooks move either horizontally or vertically, and may not jump over pieces"""
    if move.d_row != 0 and move.d_col != 0:
        return False
    return board.is_path_clear(move.origin, move.destination)


def is_valid_queen_move(piece: Piece, move: Move, board: Board) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical) and bishop moves (diagonal).

    Unlike the rook and the bishop, the path is not checked: the queen may jump over pieces.
    """
    straight = move.d_row == 0 or move.d_col == 0
    diagonal = abs(move.d_row) == abs(move.d_col)
    return straight or diagonal


def is_valid_king_move(piece: Piece, move: Move, board: Board) -> bool:
    """The king moves a single square in any direction. Whether that square is attacked does not matter."""
    return abs(move.d_row) <= 1 and abs(move.d_col) <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovementRuleFn = Callable[[Piece, Move, Board], bool]
MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.PAWN: is_valid_pawn_move,
    PieceType.KNIGHT: is_valid_knight_move,
    PieceType.BISHOP: is_valid_bishop_move,
    PieceType.ROOK: is_valid_rook_move,
    PieceType.QUEEN: is_valid_queen_move,
    PieceType.KING: is_valid_king_move,
}


def is_valid_move(
    board: Board, from_row: int, from_col: int, to_row: int, to_col: int
) -> bool:
    """
    The legality predicate.
    ---

    1. You cannot capture your own pieces. (This includes 'moving' a piece onto its own square.)
    2. Otherwise the movement rule of the piece on the origin square decides.
    3. No piece on the origin square? Nothing can move.
    """
    move = Move(Square(from_row, from_col), Square(to_row, to_col))
    piece = board.piece(move.origin)
    if piece is None:
        return False

    if same_color(piece, board.piece(move.destination)):
        return False

    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(piece, move, board)


def legal_destinations(board: Board, square: Square) -> list[Square]:
    """Every square the piece on the given square may move to (what a UI would highlight)"""
    rows, cols = BOARD_DIMENSIONS
    return [
        Square(row, col)
        for row in range(rows)
        for col in range(cols)
        if is_valid_move(board, square.row, square.col, row, col)
    ]
