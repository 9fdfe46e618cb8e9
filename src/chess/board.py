"""The Game board: an immutable snapshot of the configuration of pieces. Every change produces a new Board."""

from dataclasses import dataclass
from typing import Self

from src.chess.pieces import (
    EMPTY,
    Color,
    Piece,
    SquareValue,
    belongs_to,
    square_from_symbol,
    square_to_symbol,
)
from src.chess.square import BOARD_DIMENSIONS, Square, squares_between
from src.core.exceptions import InvalidBoardError

Grid = tuple[tuple[SquareValue, ...], ...]

# Drawn top to bottom: black's back rank first, white's back rank last.
STARTING_SYMBOLS: list[str] = [
    "♜♞♝♛♚♝♞♜",
    "♟♟♟♟♟♟♟♟",
    "        ",
    "        ",
    "        ",
    "        ",
    "♙♙♙♙♙♙♙♙",
    "♖♘♗♕♔♗♘♖",
]


@dataclass(frozen=True)
class Board:
    grid: Grid

    def __post_init__(self):
        rows, cols = BOARD_DIMENSIONS
        if len(self.grid) != rows or any(len(row) != cols for row in self.grid):
            raise InvalidBoardError(
                f"A board must have exactly {rows} rows of {cols} squares."
            )

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_symbols(STARTING_SYMBOLS)

    @classmethod
    def empty(cls) -> Self:
        rows, cols = BOARD_DIMENSIONS
        return cls(tuple(tuple(EMPTY for _ in range(cols)) for _ in range(rows)))

    @classmethod
    def from_symbols(cls, rows: list[str] | list[list[str]]) -> Self:
        """
        Construct a board from its drawing: one entry per row, each holding one symbol per square.

        ex. standard starting position (see STARTING_SYMBOLS):
        * black pieces on row 0, starting with the rook in the top-left corner
        * black pawns cover row 1, white pawns row 6
        * rows 2 through 5 are 8 spaces (empty squares)
        * white pieces on row 7
        Rows may be given as strings or as lists of single-character strings.
        """
        if len(rows) != BOARD_DIMENSIONS[0]:
            raise InvalidBoardError(
                f"Expected {BOARD_DIMENSIONS[0]} rows, got {len(rows)}."
            )
        return cls(tuple(tuple(square_from_symbol(s) for s in row) for row in rows))

    def to_symbols(self) -> list[list[str]]:
        """Reverse operation: what the board looks like, one symbol per square"""
        return [[square_to_symbol(value) for value in row] for row in self.grid]

    def piece(self, square: Square) -> SquareValue:
        return self.grid[square.row][square.col]

    def piece_at(self, row: int, col: int) -> SquareValue:
        return self.grid[row][col]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is EMPTY

    def is_path_clear(self, origin: Square, destination: Square) -> bool:
        """No piece on any square strictly between origin and destination"""
        return all(self.is_empty(sq) for sq in squares_between(origin, destination))

    def locate_color(self, color: Color) -> list[Square]:
        return [
            Square(row, col)
            for row, values in enumerate(self.grid)
            for col, value in enumerate(values)
            if belongs_to(value, color)
        ]

    def place_piece(self, value: SquareValue, square: Square) -> Self:
        """New snapshot with a single square replaced (placing EMPTY removes a piece)"""
        square.assert_within_bounds()
        new_row = (
            self.grid[square.row][: square.col]
            + (value,)
            + self.grid[square.row][square.col + 1 :]
        )
        return type(self)(
            self.grid[: square.row] + (new_row,) + self.grid[square.row + 1 :]
        )

    def move_piece(self, origin: Square, destination: Square) -> Self:
        """New snapshot: the piece on origin now stands on destination (capturing whatever was there), origin is empty"""
        piece_that_moved = self.piece(origin)
        return self.place_piece(EMPTY, origin).place_piece(
            piece_that_moved, destination
        )

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.to_symbols())


def place(board: Board, placements: dict[str, str]) -> Board:
    """Convenience: put several pieces on a board at once, ex. {"e4": "♙", "d5": "♟"}"""
    for square_name, symbol in placements.items():
        board = board.place_piece(Piece.from_symbol(symbol), Square.from_algebraic(square_name))
    return board
