"""Defines the types of chess pieces, and the symbols used to draw them on the board"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import InvalidSymbolError


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()


def opposite(color: Color) -> Color:
    return Color.WHITE if color == Color.BLACK else Color.BLACK


@dataclass(frozen=True)
class Piece:
    """A piece is the pair (kind, color). Frozen, so a board snapshot can share it safely."""

    type: PieceType
    color: Color

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        if symbol not in SYMBOL_TO_PIECE:
            raise InvalidSymbolError(f"Not a piece symbol: {symbol!r}")
        piece_type, color = SYMBOL_TO_PIECE[symbol]
        return cls(piece_type, color)

    def to_symbol(self) -> str:
        return PIECE_TO_SYMBOL[(self.type, self.color)]


# An empty square is not a Piece: a square holds either a Piece or nothing.
SquareValue = Optional[Piece]
EMPTY: SquareValue = None
EMPTY_SYMBOL = " "

SYMBOL_TO_PIECE: dict[str, tuple[PieceType, Color]] = {
    "♔": (PieceType.KING, Color.WHITE),
    "♕": (PieceType.QUEEN, Color.WHITE),
    "♖": (PieceType.ROOK, Color.WHITE),
    "♗": (PieceType.BISHOP, Color.WHITE),
    "♘": (PieceType.KNIGHT, Color.WHITE),
    "♙": (PieceType.PAWN, Color.WHITE),
    "♚": (PieceType.KING, Color.BLACK),
    "♛": (PieceType.QUEEN, Color.BLACK),
    "♜": (PieceType.ROOK, Color.BLACK),
    "♝": (PieceType.BISHOP, Color.BLACK),
    "♞": (PieceType.KNIGHT, Color.BLACK),
    "♟": (PieceType.PAWN, Color.BLACK),
}

PIECE_TO_SYMBOL: dict[tuple[PieceType, Color], str] = {
    value: key for key, value in SYMBOL_TO_PIECE.items()
}


def square_from_symbol(symbol: str) -> SquareValue:
    """Decode one cell of the 13-symbol alphabet (12 pieces + the empty square)"""
    if symbol == EMPTY_SYMBOL:
        return EMPTY
    return Piece.from_symbol(symbol)


def square_to_symbol(value: SquareValue) -> str:
    return EMPTY_SYMBOL if value is None else value.to_symbol()


# --- COLOR CLASSIFICATION ---
# For every square value exactly one of is_white_piece / is_black_piece / is_empty holds.
def is_empty(value: SquareValue) -> bool:
    return value is None


def is_white_piece(value: SquareValue) -> bool:
    return value is not None and value.color == Color.WHITE


def is_black_piece(value: SquareValue) -> bool:
    return value is not None and value.color == Color.BLACK


def belongs_to(value: SquareValue, color: Color) -> bool:
    """Does the square hold a piece of the given color?"""
    return value is not None and value.color == color


def same_color(first: SquareValue, second: SquareValue) -> bool:
    """Both squares occupied, by pieces of the same color"""
    return first is not None and second is not None and first.color == second.color
