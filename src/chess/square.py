"""
A square on the board

(placed in its own module as multiple other modules need to import it)

Squares are addressed the way the board is drawn: (row, col), row 0 at the top (black's back rank),
row 7 at the bottom (white's back rank), col 0 on the left (the a-file).
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidSquareError

# (rows, cols)
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' is the top-left square (0, 0), 'h1' the bottom-right one (7, 7)"""
        if len(sq) != 2 or not sq[0].isalpha() or not sq[1].isdigit():
            raise InvalidSquareError(f"Cannot interpret {sq!r} as a square name.")
        square = cls(row=BOARD_DIMENSIONS[0] - int(sq[1]), col=ord(sq[0]) - ord("a"))
        square.assert_within_bounds()
        return square

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{BOARD_DIMENSIONS[0] - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def assert_within_bounds(self) -> None:
        if not self.is_within_bounds():
            raise InvalidSquareError(
                f"Square ({self.row}, {self.col}) is not on the {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} board."
            )


def squares_between(origin: Square, destination: Square) -> list[Square]:
    """
    The squares strictly in between two squares, walking along the shared row, column or diagonal.

    Returns an empty list if the squares are neighbours, identical, or do not share a line at all.
    """
    d_row = destination.row - origin.row
    d_col = destination.col - origin.col
    on_a_line = d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)
    if not on_a_line:
        return []

    step_row = (d_row > 0) - (d_row < 0)
    step_col = (d_col > 0) - (d_col < 0)
    squares_found: list[Square] = []
    row, col = origin.row + step_row, origin.col + step_col
    while (row, col) != (destination.row, destination.col) and (step_row or step_col):
        squares_found.append(Square(row, col))
        row += step_row
        col += step_col
    return squares_found
