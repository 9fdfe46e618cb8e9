"""
The Game class will be the entrypoint into the domain layer for the service layer.

It holds the current board, the color to move, and the pending selection. The only thing that changes it is a tap on a square:

* nothing selected -> tapping one of your own pieces selects it (anything else is ignored)
* something selected -> the tap is the destination. The move is made if it is legal, and the selection is cleared either way.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import Move, is_valid_move, legal_destinations
from src.chess.pieces import Color, belongs_to, opposite
from src.chess.square import Square
from src.core.exceptions import GameStateError, InvalidBoardError, InvalidSymbolError
from src.core.models import GameModel

logger = logging.getLogger(__name__)


class TapOutcome(Enum):
    """What a tap did. Purely informational: the state of the Game is the source of truth."""

    SELECTED = auto()
    IGNORED = auto()
    MOVED = auto()
    REJECTED = auto()


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    side_to_move: Color
    selection: Optional[Square] = None

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, white to move, nothing selected"""
        return cls(board=Board.starting_position(), side_to_move=Color.WHITE)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        color_name = model.side_to_move.upper()
        if color_name not in Color.__members__:
            raise GameStateError(
                f"Invalid side to move: {model.side_to_move!r}. \nPick one from {','.join([c.name.lower() for c in Color])}"
            )

        try:
            board = Board.from_symbols(model.board)
        except (InvalidBoardError, InvalidSymbolError) as e:
            raise GameStateError(f"Stored board cannot be read: {e}") from e

        selection = None
        if model.selection is not None:
            if len(model.selection) != 2:
                raise GameStateError(f"Stored selection {model.selection} is not a (row, col) pair.")
            row, col = model.selection
            selection = Square(row, col)
            if not selection.is_within_bounds():
                raise GameStateError(f"Stored selection {model.selection} is off the board.")

        return cls(board, Color[color_name], selection)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_symbols(),
            side_to_move=self.side_to_move.name.lower(),
            selection=(
                [self.selection.row, self.selection.col] if self.selection else None
            ),
        )

    def on_square_tapped(self, row: int, col: int) -> TapOutcome:
        """
        Handle a tap on square (row, col)
        -----

        1. No selection yet? Select the square if it holds a piece of the side to move.
        2. Selection pending? Try the move from the selected square to the tapped one.
           Legal -> new board + other side to move. Illegal -> nothing changes.
        3. In case 2 the selection is cleared, whatever happened. (Tapping another one of your own pieces
           does NOT switch the selection: you have to tap it again.)
        """
        tapped = Square(row, col)
        tapped.assert_within_bounds()

        if self.selection is None:
            return self._select(tapped)

        origin = self.selection
        self.selection = None
        return self._attempt_move(Move(origin, tapped))

    def legal_destinations(self) -> list[Square]:
        """Where the selected piece could go. Empty when nothing is selected."""
        if self.selection is None:
            return []
        return legal_destinations(self.board, self.selection)

    # -- PRIVATE HELPERS ---
    def _select(self, square: Square) -> TapOutcome:
        if not belongs_to(self.board.piece(square), self.side_to_move):
            logger.debug("Ignored tap on %s: no %s piece there", square.to_algebraic(), self._side_name())
            return TapOutcome.IGNORED

        self.selection = square
        logger.debug("Selected %s for %s", square.to_algebraic(), self._side_name())
        return TapOutcome.SELECTED

    def _attempt_move(self, move: Move) -> TapOutcome:
        origin, destination = move.origin, move.destination
        if not is_valid_move(self.board, origin.row, origin.col, destination.row, destination.col):
            logger.debug("Rejected move %s for %s", move.to_algebraic(), self._side_name())
            return TapOutcome.REJECTED

        self.board = self.board.move_piece(origin, destination)
        logger.info("%s played %s", self._side_name().capitalize(), move.to_algebraic())
        self._change_turn()
        return TapOutcome.MOVED

    def _change_turn(self) -> None:
        self.side_to_move = opposite(self.side_to_move)

    def _side_name(self) -> str:
        return self.side_to_move.name.lower()
