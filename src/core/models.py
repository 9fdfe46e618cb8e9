"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
Symbol = str
PieceColor = str


@dataclass
class GameModel:
    """Transport-safe representation of a game used between API, Service, DB, and Game layers.

    * board: 8 rows of 8 symbols, row 0 is black's back rank. An empty square is a single space.
    * side_to_move: "white" or "black"
    * selection: [row, col] of the pending origin square, or None
    """

    board: list[list[Symbol]]
    side_to_move: PieceColor
    selection: Optional[list[int]]
