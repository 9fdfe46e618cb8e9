"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color

Symbol = str


# --- REQUEST MODELS ---
class Tap(BaseModel):
    """The rendering side forwards every tap as (row, col). Row 0 is the top row (black's back rank)."""

    row: int
    col: int

    @field_validator("row")
    @classmethod
    def validate_row(cls, value: int) -> int:
        if not 0 <= value < BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(
                f"row must lie in 0..{BOARD_DIMENSIONS[0] - 1}, got {value}."
            )
        return value

    @field_validator("col")
    @classmethod
    def validate_col(cls, value: int) -> int:
        if not 0 <= value < BOARD_DIMENSIONS[1]:
            raise InvalidRequestError(
                f"col must lie in 0..{BOARD_DIMENSIONS[1] - 1}, got {value}."
            )
        return value


class TapRequest(Tap):
    game_id: UUID


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    """Read-only projection of a game: everything needed to draw it."""

    game_id: UUID
    board: list[list[Symbol]]
    side_to_move: Color
    selection: Optional[tuple[int, int]]
    legal_destinations: list[tuple[int, int]]


class GameListResponse(BaseModel):
    game_ids: list[UUID]
