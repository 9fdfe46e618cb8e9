"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    GameListResponse,
    GameResponse,
    GetGameRequest,
    TapRequest,
)
from src.chess.game import Game
from src.core.exceptions import GameNotFoundError
from src.core.models import GameModel
from src.core.shared_types import Color
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self) -> GameResponse:
        """Set up a fresh board: standard starting position, white to move."""

        # Create a new Game, and convert into GameModel
        new_game = Game.new_game()
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)

        # Return a GameResponse
        return self._create_game_response(game_id, stored_game)

    def tap_square(self, request: TapRequest) -> GameResponse:
        """A player tapped a square: select a piece, or try to move the selected one there."""

        # Retrieve persisted GameModel from repository
        stored_model = self._fetch_game(request.game_id)

        # Create a new Game instance from the retrieved GameModel
        game = Game.from_model(stored_model)

        # Feed it the tap
        outcome = game.on_square_tapped(request.row, request.col)
        logger.debug(
            "Game %s: tap (%d, %d) -> %s",
            request.game_id,
            request.row,
            request.col,
            outcome.name.lower(),
        )

        # Capture updated state in GameModel and store in repository
        after_tap = game.to_model()
        self.repo.update_game(request.game_id, after_tap)

        # Return a GameResponse
        return self._create_game_response(request.game_id, after_tap)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        The rendering side redraws fully from this after every tap.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def list_games(self) -> GameListResponse:
        """Show all recorded games."""
        return GameListResponse(game_ids=self.repo.list_games())

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise GameNotFoundError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = Game.from_model(model)
        return GameResponse(
            game_id=game_id,
            board=model.board,
            side_to_move=Color(model.side_to_move),
            selection=tuple(model.selection) if model.selection else None,
            legal_destinations=[
                (square.row, square.col) for square in game.legal_destinations()
            ],
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game_model
