"""HTTP surface: the rendering side creates a game, forwards taps, and redraws from the returned state."""

import logging
from typing import Annotated, Generator
from uuid import UUID

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from src.api.models import (
    DeleteGameRequest,
    GameListResponse,
    GameResponse,
    GetGameRequest,
    Tap,
    TapRequest,
)
from src.core.exceptions import GameError, GameNotFoundError, GameStateError
from src.core.log_config import configure_logging
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.services.chess_service import ChessService

logger = logging.getLogger(__name__)


def get_service(
    db: Annotated[Session, Depends(get_db)],
) -> Generator[ChessService, None, None]:
    yield ChessService(SQLGameRepository(db))


ServiceDep = Annotated[ChessService, Depends(get_service)]


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Chess board", description="Two local players, one board, moves by tapping squares.")
    _add_exception_handlers(app)
    _add_routes(app)
    return app


def _add_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(GameNotFoundError)
    async def game_not_found(request: Request, exc: GameNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(GameStateError)
    async def corrupt_game(request: Request, exc: GameStateError) -> JSONResponse:
        logger.error("Stored game could not be loaded: %s", exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})

    @app.exception_handler(GameError)
    async def bad_request(request: Request, exc: GameError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


def _add_routes(app: FastAPI) -> None:
    @app.post("/games", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
    def create_game(service: ServiceDep) -> GameResponse:
        return service.create_new_game()

    @app.get("/games", response_model=GameListResponse)
    def list_games(service: ServiceDep) -> GameListResponse:
        return service.list_games()

    @app.get("/games/{game_id}", response_model=GameResponse)
    def get_game(game_id: UUID, service: ServiceDep) -> GameResponse:
        return service.get_game_state(GetGameRequest(game_id=game_id))

    @app.post("/games/{game_id}/taps", response_model=GameResponse)
    def tap_square(game_id: UUID, tap: Tap, service: ServiceDep) -> GameResponse:
        return service.tap_square(TapRequest(game_id=game_id, row=tap.row, col=tap.col))

    @app.delete("/games/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_game(game_id: UUID, service: ServiceDep) -> None:
        service.delete_game(DeleteGameRequest(game_id=game_id))
