"""
Custom errors shared across layers.

NOTE: an illegal move is NOT an error. The rule engine answers with a plain boolean and the game simply keeps its state.
These errors are reserved for broken contracts (coordinates off the board, unreadable boards) and for the outer layers.
"""


class GameError(Exception):
    """Base class for everything raised on purpose by this application."""


# --- DOMAIN ---
class InvalidSquareError(GameError):
    """A tap / square that does not lie on the 8x8 board."""


class InvalidSymbolError(GameError):
    """A character that is not part of the 13-symbol board alphabet."""


class InvalidBoardError(GameError):
    """Board data that is not exactly 8 rows of 8 square values."""


class GameStateError(GameError):
    """Stored game data that cannot be turned back into a Game."""


# --- PERSISTENCE ---
class RepositoryError(GameError):
    """Something went wrong fetching / storing a game."""


class GameNotFoundError(RepositoryError):
    """No game recorded under the requested id."""


# --- API ---
class InvalidRequestError(GameError, ValueError):
    """Request data rejected by validation. Subclasses ValueError so pydantic reports it as a validation error."""
