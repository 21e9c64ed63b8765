import logging

from app.services.game import GameSession

logger = logging.getLogger(__name__)

_game_session: GameSession | None = None


def get_game_session() -> GameSession:
    """Get the singleton game session.

    Returns the existing session if initialized, otherwise starts a new game.
    """
    global _game_session
    if _game_session is None:
        logger.info("Starting new game session")
        _game_session = GameSession()
    return _game_session


def close_game_session() -> None:
    """Drop the current game session; the next request starts a new game."""
    global _game_session
    if _game_session is not None:
        logger.info("Closing game session")
        _game_session = None
