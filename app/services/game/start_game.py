import logging

from app.schemas.game_engine import BOARD_SIZE, GameState, MiniBoard, Player

logger = logging.getLogger(__name__)


def _create_mini_boards() -> list[MiniBoard]:
    """Create the nine empty, Unclaimed mini-boards."""
    return [MiniBoard() for _ in range(BOARD_SIZE)]


def initialize_game() -> GameState:
    """Create a fresh game: all 81 cells empty, X to move."""
    state = GameState(
        boards=_create_mini_boards(),
        current_turn=Player.X,
    )
    logger.info("Game initialized: first_player=%s", state.current_turn.value)
    return state
