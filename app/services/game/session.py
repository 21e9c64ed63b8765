"""Single-game session holding the current state behind a lock."""

import logging
import threading

from app.schemas.game_engine import GameState

from .engine import MoveResult, SelectCellAction, process_action
from .start_game import initialize_game

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the current GameState of one game.

    Applying a move is not idempotent, so select() runs validation, the
    engine step and the state swap under one lock per session.
    """

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else initialize_game()
        self._lock = threading.Lock()

    def select(self, board_index: int, cell_index: int) -> MoveResult:
        """Apply a selection and make the resulting state current.

        Rejected selections leave the current state untouched.
        """
        action = SelectCellAction(board_index=board_index, cell_index=cell_index)
        with self._lock:
            result = process_action(self._state, action)
            if result.success and result.state is not None:
                self._state = result.state
            else:
                logger.debug(
                    "Selection ignored: board=%s, cell=%s, error=%s",
                    board_index,
                    cell_index,
                    result.error_code,
                )
        return result

    def snapshot(self) -> GameState:
        """Return a deep copy of the current state for rendering."""
        with self._lock:
            return self._state.model_copy(deep=True)
