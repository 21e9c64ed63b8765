"""Game service module.

Provides:
- Game initialization (start_game.py)
- Game engine processing (engine/)
- Locked single-game holder (session.py)
"""

# Re-export from engine for convenience
from .engine import (
    GameAction,
    MoveResult,
    RejectionReason,
    SelectCellAction,
    apply_move,
    build_action_from_payload,
    process_action,
)
from .session import GameSession
from .start_game import initialize_game

__all__ = [
    # Initialization
    "initialize_game",
    "GameSession",
    # Engine
    "GameAction",
    "MoveResult",
    "RejectionReason",
    "SelectCellAction",
    "apply_move",
    "process_action",
    "build_action_from_payload",
]
