"""Game engine module - pure functional game logic.

This module provides the core rule engine with:
- Action types for explicit user inputs
- Event types for redraws and replay
- MoveResult pattern for rejections
- Win detection and mini-board transitions

Usage:
    from app.services.game.engine import (
        apply_move,
        process_action,
        MoveResult,
        SelectCellAction,
    )

    # Process an action
    result = process_action(state, SelectCellAction(board_index=4, cell_index=0))

    if result.success:
        new_state = result.state
        events = result.events  # Hand these to the renderer
    else:
        # Rejections are silent for players; the state is unchanged
        print(f"Rejected: {result.error_code} - {result.error_message}")
"""

# Actions - explicit user inputs
from .actions import GameAction, SelectCellAction, build_action_from_payload

# Events - for renderers
from .events import (
    AnyGameEvent,
    CellMarked,
    GameEvent,
    MiniBoardClaimed,
    MiniBoardDrawn,
    MiniBoardReset,
    TurnEnded,
)

# Legal moves
from .legal_moves import get_legal_moves, has_any_legal_moves, is_playable

# Main processing
from .process import apply_move, process_action

# Mini-board transitions
from .transitions import apply_drawn_reset, post_move_transition

# Result types
from .validation import MoveResult, RejectionReason, ValidationResult, validate_move

# Win detection
from .win_detection import WIN_LINES, evaluate_mini_board, find_winning_line

__all__ = [
    # Actions
    "GameAction",
    "SelectCellAction",
    "build_action_from_payload",
    # Events
    "GameEvent",
    "AnyGameEvent",
    "CellMarked",
    "TurnEnded",
    "MiniBoardClaimed",
    "MiniBoardDrawn",
    "MiniBoardReset",
    # Processing
    "apply_move",
    "process_action",
    # Transitions
    "post_move_transition",
    "apply_drawn_reset",
    # Win detection
    "WIN_LINES",
    "evaluate_mini_board",
    "find_winning_line",
    # Validation
    "MoveResult",
    "RejectionReason",
    "ValidationResult",
    "validate_move",
    # Legal moves
    "get_legal_moves",
    "has_any_legal_moves",
    "is_playable",
]
