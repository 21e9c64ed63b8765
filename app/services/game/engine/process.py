"""Main entry point for move processing.

This module provides the primary interface for playing the game:
- apply_move(): Validates and applies one cell selection
- process_action(): Dispatches a typed action and sequences its events
- Both return MoveResult with new state and events
"""

import logging

logger = logging.getLogger(__name__)

from app.schemas.game_engine import (
    Cell,
    ClaimedStatus,
    DrawnStatus,
    GameState,
    Move,
)

from .actions import GameAction, SelectCellAction
from .events import (
    AnyGameEvent,
    CellMarked,
    MiniBoardClaimed,
    MiniBoardDrawn,
    MiniBoardReset,
    TurnEnded,
)
from .transitions import apply_drawn_reset, post_move_transition
from .validation import MoveResult, validate_move
from .win_detection import find_winning_line


def apply_move(state: GameState, board_index: int, cell_index: int) -> MoveResult:
    """Apply a cell selection for the player whose turn it is.

    The whole move happens in one step: the cell is written, the turn
    toggles, the mini-board status is recomputed, and a drawn mini-board is
    cleared back to Unclaimed. The input state is never modified.

    Args:
        state: Current game state.
        board_index: Target mini-board (0-8).
        cell_index: Target cell within the mini-board (0-8).

    Returns:
        MoveResult.accepted with the new state and events, or
        MoveResult.rejected with a RejectionReason and no state.

    Example:
        >>> result = apply_move(state, 4, 4)
        >>> if result.success:
        ...     state = result.state
    """
    validation = validate_move(state, board_index, cell_index)
    if not validation.is_valid:
        return MoveResult.rejected(validation.error_code, validation.error_message)

    player = state.current_turn
    events: list[AnyGameEvent] = []

    # Write the cell first, then toggle the turn
    mini_board = state.boards[board_index]
    cells = list(mini_board.cells)
    cells[cell_index] = Cell(occupant=player)
    mini_board = mini_board.model_copy(update={"cells": cells})
    events.append(CellMarked(player=player, board_index=board_index, cell_index=cell_index))

    next_player = player.other
    moves_played = state.moves_played + 1
    events.append(TurnEnded(player=player, next_player=next_player, moves_played=moves_played))

    status = post_move_transition(mini_board)
    mini_board = mini_board.model_copy(update={"status": status})

    if isinstance(status, ClaimedStatus):
        winner, line = find_winning_line(mini_board.occupants())
        events.append(MiniBoardClaimed(board_index=board_index, winner=winner, line=list(line)))
        logger.info(
            "Mini-board claimed: board=%d, winner=%s, line=%s",
            board_index,
            winner.value,
            line,
        )

    elif isinstance(status, DrawnStatus):
        events.append(MiniBoardDrawn(board_index=board_index))
        mini_board = apply_drawn_reset(mini_board)
        events.append(MiniBoardReset(board_index=board_index))
        logger.info("Mini-board drawn and reset: board=%d", board_index)

    boards = list(state.boards)
    boards[board_index] = mini_board

    new_state = state.model_copy(
        update={
            "boards": boards,
            "current_turn": next_player,
            "moves_played": moves_played,
            "last_move": Move(board_index=board_index, cell_index=cell_index, player=player),
        }
    )

    logger.info(
        "Move applied: player=%s, board=%d, cell=%d, next=%s",
        player.value,
        board_index,
        cell_index,
        next_player.value,
    )
    return MoveResult.accepted(new_state, events)


def process_action(state: GameState, action: GameAction) -> MoveResult:
    """Process a game action and return the result.

    This is the main entry point for presentation layers. It:
    1. Dispatches to the appropriate handler
    2. Assigns sequence numbers to events
    3. Returns MoveResult with new state and events

    Args:
        state: Current game state.
        action: The action to process.

    Returns:
        MoveResult containing:
        - success: Whether the move was accepted
        - state: The new game state (if accepted)
        - events: List of events that occurred (with seq numbers)
        - error_code/error_message: Rejection details (if rejected)
    """
    action_type = type(action).__name__
    logger.debug("Processing action: type=%s, details=%s", action_type, action)

    if isinstance(action, SelectCellAction):
        result = apply_move(state, action.board_index, action.cell_index)
    else:
        raise TypeError(f"Unknown action type: {action_type}")

    if result.success and result.state is not None:
        result = _assign_event_sequences(result)
        logger.debug("Generated events: %s", [type(e).__name__ for e in result.events])
    else:
        logger.warning(
            "Action rejected: type=%s, error=%s",
            action_type,
            result.error_code.value if result.error_code else None,
        )

    return result


def _assign_event_sequences(result: MoveResult) -> MoveResult:
    """Assign monotonically increasing sequence numbers to events.

    Updates each event's seq field and increments the state's event_seq counter.
    """
    if result.state is None or not result.events:
        return result

    current_seq = result.state.event_seq
    for event in result.events:
        event.seq = current_seq
        current_seq += 1

    # Update state with new sequence counter
    new_state = result.state.model_copy(update={"event_seq": current_seq})

    return MoveResult.accepted(new_state, result.events)
