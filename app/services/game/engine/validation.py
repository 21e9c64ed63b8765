"""Validation layer for moves and the MoveResult pattern.

Separates validation from processing logic:
- validate_move() checks if a selection is legal given current state
- MoveResult replaces exceptions for control flow
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)

from app.schemas.game_engine import BOARD_SIZE, GameState, UnclaimedStatus

from .events import AnyGameEvent


class RejectionReason(str, Enum):
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    CELL_OCCUPIED = "CELL_OCCUPIED"
    MINI_BOARD_NOT_PLAYABLE = "MINI_BOARD_NOT_PLAYABLE"


@dataclass
class MoveResult:
    """Result of applying a move.

    A rejected move carries no state: the caller keeps the state it had.
    """

    state: GameState | None = None
    events: list[AnyGameEvent] = field(default_factory=list)
    success: bool = True
    error_code: RejectionReason | None = None
    error_message: str | None = None

    @classmethod
    def accepted(
        cls,
        state: GameState,
        events: list[AnyGameEvent] | None = None,
    ) -> "MoveResult":
        """Create a successful result with new state and events."""
        return cls(
            state=state,
            events=events or [],
            success=True,
        )

    @classmethod
    def rejected(cls, reason: RejectionReason, message: str) -> "MoveResult":
        """Create a rejection with error details."""
        return cls(
            state=None,
            events=[],
            success=False,
            error_code=reason,
            error_message=message,
        )


@dataclass
class ValidationResult:
    """Result of validating a move before applying it."""

    is_valid: bool = True
    error_code: RejectionReason | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True)

    @classmethod
    def error(cls, reason: RejectionReason, message: str) -> "ValidationResult":
        """Create a validation failure with error details."""
        return cls(
            is_valid=False,
            error_code=reason,
            error_message=message,
        )


def _in_range(index: object) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_SIZE


def validate_move(
    state: GameState,
    board_index: int,
    cell_index: int,
) -> ValidationResult:
    """Validate a cell selection before applying it.

    Checks, in order:
    - Both indices are within 0-8
    - The mini-board is Unclaimed (claimed boards accept no further moves,
      even into empty cells)
    - The cell is empty

    Args:
        state: Current game state.
        board_index: Target mini-board.
        cell_index: Target cell within the mini-board.

    Returns:
        ValidationResult indicating success or failure with error details.
    """
    logger.debug(
        "Validating move: board=%s, cell=%s, player=%s",
        board_index,
        cell_index,
        state.current_turn.value,
    )

    if not _in_range(board_index) or not _in_range(cell_index):
        logger.warning(
            "Validation failed: INDEX_OUT_OF_RANGE, board=%r, cell=%r",
            board_index,
            cell_index,
        )
        return ValidationResult.error(
            RejectionReason.INDEX_OUT_OF_RANGE,
            f"Board and cell indices must be in 0-{BOARD_SIZE - 1}",
        )

    mini_board = state.boards[board_index]
    if not isinstance(mini_board.status, UnclaimedStatus):
        logger.warning(
            "Validation failed: MINI_BOARD_NOT_PLAYABLE, board=%d, status=%s",
            board_index,
            mini_board.status.kind,
        )
        return ValidationResult.error(
            RejectionReason.MINI_BOARD_NOT_PLAYABLE,
            f"Mini-board {board_index} is {mini_board.status.kind}",
        )

    occupant = mini_board.cells[cell_index].occupant
    if occupant is not None:
        logger.warning(
            "Validation failed: CELL_OCCUPIED, board=%d, cell=%d, occupant=%s",
            board_index,
            cell_index,
            occupant.value,
        )
        return ValidationResult.error(
            RejectionReason.CELL_OCCUPIED,
            f"Cell {cell_index} of mini-board {board_index} is taken by {occupant.value}",
        )

    logger.debug("Move validated successfully: board=%d, cell=%d", board_index, cell_index)
    return ValidationResult.ok()
