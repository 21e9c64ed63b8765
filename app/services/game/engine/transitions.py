"""Mini-board status transitions after a move."""

import logging

logger = logging.getLogger(__name__)

from app.schemas.game_engine import (
    Cell,
    ClaimedStatus,
    DrawnStatus,
    MiniBoard,
    MiniBoardStatus,
    UnclaimedStatus,
)

from .win_detection import evaluate_mini_board


def post_move_transition(mini_board: MiniBoard) -> MiniBoardStatus:
    """Recompute the status of the mini-board that was just played.

    Claimed is terminal: a board that already has a winner keeps it.

    Returns:
        ClaimedStatus if a line is complete, DrawnStatus if the board is
        full without a line, otherwise UnclaimedStatus.
    """
    if isinstance(mini_board.status, ClaimedStatus):
        return mini_board.status

    occupants = mini_board.occupants()
    winner = evaluate_mini_board(occupants)
    if winner is not None:
        logger.debug("Mini-board has a winner: %s", winner.value)
        return ClaimedStatus(winner=winner)

    if all(occupant is not None for occupant in occupants):
        logger.debug("Mini-board is full with no winning line")
        return DrawnStatus()

    return UnclaimedStatus()


def apply_drawn_reset(mini_board: MiniBoard) -> MiniBoard:
    """Clear a drawn mini-board so it can be played again.

    Draws are not terminal. The returned board is indistinguishable from
    a fresh one.
    """
    return mini_board.model_copy(
        update={
            "cells": [Cell() for _ in mini_board.cells],
            "status": UnclaimedStatus(),
        }
    )
