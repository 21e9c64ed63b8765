"""REST endpoints for the local game table."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies.game import get_game_session
from app.schemas.game import GameStateResponse, SelectCellRequest, SelectCellResponse
from app.services.game import GameSession
from app.services.game.engine import get_legal_moves

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/game", tags=["game"])

CurrentSession = Annotated[GameSession, Depends(get_game_session)]


@router.get("", response_model=GameStateResponse)
def get_game(session: CurrentSession):
    """Get the current game state and legal moves."""
    logger.debug("GET /game")
    state = session.snapshot()
    return GameStateResponse(state=state, legal_moves=get_legal_moves(state))


@router.post("/select", response_model=SelectCellResponse)
def select_cell(session: CurrentSession, request: SelectCellRequest):
    """Select a cell for the player whose turn it is.

    Rejected selections are not HTTP errors: the response carries
    accepted=False and the unchanged state, and the client simply redraws.

    Args:
        session: The current game session.
        request: Target mini-board and cell.

    Returns:
        SelectCellResponse with the resulting state and events.
    """
    logger.info(
        "POST /game/select - board: %d, cell: %d",
        request.board_index,
        request.cell_index,
    )

    result = session.select(request.board_index, request.cell_index)
    state = result.state if result.success and result.state is not None else session.snapshot()

    return SelectCellResponse(
        accepted=result.success,
        error_code=result.error_code,
        error_message=result.error_message,
        state=state,
        events=result.events,
    )
