"""Pydantic schemas for the game HTTP endpoints."""

from pydantic import BaseModel, Field

from app.schemas.game_engine import GameState
from app.services.game.engine import AnyGameEvent, RejectionReason


class SelectCellRequest(BaseModel):
    """Request body for selecting a cell.

    Indices are range-checked by the engine, not here, so that an
    out-of-range click is a silent rejection rather than a 422.
    """

    board_index: int = Field(..., description="Mini-board index (0-8)")
    cell_index: int = Field(..., description="Cell index within the mini-board (0-8)")


class GameStateResponse(BaseModel):
    """Everything a renderer needs to draw the board."""

    state: GameState = Field(..., description="Current game state")
    legal_moves: list[tuple[int, int]] = Field(
        ...,
        description="(board_index, cell_index) pairs the current player may select",
    )


class SelectCellResponse(BaseModel):
    """Response from selecting a cell."""

    accepted: bool = Field(..., description="Whether the move was applied")
    error_code: RejectionReason | None = Field(
        None, description="Why the move was rejected, if it was"
    )
    error_message: str | None = None
    state: GameState = Field(..., description="Game state after the selection")
    events: list[AnyGameEvent] = Field(
        default_factory=list, description="Events produced by an accepted move"
    )
