"""Game event types - emitted during state transitions.

Events describe what happened during a move, enabling:
- Incremental redraws (only repaint what changed)
- Animations for claims and draw resets, which leave no trace in state
- Move replay / audit logging
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from app.schemas.game_engine import Player


class GameEvent(BaseModel):
    """Base class for all game events."""

    event_type: str
    seq: int = 0  # Sequence number assigned during processing


class CellMarked(GameEvent):
    """A player's mark was written into an empty cell."""

    event_type: Literal["cell_marked"] = "cell_marked"
    player: Player
    board_index: int
    cell_index: int


class TurnEnded(GameEvent):
    """The turn passed to the other player."""

    event_type: Literal["turn_ended"] = "turn_ended"
    player: Player
    next_player: Player
    moves_played: int = Field(..., description="Accepted moves so far, including this one")


class MiniBoardClaimed(GameEvent):
    """A mini-board was won by completing a line."""

    event_type: Literal["mini_board_claimed"] = "mini_board_claimed"
    board_index: int
    winner: Player
    line: list[int] = Field(..., description="The three cell indices that formed the line")


class MiniBoardDrawn(GameEvent):
    """A mini-board filled up with no winning line."""

    event_type: Literal["mini_board_drawn"] = "mini_board_drawn"
    board_index: int


class MiniBoardReset(GameEvent):
    """A drawn mini-board was cleared and is playable again."""

    event_type: Literal["mini_board_reset"] = "mini_board_reset"
    board_index: int


# Union of all event types for type checking
AnyGameEvent = Annotated[
    CellMarked | TurnEnded | MiniBoardClaimed | MiniBoardDrawn | MiniBoardReset,
    Field(discriminator="event_type"),
]
