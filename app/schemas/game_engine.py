from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

BOARD_SIZE = 9  # mini-boards per game, and cells per mini-board


# Players
class Player(str, Enum):
    X = "X"
    O = "O"

    @property
    def other(self) -> "Player":
        return Player.O if self is Player.X else Player.X


# Leaf squares
class Cell(BaseModel):
    occupant: Player | None = None


# Mini-board statuses (cached, recomputed by the engine after every move)
class UnclaimedStatus(BaseModel):
    kind: Literal["unclaimed"] = "unclaimed"


class ClaimedStatus(BaseModel):
    kind: Literal["claimed"] = "claimed"
    winner: Player


class DrawnStatus(BaseModel):
    kind: Literal["drawn"] = "drawn"


MiniBoardStatus = Annotated[
    UnclaimedStatus | ClaimedStatus | DrawnStatus,
    Field(discriminator="kind"),
]


def _empty_cells() -> list[Cell]:
    return [Cell() for _ in range(BOARD_SIZE)]


class MiniBoard(BaseModel):
    """One 3x3 sub-game. Cells are row-major, indices 0-8."""

    cells: list[Cell] = Field(
        default_factory=_empty_cells,
        min_length=BOARD_SIZE,
        max_length=BOARD_SIZE,
    )
    status: MiniBoardStatus = Field(default_factory=UnclaimedStatus)

    def occupants(self) -> list[Player | None]:
        return [cell.occupant for cell in self.cells]


class Move(BaseModel):
    board_index: int
    cell_index: int
    player: Player


def _empty_boards() -> list[MiniBoard]:
    return [MiniBoard() for _ in range(BOARD_SIZE)]


def _check_index(name: str, index: int) -> None:
    # Negative indices must not wrap around like list indexing does
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < BOARD_SIZE:
        raise IndexError(f"{name} must be in 0-{BOARD_SIZE - 1}, got {index!r}")


# Game state for rendering and game flow
class GameState(BaseModel):
    """The whole game: nine mini-boards and whose turn it is.

    State is never mutated in place by the engine. Each accepted move
    produces a new GameState, so a rejected move can't leave a partially
    applied change behind. There is deliberately no outer-grid winner.
    """

    boards: list[MiniBoard] = Field(
        default_factory=_empty_boards,
        min_length=BOARD_SIZE,
        max_length=BOARD_SIZE,
    )
    current_turn: Player = Player.X
    moves_played: int = 0
    last_move: Move | None = None
    event_seq: int = 0  # Next sequence number for events (monotonically increasing)

    def occupant_at(self, board_index: int, cell_index: int) -> Player | None:
        """Return the occupant of a cell.

        Raises:
            IndexError: If either index is outside 0-8.
        """
        _check_index("board_index", board_index)
        _check_index("cell_index", cell_index)
        return self.boards[board_index].cells[cell_index].occupant

    def status_at(self, board_index: int) -> MiniBoardStatus:
        """Return the cached status of a mini-board.

        Raises:
            IndexError: If the index is outside 0-8.
        """
        _check_index("board_index", board_index)
        return self.boards[board_index].status

    def current_player(self) -> Player:
        return self.current_turn
