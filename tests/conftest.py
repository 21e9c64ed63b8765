"""Shared fixtures for game engine tests."""

import pytest

from app.schemas.game_engine import (
    Cell,
    ClaimedStatus,
    GameState,
    MiniBoard,
    MiniBoardStatus,
    Player,
    UnclaimedStatus,
)
from app.services.game.engine import apply_move
from app.services.game.start_game import initialize_game

# Classic full board with no winning line:
# X O X
# X O O
# O X X
DRAW_PATTERN = "XOXXOOOXX"

# Legal alternating order (X first) that fills a board with DRAW_PATTERN
# without completing a line before the last move.
DRAW_MOVE_ORDER = [0, 1, 2, 4, 3, 5, 7, 6, 8]


def parse_cells(pattern: str) -> list[Player | None]:
    """Turn 'XO.X.....' into a list of occupants; '.' or ' ' is empty."""
    pattern = pattern.replace("\n", "")
    assert len(pattern) == 9, f"pattern must have 9 cells, got {len(pattern)}"
    return [Player(ch) if ch in ("X", "O") else None for ch in pattern]


def create_mini_board(
    pattern: str = ".........",
    status: MiniBoardStatus | None = None,
) -> MiniBoard:
    """Helper to create a mini-board from a 9-character pattern."""
    return MiniBoard(
        cells=[Cell(occupant=occupant) for occupant in parse_cells(pattern)],
        status=status if status is not None else UnclaimedStatus(),
    )


def create_state(
    boards: dict[int, MiniBoard] | None = None,
    current_turn: Player = Player.X,
) -> GameState:
    """Helper to create a game state with some mini-boards replaced."""
    state = initialize_game()
    all_boards = list(state.boards)
    for index, board in (boards or {}).items():
        all_boards[index] = board
    return GameState(boards=all_boards, current_turn=current_turn)


def play(state: GameState, moves: list[tuple[int, int]]) -> GameState:
    """Apply moves that are all expected to be accepted."""
    for board_index, cell_index in moves:
        result = apply_move(state, board_index, cell_index)
        assert result.success, (
            f"move ({board_index}, {cell_index}) rejected: {result.error_code}"
        )
        state = result.state
    return state


@pytest.fixture
def new_game() -> GameState:
    """Fresh game with X to move."""
    return initialize_game()


@pytest.fixture
def game_with_claimed_board() -> GameState:
    """Game where X has claimed mini-board 0 via the top row and O is to move."""
    board = create_mini_board("XXXOO....", status=ClaimedStatus(winner=Player.X))
    return create_state({0: board}, current_turn=Player.O)


@pytest.fixture
def game_one_move_from_draw() -> GameState:
    """Game where mini-board 1 needs one more X in cell 8 to be a draw."""
    board = create_mini_board("XOXXOOOX.")
    return create_state({1: board}, current_turn=Player.X)
