"""Legal move calculation across all mini-boards."""

from app.schemas.game_engine import GameState, MiniBoard, UnclaimedStatus


def is_playable(mini_board: MiniBoard) -> bool:
    """A mini-board accepts moves only while it is Unclaimed."""
    return isinstance(mini_board.status, UnclaimedStatus)


def get_legal_moves(state: GameState) -> list[tuple[int, int]]:
    """Determine every selection the current player may make.

    A move is legal if:
    - The mini-board is Unclaimed
    - The cell is empty

    Args:
        state: Current game state.

    Returns:
        (board_index, cell_index) pairs, board-major then cell order.
    """
    legal_moves: list[tuple[int, int]] = []

    for board_index, mini_board in enumerate(state.boards):
        if not is_playable(mini_board):
            continue

        for cell_index, cell in enumerate(mini_board.cells):
            if cell.occupant is None:
                legal_moves.append((board_index, cell_index))

    return legal_moves


def has_any_legal_moves(state: GameState) -> bool:
    """Quick check if any move is possible.

    More efficient than get_legal_moves() when you only need to know if moves exist.
    """
    return any(
        cell.occupant is None
        for mini_board in state.boards
        if is_playable(mini_board)
        for cell in mini_board.cells
    )
