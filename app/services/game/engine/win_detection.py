"""Winning-line detection for a single mini-board."""

from collections.abc import Sequence

from app.schemas.game_engine import BOARD_SIZE, Player

# Scan order matters: the first complete line found decides the winner.
WIN_LINES: tuple[tuple[int, int, int], ...] = (
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def find_winning_line(
    cells: Sequence[Player | None],
) -> tuple[Player, tuple[int, int, int]] | None:
    """Find the first complete line of one player's marks.

    Args:
        cells: The 9 occupants of a mini-board, row-major.

    Returns:
        (winner, line) for the first winning line in scan order, or None.

    Raises:
        ValueError: If cells does not hold exactly 9 entries.
    """
    if len(cells) != BOARD_SIZE:
        raise ValueError(f"Expected {BOARD_SIZE} cells, got {len(cells)}")

    for a, b, c in WIN_LINES:
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return cells[a], (a, b, c)
    return None


def evaluate_mini_board(cells: Sequence[Player | None]) -> Player | None:
    """Return the player who completed a line, or None.

    If malformed input holds lines for both players, the first line in
    WIN_LINES order wins.
    """
    found = find_winning_line(cells)
    return found[0] if found else None
