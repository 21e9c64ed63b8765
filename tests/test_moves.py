"""Tests for applying moves end to end.

Critical scenarios tested:
- Cell write and turn toggle on an accepted move
- Strict X/O alternation across many moves and boards
- Claiming a mini-board with a vertical line (scenario A)
- Draw followed by immediate reset (scenario B)
- The input state is never modified
"""

import pytest

from app.schemas.game_engine import (
    ClaimedStatus,
    GameState,
    Move,
    Player,
    UnclaimedStatus,
)
from app.services.game.engine import RejectionReason, apply_move

from .conftest import DRAW_MOVE_ORDER, play


class TestAcceptedMove:
    """Test the effects of a single accepted move."""

    def test_writes_current_player_and_toggles_turn(self, new_game: GameState):
        result = apply_move(new_game, 2, 7)

        assert result.success
        assert result.error_code is None
        assert result.state.occupant_at(2, 7) == Player.X
        assert result.state.current_player() == Player.O
        assert result.state.moves_played == 1
        assert result.state.last_move == Move(board_index=2, cell_index=7, player=Player.X)

    def test_does_not_modify_input_state(self, new_game: GameState):
        before = new_game.model_dump()

        apply_move(new_game, 0, 0)

        assert new_game.model_dump() == before

    def test_untouched_boards_are_unchanged(self, new_game: GameState):
        result = apply_move(new_game, 5, 5)

        for board_index, board in enumerate(result.state.boards):
            if board_index != 5:
                assert board.occupants() == [None] * 9


class TestTurnAlternation:
    """Test strict X/O alternation on accepted moves only."""

    @pytest.mark.parametrize("move_count", [0, 1, 2, 7, 20])
    def test_turn_follows_parity(self, new_game: GameState, move_count: int):
        # One move per board/cell pair, spread so no board gets a line
        moves = [(i % 9, i // 9) for i in range(move_count)]
        state = play(new_game, moves)

        expected = Player.X if move_count % 2 == 0 else Player.O
        assert state.current_player() == expected
        assert state.moves_played == move_count

    def test_rejected_moves_do_not_count(self, new_game: GameState):
        state = play(new_game, [(0, 0)])

        rejected = apply_move(state, 0, 0)
        assert not rejected.success

        state = play(state, [(0, 1)])
        assert state.occupant_at(0, 1) == Player.O
        assert state.current_player() == Player.X


class TestClaimScenario:
    """Test claiming a mini-board by completing a line."""

    def test_vertical_line_claims_board(self, new_game: GameState):
        """X plays 0, 3, 6 in board 0 while O plays 1, 4."""
        state = play(new_game, [(0, 0), (0, 1), (0, 3), (0, 4)])
        assert state.status_at(0) == UnclaimedStatus()

        result = apply_move(state, 0, 6)

        assert result.success
        assert result.state.status_at(0) == ClaimedStatus(winner=Player.X)
        assert result.state.current_player() == Player.O

    def test_claimed_cells_stay_visible(self, new_game: GameState):
        state = play(new_game, [(0, 0), (0, 1), (0, 3), (0, 4), (0, 6)])
        assert state.boards[0].occupants() == [
            Player.X, Player.O, None,
            Player.X, Player.O, None,
            Player.X, None, None,
        ]

    def test_claimed_board_rejects_empty_cells(self, new_game: GameState):
        state = play(new_game, [(0, 0), (0, 1), (0, 3), (0, 4), (0, 6)])

        result = apply_move(state, 0, 8)

        assert not result.success
        assert result.error_code == RejectionReason.MINI_BOARD_NOT_PLAYABLE

    def test_o_can_claim(self, new_game: GameState):
        # X wanders on board 8 while O takes the top row of board 3
        state = play(new_game, [(8, 0), (3, 0), (8, 4), (3, 1), (8, 5), (3, 2)])
        assert state.status_at(3) == ClaimedStatus(winner=Player.O)
        assert state.status_at(8) == UnclaimedStatus()


class TestDrawScenario:
    """Test that a drawn mini-board resets in the same step."""

    def test_draw_pattern_resets_board(self, new_game: GameState):
        moves = [(1, cell_index) for cell_index in DRAW_MOVE_ORDER]
        state = play(new_game, moves[:-1])
        assert state.boards[1].occupants().count(None) == 1

        result = apply_move(state, *moves[-1])

        assert result.success
        board = result.state.boards[1]
        assert board.status == UnclaimedStatus()
        assert board.occupants() == [None] * 9

    def test_turn_still_advances_on_draw(self, game_one_move_from_draw: GameState):
        result = apply_move(game_one_move_from_draw, 1, 8)

        assert result.success
        assert result.state.current_player() == Player.O
        assert result.state.last_move == Move(board_index=1, cell_index=8, player=Player.X)

    def test_reset_board_is_playable_again(self, game_one_move_from_draw: GameState):
        state = play(game_one_move_from_draw, [(1, 8)])

        result = apply_move(state, 1, 8)

        assert result.success
        assert result.state.occupant_at(1, 8) == Player.O

    def test_other_boards_untouched_by_reset(self, new_game: GameState):
        moves = [(4, 4)] + [(1, c) for c in DRAW_MOVE_ORDER]
        # (4, 4) shifts the turn, so O opens board 1; pattern colours swap
        state = play(new_game, moves)

        assert state.occupant_at(4, 4) == Player.X
        assert state.boards[1].occupants() == [None] * 9
