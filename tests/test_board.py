"""Tests for immutable board transitions, move legality and gravity."""

import numpy as np
import pytest

from fourinarow.game.board import Board
from fourinarow.game.outcome import detect_outcome
from fourinarow.utils import COLS, ROWS, Player, GameResult, MoveRejection


def test_new_board_is_empty_with_player_one_to_move():
    b = Board()
    assert not b.grid.any()
    assert b.grid.shape == (ROWS, COLS)
    assert b.current_player == Player.ONE
    assert b.game_result == GameResult.IN_PROGRESS
    assert b.move_count == 0
    assert b.get_valid_moves() == list(range(COLS))


def test_make_move_returns_new_board_and_leaves_original_untouched():
    b = Board()
    before = b.get_state()

    child = b.make_move(3)

    assert child is not b
    assert np.array_equal(b.grid, before)
    assert b.current_player == Player.ONE
    assert child.grid[0, 3] == Player.ONE.value
    assert child.current_player == Player.TWO
    assert child.move_count == 1


def test_grid_is_read_only():
    b = Board().make_move(2)
    with pytest.raises(ValueError):
        b.grid[0, 0] = Player.TWO.value
    state = b.get_state()
    state[0, 0] = Player.TWO.value
    assert b.grid[0, 0] == Player.EMPTY.value


def test_pieces_fall_to_lowest_empty_row():
    b = Board().play_moves([3, 3, 3])
    assert list(b.grid[:, 3]) == [1, 2, 1, 0, 0, 0]
    assert b.column_height(3) == 3
    assert b.column_height(0) == 0


def test_only_target_column_changes():
    b = Board().play_moves([0, 1, 2, 3])
    child = b.make_move(5)
    diff = np.argwhere(child.grid != b.grid)
    assert diff.tolist() == [[0, 5]]


@pytest.mark.parametrize("column", [-1, COLS, 100])
def test_out_of_range_columns_are_rejected(column):
    b = Board()
    assert b.check_move(column) == MoveRejection.OUT_OF_RANGE
    assert b.make_move(column) is None


def test_full_column_is_rejected():
    b = Board().play_moves([0] * ROWS)
    assert b.game_result == GameResult.IN_PROGRESS
    assert b.check_move(0) == MoveRejection.COLUMN_FULL
    assert b.make_move(0) is None
    assert 0 not in b.get_valid_moves()


def test_four_vertical_pieces_win_for_player_one():
    b = Board().play_moves([3, 0, 3, 0, 3, 0])
    assert b.game_result == GameResult.IN_PROGRESS

    won = b.make_move(3)

    assert won.game_result == GameResult.PLAYER_ONE_WIN
    assert won.get_winning_line() == [(0, 3), (1, 3), (2, 3), (3, 3)]


def test_moves_on_finished_game_are_rejected_and_state_unchanged():
    won = Board().play_moves([3, 0, 3, 0, 3, 0, 3])
    before = won.get_state()
    for column in range(COLS):
        assert won.check_move(column) == MoveRejection.GAME_OVER
        assert won.make_move(column) is None
    assert np.array_equal(won.grid, before)
    assert won.get_valid_moves() == []


def test_turn_flips_even_on_winning_move():
    won = Board().play_moves([3, 0, 3, 0, 3, 0, 3])
    assert won.current_player == Player.TWO


def test_status_matches_recomputation_from_grid():
    boards = [Board(), Board().play_moves([3, 2, 3]), Board().play_moves([3, 0, 3, 0, 3, 0, 3])]
    for b in boards:
        assert detect_outcome(b.grid) == b.game_result
        assert detect_outcome(b.grid) == detect_outcome(b.grid)


def test_play_moves_raises_on_rejected_move():
    with pytest.raises(ValueError):
        Board().play_moves([0] * (ROWS + 1))


def test_boards_are_values():
    a = Board().play_moves([0, 1, 2])
    b = Board().play_moves([2, 1, 0])
    assert a == b
    assert hash(a) == hash(b)
    assert a != Board().play_moves([0, 1, 3])
    assert len({a, b}) == 1


def test_from_position_reads_bottom_row_first():
    values = [0] * (ROWS * COLS)
    values[3] = 1
    b = Board.from_position(",".join(str(v) for v in values))
    assert b.grid[0, 3] == Player.ONE.value
    assert b.current_player == Player.TWO
    assert b == Board().make_move(3)


def test_from_grid_rejects_bad_input():
    with pytest.raises(ValueError):
        Board.from_grid(np.zeros((ROWS - 1, COLS)))

    bad_value = np.zeros((ROWS, COLS), dtype=int)
    bad_value[0, 0] = 3
    with pytest.raises(ValueError):
        Board.from_grid(bad_value)

    floating = np.zeros((ROWS, COLS), dtype=int)
    floating[2, 4] = 1
    with pytest.raises(ValueError):
        Board.from_grid(floating)

    unbalanced = np.zeros((ROWS, COLS), dtype=int)
    unbalanced[0, 0:3] = 1
    with pytest.raises(ValueError):
        Board.from_grid(unbalanced)


def test_from_position_rejects_wrong_length():
    with pytest.raises(ValueError):
        Board.from_position("0,1,2")


def test_filling_last_cell_with_a_line_is_a_draw(draw_grid):
    grid = draw_grid
    grid[5, 0:3] = 1
    grid[5, 3] = 0
    b = Board.from_grid(grid, Player.ONE)
    assert b.game_result == GameResult.IN_PROGRESS

    filled = b.make_move(3)
    assert filled.get_winning_line() == []
    assert filled.game_result == GameResult.DRAW
