"""Tests for win and draw detection on raw grids."""

import numpy as np

from fourinarow.game.outcome import detect_outcome, find_winning_line, is_full
from fourinarow.utils import GameResult, empty_grid


def test_empty_grid_is_in_progress():
    assert detect_outcome(empty_grid()) == GameResult.IN_PROGRESS
    assert find_winning_line(empty_grid()) is None


def test_horizontal_win():
    grid = empty_grid()
    grid[0, 1:5] = 2
    assert detect_outcome(grid) == GameResult.PLAYER_TWO_WIN


def test_vertical_win():
    grid = empty_grid()
    grid[0:4, 6] = 1
    assert detect_outcome(grid) == GameResult.PLAYER_ONE_WIN


def test_rising_diagonal_win():
    grid = empty_grid()
    for i in range(4):
        grid[i, i + 2] = 1
    assert detect_outcome(grid) == GameResult.PLAYER_ONE_WIN


def test_falling_diagonal_win():
    grid = empty_grid()
    for i in range(4):
        grid[i + 2, 6 - i] = 2
    assert detect_outcome(grid) == GameResult.PLAYER_TWO_WIN


def test_three_or_broken_lines_do_not_win():
    grid = empty_grid()
    grid[0, 0:3] = 1
    grid[1, [0, 1, 3, 4]] = 2
    grid[2:5, 6] = 1
    assert detect_outcome(grid) == GameResult.IN_PROGRESS


def test_full_board_without_line_is_draw(draw_grid):
    grid = draw_grid
    assert is_full(grid)
    assert find_winning_line(grid) is None
    assert detect_outcome(grid) == GameResult.DRAW


def test_full_board_is_a_draw_even_with_a_line(draw_grid):
    grid = draw_grid
    grid[5, 0:4] = 1
    assert find_winning_line(grid) is not None
    assert detect_outcome(grid) == GameResult.DRAW


def test_terminal_status_is_kept():
    grid = empty_grid()
    assert detect_outcome(grid, GameResult.PLAYER_TWO_WIN) == GameResult.PLAYER_TWO_WIN
    assert detect_outcome(grid, GameResult.DRAW) == GameResult.DRAW


def test_detection_does_not_modify_grid(draw_grid):
    grid = draw_grid
    before = grid.copy()
    detect_outcome(grid)
    find_winning_line(grid)
    assert np.array_equal(grid, before)


def test_reference_scan_reports_first_line_row_major():
    grid = empty_grid()
    grid[0, 0:4] = 1
    assert find_winning_line(grid) == [(0, 0), (0, 1), (0, 2), (0, 3)]


def test_lines_for_both_sides_resolve_by_scan_order():
    grid = empty_grid()
    grid[0, 0:4] = 2
    grid[1, 0:4] = 1
    assert detect_outcome(grid) == GameResult.PLAYER_TWO_WIN
