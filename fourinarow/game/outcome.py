"""
outcome.py - Terminal classification of a four-in-a-row grid

The status of a position is a pure function of its grid: nothing here reads
or writes anything but the array passed in.
"""

from typing import List, Optional, Set, Tuple

import numpy as np

from fourinarow.utils import (ROWS, COLS, CONNECT_N, TOP_ROW, Player, GameResult,
                              DIRECTION_VECTORS, is_valid_position)

# (row_delta, col_delta) for each line axis; one per axis-pair
LINE_AXES = ((0, 1), (1, 0), (1, 1), (1, -1))

Line = List[Tuple[int, int]]


def _line_starts(grid: np.ndarray, drow: int, dcol: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Find every cell that begins a full line of CONNECT_N equal pieces.

    Returns:
        (mask, base): boolean mask over the valid start window and the
        window of start-cell values it was computed from
    """
    span = CONNECT_N - 1
    rows = ROWS - span * drow
    cols = COLS - span * abs(dcol)
    col_start = span if dcol < 0 else 0

    base = grid[0:rows, col_start:col_start + cols]
    mask = base != Player.EMPTY.value
    for i in range(1, CONNECT_N):
        r0 = i * drow
        c0 = col_start + i * dcol
        mask &= grid[r0:r0 + rows, c0:c0 + cols] == base
    return mask, base


def winning_sides(grid: np.ndarray) -> Set[int]:
    """Cell values of every side that owns at least one complete line."""
    sides: Set[int] = set()
    for drow, dcol in LINE_AXES:
        mask, base = _line_starts(grid, drow, dcol)
        if mask.any():
            sides.update(int(v) for v in np.unique(base[mask]))
    return sides


def find_winning_line(grid: np.ndarray) -> Optional[Line]:
    """
    Reference scan for the first winning line.

    Cells are visited row-major from the bottom-left; from each occupied cell
    all eight unit vectors are tried in DIRECTION_VECTORS order. The first
    run of CONNECT_N equal pieces found is returned as (row, col) pairs.
    """
    for row in range(ROWS):
        for col in range(COLS):
            piece = Player(int(grid[row, col]))
            if piece == Player.EMPTY:
                continue
            for dx, dy in DIRECTION_VECTORS:
                cells = [(row + dy * i, col + dx * i) for i in range(CONNECT_N)]
                if all(is_valid_position(r, c) and grid[r, c] == piece.value for r, c in cells):
                    return cells
    return None


def is_full(grid: np.ndarray) -> bool:
    """With gravity, the board is full exactly when the top row is."""
    return bool(np.all(grid[TOP_ROW] != Player.EMPTY.value))


def detect_outcome(grid: np.ndarray, previous: GameResult = GameResult.IN_PROGRESS) -> GameResult:
    """
    Classify a grid as in progress, won by one side, or drawn.

    Args:
        grid: ROWS x COLS array of Player values, row 0 at the bottom
        previous: Status already known for this grid; a terminal status is
            returned unchanged

    Returns:
        The GameResult for the grid
    """
    if previous.is_game_over():
        return previous

    # A full board is a draw even when its last piece completed a line
    if is_full(grid):
        return GameResult.DRAW

    sides = winning_sides(grid)
    if len(sides) == 1:
        return GameResult.win_for(Player(sides.pop()))
    if sides:
        # Both sides own a line, which legal play cannot produce.
        # Report whichever line the reference scan reaches first.
        row, col = find_winning_line(grid)[0]
        return GameResult.win_for(Player(int(grid[row, col])))
    return GameResult.IN_PROGRESS
