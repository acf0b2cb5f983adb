"""
utils.py - Constants, enumerations and helpers shared across the engine

Row 0 of every grid is the BOTTOM row: pieces fall toward lower row
indices, and the top row of the board is ``ROWS - 1``.
"""

from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

# Board geometry (fixed)
ROWS = 6
COLS = 7
CONNECT_N = 4  # Pieces in a line needed to win
TOP_ROW = ROWS - 1

DEFAULT_SEARCH_DEPTH = 6


class Player(Enum):
    """Players, doubling as cell contents."""
    EMPTY = 0
    ONE = 1    # Side A, moves first
    TWO = 2    # Side B

    def other(self) -> 'Player':
        """Get the opposing side."""
        if self == Player.ONE:
            return Player.TWO
        if self == Player.TWO:
            return Player.ONE
        raise ValueError("EMPTY has no opponent")

    @property
    def symbol(self) -> str:
        return PIECE_SYMBOLS[self]

    def __str__(self):
        return self.symbol


PIECE_SYMBOLS = {
    Player.EMPTY: " ",
    Player.ONE: "x",
    Player.TWO: "o",
}

CELL_VALUES = frozenset(p.value for p in Player)


class GameResult(Enum):
    """Terminal classification of a position."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS

    def winner(self) -> Optional[Player]:
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @staticmethod
    def win_for(player: Player) -> 'GameResult':
        if player == Player.ONE:
            return GameResult.PLAYER_ONE_WIN
        if player == Player.TWO:
            return GameResult.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {player!r}")


class MoveRejection(Enum):
    """Why a move cannot be applied. Callers treat every reason alike."""
    GAME_OVER = auto()
    OUT_OF_RANGE = auto()
    COLUMN_FULL = auto()


# Unit vectors (dx, dy) in reference scan order: dx outer, dy inner
DIRECTION_VECTORS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if (dx, dy) != (0, 0)
)


def is_valid_position(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


def empty_grid() -> np.ndarray:
    return np.zeros((ROWS, COLS), dtype=np.int8)


def get_column_height(grid: np.ndarray, column: int) -> int:
    """
    Number of pieces stacked in a column.

    Relies on gravity: the first empty cell from the bottom marks the height.
    """
    for row in range(ROWS):
        if grid[row, column] == Player.EMPTY.value:
            return row
    return ROWS


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Draw a grid as text, top row first so that row 0 ends up at the bottom.

    Args:
        grid: ROWS x COLS array of Player values

    Returns:
        Multi-line string with a footer of 1-based column numbers
    """
    separator = "+-" * COLS + "+"
    lines: List[str] = []
    for row in range(TOP_ROW, -1, -1):
        lines.append(separator)
        cells = [PIECE_SYMBOLS[Player(int(grid[row, col]))] for col in range(COLS)]
        lines.append("|" + "|".join(cells) + "|")
    lines.append(separator)
    lines.append(" " + " ".join(str(col + 1) for col in range(COLS)))
    return "\n".join(lines)
