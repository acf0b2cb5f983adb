"""
board.py - Immutable board state for four-in-a-row

A Board is a value: placing a piece never changes the board it was called
on, it returns a new Board. The search tree can therefore hold any number of
positions at once without one branch disturbing another.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from fourinarow.debug import debug
from fourinarow.game.outcome import detect_outcome, find_winning_line
from fourinarow.utils import (ROWS, COLS, TOP_ROW, CELL_VALUES, Player, GameResult,
                              MoveRejection, empty_grid, get_column_height,
                              render_board_ascii)


class Board:
    """
    Snapshot of piece placement, the side to move and the game status.

    The status is always derived from the grid when the board is built, so
    the two can never disagree.
    """

    __slots__ = ('_grid', '_current_player', '_game_result')

    def __init__(self):
        """Create the empty starting position with Player.ONE to move."""
        self._set(empty_grid(), Player.ONE, GameResult.IN_PROGRESS)

    def _set(self, grid: np.ndarray, current_player: Player, game_result: GameResult) -> None:
        grid.flags.writeable = False
        self._grid = grid
        self._current_player = current_player
        self._game_result = game_result

    @classmethod
    def _build(cls, grid: np.ndarray, current_player: Player) -> 'Board':
        board = cls.__new__(cls)
        board._set(grid, current_player, detect_outcome(grid))
        return board

    @classmethod
    def from_grid(cls, grid, current_player: Optional[Player] = None) -> 'Board':
        """
        Build a board from an externally supplied grid.

        Args:
            grid: ROWS x COLS array-like of Player values, row 0 at the bottom
            current_player: Side to move; inferred from piece counts if None

        Returns:
            A new Board

        Raises:
            ValueError: if the grid has the wrong shape, unknown cell values,
                pieces floating above empty cells, or (when inferring the side
                to move) piece counts that legal play cannot produce
        """
        raw = np.asarray(grid)
        if raw.shape != (ROWS, COLS):
            raise ValueError(f"Grid must have shape {(ROWS, COLS)}, got {raw.shape}")
        if not set(np.unique(raw).tolist()) <= CELL_VALUES:
            raise ValueError(f"Grid values must be in {sorted(CELL_VALUES)}")
        cells = raw.astype(np.int8)

        occupied = cells != Player.EMPTY.value
        floating = occupied[1:, :] & ~occupied[:-1, :]
        if floating.any():
            bad_cols = sorted(set(np.nonzero(floating)[1].tolist()))
            raise ValueError(f"Pieces above empty cells in columns {bad_cols}")

        if current_player is None:
            ones = int(np.count_nonzero(cells == Player.ONE.value))
            twos = int(np.count_nonzero(cells == Player.TWO.value))
            if ones == twos:
                current_player = Player.ONE
            elif ones == twos + 1:
                current_player = Player.TWO
            else:
                raise ValueError(f"Cannot infer side to move from {ones} x and {twos} o pieces")
        elif current_player == Player.EMPTY:
            raise ValueError("current_player must be Player.ONE or Player.TWO")

        return cls._build(cells, current_player)

    @classmethod
    def from_position(cls, position: str, current_player: Optional[Player] = None) -> 'Board':
        """
        Parse ROWS*COLS comma-separated cell values, bottom row first.

        Raises:
            ValueError: on malformed text or an invalid grid
        """
        values = [int(v) for v in position.replace(" ", "").split(",") if v != ""]
        if len(values) != ROWS * COLS:
            raise ValueError(f"Position string must have {ROWS * COLS} values, got {len(values)}")
        return cls.from_grid(np.array(values).reshape(ROWS, COLS), current_player)

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the cells, row 0 at the bottom."""
        return self._grid

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def game_result(self) -> GameResult:
        return self._game_result

    @property
    def move_count(self) -> int:
        return int(np.count_nonzero(self._grid != Player.EMPTY.value))

    def is_game_over(self) -> bool:
        return self._game_result.is_game_over()

    def column_height(self, column: int) -> int:
        return get_column_height(self._grid, column)

    def check_move(self, column: int) -> Optional[MoveRejection]:
        """
        Explain why a move cannot be played.

        Returns:
            The rejection reason, or None if the move is legal
        """
        if self._game_result.is_game_over():
            return MoveRejection.GAME_OVER
        if not (0 <= column < COLS):
            return MoveRejection.OUT_OF_RANGE
        if self._grid[TOP_ROW, column] != Player.EMPTY.value:
            return MoveRejection.COLUMN_FULL
        return None

    def is_valid_move(self, column: int) -> bool:
        return self.check_move(column) is None

    def get_valid_moves(self) -> List[int]:
        if self._game_result.is_game_over():
            return []
        return [col for col in range(COLS) if self.is_valid_move(col)]

    def make_move(self, column: int) -> Optional['Board']:
        """
        Drop the mover's piece into a column.

        Args:
            column: Column index (0-indexed)

        Returns:
            The resulting Board, or None if the move is rejected. This board
            is left untouched either way.
        """
        reason = self.check_move(column)
        if reason is not None:
            debug.debug(f"Rejected move in column {column}: {reason.name}", "board")
            return None

        row = get_column_height(self._grid, column)
        grid = self._grid.copy()
        grid[row, column] = self._current_player.value
        debug.trace(f"{self._current_player.name} placed at ({row}, {column})", "board")

        child = Board._build(grid, self._current_player.other())
        if child.is_game_over():
            debug.debug(f"Move in column {column} ends the game: {child.game_result.name}", "board")
        return child

    def play_moves(self, columns: Sequence[int]) -> 'Board':
        """
        Apply a sequence of moves.

        Raises:
            ValueError: if any move in the sequence is rejected
        """
        board = self
        for i, column in enumerate(columns):
            reason = board.check_move(column)
            if reason is not None:
                raise ValueError(f"Move {i} (column {column}) rejected: {reason.name}")
            board = board.make_move(column)
        return board

    def get_winning_line(self) -> List[Tuple[int, int]]:
        """Cells of the first winning line found, or an empty list."""
        if self._game_result.winner() is None:
            return []
        return find_winning_line(self._grid) or []

    def get_state(self) -> np.ndarray:
        """Writable copy of the grid."""
        return self._grid.copy()

    def render(self) -> str:
        return render_board_ascii(self._grid)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"Board(moves={self.move_count}, to_move={self._current_player.name}, "
                f"result={self._game_result.name})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self._current_player == other._current_player
                and np.array_equal(self._grid, other._grid))

    def __hash__(self) -> int:
        return hash((self._grid.tobytes(), self._current_player))
