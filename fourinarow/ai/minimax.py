"""
minimax.py - Depth-limited minimax search for four-in-a-row

Player.ONE maximizes and Player.TWO minimizes the same Player.ONE-relative
score. Every column is tried left to right, and a later column only
replaces the current best on a strictly better score, so equal scores keep
the leftmost column. There is no pruning: the whole tree down to the depth
limit is visited, which keeps results reproducible for a given position.
"""

import math
from typing import NamedTuple, Optional

from fourinarow.ai.evaluation import CenterDistanceEvaluator, Evaluator, terminal_score
from fourinarow.debug import debug, DebugLevel
from fourinarow.game.board import Board
from fourinarow.utils import COLS, DEFAULT_SEARCH_DEPTH, Player


class SearchResult(NamedTuple):
    """Best column (None when there is no move to make) and its score."""
    column: Optional[int]
    score: float

    @property
    def has_move(self) -> bool:
        return self.column is not None


class MinimaxPlayer:
    """
    Chooses moves by exhaustive minimax search to a fixed depth.

    The evaluator is only consulted at the depth limit; finished games are
    scored directly from their result.
    """

    def __init__(self, depth: int = DEFAULT_SEARCH_DEPTH, evaluator: Optional[Evaluator] = None):
        """
        Args:
            depth: Number of plies to look ahead (0 evaluates the position only)
            evaluator: Scoring strategy, CenterDistanceEvaluator by default
        """
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.depth = depth
        self.evaluator = evaluator if evaluator is not None else CenterDistanceEvaluator()
        self.nodes_evaluated = 0

    def search(self, board: Board) -> SearchResult:
        """Run the search from the given position."""
        self.nodes_evaluated = 0
        with debug.timer("minimax_search", "search") as timing:
            result = self._minimax(board, 0)
        debug.info(f"Search depth {self.depth} for {board.current_player.name}: "
                   f"column={result.column} score={result.score:.6f} "
                   f"nodes={self.nodes_evaluated} time={timing.get('elapsed') or 0.0:.3f}s", "search")
        return result

    def get_move(self, board: Board) -> Optional[int]:
        """Best column for the side to move, or None if none exists."""
        return self.search(board).column

    def _minimax(self, board: Board, depth: int) -> SearchResult:
        self.nodes_evaluated += 1

        if board.is_game_over():
            return SearchResult(None, terminal_score(board.game_result))

        if depth >= self.depth:
            return SearchResult(None, self.evaluator.evaluate(board))

        maximizing = board.current_player == Player.ONE
        best_column = None
        best_score = -math.inf if maximizing else math.inf

        for column in range(COLS):
            child = board.make_move(column)
            if child is None:
                continue

            score = self._minimax(child, depth + 1).score
            if debug.is_enabled_for(DebugLevel.TRACE, "search"):
                debug.trace(f"depth {depth} column {column} -> {score:.6f}", "search")

            if maximizing:
                if score > best_score:
                    best_column, best_score = column, score
            elif score < best_score:
                best_column, best_score = column, score

        if best_column is None:
            debug.warning("No legal move found for an unfinished position", "search")
            return SearchResult(None, self.evaluator.evaluate(board))

        return SearchResult(best_column, best_score)


def choose_move(board: Board, evaluator: Optional[Evaluator] = None,
                max_depth: int = DEFAULT_SEARCH_DEPTH) -> SearchResult:
    """Search a position and return the best column with its score."""
    return MinimaxPlayer(depth=max_depth, evaluator=evaluator).search(board)
