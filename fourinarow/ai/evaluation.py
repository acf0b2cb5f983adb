"""
evaluation.py - Position scoring for the minimax search

Scores are always from Player.ONE's point of view and lie in [-1, 1]:
+1 is a won game for Player.ONE, -1 a won game for Player.TWO, 0 neutral.
"""

from abc import ABC, abstractmethod

import numpy as np

from fourinarow.game.board import Board
from fourinarow.utils import ROWS, COLS, Player, GameResult

TERMINAL_SCORES = {
    GameResult.PLAYER_ONE_WIN: 1.0,
    GameResult.PLAYER_TWO_WIN: -1.0,
    GameResult.DRAW: 0.0,
}

# Most pieces one side can place on a full board
MAX_PIECE_VALUE = 1.0 / (COLS * ROWS // 2)

CENTER_COL = (COLS - 1) // 2
CENTER_ROW = (ROWS - 1) // 2


def terminal_score(result: GameResult) -> float:
    """Fixed score of a finished game."""
    assert result in TERMINAL_SCORES, f"terminal_score: {result} is not terminal"
    return TERMINAL_SCORES[result]


def _center_weights() -> np.ndarray:
    rows, cols = np.indices((ROWS, COLS))
    distance = np.hypot(rows - CENTER_ROW, cols - CENTER_COL)
    weights = MAX_PIECE_VALUE / (distance + 1)
    weights.flags.writeable = False
    return weights


CENTER_WEIGHTS = _center_weights()


class Evaluator(ABC):
    """Strategy that maps a board to a Player.ONE-relative score."""

    name = "evaluator"

    @abstractmethod
    def evaluate(self, board: Board) -> float:
        """Score a board in [-1, 1] from Player.ONE's perspective."""

    def __call__(self, board: Board) -> float:
        return self.evaluate(board)


class CenterDistanceEvaluator(Evaluator):
    """
    Rewards pieces close to the middle of the board.

    Each piece is worth MAX_PIECE_VALUE / (distance to centre + 1), added for
    Player.ONE and subtracted for Player.TWO. A side holds at most
    COLS * ROWS // 2 pieces and only one cell sits at distance 0, so an
    unfinished game stays strictly inside (-1, 1).
    """

    name = "center"

    def evaluate(self, board: Board) -> float:
        if board.is_game_over():
            return terminal_score(board.game_result)

        grid = board.grid
        score = (CENTER_WEIGHTS[grid == Player.ONE.value].sum()
                 - CENTER_WEIGHTS[grid == Player.TWO.value].sum())
        return float(score)


def score_for(board: Board, player: Player, evaluator: Evaluator) -> float:
    """Score from the given side's perspective."""
    score = evaluator.evaluate(board)
    if player == Player.ONE:
        return score
    if player == Player.TWO:
        return -score
    raise ValueError("score_for needs Player.ONE or Player.TWO")
