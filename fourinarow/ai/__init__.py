"""
fourinarow.ai - Position evaluation and minimax move selection
"""

from fourinarow.ai.evaluation import CenterDistanceEvaluator, Evaluator, score_for, terminal_score
from fourinarow.ai.minimax import MinimaxPlayer, SearchResult, choose_move

__all__ = ['CenterDistanceEvaluator', 'Evaluator', 'score_for', 'terminal_score',
           'MinimaxPlayer', 'SearchResult', 'choose_move']
