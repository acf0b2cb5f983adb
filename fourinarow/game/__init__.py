"""
fourinarow.game - Board state, outcome detection and game sessions
"""

from fourinarow.game.board import Board
from fourinarow.game.outcome import detect_outcome, find_winning_line
from fourinarow.game.rules import ConnectFourGame, ConnectFourEnv

__all__ = ['Board', 'detect_outcome', 'find_winning_line', 'ConnectFourGame', 'ConnectFourEnv']
