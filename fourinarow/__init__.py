"""
fourinarow - Four-in-a-row game engine with a minimax opponent

This package provides an immutable board representation, win and draw
detection, a heuristic position evaluator, a depth-limited minimax search,
a Gymnasium environment and a text interface for playing against the engine.
"""

__version__ = '0.1.0'
