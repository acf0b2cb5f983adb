"""
rules.py - Game session management and Gymnasium environment

This module provides:
1. ConnectFourGame, which holds the one current position of a game
2. ConnectFourEnv, a gymnasium environment where an agent plays Player.ONE
   against a minimax opponent
"""

from typing import Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from fourinarow.debug import debug
from fourinarow.game.board import Board
from fourinarow.utils import ROWS, COLS, Player, GameResult


class ConnectFourGame:
    """
    High-level game session.

    Only the current position is kept. A successful move replaces it; a
    rejected move leaves it exactly as it was.
    """

    def __init__(self, board: Optional[Board] = None):
        debug.debug("Initializing ConnectFourGame", "game")
        self.board = board if board is not None else Board()

    def reset(self) -> None:
        debug.debug("Resetting game", "game")
        self.board = Board()

    def make_move(self, column: int) -> bool:
        """
        Play a column for the side to move.

        Args:
            column: Column to place a piece (0-indexed)

        Returns:
            True if the move was played, False if it was rejected
        """
        new_board = self.board.make_move(column)
        if new_board is None:
            return False

        self.board = new_board
        if new_board.is_game_over():
            debug.info(f"Game over: {new_board.game_result.name}", "game")
        return True

    def get_state(self) -> Board:
        return self.board

    def is_game_over(self) -> bool:
        return self.board.is_game_over()

    def get_result(self) -> GameResult:
        return self.board.game_result

    def get_winner(self) -> Optional[Player]:
        """The winning player, or None while in progress or on a draw."""
        return self.board.game_result.winner()

    def get_current_player(self) -> Player:
        return self.board.current_player

    def get_valid_moves(self) -> List[int]:
        return self.board.get_valid_moves()

    def render(self) -> str:
        return self.board.render()


class ConnectFourEnv(gym.Env):
    """
    Four-in-a-row environment following the Gymnasium interface.

    The agent always plays Player.ONE. After each legal agent move that does
    not end the game, the opponent answers as Player.TWO, so every
    observation shows Player.ONE to move.
    """

    metadata = {'render_modes': ['ansi', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None, opponent=None, opponent_depth: int = 2):
        """
        Args:
            render_mode: 'ansi' to return text frames, 'human' to print them
            opponent: Object with get_move(board) for Player.TWO; a
                MinimaxPlayer of depth opponent_depth when None
            opponent_depth: Search depth of the default opponent
        """
        debug.debug("Initializing ConnectFourEnv", "env")
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        if opponent is None:
            from fourinarow.ai.minimax import MinimaxPlayer
            opponent = MinimaxPlayer(depth=opponent_depth)

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(low=0, high=2, shape=(ROWS, COLS), dtype=np.int8)

        self.opponent = opponent
        self.render_mode = render_mode
        self.board = Board()

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.0
        self.reward_invalid_move = -0.5
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.board = Board()

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play the agent's column, then the opponent's reply.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")
        action = int(action)

        after_agent = self.board.make_move(action)
        if after_agent is None:
            debug.warning(f"Invalid action: {action} ({self.board.check_move(action).name})", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.board = after_agent
        if not self.board.is_game_over():
            reply = self.opponent.get_move(self.board)
            if reply is not None:
                self.board = self.board.make_move(reply)
                debug.debug(f"Opponent plays column {reply}", "env")

        terminated = self.board.is_game_over()
        reward = self._reward(self.board.game_result)
        if terminated:
            debug.info(f"Episode over: {self.board.game_result.name}", "env")

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), reward, terminated, False, self._get_info()

    def _reward(self, result: GameResult) -> float:
        if result == GameResult.PLAYER_ONE_WIN:
            return self.reward_win
        if result == GameResult.PLAYER_TWO_WIN:
            return self.reward_lose
        if result == GameResult.DRAW:
            return self.reward_draw
        return self.reward_step

    def render(self) -> Optional[str]:
        if self.render_mode == "ansi":
            return self.board.render()
        if self.render_mode == "human":
            print(self.board.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.board.get_state()

    def _get_info(self) -> Dict:
        return {
            'valid_moves': self.board.get_valid_moves(),
            'current_player': self.board.current_player.value,
            'game_result': self.board.game_result.name,
            'moves_made': self.board.move_count,
            'winning_line': self.board.get_winning_line(),
        }
