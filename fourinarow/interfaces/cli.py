"""
cli.py - Command-line interface for playing and inspecting four-in-a-row

Columns are numbered from 1 for the person at the keyboard and converted to
0-based indices before they reach the engine.
"""

import argparse
import random
from typing import Callable, Optional

from fourinarow.ai.evaluation import CenterDistanceEvaluator
from fourinarow.ai.minimax import MinimaxPlayer
from fourinarow.debug import debug
from fourinarow.game.board import Board
from fourinarow.game.outcome import detect_outcome
from fourinarow.game.rules import ConnectFourGame
from fourinarow.utils import COLS, DEFAULT_SEARCH_DEPTH, Player, GameResult


def read_column(input_fn: Callable[[str], str] = input,
                output: Callable[[str], None] = print) -> Optional[int]:
    """
    Ask for a column until a valid number in [1, COLS] is entered.

    Returns:
        The 0-based column, or None once input is exhausted
    """
    output(f"Enter a column number [1, {COLS}]")
    while True:
        try:
            line = input_fn("> ")
        except EOFError:
            return None

        try:
            column = int(line.strip())
        except ValueError:
            output("Please enter a number")
            continue

        if 1 <= column <= COLS:
            return column - 1
        output(f"Column number must be in range [1, {COLS}]")


def default_args(**overrides) -> argparse.Namespace:
    values = {
        'command': 'play',
        'depth': DEFAULT_SEARCH_DEPTH,
        'ai_first': False,
        'position': None,
        'iterations': 1000,
        'seed': None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class SimpleCLI:
    """Text front end: human versus minimax games, position tests, benchmarks."""

    def __init__(self, args: Optional[argparse.Namespace] = None,
                 input_fn: Callable[[str], str] = input,
                 output: Callable[[str], None] = print):
        self.args = args if args is not None else default_args()
        self.input_fn = input_fn
        self.output = output
        self.game = ConnectFourGame()

    def run(self):
        if self.args.command == 'play':
            return self.play_game()
        if self.args.command == 'test':
            return self.test_position()
        if self.args.command == 'benchmark':
            return self.benchmark()
        raise ValueError(f"Unknown command: {self.args.command}")

    def play_game(self) -> Optional[GameResult]:
        """
        Alternate human and AI turns until the game ends.

        Returns:
            The final result, or None if the human ran out of input
        """
        human = Player.TWO if self.args.ai_first else Player.ONE
        ai = MinimaxPlayer(depth=self.args.depth)
        self.game.reset()
        self.output(f"You play '{human.symbol}', the AI plays '{human.other().symbol}'.")

        while True:
            self.output(self.game.render())
            if self.game.is_game_over():
                break

            if self.game.get_current_player() == human:
                column = read_column(self.input_fn, self.output)
                if column is None:
                    self.output("No more input, quitting.")
                    return None
            else:
                self.output("AI is thinking...")
                column = ai.get_move(self.game.get_state())
                if column is None:
                    debug.error("AI found no move in an unfinished game", "cli")
                    return None
                self.output(f"AI plays column {column + 1}")

            if not self.game.make_move(column):
                self.output(f"Column {column + 1} is full, choose another one.")

        self.output(self._outcome_message(self.game.get_result(), human))
        return self.game.get_result()

    @staticmethod
    def _outcome_message(result: GameResult, human: Player) -> str:
        if result == GameResult.DRAW:
            return "It's a draw!"
        if result.winner() == human:
            return "You win! Congratulations!"
        return "AI wins! Better luck next time."

    def test_position(self) -> Optional[Board]:
        """Load a position string and report everything the engine knows about it."""
        if not self.args.position:
            self.output("Please provide a position string with --position")
            return None

        try:
            board = Board.from_position(self.args.position)
        except ValueError as e:
            self.output(f"Error parsing position: {e}")
            return None

        self.output("Loaded position:")
        self.output(board.render())
        self.output(f"Status: {board.game_result.name}")
        self.output(f"To move: {board.current_player.name}")

        line = board.get_winning_line()
        if line:
            self.output(f"Winning line: {[(r, c + 1) for r, c in line]}")
        self.output(f"Valid moves: {[c + 1 for c in board.get_valid_moves()]}")
        evaluator = CenterDistanceEvaluator()
        self.output(f"Evaluation ({evaluator.name}): {evaluator.evaluate(board):+.6f}")

        if not board.is_game_over():
            result = MinimaxPlayer(depth=self.args.depth, evaluator=evaluator).search(board)
            self.output(f"Suggested move (depth {self.args.depth}): column {result.column + 1}, "
                        f"score {result.score:+.6f}")
        return board

    def benchmark(self) -> dict:
        """Time move application, outcome detection and one search."""
        iterations = self.args.iterations
        rng = random.Random(self.args.seed)
        self.output(f"Running benchmark with {iterations} iterations...")
        timings = {}

        board = Board()
        moves_made = 0
        with debug.timer("moves", "cli") as t:
            for _ in range(iterations):
                child = board.make_move(rng.randrange(COLS))
                if child is None:
                    continue
                moves_made += 1
                board = Board() if child.is_game_over() else child
        timings['moves'] = t['elapsed']
        self.output(f"Applied {moves_made} moves in {t['elapsed']:.6f} seconds")

        grid = board.grid
        with debug.timer("outcome", "cli") as t:
            for _ in range(iterations):
                detect_outcome(grid)
        timings['outcome'] = t['elapsed']
        self.output(f"Ran {iterations} outcome checks in {t['elapsed']:.6f} seconds")

        player = MinimaxPlayer(depth=self.args.depth)
        with debug.timer("search", "cli") as t:
            player.search(Board())
        timings['search'] = t['elapsed']
        self.output(f"Depth {self.args.depth} search visited {player.nodes_evaluated} nodes "
                    f"in {t['elapsed']:.6f} seconds")
        return timings
