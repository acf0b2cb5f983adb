#!/usr/bin/env python3
"""
run.py - Main entry point for the four-in-a-row engine
"""

import argparse
import sys

from fourinarow.debug import debug
from fourinarow.interfaces.cli import SimpleCLI
from fourinarow.utils import DEFAULT_SEARCH_DEPTH


def configure_debug(args):
    """Configure logging from --debug, --debug_level and --log_file."""
    debug.configure(log_file=args.log_file)
    debug.set_from_string("debug" if args.debug else args.debug_level)


def build_parser():
    parser = argparse.ArgumentParser(
        description='Four-in-a-row against a minimax opponent',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Play against the AI (you move first)
    python run.py play

    # Let the AI open, with a shallower search
    python run.py play --ai-first --depth 4

    # Inspect a position (42 values, bottom row first; 0 empty, 1 x, 2 o)
    python run.py test --position 0,0,0,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0

    # Benchmark move application, outcome checks and a search
    python run.py benchmark --iterations 5000 --depth 4
    """
    )
    parser.add_argument('command',
        choices=['play', 'test', 'benchmark'],
        help='play (interactive game), test (analyse a position), benchmark (performance)')
    parser.add_argument('--depth',
        type=int,
        default=DEFAULT_SEARCH_DEPTH,
        help=f'Minimax search depth (default: {DEFAULT_SEARCH_DEPTH})')
    first = parser.add_mutually_exclusive_group()
    first.add_argument('--human-first',
        dest='ai_first',
        action='store_false',
        help='You play x and move first (default)')
    first.add_argument('--ai-first',
        dest='ai_first',
        action='store_true',
        help='The AI plays x and moves first')
    parser.set_defaults(ai_first=False)
    parser.add_argument('--position',
        type=str,
        help='Board position for the test command')
    parser.add_argument('--iterations',
        type=int,
        default=1000,
        help='Number of iterations for benchmarking')
    parser.add_argument('--seed',
        type=int,
        default=None,
        help='Random seed for the benchmark move generator')
    parser.add_argument('--debug',
        action='store_true',
        help='Enable debug logging (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level',
        choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
        default='warning',
        help='Logging verbosity (default: warning)')
    parser.add_argument('--log_file',
        type=str,
        default=None,
        help='Also write log messages to this file')
    return parser


def main(argv=None):
    """Main entry point for the four-in-a-row engine."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.depth < 1:
        parser.error("--depth must be at least 1")

    configure_debug(args)
    try:
        SimpleCLI(args).run()
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
