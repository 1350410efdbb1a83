#!/usr/bin/env python3
"""
Round-robin rock-paper-scissors tournament between built-in strategies.

Usage:
    python main.py --participants random_bot frequency counter_last --rounds 100 --games 10

Examples:
    # Quick tournament between every built-in strategy
    python main.py --rounds 50 --games 5

    # Training mode, three tournaments in a row on the same runner
    python main.py -p frequency random_bot cycle --training --repeat 3

    # Minimal output
    python main.py -p rock paper scissors --quiet
"""
import argparse
import logging
import random
import sys

from roshambo.strategies import STRATEGY_TYPES
from roshambo.tournament.errors import ConfigurationError
from roshambo.tournament.progress import NullProgressSink, PrintProgressSink, TqdmProgressSink
from roshambo.tournament.runner import TournamentRunner, TournamentConfig
from roshambo.utils.constants import (
    DEFAULT_ROUNDS, DEFAULT_GAMES, DEFAULT_K_FACTOR, DEFAULT_INITIAL_RATING
)

PROGRESS_SINKS = {
    'print': PrintProgressSink,
    'bar': TqdmProgressSink,
    'none': NullProgressSink,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        description='Run a round-robin rock-paper-scissors tournament.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='Available strategies: ' + ', '.join(STRATEGY_TYPES)
    )

    parser.add_argument(
        '--participants', '-p',
        type=str, nargs='+', default=None,
        help='Strategy identities to compete (default: all built-in strategies)'
    )
    parser.add_argument(
        '--rounds', '-r',
        type=int, default=DEFAULT_ROUNDS,
        help=f'Rounds per game (default: {DEFAULT_ROUNDS})'
    )
    parser.add_argument(
        '--games', '-g',
        type=int, default=DEFAULT_GAMES,
        help=f'Games per match between two strategies (default: {DEFAULT_GAMES})'
    )
    parser.add_argument(
        '--training',
        action='store_true',
        help='Let strategies save and load data between games'
    )
    parser.add_argument(
        '--repeat',
        type=int, default=1,
        help='Number of tournaments to run on the same runner (default: 1)'
    )
    parser.add_argument(
        '--k-factor',
        type=float, default=DEFAULT_K_FACTOR,
        help=f'Elo K-factor for rating volatility (default: {DEFAULT_K_FACTOR})'
    )
    parser.add_argument(
        '--initial-rating',
        type=float, default=DEFAULT_INITIAL_RATING,
        help=f'Starting Elo rating (default: {DEFAULT_INITIAL_RATING})'
    )
    parser.add_argument(
        '--seed', '-s',
        type=int, default=None,
        help='Random seed'
    )
    parser.add_argument(
        '--progress',
        choices=sorted(PROGRESS_SINKS), default='print',
        help='How to show tournament progress (default: print)'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Minimal output (only final results)'
    )
    parser.add_argument(
        '--log-level',
        type=str, default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )
    parser.add_argument(
        '--list-strategies',
        action='store_true',
        help='List available strategies and exit'
    )
    return parser


def create_runner(args: argparse.Namespace) -> TournamentRunner:
    """
    Create a runner with every requested participant registered.

    Raises:
        ConfigurationError: If a participant is unknown or listed twice
    """
    config = TournamentConfig(
        rounds=args.rounds,
        games=args.games,
        training=args.training,
        k_factor=args.k_factor,
        initial_rating=args.initial_rating,
        verbose=not args.quiet
    )
    sink = NullProgressSink() if args.quiet else PROGRESS_SINKS[args.progress]()
    runner = TournamentRunner(config=config, progress_sink=sink)

    for identity in args.participants or list(STRATEGY_TYPES):
        runner.register(identity)

    return runner


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.list_strategies:
        print("Available strategies:")
        for identity, cls in STRATEGY_TYPES.items():
            doc = (cls.__doc__ or "").strip().splitlines()
            print(f"  {identity:<14} {doc[0] if doc else ''}")
        return 0

    if args.seed is not None:
        random.seed(args.seed)

    if args.repeat < 1:
        print("Error: --repeat must be at least 1", file=sys.stderr)
        return 1

    try:
        runner = create_runner(args)
        for i in range(args.repeat):
            if args.repeat > 1 and not args.quiet:
                print(f"\n--- Tournament {i + 1}/{args.repeat} ---")
            result = runner.run_tournament()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.quiet:
        for standing in result.get_rankings():
            print(f"{standing.rank}. {standing.name} "
                  f"{standing.games_record.format_fraction()} games, "
                  f"{standing.rounds_record.format_fraction()} rounds")

    return 0


if __name__ == "__main__":
    sys.exit(main())
