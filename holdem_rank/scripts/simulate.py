#!/usr/bin/env python
"""Estimate how often each hand type wins a showdown.

This script deals random Texas Hold'em games and reports, per hand type:
- Hand probability: share of games won with that hand type
- Probability to win: share of that hand type's appearances that won

Usage:
    python -m holdem_rank.scripts.simulate --players 4 --iterations 100000
    python -m holdem_rank.scripts.simulate --players 6 --iterations 20000 --seed 42
    python -m holdem_rank.scripts.simulate --help
"""

import argparse
import sys

from holdem_rank.utils.seeding import make_rng
from holdem_rank.engine.simulation import (
    DEFAULT_ITERATIONS,
    DEFAULT_PLAYERS,
    SimulationStats,
    simulate,
)


def print_progress(done: int, total: int) -> None:
    print(f"  Completed {done}/{total} iterations...")


def run(
    players: int = DEFAULT_PLAYERS,
    iterations: int = DEFAULT_ITERATIONS,
    seed: int | None = None,
    quiet: bool = False,
) -> SimulationStats:
    """Run the simulation and print its summary.

    Args:
        players: Players per game
        iterations: Number of games to play
        seed: Random seed; a fresh one is drawn and printed when omitted
        quiet: Suppress progress lines

    Returns:
        SimulationStats with results
    """
    seed, rng = make_rng(seed)

    print(f"Simulating {iterations} games with {players} players (seed={seed})")
    stats = simulate(
        players=players,
        iterations=iterations,
        rng=rng,
        progress=None if quiet else print_progress,
    )

    print(stats.summary())
    return stats


def main():
    """Main entry point for the simulation script."""
    parser = argparse.ArgumentParser(
        description="Estimate win probability per poker hand type",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m holdem_rank.scripts.simulate --players 4 --iterations 100000
  python -m holdem_rank.scripts.simulate --players 6 --iterations 20000 --seed 42
        """,
    )

    parser.add_argument(
        "--players",
        "-p",
        type=int,
        default=DEFAULT_PLAYERS,
        help=f"Number of players per game (default: {DEFAULT_PLAYERS})",
    )

    parser.add_argument(
        "--iterations",
        "-n",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Number of games to simulate (default: {DEFAULT_ITERATIONS})",
    )

    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for reproducibility"
    )

    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Do not print progress lines"
    )

    args = parser.parse_args()

    try:
        run(
            players=args.players,
            iterations=args.iterations,
            seed=args.seed,
            quiet=args.quiet,
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user.")
        sys.exit(0)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
