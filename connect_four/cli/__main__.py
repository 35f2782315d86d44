"""
Main entry point for running the solver shell.

Usage:
    python -m connect_four.cli [--depth 6] [--seed 42] [--debug]
"""

import argparse

from connect_four.cli.interface import SolverShell
from connect_four.config import DEFAULT_DEPTH, SolverConfig


def main(argv=None):
    parser = argparse.ArgumentParser(description="Connect 4 minimax solver")
    parser.add_argument("--depth", type=int, default=DEFAULT_DEPTH, help="Search depth")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the placeholder evaluator")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    args = parser.parse_args(argv)

    try:
        config = SolverConfig(depth=args.depth, seed=args.seed, debug=args.debug)
    except ValueError as e:
        parser.error(str(e))

    SolverShell(config).run()


if __name__ == "__main__":
    main()
