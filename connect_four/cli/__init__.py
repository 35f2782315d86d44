"""
Command-Line Interface

Interactive shell around the solver. Reads game states as
"player,column,row" triples, prints the minimax score of every legal move.

    python -m connect_four.cli
"""

from connect_four.cli.interface import SolverShell

__all__ = ['SolverShell']
