"""
Utilities Module

Testing and benchmarking helpers for the solver.

Key Components:
    - count_nodes: Tree-size check for move generation
    - Tactical suite: forced wins and forced blocks
"""

from connect_four.utils.testing import (
    TACTICAL_POSITIONS,
    count_nodes,
    run_tactics,
)

__all__ = [
    'TACTICAL_POSITIONS',
    'count_nodes',
    'run_tactics',
]
