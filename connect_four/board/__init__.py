"""
Board Module

This module holds the game-state model and win detection.

Key Components:
    - Board: Immutable snapshot of column stacks, turn and winner
    - build_root_board: Builds the search root from a move history
    - detects: Checks whether a just-placed mark completes a streak
    - board_to_array / array_to_board: Dense numpy grid view

Data Flow:
    move history → build_root_board() → Board → search
"""

from connect_four.board.representation import (
    Board,
    MalformedHistoryError,
    MoveLabel,
    NodeKind,
    array_to_board,
    board_to_array,
    build_root_board,
    empty_board,
)
from connect_four.board.win import detects

__all__ = [
    'Board',
    'MalformedHistoryError',
    'MoveLabel',
    'NodeKind',
    'array_to_board',
    'board_to_array',
    'build_root_board',
    'detects',
    'empty_board',
]
