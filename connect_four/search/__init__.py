"""
Search Module

This module implements move generation and depth-limited minimax.

Key Components:
    - children: Legal child boards in ascending column order
    - minimax: Core recursive search
    - next_moves: Root-level query mapping each move to its score
    - find_best_move: Picks the best root move for the player to move
"""

from connect_four.search.minimax import find_best_move, minimax, next_moves
from connect_four.search.movegen import can_play, children, iter_children, play

__all__ = [
    'can_play',
    'children',
    'find_best_move',
    'iter_children',
    'minimax',
    'next_moves',
    'play',
]
