"""
Minimax Search

Plain depth-limited minimax over the drop-column game tree. No pruning and
no caching: every child of every non-terminal node is visited, so the tree
shape depends only on the root board and the depth.

Node kinds:
    MAX  player 0 to move, keeps the highest child score
    MIN  player 1 to move, keeps the lowest child score

Ties keep the first child seen (ascending column order).

Algorithm Complexity:
    O(b^d) where b = board width (7), d = depth

References:
    - Minimax: https://www.chessprogramming.org/Minimax
"""

import logging
import operator
from typing import Dict, List, Optional, Tuple

from connect_four.board.representation import Board, MoveLabel, NodeKind
from connect_four.config import DEFAULT_DEPTH
from connect_four.evaluation.base import Evaluator
from connect_four.evaluation.placeholder import RandomEvaluator
from connect_four.search.movegen import children, iter_children

logger = logging.getLogger(__name__)


def _fold_for(kind: NodeKind):
    """Initial value and strict comparison for a node kind."""
    if kind is NodeKind.MAX:
        return -float("inf"), operator.gt
    if kind is NodeKind.MIN:
        return float("inf"), operator.lt
    raise AssertionError(f"Not supposed to reach here: unknown node kind {kind!r}")


def minimax(
    board: Board,
    depth: int,
    evaluator: Evaluator,
    nodes_searched: Optional[List[int]] = None,
) -> int:
    """
    Minimax value of a board.

    Args:
        board: Node to search
        depth: Remaining search depth (decrements each recursive call)
        evaluator: Leaf evaluation function
        nodes_searched: Optional mutable list [count] incremented per node

    Returns:
        int: Evaluator score propagated up from the leaves

    Raises:
        ValueError: If depth is negative

    Algorithm:
        1. depth = 0 or a recorded winner → evaluate
        2. Fold the children's values with max (MAX node) or min (MIN node)
        3. No children (full board) → evaluate
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    if nodes_searched is not None:
        nodes_searched[0] += 1

    if depth == 0 or board.winner is not None:
        return evaluator.evaluate(board)

    best, better = _fold_for(board.kind)
    has_children = False

    # Children are built one at a time and dropped once folded in
    for child in iter_children(board):
        has_children = True
        value = minimax(child, depth - 1, evaluator, nodes_searched)
        if better(value, best):
            best = value

    if not has_children:
        return evaluator.evaluate(board)

    return best


def next_moves(
    board: Board,
    depth: int = DEFAULT_DEPTH,
    evaluator: Optional[Evaluator] = None,
    nodes_searched: Optional[List[int]] = None,
) -> Dict[MoveLabel, int]:
    """
    Score every legal move from the root.

    Each root child is searched with the full depth, starting from the
    child's own node kind.

    Args:
        board: Root position
        depth: Search depth applied below each root child
        evaluator: Leaf evaluation (default: RandomEvaluator())
        nodes_searched: Optional mutable list [count] of nodes visited

    Returns:
        dict mapping each move label to its minimax score, in column order.
        Empty when the board is full.

    Raises:
        ValueError: If depth is negative
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    if evaluator is None:
        evaluator = RandomEvaluator()
    if nodes_searched is None:
        nodes_searched = [0]
    start = nodes_searched[0]

    scores: Dict[MoveLabel, int] = {}
    for child in children(board):
        scores[child.last_move] = minimax(child, depth, evaluator, nodes_searched)
        logger.debug(f"Move {child.last_move}: {scores[child.last_move]}")

    logger.debug(f"Scored {len(scores)} moves at depth {depth}, nodes visited: {nodes_searched[0] - start}")

    return scores


def find_best_move(
    board: Board,
    depth: int = DEFAULT_DEPTH,
    evaluator: Optional[Evaluator] = None,
) -> Tuple[MoveLabel, int, int]:
    """
    Find the best move for the player to move.

    Args:
        board: Root position
        depth: Search depth applied below each root child
        evaluator: Leaf evaluation (default: RandomEvaluator())

    Returns:
        Tuple of (best_move, score, nodes)
            - best_move: Highest-scoring move for player 0, lowest for player 1
            - score: Minimax score of that move
            - nodes: Number of nodes visited below the root

    Raises:
        ValueError: If no legal moves available (full board) or depth is negative
    """
    nodes = [0]
    scores = next_moves(board, depth, evaluator, nodes)
    if not scores:
        raise ValueError("No legal moves available")

    best_score, better = _fold_for(board.kind)
    best_move = None
    for move, score in scores.items():
        if better(score, best_score):
            best_score = score
            best_move = move

    logger.debug(f"Nodes searched: {nodes[0]}, best move: {best_move}, score: {best_score}")

    return best_move, best_score, nodes[0]
