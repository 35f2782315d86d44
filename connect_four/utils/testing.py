"""
Solver Testing and Benchmarking

Tools for checking the search independently of the (random) placeholder
evaluator.

count_nodes:
    Walks exactly the tree minimax walks and counts its nodes. Since the
    search never prunes, the count depends only on the board and the depth,
    which makes it a cheap regression check for move generation (the
    drop-column counterpart of chess perft).

Tactical suite:
    Positions where one move is forced: completing a streak or blocking the
    opponent's. A win always dominates the placeholder scores, so the
    forced move must come out on top whatever the random leaf values are.
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from connect_four.board.representation import Board, MoveLabel, build_root_board
from connect_four.evaluation.base import Evaluator
from connect_four.search.minimax import find_best_move
from connect_four.search.movegen import iter_children


def count_nodes(board: Board, depth: int) -> int:
    """
    Count the nodes minimax visits from board at the given depth.

    Args:
        board: Root of the walk (counted)
        depth: Remaining depth

    Returns:
        int: Number of boards visited, leaves included
    """
    if depth == 0 or board.winner is not None:
        return 1
    return 1 + sum(count_nodes(child, depth - 1) for child in iter_children(board))


@dataclass
class TacticalPosition:
    """
    A position with one forced best move.

    Attributes:
        history: (player, column, row) triples building the position
        best_move: The move the solver must choose
        description: Human-readable description of the position
        id: Position identifier (e.g., "TAC.01")
    """
    history: List[Tuple[int, int, int]]
    best_move: MoveLabel
    description: str = ""
    id: str = ""

    def board(self) -> Board:
        return build_root_board(self.history)


@dataclass
class TacticalResult:
    """
    Result of testing a single position.

    Attributes:
        position: The test position
        found_move: Move the solver found
        score: Minimax score of the found move
        correct: Whether the solver found the forced move
        time_taken: Time spent searching (seconds)
        nodes_searched: Number of nodes visited
        depth: Search depth used
    """
    position: TacticalPosition
    found_move: MoveLabel
    score: int
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0


TACTICAL_POSITIONS = [
    TacticalPosition(
        id="TAC.01",
        history=[(0, 0, 0), (1, 0, 1), (0, 1, 0), (1, 1, 1), (0, 2, 0), (1, 6, 0)],
        best_move=MoveLabel(0, 3, 0),
        description="Player 0 completes the bottom row",
    ),
    TacticalPosition(
        id="TAC.02",
        history=[(1, 3, 0), (0, 0, 0), (1, 3, 1), (0, 1, 0), (1, 3, 2), (0, 6, 0)],
        best_move=MoveLabel(0, 3, 3),
        description="Player 0 caps player 1's vertical three",
    ),
    TacticalPosition(
        id="TAC.03",
        history=[
            (0, 1, 0), (1, 0, 0), (0, 2, 0), (1, 1, 1), (0, 2, 1),
            (1, 2, 2), (0, 3, 0), (1, 3, 1), (0, 3, 2),
        ],
        best_move=MoveLabel(1, 3, 3),
        description="Player 1 completes a forward diagonal",
    ),
]


def run_position(
    position: TacticalPosition,
    evaluator: Evaluator,
    depth: int,
) -> TacticalResult:
    """Search one tactical position and compare against its forced move."""
    start_time = time.time()
    found_move, score, nodes = find_best_move(position.board(), depth, evaluator)
    time_taken = time.time() - start_time

    return TacticalResult(
        position=position,
        found_move=found_move,
        score=score,
        correct=found_move == position.best_move,
        time_taken=time_taken,
        nodes_searched=nodes,
        depth=depth,
    )


def run_tactics(
    evaluator: Evaluator,
    depth: int = 2,
    positions: Optional[List[TacticalPosition]] = None,
    verbose: bool = False,
) -> Dict[str, Any]:
    """
    Run the tactical suite.

    Args:
        evaluator: Leaf evaluation function
        depth: Search depth below each root move
        positions: Positions to run (default: TACTICAL_POSITIONS)
        verbose: If True, print one line per position

    Returns:
        dict with keys score, total, percentage, avg_time, results
    """
    if positions is None:
        positions = TACTICAL_POSITIONS

    results = []
    for position in positions:
        result = run_position(position, evaluator, depth)
        results.append(result)

        if verbose:
            status = "OK" if result.correct else "FAIL"
            print(
                f"{position.id}: {status} found={result.found_move} "
                f"expected={position.best_move} score={result.score} "
                f"nodes={result.nodes_searched}"
            )

    correct = sum(1 for r in results if r.correct)
    total = len(results)

    return {
        'score': correct,
        'total': total,
        'percentage': 100.0 * correct / total if total else 0.0,
        'avg_time': sum(r.time_taken for r in results) / total if total else 0.0,
        'results': results,
    }
