"""
Placeholder Evaluation

Won boards score ±WIN_SCORE. Every other leaf, whether cut off by depth
or drawn on a full board, gets a random integer in
[0, PLACEHOLDER_SCORE_RANGE). The score ignores the position entirely.

Pass a seed to make a run reproducible.
"""

from typing import Optional

import numpy as np

from connect_four.board.representation import Board
from connect_four.config import PLACEHOLDER_SCORE_RANGE
from connect_four.evaluation.base import WIN_SCORE, Evaluator


class RandomEvaluator(Evaluator):
    """
    Random placeholder evaluator.

    Attributes:
        score_range: Exclusive upper bound of non-terminal scores
        rng: numpy Generator the scores are drawn from
    """

    def __init__(self, seed: Optional[int] = None, score_range: int = PLACEHOLDER_SCORE_RANGE):
        # Placeholder scores must stay below the win sentinels
        if not 0 < score_range <= WIN_SCORE:
            raise ValueError(f"score_range must be in (0, {WIN_SCORE}], got {score_range}")

        self.seed = seed
        self.score_range = score_range
        self.rng = np.random.default_rng(seed)

    def evaluate(self, board: Board) -> int:
        terminal_score = self.evaluate_terminal(board)
        if terminal_score is not None:
            return terminal_score

        # TODO: replace with a positional heuristic (open threes, center control)
        return int(self.rng.integers(0, self.score_range))

    def __repr__(self) -> str:
        return f"RandomEvaluator(seed={self.seed}, score_range={self.score_range})"
