"""
Abstract Evaluator Interface

This module defines the abstract base class for all board evaluators.
The search only talks to this interface, so evaluators can be swapped
(or stubbed in tests) without touching the minimax code.

Convention:
    - Scores are integers from player 0's perspective
    - Positive = good for player 0, negative = good for player 1
    - A recorded win returns ±WIN_SCORE, which dominates every
      non-terminal score an evaluator may produce
"""

from abc import ABC, abstractmethod
from typing import Optional

from connect_four.board.representation import Board

WIN_SCORE = 100000  # Represents a completed streak


class Evaluator(ABC):
    """
    Abstract base class for board evaluation.

    Subclasses implement evaluate(); terminal handling is shared through
    evaluate_terminal().
    """

    @abstractmethod
    def evaluate(self, board: Board) -> int:
        """
        Score a board from player 0's perspective.

        Args:
            board: Leaf board (won, full, or at the depth cutoff)

        Returns:
            int: Score; must stay strictly inside (-WIN_SCORE, WIN_SCORE)
            for boards without a winner
        """
        pass

    def evaluate_terminal(self, board: Board) -> Optional[int]:
        """
        Score a board that has a recorded winner.

        Args:
            board: Board to check

        Returns:
            int: WIN_SCORE if player 0 won, -WIN_SCORE if player 1 won
            None: If no winner is recorded
        """
        if board.winner is None:
            return None
        return WIN_SCORE if board.winner == 0 else -WIN_SCORE

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
