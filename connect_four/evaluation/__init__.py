"""
Evaluation Module

Evaluators score search leaves. The search works with any evaluator that
implements the base interface, so tests can plug in a deterministic stub.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - RandomEvaluator: Win sentinels plus a random placeholder score

Data Flow:
    Board → evaluator.evaluate() → int
                                   +WIN_SCORE = player 0 has won
                                   -WIN_SCORE = player 1 has won
"""

from connect_four.evaluation.base import WIN_SCORE, Evaluator
from connect_four.evaluation.placeholder import RandomEvaluator

__all__ = ['Evaluator', 'RandomEvaluator', 'WIN_SCORE']
