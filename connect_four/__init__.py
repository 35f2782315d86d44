"""
Connect Four Solver

A depth-limited minimax search engine for Connect-Four-style games: given
a partially filled drop-column board, it scores every legal move.

## Architecture

The solver is organized into several key modules:

1. **board**: Game state and win detection
   - Immutable Board snapshots built from a move history
   - Four-direction streak scan from the last placed mark
   - numpy grid view of a board

2. **evaluation**: Leaf evaluation
   - Abstract Evaluator interface (swappable design)
   - RandomEvaluator: win sentinels plus a random placeholder score

3. **search**: Search algorithms
   - Move generation in ascending column order
   - Plain minimax (no pruning)

4. **cli**: Interactive solver shell

5. **utils**: Node counting and a tactical test suite

## Quick Start

### As a Python Library

```python
from connect_four.board import build_root_board
from connect_four.evaluation import RandomEvaluator
from connect_four.search import next_moves

board = build_root_board([(0, 3, 0), (1, 3, 1)])
scores = next_moves(board, depth=4, evaluator=RandomEvaluator(seed=7))
for move, score in scores.items():
    print(f"{move}: {score}")
```

### As a Shell

```bash
python -m connect_four.cli --depth 6
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from connect_four.board import Board, MalformedHistoryError, build_root_board
from connect_four.evaluation import Evaluator, RandomEvaluator
from connect_four.search import find_best_move, minimax, next_moves

__all__ = [
    'Board',
    'Evaluator',
    'MalformedHistoryError',
    'RandomEvaluator',
    'build_root_board',
    'find_best_move',
    'minimax',
    'next_moves',
]
