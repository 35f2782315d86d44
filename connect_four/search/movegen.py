"""
Move Generation

Children of a board are produced in ascending column order. Each child is
a new Board with one extra mark on top of one non-full column; the parent
is never touched.
"""

from dataclasses import replace
from typing import Iterator, List

from connect_four.board.representation import Board, MoveLabel
from connect_four.board.win import detects


def can_play(board: Board, column: int) -> bool:
    """True if column still has room for another mark."""
    return len(board.columns[column]) < board.height


def play(board: Board, column: int) -> Board:
    """
    Drop the next player's mark into a column.

    Args:
        board: Parent board
        column: Column to play; must not be full

    Returns:
        Child board with players swapped, node kind flipped, the winner
        recorded if the new mark completes a streak, and last_move set
    """
    player = board.next_player
    row = len(board.columns[column])

    columns = list(board.columns)
    columns[column] = columns[column] + (player,)

    child = Board(
        columns=tuple(columns),
        current_player=player,
        next_player=board.current_player,
        kind=board.kind.flipped,
        height=board.height,
        last_move=MoveLabel(player, column, row),
    )

    if detects(child, column, row):
        return replace(child, winner=player)
    return child


def iter_children(board: Board) -> Iterator[Board]:
    """Yield children lazily, ascending by column."""
    for column in range(board.width):
        if can_play(board, column):
            yield play(board, column)


def children(board: Board) -> List[Board]:
    """
    All legal children of a board.

    Returns:
        List of child boards ordered by column index. Empty when every
        column is full.
    """
    return list(iter_children(board))
