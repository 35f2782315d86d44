"""
Win Detection

A move wins when the mark it placed sits on a contiguous run of at least
WINNING_STREAK same-player marks along one of four lines:

    horizontal   (1, 0)   fixed row
    vertical     (0, 1)   fixed column
    forward /    (1, 1)
    backward \\   (1, -1)

Only lines through the just-placed cell need checking; any other streak
would have been detected when it was completed.
"""

from typing import TYPE_CHECKING

from connect_four.config import WINNING_STREAK

if TYPE_CHECKING:
    from connect_four.board.representation import Board

# (column step, row step) for each line family
DIRECTIONS = (
    (1, 0),
    (0, 1),
    (1, 1),
    (1, -1),
)


def _run_length(board: "Board", column: int, row: int, d_col: int, d_row: int, player: int) -> int:
    """Count player marks walking from (column, row) exclusive along one direction."""
    length = 0
    column += d_col
    row += d_row
    # Board.cell returns None for empty and out-of-bounds cells
    while board.cell(column, row) == player:
        length += 1
        column += d_col
        row += d_row
    return length


def streak_length(board: "Board", column: int, row: int, d_col: int, d_row: int) -> int:
    """
    Length of the run through (column, row) along one line family.

    Args:
        board: Board holding the mark
        column: Column of the just-placed mark
        row: Row of the just-placed mark
        d_col: Column step of the line
        d_row: Row step of the line

    Returns:
        Number of contiguous current_player marks on the line, counting the
        origin once. 0 if the origin is not a current_player mark.
    """
    player = board.current_player
    if board.cell(column, row) != player:
        return 0

    return (
        1
        + _run_length(board, column, row, d_col, d_row, player)
        + _run_length(board, column, row, -d_col, -d_row, player)
    )


def detects(board: "Board", column: int, row: int, streak: int = WINNING_STREAK) -> bool:
    """
    Check whether the mark at (column, row) completes a streak.

    Args:
        board: Board after the move; the mark belongs to board.current_player
        column: Column of the just-placed mark
        row: Row of the just-placed mark
        streak: Required run length

    Returns:
        bool: True if any of the four lines through the cell holds at least
        `streak` contiguous current_player marks
    """
    return any(
        streak_length(board, column, row, d_col, d_row) >= streak
        for d_col, d_row in DIRECTIONS
    )
