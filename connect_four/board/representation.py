"""
Board Representation

A Board is an immutable snapshot of a vertical-drop grid: one stack of
player marks per column, filled bottom-up. Boards are never mutated; the
move generator builds every child as a fresh value with one extra mark.

Coordinates:
    - column 0 = leftmost column, column W-1 = rightmost
    - row 0 = bottom of a column (first piece dropped lands there)
    - players are 0 and 1

Turn bookkeeping:
    current_player  the player who just moved into this state
    next_player     the player who moves from here
    kind            MAX when player 0 is next, MIN when player 1 is next

Array view (board_to_array):
    (H, W) int8 grid, -1 for empty, otherwise the player id.
    Row 0 of the array is the bottom row of the board.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from connect_four.board.win import detects
from connect_four.config import BOARD_HEIGHT, BOARD_WIDTH

EMPTY = -1
PLAYERS = (0, 1)


class MalformedHistoryError(ValueError):
    """Raised when a move history cannot describe a reachable position."""


class NodeKind(Enum):
    """Which player's outcome a search node optimizes for."""

    MAX = "max"  # player 0 to move
    MIN = "min"  # player 1 to move

    @property
    def flipped(self) -> "NodeKind":
        return NodeKind.MIN if self is NodeKind.MAX else NodeKind.MAX

    @classmethod
    def for_next_player(cls, player: int) -> "NodeKind":
        return cls.MAX if player == 0 else cls.MIN


class MoveLabel(NamedTuple):
    """A single placement: who dropped a mark, and where it landed."""

    player: int
    column: int
    row: int

    def __str__(self) -> str:
        return f"{self.player},{self.column},{self.row}"


@dataclass(frozen=True)
class Board:
    """
    Immutable game state.

    Attributes:
        columns: One tuple of marks per column, bottom first
        current_player: Player who made the last move
        next_player: Player to move
        kind: Search node kind (MAX for player 0 to move)
        height: Maximum number of marks per column
        winner: Player who completed a streak with last_move, if any
        last_move: Move that produced this board (reporting only)
    """

    columns: Tuple[Tuple[int, ...], ...]
    current_player: int
    next_player: int
    kind: NodeKind
    height: int = BOARD_HEIGHT
    winner: Optional[int] = None
    last_move: Optional[MoveLabel] = None

    def __post_init__(self):
        if self.current_player + self.next_player != 1:
            raise ValueError(
                f"current_player and next_player must be 0 and 1, "
                f"got {self.current_player} and {self.next_player}"
            )
        for index, stack in enumerate(self.columns):
            if len(stack) > self.height:
                raise ValueError(
                    f"Column {index} holds {len(stack)} marks, height is {self.height}"
                )

    @property
    def width(self) -> int:
        return len(self.columns)

    def cell(self, column: int, row: int) -> Optional[int]:
        """Mark at (column, row), or None when empty or off the board."""
        if not 0 <= column < self.width or row < 0:
            return None
        stack = self.columns[column]
        if row >= len(stack):
            return None
        return stack[row]

    def move_count(self, player: int) -> int:
        return sum(stack.count(player) for stack in self.columns)

    def is_full(self) -> bool:
        return all(len(stack) >= self.height for stack in self.columns)

    def __str__(self) -> str:
        return "/".join("".join(str(mark) for mark in stack) or "-" for stack in self.columns)


def _coordinate(value) -> int:
    """Integer value of a history field; rejects fractional numbers."""
    number = int(value)
    if not isinstance(value, str) and number != value:
        raise ValueError(f"{value!r} is not a whole number")
    return number


def empty_board(width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> Board:
    """Create the starting position (player 0 to move)."""
    return Board(
        columns=tuple(() for _ in range(width)),
        current_player=1,
        next_player=0,
        kind=NodeKind.MAX,
        height=height,
    )


def build_root_board(
    move_history: Iterable[Sequence[int]],
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
) -> Board:
    """
    Build the search root from an ordered move history.

    Args:
        move_history: Sequence of (player, column, row) triples, 0-indexed
        width: Number of columns
        height: Number of rows

    Returns:
        Board with next_player inferred from move counts: player 0 moves
        next unless it has already made more moves than player 1. winner is
        set when any current_player mark completes a streak; last_move is
        the latest history entry of current_player.

    Raises:
        MalformedHistoryError: If a player id or coordinate is out of range,
            a coordinate is declared twice, move counts differ by more than
            one, or a column has a gap below a declared mark.
    """
    placed: List[dict] = [{} for _ in range(width)]
    moves: List[MoveLabel] = []

    for entry in move_history:
        try:
            move = MoveLabel(*(_coordinate(value) for value in entry))
        except (TypeError, ValueError) as e:
            raise MalformedHistoryError(f"Invalid move entry {entry!r}: {e}") from e

        if move.player not in PLAYERS:
            raise MalformedHistoryError(f"Unknown player {move.player} in move {move}")
        if not 0 <= move.column < width:
            raise MalformedHistoryError(f"Column {move.column} is outside the board (0-{width - 1})")
        if not 0 <= move.row < height:
            raise MalformedHistoryError(f"Row {move.row} is outside the board (0-{height - 1})")
        if move.row in placed[move.column]:
            raise MalformedHistoryError(f"Coord {move.column},{move.row} is declared twice")

        placed[move.column][move.row] = move.player
        moves.append(move)

    columns = []
    for column, rows in enumerate(placed):
        for row in range(len(rows)):
            if row not in rows:
                raise MalformedHistoryError(f"Coord {column},{row} is supposed to have a move.")
        columns.append(tuple(rows[row] for row in range(len(rows))))

    counts = [sum(1 for move in moves if move.player == player) for player in PLAYERS]
    if abs(counts[0] - counts[1]) > 1:
        raise MalformedHistoryError(
            f"Invalid number of moves: player 0 has {counts[0]}, player 1 has {counts[1]}"
        )

    next_player = 1 if counts[0] > counts[1] else 0
    current_player = 1 - next_player

    board = Board(
        columns=tuple(columns),
        current_player=current_player,
        next_player=next_player,
        kind=NodeKind.for_next_player(next_player),
        height=height,
    )

    if not moves:
        return board

    # detects() ignores cells that are not current_player marks
    winner = None
    if any(
        detects(board, column, row)
        for column, stack in enumerate(board.columns)
        for row in range(len(stack))
    ):
        winner = current_player

    last_move = next(move for move in reversed(moves) if move.player == current_player)

    return replace(board, winner=winner, last_move=last_move)


def board_to_array(board: Board) -> np.ndarray:
    """
    Convert a board to a dense grid.

    Args:
        board: Board to convert

    Returns:
        numpy array of shape (height, width), dtype int8, EMPTY (-1) where
        no mark has landed. Array row 0 is the bottom row.
    """
    grid = np.full((board.height, board.width), EMPTY, dtype=np.int8)

    for column, stack in enumerate(board.columns):
        if stack:
            grid[: len(stack), column] = stack

    return grid


def array_to_board(grid: np.ndarray) -> Board:
    """
    Convert a dense grid back to a root Board.

    This is the inverse of board_to_array(), except that the move order is
    unknown, so the result carries no last_move.

    Args:
        grid: Array of shape (height, width) holding EMPTY, 0 or 1

    Returns:
        Root Board with turns inferred from move counts

    Raises:
        MalformedHistoryError: If the grid has unknown values or a mark
            floating above an empty cell
    """
    if grid.ndim != 2:
        raise MalformedHistoryError(f"Invalid grid shape: {grid.shape}. Expected (height, width)")

    unknown = ~np.isin(grid, (EMPTY,) + PLAYERS)
    if unknown.any():
        row, column = np.argwhere(unknown)[0]
        raise MalformedHistoryError(f"Unknown mark {grid[row, column]} at {column},{row}")

    height, width = grid.shape
    history = []
    for column in range(width):
        for row in range(height):
            if grid[row, column] != EMPTY:
                history.append((int(grid[row, column]), column, row))

    board = build_root_board(history, width=width, height=height)
    return replace(board, last_move=None)
