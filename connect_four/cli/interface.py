"""
Solver Shell

Line-oriented front end for the solver. It reads a game state, searches
it, and prints the score of every legal move.

Commands:
    - player,column,row player,column,row ...   game state (0-indexed)
    - startpos: Search the empty board
    - depth N: Change the search depth
    - quit: Shutdown

Session:
    Solver → "Connect 4 Solver"
    User   → "0,3,0 1,3,1"
    Solver → board diagram
    Solver → "0,0,0: 57" ... one line per legal move
    Solver → "bestmove 0,2,0 score 91"

Player 0 is the maximizing side; scores are from player 0's perspective.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from connect_four.board.representation import (
    Board,
    MalformedHistoryError,
    MoveLabel,
    NodeKind,
    board_to_array,
    build_root_board,
    empty_board,
)
from connect_four.config import SolverConfig
from connect_four.evaluation.base import Evaluator
from connect_four.evaluation.placeholder import RandomEvaluator
from connect_four.search.minimax import next_moves

PROMPT = "Enter game state: "
MARKS = {-1: ".", 0: "X", 1: "O"}


def setup_logger(debug=False, log_dir: Optional[Path] = None):
    """
    Setup file-based logger for the solver shell.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_dir: Directory for solver.log (default: ~/.connect_four)

    Returns:
        Configured logger instance
    """
    if log_dir is None:
        log_dir = Path.home() / ".connect_four"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "solver.log"

    logger = logging.getLogger("connect_four")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for old_handler in logger.handlers:
        old_handler.close()
    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def parse_game_state(text: str) -> List[Tuple[int, int, int]]:
    """
    Parse "player,column,row player,column,row ..." into triples.

    Raises:
        MalformedHistoryError: If a token is not three comma-separated integers
    """
    moves = []
    for token in text.split():
        parts = token.split(",")
        if len(parts) != 3:
            raise MalformedHistoryError(f"Move '{token}' must look like player,column,row")
        try:
            moves.append(tuple(int(part) for part in parts))
        except ValueError:
            raise MalformedHistoryError(f"Move '{token}' must contain integers only") from None
    return moves


def render_board(board: Board) -> str:
    """Text diagram, top row first, with a column index footer."""
    grid = board_to_array(board)
    lines = [" ".join(MARKS[int(mark)] for mark in row) for row in grid[::-1]]
    lines.append(" ".join(str(column) for column in range(board.width)))
    return "\n".join(lines)


def format_scores(scores: Dict[MoveLabel, int]) -> List[str]:
    return [f"{move}: {score}" for move, score in scores.items()]


class SolverShell:
    """
    Interactive solver front end.

    Attributes:
        config: Solver settings (depth, seed, logging)
        evaluator: Leaf evaluation function
        board: Last position searched, None before the first query
        logger: Shell logger writing to <log_dir>/solver.log
    """

    def __init__(self, config: Optional[SolverConfig] = None, evaluator: Optional[Evaluator] = None):
        """
        Initialize the shell.

        Args:
            config: Solver settings (default: SolverConfig())
            evaluator: Leaf evaluator (default: RandomEvaluator seeded from config)
        """
        self.config = config if config else SolverConfig()
        self.evaluator = evaluator if evaluator else RandomEvaluator(seed=self.config.seed)
        self.board: Optional[Board] = None

        self.logger = setup_logger(debug=self.config.debug, log_dir=self.config.log_dir)
        self.logger.info("=== Connect 4 Solver Started ===")
        self.logger.info(f"Config: {self.config!r}, evaluator: {self.evaluator!r}")

    def run(self):
        """
        Main command loop.

        Reads commands on stdin until 'quit' or EOF.
        """
        print("Connect 4 Solver")
        while True:
            try:
                command = input(PROMPT).strip()

                if not command:
                    continue

                self.logger.debug(f">>> {command}")

                if not self.handle_command(command):
                    break

            except EOFError:
                self.logger.info("EOF received, shutting down")
                break
            except Exception as e:
                self.logger.error(f"Command error: {e}", exc_info=True)
                print(f"# Error: {e}", file=sys.stderr)

        self.logger.info("=== Connect 4 Solver Stopped ===")

    def handle_command(self, command: str) -> bool:
        """
        Dispatch one command line.

        Returns:
            bool: False when the shell should stop
        """
        tokens = command.split()
        cmd = tokens[0].lower()

        if cmd == "quit":
            self.logger.info("Handling: quit")
            return False

        if cmd == "depth":
            self.handle_depth(tokens)
        elif cmd == "startpos":
            self.handle_state(empty_board())
        else:
            try:
                board = build_root_board(parse_game_state(command))
            except MalformedHistoryError as e:
                self.logger.warning(f"Rejected game state: {e}")
                print(f"Invalid input. Try again! Error: {e}")
                return True
            self.handle_state(board)

        return True

    def handle_depth(self, tokens):
        """Handle 'depth N' - change the search depth."""
        if len(tokens) != 2 or not tokens[1].isdigit() or int(tokens[1]) < 1:
            print("Usage: depth N (N >= 1)")
            return

        self.config.depth = int(tokens[1])
        self.logger.info(f"Search depth set to {self.config.depth}")
        print(f"depth {self.config.depth}")

    def handle_state(self, board: Board):
        """
        Search a position and print the score of every legal move.

        Output:
            board diagram
            <player>,<column>,<row>: <score>   (one line per move)
            bestmove <move> score <score>
        """
        self.board = board
        self.logger.info(f"Searching {board} depth={self.config.depth}")

        print(render_board(board))

        if board.winner is not None:
            print(f"Player {board.winner} has already won.")
            self.logger.info(f"Position already won by player {board.winner}")
            return

        scores = next_moves(board, self.config.depth, self.evaluator)
        if not scores:
            print("Board is full, no moves left.")
            self.logger.info("No legal moves: board is full")
            return

        for line in format_scores(scores):
            print(line)
            self.logger.debug(f"<<< {line}")

        pick = max if board.kind is NodeKind.MAX else min
        best_move = pick(scores, key=scores.get)
        bestmove_msg = f"bestmove {best_move} score {scores[best_move]}"
        print(bestmove_msg)
        sys.stdout.flush()
        self.logger.debug(f"<<< {bestmove_msg}")
