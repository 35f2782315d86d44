"""
Solver configuration.

Board geometry and search defaults live here as module constants so that
every component agrees on them. SolverConfig groups the settings the
interactive shell needs at runtime.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# --- Board Dimensions ---
BOARD_WIDTH = 7
BOARD_HEIGHT = 6
WINNING_STREAK = 4

# --- Search ---
DEFAULT_DEPTH = 6

# Placeholder evaluator draws scores from [0, PLACEHOLDER_SCORE_RANGE)
PLACEHOLDER_SCORE_RANGE = 100


@dataclass
class SolverConfig:
    """Runtime settings for the solver shell."""

    depth: int = DEFAULT_DEPTH
    """Search depth handed to next_moves for every query"""

    seed: Optional[int] = None
    """Seed for the placeholder evaluator (None for a fresh random stream)"""

    debug: bool = False
    """Log at DEBUG level instead of INFO"""

    log_dir: Path = field(default_factory=lambda: Path.home() / ".connect_four")
    """Directory holding solver.log"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_dir = Path(self.log_dir)

        if self.depth < 1:
            raise ValueError(f"depth must be at least 1, got {self.depth}")

        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")

    def __repr__(self) -> str:
        return (
            f"SolverConfig(depth={self.depth}, seed={self.seed}, "
            f"debug={self.debug}, log_dir={self.log_dir})"
        )
