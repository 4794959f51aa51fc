"""Queens engine: region-constrained queen placement with a unique solution."""

from .board import QueensBoard
from .generator import generate
from .model import CellState, QueensCell, QueensConfig, QueensPuzzle
from .solver_core import solve
from .validator import check_win, conflicting_queens, is_valid_placement, update_errors

__all__ = [
    "CellState",
    "QueensBoard",
    "QueensCell",
    "QueensConfig",
    "QueensPuzzle",
    "check_win",
    "conflicting_queens",
    "generate",
    "is_valid_placement",
    "solve",
    "update_errors",
]
