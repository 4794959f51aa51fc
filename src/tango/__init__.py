"""Tango engine: balanced two-symbol grids with fixed hints."""

from .board import TangoBoard
from .generator import generate, is_legal_placement
from .model import Symbol, TangoCell, TangoCellState, TangoConfig, TangoPuzzle
from .validator import check_win, validate_board

__all__ = [
    "Symbol",
    "TangoBoard",
    "TangoCell",
    "TangoCellState",
    "TangoConfig",
    "TangoPuzzle",
    "check_win",
    "generate",
    "is_legal_placement",
    "validate_board",
]
