"""Zip engine: Hamiltonian path through numbered checkpoints between walls."""

from .board import ZipBoard
from .generator import generate, hamiltonian_path, place_checkpoints, place_walls, snake_path
from .model import ZipCell, ZipCellState, ZipConfig, ZipPuzzle
from .validator import check_win, highest_checkpoint, is_valid_move

__all__ = [
    "ZipBoard",
    "ZipCell",
    "ZipCellState",
    "ZipConfig",
    "ZipPuzzle",
    "check_win",
    "generate",
    "hamiltonian_path",
    "highest_checkpoint",
    "is_valid_move",
    "place_checkpoints",
    "place_walls",
    "snake_path",
]
