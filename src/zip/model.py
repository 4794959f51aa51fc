"""Zip puzzle definition, play-state cells and generator settings."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

Position = Tuple[int, int]


@dataclass(frozen=True)
class ZipConfig:
    # Path search steps before the snake fallback.
    max_steps: int = 5000
    wall_probability: float = 0.3
    checkpoint_spacing: int = 5
    min_checkpoints: int = 3
    default_size: int = 7

    def __post_init__(self) -> None:
        if self.checkpoint_spacing < 1:
            raise ValueError("checkpoint_spacing must be at least 1")
        if self.min_checkpoints < 1:
            raise ValueError("min_checkpoints must be at least 1")


@dataclass(frozen=True)
class ZipCell:
    value: Optional[int] = None
    is_checkpoint: bool = False
    right_wall: bool = False
    bottom_wall: bool = False


@dataclass(frozen=True)
class ZipPuzzle:
    """A grid with numbered checkpoints and walls, solvable by one Hamiltonian path."""

    size: int
    grid: Tuple[Tuple[ZipCell, ...], ...]
    checkpoints: int
    total_cells: int
    solution: Tuple[Position, ...] = field(repr=False)

    def checkpoint_position(self, number: int) -> Position:
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                if cell.is_checkpoint and cell.value == number:
                    return (r, c)
        raise KeyError(f"No checkpoint numbered {number}")

    def to_dict(self, include_solution: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "kind": "zip",
            "size": self.size,
            "checkpoints": self.checkpoints,
            "totalCells": self.total_cells,
            "grid": [
                [
                    {
                        "value": cell.value,
                        "isCheckpoint": cell.is_checkpoint,
                        "rightWall": cell.right_wall,
                        "bottomWall": cell.bottom_wall,
                    }
                    for cell in row
                ]
                for row in self.grid
            ],
        }
        if include_solution:
            payload["solution"] = [list(pos) for pos in self.solution]
        return payload


@dataclass
class ZipCellState:
    row: int
    col: int
    value: Optional[int] = None
    is_checkpoint: bool = False
    path_index: Optional[int] = None
    right_wall: bool = False
    bottom_wall: bool = False
