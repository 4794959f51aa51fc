"""Mutable Zip play-state: the player's path with rewind-on-click."""

from dataclasses import dataclass, field
from typing import List

from .model import Position, ZipCellState, ZipPuzzle
from .validator import check_win, highest_checkpoint, is_valid_move


@dataclass
class ZipBoard:
    puzzle: ZipPuzzle
    cells: List[List[ZipCellState]] = field(default_factory=list)
    path: List[Position] = field(default_factory=list)
    won: bool = False

    @classmethod
    def from_puzzle(cls, puzzle: ZipPuzzle) -> "ZipBoard":
        cells = [
            [
                ZipCellState(
                    row=r,
                    col=c,
                    value=cell.value,
                    is_checkpoint=cell.is_checkpoint,
                    right_wall=cell.right_wall,
                    bottom_wall=cell.bottom_wall,
                )
                for c, cell in enumerate(row)
            ]
            for r, row in enumerate(puzzle.grid)
        ]
        board = cls(puzzle=puzzle, cells=cells)
        board.reset()
        return board

    @property
    def size(self) -> int:
        return self.puzzle.size

    @property
    def head(self) -> Position:
        return self.path[-1]

    def reset(self) -> None:
        """Clear the path back to checkpoint 1."""
        for row in self.cells:
            for cell in row:
                cell.path_index = None
        start = self.puzzle.checkpoint_position(1)
        self.cells[start[0]][start[1]].path_index = 0
        self.path = [start]
        self.won = False

    def click(self, row: int, col: int) -> bool:
        """Rewind to a visited cell or extend the path by one. Returns whether anything changed."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.size}x{self.size} board")
        if self.won:
            return False

        cell = self.cells[row][col]
        if cell.path_index is not None:
            return self.rewind_to(row, col)
        return self.extend(row, col)

    def rewind_to(self, row: int, col: int) -> bool:
        cell = self.cells[row][col]
        if cell.path_index is None:
            return False
        new_length = cell.path_index + 1
        if new_length >= len(self.path):
            return False
        for r, c in self.path[new_length:]:
            self.cells[r][c].path_index = None
        self.path = self.path[:new_length]
        self.won = False
        return True

    def extend(self, row: int, col: int) -> bool:
        if not is_valid_move(self.cells, self.head, (row, col)):
            return False
        cell = self.cells[row][col]
        if cell.is_checkpoint and cell.value != highest_checkpoint(self.cells) + 1:
            return False
        cell.path_index = len(self.path)
        self.path.append((row, col))
        self.won = check_win(self.cells, self.puzzle)
        return True

    def check_win(self) -> bool:
        return check_win(self.cells, self.puzzle)
