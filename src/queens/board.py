"""Mutable Queens play-state driven by left/right clicks."""

from dataclasses import dataclass, field
from typing import List

from .model import CellState, Position, QueensCell, QueensPuzzle
from .validator import check_win, update_errors


@dataclass
class QueensBoard:
    puzzle: QueensPuzzle
    cells: List[List[QueensCell]] = field(default_factory=list)
    won: bool = False

    @classmethod
    def from_puzzle(cls, puzzle: QueensPuzzle) -> "QueensBoard":
        cells = [
            [QueensCell(row=r, col=c, region_id=region_id) for c, region_id in enumerate(row)]
            for r, row in enumerate(puzzle.regions)
        ]
        return cls(puzzle=puzzle, cells=cells)

    @property
    def size(self) -> int:
        return self.puzzle.size

    def _cell(self, row: int, col: int) -> QueensCell:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.size}x{self.size} board")
        return self.cells[row][col]

    def _toggle(self, row: int, col: int, state: CellState) -> bool:
        cell = self._cell(row, col)
        if self.won:
            return False
        cell.state = CellState.EMPTY if cell.state == state else state
        update_errors(self.cells)
        self.won = check_win(self.cells)
        return True

    def toggle_queen(self, row: int, col: int) -> bool:
        """Left click: EMPTY/CROSS -> QUEEN, QUEEN -> EMPTY."""
        return self._toggle(row, col, CellState.QUEEN)

    def toggle_cross(self, row: int, col: int) -> bool:
        """Right click: EMPTY/QUEEN -> CROSS, CROSS -> EMPTY."""
        return self._toggle(row, col, CellState.CROSS)

    def queens(self) -> List[Position]:
        return [(c.row, c.col) for row in self.cells for c in row if c.state == CellState.QUEEN]

    def errors(self) -> List[Position]:
        return [(c.row, c.col) for row in self.cells for c in row if c.is_error]

    def check_win(self) -> bool:
        return check_win(self.cells)
