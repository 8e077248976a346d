"""
Read-only views of a board for presentation.

Every view masks hidden cells unless reveal_all is set, which gives the
unmasked debug view.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import List

import numpy as np

from .board import Board
from .cell import Cell


class DisplayKind(Enum):
    """What a presentation layer should draw for a cell."""

    HIDDEN = auto()
    BLANK = auto()
    NUMBER = auto()
    MINE = auto()


_SYMBOLS = {
    DisplayKind.HIDDEN: "-",
    DisplayKind.BLANK: " ",
    DisplayKind.MINE: "X",
}


@dataclass(frozen=True)
class DisplayCell:
    """
    A single masked cell.

    Attributes:
        kind: Display category.
        number: Adjacent mine count, set only for NUMBER cells.
    """

    kind: DisplayKind
    number: int = 0

    @classmethod
    def from_cell(cls, cell: Cell, revealed: bool) -> "DisplayCell":
        if not revealed:
            return cls(DisplayKind.HIDDEN)
        if cell.is_mine:
            return cls(DisplayKind.MINE)
        if cell.is_empty:
            return cls(DisplayKind.BLANK)
        return cls(DisplayKind.NUMBER, cell.adjacent_mines)

    def __str__(self) -> str:
        if self.kind == DisplayKind.NUMBER:
            return str(self.number)
        return _SYMBOLS[self.kind]


def snapshot(board: Board, reveal_all: bool = False) -> List[List[DisplayCell]]:
    """
    Get the board as a grid of DisplayCell.

    Args:
        board: Board to view.
        reveal_all: Show every cell regardless of reveal state.

    Returns:
        List of rows, each a list of DisplayCell.
    """
    return [
        [
            DisplayCell.from_cell(
                cell, reveal_all or board.is_revealed((row, col))
            )
            for col, cell in enumerate(cells)
        ]
        for row, cells in enumerate(board)
    ]


def to_array(board: Board, reveal_all: bool = False) -> np.ndarray:
    """
    Get board state as numpy array.

    Returns:
        2D int8 array where:
            -1 = hidden
            0-8 = revealed with adjacent count
            9 = revealed mine
    """
    obs = np.zeros(board.shape, dtype=np.int8)
    for row, cells in enumerate(board):
        for col, cell in enumerate(cells):
            obs[row, col] = cell.to_observation(
                reveal_all or board.is_revealed((row, col))
            )
    return obs


def render(board: Board, reveal_all: bool = False) -> str:
    """Render board as a text grid, one row per line."""
    lines = []
    for row in snapshot(board, reveal_all):
        lines.append(" ".join(str(cell) for cell in row))
    return "\n".join(lines)
