"""
Cell module for the minefield.

Represents the fixed content of a single board cell (mine or adjacent
mine count). Reveal state belongs to the board, not the cell.
"""
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MINE = -1
EMPTY = 0


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents the content of a single cell in the minefield grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
    """

    is_mine: bool = False
    adjacent_mines: int = 0

    @property
    def value(self) -> int:
        """MINE, EMPTY or the adjacent mine count."""
        if self.is_mine:
            return MINE
        return self.adjacent_mines

    @property
    def is_empty(self) -> bool:
        """Check if cell is a non-mine cell with no adjacent mines."""
        return not self.is_mine and self.adjacent_mines == EMPTY

    def to_observation(self, revealed: bool) -> int:
        """
        Convert cell to its numeric display value.

        Args:
            revealed: Whether the cell is shown.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if not revealed:
            return -1
        if self.is_mine:
            return 9
        return self.adjacent_mines
