"""
Board module for the minefield.

Implements the fixed-size board built from caller-supplied mine
positions, with eager adjacency counting and game state tracking.
"""
import logging
import operator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Tuple

import numpy as np

from .cell import Cell


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

# Row-major order, shared by adjacency counting and flood fill.
NEIGHBOR_OFFSETS: Tuple[Position, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class ConfigurationError(ValueError):
    """Raised when a mine layout cannot produce a valid board."""


class GameState(Enum):
    """Possible states of the game."""

    UNSTARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a minefield board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: (row, col) positions of every mine.
    """

    rows: int
    cols: int
    mines: Sequence[Position] = ()

    def __post_init__(self) -> None:
        """Normalize and validate configuration after initialization."""
        self._validate_dimensions()
        mines = tuple(self._normalize_position(entry) for entry in self.mines)
        object.__setattr__(self, "mines", mines)
        self._validate_mines()

    @staticmethod
    def _normalize_position(entry) -> Position:
        """Turn a mine entry into a (row, col) tuple of ints."""
        try:
            row, col = entry
            return operator.index(row), operator.index(col)
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"Mine position {entry!r} is not a (row, col) pair of integers"
            ) from None

    def _validate_dimensions(self) -> None:
        """Ensure dimensions are positive integers."""
        try:
            operator.index(self.rows)
            operator.index(self.cols)
        except TypeError:
            raise ConfigurationError("Board dimensions must be integers") from None
        if self.rows < 1 or self.cols < 1:
            raise ConfigurationError("Board dimensions must be positive")

    def _validate_mines(self) -> None:
        """Ensure mine positions fit the board and are unique."""
        max_mines = self.rows * self.cols - 1
        if len(self.mines) > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

        seen: Set[Position] = set()
        for position in self.mines:
            row, col = position
            if not (0 <= row < self.rows and 0 <= col < self.cols):
                raise ConfigurationError(
                    f"Mine position {position} is out of bounds"
                )
            if position in seen:
                raise ConfigurationError(
                    f"Duplicate mine position {position}"
                )
            seen.add(position)

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def num_mines(self) -> int:
        """Number of mines on the board."""
        return len(self.mines)


# ============================================================================
# Board Class
# ============================================================================

@dataclass(eq=False)
class Board:
    """
    Minefield game board.

    Owns the grid of cells and which of them are revealed. Cells are
    immutable once built; the reveal mask only changes through
    _reveal_cell, which the reveal engine drives.
    """

    config: BoardConfig
    _grid: Tuple[Tuple[Cell, ...], ...] = field(init=False, repr=False)
    _mines: np.ndarray = field(init=False, repr=False)
    _revealed: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Build the grid after dataclass creation."""
        self._init_masks()
        self._init_grid()
        logger.debug(
            "Built %dx%d board with %d mines",
            self.rows, self.cols, self.config.num_mines,
        )

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_masks(self) -> None:
        """Create the mine mask and an all-hidden reveal mask."""
        self._mines = np.zeros(self.shape, dtype=bool)
        for row, col in self.config.mines:
            self._mines[row, col] = True
        self._revealed = np.zeros(self.shape, dtype=bool)

    def _init_grid(self) -> None:
        """Create cells with their final adjacent mine counts."""
        self._grid = tuple(
            tuple(self._build_cell(row, col) for col in range(self.cols))
            for row in range(self.rows)
        )

    def _build_cell(self, row: int, col: int) -> Cell:
        if self._mines[row, col]:
            return Cell(is_mine=True)
        return Cell(adjacent_mines=self._count_adjacent_mines(row, col))

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors((row, col)):
            if self._mines[neighbor_row, neighbor_col]:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, position: Position) -> List[Position]:
        """
        Get in-bounds neighboring positions.

        Args:
            position: (row, col) of the center cell.

        Returns:
            Up to 8 (row, col) tuples, in NEIGHBOR_OFFSETS order.
        """
        row, col = position
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.in_bounds((new_row, new_col)):
                neighbors.append((new_row, new_col))
        return neighbors

    def in_bounds(self, position: Position) -> bool:
        """Check if position is within board bounds."""
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    # ========================================================================
    # Reveal Bookkeeping (Mid-level)
    # ========================================================================

    def _reveal_cell(self, position: Position) -> bool:
        """
        Mark a single cell as revealed.

        Args:
            position: (row, col) of the cell.

        Returns:
            True if the cell was hidden before this call.
        """
        row, col = position
        if self._revealed[row, col]:
            return False
        self._revealed[row, col] = True
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self.config.rows, self.config.cols

    @property
    def safe_cells_remaining(self) -> int:
        """Number of non-mine cells still hidden."""
        return int(np.count_nonzero(~self._mines & ~self._revealed))

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if np.any(self._mines & self._revealed):
            return GameState.LOST
        if self.safe_cells_remaining == 0:
            return GameState.WON
        if not np.any(self._revealed):
            return GameState.UNSTARTED
        return GameState.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self.game_state in (GameState.WON, GameState.LOST)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds((row, col)):
            return None
        return self._grid[row][col]

    def value_at(self, position: Position) -> int:
        """Get MINE, EMPTY or the adjacent count, ignoring reveal state."""
        row, col = position
        return self._grid[row][col].value

    def is_revealed(self, position: Position) -> bool:
        """Check whether the cell at position is revealed."""
        row, col = position
        return bool(self._revealed[row, col])

    def mine_positions(self) -> List[Position]:
        """Get positions of every mine cell, in row-major order."""
        return [(int(row), int(col)) for row, col in np.argwhere(self._mines)]

    def valid_moves(self) -> List[Position]:
        """
        Get list of hidden cells.

        Returns:
            List of (row, col) positions that can still be revealed,
            in row-major order.
        """
        return [(int(row), int(col)) for row, col in np.argwhere(~self._revealed)]

    def __iter__(self) -> Iterator[Tuple[Cell, ...]]:
        """Iterate over grid rows."""
        return iter(self._grid)


def construct(rows: int, cols: int, mines: Iterable[Position]) -> Board:
    """
    Build a board from its dimensions and mine positions.

    Raises:
        ConfigurationError: If the layout is invalid.
    """
    return Board(BoardConfig(rows, cols, tuple(mines)))
