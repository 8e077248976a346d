"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, construct


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def scenario_board() -> Board:
    """Create the 5x7 board with mines at (1, 3) and (2, 2)."""
    return construct(5, 7, [(1, 3), (2, 2)])


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with a single mine in the corner."""
    return construct(3, 3, [(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return construct(5, 5, [])


@pytest.fixture
def walled_board() -> Board:
    """Create a 5x5 board split by a wall of mines down column 2."""
    return construct(5, 5, [(0, 2), (1, 2), (2, 2), (3, 2)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def empty_cell() -> Cell:
    """Create a cell with no adjacent mines."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a cell with adjacent mines."""
    return Cell(adjacent_mines=3)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(5, 7, [(1, 3), (2, 2)])
