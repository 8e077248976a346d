"""
Minefield package.

Provides the board model, the click/reveal engine, and read-only
snapshot views for presentation.
"""
from .cell import Cell, MINE, EMPTY
from .board import (
    Board,
    BoardConfig,
    ConfigurationError,
    GameState,
    NEIGHBOR_OFFSETS,
    Position,
    construct,
)
from .reveal import ClickResult, click, flood_fill
from .snapshot import DisplayCell, DisplayKind, render, snapshot, to_array

__all__ = [
    "Cell",
    "MINE",
    "EMPTY",
    "Board",
    "BoardConfig",
    "ConfigurationError",
    "GameState",
    "NEIGHBOR_OFFSETS",
    "Position",
    "construct",
    "ClickResult",
    "click",
    "flood_fill",
    "DisplayCell",
    "DisplayKind",
    "render",
    "snapshot",
    "to_array",
]
