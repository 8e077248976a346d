"""
Reveal engine for the minefield.

Turns a click into reveals: a mine ends the game, anything else starts a
breadth-first flood fill across empty cells that stops at numbered
cells.
"""
import logging
from collections import deque
from enum import Enum, auto

from .board import Board, GameState, Position


logger = logging.getLogger(__name__)


class ClickResult(Enum):
    """Outcome of a single click."""

    IN_PROGRESS = auto()
    INVALID_MOVE = auto()
    WIN = auto()
    LOSE = auto()


_TERMINAL_RESULTS = {
    GameState.WON: ClickResult.WIN,
    GameState.LOST: ClickResult.LOSE,
}


def click(board: Board, position: Position) -> ClickResult:
    """
    Reveal the cell at position and everything it opens up.

    Out-of-bounds clicks are rejected with INVALID_MOVE. Once the game is
    won or lost, every in-bounds click returns that same terminal result
    without touching the board. Clicking an already revealed cell is a
    no-op returning IN_PROGRESS.

    Args:
        board: Board to mutate.
        position: (row, col) that was clicked.

    Returns:
        The ClickResult for this click.
    """
    if not board.in_bounds(position):
        logger.debug("Rejected out-of-bounds click at %s", position)
        return ClickResult.INVALID_MOVE

    terminal = _TERMINAL_RESULTS.get(board.game_state)
    if terminal is not None:
        return terminal

    if board.is_revealed(position):
        return ClickResult.IN_PROGRESS

    if board.get_cell(*position).is_mine:
        board._reveal_cell(position)
        logger.info("Mine hit at %s", position)
        return ClickResult.LOSE

    revealed = flood_fill(board, position)
    logger.debug("Click at %s revealed %d cells", position, revealed)

    if board.safe_cells_remaining == 0:
        logger.info("All safe cells revealed")
        return ClickResult.WIN
    return ClickResult.IN_PROGRESS


def flood_fill(board: Board, start: Position) -> int:
    """
    Reveal start and the connected empty region around it.

    Empty cells enqueue their hidden non-mine neighbors; numbered cells
    are revealed but do not expand. Mines are never enqueued.

    Returns:
        Number of cells revealed; 0 if start is off the board.
    """
    if not board.in_bounds(start):
        return 0

    revealed = 0
    queue = deque([start])
    while queue:
        position = queue.popleft()
        cell = board.get_cell(*position)
        # Already revealed positions were queued twice; expand them once.
        if cell.is_mine or not board._reveal_cell(position):
            continue
        revealed += 1
        if not cell.is_empty:
            continue
        for neighbor in board.neighbors(position):
            if board.is_revealed(neighbor):
                continue
            if not board.get_cell(*neighbor).is_mine:
                queue.append(neighbor)
    return revealed
