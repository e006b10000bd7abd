# path_gen.py
import logging
import random
from typing import Collection, List, Sequence, Set, Tuple

# Import from other project modules
import constants as const
from grid_core import Coord

logger = logging.getLogger(__name__)


def _is_open(target: Coord, visited: Collection[Coord], rows: int, cols: int) -> bool:
    """True if target lies on the grid and has not been walked yet."""
    return 0 <= target.row < rows and 0 <= target.col < cols and target not in visited


def legal_moves(
    position: Tuple[int, int],
    visited: Collection[Coord],
    rows: int = const.CORRIDOR_ROWS,
    cols: int = const.CORRIDOR_COLUMNS,
) -> List[str]:
    """The corridor moves (left, right, down) that are possible from position."""
    position = Coord(*position)
    return [
        move
        for move in const.CORRIDOR_MOVES
        if _is_open(position.offset(move), visited, rows, cols)
    ]


def generate_unicursal_path(
    rng: random.Random,
    rows: int = const.CORRIDOR_ROWS,
    cols: int = const.CORRIDOR_COLUMNS,
    start: Tuple[int, int] = const.CORRIDOR_START,
) -> List[Coord]:
    """
    Generates a unicursal (single, non-branching) path with a random
    self-avoiding walk. From the current cell a move is drawn from
    left/right/down; a move that would leave the grid or revisit a cell is
    dropped from this step's choices and another is drawn. The walk ends when
    no choice is left.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError("Corridor dimensions must be positive.")
    current = Coord(*start)
    if not (0 <= current.row < rows and 0 <= current.col < cols):
        raise ValueError(f"Start {current} is outside the {rows}x{cols} corridor grid.")

    logger.info("--- Starting Corridor Generation (Self-Avoiding Walk) ---")
    path: List[Coord] = [current]
    visited: Set[Coord] = {current}

    while True:
        choices = list(const.CORRIDOR_MOVES)
        moved = False
        while choices:
            move = rng.choice(choices)
            target = current.offset(move)
            if _is_open(target, visited, rows, cols):
                current = target
                moved = True
                break
            choices.remove(move)

        if not moved:
            break
        path.append(current)
        visited.add(current)

    logger.info(
        "--- Corridor Generation Complete: %d/%d cells on the path. ---",
        len(path),
        rows * cols,
    )
    return path


def place_collectibles(
    path: Sequence[Coord],
    rng: random.Random,
    max_items: int = const.MAX_COLLECTIBLES,
) -> List[Coord]:
    """
    Picks the corridor cells that receive a collectible. Every cell after the
    start draws a ticket without replacement from range(len(path)); tickets
    below max_items win. At most max_items cells are chosen.
    """
    tickets = list(range(len(path)))
    spots: List[Coord] = []
    for cell in path[1:]:
        ticket = tickets.pop(rng.randrange(len(tickets)))
        if ticket < max_items:
            spots.append(cell)
    logger.debug("  Placed %d collectibles along the corridor.", len(spots))
    return spots
