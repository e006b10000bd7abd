# geometry.py
import logging
from typing import List, Sequence, Set, Tuple

# Import from other project modules
import constants as const
from grid_core import Coord, MazeConsistencyError
from utils import direction_of

logger = logging.getLogger(__name__)

# A wall is named by the cell that owns it and the side it sits on. Each cell
# owns its RIGHT and DOWN walls; cells on the top row and left column also own
# the UP and LEFT boundary walls.
Wall = Tuple[Coord, str]


def _canonical_wall(cell: Coord, side: str) -> Wall:
    """Re-expresses a cell side as the wall's owner and owning side."""
    if side == const.DIR_LEFT and cell.col > 0:
        return Coord(cell.row, cell.col - 1), const.DIR_RIGHT
    if side == const.DIR_UP and cell.row > 0:
        return Coord(cell.row - 1, cell.col), const.DIR_DOWN
    return Coord(*cell), side


def extract_corridor_openings(path: Sequence[Coord]) -> List[Wall]:
    """
    Lists the walls to remove so the path becomes a walkable corridor: the
    wall crossed by every step, then the entrance (below the last cell) and
    the exit (above the first cell).
    """
    if not path:
        return []

    openings: List[Wall] = []
    for previous, current in zip(path, path[1:]):
        direction = direction_of(previous, current)
        if direction not in const.CORRIDOR_MOVES:
            raise MazeConsistencyError(
                f"Invalid corridor step {tuple(previous)} -> {tuple(current)}."
            )
        openings.append(_canonical_wall(Coord(*previous), direction))

    openings.append(_canonical_wall(Coord(*path[-1]), const.DIR_DOWN))  # Entrance
    openings.append(_canonical_wall(Coord(*path[0]), const.DIR_UP))  # Exit
    return openings


def all_corridor_walls(
    rows: int = const.CORRIDOR_ROWS, cols: int = const.CORRIDOR_COLUMNS
) -> List[Wall]:
    """Every wall of a fully closed rows x cols grid, each listed once."""
    walls: List[Wall] = []
    for r in range(rows):
        for c in range(cols):
            cell = Coord(r, c)
            walls.append((cell, const.DIR_RIGHT))
            walls.append((cell, const.DIR_DOWN))
            if r == 0:
                walls.append((cell, const.DIR_UP))
            if c == 0:
                walls.append((cell, const.DIR_LEFT))
    return walls


def extract_corridor_walls(
    path: Sequence[Coord],
    rows: int = const.CORRIDOR_ROWS,
    cols: int = const.CORRIDOR_COLUMNS,
) -> List[Wall]:
    """The walls still standing once the corridor openings are removed."""
    openings: Set[Wall] = set(extract_corridor_openings(path))
    walls = [wall for wall in all_corridor_walls(rows, cols) if wall not in openings]
    logger.debug(
        "  Corridor keeps %d walls, %d opened.", len(walls), len(openings)
    )
    return walls


def wall_segment(
    wall: Wall, cell_size: float = 1.0
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    Line segment ((x1, y1), (x2, y2)) of a wall in plot space, where x grows
    with the column and y with the row.
    """
    cell, side = wall
    x0, y0 = cell.col * cell_size, cell.row * cell_size
    x1, y1 = x0 + cell_size, y0 + cell_size
    if side == const.DIR_RIGHT:
        return (x1, y0), (x1, y1)
    if side == const.DIR_LEFT:
        return (x0, y0), (x0, y1)
    if side == const.DIR_DOWN:
        return (x0, y1), (x1, y1)
    return (x0, y0), (x1, y0)
