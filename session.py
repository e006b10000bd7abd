# session.py
import logging
import random
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

# Import from other project modules
import constants as const
from geometry import Wall, extract_corridor_openings
from grid_core import CellKind, Coord, Edge, ExpandedGrid, MazeConsistencyError
from maze_gen import generate_maze, validate_spanning_tree
from maze_solver import expand_solution, solve_maze
from path_gen import generate_unicursal_path, place_collectibles
from utils import make_rng

logger = logging.getLogger(__name__)


class SolutionTracker:
    """
    Records whether any cell of the maze solution has been destroyed.
    Starts intact; once destroyed it stays destroyed for the session.
    """

    def __init__(self, solution_cells: Iterable[Tuple[int, int]]):
        self.solution_cells: FrozenSet[Coord] = frozenset(
            Coord(*cell) for cell in solution_cells
        )
        self._destroyed = False

    def is_destroyed(self) -> bool:
        return self._destroyed

    def mark_destroyed(self):
        """Flags the solution as destroyed. Calling it again changes nothing."""
        if not self._destroyed:
            logger.info("Maze solution destroyed.")
        self._destroyed = True

    def is_member_of_solution(self, coord: Tuple[int, int]) -> bool:
        return Coord(*coord) in self.solution_cells

    def report_destroyed_cell(self, coord: Tuple[int, int]) -> bool:
        """Marks the solution destroyed if coord belongs to it. Returns membership."""
        if self.is_member_of_solution(coord):
            self.mark_destroyed()
            return True
        return False

    def __repr__(self) -> str:
        state = "Destroyed" if self._destroyed else "Intact"
        return f"SolutionTracker({len(self.solution_cells)} cells, {state})"


class MazeSession:
    """
    Owns every structure generated for one game session: the perfect maze,
    its expanded grid and solution, the solution tracker and the unicursal
    corridor. Everything is built synchronously on construction; after that
    the only mutable state is the destruction record and the
    collectibles still lying on the corridor.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else make_rng()
        logger.info("--- Initializing Maze Session ---")

        # Perfect maze pipeline
        self.maze: List[Edge] = generate_maze(self.rng)
        validate_spanning_tree(self.maze)
        self.grid = ExpandedGrid()
        self.grid.carve(self.maze)
        self.solution: List[Coord] = solve_maze(self.maze)
        if not self.solution:
            raise MazeConsistencyError(
                f"No path from {const.MAZE_ENTRANCE} to {const.MAZE_EXIT} in generated maze."
            )
        self.expanded_solution: List[Coord] = expand_solution(self.solution)
        self.tracker = SolutionTracker(self.expanded_solution)

        # Corridor pipeline (independent of the maze)
        self.corridor: List[Coord] = generate_unicursal_path(self.rng)
        self.corridor_openings: List[Wall] = extract_corridor_openings(self.corridor)
        self.collectibles: List[Coord] = place_collectibles(self.corridor, self.rng)

        self._destroyed_floors: Set[Coord] = set()
        self._closed = False
        logger.info(
            "--- Maze Session Ready: solution %d cells, corridor %d cells ---",
            len(self.expanded_solution),
            len(self.corridor),
        )

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> "MazeSession":
        return cls(make_rng(seed))

    def _check_open(self):
        if self._closed:
            raise RuntimeError("Maze session has ended.")

    # --- Query surface for the game layer ---
    def get_cell_kind(self, row: int, col: int) -> CellKind:
        self._check_open()
        return self.grid.get_cell_kind(row, col)

    def is_cell_in_solution(self, row: int, col: int) -> bool:
        """True if expanded cell (row, col) lies on the solution; False off the grid."""
        self._check_open()
        if not self.grid.in_bounds(row, col):
            return False
        return self.tracker.is_member_of_solution((row, col))

    def is_solution_destroyed(self) -> bool:
        self._check_open()
        return self.tracker.is_destroyed()

    def mark_solution_destroyed(self):
        self._check_open()
        self.tracker.mark_destroyed()

    def unicursal_path(self) -> List[Coord]:
        self._check_open()
        return list(self.corridor)

    def collect_at(self, row: int, col: int) -> bool:
        """Removes the collectible lying on corridor cell (row, col), if any."""
        self._check_open()
        spot = Coord(row, col)
        if spot not in self.collectibles:
            return False
        self.collectibles.remove(spot)
        logger.debug("  Collected projectile at %s, %d left.", spot, len(self.collectibles))
        return True

    def report_floor_destroyed(self, row: int, col: int) -> bool:
        """
        Records that the floor at expanded cell (row, col) was destroyed.
        Cells without a floor (walls, off-grid) are ignored. Returns True if
        the destroyed floor was part of the solution.
        """
        self._check_open()
        if self.grid.get_cell_kind(row, col) == CellKind.WALL:
            logger.debug("  Ignoring destruction of floorless cell (%d, %d).", row, col)
            return False
        self._destroyed_floors.add(Coord(row, col))
        return self.tracker.report_destroyed_cell((row, col))

    def destroyed_floors(self) -> FrozenSet[Coord]:
        self._check_open()
        return frozenset(self._destroyed_floors)

    # --- Lifetime ---
    def close(self):
        """Ends the session. Further queries raise RuntimeError."""
        if not self._closed:
            logger.info("--- Maze Session Closed ---")
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "MazeSession":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
