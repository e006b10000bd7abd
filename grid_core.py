# grid_core.py
import logging
from enum import IntEnum
from typing import Iterable, Iterator, List, NamedTuple, Set, Tuple

import numpy as np

# Import from other project modules
import constants as const

logger = logging.getLogger(__name__)


class MazeConsistencyError(RuntimeError):
    """Raised when generated maze data breaks a structural invariant.

    This always indicates a generator defect. Callers are not expected to
    recover from it: a maze that fails these checks may be unsolvable.
    """


class Coord(NamedTuple):
    """A (row, col) position on either the compact or the expanded grid."""

    row: int
    col: int

    def offset(self, direction: str) -> "Coord":
        """The coordinate one step away in the given const.DIR_* direction."""
        dr, dc = const.DIRECTION_DELTAS[direction]
        return Coord(self.row + dr, self.col + dc)

    def __repr__(self) -> str:
        return f"({self.row}, {self.col})"


# An edge joins two adjacent compact coordinates (already visited -> newly visited)
Edge = Tuple[Coord, Coord]


class CellKind(IntEnum):
    WALL = 0
    MAZE_CELL = 1
    CONNECTOR = 2


def classify_cell(row: int, col: int) -> CellKind:
    """
    Classifies an expanded-grid cell purely from the parity of its indices.
    even/even -> room, exactly one odd -> connector, odd/odd -> wall.
    """
    row_odd = row % 2 == 1
    col_odd = col % 2 == 1
    if row_odd and col_odd:
        return CellKind.WALL
    if row_odd or col_odd:
        return CellKind.CONNECTOR
    return CellKind.MAZE_CELL


# --- Coordinate Mapping ---
def compact_to_expanded(coord: Tuple[int, int]) -> Coord:
    """Maps a room on the compact grid to its cell on the expanded grid."""
    return Coord(coord[0] * 2, coord[1] * 2)


def expanded_to_compact(coord: Tuple[int, int]) -> Coord:
    """Inverse of compact_to_expanded. Only defined for room (even/even) cells."""
    row, col = coord
    if row % 2 or col % 2:
        raise ValueError(f"Expanded cell {tuple(coord)} is not a maze room.")
    return Coord(row // 2, col // 2)


def connector_between(edge: Edge) -> Coord:
    """
    Returns the expanded-grid connector cell lying between the two rooms of an
    edge. Raises MazeConsistencyError unless the rooms are axis-aligned and
    exactly two expanded cells apart.
    """
    node1 = compact_to_expanded(edge[0])
    node2 = compact_to_expanded(edge[1])
    d_row = node2.row - node1.row
    d_col = node2.col - node1.col

    if d_row == 0 and abs(d_col) == 2:  # Horizontal edge
        return Coord(node1.row, min(node1.col, node2.col) + 1)
    if abs(d_row) == 2 and d_col == 0:  # Vertical edge
        return Coord(min(node1.row, node2.row) + 1, node1.col)
    raise MazeConsistencyError(
        f"Invalid edge {edge[0]} -> {edge[1]}: rooms are not adjacent."
    )


class ExpandedGrid:
    """
    The physical grid a compact maze is laid out on. Below is an empty
    3 x 3 maze on a 5 x 5 grid ('O' rooms, '-' connectors, 'X' walls):

        O   -   O   -   O
        -   X   -   X   -
        O   -   O   -   O
        -   X   -   X   -
        O   -   O   -   O

    Carving a maze turns every connector that is not backed by an edge into
    a wall, so only passages of the spanning tree remain.
    """

    def __init__(self, rows: int = const.GRID_ROWS, cols: int = const.GRID_COLUMNS):
        if rows <= 0 or cols <= 0:
            raise ValueError("Grid dimensions must be positive.")
        self.rows = rows
        self.cols = cols
        self.kinds = np.zeros((rows, cols), dtype=np.int8)
        for r in range(rows):
            for c in range(cols):
                self.kinds[r, c] = classify_cell(r, c)
        self.carved = False

    def carve(self, edges: Iterable[Edge]) -> None:
        """Closes every connector that no maze edge passes through."""
        passages: Set[Coord] = set()
        for edge in edges:
            connector = connector_between(edge)
            if not self.in_bounds(*connector):
                raise MazeConsistencyError(
                    f"Edge {edge[0]} -> {edge[1]} leaves the {self.rows}x{self.cols} grid."
                )
            passages.add(connector)

        closed = 0
        for connector in self.connector_cells():
            if connector not in passages:
                self.kinds[connector.row, connector.col] = CellKind.WALL
                closed += 1
        self.carved = True
        logger.debug(
            "  Carved grid: %d passages kept, %d connectors closed.",
            len(passages),
            closed,
        )

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell_kind(self, row: int, col: int) -> CellKind:
        """Kind of the cell at (row, col); anything off the grid reads as a wall."""
        if not self.in_bounds(row, col):
            return CellKind.WALL
        return CellKind(int(self.kinds[row, col]))

    def connector_cells(self) -> Iterator[Coord]:
        """Yields every cell currently classified as a connector."""
        rows, cols = np.nonzero(self.kinds == CellKind.CONNECTOR)
        for r, c in zip(rows.tolist(), cols.tolist()):
            yield Coord(r, c)

    def room_cells(self) -> List[Coord]:
        return [
            Coord(r, c)
            for r in range(0, self.rows, 2)
            for c in range(0, self.cols, 2)
        ]

    def __repr__(self) -> str:
        return f"ExpandedGrid({self.rows}x{self.cols}, carved={self.carved})"
