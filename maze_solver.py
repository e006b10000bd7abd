# maze_solver.py
import logging
from typing import Iterator, List, Sequence, Tuple

import numpy as np

# Import from other project modules
import constants as const
from grid_core import Coord, Edge, MazeConsistencyError, compact_to_expanded
from utils import direction_of

logger = logging.getLogger(__name__)

# A grid node never has more than four neighbours
MAX_NEIGHBOURS = 4


def find_adjacent(edges: Sequence[Edge], node: Tuple[int, int]) -> List[Coord]:
    """Returns the nodes joined to node by an edge of the maze."""
    adjacent: List[Coord] = []
    for n1, n2 in edges:
        if n1 == node:
            adjacent.append(Coord(*n2))
        elif n2 == node:
            adjacent.append(Coord(*n1))
        if len(adjacent) == MAX_NEIGHBOURS:
            break
    return adjacent


def solve_maze(
    edges: Sequence[Edge],
    entrance: Tuple[int, int] = const.MAZE_ENTRANCE,
    exit_node: Tuple[int, int] = const.MAZE_EXIT,
    rows: int = const.MAZE_ROWS,
    cols: int = const.MAZE_COLUMNS,
) -> List[Coord]:
    """
    Finds the path from entrance to exit with a depth-first search.

    The search keeps its own stack instead of recursing, so its depth is
    bounded by the number of nodes. Because the maze is a spanning tree, the
    first path found is the only one. Returns an empty list if the exit
    cannot be reached.
    """
    entrance, exit_node = Coord(*entrance), Coord(*exit_node)
    for name, node in (("Entrance", entrance), ("Exit", exit_node)):
        if not (0 <= node.row < rows and 0 <= node.col < cols):
            raise ValueError(f"{name} {node} is outside the {rows}x{cols} maze.")

    logger.info("--- Finding path from %s to %s ---", entrance, exit_node)
    visited = np.zeros((rows, cols), dtype=bool)
    visited[entrance.row, entrance.col] = True

    # path[i] is being expanded by neighbour_stack[i]
    path: List[Coord] = [entrance]
    neighbour_stack: List[Iterator[Coord]] = [iter(find_adjacent(edges, entrance))]

    while path:
        if path[-1] == exit_node:
            logger.info("  Path found! Length: %d nodes.", len(path))
            return list(path)

        next_node = None
        for candidate in neighbour_stack[-1]:
            # Negative indices would silently wrap around the visited array
            if not (0 <= candidate.row < rows and 0 <= candidate.col < cols):
                raise MazeConsistencyError(
                    f"Edge {path[-1]} -> {candidate} leaves the {rows}x{cols} maze."
                )
            if not visited[candidate.row, candidate.col]:
                next_node = candidate
                break

        if next_node is None:
            # Dead end, backtrack
            path.pop()
            neighbour_stack.pop()
            continue

        visited[next_node.row, next_node.col] = True
        path.append(next_node)
        neighbour_stack.append(iter(find_adjacent(edges, next_node)))

    logger.warning("  Path not found from %s to %s!", entrance, exit_node)
    return []


def expand_solution(path: Sequence[Tuple[int, int]]) -> List[Coord]:
    """
    Converts a compact solution path into expanded-grid cells, inserting the
    connector between every pair of consecutive rooms.
    """
    if not path:
        return []

    expanded: List[Coord] = [compact_to_expanded(path[0])]
    for previous, current in zip(path, path[1:]):
        direction = direction_of(previous, current)
        if direction is None:
            raise MazeConsistencyError(
                f"Invalid solution step {tuple(previous)} -> {tuple(current)}."
            )
        connector = compact_to_expanded(previous).offset(direction)
        expanded.append(connector)
        expanded.append(compact_to_expanded(current))
    return expanded
