# maze_gen.py
import logging
import random
from collections import deque
from typing import Dict, List, Sequence, Set

# Import from other project modules
import constants as const
from grid_core import Coord, Edge, MazeConsistencyError
from utils import manhattan_distance

logger = logging.getLogger(__name__)


def _in_bounds(node: Coord, rows: int, cols: int) -> bool:
    return 0 <= node.row < rows and 0 <= node.col < cols


def candidate_edges(
    visited_order: Sequence[Coord], visited: Set[Coord], rows: int, cols: int
) -> List[Edge]:
    """
    Lists every edge from a visited node to an unvisited, grid-adjacent node.
    Visited nodes are scanned in visit order, neighbours left, right, up, down.
    """
    edges: List[Edge] = []
    for node in visited_order:
        for direction in const.NEIGHBOUR_ORDER:
            neighbour = node.offset(direction)
            if _in_bounds(neighbour, rows, cols) and neighbour not in visited:
                edges.append((node, neighbour))
    return edges


def generate_maze(
    rng: random.Random,
    rows: int = const.MAZE_ROWS,
    cols: int = const.MAZE_COLUMNS,
) -> List[Edge]:
    """
    Generates a perfect maze as the edge list of a random spanning tree over
    the rows x cols grid graph, using Prim's algorithm with random instead of
    minimum-weight edge selection.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError("Maze dimensions must be positive.")

    logger.info("--- Starting Maze Generation (Randomized Prim) ---")
    total = rows * cols
    start = Coord(rng.randrange(rows), rng.randrange(cols))
    logger.debug("  Starting maze generation at node: %s", start)

    visited_order: List[Coord] = [start]
    visited: Set[Coord] = {start}
    maze: List[Edge] = []

    while len(visited_order) < total:
        # Recomputed from the current visited set, never empty on a connected grid
        edges = candidate_edges(visited_order, visited, rows, cols)
        edge = rng.choice(edges)
        new_node = edge[1]
        visited_order.append(new_node)
        visited.add(new_node)
        maze.append(edge)

    logger.info(
        "--- Maze Generation Complete: %d edges over %d nodes. ---", len(maze), total
    )
    return maze


def validate_spanning_tree(
    edges: Sequence[Edge],
    rows: int = const.MAZE_ROWS,
    cols: int = const.MAZE_COLUMNS,
) -> None:
    """
    Raises MazeConsistencyError unless the edges form a spanning tree of the
    rows x cols grid: every edge joins adjacent in-bounds nodes, there are
    exactly nodes - 1 edges and every node is reachable.
    """
    total = rows * cols
    if len(edges) != total - 1:
        raise MazeConsistencyError(
            f"Spanning tree over {total} nodes needs {total - 1} edges, got {len(edges)}."
        )

    adjacency: Dict[Coord, List[Coord]] = {}
    for a, b in edges:
        a, b = Coord(*a), Coord(*b)
        if not (_in_bounds(a, rows, cols) and _in_bounds(b, rows, cols)):
            raise MazeConsistencyError(f"Edge {a} -> {b} leaves the grid.")
        if manhattan_distance(a, b) != 1:
            raise MazeConsistencyError(f"Edge {a} -> {b} joins non-adjacent nodes.")
        adjacency.setdefault(a, []).append(b)
        adjacency.setdefault(b, []).append(a)

    # BFS for connectivity; with n - 1 edges, connected implies acyclic
    start = Coord(0, 0)
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency.get(node, []):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)

    if len(seen) != total:
        raise MazeConsistencyError(
            f"Maze is disconnected: reached {len(seen)}/{total} nodes."
        )
