# visualization.py
import logging
from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import matplotlib.colors as mcolors

# Import from other project modules
import constants as const
from geometry import extract_corridor_walls, wall_segment
from grid_core import CellKind, Coord, ExpandedGrid, compact_to_expanded

logger = logging.getLogger(__name__)

_ASCII_SYMBOLS = {
    CellKind.WALL: const.ASCII_WALL,
    CellKind.MAZE_CELL: const.ASCII_ROOM,
    CellKind.CONNECTOR: const.ASCII_CONNECTOR,
}


def render_ascii(grid: ExpandedGrid) -> str:
    """
    Renders the grid as text, one row per line, using 'O' for rooms, '-' for
    connectors and 'X' for walls.
    """
    lines = []
    for r in range(grid.rows):
        symbols = [_ASCII_SYMBOLS[grid.get_cell_kind(r, c)] for c in range(grid.cols)]
        lines.append(const.ASCII_SEPARATOR.join(symbols))
    return "\n".join(lines)


def render_path(path: Sequence[Tuple[int, int]]) -> str:
    return " -> ".join(f"({r},{c})" for r, c in path)


# --- Visualization Helpers ---
def _setup_grid_plot(rows: int, cols: int, title: str) -> Tuple[plt.Figure, plt.Axes]:
    """Creates an axis with row 0 at the top, matching grid indexing."""
    fig, ax = plt.subplots(figsize=(max(4, cols), max(4, rows)))
    ax.set_xlim(-0.5, cols - 0.5)
    ax.set_ylim(rows - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title)
    return fig, ax


def _save(fig: plt.Figure, filename: str):
    fig.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    plt.close(fig)
    logger.info("  Visualization saved to %s", filename)


def _draw_entry_exit(ax: plt.Axes, entry: Tuple[float, float], exit_point: Tuple[float, float]):
    """Marks entry and exit, given as (x, y) plot coordinates."""
    ax.plot(*entry, const.VIS_ENTRY_MARKER, markersize=const.VIS_MARKER_SIZE, label="Entry")
    ax.plot(*exit_point, const.VIS_EXIT_MARKER, markersize=const.VIS_MARKER_SIZE, label="Exit")


# --- Main Visualization Functions ---
def visualize_maze_grid(
    grid: ExpandedGrid,
    solution: Optional[Sequence[Coord]] = None,
    destroyed: Sequence[Coord] = (),
    filename: str = "maze_grid.png",
):
    """Draws the expanded grid, the expanded solution and any destroyed floors."""
    logger.info("--- Generating Maze Grid Visualization: %s ---", filename)
    fig, ax = _setup_grid_plot(grid.rows, grid.cols, "Maze Grid")

    cmap = mcolors.ListedColormap(
        [const.VIS_WALL_COLOR, const.VIS_ROOM_COLOR, const.VIS_CONNECTOR_COLOR]
    )
    norm = mcolors.BoundaryNorm([-0.5, 0.5, 1.5, 2.5], cmap.N)
    ax.imshow(grid.kinds, cmap=cmap, norm=norm)

    if solution:
        ax.plot(
            [cell.col for cell in solution],
            [cell.row for cell in solution],
            const.VIS_SOLUTION_LINE_STYLE,
            lw=const.VIS_SOLUTION_LINE_LW,
            alpha=const.VIS_SOLUTION_LINE_ALPHA,
        )
        ax.set_title(f"Maze Solution ({len(solution)} cells)")

    for cell in destroyed:
        ax.plot(cell.col, cell.row, "bx", markersize=const.VIS_MARKER_SIZE)

    entry = compact_to_expanded(const.MAZE_ENTRANCE)
    exit_cell = compact_to_expanded(const.MAZE_EXIT)
    _draw_entry_exit(ax, (entry.col, entry.row), (exit_cell.col, exit_cell.row))
    _save(fig, filename)


def visualize_corridor(
    path: Sequence[Coord],
    collectibles: Sequence[Coord] = (),
    rows: int = const.CORRIDOR_ROWS,
    cols: int = const.CORRIDOR_COLUMNS,
    filename: str = "corridor.png",
):
    """Draws the corridor walls left standing, the walked path and collectibles."""
    logger.info("--- Generating Corridor Visualization: %s ---", filename)
    fig, ax = _setup_grid_plot(rows, cols, f"Unicursal Corridor ({len(path)} cells)")

    # Walls are drawn on cell borders, cells are centred on integer coordinates
    walls = extract_corridor_walls(path, rows, cols)
    for wall in walls:
        (x1, y1), (x2, y2) = wall_segment(wall)
        ax.plot(
            [x1 - 0.5, x2 - 0.5],
            [y1 - 0.5, y2 - 0.5],
            const.VIS_CORRIDOR_WALL_STYLE,
            lw=const.VIS_CORRIDOR_WALL_LW,
        )

    if path:
        ax.plot(
            [cell.col for cell in path],
            [cell.row for cell in path],
            const.VIS_CORRIDOR_PATH_STYLE,
            lw=const.VIS_CORRIDOR_PATH_LW,
            alpha=const.VIS_CORRIDOR_PATH_ALPHA,
        )
        # The corridor is entered at its last cell and left at its first
        _draw_entry_exit(ax, (path[-1].col, path[-1].row), (path[0].col, path[0].row))

    for cell in collectibles:
        ax.plot(
            cell.col,
            cell.row,
            const.VIS_COLLECTIBLE_MARKER,
            color=const.VIS_COLLECTIBLE_COLOR,
            markersize=const.VIS_COLLECTIBLE_SIZE,
        )
    _save(fig, filename)

