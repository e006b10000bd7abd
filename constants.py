# --- Perfect Maze (Compact Grid) ---
MAZE_ROWS = 5
MAZE_COLUMNS = 5
MAZE_ENTRANCE = (MAZE_ROWS - 1, 2)  # Bottom middle room
MAZE_EXIT = (0, 2)  # Top middle room

# --- Expanded Grid ---
# Rooms sit on even/even cells, so an N-room row needs 2N - 1 cells
GRID_ROWS = 2 * MAZE_ROWS - 1
GRID_COLUMNS = 2 * MAZE_COLUMNS - 1

# --- Cell Directions (row delta, col delta) ---
DIR_UP = "UP"
DIR_DOWN = "DOWN"
DIR_LEFT = "LEFT"
DIR_RIGHT = "RIGHT"
DIRECTION_DELTAS = {
    DIR_LEFT: (0, -1),
    DIR_RIGHT: (0, 1),
    DIR_UP: (-1, 0),
    DIR_DOWN: (1, 0),
}
# Scan order used when enumerating candidate edges
NEIGHBOUR_ORDER = (DIR_LEFT, DIR_RIGHT, DIR_UP, DIR_DOWN)

# --- Unicursal Corridor ---
CORRIDOR_ROWS = 10
CORRIDOR_COLUMNS = 4
CORRIDOR_START = (0, 0)
CORRIDOR_MOVES = (DIR_LEFT, DIR_RIGHT, DIR_DOWN)  # Never up
MAX_COLLECTIBLES = 9

# --- Win/Loss Detection (world units) ---
OTHER_SIDE_MAX_X = 265.0  # Player x below this is across the canyon...
OTHER_SIDE_MIN_Y = 100.0  # ...provided they are still above this height
FALL_Y = 50.0  # Below this the player has fallen into the canyon

# --- Visualization ---
VIS_WALL_COLOR = "black"
VIS_ROOM_COLOR = "white"
VIS_CONNECTOR_COLOR = "lightgrey"
VIS_SOLUTION_LINE_STYLE = "r-"
VIS_SOLUTION_LINE_LW = 2.0
VIS_SOLUTION_LINE_ALPHA = 0.9
VIS_CORRIDOR_WALL_STYLE = "k-"
VIS_CORRIDOR_WALL_LW = 1.5
VIS_CORRIDOR_PATH_STYLE = "g-"
VIS_CORRIDOR_PATH_LW = 2.0
VIS_CORRIDOR_PATH_ALPHA = 0.7
VIS_COLLECTIBLE_MARKER = "o"
VIS_COLLECTIBLE_COLOR = "orange"
VIS_COLLECTIBLE_SIZE = 8
VIS_ENTRY_MARKER = "go"
VIS_EXIT_MARKER = "ro"
VIS_MARKER_SIZE = 8
VIS_DPI = 150

# --- ASCII Rendering ---
ASCII_ROOM = "O"
ASCII_WALL = "X"
ASCII_CONNECTOR = "-"
ASCII_SEPARATOR = "   "
