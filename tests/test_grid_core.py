import unittest

from grid_core import (
    CellKind,
    Coord,
    ExpandedGrid,
    MazeConsistencyError,
    classify_cell,
    compact_to_expanded,
    connector_between,
    expanded_to_compact,
)


class TestCellClassification(unittest.TestCase):

    def test_parity_rules(self):
        self.assertEqual(classify_cell(0, 0), CellKind.MAZE_CELL)
        self.assertEqual(classify_cell(4, 8), CellKind.MAZE_CELL)
        self.assertEqual(classify_cell(0, 1), CellKind.CONNECTOR)
        self.assertEqual(classify_cell(3, 2), CellKind.CONNECTOR)
        self.assertEqual(classify_cell(1, 1), CellKind.WALL)
        self.assertEqual(classify_cell(7, 5), CellKind.WALL)

    def test_fresh_grid_counts(self):
        grid = ExpandedGrid()
        kinds = [grid.get_cell_kind(r, c) for r in range(9) for c in range(9)]
        self.assertEqual(kinds.count(CellKind.MAZE_CELL), 25)
        self.assertEqual(kinds.count(CellKind.CONNECTOR), 40)
        self.assertEqual(kinds.count(CellKind.WALL), 16)

    def test_out_of_bounds_reads_as_wall(self):
        grid = ExpandedGrid()
        self.assertEqual(grid.get_cell_kind(-1, 3), CellKind.WALL)
        self.assertEqual(grid.get_cell_kind(9, 0), CellKind.WALL)
        self.assertEqual(grid.get_cell_kind(0, 9), CellKind.WALL)

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            ExpandedGrid(0, 9)


class TestCoordinateMapping(unittest.TestCase):

    def test_compact_to_expanded(self):
        self.assertEqual(compact_to_expanded((4, 2)), Coord(8, 4))
        self.assertEqual(compact_to_expanded(Coord(0, 0)), Coord(0, 0))

    def test_expansion_round_trip_on_every_room(self):
        for r in range(5):
            for c in range(5):
                self.assertEqual(expanded_to_compact(compact_to_expanded((r, c))), (r, c))

    def test_expanded_to_compact_rejects_non_rooms(self):
        with self.assertRaises(ValueError):
            expanded_to_compact((1, 2))
        with self.assertRaises(ValueError):
            expanded_to_compact((3, 3))

    def test_connector_between_horizontal(self):
        self.assertEqual(connector_between((Coord(0, 0), Coord(0, 1))), Coord(0, 1))
        self.assertEqual(connector_between((Coord(2, 3), Coord(2, 2))), Coord(4, 5))

    def test_connector_between_vertical(self):
        self.assertEqual(connector_between((Coord(1, 0), Coord(0, 0))), Coord(1, 0))
        self.assertEqual(connector_between((Coord(3, 4), Coord(4, 4))), Coord(7, 8))

    def test_connector_between_rejects_invalid_edges(self):
        with self.assertRaises(MazeConsistencyError):
            connector_between((Coord(0, 0), Coord(1, 1)))  # Diagonal
        with self.assertRaises(MazeConsistencyError):
            connector_between((Coord(0, 0), Coord(0, 2)))  # Too far
        with self.assertRaises(MazeConsistencyError):
            connector_between((Coord(2, 2), Coord(2, 2)))  # Same room


class TestCarving(unittest.TestCase):

    def test_carve_keeps_only_edge_connectors(self):
        grid = ExpandedGrid(3, 3)
        grid.carve([(Coord(0, 0), Coord(0, 1)), (Coord(0, 1), Coord(1, 1))])
        self.assertEqual(grid.get_cell_kind(0, 1), CellKind.CONNECTOR)
        self.assertEqual(grid.get_cell_kind(1, 2), CellKind.CONNECTOR)
        self.assertEqual(grid.get_cell_kind(1, 0), CellKind.WALL)
        self.assertEqual(grid.get_cell_kind(2, 1), CellKind.WALL)
        self.assertEqual(grid.get_cell_kind(2, 2), CellKind.MAZE_CELL)
        self.assertTrue(grid.carved)

    def test_carve_rejects_edges_off_the_grid(self):
        grid = ExpandedGrid(3, 3)
        with self.assertRaises(MazeConsistencyError):
            grid.carve([(Coord(1, 1), Coord(1, 2))])

    def test_room_cells(self):
        rooms = ExpandedGrid().room_cells()
        self.assertEqual(len(rooms), 25)
        self.assertTrue(all(r % 2 == 0 and c % 2 == 0 for r, c in rooms))


if __name__ == "__main__":
    unittest.main()
