import random
import unittest

from game import (
    Board,
    IndexOutOfRange,
    InvalidDimensions,
    SquareWalls,
    Wall,
)


def _recount(board):
    # Oracle independent of the board's own bookkeeping
    return {cell: board.get_cell_walls(*cell).set_count() for cell in board.cells()}


def _counts(board):
    return {cell: board.get_cell_wall_count(*cell) for cell in board.cells()}


class TestBoardConstruction(unittest.TestCase):
    def test_given_too_few_dots_when_constructing_then_invalid_dimensions(self):
        for cols, rows in [(1, 2), (2, 1), (0, 5), (5, 0), (-1, -1)]:
            with self.assertRaises(InvalidDimensions):
                Board(cols, rows)
        # InvalidDimensions is still a ValueError for callers that catch broadly
        with self.assertRaises(ValueError):
            Board(1, 1)

    def test_given_new_board_when_inspecting_then_all_edges_unset_and_counts_zero(self):
        board = Board(4, 3)
        self.assertEqual(board.column_count, 4)
        self.assertEqual(board.row_count, 3)
        edges = list(board.edges())
        # 4 columns x 2 vertical edges + 3 x 3 horizontal edges
        self.assertEqual(len(edges), 4 * 2 + 3 * 3)
        self.assertTrue(all(not w.is_set for w in edges))
        self.assertEqual(list(board.cells()), [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)])
        self.assertTrue(all(n == 0 for n in _counts(board).values()))
        self.assertFalse(board.is_full())


class TestEdges(unittest.TestCase):
    def test_given_edge_when_set_then_snapshot_reflects_state_and_is_not_live(self):
        board = Board(3, 3)
        before = board.get_edge(True, 1, 0)
        board.set_edge(True, 1, 0, True)
        after = board.get_edge(True, 1, 0)
        self.assertFalse(before.is_set)
        self.assertTrue(after.is_set)
        self.assertEqual((after.is_vertical, after.column, after.row), (True, 1, 0))

    def test_given_inner_vertical_edge_when_set_then_both_neighbours_updated(self):
        board = Board(3, 3)
        board.set_edge(True, 1, 0, True)
        self.assertEqual(board.get_cell_wall_count(0, 0), 1)
        self.assertEqual(board.get_cell_wall_count(1, 0), 1)
        self.assertEqual(board.get_cell_wall_count(0, 1), 0)
        self.assertEqual(board.get_cell_wall_count(1, 1), 0)

    def test_given_boundary_edges_when_set_then_only_one_cell_updated(self):
        board = Board(3, 3)
        board.set_edge(True, 0, 1, True)   # left boundary
        board.set_edge(True, 2, 0, True)   # right boundary
        board.set_edge(False, 1, 0, True)  # top boundary
        board.set_edge(False, 0, 2, True)  # bottom boundary
        self.assertEqual(_counts(board), {(0, 0): 0, (0, 1): 2, (1, 0): 2, (1, 1): 0})

    def test_given_inner_horizontal_edge_when_set_then_cells_above_and_below_updated(self):
        board = Board(3, 3)
        board.set_edge(False, 0, 1, True)
        self.assertEqual(board.adjacent_cells(False, 0, 1), [(0, 0), (0, 1)])
        self.assertEqual(board.get_cell_wall_count(0, 0), 1)
        self.assertEqual(board.get_cell_wall_count(0, 1), 1)

    def test_given_edge_when_set_to_current_value_then_counts_unchanged(self):
        board = Board(3, 3)
        board.set_edge(True, 1, 1, True)
        snapshot = _counts(board)
        board.set_edge(True, 1, 1, True)
        board.set_edge(True, 1, 1, True)
        self.assertEqual(_counts(board), snapshot)
        board.set_edge(False, 0, 0, False)
        self.assertEqual(_counts(board), snapshot)
        self.assertTrue(board.counts_consistent())

    def test_given_edge_when_set_then_cleared_then_counts_restored(self):
        board = Board(4, 4)
        board.set_edge(False, 1, 1, True)
        snapshot = _counts(board)
        board.set_edge(True, 2, 1, True)
        board.set_edge(True, 2, 1, False)
        self.assertEqual(_counts(board), snapshot)

    def test_given_wall_when_set_wall_then_its_own_state_is_ignored(self):
        board = Board(3, 3)
        stale = Wall(True, 1, 1, is_set=True)
        board.set_wall(stale, False)
        self.assertFalse(board.get_edge(True, 1, 1).is_set)
        board.set_wall(Wall(True, 1, 1, is_set=False), True)
        self.assertTrue(board.get_edge(True, 1, 1).is_set)

    def test_given_edge_when_toggled_twice_then_returns_new_state_and_restores(self):
        board = Board(3, 3)
        w1 = board.toggle_edge(False, 1, 1)
        self.assertTrue(w1.is_set)
        self.assertEqual(board.get_cell_wall_count(1, 0), 1)
        w2 = board.toggle_edge(False, 1, 1)
        self.assertFalse(w2.is_set)
        self.assertEqual(board.get_cell_wall_count(1, 0), 0)

    def test_given_random_toggles_when_checking_counts_then_match_full_recount(self):
        rng = random.Random(1234)
        board = Board(5, 4)
        locations = [w.key for w in board.edges()]
        for _ in range(400):
            v, c, r = rng.choice(locations)
            board.set_edge(v, c, r, rng.random() < 0.6)
            self.assertEqual(_counts(board), _recount(board))
            self.assertTrue(board.counts_consistent())
            self.assertTrue(all(0 <= n <= 4 for n in _counts(board).values()))

    def test_given_counts_when_recomputed_then_unchanged(self):
        board = Board(4, 4)
        for v, c, r in [(True, 0, 0), (False, 0, 0), (False, 0, 1), (True, 3, 2), (False, 2, 3)]:
            board.set_edge(v, c, r, True)
        before = _counts(board)
        board.recompute_all_counts()
        self.assertEqual(_counts(board), before)
        self.assertEqual(board.get_cell_wall_count(0, 0), 3)

    def test_given_every_edge_set_when_checking_then_full_and_all_counts_four(self):
        board = Board(3, 4)
        for w in list(board.edges()):
            board.set_wall(w, True)
        self.assertTrue(board.is_full())
        self.assertEqual(board.unset_edges(), [])
        self.assertTrue(all(n == 4 for n in _counts(board).values()))


class TestBounds(unittest.TestCase):
    def setUp(self):
        # 4 x 3 dots: vertical edges c in [0,3], r in [0,1];
        # horizontal edges c in [0,2], r in [0,2]; cells c in [0,2], r in [0,1].
        self.board = Board(4, 3)

    def test_given_vertical_family_when_one_past_bounds_then_index_out_of_range(self):
        for c, r in [(-1, 0), (4, 0), (0, -1), (0, 2)]:
            with self.assertRaises(IndexOutOfRange):
                self.board.get_edge(True, c, r)
            with self.assertRaises(IndexOutOfRange):
                self.board.set_edge(True, c, r, True)
        self.assertFalse(self.board.get_edge(True, 3, 1).is_set)
        self.board.set_edge(True, 3, 1, True)

    def test_given_horizontal_family_when_one_past_bounds_then_index_out_of_range(self):
        for c, r in [(-1, 0), (3, 0), (0, -1), (0, 3)]:
            with self.assertRaises(IndexOutOfRange):
                self.board.get_edge(False, c, r)
            with self.assertRaises(IndexOutOfRange):
                self.board.set_edge(False, c, r, True)
        self.assertFalse(self.board.get_edge(False, 2, 2).is_set)
        self.board.set_edge(False, 2, 2, True)

    def test_given_cells_when_one_past_bounds_then_index_out_of_range(self):
        for c, r in [(-1, 0), (3, 0), (0, -1), (0, 2)]:
            with self.assertRaises(IndexOutOfRange):
                self.board.get_cell_wall_count(c, r)
            with self.assertRaises(IndexOutOfRange):
                self.board.get_cell_walls(c, r)
        self.assertEqual(self.board.get_cell_wall_count(2, 1), 0)

    def test_given_failed_set_when_checking_counts_then_board_untouched(self):
        with self.assertRaises(IndexError):
            self.board.set_edge(False, 3, 0, True)
        self.assertTrue(all(n == 0 for n in _counts(self.board).values()))


class TestCellWalls(unittest.TestCase):
    def test_given_cell_when_getting_walls_then_positions_match_layout(self):
        board = Board(4, 3)
        sq = board.get_cell_walls(1, 1)
        self.assertEqual(sq.top.key, (False, 1, 1))
        self.assertEqual(sq.right.key, (True, 2, 1))
        self.assertEqual(sq.bottom.key, (False, 1, 2))
        self.assertEqual(sq.left.key, (True, 1, 1))

    def test_given_partially_walled_cell_when_querying_by_state_then_ordered_top_right_bottom_left(self):
        board = Board(3, 3)
        board.set_edge(True, 1, 0, True)   # right of (0,0)
        board.set_edge(True, 0, 0, True)   # left of (0,0)
        sq = board.get_cell_walls(0, 0)
        self.assertIsInstance(sq, SquareWalls)
        self.assertEqual([w.key for w in sq.walls(True)], [(True, 1, 0), (True, 0, 0)])
        self.assertEqual([w.key for w in sq.walls(False)], [(False, 0, 0), (False, 0, 1)])
        self.assertEqual(sq.first_wall(True).key, (True, 1, 0))
        self.assertEqual(sq.first_wall(False).key, (False, 0, 0))
        self.assertEqual(sq.set_count(), 2)

    def test_given_complete_cell_when_asking_first_unset_then_none(self):
        board = Board(2, 2)
        for w in list(board.edges()):
            board.set_wall(w, True)
        self.assertIsNone(board.get_cell_walls(0, 0).first_wall(False))
        self.assertEqual(len(board.get_cell_walls(0, 0).walls(True)), 4)


class TestWallIdentity(unittest.TestCase):
    def test_given_same_location_different_state_when_comparing_then_equal(self):
        a = Wall(True, 1, 2, is_set=True)
        b = Wall(True, 1, 2, is_set=False)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)
        self.assertNotEqual(a, Wall(False, 1, 2))
        self.assertEqual(a.key, (True, 1, 2))
        self.assertEqual(a.label(), 'v:1:2')
        self.assertEqual(Wall(False, 0, 3).label(), 'h:0:3')
        self.assertTrue(b.with_state(True).is_set)


class TestCopyAndPretty(unittest.TestCase):
    def test_given_copy_when_mutated_then_original_untouched(self):
        board = Board(3, 3)
        board.set_edge(True, 1, 0, True)
        clone = board.copy()
        clone.set_edge(False, 0, 0, True)
        clone.set_edge(True, 1, 0, False)
        self.assertTrue(board.get_edge(True, 1, 0).is_set)
        self.assertFalse(board.get_edge(False, 0, 0).is_set)
        self.assertEqual(board.get_cell_wall_count(0, 0), 1)
        self.assertEqual(clone.get_cell_wall_count(0, 0), 1)
        self.assertTrue(clone.counts_consistent())

    def test_given_board_when_pretty_then_edges_highlights_and_counts_rendered(self):
        board = Board(3, 2)
        board.set_edge(False, 0, 0, True)
        board.set_edge(False, 0, 1, True)
        board.set_edge(True, 1, 0, True)
        txt = board.pretty([Wall(True, 0, 0)])
        lines = txt.split("\n")
        self.assertEqual(len(lines), 3)
        self.assertEqual(lines[0], '+---+   +')
        self.assertEqual(lines[1], '* 3 |    ')
        self.assertEqual(lines[2], '+---+   +')
        self.assertNotIn('*', board.pretty())


if __name__ == '__main__':
    unittest.main(verbosity=2)
