import unittest

from game import (
    Board,
    can_connect,
    deal_board,
    deal_playable_board,
    find_any_move,
    is_cleared,
    is_solvable,
    remove_pair,
)


def make_board(rows):
    return Board.from_rows(rows)


class TestShisenBasics(unittest.TestCase):
    def test_given_adjacent_pair_when_connecting_then_true(self):
        board = make_board([
            ['A', 'A'],
            [None, None],
        ])
        self.assertTrue(can_connect(board, (0, 0), (0, 1)))

    def test_given_diagonal_pair_when_connecting_then_l_shaped_path_found(self):
        board = make_board([
            ['A', None],
            [None, 'A'],
        ])
        self.assertTrue(can_connect(board, (0, 0), (1, 1)))

    def test_given_pair_when_removed_then_board_cleared(self):
        board = make_board([
            ['B', 'B'],
            [None, None],
        ])
        nxt = remove_pair(board, (0, 0), (0, 1))
        self.assertEqual(nxt.rows(), [[None, None], [None, None]])
        self.assertTrue(is_cleared(nxt))

    def test_given_vertical_pair_when_finding_move_then_pair_returned(self):
        board = make_board([
            ['C', None],
            ['C', None],
        ])
        self.assertEqual(find_any_move(board), ((0, 0), (1, 0)))

    def test_given_seed_when_dealing_then_every_value_appears_twice(self):
        board = deal_board(4, 6, seed=42)
        counts = {}
        for tile in board.grid:
            counts[tile] = counts.get(tile, 0) + 1
        self.assertEqual(len(board.grid), 24)
        self.assertEqual(len(counts), 12)
        self.assertTrue(all(n == 2 for n in counts.values()))

    def test_given_playable_board_when_checked_again_then_solvable_and_has_move(self):
        board = deal_playable_board(4, 4, seed=7, max_attempts=None)
        self.assertTrue(is_solvable(board))
        self.assertIsNotNone(find_any_move(board))


if __name__ == '__main__':
    unittest.main()
