import os
import random
import unittest
from collections import Counter
from unittest import mock

from game import (
    GenerationFailed,
    InsufficientSymbols,
    InvalidDimensions,
    TILE_SET,
    deal_board,
    deal_playable_board,
    is_solvable,
)


class TestDeal(unittest.TestCase):
    def test_given_dimensions_when_dealing_then_first_symbols_paired(self):
        board = deal_board(4, 5, seed=1)
        self.assertEqual((board.height, board.width), (4, 5))
        counts = Counter(board.grid)
        self.assertEqual(set(counts), set(TILE_SET[:10]))
        self.assertTrue(all(n == 2 for n in counts.values()))

    def test_given_largest_board_when_dealing_then_whole_catalog_used(self):
        board = deal_board(8, 10, seed=2)
        self.assertEqual(set(board.grid), set(TILE_SET))

    def test_given_odd_cell_count_when_dealing_then_invalid_dimensions(self):
        with self.assertRaises(InvalidDimensions):
            deal_board(3, 3)
        with self.assertRaises(InvalidDimensions):
            deal_playable_board(1, 5)

    def test_given_non_positive_size_when_dealing_then_invalid_dimensions(self):
        with self.assertRaises(InvalidDimensions):
            deal_board(0, 4)
        with self.assertRaises(InvalidDimensions):
            deal_board(2, -2)

    def test_given_board_larger_than_catalog_when_dealing_then_insufficient_symbols(self):
        with self.assertRaises(InsufficientSymbols):
            deal_board(9, 10)
        with self.assertRaises(InsufficientSymbols):
            deal_playable_board(10, 10)

    def test_given_same_seed_or_rng_when_dealing_then_same_board(self):
        self.assertEqual(deal_board(4, 4, seed=99), deal_board(4, 4, seed=99))
        self.assertEqual(
            deal_board(4, 4, rng=random.Random(99)),
            deal_board(4, 4, rng=random.Random(99)),
        )

    def test_given_seed_when_dealing_playable_then_board_solvable_and_reproducible(self):
        b1 = deal_playable_board(4, 4, seed=11, max_attempts=None)
        b2 = deal_playable_board(4, 4, seed=11, max_attempts=None)
        self.assertEqual(b1, b2)
        self.assertTrue(is_solvable(b1))

    def test_given_attempt_cap_when_every_deal_unsolvable_then_generation_failed(self):
        with mock.patch('shisen_core.deal.is_solvable', return_value=False) as fake:
            with self.assertRaises(GenerationFailed):
                deal_playable_board(2, 2, seed=0, max_attempts=2)
        self.assertEqual(fake.call_count, 2)

    def test_given_env_cap_when_attempts_unspecified_then_env_value_used(self):
        with mock.patch.dict(os.environ, {'SHISEN_MAX_ATTEMPTS': '3'}):
            with mock.patch('shisen_core.deal.is_solvable', return_value=False) as fake:
                with self.assertRaises(GenerationFailed):
                    deal_playable_board(2, 2, seed=0)
        self.assertEqual(fake.call_count, 3)

    def test_given_non_positive_cap_when_dealing_playable_then_value_error(self):
        with self.assertRaises(ValueError):
            deal_playable_board(2, 2, max_attempts=0)

    def test_given_fresh_memo_per_attempt_when_dealing_playable_then_memo_not_shared(self):
        seen = []

        def _record(board, memo=None):
            seen.append(memo)
            return len(seen) == 2

        with mock.patch('shisen_core.deal.is_solvable', side_effect=_record):
            deal_playable_board(2, 2, seed=0, max_attempts=5)
        self.assertEqual(len(seen), 2)
        self.assertIsNot(seen[0], seen[1])


if __name__ == '__main__':
    unittest.main(verbosity=2)
