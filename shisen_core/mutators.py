from __future__ import annotations

import random
from typing import List, Optional

from .board import Board, Coord
from .config import SHUFFLE_ATTEMPTS, debug_log


def _rng(seed: Optional[int], rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random(seed)


def remove_pair(board: Board, a: Coord, b: Coord) -> Board:
    """Returns a new board with both cells emptied. Does not check that the pair is legal."""
    return board.with_cells({a: None, b: None})


def is_cleared(board: Board) -> bool:
    return all(t is None for t in board.grid)


def remaining_tiles(board: Board) -> int:
    return sum(1 for t in board.grid if t is not None)


def shuffle_remaining(board: Board, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Board:
    """Permutes the remaining tiles among the occupied cells; empty cells stay where they are."""
    r = _rng(seed, rng)
    values: List[str] = [t for t in board.grid if t is not None]
    r.shuffle(values)
    it = iter(values)
    cells = tuple(None if t is None else next(it) for t in board.grid)
    return Board(board.width, board.height, cells)


def shuffle_until_playable(
    board: Board,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    max_attempts: int = SHUFFLE_ATTEMPTS,
) -> Board:
    """
    Shuffles the remaining tiles, reshuffling up to max_attempts more times while
    the result has no legal move. The last candidate is returned either way, so
    callers should still check for a move.
    """
    from .moves import find_any_move

    if is_cleared(board):
        return board
    r = _rng(seed, rng)
    candidate = shuffle_remaining(board, rng=r)
    attempt = 0
    while attempt < max_attempts and find_any_move(candidate) is None:
        candidate = shuffle_remaining(candidate, rng=r)
        attempt += 1
    debug_log('shuffle', f"reshuffles={attempt} remaining={remaining_tiles(candidate)}")
    return candidate
