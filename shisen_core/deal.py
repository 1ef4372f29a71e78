from __future__ import annotations

import random
import time
from typing import List, Optional

from .board import Board, Tile
from .catalog import catalog_size, get_tiles
from .config import debug_log, default_max_attempts
from .errors import GenerationFailed, InsufficientSymbols, InvalidDimensions
from .solver import is_solvable

_UNSET = object()


def _check_dimensions(rows: int, cols: int) -> int:
    if rows < 1 or cols < 1:
        raise InvalidDimensions(f"Board needs at least one row and one column, got {rows}x{cols}.")
    total = rows * cols
    if total % 2 != 0:
        raise InvalidDimensions('Board must have an even number of cells.')
    if total // 2 > catalog_size():
        raise InsufficientSymbols(
            f"Tile set has {catalog_size()} unique tiles; a {rows}x{cols} board needs {total // 2}."
        )
    return total


def deal_board(rows: int, cols: int, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Board:
    """Deals a rows x cols board with each of the first rows*cols/2 symbols placed twice at random."""
    total = _check_dimensions(rows, cols)
    rng = rng if rng is not None else random.Random(seed)
    tiles = get_tiles(total // 2)
    deck: List[Tile] = [t for t in tiles for _ in range(2)]
    rng.shuffle(deck)
    return Board(width=cols, height=rows, grid=tuple(deck))


def deal_playable_board(
    rows: int,
    cols: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    max_attempts=_UNSET,
) -> Board:
    """
    Deals boards until one passes the solvability check.
    max_attempts=None retries forever; a positive cap raises GenerationFailed when
    exhausted. Left unset, the cap comes from SHISEN_MAX_ATTEMPTS.
    """
    _check_dimensions(rows, cols)
    if max_attempts is _UNSET:
        max_attempts = default_max_attempts()
    if max_attempts is not None and max_attempts < 1:
        raise ValueError('max_attempts must be a positive integer or None')
    rng = rng if rng is not None else random.Random(seed)

    attempt = 0
    t0 = time.time()
    while max_attempts is None or attempt < max_attempts:
        attempt += 1
        board = deal_board(rows, cols, rng=rng)
        if is_solvable(board, {}):
            took = int((time.time() - t0) * 1000)
            debug_log('gen', f"{rows}x{cols} solvable after {attempt} attempt(s) in {took}ms")
            return board
        debug_log('gen', f"{rows}x{cols} attempt {attempt} unsolvable, redealing")
    raise GenerationFailed(f"No solvable {rows}x{cols} board found in {max_attempts} attempts.")
