from __future__ import annotations

from .board import Board

EMPTY_MARK = '.'


def board_key(board: Board) -> str:
    """Row-major key for a board: cells joined by ',', rows by '|', empty cells as '.'."""
    rows = []
    for r in range(board.height):
        cells = board.grid[r * board.width:(r + 1) * board.width]
        rows.append(','.join(EMPTY_MARK if t is None else t for t in cells))
    return '|'.join(rows)
