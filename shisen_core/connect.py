from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

from .board import Board, Coord

MAX_TURNS = 2

# (d_row, d_col) per direction index.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
)

# (padded_row, padded_col, direction)
_State = Tuple[int, int, int]


def _blocked_mask(board: Board, start: Coord, end: Coord) -> List[List[bool]]:
    """Occupancy over the board padded with a one-cell empty margin; endpoints are left open."""
    rows = board.height + 2
    cols = board.width + 2
    blocked = [[False] * cols for _ in range(rows)]
    for (r, c) in board.occupied():
        blocked[r + 1][c + 1] = True
    blocked[start[0]][start[1]] = False
    blocked[end[0]][end[1]] = False
    return blocked


def _search(board: Board, a: Coord, b: Coord) -> Optional[Tuple[_State, Dict[_State, Optional[_State]]]]:
    """
    Minimum-turn search from a to b over (cell, direction) states.
    Returns the state in which b was reached plus the parent links, or None.
    """
    board.check(a)
    board.check(b)
    if a == b:
        return None
    value_a = board.at(*a)
    value_b = board.at(*b)
    if value_a is None or value_b is None or value_a != value_b:
        return None

    rows = board.height + 2
    cols = board.width + 2
    start = (a[0] + 1, a[1] + 1)
    end = (b[0] + 1, b[1] + 1)
    blocked = _blocked_mask(board, start, end)

    inf = MAX_TURNS + 1
    best = [[[inf] * len(DIRECTIONS) for _ in range(cols)] for _ in range(rows)]
    parent: Dict[_State, Optional[_State]] = {}
    # 0-1 BFS: straight steps go to the front, turns to the back, so states
    # leave the queue in non-decreasing turn order.
    queue: Deque[Tuple[int, int, int, int]] = deque()

    for d, (dr, dc) in enumerate(DIRECTIONS):
        nr, nc = start[0] + dr, start[1] + dc
        if not (0 <= nr < rows and 0 <= nc < cols):
            continue
        if blocked[nr][nc]:
            continue
        best[nr][nc][d] = 0
        parent[(nr, nc, d)] = None
        queue.append((nr, nc, d, 0))

    while queue:
        r, c, d, turns = queue.popleft()
        if turns > best[r][c][d]:
            continue  # stale entry, a cheaper copy was already expanded
        if (r, c) == end:
            return (r, c, d), parent

        for nd, (dr, dc) in enumerate(DIRECTIONS):
            nr, nc = r + dr, c + dc
            nturns = turns + (0 if nd == d else 1)
            if nturns > MAX_TURNS or not (0 <= nr < rows and 0 <= nc < cols):
                continue
            if blocked[nr][nc]:
                continue
            if best[nr][nc][nd] <= nturns:
                continue
            best[nr][nc][nd] = nturns
            parent[(nr, nc, nd)] = (r, c, d)
            if nturns == turns:
                queue.appendleft((nr, nc, nd, nturns))
            else:
                queue.append((nr, nc, nd, nturns))

    return None


def can_connect(board: Board, a: Coord, b: Coord) -> bool:
    """True if a and b hold the same tile and are joined by a path with at most two turns."""
    return _search(board, a, b) is not None


def find_connecting_path(board: Board, a: Coord, b: Coord) -> Optional[List[Coord]]:
    """
    Finds one minimum-turn connecting path from a to b, endpoints included.
    Cells in the outer margin show up with row/col -1 or height/width.
    """
    found = _search(board, a, b)
    if found is None:
        return None
    state, parent = found
    cells: List[Coord] = []
    cur: Optional[_State] = state
    while cur is not None:
        cells.append((cur[0] - 1, cur[1] - 1))
        cur = parent[cur]
    cells.append(a)
    cells.reverse()
    return cells


def count_turns(path: List[Coord]) -> int:
    """Counts the direction changes along a path of orthogonally adjacent cells."""
    turns = 0
    prev_dir: Optional[Coord] = None
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        step = (r2 - r1, c2 - c1)
        if prev_dir is not None and step != prev_dir:
            turns += 1
        prev_dir = step
    return turns
