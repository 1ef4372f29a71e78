from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .board import Board
from .hashkey import board_key
from .moves import Move, find_all_moves
from .mutators import is_cleared, remove_pair


@dataclass
class SolveResult:
    """Result of a full solvability search."""
    solvable: bool
    moves: Optional[List[Move]]  # one clearing sequence when solvable
    states_visited: int


def is_solvable(board: Board, memo: Optional[Dict[str, bool]] = None) -> bool:
    """
    Backtracking check that some sequence of moves clears the board.
    Moves are tried in weight order; outcomes are cached per board key in `memo`,
    which is fresh for each call unless the caller passes one in.
    """
    table: Dict[str, bool] = {} if memo is None else memo

    def dfs(current: Board) -> bool:
        if is_cleared(current):
            return True
        key = board_key(current)
        cached = table.get(key)
        if cached is not None:
            return cached
        for a, b, _weight in find_all_moves(current):
            if dfs(remove_pair(current, a, b)):
                table[key] = True
                return True
        table[key] = False
        return False

    return dfs(board)


def solve(board: Board, memo: Optional[Dict[str, bool]] = None) -> SolveResult:
    """Like is_solvable, but also returns one clearing sequence of moves."""
    table: Dict[str, bool] = {} if memo is None else memo
    path: List[Move] = []
    visited = 0

    def dfs(current: Board) -> bool:
        nonlocal visited
        if is_cleared(current):
            return True
        key = board_key(current)
        # Only dead ends are reused; a cached success carries no move sequence.
        if table.get(key) is False:
            return False
        visited += 1
        for a, b, _weight in find_all_moves(current):
            path.append((a, b))
            if dfs(remove_pair(current, a, b)):
                table[key] = True
                return True
            path.pop()
        table[key] = False
        return False

    if dfs(board):
        return SolveResult(solvable=True, moves=list(path), states_visited=visited)
    return SolveResult(solvable=False, moves=None, states_visited=visited)
