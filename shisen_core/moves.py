from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .board import Board, Coord
from .config import PAIR_SCORE
from .connect import can_connect
from .mutators import remove_pair
from .state import GameState

Move = Tuple[Coord, Coord]
WeightedMove = Tuple[Coord, Coord, int]  # weight = tiles left with that value


def group_positions(board: Board) -> Dict[str, List[Coord]]:
    """Groups the occupied cells by tile value, in row-major order."""
    groups: Dict[str, List[Coord]] = {}
    for (r, c) in board.occupied():
        tile = board.grid[board.index(r, c)]
        groups.setdefault(tile, []).append((r, c))
    return groups


def find_any_move(board: Board) -> Optional[Move]:
    """Returns the first connectable pair found, or None when the board is stuck."""
    for positions in group_positions(board).values():
        for i in range(len(positions)):
            for j in range(i + 1, len(positions)):
                if can_connect(board, positions[i], positions[j]):
                    return positions[i], positions[j]
    return None


def find_all_moves(board: Board) -> List[WeightedMove]:
    """
    Lists every connectable pair together with its weight, sorted by weight.
    Rare values come first so the solver exhausts small branches early.
    """
    moves: List[WeightedMove] = []
    for positions in group_positions(board).values():
        weight = len(positions)
        for i in range(len(positions)):
            for j in range(i + 1, len(positions)):
                if can_connect(board, positions[i], positions[j]):
                    moves.append((positions[i], positions[j], weight))
    moves.sort(key=lambda m: m[2])
    return moves


def legal_partners(board: Board, pos: Coord) -> List[Coord]:
    """Cells that the tile at pos can be matched with right now."""
    tile = board.at(*pos)
    if tile is None:
        return []
    return [other for other in group_positions(board)[tile] if other != pos and can_connect(board, pos, other)]


def apply_move(state: GameState, a: Coord, b: Coord) -> GameState:
    """Removes the pair and bumps the counters. Legality is the caller's job, as with remove_pair."""
    return GameState(
        board=remove_pair(state.board, a, b),
        moves=state.moves + 1,
        score=state.score + PAIR_SCORE,
    )
