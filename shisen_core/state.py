from __future__ import annotations

from dataclasses import dataclass

from .board import Board
from .mutators import remaining_tiles


@dataclass(frozen=True)
class GameState:
    """Represents a game in progress: the board plus the move and score counters."""
    board: Board
    moves: int = 0
    score: int = 0

    def remaining(self) -> int:
        return remaining_tiles(self.board)

    def status(self) -> str:
        """'won' when cleared, 'stuck' when no pair can be removed, otherwise 'playing'."""
        # Local import: moves imports this module.
        from .moves import find_any_move
        if self.remaining() == 0:
            return 'won'
        return 'playing' if find_any_move(self.board) is not None else 'stuck'

    def with_board(self, board: Board) -> 'GameState':
        return GameState(board, self.moves, self.score)
