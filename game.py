from __future__ import annotations

# Facade module that re-exports the Shisen-Sho engine.
# Used by the Flask app, the tools and the tests.
# Single-responsibility modules live under shisen_core/*.

import sys

from shisen_core.board import Board, Coord, Tile  # noqa: F401
from shisen_core.catalog import TILE_SET, catalog_size, get_tiles  # noqa: F401
from shisen_core.connect import can_connect, count_turns, find_connecting_path  # noqa: F401
from shisen_core.deal import deal_board, deal_playable_board  # noqa: F401
from shisen_core.errors import (  # noqa: F401
    GenerationFailed,
    InsufficientSymbols,
    InvalidDimensions,
    PositionOutOfRange,
    ShisenError,
)
from shisen_core.hashkey import board_key  # noqa: F401
from shisen_core.moves import (  # noqa: F401
    Move,
    WeightedMove,
    apply_move,
    find_all_moves,
    find_any_move,
    group_positions,
    legal_partners,
)
from shisen_core.mutators import (  # noqa: F401
    is_cleared,
    remaining_tiles,
    remove_pair,
    shuffle_remaining,
    shuffle_until_playable,
)
from shisen_core.solver import SolveResult, is_solvable, solve  # noqa: F401
from shisen_core.state import GameState  # noqa: F401


def main() -> None:
    # CLI driver delegated to shisen_core.cli
    from shisen_core.cli import main as _main
    sys.exit(_main())


if __name__ == '__main__':
    main()
