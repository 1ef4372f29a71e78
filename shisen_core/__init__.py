"""
Shisen-Sho core Python package.

This package contains the board data structures and pure-logic helpers
behind game.py, split into small modules to keep each piece testable.
Modules:
- board.py: Board, Tile, Coord
- catalog.py: tile symbol set
- deal.py: board generation and the generate-until-playable loop
- connect.py: two-turn path search between tiles
- moves.py: move discovery
- solver.py: solvability search
- mutators.py: pair removal, reshuffle, cleared test
- state.py: GameState
"""
