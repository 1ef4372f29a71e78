from __future__ import annotations

from typing import List, Tuple

from .errors import InsufficientSymbols

# Order matters: boards always draw the first N symbols.
TILE_SET: Tuple[str, ...] = (
    'white-dragon',
    'green-dragon',
    'red-dragon',
    'east-wind',
    'south-wind',
    'west-wind',
    'north-wind',
    'characters-1',
    'characters-2',
    'characters-3',
    'characters-4',
    'characters-5',
    'characters-6',
    'characters-7',
    'characters-8',
    'characters-9',
    'circles-1',
    'circles-2',
    'circles-3',
    'circles-4',
    'circles-5',
    'circles-6',
    'circles-7',
    'circles-8',
    'circles-9',
    'bamboos-1',
    'bamboos-2',
    'bamboos-3',
    'bamboos-4',
    'bamboos-5',
    'bamboos-6',
    'bamboos-7',
    'bamboos-8',
    'bamboos-9',
    'spring',
    'summer',
    'autumn',
    'winter',
    'plum',
    'orchid',
)


def catalog_size() -> int:
    return len(TILE_SET)


def get_tiles(count: int) -> List[str]:
    """Returns the first `count` distinct symbols of the tile set."""
    if count > len(TILE_SET):
        raise InsufficientSymbols(f"Tile set has {len(TILE_SET)} unique tiles; need {count}.")
    return list(TILE_SET[:count])
