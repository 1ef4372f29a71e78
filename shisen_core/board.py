from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .errors import PositionOutOfRange

Tile = Optional[str]  # symbol id, or None for an empty cell
Coord = Tuple[int, int]


@dataclass(frozen=True)
class Board:
    """Represents the tile grid, including its dimensions and the row-major cells."""
    width: int
    height: int
    grid: Tuple[Tile, ...]  # row-major, length == width * height

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]]) -> 'Board':
        """Builds a board from a list of equally sized rows."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        flat: List[Tile] = []
        for row in rows:
            if len(row) != width:
                raise ValueError('All rows must have the same length')
            flat.extend(row)
        return cls(width=width, height=height, grid=tuple(flat))

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.width + c

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.height and 0 <= c < self.width

    def check(self, coord: Coord) -> Coord:
        """Returns the coordinate unchanged, raising PositionOutOfRange if it is off the board."""
        r, c = coord
        if not self.in_bounds(r, c):
            raise PositionOutOfRange(coord, self.height, self.width)
        return coord

    def at(self, r: int, c: int) -> Tile:
        """Gets the tile at a given row and column."""
        self.check((r, c))
        return self.grid[self.index(r, c)]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(self.height):
            for c in range(self.width):
                yield (r, c)

    def occupied(self) -> Iterable[Coord]:
        """Iterates over coordinates holding a tile, row-major."""
        for (r, c) in self.coords():
            if self.grid[self.index(r, c)] is not None:
                yield (r, c)

    def rows(self) -> List[List[Tile]]:
        return [list(self.grid[r * self.width:(r + 1) * self.width]) for r in range(self.height)]

    def with_cells(self, updates: Dict[Coord, Tile]) -> 'Board':
        """Returns a copy of the board with the given cells replaced."""
        cells = list(self.grid)
        for coord, tile in updates.items():
            r, c = self.check(coord)
            cells[self.index(r, c)] = tile
        return Board(self.width, self.height, tuple(cells))

    def pretty(self, highlight: Optional[Set[Coord]] = None) -> str:
        """Generates a human-readable string representation of the board."""
        marks = highlight or set()
        cell_w = max([len(t) for t in self.grid if t is not None] + [1]) + 3
        lines: List[str] = []
        for r in range(self.height):
            row: List[str] = []
            for c in range(self.width):
                tile = self.grid[self.index(r, c)]
                text = '.' if tile is None else tile
                if (r, c) in marks:
                    text = f"[{text}]"
                row.append(text.ljust(cell_w))
            lines.append(''.join(row).rstrip())
        return "\n".join(lines)
