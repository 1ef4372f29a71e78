from __future__ import annotations

from typing import Tuple


class ShisenError(ValueError):
    """Base class for errors raised by the board engine."""


class InvalidDimensions(ShisenError):
    """Board dimensions are not positive or give an odd number of cells."""


class InsufficientSymbols(ShisenError):
    """The tile set is too small to fill the requested board with pairs."""


class PositionOutOfRange(ShisenError, IndexError):
    """A coordinate falls outside the board."""

    def __init__(self, coord: Tuple[int, int], height: int, width: int) -> None:
        super().__init__(f"Position {coord} is outside a {height}x{width} board")
        self.coord = coord


class GenerationFailed(RuntimeError):
    """No solvable board was found within the allowed number of attempts."""
