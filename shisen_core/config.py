from __future__ import annotations

import os
import sys
from typing import Optional

_TRUTHY = ('1', 'true', 'yes', 'on')

# Default board size matches the classic 8x10 layout (uses all 40 symbols).
DEFAULT_ROWS = 8
DEFAULT_COLS = 10

# Extra reshuffles tried when a shuffle leaves no legal move.
SHUFFLE_ATTEMPTS = 40

# Points per removed pair.
PAIR_SCORE = 10


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def default_rows() -> int:
    return _env_int('SHISEN_ROWS', DEFAULT_ROWS)


def default_cols() -> int:
    return _env_int('SHISEN_COLS', DEFAULT_COLS)


def default_max_attempts() -> Optional[int]:
    """Generation cap from SHISEN_MAX_ATTEMPTS; unset or 0 means retry forever."""
    value = _env_int('SHISEN_MAX_ATTEMPTS', 0)
    return value if value > 0 else None


def debug_enabled() -> bool:
    return os.getenv('SHISEN_DEBUG', '0').lower() in _TRUTHY


def debug_log(tag: str, message: str) -> None:
    """Prints a `[tag] message` trace line to stderr when SHISEN_DEBUG is on."""
    if debug_enabled():
        print(f"[{tag}] {message}", file=sys.stderr)
