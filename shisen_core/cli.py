from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import default_cols, default_max_attempts, default_rows
from .connect import find_connecting_path
from .deal import deal_board, deal_playable_board
from .errors import GenerationFailed, ShisenError
from .moves import find_any_move
from .solver import solve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Shisen-Sho board generator and solver')
    parser.add_argument('--rows', type=int, default=default_rows(), help='Board height')
    parser.add_argument('--cols', type=int, default=default_cols(), help='Board width')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--max-attempts', type=int, default=default_max_attempts(),
                        help='Give up after this many unsolvable deals (default: no limit)')
    parser.add_argument('--raw', action='store_true', help='Skip the solvability check')
    parser.add_argument('--hint', action='store_true', help='Show one legal move and its path')
    parser.add_argument('--solve', action='store_true', help='Print a full clearing sequence')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.raw:
            board = deal_board(args.rows, args.cols, seed=args.seed)
        else:
            board = deal_playable_board(args.rows, args.cols, seed=args.seed, max_attempts=args.max_attempts)
    except (ShisenError, GenerationFailed) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.hint:
        move = find_any_move(board)
        print(board.pretty(set(move) if move else None))
        if move is None:
            print('\nNo legal move: the board is stuck.')
        else:
            print('\nHint:', move[0], '<->', move[1])
            print('Path:', find_connecting_path(board, move[0], move[1]))
    else:
        print(board.pretty())

    if args.solve:
        res = solve(board)
        if not res.solvable:
            print(f"\nNo clearing sequence exists ({res.states_visited} states searched).")
        else:
            print(f"\nClearing sequence ({res.states_visited} states searched):")
            for i, (a, b) in enumerate(res.moves or [], start=1):
                print(f"{i:3d}. {a} <-> {b}")
    return 0
