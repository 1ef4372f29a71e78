import argparse
import random
import time
from typing import Tuple
import sys
sys.path.append('.')
import game  # type: ignore


def time_one(rows: int, cols: int, seed: int) -> Tuple[int, int, int]:
    """Returns (attempts, states searched on the accepted board, elapsed ms) for one seed."""
    rng = random.Random(seed)
    attempts = 0
    t0 = time.time()
    while True:
        attempts += 1
        board = game.deal_board(rows, cols, rng=rng)
        res = game.solve(board)
        if res.solvable:
            break
    took = int((time.time() - t0) * 1000)
    return attempts, res.states_visited, took


def main():
    parser = argparse.ArgumentParser(description='Time generate-until-solvable across seeds')
    parser.add_argument('--rows', type=int, default=8)
    parser.add_argument('--cols', type=int, default=10)
    parser.add_argument('--count', type=int, default=10)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    random.seed(args.seed)
    total_ms = 0
    worst = 0
    for _ in range(args.count):
        seed = random.randrange(1_000_000)
        attempts, states, ms = time_one(args.rows, args.cols, seed)
        total_ms += ms
        worst = max(worst, attempts)
        print(f"seed={seed} attempts={attempts} states={states} ({ms}ms)")
    print(f"{args.rows}x{args.cols}: {args.count} boards, avg {total_ms // max(args.count, 1)}ms, worst attempts={worst}")


if __name__ == '__main__':
    main()
