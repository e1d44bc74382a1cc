from __future__ import annotations

import argparse
import os
import random
import sys
import time
from collections import Counter
from typing import Tuple

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from game import Board, DIRECTIONS  # type: ignore


def play_random_game(size: int, seed: int) -> Tuple[int, int, int, Counter]:
    """Plays random legal moves until the board is stuck.
    Returns (moves, score, highest tile, spawned value counts)."""
    board = Board.new_game(size, seed=seed)
    picker = random.Random(seed ^ 0x5EED)
    spawned: Counter = Counter(t.value for t in board.tiles)
    moves = 0
    while True:
        options = board.available_moves()
        if not options:
            break
        board.move(picker.choice(options))
        moves += 1
        spawned.update(t.value for t in board.tiles if t.is_new)
    return moves, board.score, board.highest_value(), spawned


def main() -> None:
    ap = argparse.ArgumentParser(description='Play seeded random Merge2048 games and report scores')
    ap.add_argument('--games', type=int, default=20)
    ap.add_argument('--size', type=int, default=4)
    ap.add_argument('--seed', type=int, default=0, help='Seed of the first game; game i uses seed+i')
    args = ap.parse_args()

    t0 = time.time()
    totals: Counter = Counter()
    best = 0
    for i in range(args.games):
        moves, score, highest, spawned = play_random_game(args.size, args.seed + i)
        totals.update(spawned)
        best = max(best, highest)
        print(f"seed={args.seed + i} moves={moves} score={score} highest={highest}")

    n = sum(totals.values())
    if n:
        print(f"spawned {n} tiles: 2 -> {totals[2] / n:.3f}, 4 -> {totals[4] / n:.3f}")
    print(f"best tile {best}; took {int((time.time() - t0) * 1000)} ms")


if __name__ == '__main__':
    main()
