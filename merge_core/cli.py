from __future__ import annotations

import argparse
from typing import Dict, List, Optional

from .board import DEFAULT_SIZE, Board
from .rotation import InvalidDirection

# Keys accepted at the prompt: WASD, vi keys or full names.
INPUT_DIRECTIONS: Dict[str, str] = {
    'w': 'up', 'k': 'up', 'up': 'up',
    'a': 'left', 'h': 'left', 'left': 'left',
    's': 'down', 'j': 'down', 'down': 'down',
    'd': 'right', 'l': 'right', 'right': 'right',
}

# --moves uses single letters: u, d, l, r.
REPLAY_DIRECTIONS: Dict[str, str] = {'u': 'up', 'd': 'down', 'l': 'left', 'r': 'right'}


def parse_direction(text: str) -> str:
    """Maps user input to a direction name."""
    key = text.strip().lower()
    try:
        return INPUT_DIRECTIONS[key]
    except KeyError:
        raise InvalidDirection(f'Unknown direction: {text!r}') from None


def parse_replay(moves: str) -> List[str]:
    """Parses a --moves sequence such as 'uldr'."""
    out: List[str] = []
    for ch in moves.strip().lower():
        if ch in ' ,':
            continue
        if ch not in REPLAY_DIRECTIONS:
            raise InvalidDirection(f'Unknown direction in move sequence: {ch!r}')
        out.append(REPLAY_DIRECTIONS[ch])
    return out


def _print_board(board: Board) -> None:
    print(board.pretty())
    print(f'Score: {board.score}')


def replay(board: Board, moves: List[str]) -> int:
    """Applies moves in order and returns how many of them moved a tile."""
    effective = 0
    for direction in moves:
        if board.move(direction):
            effective += 1
    return effective


def play(board: Board) -> None:
    print('Move with w/a/s/d (or up/left/down/right), q to quit.')
    _print_board(board)
    while not board.is_game_over():
        text = input('Move: ').strip()
        if text.lower() in ('q', 'quit', 'exit'):
            return
        try:
            direction = parse_direction(text)
        except InvalidDirection:
            print('Could not parse. Try again.')
            continue
        if not board.move(direction):
            print('Nothing moved.')
            continue
        _print_board(board)
    print(f'Game over! Final score: {board.score}, highest tile: {board.highest_value()}')


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Merge2048 in the terminal')
    parser.add_argument('--size', type=int, default=DEFAULT_SIZE, help='Board size (NxN)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for spawns')
    parser.add_argument('--moves', default=None, help='Replay a move sequence (u/d/l/r) instead of playing')
    args = parser.parse_args(argv)

    if args.size < 2:
        parser.error('--size must be at least 2')

    board = Board.new_game(args.size, seed=args.seed)

    if args.moves is None:
        play(board)
        return

    try:
        moves = parse_replay(args.moves)
    except InvalidDirection as e:
        parser.error(str(e))
    effective = replay(board, moves)
    print(f'Applied {effective} of {len(moves)} moves.')
    _print_board(board)
    if board.is_game_over():
        print('Game over!')


if __name__ == '__main__':
    main()
