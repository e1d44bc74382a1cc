from __future__ import annotations

from typing import Dict, Tuple

Coord = Tuple[int, int]  # (x, y), y grows downwards

# Clockwise quarter turns needed to bring each direction to "up".
QUARTER_TURNS: Dict[str, int] = {
    'up': 0,
    'left': 1,
    'down': 2,
    'right': 3,
}

# Order used when listing available moves (clockwise from up).
DIRECTIONS: Tuple[str, ...] = ('up', 'right', 'down', 'left')


class InvalidDirection(ValueError):
    """Raised when a move is requested in something other than up/down/left/right."""


def quarter_turns(direction: str) -> int:
    """Returns the number of clockwise quarter turns that make direction point up."""
    try:
        return QUARTER_TURNS[direction]
    except (KeyError, TypeError):
        raise InvalidDirection(f'Unknown direction: {direction!r}') from None


def rotate_coord(coord: Coord, size: int, turns: int = 1) -> Coord:
    """Rotates a cell of a size x size board clockwise the given number of quarter turns."""
    x, y = coord
    for _ in range(turns % 4):
        x, y = (size - 1) - y, x
    return x, y
