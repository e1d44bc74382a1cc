from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Sequence

from .rotation import Coord
from .tile import Tile

# New tiles usually have a value of 2, but 10% of the time a 4 is created.
TWO_PROBABILITY = 0.9


class RandomSource(Protocol):
    """The part of random.Random the engine relies on."""

    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


def all_cells(size: int) -> List[Coord]:
    """Lists every cell of the board in row-major order."""
    return [(x, y) for y in range(size) for x in range(size)]


def free_cells(size: int, tiles: Iterable[Tile]) -> List[Coord]:
    """Lists the cells not occupied by any tile, deleted remnants included."""
    taken = {t.pos for t in tiles}
    return [c for c in all_cells(size) if c not in taken]


def spawn_value(rng: RandomSource) -> int:
    return 2 if rng.random() < TWO_PROBABILITY else 4


def random_tile(size: int, tiles: Sequence[Tile], rng: RandomSource) -> Optional[Tile]:
    """Creates a new tile in a random free cell, or returns None if the board is full."""
    free = free_cells(size, tiles)
    if not free:
        return None
    x, y = free[rng.randrange(len(free))]
    return Tile(value=spawn_value(rng), x=x, y=y)
