from __future__ import annotations

import random
from typing import Iterable, List, Optional, Set

from .moves import move_all_up
from .rotation import DIRECTIONS, Coord, quarter_turns
from .snapshot import BoardSnapshot, TileView
from .spawn import RandomSource, random_tile
from .tile import Tile

DEFAULT_SIZE = 4


def _is_power_of_two(value: int) -> bool:
    return value >= 2 and value & (value - 1) == 0


class Board:
    """
    Represents one game: the square grid, the tiles on it and the score.

    The board exclusively owns its tiles. Randomness comes from an injected
    source (anything with random() and randrange()), so games replay exactly
    from a seed.
    """

    def __init__(self, size: int = DEFAULT_SIZE, rng: Optional[RandomSource] = None, seed: Optional[int] = None):
        if size < 2:
            raise ValueError(f'Board size must be at least 2, got {size}')
        self.size = size
        self.tiles: List[Tile] = []
        self.score = 0
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)

    @classmethod
    def new_game(cls, size: int = DEFAULT_SIZE, rng: Optional[RandomSource] = None, seed: Optional[int] = None) -> 'Board':
        """Creates a board and seeds it with its two starting tiles."""
        board = cls(size, rng=rng, seed=seed)
        board.reset()
        return board

    @classmethod
    def from_tiles(
        cls,
        size: int,
        tiles: Iterable[Tile],
        score: int = 0,
        rng: Optional[RandomSource] = None,
    ) -> 'Board':
        """Builds a board from explicit tiles, validating coordinates, values and cell occupancy."""
        board = cls(size, rng=rng)
        if score < 0:
            raise ValueError(f'Score must not be negative, got {score}')
        taken: Set[Coord] = set()
        for tile in tiles:
            if not _is_power_of_two(tile.value):
                raise ValueError(f'Tile value must be a power of two, got {tile.value}')
            for c in (tile.x, tile.y, tile.previous_x, tile.previous_y):
                if not 0 <= c < size:
                    raise ValueError(f'Tile at ({tile.x}, {tile.y}) is outside a {size}x{size} board')
            if not tile.is_deleted:
                if tile.pos in taken:
                    raise ValueError(f'Two tiles share cell ({tile.x}, {tile.y})')
                taken.add(tile.pos)
            board.tiles.append(tile)
        board.score = score
        return board

    def copy(self, rng: Optional[RandomSource] = None) -> 'Board':
        """Returns an independent copy; it never shares tiles or the random source with this board."""
        other = Board(self.size, rng=rng if rng is not None else random.Random())
        other.tiles = [t.clone() for t in self.tiles]
        other.score = self.score
        return other

    def reset(self) -> None:
        """Clears the tiles and score and adds 2 new random tiles."""
        self.tiles = []
        self.score = 0
        self.spawn_tile()
        self.spawn_tile()

    def spawn_tile(self) -> Optional[Tile]:
        """Adds a tile in a random free cell. Returns None when the board is full."""
        tile = random_tile(self.size, self.tiles, self._rng)
        if tile is not None:
            self.tiles.append(tile)
        return tile

    def _shift(self, direction: str) -> bool:
        """Purges last turn's merged tiles and slides everything towards direction."""
        turns = quarter_turns(direction)
        self.tiles = [t for t in self.tiles if not t.is_deleted]
        # Tiles only know how to move up, so rotate the board until direction is up.
        for t in self.tiles:
            t.rotate(turns, self.size)
        move_all_up(self.tiles)
        for t in self.tiles:
            t.rotate((4 - turns) % 4, self.size)
        return any(t.moved for t in self.tiles)

    def move(self, direction: str) -> bool:
        """
        Moves all tiles towards direction ('up', 'down', 'left' or 'right').
        Adds one random tile if anything moved and adds the values of the merged
        tiles to the score. Returns True if any tile moved.
        """
        moved = self._shift(direction)
        if moved:
            self.spawn_tile()
        self.score += sum(t.value for t in self.tiles if t.is_upgraded)
        return moved

    def can_move(self, direction: str) -> bool:
        """True if moving in direction would move at least one tile."""
        return self.copy()._shift(direction)

    def available_moves(self) -> List[str]:
        return [d for d in DIRECTIONS if self.can_move(d)]

    def is_game_over(self) -> bool:
        """True when no direction moves any tile."""
        return not self.available_moves()

    def live_tiles(self) -> List[Tile]:
        return [t for t in self.tiles if not t.is_deleted]

    def tile_at(self, x: int, y: int) -> Optional[Tile]:
        for t in self.live_tiles():
            if t.x == x and t.y == y:
                return t
        return None

    def highest_value(self) -> int:
        return max((t.value for t in self.live_tiles()), default=0)

    def snapshot(self) -> BoardSnapshot:
        """Read-only view of the board for renderers."""
        return BoardSnapshot(self.size, self.score, tuple(TileView.of(t) for t in self.tiles))

    def pretty(self) -> str:
        """Generates a human-readable string representation of the board."""
        width = max(len(str(self.highest_value())), 1)
        lines: List[str] = []
        for y in range(self.size):
            row: List[str] = []
            for x in range(self.size):
                tile = self.tile_at(x, y)
                row.append(str(tile.value if tile else '.').rjust(width))
            lines.append(' '.join(row))
        return '\n'.join(lines)
