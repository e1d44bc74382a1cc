from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .tile import Tile


@dataclass(frozen=True)
class TileView:
    """Read-only copy of a tile, as handed to renderers."""
    value: int
    x: int
    y: int
    previous_x: int
    previous_y: int
    is_new: bool
    is_upgraded: bool
    is_deleted: bool

    @classmethod
    def of(cls, tile: Tile) -> 'TileView':
        return cls(
            tile.value, tile.x, tile.y, tile.previous_x, tile.previous_y,
            tile.is_new, tile.is_upgraded, tile.is_deleted,
        )

    def to_tile(self) -> Tile:
        return Tile(
            value=self.value,
            x=self.x,
            y=self.y,
            previous_x=self.previous_x,
            previous_y=self.previous_y,
            is_new=self.is_new,
            is_upgraded=self.is_upgraded,
            is_deleted=self.is_deleted,
        )


@dataclass(frozen=True)
class BoardSnapshot:
    """Represents the board after a command: grid size, score and every tile, deleted remnants included."""
    size: int
    score: int
    tiles: Tuple[TileView, ...]

    def live_tiles(self) -> Tuple[TileView, ...]:
        return tuple(t for t in self.tiles if not t.is_deleted)
