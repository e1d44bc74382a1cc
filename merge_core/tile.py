from __future__ import annotations

from dataclasses import dataclass, field

from .rotation import Coord, rotate_coord


@dataclass(eq=False)
class Tile:
    """A numbered tile on the board.

    Tiles only know how to move up. The board rotates every tile so that the
    requested direction becomes up, runs the move-up pass and rotates back.
    Identity matters (eq=False): two tiles with equal fields are still distinct.
    """
    value: int
    x: int
    y: int
    # Position before the current move, used only for slide animations.
    previous_x: int = field(default=-1)
    previous_y: int = field(default=-1)
    # Spawned this turn.
    is_new: bool = True
    # Another tile merged into this one this turn.
    is_upgraded: bool = False
    # Merged into another tile this turn; purged at the start of the next move.
    is_deleted: bool = False

    def __post_init__(self) -> None:
        if self.previous_x < 0:
            self.previous_x = self.x
        if self.previous_y < 0:
            self.previous_y = self.y

    @property
    def pos(self) -> Coord:
        return self.x, self.y

    @property
    def previous_pos(self) -> Coord:
        return self.previous_x, self.previous_y

    @property
    def moved(self) -> bool:
        """True if the tile changed cell during the last move."""
        return self.pos != self.previous_pos

    def prepare_move(self) -> None:
        """Clears the per-turn flags and remembers the current cell."""
        self.is_new = False
        self.is_upgraded = False
        self.previous_x, self.previous_y = self.x, self.y

    def upgrade(self) -> None:
        """Doubles the value after another tile merged into this one."""
        self.value *= 2
        self.is_upgraded = True

    def rotate(self, turns: int, size: int) -> None:
        """Rotates both the current and the previous cell clockwise."""
        self.x, self.y = rotate_coord((self.x, self.y), size, turns)
        self.previous_x, self.previous_y = rotate_coord((self.previous_x, self.previous_y), size, turns)

    def clone(self) -> 'Tile':
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
