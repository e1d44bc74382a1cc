from __future__ import annotations

# Facade module that re-exports the Merge2048 engine.
# The Flask app, the tools and the tests import from here;
# single-responsibility modules live under merge_core/*.

from merge_core.board import DEFAULT_SIZE, Board
from merge_core.tile import Tile
from merge_core.rotation import (
    Coord,
    DIRECTIONS,
    QUARTER_TURNS,
    InvalidDirection,
    quarter_turns,
    rotate_coord,
)
from merge_core.spawn import (
    TWO_PROBABILITY,
    RandomSource,
    all_cells,
    free_cells,
    random_tile,
    spawn_value,
)
from merge_core.moves import advance_up, move_all_up, tiles_above
from merge_core.snapshot import BoardSnapshot, TileView

__all__ = [
    'DEFAULT_SIZE', 'Board', 'Tile', 'Coord', 'DIRECTIONS', 'QUARTER_TURNS',
    'InvalidDirection', 'quarter_turns', 'rotate_coord', 'TWO_PROBABILITY',
    'RandomSource', 'all_cells', 'free_cells', 'random_tile', 'spawn_value',
    'advance_up', 'move_all_up', 'tiles_above', 'BoardSnapshot', 'TileView',
    'main',
]


def main() -> None:
    # CLI driver delegated to merge_core.cli
    from merge_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
