from __future__ import annotations

from typing import List, Sequence

from .tile import Tile


def tiles_above(tile: Tile, tiles: Sequence[Tile]) -> List[Tile]:
    """Gets the other tiles in the cell directly above a tile."""
    return [t for t in tiles if t is not tile and t.x == tile.x and t.y == tile.y - 1]


def advance_up(tile: Tile, tiles: Sequence[Tile]) -> None:
    """
    Moves a tile up until it hits the wall or another tile.
    An equal tile above absorbs it: the tile above is upgraded and this one
    slides into its cell and is marked deleted.
    """
    # At most one step per row, so the loop is bounded by the board height.
    while tile.y > 0:
        above = tiles_above(tile, tiles)
        if len(above) > 1:
            # The cell above already absorbed a merge this pass.
            return
        if not above:
            tile.y -= 1
            continue
        target = above[0]
        if target.value == tile.value:
            target.upgrade()
            tile.y -= 1
            tile.is_deleted = True
        return


def move_all_up(tiles: List[Tile]) -> None:
    """
    Runs the move-up pass over every tile.
    Tiles are processed in order of rising y so each tile sees the final
    position of everything above it.
    """
    tiles.sort(key=lambda t: t.y)
    for tile in tiles:
        tile.prepare_move()
    for tile in tiles:
        advance_up(tile, tiles)
