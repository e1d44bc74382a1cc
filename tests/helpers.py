from __future__ import annotations

from typing import Iterable, List, Sequence

from game import Board, Tile


class ScriptedRandom:
    """Random source that replays fixed values and fails loudly when it runs out."""

    def __init__(self, floats: Iterable[float] = (), indices: Iterable[int] = ()):
        self.floats: List[float] = list(floats)
        self.indices: List[int] = list(indices)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if not self.floats:
            raise AssertionError('random() called more often than scripted')
        return self.floats.pop(0)

    def randrange(self, stop: int) -> int:
        self.calls += 1
        if not self.indices:
            raise AssertionError('randrange() called more often than scripted')
        value = self.indices.pop(0)
        assert 0 <= value < stop, f'scripted index {value} out of range({stop})'
        return value


def settled(value: int, x: int, y: int) -> Tile:
    """A tile that has been on the board for at least one turn."""
    return Tile(value=value, x=x, y=y, is_new=False)


def board_of(size: int, cells: Sequence[tuple], rng=None, score: int = 0) -> Board:
    """Builds a board from (value, x, y) triples."""
    return Board.from_tiles(size, [settled(v, x, y) for v, x, y in cells], score=score, rng=rng)


def live_cells(board: Board) -> dict:
    """Maps (x, y) -> value for every live tile."""
    return {t.pos: t.value for t in board.live_tiles()}
