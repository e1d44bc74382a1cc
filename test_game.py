import unittest

from game import (
    Board,
    Tile,
    DIRECTIONS,
    InvalidDirection,
    quarter_turns,
    rotate_coord,
)


def make_board(rows):
    """Builds a board from rows of values, 0 meaning an empty cell."""
    size = len(rows)
    tiles = []
    for y, row in enumerate(rows):
        assert len(row) == size
        for x, value in enumerate(row):
            if value:
                tiles.append(Tile(value=value, x=x, y=y, is_new=False))
    return Board.from_tiles(size, tiles)


def grid(board):
    """Values of the settled tiles, ignoring the tile spawned by the last move."""
    out = [[0] * board.size for _ in range(board.size)]
    for t in board.live_tiles():
        if t.is_new:
            continue
        out[t.y][t.x] = t.value
    return out


class TestMergeBasics(unittest.TestCase):
    def test_directions_and_turns(self):
        self.assertEqual(DIRECTIONS, ('up', 'right', 'down', 'left'))
        self.assertEqual([quarter_turns(d) for d in ('up', 'left', 'down', 'right')], [0, 1, 2, 3])
        with self.assertRaises(InvalidDirection):
            quarter_turns('diagonal')

    def test_rotation_roundtrip_on_corners(self):
        corners = [(0, 0), (3, 0), (3, 3), (0, 3)]
        for i, c in enumerate(corners):
            self.assertEqual(rotate_coord(c, 4), corners[(i + 1) % 4])

    def test_new_game_has_two_tiles(self):
        b = Board.new_game(seed=1)
        self.assertEqual(b.size, 4)
        self.assertEqual(len(b.tiles), 2)
        self.assertEqual(b.score, 0)
        self.assertFalse(b.is_game_over())

    def test_slide_and_merge_rows(self):
        b = make_board([
            [2, 2, 4, 4],
            [0, 0, 0, 2],
            [8, 0, 8, 0],
            [2, 4, 8, 16],
        ])
        self.assertTrue(b.move('left'))
        g = grid(b)
        self.assertEqual(g[0], [4, 8, 0, 0])
        self.assertEqual(g[2][0], 16)
        self.assertEqual(g[3], [2, 4, 8, 16])
        self.assertEqual(b.score, 4 + 8 + 16)
        # one spawned tile in a free cell
        self.assertEqual(len([t for t in b.tiles if t.is_new]), 1)

    def test_blocked_board_is_game_over(self):
        b = make_board([
            [2, 4, 2, 4],
            [4, 2, 4, 2],
            [2, 4, 2, 4],
            [4, 2, 4, 2],
        ])
        self.assertTrue(b.is_game_over())
        for d in DIRECTIONS:
            self.assertFalse(b.move(d))
        self.assertEqual(b.score, 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
