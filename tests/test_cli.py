import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from merge_core import cli
from game import InvalidDirection
from helpers import ScriptedRandom, board_of


class TestCli(unittest.TestCase):
    def test_given_prompt_input_when_parsing_then_directions(self):
        self.assertEqual(cli.parse_direction('w'), 'up')
        self.assertEqual(cli.parse_direction(' A '), 'left')
        self.assertEqual(cli.parse_direction('j'), 'down')
        self.assertEqual(cli.parse_direction('right'), 'right')
        with self.assertRaises(InvalidDirection):
            cli.parse_direction('x')

    def test_given_move_sequence_when_parsing_then_expanded(self):
        self.assertEqual(cli.parse_replay('ud l,r'), ['up', 'down', 'left', 'right'])
        with self.assertRaises(InvalidDirection):
            cli.parse_replay('uq')

    def test_given_seed_and_moves_when_replayed_twice_then_same_output(self):
        outputs = []
        for _ in range(2):
            buf = io.StringIO()
            with redirect_stdout(buf):
                cli.main(['--seed', '4', '--moves', 'ulldrruu'])
            outputs.append(buf.getvalue())
        self.assertEqual(outputs[0], outputs[1])
        self.assertIn('Score:', outputs[0])
        self.assertIn('of 8 moves', outputs[0])

    def test_given_replay_when_applied_then_counts_effective_moves(self):
        b = board_of(4, [(2, 0, 3)], rng=ScriptedRandom(floats=[0.1], indices=[0]))
        # the second and third moves find everything packed against the top wall
        self.assertEqual(cli.replay(b, ['up'] * 3), 1)
        self.assertEqual(b.tile_at(0, 0).value, 2)

    def test_given_bad_sequence_when_running_then_usage_error(self):
        with redirect_stdout(io.StringIO()), patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                cli.main(['--moves', 'zz'])
            with self.assertRaises(SystemExit):
                cli.main(['--size', '1'])

    def test_given_interactive_input_when_playing_then_bad_input_reprompts_and_quit_exits(self):
        buf = io.StringIO()
        with redirect_stdout(buf), patch('builtins.input', side_effect=['nonsense', 'w', 'q']):
            cli.main(['--seed', '1'])
        text = buf.getvalue()
        self.assertIn('Could not parse', text)
        self.assertIn('Score:', text)


if __name__ == '__main__':
    unittest.main(verbosity=2)
