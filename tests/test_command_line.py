import io
import random
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from ball import CommandLine
from ball.CommandLine import CommandLineInterface, execute
from ball.Core import DragController, trashZone
from ball.Geometry import Rect
from ball.Position import Falling, Start

PARENT = Rect(0, 0, 375, 667)


class CommandLineTestCase(unittest.TestCase):
    def make_session(self):
        core = DragController(PARENT, trashZone(PARENT), random.Random(1))
        interface = CommandLineInterface()
        core.registerInterface(interface)
        with redirect_stdout(io.StringIO()):
            core.startGame()
        return core, interface

    def run_commands(self, core, interface, *commands):
        out = io.StringIO()
        results = []
        with redirect_stdout(out):
            for command in commands:
                results.append(execute(core, interface, command))
        return out.getvalue(), results

    def test_throw_into_trash_can(self):
        core, interface = self.make_session()
        text, _ = self.run_commands(core, interface, "throw 290 300")
        self.assertIn("Ball #1 trashed, new ball #2", text)
        self.assertEqual(2, core.ball.id)

    def test_drag_then_drop_misses(self):
        core, interface = self.make_session()
        text, _ = self.run_commands(core, interface, "drag 10 -200", "move 45 -300", "drop 45 -300")
        self.assertIn("Fell to the ground", text)
        self.assertEqual(Falling(120), core.position.placement)

    def test_second_drag_is_refused(self):
        core, interface = self.make_session()
        text, _ = self.run_commands(core, interface, "drag 10 -200", "drag 50 -50", "move 45 -300")
        self.assertIn("Cannot drag now!", text)
        self.assertEqual(120, core.ball.center.x)

    def test_invalid_input(self):
        core, interface = self.make_session()
        text, results = self.run_commands(core, interface, "move 1 2", "drop", "fly", "drag a b")
        self.assertIn("Not dragging!", text)
        self.assertIn("Invalid command!", text)
        self.assertIn("Invalid number!", text)
        self.assertEqual([True, True, True, True], results)
        self.assertIsInstance(core.position.placement, Start)

    def test_quit_ends_session(self):
        core, interface = self.make_session()
        _, results = self.run_commands(core, interface, "where", "quit")
        self.assertEqual([True, False], results)

    def test_main_reads_stdin(self):
        stdin = io.StringIO("throw 200 300\nquit\nthrow 290 300\n")
        out = io.StringIO()
        with patch("sys.stdin", stdin), redirect_stdout(out):
            CommandLine.main(["--seed", "4"])
        text = out.getvalue()
        self.assertIn("Ball placed!", text)
        self.assertIn("back to start", text)
        self.assertNotIn("new ball #2", text)


if __name__ == "__main__":
    unittest.main()
