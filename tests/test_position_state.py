import unittest

from ball.Geometry import Point, Rect
from ball.Position import Dragging, Falling, PositionState, Settled, Start


class PositionStateTestCase(unittest.TestCase):
    def setUp(self):
        self.parent = Rect(0, 0, 375, 667)
        self.state = PositionState()
        self.state.start((50, 50), self.parent)

    def test_start_anchor(self):
        for parent in (Rect(0, 0, 375, 667), Rect(0, 0, 1024, 300), Rect(0, 0, 10, 10)):
            self.state.start((50, 50), parent)
            self.assertIsInstance(self.state.placement, Start)
            self.assertEqual(Point(75, parent.height - 50), self.state.anchor())

    def test_target_frame_centers_object(self):
        self.assertEqual(Rect(50, 592, 50, 50), self.state.targetFrame())
        self.state.start((20, 30), self.parent)
        self.assertEqual(Rect(65, 602, 20, 30), self.state.targetFrame())

    def test_only_latest_drag_anchor_is_active(self):
        for x, y in ((10, 20), (30, 40), (120, 5)):
            self.state.updatePosition(x, y)
        self.assertEqual(Dragging(120, 5), self.state.placement)
        self.assertEqual(Point(120, 5), self.state.anchor())

    def test_free_fall_ignores_vertical_coordinate(self):
        for y in (-100, 0, 300, 5000):
            self.state.freeFall(Point(140, y))
            self.assertEqual(Falling(140), self.state.placement)
            self.assertEqual(Point(140, 617), self.state.anchor())

    def test_settle_uses_start_anchor(self):
        self.state.updatePosition(200, 200)
        self.state.settle()
        self.assertIsInstance(self.state.placement, Settled)
        self.assertEqual(Point(75, 617), self.state.anchor())

    def test_reset_all_is_idempotent(self):
        self.state.updatePosition(1, 2)
        self.state.resetAll()
        self.assertFalse(self.state.isActive())
        self.state.resetAll()
        self.assertFalse(self.state.isActive())
        self.assertIsNone(self.state.anchor())
        self.assertIsNone(self.state.targetFrame())

    def test_relayout_moves_bottom_anchors(self):
        self.state.freeFall(Point(100, 0))
        self.state.relayout(Rect(0, 0, 375, 800))
        self.assertEqual(Point(100, 750), self.state.anchor())
        self.state.updatePosition(10, 10)
        self.assertEqual(Point(10, 10), self.state.anchor())

    def test_free_fall_without_parent_does_not_fail(self):
        state = PositionState()
        state.freeFall(Point(5, 5))
        self.assertEqual(Point(5, -50), state.anchor())


if __name__ == "__main__":
    unittest.main()
