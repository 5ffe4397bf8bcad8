import unittest

from ball.Geometry import Point, Rect, inNearMissBand, inside, nearMissBand


class GeometryTestCase(unittest.TestCase):
    def test_rect_queries(self):
        r = Rect(10, 20, 50, 40)
        self.assertEqual(Point(35, 40), r.center)
        self.assertEqual(60, r.right)
        self.assertEqual(60, r.bottom)
        self.assertTrue(r.contains(Point(10, 60)))
        self.assertFalse(r.contains(Point(61, 30)))
        self.assertEqual(Rect(50, 75, 50, 50), Rect.centeredAt(Point(75, 100), 50, 50))

    def test_inside_when_mostly_enclosed(self):
        zone = Rect(100, 500, 200, 200)
        self.assertTrue(inside(Rect(130, 530, 50, 50), zone))

    def test_outside_far_away(self):
        zone = Rect(100, 500, 80, 80)
        self.assertFalse(inside(Rect(0, 0, 50, 50), zone))

    def test_near_edge_margin_scales_with_position(self):
        zone = Rect(100, 500, 200, 200)
        # 100 * 1.05 = 105 is the first x that is still too close
        self.assertFalse(inside(Rect(105, 530, 50, 50), zone))
        self.assertTrue(inside(Rect(105.5, 530, 50, 50), zone))
        # 500 * 1.05 = 525
        self.assertFalse(inside(Rect(130, 525, 50, 50), zone))

    def test_far_edge_loses_five_percent(self):
        zone = Rect(100, 500, 200, 200)
        # far edge at 100 + 200 * 0.95 = 290
        self.assertTrue(inside(Rect(239, 530, 50, 50), zone))
        self.assertFalse(inside(Rect(240, 530, 50, 50), zone))
        # bottom edge at 500 + 200 * 0.95 = 690
        self.assertFalse(inside(Rect(130, 640, 50, 50), zone))

    def test_documented_example_fails_literal_rules(self):
        # the right edge 180 passes 100 + 80 * 0.95 = 176, the top 520 is above 525
        self.assertFalse(inside(Rect(130, 520, 50, 50), Rect(100, 500, 80, 80)))

    def test_vertical_self_comparison_only_fails_without_height(self):
        self.assertFalse(inside(Rect(1, 1, 0, 0), Rect(0, 0, 10, 0)))

    def test_near_miss_band(self):
        zone = Rect(225, 527, 130, 130)
        low, high = nearMissBand(zone)
        self.assertAlmostEqual(192.5, low)
        self.assertAlmostEqual(387.5, high)
        self.assertTrue(inNearMissBand(Point(200, 0), zone))
        self.assertFalse(inNearMissBand(Point(192.5, 0), zone))
        self.assertFalse(inNearMissBand(Point(100, 0), zone))

    def test_near_miss_band_upper_bound(self):
        zone = Rect(225, 527, 130, 130)
        self.assertTrue(inNearMissBand(Point(387.4, 0), zone))
        self.assertFalse(inNearMissBand(Point(387.5, 0), zone))
        self.assertFalse(inNearMissBand(Point(450, 0), zone))


if __name__ == "__main__":
    unittest.main()
