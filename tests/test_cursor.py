"""
Tests for the path cursor and curve flattening.
"""

import math
import unittest

from svggeom.cursor import Subpath, trace_path
from svggeom.flatten import Flattener
from svggeom.scanner import scan_path


def trace(d, samples=100):
    return trace_path(scan_path(d), Flattener(samples))


class TestPathCursor(unittest.TestCase):
    """Tests for straight segments and subpath bookkeeping."""

    def test_open_subpath(self):
        subpaths = trace("M0 0L10 0L10 10")
        self.assertEqual(len(subpaths), 1)
        self.assertEqual(subpaths[0].points, [(0, 0), (10, 0), (10, 10)])
        self.assertFalse(subpaths[0].closed)

    def test_horizontal_and_vertical(self):
        subpaths = trace("M10 10h5v5H0V0")
        self.assertEqual(subpaths[0].points, [(10, 10), (15, 10), (15, 15), (0, 15), (0, 0)])

    def test_close_appends_start(self):
        subpaths = trace("M0 0L10 0L10 10Z")
        self.assertEqual(subpaths[0].points, [(0, 0), (10, 0), (10, 10), (0, 0)])
        self.assertTrue(subpaths[0].closed)

    def test_close_does_not_repeat_start(self):
        subpaths = trace("M0 0L10 0L10 10L0 0Z")
        self.assertEqual(subpaths[0].points, [(0, 0), (10, 0), (10, 10), (0, 0)])

    def test_relative_move_after_close(self):
        subpaths = trace("M0 0L10 0L10 10Zm5 5l1 0")
        self.assertEqual(len(subpaths), 2)
        self.assertEqual(subpaths[1].points, [(5, 5), (6, 5)])
        self.assertFalse(subpaths[1].closed)

    def test_drawing_after_close_starts_new_subpath(self):
        subpaths = trace("M0 0L10 0L10 10ZL5 5")
        self.assertEqual(subpaths[1].points, [(0, 0), (5, 5)])

    def test_close_without_subpath(self):
        self.assertEqual(trace("M0 0ZZ"), [Subpath([(0, 0)], closed=True)])

    def test_no_commands(self):
        self.assertEqual(trace_path([]), [])

    def test_lone_move(self):
        self.assertEqual(trace("M3 4"), [Subpath([(3, 4)])])

    def test_is_ring(self):
        self.assertTrue(Subpath([(0, 0), (1, 0), (1, 1), (0, 0)]).is_ring)
        self.assertTrue(Subpath([(0, 0)], closed=True).is_ring)
        self.assertFalse(Subpath([(0, 0), (1, 0), (0, 0)]).is_ring)


class TestCurves(unittest.TestCase):
    """Tests for flattened curves and arcs."""

    def assertPointAlmostEqual(self, actual, expected, places=7):
        self.assertAlmostEqual(actual[0], expected[0], places=places)
        self.assertAlmostEqual(actual[1], expected[1], places=places)

    def test_cubic_sample_count(self):
        points = trace("M0 0C0 10 10 10 10 0")[0].points
        self.assertEqual(len(points), 101)
        self.assertEqual(points[-1], (10.0, 0.0))
        self.assertPointAlmostEqual(points[50], (5, 7.5))

    def test_relative_cubic(self):
        points = trace("M10 10c0 10 10 10 10 0")[0].points
        self.assertEqual(points[-1], (20.0, 10.0))

    def test_quadratic(self):
        points = trace("M0 0Q10 10 20 0", samples=4)[0].points
        self.assertEqual(len(points), 5)
        self.assertPointAlmostEqual(points[2], (10, 5))

    def test_smooth_cubic_without_previous_curve(self):
        points = trace("M0 0S10 10 20 0")[0].points
        self.assertPointAlmostEqual(points[50], (6.25, 3.75))

    def test_smooth_cubic_reflects_control_point(self):
        points = trace("M0 0C0 10 10 10 10 0S20 -10 20 0", samples=2)[0].points
        self.assertEqual(len(points), 5)
        self.assertPointAlmostEqual(points[1], (5, 7.5))
        self.assertPointAlmostEqual(points[3], (15, -7.5))

    def test_smooth_quadratic_reflects_control_point(self):
        points = trace("M0 0Q5 5 10 0T20 0", samples=2)[0].points
        self.assertPointAlmostEqual(points[3], (15, -2.5))

    def test_line_breaks_reflection(self):
        points = trace("M0 0Q5 5 10 0L20 0T30 0", samples=2)[0].points
        self.assertEqual(len(points), 6)
        self.assertPointAlmostEqual(points[1], (5, 2.5))
        self.assertPointAlmostEqual(points[4], (25, 0))

    def test_curve_family_breaks_reflection(self):
        points = trace("M0 0Q5 5 10 0S20 0 20 0", samples=2)[0].points
        self.assertPointAlmostEqual(points[3], (15, 0))

    def test_cubic_and_smooth_cubic_path(self):
        points = trace("M0 0C0 30 30 40 40 40S50 60 60 60L60 0Z")[0].points
        self.assertEqual(len(points), 203)
        self.assertEqual(points[100], (40.0, 40.0))
        self.assertPointAlmostEqual(points[50], (16.25, 31.25))
        self.assertPointAlmostEqual(points[150], (50, 50))
        self.assertEqual(points[-1], (0, 0))

    def test_quadratic_and_smooth_quadratic_path(self):
        points = trace("M0 0Q30 40 40 40T60 60L60 0Z")[0].points
        self.assertPointAlmostEqual(points[50], (25, 30))
        self.assertPointAlmostEqual(points[150], (50, 45))

    def test_arc_stays_on_circle(self):
        points = trace("M0 0A10 10 0 0 1 20 0")[0].points
        self.assertEqual(len(points), 101)
        self.assertEqual(points[-1], (20.0, 0.0))
        for x, y in points:
            self.assertAlmostEqual(math.hypot(x - 10, y), 10, places=6)

    def test_arc_with_zero_radius_is_a_line(self):
        self.assertEqual(trace("M0 0A0 10 0 0 1 20 0")[0].points, [(0, 0), (20, 0)])

    def test_arc_to_current_point_is_omitted(self):
        self.assertEqual(trace("M5 5A10 10 0 0 1 5 5")[0].points, [(5, 5)])

    def test_arc_negative_radii(self):
        self.assertEqual(trace("M0 0A-10 -10 0 0 1 20 0"), trace("M0 0A10 10 0 0 1 20 0"))

    def test_flattener_rejects_zero_samples(self):
        with self.assertRaises(ValueError):
            Flattener(0)


if __name__ == "__main__":
    unittest.main()
