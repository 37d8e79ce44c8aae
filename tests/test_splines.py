from __future__ import annotations

import math
import unittest

from splinedit.core import (
    CURVE_KINDS,
    CatmullRomSpline,
    tessellate,
    tessellate_bezier,
    tessellate_bspline,
    tessellate_cardinal,
    tessellate_linestrip,
)

SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


def _close(a, b, tol=1e-9) -> bool:
    return math.hypot(a[0] - b[0], a[1] - b[1]) <= tol


class LineStripTests(unittest.TestCase):
    def test_returns_points_in_order(self) -> None:
        self.assertEqual(tessellate_linestrip(SQUARE), SQUARE)

    def test_empty_and_single(self) -> None:
        self.assertEqual(tessellate_linestrip([]), [])
        self.assertEqual(tessellate_linestrip([(1.0, 2.0)]), [(1.0, 2.0)])

    def test_result_is_a_copy(self) -> None:
        pts = list(SQUARE)
        out = tessellate_linestrip(pts)
        out.append((99.0, 99.0))
        self.assertEqual(pts, SQUARE)


class BSplineTests(unittest.TestCase):
    def test_fewer_than_two_points_is_empty(self) -> None:
        self.assertEqual(tessellate_bspline([]), [])
        self.assertEqual(tessellate_bspline([(3.0, 4.0)]), [])

    def test_resolution_scales_with_segment_count(self) -> None:
        self.assertEqual(len(tessellate_bspline(SQUARE)), 101)
        five = SQUARE + [(5.0, 5.0)]
        self.assertEqual(len(tessellate_bspline(five)), 201)
        six = five + [(-5.0, 5.0)]
        self.assertEqual(len(tessellate_bspline(six)), 301)

    def test_short_inputs_are_padded(self) -> None:
        self.assertEqual(len(tessellate_bspline([(0.0, 0.0), (10.0, 0.0)])), 101)
        self.assertEqual(len(tessellate_bspline([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)])), 201)

    def test_two_points_stays_on_the_segment(self) -> None:
        out = tessellate_bspline([(0.0, 0.0), (10.0, 0.0)])
        for x, y in out:
            self.assertAlmostEqual(y, 0.0)
            self.assertGreaterEqual(x, -1e-9)
            self.assertLessEqual(x, 10.0 + 1e-9)

    def test_approximates_rather_than_interpolates(self) -> None:
        out = tessellate_bspline(SQUARE)
        # uniform B-spline of one window starts at (p0 + 4 p1 + p2) / 6
        self.assertTrue(_close(out[0], (50.0 / 6.0, 10.0 / 6.0)))
        # and ends at (p1 + 4 p2 + p3) / 6
        self.assertTrue(_close(out[-1], (50.0 / 6.0, 50.0 / 6.0), 1e-6))
        self.assertFalse(any(_close(s, (0.0, 0.0), 1e-6) for s in out))

    def test_idempotent(self) -> None:
        self.assertEqual(tessellate_bspline(SQUARE), tessellate_bspline(SQUARE))


class CardinalTests(unittest.TestCase):
    def test_fewer_than_two_points_is_empty(self) -> None:
        self.assertEqual(tessellate_cardinal([]), [])
        self.assertEqual(tessellate_cardinal([(3.0, 4.0)]), [])

    def test_interpolates_every_control_point(self) -> None:
        pts = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (-7.5, 3.25), (2.0, -4.0)]
        out = tessellate_cardinal(pts)
        for p in pts:
            self.assertTrue(any(_close(s, p, 1e-6) for s in out), p)

    def test_endpoints_and_sample_count(self) -> None:
        out = tessellate_cardinal(SQUARE)
        self.assertEqual(len(out), 3 * 100 + 1)
        self.assertTrue(_close(out[0], SQUARE[0]))
        self.assertTrue(_close(out[-1], SQUARE[-1], 1e-6))

    def test_two_points_is_a_straight_segment(self) -> None:
        out = tessellate_cardinal([(0.0, 0.0), (4.0, 2.0)])
        self.assertEqual(len(out), 101)
        for x, y in out:
            self.assertAlmostEqual(y, x / 2.0)

    def test_does_not_mutate_input(self) -> None:
        pts = list(SQUARE)
        tessellate_cardinal(pts)
        self.assertEqual(pts, SQUARE)

    def test_custom_resolution(self) -> None:
        curve = CatmullRomSpline(samples_per_segment=10)
        self.assertEqual(len(curve.tessellate(SQUARE)), 31)

    def test_invalid_resolution_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CatmullRomSpline(samples_per_segment=0)


class BezierTests(unittest.TestCase):
    def test_exactly_four_points(self) -> None:
        out = tessellate_bezier(SQUARE)
        self.assertEqual(len(out), 100 * 1 + 1)
        self.assertTrue(_close(out[0], SQUARE[0]))
        self.assertTrue(_close(out[-1], SQUARE[3], 1e-9))
        # midpoint of a cubic Bezier: (p0 + 3 p1 + 3 p2 + p3) / 8
        self.assertTrue(_close(out[50], (7.5, 5.0)))

    def test_other_counts_are_empty(self) -> None:
        for n in (0, 1, 2, 3, 5, 8):
            pts = [(float(i), float(i * i)) for i in range(n)]
            self.assertEqual(tessellate_bezier(pts), [], n)

    def test_idempotent(self) -> None:
        self.assertEqual(tessellate_bezier(SQUARE), tessellate_bezier(SQUARE))


class DispatchTests(unittest.TestCase):
    def test_curve_kinds_in_draw_order(self) -> None:
        self.assertEqual(CURVE_KINDS, ("linestrip", "bspline", "cardinal", "bezier"))

    def test_four_points_draws_every_kind(self) -> None:
        for kind in CURVE_KINDS:
            self.assertTrue(tessellate(kind, SQUARE), kind)

    def test_unknown_kind(self) -> None:
        with self.assertRaises(KeyError):
            tessellate("nurbs", SQUARE)


if __name__ == "__main__":
    unittest.main()
