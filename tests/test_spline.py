from __future__ import annotations

import unittest

import numpy as np

from reaction_graph.axis import degree_range
from reaction_graph.normalize import normalize_points
from reaction_graph.spline import solve_control_points


def _bezier(p0, c1, c2, p1, t: float) -> np.ndarray:
    u = 1.0 - t
    return u**3 * p0 + 3 * u**2 * t * c1 + 3 * u * t**2 * c2 + t**3 * p1


class SplineSolverTests(unittest.TestCase):
    def setUp(self) -> None:
        values = [1, 3, 2, 5, 4]
        self.points = normalize_points(values, degree_range(0, max(values)))
        self.controls = solve_control_points(self.points)

    def test_one_pair_per_segment(self) -> None:
        for n in range(2, 9):
            pts = np.column_stack([np.linspace(0.0, 1.0, n), np.linspace(1.0, 0.0, n) ** 2])
            controls = solve_control_points(pts)
            self.assertEqual(controls.first.shape, (n - 1, 2))
            self.assertEqual(controls.second.shape, (n - 1, 2))
            self.assertEqual(controls.segment_count, n - 1)

    def test_reference_series_segment_count(self) -> None:
        self.assertEqual(self.controls.segment_count, 4)

    def test_curve_interpolates_data_points(self) -> None:
        first, second = self.controls.first, self.controls.second
        for i in range(4):
            p0, p1 = self.points[i], self.points[i + 1]
            np.testing.assert_allclose(_bezier(p0, first[i], second[i], p1, 0.0), p0, atol=1e-9)
            np.testing.assert_allclose(_bezier(p0, first[i], second[i], p1, 1.0), p1, atol=1e-9)

    def test_tangent_continuity_at_interior_joins(self) -> None:
        first, second = self.controls.first, self.controls.second
        for i in range(3):
            joint = self.points[i + 1]
            end_tangent = joint - second[i]
            start_tangent = first[i + 1] - joint
            np.testing.assert_allclose(end_tangent, start_tangent, atol=1e-9)

    def test_first_controls_satisfy_tridiagonal_rows(self) -> None:
        p, f = self.points, self.controls.first
        np.testing.assert_allclose(2 * f[0] + f[1], p[0] + 2 * p[1], atol=1e-9)
        for i in (1, 2):
            np.testing.assert_allclose(f[i - 1] + 4 * f[i] + f[i + 1], 4 * p[i] + 2 * p[i + 1], atol=1e-9)
        np.testing.assert_allclose(2 * f[2] + 7 * f[3], 8 * p[3] + p[4], atol=1e-9)

    def test_degenerate_inputs_have_no_segments(self) -> None:
        for pts in (np.zeros((0, 2)), np.asarray([[0.0, 0.3]])):
            controls = solve_control_points(pts)
            self.assertEqual(controls.segment_count, 0)
            self.assertEqual(controls.first.shape, (0, 2))
            self.assertEqual(controls.second.shape, (0, 2))

    def test_single_segment_uses_closing_row(self) -> None:
        p0 = np.asarray([0.0, 1.0])
        p1 = np.asarray([1.0, 0.0])
        controls = solve_control_points(np.vstack([p0, p1]))
        expected_first = (8 * p0 + p1) / 7
        np.testing.assert_allclose(controls.first[0], expected_first)
        np.testing.assert_allclose(controls.second[0], (p1 + expected_first) / 2)

    def test_straight_line_stays_on_line(self) -> None:
        pts = np.column_stack([np.linspace(0.0, 1.0, 5), np.linspace(0.0, 1.0, 5)])
        controls = solve_control_points(pts)
        np.testing.assert_allclose(controls.first[:, 0], controls.first[:, 1], atol=1e-9)
        np.testing.assert_allclose(controls.second[:, 0], controls.second[:, 1], atol=1e-9)

    def test_solve_is_deterministic_and_does_not_mutate_input(self) -> None:
        before = self.points.copy()
        again = solve_control_points(self.points)
        self.assertTrue(np.array_equal(before, self.points))
        self.assertTrue(np.array_equal(again.first, self.controls.first))
        self.assertTrue(np.array_equal(again.second, self.controls.second))


if __name__ == "__main__":
    unittest.main()
