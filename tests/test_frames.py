"""Tests for the orientation model."""

import unittest

import numpy as np

from flightsim import frames
from flightsim import vector


class TestForwardVector(unittest.TestCase):
    """Tests for the nose direction."""

    def test_level_flight(self):
        np.testing.assert_array_almost_equal(frames.forward_vector(0.0, 0.0, 0.0), [0.0, 0.0, 1.0])

    def test_yaw_quarter_turn(self):
        np.testing.assert_array_almost_equal(
            frames.forward_vector(np.pi / 2, 0.0, 0.0), [1.0, 0.0, 0.0])

    def test_positive_pitch_rotates_about_x(self):
        """Pitch follows the right-handed X rotation of +Z."""
        s = np.sin(np.pi / 4)
        np.testing.assert_array_almost_equal(
            frames.forward_vector(0.0, np.pi / 4, 0.0), [0.0, -s, s])

    def test_roll_does_not_move_nose(self):
        np.testing.assert_array_almost_equal(
            frames.forward_vector(0.0, 0.0, 0.6), [0.0, 0.0, 1.0])

    def test_yaw_periodicity(self):
        np.testing.assert_array_almost_equal(
            frames.forward_vector(0.4 + 2 * np.pi * 5, 0.1, 0.2),
            frames.forward_vector(0.4, 0.1, 0.2))


class TestUpVector(unittest.TestCase):
    """Tests for the lift direction."""

    def test_level_flight(self):
        np.testing.assert_array_almost_equal(frames.up_vector(0.0, 0.0, 0.0), [0.0, 1.0, 0.0])

    def test_roll_quarter_turn(self):
        np.testing.assert_array_almost_equal(
            frames.up_vector(0.0, 0.0, np.pi / 2), [-1.0, 0.0, 0.0])

    def test_unit_length(self):
        self.assertAlmostEqual(vector.length(frames.up_vector(1.1, -0.3, 0.9)), 1.0)


class TestRotationOrder(unittest.TestCase):
    """Roll, then pitch, then yaw."""

    def test_matches_composed_rotations(self):
        yaw, pitch, roll = 0.3, 0.2, 0.5
        expected = vector.rotate_y(
            vector.rotate_x(vector.rotate_z(np.array([0.0, 1.0, 0.0]), roll), pitch), yaw)
        np.testing.assert_array_almost_equal(frames.up_vector(yaw, pitch, roll), expected)

    def test_order_matters(self):
        yaw, pitch, roll = 0.3, 0.2, 0.5
        reversed_order = vector.rotate_z(
            vector.rotate_x(vector.rotate_y(np.array([0.0, 1.0, 0.0]), yaw), pitch), roll)
        self.assertFalse(np.allclose(frames.up_vector(yaw, pitch, roll), reversed_order))

    def test_axes_stay_orthogonal(self):
        for yaw, pitch, roll in [(0.0, 0.0, 0.0), (1.0, 0.5, -0.7), (-2.5, -0.78, 1.39)]:
            forward, up = frames.body_axes(yaw, pitch, roll)
            self.assertAlmostEqual(float(np.dot(forward, up)), 0.0, places=10)


class TestHeadingVector(unittest.TestCase):

    def test_stays_in_ground_plane(self):
        h = frames.horizontal_heading_vector(0.8)
        self.assertAlmostEqual(h[1], 0.0)
        self.assertAlmostEqual(vector.length(h), 1.0)


if __name__ == '__main__':
    unittest.main()
