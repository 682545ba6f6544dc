"""Tests for 3-vector helpers."""

import unittest

import numpy as np

from flightsim import vector


class TestArithmetic(unittest.TestCase):
    """Tests for basic vector arithmetic."""

    def test_add_subtract(self):
        a = vector.vec3(1.0, 2.0, 3.0)
        b = vector.vec3(4.0, 5.0, 6.0)
        np.testing.assert_array_almost_equal(vector.add(a, b), [5.0, 7.0, 9.0])
        np.testing.assert_array_almost_equal(vector.subtract(b, a), [3.0, 3.0, 3.0])

    def test_scale_divide(self):
        v = vector.vec3(2.0, -4.0, 6.0)
        np.testing.assert_array_almost_equal(vector.scale(v, 0.5), [1.0, -2.0, 3.0])
        np.testing.assert_array_almost_equal(vector.divide(v, 2.0), [1.0, -2.0, 3.0])

    def test_operands_not_mutated(self):
        """Helpers return new arrays and leave inputs alone."""
        a = vector.vec3(1.0, 1.0, 1.0)
        b = vector.vec3(2.0, 2.0, 2.0)
        vector.add(a, b)
        vector.scale(a, 10.0)
        vector.normalize(b)
        np.testing.assert_array_equal(a, [1.0, 1.0, 1.0])
        np.testing.assert_array_equal(b, [2.0, 2.0, 2.0])

    def test_dot_cross(self):
        x = vector.vec3(1.0, 0.0, 0.0)
        y = vector.vec3(0.0, 1.0, 0.0)
        self.assertAlmostEqual(vector.dot(x, y), 0.0)
        self.assertAlmostEqual(vector.dot(x, x), 1.0)
        np.testing.assert_array_almost_equal(vector.cross(x, y), [0.0, 0.0, 1.0])

    def test_length(self):
        self.assertAlmostEqual(vector.length(vector.vec3(3.0, 4.0, 0.0)), 5.0)


class TestNormalize(unittest.TestCase):
    """Tests for normalization and the near-zero policy."""

    def test_unit_result(self):
        result = vector.normalize(vector.vec3(3.0, 4.0, 0.0))
        np.testing.assert_array_almost_equal(result, [0.6, 0.8, 0.0])

    def test_near_zero_returns_zero(self):
        result = vector.normalize(vector.vec3(1e-7, 0.0, 0.0))
        np.testing.assert_array_equal(result, [0.0, 0.0, 0.0])

    def test_exact_zero_is_finite(self):
        result = vector.normalize(np.zeros(3))
        self.assertTrue(np.all(np.isfinite(result)))
        np.testing.assert_array_equal(result, [0.0, 0.0, 0.0])

    def test_just_above_epsilon_normalizes(self):
        result = vector.normalize(vector.vec3(0.0, 2e-6, 0.0))
        np.testing.assert_array_almost_equal(result, [0.0, 1.0, 0.0])


class TestRotations(unittest.TestCase):
    """Tests for single-axis rotations."""

    def test_rotate_x_quarter_turn(self):
        result = vector.rotate_x(vector.vec3(0.0, 1.0, 0.0), np.pi / 2)
        np.testing.assert_array_almost_equal(result, [0.0, 0.0, 1.0])

    def test_rotate_y_quarter_turn(self):
        result = vector.rotate_y(vector.vec3(1.0, 0.0, 0.0), np.pi / 2)
        np.testing.assert_array_almost_equal(result, [0.0, 0.0, -1.0])

    def test_rotate_z_quarter_turn(self):
        result = vector.rotate_z(vector.vec3(1.0, 0.0, 0.0), np.pi / 2)
        np.testing.assert_array_almost_equal(result, [0.0, 1.0, 0.0])

    def test_rotation_preserves_length(self):
        v = vector.vec3(1.0, -2.0, 3.0)
        for rotate in (vector.rotate_x, vector.rotate_y, vector.rotate_z):
            self.assertAlmostEqual(vector.length(rotate(v, 0.7)), vector.length(v))

    def test_axis_is_fixed(self):
        """Rotating a vector about its own axis leaves it unchanged."""
        np.testing.assert_array_almost_equal(
            vector.rotate_z(vector.vec3(0.0, 0.0, 2.0), 1.3), [0.0, 0.0, 2.0])


if __name__ == '__main__':
    unittest.main()
