"""
Ring Flight Simulation - Vector Math

3-vectors are plain numpy float64 arrays of shape (3,). Every helper returns
a new array and leaves its arguments untouched, so vectors can be shared
between the state, the rings and diagnostics without aliasing surprises.
"""

import numpy as np

from . import constants as C


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Build a 3-vector."""
    return np.array([x, y, z], dtype=np.float64)


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.add(a, b)


def subtract(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.subtract(a, b)


def scale(v: np.ndarray, scalar: float) -> np.ndarray:
    return np.multiply(v, scalar)


def divide(v: np.ndarray, scalar: float) -> np.ndarray:
    return np.divide(v, scalar)


def dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.dot(a, b))


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.cross(a, b)


def length(v: np.ndarray) -> float:
    """Euclidean norm."""
    return float(np.linalg.norm(v))


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Scale a vector to unit length.

    Vectors shorter than NORMALIZE_EPSILON come back as the zero vector
    instead of dividing by (almost) zero.

    Args:
        v: Input vector

    Returns:
        Unit vector, or zeros for a degenerate input
    """
    norm = length(v)
    if norm < C.NORMALIZE_EPSILON:
        return np.zeros(3)
    return v / norm


def rotate_x(v: np.ndarray, angle: float) -> np.ndarray:
    """Rotate about the X axis by angle (rad)."""
    c = np.cos(angle)
    s = np.sin(angle)
    x, y, z = v
    return np.array([x, y * c - z * s, y * s + z * c])


def rotate_y(v: np.ndarray, angle: float) -> np.ndarray:
    """Rotate about the Y axis by angle (rad)."""
    c = np.cos(angle)
    s = np.sin(angle)
    x, y, z = v
    return np.array([x * c + z * s, y, -x * s + z * c])


def rotate_z(v: np.ndarray, angle: float) -> np.ndarray:
    """Rotate about the Z axis by angle (rad)."""
    c = np.cos(angle)
    s = np.sin(angle)
    x, y, z = v
    return np.array([x * c - y * s, x * s + y * c, z])
