"""
Ring Flight Simulation - Orientation Model

Body-to-world directions derived from Euler angles. No rotation matrix or
quaternion is kept in the state; the nose and lift directions are rebuilt
from yaw/pitch/roll every time they are needed.

Rotation order: roll (about Z), then pitch (about X), then yaw (about Y).
Rotations do not commute, so this order is part of the model.
"""

from typing import Tuple

import numpy as np

from . import constants as C
from .vector import normalize, rotate_x, rotate_y, rotate_z


def body_to_world(v_body: np.ndarray, yaw: float, pitch: float, roll: float) -> np.ndarray:
    """
    Transform a body-frame direction into the world frame.

    Args:
        v_body: Direction in body frame
        yaw: Heading angle (rad), unbounded
        pitch: Pitch angle (rad)
        roll: Roll angle (rad)

    Returns:
        Unit direction in world frame
    """
    v = rotate_z(v_body, roll)
    v = rotate_x(v, pitch)
    v = rotate_y(v, yaw)
    return normalize(v)


def forward_vector(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """Nose direction (thrust axis) in world frame."""
    return body_to_world(C.BODY_FORWARD_AXIS, yaw, pitch, roll)


def up_vector(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """Lift direction in world frame."""
    return body_to_world(C.BODY_UP_AXIS, yaw, pitch, roll)


def body_axes(yaw: float, pitch: float, roll: float) -> Tuple[np.ndarray, np.ndarray]:
    """Return (forward, up) for the given attitude."""
    return forward_vector(yaw, pitch, roll), up_vector(yaw, pitch, roll)


def horizontal_heading_vector(yaw: float) -> np.ndarray:
    """Unit vector in the ground plane pointing along the heading."""
    return rotate_y(C.BODY_FORWARD_AXIS, yaw)
