"""
Ring Flight Simulation - Utility Functions

Small scalar helpers shared by the simulator, the input adapter and the HUD.
"""

import numpy as np

from . import constants as C


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Bound a scalar to [min_value, max_value]."""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def wrap_degrees(angle_rad: float) -> float:
    """
    Convert an unbounded angle to degrees in [0, 360).

    Display only: the physics state keeps yaw unbounded.
    """
    return float(np.mod(angle_rad * C.RAD_TO_DEG, 360.0))
