"""
Ring Flight Simulation - Type Definitions

This module provides TypedDict definitions for structured return types,
improving type safety and IDE support.
"""

from typing import List, TypedDict

import numpy as np
from numpy.typing import NDArray


class ForceBreakdown(TypedDict):
    """Return type for force computation details (world frame, N)."""
    thrust: NDArray[np.float64]  # Along the nose, scaled by throttle
    drag: NDArray[np.float64]  # Opposes velocity, quadratic in speed
    lift: NDArray[np.float64]  # Along body up, quadratic in speed
    gravity: NDArray[np.float64]  # Constant weight
    total: NDArray[np.float64]  # Sum of the above
    thrust_magnitude: float
    drag_magnitude: float
    lift_magnitude: float
    speed: float  # Speed the aero forces were evaluated at (m/s)


class StepReport(TypedDict):
    """Return type for a single simulator tick."""
    forces: ForceBreakdown
    rings_passed: List[int]  # Indices into the ring list at check time
    score_gained: int
    flameout: bool  # Fuel reached zero during this tick
    ground_contact: bool  # Position was clamped to the ground
