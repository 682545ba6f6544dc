"""
Ring Flight Simulation - Validation Checks

Post-step invariant checks:
- Finite position / velocity / attitude
- Throttle within [0, 1]
- Pitch and roll within their limits
- Fuel non-negative
- Aircraft not below the ground plane

The simulator itself clamps every one of these; a failure here means a bug
or a hand-edited state, and the driver aborts the run.
"""

from typing import Optional, Tuple

import numpy as np

from . import constants as C
from .config import SimulationConfig, create_default_config
from .state import FlightState

# Slack for float round-off at the clamp boundaries
LIMIT_TOLERANCE = 1e-9


class ValidationError(Exception):
    """Raised when a flight-state invariant is broken."""
    pass


def check_finite(state: FlightState) -> bool:
    """
    Verify no NaN/Inf has leaked into the state.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if not np.all(np.isfinite(state.position)):
        raise ValidationError(f"Non-finite position: {state.position}")
    if not np.all(np.isfinite(state.velocity)):
        raise ValidationError(f"Non-finite velocity: {state.velocity}")
    for name in ('yaw', 'pitch', 'roll', 'throttle', 'fuel'):
        value = getattr(state, name)
        if not np.isfinite(value):
            raise ValidationError(f"Non-finite {name}: {value}")
    return True


def check_throttle(throttle: float) -> bool:
    if throttle < C.THROTTLE_MIN - LIMIT_TOLERANCE or throttle > C.THROTTLE_MAX + LIMIT_TOLERANCE:
        raise ValidationError(f"Throttle out of range: {throttle:.6f}")
    return True


def check_attitude(pitch: float, roll: float, pitch_limit: float, roll_limit: float) -> bool:
    """
    Check pitch and roll against their symmetric limits.

    Args:
        pitch: Pitch angle (rad)
        roll: Roll angle (rad)
        pitch_limit: Maximum |pitch| (rad)
        roll_limit: Maximum |roll| (rad)

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if abs(pitch) > pitch_limit + LIMIT_TOLERANCE:
        raise ValidationError(
            f"Pitch limit violation: {np.degrees(pitch):.3f} deg, "
            f"limit = ±{np.degrees(pitch_limit):.1f} deg"
        )
    if abs(roll) > roll_limit + LIMIT_TOLERANCE:
        raise ValidationError(
            f"Roll limit violation: {np.degrees(roll):.3f} deg, "
            f"limit = ±{np.degrees(roll_limit):.1f} deg"
        )
    return True


def check_fuel(fuel: float) -> bool:
    if fuel < 0.0:
        raise ValidationError(f"Negative fuel: {fuel:.6f}")
    return True


def check_above_ground(position: np.ndarray) -> bool:
    if position[1] < C.GROUND_LEVEL:
        raise ValidationError(f"Aircraft below ground: y = {position[1]:.3f} m")
    return True


def validate_state(state: FlightState, config: Optional[SimulationConfig] = None,
                   abort_on_error: bool = True) -> Tuple[bool, Optional[str]]:
    """
    Perform all validation checks on a state.

    Args:
        state: State to validate
        config: Source of attitude limits. Defaults are used if None.
        abort_on_error: If True, raise exception on first error
    """
    if config is None:
        config = create_default_config()
    try:
        check_finite(state)
        check_throttle(state.throttle)
        check_attitude(state.pitch, state.roll, config.pitch_limit, config.roll_limit)
        check_fuel(state.fuel)
        check_above_ground(state.position)
        return True, None
    except ValidationError as e:
        if abort_on_error:
            raise
        return False, str(e)
