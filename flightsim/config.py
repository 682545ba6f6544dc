"""
Ring Flight Simulation - Configuration

This module provides a SimulationConfig dataclass for dependency injection,
allowing different airframe and game parameters to be passed without
modifying global constants.

Optional features (ring respawn) default to OFF so the canonical text-mode
behaviour is unchanged until the caller explicitly enables them.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from . import constants as C


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for simulation parameters.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.

    Section grouping:
      1. Simulation timing
      2. Airframe
      3. Attitude / throttle limits
      4. Fuel
      5. Initial conditions
      6. Ring field
      7. Ring respawn (browser build)
      8. Validation / misc
    """

    # ── 1. Simulation timing ─────────────────────────────────────────────
    dt: float = C.DT
    max_ticks: Optional[int] = None       # None → run until fuel or input ends
    max_frame_dt: float = C.MAX_FRAME_DT  # cap for wall-clock drivers

    # ── 2. Airframe ──────────────────────────────────────────────────────
    mass: float = C.MASS
    thrust_power: float = C.THRUST_POWER
    drag_coefficient: float = C.DRAG_COEFFICIENT
    lift_coefficient: float = C.LIFT_COEFFICIENT
    gravity: float = C.GRAVITY
    roll_yaw_coupling: float = C.ROLL_YAW_COUPLING
    bounce_damping: float = C.BOUNCE_DAMPING

    # ── 3. Attitude / throttle limits ────────────────────────────────────
    pitch_limit: float = C.PITCH_LIMIT    # rad
    roll_limit: float = C.ROLL_LIMIT      # rad

    # ── 4. Fuel ──────────────────────────────────────────────────────────
    initial_fuel: float = C.INITIAL_FUEL
    fuel_burn_rate: float = C.FUEL_BURN_RATE

    # ── 5. Initial conditions ────────────────────────────────────────────
    initial_position: Tuple[float, float, float] = tuple(C.INITIAL_POSITION.tolist())
    initial_velocity: Tuple[float, float, float] = tuple(C.INITIAL_VELOCITY.tolist())
    initial_yaw: float = C.INITIAL_YAW
    initial_pitch: float = C.INITIAL_PITCH
    initial_roll: float = C.INITIAL_ROLL
    initial_throttle: float = C.INITIAL_THROTTLE

    # ── 6. Ring field ────────────────────────────────────────────────────
    ring_count: int = C.DEFAULT_RING_COUNT
    ring_seed: Optional[int] = None       # None → resolved by the driver
    ring_spacing: float = C.RING_SPACING
    ring_lateral_range: Tuple[float, float] = C.RING_LATERAL_RANGE
    ring_altitude_range: Tuple[float, float] = C.RING_ALTITUDE_RANGE
    ring_radius: float = C.RING_RADIUS
    ring_score: int = C.RING_SCORE

    # ── 7. Ring respawn (browser build) ──────────────────────────────────
    enable_ring_respawn: bool = False
    max_active_rings: int = C.MAX_ACTIVE_RINGS
    respawn_distance_range: Tuple[float, float] = C.RESPAWN_DISTANCE_RANGE
    respawn_heading_spread: float = C.RESPAWN_HEADING_SPREAD
    respawn_altitude_range: Tuple[float, float] = C.RESPAWN_ALTITUDE_RANGE
    respawn_radius_range: Tuple[float, float] = C.RESPAWN_RADIUS_RANGE

    # ── 8. Validation / misc ─────────────────────────────────────────────
    validate_each_step: bool = True
    verbose: bool = True
    profile: str = "default"


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_test_config(dt: float = 0.1, ring_seed: int = 1234,
                       **overrides) -> SimulationConfig:
    """Create a quiet, deterministic config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(dt=dt, ring_seed=ring_seed, verbose=False, profile="test")
    defaults.update(overrides)
    return SimulationConfig(**defaults)


def create_arcade_config(**overrides) -> SimulationConfig:
    """Browser-build tuning: fewer starting rings that respawn ahead."""
    defaults = dict(
        ring_count=C.ARCADE_RING_COUNT,
        enable_ring_respawn=True,
        max_active_rings=C.MAX_ACTIVE_RINGS,
        profile="arcade",
    )
    defaults.update(overrides)
    return SimulationConfig(**defaults)


PROFILES = {
    "default": create_default_config,
    "arcade": create_arcade_config,
}
