"""
Ring Flight Simulation - Physical Constants and Game Parameters

This module defines the airframe constants, control step sizes, ring-field
layout parameters and numerical tolerances used throughout the simulation.

VALUES FROM: the text-mode simulator (canonical profile). Browser-build
tuning values are grouped separately at the bottom of the file.
"""

import numpy as np

# =============================================================================
# UNIT CONVERSION
# =============================================================================

DEG_TO_RAD = np.pi / 180.0
RAD_TO_DEG = 180.0 / np.pi

# =============================================================================
# ENVIRONMENT
# =============================================================================

# Gravitational acceleration (m/s^2)
GRAVITY = 9.81

# Ground plane height (m)
GROUND_LEVEL = 0.0

# Vertical velocity multiplier applied on ground contact while descending
BOUNCE_DAMPING = -0.2

# =============================================================================
# AIRFRAME PARAMETERS
# =============================================================================

MASS = 750.0                 # kg
THRUST_POWER = 26000.0       # N at full throttle
DRAG_COEFFICIENT = 0.04      # simplified quadratic drag
LIFT_COEFFICIENT = 0.018     # scales with speed^2

# Roll adds a slight yawing turn (rad/s of yaw per rad of roll)
ROLL_YAW_COUPLING = 0.35

# =============================================================================
# FUEL
# =============================================================================

INITIAL_FUEL = 120.0         # fuel units
FUEL_BURN_RATE = 0.25        # fuel units per second at full throttle

# =============================================================================
# ATTITUDE & THROTTLE LIMITS
# =============================================================================

PITCH_LIMIT = 45.0 * DEG_TO_RAD   # rad, symmetric
ROLL_LIMIT = 80.0 * DEG_TO_RAD    # rad, symmetric
THROTTLE_MIN = 0.0
THROTTLE_MAX = 1.0

# =============================================================================
# INITIAL CONDITIONS
# =============================================================================

INITIAL_POSITION = np.array([0.0, 80.0, 0.0])   # m
INITIAL_VELOCITY = np.array([0.0, 0.0, 30.0])   # m/s
INITIAL_YAW = 0.0
INITIAL_PITCH = 0.0
INITIAL_ROLL = 0.0
INITIAL_THROTTLE = 0.4

# =============================================================================
# BODY AXES (reference directions before rotation)
# =============================================================================

BODY_FORWARD_AXIS = np.array([0.0, 0.0, 1.0])
BODY_UP_AXIS = np.array([0.0, 1.0, 0.0])

# =============================================================================
# CONTROL STEP SIZES (per text token)
# =============================================================================

PITCH_STEP = 0.8 * DEG_TO_RAD
YAW_STEP = 1.2 * DEG_TO_RAD
ROLL_STEP = 1.4 * DEG_TO_RAD
THROTTLE_STEP = 0.04

# =============================================================================
# RING FIELD
# =============================================================================

DEFAULT_RING_COUNT = 6
RING_SPACING = 320.0                      # m between rings along +Z
RING_LATERAL_RANGE = (-220.0, 220.0)      # m, uniform in X
RING_ALTITUDE_RANGE = (40.0, 220.0)       # m, uniform in Y
RING_RADIUS = 45.0                        # m
RING_SCORE = 100

# =============================================================================
# SIMULATION TIMING
# =============================================================================

DT = 0.1   # s per tick

# =============================================================================
# NUMERICAL TOLERANCES
# =============================================================================

NORMALIZE_EPSILON = 1e-6   # Below this length a vector normalizes to zero

# =============================================================================
# BROWSER BUILD TUNING (arcade profile)
# =============================================================================

MAX_FRAME_DT = 0.05              # s, cap on wall-clock frame delta
ARCADE_RING_COUNT = 4
MAX_ACTIVE_RINGS = 6

# Respawned rings appear ahead of the aircraft
RESPAWN_DISTANCE_RANGE = (500.0, 1100.0)   # m along heading
RESPAWN_HEADING_SPREAD = 1.2               # rad, full width around heading
RESPAWN_ALTITUDE_RANGE = (30.0, 150.0)     # m
RESPAWN_RADIUS_RANGE = (40.0, 70.0)        # m

# Key-state control rates
KEY_THROTTLE_RATE = 0.25                   # per second
KEY_YAW_RATE = 1.4                         # rad/s
KEY_PITCH_RATE = 35.0 * DEG_TO_RAD         # rad/s


def print_config():
    """Print configuration summary."""
    print("=" * 60)
    print("Ring Flight Simulation Configuration")
    print("=" * 60)
    print(f"Mass: {MASS:,.0f} kg")
    print(f"Thrust: {THRUST_POWER/1e3:.1f} kN")
    print(f"Drag / lift coefficients: {DRAG_COEFFICIENT} / {LIFT_COEFFICIENT}")
    print(f"Fuel: {INITIAL_FUEL:.0f} u, burn {FUEL_BURN_RATE} u/s at full throttle")
    print(f"Pitch limit: ±{PITCH_LIMIT * RAD_TO_DEG:.0f} degrees")
    print(f"Roll limit: ±{ROLL_LIMIT * RAD_TO_DEG:.0f} degrees")
    print(f"Rings: {DEFAULT_RING_COUNT} every {RING_SPACING:.0f} m, radius {RING_RADIUS:.0f} m")
    print("=" * 60)
