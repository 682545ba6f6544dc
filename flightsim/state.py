"""
Ring Flight Simulation - Flight State

This module defines the single flight state dataclass. The simulator owns
exactly one instance for its lifetime and is the only writer.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from . import constants as C
from .config import SimulationConfig, create_default_config
from .frames import forward_vector
from .utils import wrap_degrees


@dataclass
class FlightState:
    """
    Mutable flight state record.

    Attributes:
        position: World position (m) [3]
        velocity: World velocity (m/s) [3]
        yaw: Heading angle (rad), unbounded
        pitch: Pitch angle (rad), clamped by the simulator
        roll: Roll angle (rad), clamped by the simulator
        throttle: Throttle setting [0, 1]
        fuel: Remaining fuel units, never negative
        score: Accumulated ring score
    """

    position: np.ndarray = field(default_factory=lambda: C.INITIAL_POSITION.copy())
    velocity: np.ndarray = field(default_factory=lambda: C.INITIAL_VELOCITY.copy())
    yaw: float = C.INITIAL_YAW
    pitch: float = C.INITIAL_PITCH
    roll: float = C.INITIAL_ROLL
    throttle: float = C.INITIAL_THROTTLE
    fuel: float = C.INITIAL_FUEL
    score: int = 0

    def __post_init__(self):
        """Ensure vectors are numpy arrays with correct dtype."""
        for attr in ['position', 'velocity']:
            setattr(self, attr, np.asarray(getattr(self, attr), dtype=np.float64))

    def copy(self) -> 'FlightState':
        """Create a deep copy of the state."""
        return FlightState(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            yaw=self.yaw,
            pitch=self.pitch,
            roll=self.roll,
            throttle=self.throttle,
            fuel=self.fuel,
            score=self.score,
        )

    @property
    def altitude(self) -> float:
        """Height above the ground plane (m)."""
        return float(self.position[1]) - C.GROUND_LEVEL

    @property
    def speed(self) -> float:
        """Magnitude of velocity (m/s)."""
        return float(np.linalg.norm(self.velocity))

    @property
    def forward_speed(self) -> float:
        """Velocity component along the nose (m/s)."""
        return float(np.dot(self.velocity, forward_vector(self.yaw, self.pitch, self.roll)))

    @property
    def heading_deg(self) -> float:
        """Yaw wrapped to [0, 360) degrees, for display."""
        return wrap_degrees(self.yaw)

    @property
    def out_of_fuel(self) -> bool:
        return self.fuel <= 0.0

    def __str__(self) -> str:
        """Human-readable state summary."""
        return (
            f"FlightState(alt={self.altitude:.1f}m, "
            f"v={self.speed:.1f}m/s, "
            f"thr={self.throttle * 100:.0f}%, "
            f"fuel={self.fuel:.2f}u, "
            f"score={self.score})"
        )


def create_initial_state(config: Optional[SimulationConfig] = None) -> FlightState:
    """
    Create the initial state for the simulation.

    Args:
        config: Source of initial conditions. Defaults are used if None.

    Returns:
        FlightState initialized with launch conditions.
    """
    if config is None:
        config = create_default_config()
    return FlightState(
        position=np.array(config.initial_position, dtype=np.float64),
        velocity=np.array(config.initial_velocity, dtype=np.float64),
        yaw=config.initial_yaw,
        pitch=config.initial_pitch,
        roll=config.initial_roll,
        throttle=config.initial_throttle,
        fuel=config.initial_fuel,
        score=0,
    )
