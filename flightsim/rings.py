"""
Ring Flight Simulation - Ring Field

Scoring rings laid out ahead of the start position. Layout is drawn from a
numpy Generator so a given seed always produces the same course.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from . import constants as C
from .config import SimulationConfig, create_default_config
from .frames import horizontal_heading_vector


@dataclass
class Ring:
    """
    A scoring target.

    Attributes:
        position: Ring centre in world frame (m) [3]
        radius: Capture radius (m)
        passed: Set once the aircraft flies through; never cleared
    """

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    radius: float = C.RING_RADIUS
    passed: bool = False

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64)

    def contains(self, point: np.ndarray) -> bool:
        """True if point lies within the capture sphere (boundary inclusive)."""
        return float(np.linalg.norm(point - self.position)) <= self.radius

    def copy(self) -> "Ring":
        return Ring(position=self.position.copy(), radius=self.radius, passed=self.passed)

    def mark_passed(self):
        self.passed = True


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Random source for ring layout."""
    return np.random.default_rng(seed)


def generate_rings(count: int, rng: np.random.Generator,
                   config: Optional[SimulationConfig] = None) -> List[Ring]:
    """
    Lay out the static ring course.

    Ring i sits at Z = spacing * (i + 1) with X and Y drawn uniformly from the
    configured lateral and altitude ranges.

    Args:
        count: Number of rings
        rng: Random generator
        config: Layout parameters. Defaults are used if None.

    Returns:
        Rings in generation order

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"Ring count must be non-negative, got {count}")
    if config is None:
        config = create_default_config()

    lat_lo, lat_hi = config.ring_lateral_range
    alt_lo, alt_hi = config.ring_altitude_range

    rings = []
    for i in range(count):
        x = rng.uniform(lat_lo, lat_hi)
        y = rng.uniform(alt_lo, alt_hi)
        z = config.ring_spacing * (i + 1)
        rings.append(Ring(position=np.array([x, y, z]), radius=config.ring_radius))
    return rings


def spawn_ring_ahead(position: np.ndarray, yaw: float, rng: np.random.Generator,
                     config: Optional[SimulationConfig] = None) -> Ring:
    """
    Place a new ring somewhere ahead of the aircraft.

    The ring lands at a random distance along the horizontal heading, offset
    by a random angle inside the configured spread.
    """
    if config is None:
        config = create_default_config()

    dist_lo, dist_hi = config.respawn_distance_range
    alt_lo, alt_hi = config.respawn_altitude_range
    rad_lo, rad_hi = config.respawn_radius_range

    distance = rng.uniform(dist_lo, dist_hi)
    angle = yaw + (rng.random() - 0.5) * config.respawn_heading_spread
    offset = horizontal_heading_vector(angle) * distance

    centre = np.array([
        position[0] + offset[0],
        rng.uniform(alt_lo, alt_hi),
        position[2] + offset[2],
    ])
    return Ring(position=centre, radius=rng.uniform(rad_lo, rad_hi))


def count_remaining(rings: List[Ring]) -> int:
    """Number of rings not yet passed."""
    return sum(1 for ring in rings if not ring.passed)
