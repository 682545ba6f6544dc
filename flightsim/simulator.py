"""
Ring Flight Simulation - Simulator

Owns the flight state and the ring field and advances them one fixed
timestep per call to step(). Execution order inside a tick:

1. Apply control deltas (clamped)
2. Integrate forces (explicit Euler), burn fuel
3. Check ring passage
4. Clamp to ground

Coordinate frame: X lateral, Y up, Z along the initial course.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from . import constants as C
from .config import SimulationConfig, create_default_config
from .controls import ControlInput, NEUTRAL
from .frames import body_axes
from .rings import Ring, count_remaining, generate_rings, make_rng, spawn_ring_ahead
from .state import FlightState, create_initial_state
from .types import ForceBreakdown, StepReport
from .utils import clamp

# Configure module logger
logger = logging.getLogger(__name__)


def compute_forces(state: FlightState, config: SimulationConfig) -> ForceBreakdown:
    """
    Compute all forces acting on the aircraft for the current attitude.

    thrust  = forward * thrust_power * throttle
    drag    = -drag_coefficient * |v| * v
    lift    = up * lift_coefficient * |v|^2
    gravity = (0, -m g, 0)

    Args:
        state: Current flight state
        config: Airframe parameters

    Returns:
        ForceBreakdown in world frame (N)
    """
    forward, up = body_axes(state.yaw, state.pitch, state.roll)
    speed = state.speed

    F_thrust = forward * (config.thrust_power * state.throttle)
    F_drag = state.velocity * (-config.drag_coefficient * speed)
    F_lift = up * (config.lift_coefficient * speed * speed)
    F_grav = np.array([0.0, -config.mass * config.gravity, 0.0])

    return {
        'thrust': F_thrust,
        'drag': F_drag,
        'lift': F_lift,
        'gravity': F_grav,
        'total': F_thrust + F_drag + F_lift + F_grav,
        'thrust_magnitude': float(np.linalg.norm(F_thrust)),
        'drag_magnitude': float(np.linalg.norm(F_drag)),
        'lift_magnitude': float(np.linalg.norm(F_lift)),
        'speed': speed,
    }


class Simulator:
    """
    Single-aircraft ring course simulation.

    Args:
        ring_count: Number of rings to generate. Defaults to config.ring_count.
        config: SimulationConfig instance. If None a default is created.
        seed: Ring layout seed. Defaults to config.ring_seed; None draws
            fresh OS entropy (non-reproducible course).
        rings: Explicit ring list; skips generation when given.
        initial_state: Optional starting state. If None, built from config.
    """

    def __init__(self, ring_count: Optional[int] = None,
                 config: Optional[SimulationConfig] = None,
                 seed: Optional[int] = None,
                 rings: Optional[Sequence[Ring]] = None,
                 initial_state: Optional[FlightState] = None):
        if config is None:
            config = create_default_config()
        if seed is None:
            seed = config.ring_seed
        if ring_count is None:
            ring_count = config.ring_count

        self.config = config
        self.seed = seed
        self._rng = make_rng(seed)

        if initial_state is not None:
            self._state = initial_state.copy()
        else:
            self._state = create_initial_state(config)

        if rings is not None:
            self._rings: List[Ring] = [ring.copy() for ring in rings]
        else:
            self._rings = generate_rings(ring_count, self._rng, config)

        logger.debug(f"Simulator created: seed={seed}, rings={len(self._rings)}, "
                     f"profile={config.profile}")

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> FlightState:
        return self._state

    @property
    def rings(self) -> Tuple[Ring, ...]:
        """Snapshot of the rings in generation order."""
        return tuple(ring.copy() for ring in self._rings)

    @property
    def rings_remaining(self) -> int:
        return count_remaining(self._rings)

    def compute_forces(self) -> ForceBreakdown:
        """Forces for the current state, without advancing time."""
        return compute_forces(self._state, self.config)

    # ------------------------------------------------------------------
    # Integration
    # ------------------------------------------------------------------

    def step(self, control: Optional[ControlInput] = None, dt: Optional[float] = None) -> StepReport:
        """
        Advance the simulation by one tick.

        Args:
            control: Per-tick control deltas. None means no input.
            dt: Time step (s). Defaults to config.dt.

        Returns:
            StepReport describing what happened during the tick

        Raises:
            ValueError: If dt is not a positive finite number or a control
                delta is NaN or infinite
        """
        if control is None:
            control = NEUTRAL
        if dt is None:
            dt = self.config.dt
        if not np.isfinite(dt) or dt <= 0:
            raise ValueError(f"Time step dt must be positive, got {dt}")
        if not np.all(np.isfinite([control.throttle_delta, control.pitch_delta,
                                   control.yaw_delta, control.roll_delta])):
            raise ValueError(f"Control input contains non-finite values: {control}")

        self._apply_input(control)
        forces, flameout = self._integrate(dt)
        passed, gained = self._check_rings()
        grounded = self._clamp_to_ground()

        return {
            'forces': forces,
            'rings_passed': passed,
            'score_gained': gained,
            'flameout': flameout,
            'ground_contact': grounded,
        }

    def _apply_input(self, control: ControlInput):
        s = self._state
        cfg = self.config
        s.throttle = clamp(s.throttle + control.throttle_delta, C.THROTTLE_MIN, C.THROTTLE_MAX)
        s.pitch = clamp(s.pitch + control.pitch_delta, -cfg.pitch_limit, cfg.pitch_limit)
        s.yaw += control.yaw_delta
        s.roll = clamp(s.roll + control.roll_delta, -cfg.roll_limit, cfg.roll_limit)

    def _integrate(self, dt: float) -> Tuple[ForceBreakdown, bool]:
        s = self._state
        cfg = self.config

        # Forces use the attitude before the banked-turn yaw update
        forces = compute_forces(s, cfg)

        # Banked turn: roll gradually rotates the heading
        s.yaw += s.roll * cfg.roll_yaw_coupling * dt

        acceleration = forces['total'] / cfg.mass
        s.velocity = s.velocity + acceleration * dt
        s.position = s.position + s.velocity * dt

        fuel_before = s.fuel
        fuel_use = cfg.fuel_burn_rate * s.throttle * dt
        s.fuel = max(0.0, s.fuel - fuel_use)

        flameout = False
        if s.fuel <= 0.0:
            s.throttle = 0.0
            if fuel_before > 0.0:
                flameout = True
                logger.info("Fuel exhausted: engine flame-out")

        return forces, flameout

    def _check_rings(self) -> Tuple[List[int], int]:
        s = self._state
        passed = []
        for index, ring in enumerate(self._rings):
            if ring.passed:
                continue
            if ring.contains(s.position):
                ring.mark_passed()
                s.score += self.config.ring_score
                passed.append(index)
                logger.info(f"Ring {index} passed at {np.round(ring.position, 1).tolist()} "
                            f"(score {s.score})")

        if passed and self.config.enable_ring_respawn:
            self._respawn(len(passed))

        return passed, len(passed) * self.config.ring_score

    def _respawn(self, count: int):
        s = self._state
        for _ in range(count):
            self._rings.append(spawn_ring_ahead(s.position, s.yaw, self._rng, self.config))
        while len(self._rings) > self.config.max_active_rings:
            dropped = self._rings.pop(0)
            logger.debug(f"Dropped oldest ring at {np.round(dropped.position, 1).tolist()}")

    def _clamp_to_ground(self) -> bool:
        s = self._state
        if s.position[1] >= C.GROUND_LEVEL:
            return False

        position = s.position.copy()
        position[1] = C.GROUND_LEVEL
        s.position = position

        if s.velocity[1] < 0.0:
            velocity = s.velocity.copy()
            velocity[1] *= self.config.bounce_damping
            s.velocity = velocity
        return True


def frame_dt(elapsed: float, max_dt: float = C.MAX_FRAME_DT) -> float:
    """
    Timestep for a wall-clock driven frame.

    Elapsed wall-clock time is capped at max_dt. Non-positive or NaN elapsed
    times yield 0; callers skip the frame.
    """
    if not np.isfinite(elapsed) or elapsed <= 0.0:
        return 0.0
    return min(max_dt, elapsed)
