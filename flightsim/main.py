"""
Ring Flight Simulation - Main Entry Point

This module implements the driver loops around the Simulator:
- run_session: text commands, one line per fixed tick
- run_realtime: held-key frames stamped with wall-clock time
- Telemetry logging (SimulationLog) and CSV export
- Post-step validation and termination rules
"""

import csv
import logging
import os
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from . import constants as C
from .config import SimulationConfig, create_default_config
from .controls import from_key_state, parse_command
from .simulator import Simulator, frame_dt
from .validation import ValidationError, validate_state

# Configure module logger
logger = logging.getLogger(__name__)

REASON_FUEL = "Fuel exhausted"
REASON_EXIT = "Exit requested"
REASON_INPUT_CLOSED = "Input closed"
REASON_TICK_LIMIT = "Tick limit reached"

EXIT_COMMAND = "exit"
HELP_COMMAND = "help"


@dataclass
class SimulationLog:
    """Container for logged simulation data."""
    tick: List[int] = field(default_factory=list)
    time: List[float] = field(default_factory=list)
    position_x: List[float] = field(default_factory=list)
    position_y: List[float] = field(default_factory=list)
    position_z: List[float] = field(default_factory=list)
    velocity_x: List[float] = field(default_factory=list)
    velocity_y: List[float] = field(default_factory=list)
    velocity_z: List[float] = field(default_factory=list)
    speed: List[float] = field(default_factory=list)
    yaw_deg: List[float] = field(default_factory=list)
    pitch_deg: List[float] = field(default_factory=list)
    roll_deg: List[float] = field(default_factory=list)
    throttle: List[float] = field(default_factory=list)
    fuel: List[float] = field(default_factory=list)
    score: List[int] = field(default_factory=list)
    rings_remaining: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tick)

    def append(self, simulator: Simulator, tick: int, t: float):
        """Log data from current tick."""
        s = simulator.state
        self.tick.append(tick)
        self.time.append(t)
        self.position_x.append(float(s.position[0]))
        self.position_y.append(float(s.position[1]))
        self.position_z.append(float(s.position[2]))
        self.velocity_x.append(float(s.velocity[0]))
        self.velocity_y.append(float(s.velocity[1]))
        self.velocity_z.append(float(s.velocity[2]))
        self.speed.append(s.speed)
        self.yaw_deg.append(s.yaw * C.RAD_TO_DEG)
        self.pitch_deg.append(s.pitch * C.RAD_TO_DEG)
        self.roll_deg.append(s.roll * C.RAD_TO_DEG)
        self.throttle.append(s.throttle)
        self.fuel.append(s.fuel)
        self.score.append(s.score)
        self.rings_remaining.append(simulator.rings_remaining)

    def to_csv(self, filename: str):
        """Write logged telemetry to CSV for offline analysis."""
        os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
        header = [
            'tick', 'time', 'pos_x', 'pos_y', 'pos_z',
            'vel_x', 'vel_y', 'vel_z', 'speed',
            'yaw_deg', 'pitch_deg', 'roll_deg',
            'throttle', 'fuel', 'score', 'rings_remaining',
        ]

        with open(filename, 'w', newline='') as fh:
            writer = csv.writer(fh)
            writer.writerow(header)
            for i in range(len(self.tick)):
                writer.writerow([
                    self.tick[i], self.time[i],
                    self.position_x[i], self.position_y[i], self.position_z[i],
                    self.velocity_x[i], self.velocity_y[i], self.velocity_z[i],
                    self.speed[i],
                    self.yaw_deg[i], self.pitch_deg[i], self.roll_deg[i],
                    self.throttle[i], self.fuel[i], self.score[i],
                    self.rings_remaining[i],
                ])


def check_termination(simulator: Simulator, tick: int,
                      max_ticks: Optional[int] = None) -> Tuple[bool, Optional[str]]:
    """
    Check if the session should end before the next tick.

    Args:
        simulator: Running simulator
        tick: Ticks completed so far
        max_ticks: Optional tick budget

    Returns:
        (should_terminate, reason) tuple
    """
    if simulator.state.fuel <= 0.0:
        return True, REASON_FUEL
    if max_ticks is not None and tick >= max_ticks:
        return True, REASON_TICK_LIMIT
    return False, None


def _validate(simulator: Simulator, config: SimulationConfig) -> Optional[str]:
    """Run post-step checks; return a termination reason on failure."""
    if not config.validate_each_step:
        return None
    try:
        validate_state(simulator.state, config)
    except ValidationError as e:
        logger.error(f"Validation failed: {e}")
        return f"Validation failure: {e}"
    return None


def run_session(commands: Iterable[str],
                config: Optional[SimulationConfig] = None,
                simulator: Optional[Simulator] = None,
                seed: Optional[int] = None,
                render: Optional[Callable[[Simulator, int, float], None]] = None,
                on_help: Optional[Callable[[], None]] = None) -> Tuple[Simulator, SimulationLog, str]:
    """
    Drive the simulator from a stream of text command lines.

    Each loop renders the current state, reads one line and steps once.
    "help" calls on_help without stepping; "exit" ends the session.

    Args:
        commands: Iterable of raw input lines
        config: SimulationConfig instance. If None a default is created.
        simulator: Pre-built simulator. Built from config and seed if None.
        seed: Ring layout seed when building the simulator
        render: Called with (simulator, tick, dt) before each read
        on_help: Called when the help command is read

    Returns:
        (simulator, log, termination_reason) tuple
    """
    if simulator is None:
        if config is None:
            config = create_default_config()
        simulator = Simulator(config=config, seed=seed)
    elif config is None:
        config = simulator.config

    dt = config.dt
    log = SimulationLog()
    log.append(simulator, 0, 0.0)

    logger.info(f"Starting session: dt={dt}s, rings={len(simulator.rings)}, "
                f"seed={simulator.seed}, profile={config.profile}")
    logger.debug(f"Initial state: {simulator.state}")

    start_time = time.time()
    lines = iter(commands)
    tick = 0

    while True:
        should_terminate, reason = check_termination(simulator, tick, config.max_ticks)
        if should_terminate:
            break

        if render is not None:
            render(simulator, tick, dt)

        line = next(lines, None)
        if line is None:
            reason = REASON_INPUT_CLOSED
            break

        if line == EXIT_COMMAND:
            reason = REASON_EXIT
            break
        if line == HELP_COMMAND:
            if on_help is not None:
                on_help()
            continue

        simulator.step(parse_command(line), dt)
        tick += 1
        log.append(simulator, tick, tick * dt)

        failure = _validate(simulator, config)
        if failure is not None:
            reason = failure
            break

    _log_completion(simulator, tick, time.time() - start_time, reason)
    return simulator, log, reason


def run_realtime(frames: Iterable[Tuple[float, Iterable[str]]],
                 config: Optional[SimulationConfig] = None,
                 simulator: Optional[Simulator] = None,
                 seed: Optional[int] = None) -> Tuple[Simulator, SimulationLog, str]:
    """
    Drive the simulator from timestamped key-state samples.

    Each frame is (timestamp_s, held_key_codes). The step length is the time
    since the previous frame, capped at config.max_frame_dt; the first frame
    only establishes the clock.

    Returns:
        (simulator, log, termination_reason) tuple
    """
    if simulator is None:
        if config is None:
            config = create_default_config()
        simulator = Simulator(config=config, seed=seed)
    elif config is None:
        config = simulator.config

    log = SimulationLog()
    log.append(simulator, 0, 0.0)

    logger.info(f"Starting real-time session: max_frame_dt={config.max_frame_dt}s, "
                f"rings={len(simulator.rings)}, seed={simulator.seed}")

    start_time = time.time()
    last_stamp = None
    sim_time = 0.0
    tick = 0
    reason = REASON_INPUT_CLOSED

    for stamp, pressed in frames:
        should_terminate, term_reason = check_termination(simulator, tick, config.max_ticks)
        if should_terminate:
            reason = term_reason
            break

        elapsed = 0.0 if last_stamp is None else stamp - last_stamp
        last_stamp = stamp
        dt = frame_dt(elapsed, config.max_frame_dt)
        if dt <= 0.0:
            continue

        simulator.step(from_key_state(pressed, dt), dt)
        tick += 1
        sim_time += dt
        log.append(simulator, tick, sim_time)

        failure = _validate(simulator, config)
        if failure is not None:
            reason = failure
            break
    else:
        should_terminate, term_reason = check_termination(simulator, tick, config.max_ticks)
        if should_terminate:
            reason = term_reason

    _log_completion(simulator, tick, time.time() - start_time, reason)
    return simulator, log, reason


def _log_completion(simulator: Simulator, ticks: int, elapsed: float, reason: str):
    """Log summary statistics."""
    s = simulator.state
    logger.info(f"Session terminated: {reason}")
    logger.info(f"Session complete: {ticks} ticks in {elapsed:.2f}s")
    logger.info(f"Final state: {s}, rings left={simulator.rings_remaining}")
