"""
Ring Flight Simulation Package

A minimal flight-physics loop: control deltas in, a simplified rigid-body
flight model integrated at a fixed timestep, scoring rings to fly through.

Modules:
    - constants: Airframe constants, control steps, ring layout parameters
    - config: SimulationConfig dataclass and tuning profiles
    - vector: 3-vector helpers over numpy arrays
    - frames: Orientation model (yaw/pitch/roll to forward/up)
    - state: Flight state dataclass
    - rings: Ring field generation and respawn
    - controls: Input adapter (text tokens, key state)
    - simulator: Simulator.step integration
    - validation: Post-step invariant checks
    - main: Driver loops and telemetry log
    - hud: Text HUD formatting
    - plotting: Post-flight plots
    - cli: Command-line entry point
"""

from .state import FlightState, create_initial_state
from .controls import ControlInput, parse_command, from_key_state
from .rings import Ring, generate_rings
from .simulator import Simulator
from .main import run_session, run_realtime, SimulationLog
from .config import SimulationConfig, create_default_config, create_test_config, create_arcade_config

__version__ = "1.0.0"
__author__ = "Ring Flight Simulation Team"

__all__ = [
    'FlightState',
    'create_initial_state',
    'ControlInput',
    'parse_command',
    'from_key_state',
    'Ring',
    'generate_rings',
    'Simulator',
    'run_session',
    'run_realtime',
    'SimulationLog',
    'SimulationConfig',
    'create_default_config',
    'create_test_config',
    'create_arcade_config',
]
