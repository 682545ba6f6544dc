"""Tests for config module."""
import dataclasses

import pytest
from flightsim import config
from flightsim import constants as C


def test_simulation_config_defaults():
    """Test that default config uses constants values."""
    cfg = config.SimulationConfig()
    assert cfg.dt == C.DT
    assert cfg.mass == C.MASS
    assert cfg.thrust_power == C.THRUST_POWER
    assert cfg.drag_coefficient == C.DRAG_COEFFICIENT
    assert cfg.lift_coefficient == C.LIFT_COEFFICIENT
    assert cfg.gravity == C.GRAVITY
    assert cfg.fuel_burn_rate == C.FUEL_BURN_RATE
    assert cfg.roll_yaw_coupling == C.ROLL_YAW_COUPLING
    assert cfg.bounce_damping == C.BOUNCE_DAMPING
    assert cfg.ring_count == C.DEFAULT_RING_COUNT
    assert cfg.enable_ring_respawn is False


def test_canonical_values():
    """The text-mode profile numbers."""
    cfg = config.create_default_config()
    assert cfg.mass == 750.0
    assert cfg.thrust_power == 26000.0
    assert cfg.drag_coefficient == 0.04
    assert cfg.lift_coefficient == 0.018
    assert cfg.gravity == 9.81
    assert cfg.fuel_burn_rate == 0.25
    assert cfg.roll_yaw_coupling == 0.35
    assert cfg.bounce_damping == -0.2
    assert cfg.pitch_limit == pytest.approx(C.DEG_TO_RAD * 45.0)
    assert cfg.roll_limit == pytest.approx(C.DEG_TO_RAD * 80.0)
    assert cfg.initial_position == (0.0, 80.0, 0.0)
    assert cfg.initial_velocity == (0.0, 0.0, 30.0)


def test_simulation_config_frozen():
    """Test that config is immutable (frozen)."""
    cfg = config.SimulationConfig()
    with pytest.raises(Exception):  # FrozenInstanceError
        cfg.dt = 0.5


def test_replace_creates_variant():
    cfg = config.SimulationConfig()
    cfg2 = dataclasses.replace(cfg, mass=1000.0)
    assert cfg2.mass == 1000.0
    assert cfg.mass == C.MASS


def test_create_test_config():
    """Test create_test_config factory function."""
    cfg = config.create_test_config()
    assert cfg.dt == 0.1
    assert cfg.ring_seed == 1234
    assert cfg.verbose is False


def test_create_test_config_custom():
    cfg = config.create_test_config(dt=0.05, initial_fuel=3.0)
    assert cfg.dt == 0.05
    assert cfg.initial_fuel == 3.0


def test_create_arcade_config():
    cfg = config.create_arcade_config()
    assert cfg.enable_ring_respawn is True
    assert cfg.ring_count == C.ARCADE_RING_COUNT
    assert cfg.max_active_rings == C.MAX_ACTIVE_RINGS
    assert cfg.max_frame_dt == C.MAX_FRAME_DT
    # Airframe constants are shared with the canonical profile
    assert cfg.mass == C.MASS


def test_profiles_registry():
    assert set(config.PROFILES) == {"default", "arcade"}
    assert config.PROFILES["arcade"]().profile == "arcade"
