import pytest
import numpy as np
from flightsim import state, constants as C
from flightsim.config import create_test_config

@pytest.fixture
def default_state():
    return state.FlightState()

@pytest.fixture
def custom_state():
    return state.FlightState(
        position=np.array([1.0, 2.0, 3.0]),
        velocity=np.array([3.0, 0.0, 4.0]),
        yaw=-np.pi / 2,
        pitch=0.1,
        roll=0.2,
        throttle=0.7,
        fuel=50.0,
        score=300,
    )

def test_state_init_types(default_state):
    assert isinstance(default_state.position, np.ndarray)
    assert isinstance(default_state.velocity, np.ndarray)
    assert default_state.position.dtype == np.float64
    assert isinstance(default_state.score, int)

def test_state_defaults(default_state):
    assert np.allclose(default_state.position, [0.0, 80.0, 0.0])
    assert np.allclose(default_state.velocity, [0.0, 0.0, 30.0])
    assert default_state.throttle == pytest.approx(0.4)
    assert default_state.fuel == pytest.approx(120.0)
    assert default_state.score == 0

def test_list_inputs_converted():
    s = state.FlightState(position=[1, 2, 3], velocity=[0, 0, 1])
    assert isinstance(s.position, np.ndarray)
    assert s.position.dtype == np.float64

def test_state_copy(custom_state):
    s2 = custom_state.copy()
    assert np.allclose(s2.position, custom_state.position)
    assert np.allclose(s2.velocity, custom_state.velocity)
    assert s2.yaw == custom_state.yaw
    assert s2.score == custom_state.score
    # Ensure deep copy
    s2.position[0] += 1
    assert not np.allclose(s2.position, custom_state.position)

def test_speed_and_altitude(custom_state):
    assert custom_state.speed == pytest.approx(5.0)
    assert custom_state.altitude == pytest.approx(2.0)

def test_heading_is_wrapped_for_display(custom_state):
    assert custom_state.heading_deg == pytest.approx(270.0)
    # Physics value untouched
    assert custom_state.yaw == pytest.approx(-np.pi / 2)

def test_forward_speed(default_state):
    assert default_state.forward_speed == pytest.approx(30.0)

def test_out_of_fuel(custom_state):
    assert custom_state.out_of_fuel is False
    custom_state.fuel = 0.0
    assert custom_state.out_of_fuel is True

def test_str(custom_state):
    s = str(custom_state)
    assert "FlightState(" in s
    assert "alt=" in s
    assert "score=300" in s

def test_create_initial_state():
    s = state.create_initial_state()
    assert np.allclose(s.position, C.INITIAL_POSITION)
    assert np.allclose(s.velocity, C.INITIAL_VELOCITY)
    assert s.throttle == pytest.approx(C.INITIAL_THROTTLE)
    assert s.fuel == pytest.approx(C.INITIAL_FUEL)
    assert s.score == 0

def test_create_initial_state_from_config():
    cfg = create_test_config(initial_fuel=5.0, initial_position=(1.0, 2.0, 3.0))
    s = state.create_initial_state(cfg)
    assert s.fuel == 5.0
    assert np.allclose(s.position, [1.0, 2.0, 3.0])

def test_initial_state_does_not_alias_constants():
    s = state.create_initial_state()
    s.position[1] = -100.0
    assert C.INITIAL_POSITION[1] == 80.0
