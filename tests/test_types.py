import pytest
import numpy as np
from flightsim import types
from flightsim.config import create_test_config
from flightsim.simulator import Simulator

def test_force_breakdown_typeddict():
    out = types.ForceBreakdown(
        thrust=np.array([0.0, 0.0, 1.0]),
        drag=np.zeros(3),
        lift=np.zeros(3),
        gravity=np.array([0.0, -1.0, 0.0]),
        total=np.array([0.0, -1.0, 1.0]),
        thrust_magnitude=1.0,
        drag_magnitude=0.0,
        lift_magnitude=0.0,
        speed=0.0,
    )
    assert out["thrust_magnitude"] == 1.0
    assert isinstance(out["total"], np.ndarray)

def test_step_report_keys():
    sim = Simulator(config=create_test_config(), rings=[])
    report = sim.step()
    assert set(report) == set(types.StepReport.__annotations__)
    assert set(report["forces"]) == set(types.ForceBreakdown.__annotations__)
    assert report["rings_passed"] == []
    assert report["score_gained"] == 0
    assert report["flameout"] is False
