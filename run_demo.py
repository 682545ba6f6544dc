"""Demo script: fly a scripted course and show ring-by-ring results."""
import numpy as np

from flightsim.config import create_default_config
from flightsim.main import run_session

# Climb gently, then hold course with full throttle
SCRIPT = ["+ + + + s"] * 5 + ["+"] * 10 + [""] * 200

config = create_default_config()
simulator, log, reason = run_session(SCRIPT, config=config, seed=7)

print("\n\n===== FLIGHT SUMMARY =====")
print(f"Termination: {reason}")
print(f"Ticks logged: {len(log.time)}")
if len(log.time) > 0:
    alts = np.array(log.position_y)
    speeds = np.array(log.speed)
    print(f"Time range: {log.time[0]:.1f}s - {log.time[-1]:.1f}s")
    print(f"Peak altitude: {np.max(alts):.1f} m")
    print(f"Final speed: {speeds[-1]:.1f} m/s")
    print(f"Fuel left: {log.fuel[-1]:.2f} u")

print()
print("===== RING FIELD =====")
for i, ring in enumerate(simulator.rings):
    x, y, z = ring.position
    status = "PASSED" if ring.passed else "missed"
    print(f"  Ring {i}: ({x:8.1f}, {y:7.1f}, {z:8.1f}) r={ring.radius:.0f} m | {status}")
print(f"\nFinal score: {simulator.state.score}")
