"""
Ring Flight Simulation - Text HUD

Formatting helpers for terminal play. Nothing here touches the physics.
"""

from . import constants as C

HELP_TEXT = """
Controls (several commands per line, separated by spaces):
  + / t+ / throttle+   : throttle up
  - / t- / throttle-   : throttle down
  w / pitch+ / p+      : nose up (pitch +)
  s / pitch- / p-      : nose down (pitch -)
  a / yaw- / y-        : turn left (yaw -)
  d / yaw+ / y+        : turn right (yaw +)
  q / roll- / r-       : roll left
  e / roll+ / r+       : roll right
  help                 : show this help again
  exit                 : quit immediately
"""

BANNER = (
    "Text flight simulator\n"
    "Goal: fly through the rings for points before the fuel runs out."
)


def format_hud(simulator, tick: int, dt: float) -> str:
    """Multi-line status block for the current tick."""
    s = simulator.state
    x, y, z = s.position
    return (
        f"\n=== Tick {tick} ({dt:.1f}s) ===\n"
        f"Position (x,y,z): {x:.2f}, {y:.2f}, {z:.2f} m\n"
        f"Speed: {s.speed:.2f} m/s  (forward={s.forward_speed:.2f})\n"
        f"Yaw/Pitch/Roll (deg): {s.yaw * C.RAD_TO_DEG:.2f} / "
        f"{s.pitch * C.RAD_TO_DEG:.2f} / {s.roll * C.RAD_TO_DEG:.2f}"
        f"  (heading {s.heading_deg:.0f})\n"
        f"Throttle: {s.throttle * 100.0:.2f}%  Fuel: {s.fuel:.2f} u\n"
        f"Score: {s.score}  Rings left: {simulator.rings_remaining}"
    )


def format_summary(simulator, reason: str) -> str:
    s = simulator.state
    return (
        f"\nFlight over ({reason}). Final score: {s.score}\n"
        f"Rings passed: {sum(1 for r in simulator.rings if r.passed)}"
        f"/{len(simulator.rings)}"
    )
