"""
Ring Flight Simulation - Input Adapter

Turns raw player input into a ControlInput for one tick. Two front ends
share the same output type:

- parse_command: whitespace-separated text tokens (terminal play)
- from_key_state: set of held key codes plus frame time (real-time play)
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from . import constants as C


@dataclass(frozen=True)
class ControlInput:
    """Requested per-tick change. Angles in radians."""
    throttle_delta: float = 0.0
    pitch_delta: float = 0.0
    yaw_delta: float = 0.0
    roll_delta: float = 0.0

    def __add__(self, other: 'ControlInput') -> 'ControlInput':
        if not isinstance(other, ControlInput):
            return NotImplemented
        return ControlInput(
            throttle_delta=self.throttle_delta + other.throttle_delta,
            pitch_delta=self.pitch_delta + other.pitch_delta,
            yaw_delta=self.yaw_delta + other.yaw_delta,
            roll_delta=self.roll_delta + other.roll_delta,
        )

    @property
    def is_neutral(self) -> bool:
        return not any((self.throttle_delta, self.pitch_delta,
                        self.yaw_delta, self.roll_delta))


NEUTRAL = ControlInput()


def _aliases(names: Tuple[str, ...], field_name: str, delta: float) -> Dict[str, Tuple[str, float]]:
    return {name: (field_name, delta) for name in names}


# token -> (ControlInput field, delta)
TOKEN_TABLE: Dict[str, Tuple[str, float]] = {
    **_aliases(("w", "pitch+", "p+"), "pitch_delta", C.PITCH_STEP),
    **_aliases(("s", "pitch-", "p-"), "pitch_delta", -C.PITCH_STEP),
    **_aliases(("a", "yaw-", "y-"), "yaw_delta", -C.YAW_STEP),
    **_aliases(("d", "yaw+", "y+"), "yaw_delta", C.YAW_STEP),
    **_aliases(("q", "roll-", "r-"), "roll_delta", -C.ROLL_STEP),
    **_aliases(("e", "roll+", "r+"), "roll_delta", C.ROLL_STEP),
    **_aliases(("+", "t+", "throttle+"), "throttle_delta", C.THROTTLE_STEP),
    **_aliases(("-", "t-", "throttle-"), "throttle_delta", -C.THROTTLE_STEP),
}


def parse_command(line: str) -> ControlInput:
    """
    Parse one line of text tokens into a ControlInput.

    Tokens accumulate, so "w w +" pitches up two steps and adds throttle.
    Unknown tokens are ignored.

    Args:
        line: Raw input line

    Returns:
        Accumulated control deltas
    """
    totals = {
        "throttle_delta": 0.0,
        "pitch_delta": 0.0,
        "yaw_delta": 0.0,
        "roll_delta": 0.0,
    }
    for token in line.split():
        entry = TOKEN_TABLE.get(token)
        if entry is None:
            continue
        field_name, delta = entry
        totals[field_name] += delta
    return ControlInput(**totals)


# (field, rate, (key, sign), (key, sign)); the first key of a pair wins
KEY_BINDINGS: Tuple[Tuple[str, float, Tuple[str, float], Tuple[str, float]], ...] = (
    ("throttle_delta", C.KEY_THROTTLE_RATE, ("ArrowUp", 1.0), ("ArrowDown", -1.0)),
    ("yaw_delta", C.KEY_YAW_RATE, ("ArrowLeft", -1.0), ("ArrowRight", 1.0)),
    ("pitch_delta", C.KEY_PITCH_RATE, ("KeyW", 1.0), ("KeyS", -1.0)),
)


def from_key_state(pressed: Iterable[str], dt: float) -> ControlInput:
    """
    Convert held keys into deltas for a frame of length dt.

    Each axis moves at a fixed rate while its key is held. When both keys of
    a pair are held the first one wins (ArrowUp over ArrowDown, ArrowLeft over
    ArrowRight, KeyW over KeyS). Roll has no key binding. Unbound key codes
    are ignored.
    """
    held = set(pressed)
    totals = {}
    for field_name, rate, (first_key, first_sign), (second_key, second_sign) in KEY_BINDINGS:
        if first_key in held:
            totals[field_name] = first_sign * rate * dt
        elif second_key in held:
            totals[field_name] = second_sign * rate * dt
    return ControlInput(**totals)
