"""Per-frame pulse of the circle field.

The only evolving state is a counter that grows by a fixed step every frame.
Each circle's sampled scale is used as a phase offset into a shared sine, so
circles from different texture bands pulse out of step with each other.
"""

from dataclasses import dataclass

import numpy as np

from heartfield.field import CircleField
from heartfield.mathutils import linear_interpolation, sinusoidal_function

INCREMENT_STEP = 0.005
PULSE_PERIOD = 0.4


@dataclass(frozen=True)
class AnimationState:
    increment: float = 0.0
    frame: int = 0


def advance(state: AnimationState, delta: float = INCREMENT_STEP) -> AnimationState:
    """Next frame's state. Never resets."""
    return AnimationState(state.increment + delta, state.frame + 1)


def pulse_scale(increment: float, phase):
    """Rendered scale in [0, 1] for a circle with the given phase (scalar or array)."""
    wave = sinusoidal_function(increment - phase, amplitude=1, period=PULSE_PERIOD)
    return linear_interpolation(wave, -1, 1, 0, 1)


def frame_scales(circles: CircleField, state: AnimationState) -> np.ndarray:
    """Scales for every cell, in field order."""
    return np.asarray(pulse_scale(state.increment, circles.phases), dtype=float)
