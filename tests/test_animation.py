"""Tests for the per-frame pulse."""

import numpy as np
import pytest

from heartfield.animation import (
    INCREMENT_STEP,
    PULSE_PERIOD,
    AnimationState,
    advance,
    frame_scales,
    pulse_scale,
)
from heartfield.field import build_circle_field
from heartfield.sampler import PixelBuffer


class TestAdvance:

    def test_starts_at_zero(self):
        state = AnimationState()
        assert (state.increment, state.frame) == (0.0, 0)

    def test_steps_by_fixed_delta(self):
        state = AnimationState()
        nxt = advance(state)
        assert nxt.increment == pytest.approx(INCREMENT_STEP)
        assert nxt.frame == 1
        assert state == AnimationState()

    def test_keeps_growing(self):
        state = AnimationState()
        for _ in range(1000):
            state = advance(state)
        assert state.increment == pytest.approx(1000 * INCREMENT_STEP)
        assert state.frame == 1000

    def test_custom_delta(self):
        assert advance(AnimationState(1.0, 3), 0.25) == AnimationState(1.25, 4)


class TestPulseScale:

    def test_known_points(self):
        assert pulse_scale(0, 0) == pytest.approx(0.5)
        assert pulse_scale(PULSE_PERIOD / 4, 0) == pytest.approx(1.0)
        assert pulse_scale(3 * PULSE_PERIOD / 4, 0) == pytest.approx(0.0, abs=1e-12)

    def test_phase_shifts_time(self):
        assert pulse_scale(0.73, 0.2) == pytest.approx(pulse_scale(0.53, 0))

    def test_periodic(self):
        assert pulse_scale(1.1 + PULSE_PERIOD, 0.3) == pytest.approx(pulse_scale(1.1, 0.3))

    def test_deterministic(self):
        assert pulse_scale(12.345, 0.6) == pulse_scale(12.345, 0.6)

    def test_stays_in_unit_range(self):
        phases = np.linspace(0, 1, 51)
        for increment in np.linspace(0, 5, 97):
            scales = pulse_scale(increment, phases)
            assert np.all(scales >= -1e-12) and np.all(scales <= 1 + 1e-12)


def test_frame_scales_follow_field_order():
    data = bytearray(20 * 20 * 4)
    data[(10 * 20 + 5) * 4] = 255
    data[(5 * 20 + 10) * 4] = 51
    circles = build_circle_field(PixelBuffer(20, 20, bytes(data)), divisions=4)
    state = AnimationState(0.42, 84)

    scales = frame_scales(circles, state)
    assert scales.shape == (len(circles),)
    np.testing.assert_allclose(scales, [pulse_scale(0.42, c.scale) for c in circles])
    np.testing.assert_array_equal(scales, frame_scales(circles, state))
