"""Tests for RotationAnimator and the vertical rotation helper."""

import numpy as np
import pytest

from tetradie.construction.animation import RotationAnimator, rotation_y
from tetradie.errors import InvalidConfigurationError


class TestRotationY:
    def test_zero_is_identity(self):
        np.testing.assert_allclose(rotation_y(0.0), np.eye(3), atol=1e-15)

    def test_quarter_turn_sends_z_to_x(self):
        np.testing.assert_allclose(
            rotation_y(np.pi / 2) @ [0.0, 0.0, 1.0], [1.0, 0.0, 0.0], atol=1e-15,
        )

    def test_keeps_vertical_axis(self):
        np.testing.assert_allclose(rotation_y(1.3) @ [0.0, 1.0, 0.0], [0.0, 1.0, 0.0])


class TestRotationAnimator:
    def test_starts_idle(self):
        animator = RotationAnimator()
        assert not animator.is_rotating
        assert animator.angle == 0.0

    def test_invalid_duration_raises(self):
        with pytest.raises(InvalidConfigurationError):
            RotationAnimator(duration=-1.0)

    def test_full_roll_turns_total_angle(self):
        animator = RotationAnimator(duration=3.0)
        animator.click()
        ticks = 0
        while animator.is_rotating:
            animator.tick(0.5)
            ticks += 1
        assert ticks == 6
        assert animator.angle == pytest.approx(np.pi)
        assert animator.state.progress == 1.0

    def test_uneven_frames_still_sum_to_total(self):
        animator = RotationAnimator(duration=1.0)
        animator.click()
        for dt in [0.1, 0.3, 0.05, 0.25, 0.3]:
            animator.tick(dt)
        assert not animator.is_rotating
        assert animator.angle == pytest.approx(np.pi)
        animator.tick(0.3)
        assert animator.angle == pytest.approx(np.pi)

    def test_click_while_rolling_does_not_restart(self):
        animator = RotationAnimator(duration=3.0)
        animator.click()
        animator.tick(1.0)
        before = animator.state.progress
        animator.click()
        assert animator.state.progress == before
        animator.tick(1.0)
        assert animator.state.progress > before

    def test_idle_tick_emits_nothing(self):
        animator = RotationAnimator()
        state = animator.state
        assert animator.tick(0.5) == 0.0
        assert animator.state is state
        assert animator.last_increment == 0.0

    def test_angle_accumulates_across_rolls(self):
        animator = RotationAnimator(duration=1.0)
        for _ in range(2):
            animator.click()
            animator.tick(1.0)
        assert animator.angle == pytest.approx(2 * np.pi)

    def test_matrix_follows_angle(self):
        animator = RotationAnimator(duration=2.0, total_angle=np.pi / 2)
        animator.click()
        animator.tick(2.0)
        np.testing.assert_allclose(animator.matrix(), rotation_y(np.pi / 2))
