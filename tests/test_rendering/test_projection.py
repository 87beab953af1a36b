"""Tests for view rotations, camera transform and text angles."""

import numpy as np
import pytest

from tetradie.construction.animation import rotation_y
from tetradie.rendering.projection import (
    DEFAULT_VIEW,
    rotation_x,
    screen_angle,
    to_camera,
)


class TestRotationX:
    def test_zero_is_identity(self):
        np.testing.assert_allclose(rotation_x(0.0), np.eye(3), atol=1e-15)

    def test_quarter_turn_sends_y_to_z(self):
        np.testing.assert_allclose(
            rotation_x(np.pi / 2) @ [0.0, 1.0, 0.0], [0.0, 0.0, 1.0], atol=1e-15,
        )


class TestToCamera:
    def test_identity(self):
        coords = np.array([[1.0, 2.0, 3.0]])
        np.testing.assert_allclose(to_camera(coords, np.eye(3), np.eye(3)), coords)

    def test_roll_then_view(self):
        point = np.array([0.0, 0.0, 1.0])
        roll = rotation_y(np.pi / 2)      # z -> x
        view = rotation_x(np.pi / 2)      # x unchanged
        np.testing.assert_allclose(to_camera(point, roll, view), [1.0, 0.0, 0.0], atol=1e-12)

    def test_default_view_is_rotation(self):
        np.testing.assert_allclose(DEFAULT_VIEW.T @ DEFAULT_VIEW, np.eye(3), atol=1e-12)


class TestScreenAngle:
    @pytest.mark.parametrize("direction, expected", [
        ([0.0, 1.0, 0.0], 0.0),
        ([-1.0, 0.0, 0.0], 90.0),
        ([1.0, 0.0, 0.0], -90.0),
        ([-1.0, 1.0, 0.7], 45.0),
    ])
    def test_angles(self, direction, expected):
        assert screen_angle(np.array(direction)) == pytest.approx(expected)

    def test_upside_down(self):
        assert abs(screen_angle(np.array([0.0, -1.0, 0.5]))) == pytest.approx(180.0)
