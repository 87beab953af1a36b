"""Click-triggered roll animation."""

from __future__ import annotations

import numpy as np

from tetradie._constants import DEFAULT_ROTATION_ANGLE, DEFAULT_ROTATION_DURATION
from tetradie.model import RotationState


def rotation_y(angle: float) -> np.ndarray:
    """Rotation matrix about the Y (vertical) axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [ c,  0.0,  s],
        [0.0, 1.0, 0.0],
        [-s,  0.0,  c],
    ])


class RotationAnimator:
    """Turns the die about its vertical axis when clicked.

    Holds the current :class:`RotationState` and the mesh's
    accumulated rotation angle.  A roll, once started, always runs to
    completion: clicks while rolling are dropped, not queued.

    Args:
        total_angle: Angle in radians turned by one roll.
        duration: Length of a roll in seconds.

    Raises:
        InvalidConfigurationError: If *duration* is not positive.
    """

    def __init__(
        self,
        total_angle: float = DEFAULT_ROTATION_ANGLE,
        duration: float = DEFAULT_ROTATION_DURATION,
    ) -> None:
        self.state = RotationState(total_angle=total_angle, duration=duration)
        self.angle = 0.0
        self.last_increment = 0.0

    @property
    def is_rotating(self) -> bool:
        return self.state.is_rotating

    def click(self) -> None:
        """Start a roll, unless one is already running."""
        self.state = self.state.clicked()

    def tick(self, dt: float) -> float:
        """Advance by *dt* seconds and return this frame's angle increment.

        The increment is also added to :attr:`angle`.  Idle ticks
        return ``0.0``.

        Raises:
            ValueError: If *dt* is negative.
        """
        self.state, increment = self.state.advanced(dt)
        self.angle += increment
        self.last_increment = increment
        return increment

    def matrix(self) -> np.ndarray:
        """Rotation matrix for the accumulated angle."""
        return rotation_y(self.angle)
