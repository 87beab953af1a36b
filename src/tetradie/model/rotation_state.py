from __future__ import annotations

import math
from dataclasses import dataclass, replace

from tetradie._constants import DEFAULT_ROTATION_ANGLE, DEFAULT_ROTATION_DURATION
from tetradie.errors import InvalidConfigurationError

# Progress within this distance of 1 counts as complete, so that
# durations split into equal frames finish on the expected frame
# despite rounding in the running sum.
_COMPLETION_EPS = 1e-9


@dataclass(frozen=True)
class RotationState:
    """Progress of the die's click-triggered roll.

    The state is a value: :meth:`clicked` and :meth:`advanced` return
    new instances and leave the original untouched.  A roll is idle
    until clicked, then runs for *duration* seconds of ticks and goes
    idle again.  Clicks during a roll are ignored.

    *progress* only decides when the roll ends.  The angle the mesh
    turns each frame is proportional to that frame's time step, so the
    caller accumulates increments rather than interpolating from
    progress.

    Attributes:
        is_rotating: Whether a roll is in progress.
        progress: Completed fraction of the current (or last) roll,
            in ``[0, 1]``.
        total_angle: Angle turned by a full roll, in radians.
        duration: Length of a roll in seconds.

    Raises:
        InvalidConfigurationError: If *duration* is not positive or
            *total_angle* is not finite.
        ValueError: If *progress* is outside ``[0, 1]``.
    """

    is_rotating: bool = False
    progress: float = 0.0
    total_angle: float = DEFAULT_ROTATION_ANGLE
    duration: float = DEFAULT_ROTATION_DURATION

    def __post_init__(self) -> None:
        if not self.duration > 0:
            raise InvalidConfigurationError(
                f"duration must be positive, got {self.duration}"
            )
        if not math.isfinite(self.total_angle):
            raise InvalidConfigurationError(
                f"total_angle must be finite, got {self.total_angle}"
            )
        if not 0.0 <= self.progress <= 1.0:
            raise ValueError(f"progress must be in [0, 1], got {self.progress}")

    def clicked(self) -> RotationState:
        """Start a roll if idle; otherwise return the state unchanged."""
        if self.is_rotating:
            return self
        return replace(self, is_rotating=True, progress=0.0)

    def advanced(self, dt: float) -> tuple[RotationState, float]:
        """Advance the roll by *dt* seconds.

        Returns:
            A tuple of ``(new_state, increment)`` where *increment* is
            the angle in radians to add to the mesh rotation this
            frame.  The frame that completes the roll still returns
            its full increment.  When idle the state is returned
            unchanged with an increment of ``0.0``.

        Raises:
            ValueError: If *dt* is negative.
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        if not self.is_rotating:
            return self, 0.0

        increment = self.total_angle * dt / self.duration
        progress = self.progress + dt / self.duration
        if progress >= 1.0 - _COMPLETION_EPS:
            return replace(self, is_rotating=False, progress=1.0), increment
        return replace(self, progress=progress), increment
