"""Shared constants used across the model and construction layers."""

import math

GEOMETRY_EPS: float = 1e-9
"""Vectors shorter than this cannot be normalised."""

UNIT_TOLERANCE: float = 1e-6
"""Allowed deviation of an orientation's magnitude from 1."""

DEFAULT_LABEL_OFFSET: float = 0.1
"""Distance labels sit above their face, along the outward normal."""

DEFAULT_ROTATION_ANGLE: float = math.pi
"""Angle turned by one click-triggered roll (a half turn)."""

DEFAULT_ROTATION_DURATION: float = 3.0
"""Wall-clock length of one roll, in seconds."""

FORWARD_AXIS: tuple[float, float, float] = (0.0, 0.0, 1.0)
"""Direction a label glyph faces before it is oriented."""

UP_AXIS: tuple[float, float, float] = (0.0, 1.0, 0.0)
"""Direction of a label glyph's top before it is oriented.

Also the axis the die spins about while rolling.
"""
