"""View rotations and orthographic projection for the preview renderers."""

from __future__ import annotations

import numpy as np

from tetradie.construction.animation import rotation_y


def rotation_x(angle: float) -> np.ndarray:
    """Rotation matrix about the X axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0,   c,  -s],
        [0.0,   s,   c],
    ])


# Looking slightly down on the die and off to one side, so three
# faces are visible at rest.
DEFAULT_VIEW = rotation_x(0.45) @ rotation_y(-0.6)


def to_camera(
    coords: np.ndarray,
    mesh_rotation: np.ndarray,
    view: np.ndarray,
) -> np.ndarray:
    """Carry model-space points into camera space.

    The die's roll is applied first, then the view rotation.  In
    camera space ``x`` is screen-right, ``y`` is screen-up, and larger
    ``z`` is closer to the viewer.

    Args:
        coords: Points of shape ``(n, 3)`` (or a single ``(3,)`` point).
        mesh_rotation: The die's current 3x3 roll rotation.
        view: 3x3 view rotation.

    Returns:
        Array of the same shape as *coords*.
    """
    coords = np.asarray(coords, dtype=float)
    return coords @ (view @ mesh_rotation).T


def screen_angle(direction: np.ndarray) -> float:
    """Text rotation in degrees that points a glyph's top along *direction*.

    Only the screen-plane part of the camera-space *direction* counts.
    An upright glyph (rotation 0) has its top towards ``+y``.
    """
    return float(np.degrees(np.arctan2(-direction[0], direction[1])))
