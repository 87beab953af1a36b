from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from tetradie._constants import GEOMETRY_EPS, UNIT_TOLERANCE
from tetradie.model.vector import Vector3


@dataclass(frozen=True)
class Orientation:
    """A 3D rotation stored as a unit quaternion ``w + xi + yj + zk``.

    Orientations are built with :meth:`from_unit_vectors` (the
    shortest-arc rotation between two directions) and combined with
    ``*``.  Composition reads right to left like matrix products:
    ``second * first`` applies *first*, then *second*.

    Attributes:
        w: Scalar part.
        x: First vector component.
        y: Second vector component.
        z: Third vector component.

    Raises:
        ValueError: If the quaternion's magnitude differs from 1 by
            more than ``1e-6``.
    """

    w: float
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        for name in ("w", "x", "y", "z"):
            object.__setattr__(self, name, float(getattr(self, name)))
        if abs(self.magnitude() - 1.0) > UNIT_TOLERANCE:
            raise ValueError(
                f"orientation must be a unit quaternion, got magnitude "
                f"{self.magnitude():.9f}"
            )

    @classmethod
    def identity(cls) -> Orientation:
        """The rotation that leaves every vector unchanged."""
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_unit_vectors(cls, v_from: Vector3, v_to: Vector3) -> Orientation:
        """Shortest-arc rotation carrying direction *v_from* onto *v_to*.

        Both inputs are normalised first.  When the two directions are
        exactly opposite the arc is not unique; a half turn about an
        axis perpendicular to *v_from* is returned.

        Raises:
            DegenerateGeometryError: If either input is a near-zero
                vector.
        """
        a = v_from.normalised()
        b = v_to.normalised()
        r = a.dot(b) + 1.0

        if r < GEOMETRY_EPS:
            # Opposite directions: rotate pi about any perpendicular axis.
            r = 0.0
            if abs(a.x) > abs(a.z):
                q = np.array([r, -a.y, a.x, 0.0])
            else:
                q = np.array([r, 0.0, -a.z, a.y])
        else:
            axis = a.cross(b)
            q = np.array([r, axis.x, axis.y, axis.z])

        q /= np.linalg.norm(q)
        return cls(q[0], q[1], q[2], q[3])

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.w, self.x, self.y, self.z]))

    def __mul__(self, other: Orientation) -> Orientation:
        """Hamilton product: the rotation *other* followed by *self*."""
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        q = np.array([
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        ])
        # Renormalise so long product chains cannot drift off the unit sphere.
        q /= np.linalg.norm(q)
        return Orientation(q[0], q[1], q[2], q[3])

    def as_matrix(self) -> np.ndarray:
        """Return the equivalent 3x3 rotation matrix.

        The matrix acts on column vectors: ``R @ v``.
        """
        w, x, y, z = self.w, self.x, self.y, self.z
        return np.array([
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ])

    def rotate(self, vector: Vector3) -> Vector3:
        """Apply this rotation to *vector*."""
        return Vector3.from_iterable(self.as_matrix() @ vector.as_array())

    def to_euler(self) -> tuple[float, float, float]:
        """Return intrinsic XYZ Euler angles ``(x, y, z)`` in radians.

        This is the convention most scene-graph toolkits use for an
        object's ``rotation`` property, so the result can be handed
        straight to a text or sprite node.
        """
        m = self.as_matrix()
        y = math.asin(max(-1.0, min(1.0, m[0, 2])))
        if abs(m[0, 2]) < 0.9999999:
            x = math.atan2(-m[1, 2], m[2, 2])
            z = math.atan2(-m[0, 1], m[0, 0])
        else:
            # Gimbal lock: fold the whole roll into x.
            x = math.atan2(m[2, 1], m[1, 1])
            z = 0.0
        return (x, y, z)
