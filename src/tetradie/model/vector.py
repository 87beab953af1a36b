from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from tetradie._constants import GEOMETRY_EPS
from tetradie.errors import DegenerateGeometryError


@dataclass(frozen=True)
class Vector3:
    """An immutable point or direction in 3D space.

    Arithmetic returns new vectors; nothing is modified in place.
    Products and lengths are evaluated with numpy so results match
    the array code used elsewhere in tetradie.

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        # Store plain floats whatever numeric type was passed in.
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector3:
        """Build a vector from any three-element sequence or array.

        Raises:
            ValueError: If *values* does not hold exactly three numbers.
        """
        arr = np.asarray(list(values), dtype=float)
        if arr.shape != (3,):
            raise ValueError(
                f"Vector3 needs exactly 3 components, got shape {arr.shape}"
            )
        return cls(arr[0], arr[1], arr[2])

    def as_array(self) -> np.ndarray:
        """Return the components as a float array of shape ``(3,)``."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3) -> float:
        return float(np.dot(self.as_array(), other.as_array()))

    def cross(self, other: Vector3) -> Vector3:
        return Vector3.from_iterable(np.cross(self.as_array(), other.as_array()))

    def length(self) -> float:
        return float(np.linalg.norm(self.as_array()))

    def normalised(self) -> Vector3:
        """Return the unit vector pointing the same way.

        Raises:
            DegenerateGeometryError: If the vector is shorter than
                the geometry tolerance.  A zero-length direction has
                no meaningful unit vector.
        """
        length = self.length()
        if length < GEOMETRY_EPS:
            raise DegenerateGeometryError(
                f"cannot normalise near-zero vector {tuple(self)} "
                f"(length {length:.3g})"
            )
        return Vector3(self.x / length, self.y / length, self.z / length)

    def is_close(self, other: Vector3, atol: float = 1e-9) -> bool:
        """Whether every component is within *atol* of *other*'s."""
        return bool(np.allclose(self.as_array(), other.as_array(), rtol=0.0, atol=atol))
