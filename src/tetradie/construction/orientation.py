"""Face normals, label anchors and label orientations.

Every function here is pure: the same inputs always give bit-identical
outputs.  Directions are normalised with :meth:`Vector3.normalised`,
which raises :class:`~tetradie.errors.DegenerateGeometryError` for
near-zero vectors, so a degenerate face can never leak NaNs into a
label placement.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from tetradie._constants import FORWARD_AXIS, UP_AXIS
from tetradie.errors import InvalidConfigurationError
from tetradie.model import Orientation, Vector3

_FORWARD = Vector3(*FORWARD_AXIS)
_UP = Vector3(*UP_AXIS)

# Below this, two unit vectors count as pointing in opposite directions.
_OPPOSITE_EPS = 1e-9


def centroid(vertices: np.ndarray) -> Vector3:
    """Mean of the tetrahedron's four vertices.

    This is always strictly inside the solid, which makes it the
    reference for telling a face's outer side from its inner side.
    """
    return Vector3.from_iterable(np.asarray(vertices, dtype=float).mean(axis=0))


def face_centre(points: Sequence[Vector3]) -> Vector3:
    """Mean of a face's three corner points."""
    a, b, c = points
    return (a + b + c) * (1.0 / 3.0)


def outward_normal(points: Sequence[Vector3], interior: Vector3) -> Vector3:
    """Unit normal of a face, pointing away from the solid.

    The sign of a cross product depends on the order the corners are
    listed in, which carries no meaning here.  The raw normal is
    therefore flipped whenever it points towards *interior*.

    Args:
        points: The face's three corners.
        interior: Any point inside the solid, normally its
            :func:`centroid`.

    Returns:
        The outward unit normal.

    Raises:
        DegenerateGeometryError: If the corners are collinear.
    """
    a, b, c = points
    normal = (b - a).cross(c - a).normalised()
    to_interior = interior - face_centre(points)
    if normal.dot(to_interior) > 0:
        normal = -normal
    return normal


def label_position(centre: Vector3, normal: Vector3, offset: float) -> Vector3:
    """Anchor point for a label, *offset* above the face along *normal*.

    Raises:
        InvalidConfigurationError: If *offset* is not positive.  A
            zero offset would z-fight with the face and a negative one
            would bury the label inside the die.
    """
    if not offset > 0:
        raise InvalidConfigurationError(
            f"label offset must be positive, got {offset}"
        )
    return centre + normal * offset


def label_orientation(
    centre: Vector3,
    interior: Vector3,
    reference_vertex: Vector3,
) -> Orientation:
    """Rotation that lays a label glyph flat on a face, top to a corner.

    A glyph starts facing ``+z`` with its top towards ``+y``.  It is
    turned in two steps:

    1. *forward*: ``+z`` onto the radial direction from *interior*
       through *centre*.  This is the same ray the label is pushed out
       along, and does not depend on the sign of the face normal.
    2. *up*: the glyph's top, as already turned by step 1, onto the
       direction from *centre* towards *reference_vertex*.  That
       target is first projected perpendicular to the radial
       direction, so step 2 is a pure twist about the radial axis and
       leaves step 1's alignment intact.

    Applying step 2 to the already-turned top (rather than to ``+y``
    itself) is what keeps every label's top aimed at its reference
    corner.  Twisting the untransformed axis gives each face a
    different, arbitrary roll.

    Args:
        centre: The face centre.
        interior: A point inside the solid, normally its centroid.
        reference_vertex: The corner the label's top should point at,
            conventionally the face's first listed vertex.

    Returns:
        The composed orientation ``up * forward``.

    Raises:
        DegenerateGeometryError: If *centre* coincides with
            *interior* or the reference corner lies on the radial
            line.
    """
    radial = (centre - interior).normalised()
    forward = Orientation.from_unit_vectors(_FORWARD, radial)

    current_up = forward.rotate(_UP)
    towards_vertex = reference_vertex - centre
    target_up = (towards_vertex - radial * towards_vertex.dot(radial)).normalised()

    if current_up.dot(target_up) + 1.0 < _OPPOSITE_EPS:
        # A half turn has no unique shortest arc.  Go through the
        # quarter-turn direction so the axis is the radial one.
        quarter = radial.cross(current_up)
        up = (
            Orientation.from_unit_vectors(quarter, target_up)
            * Orientation.from_unit_vectors(current_up, quarter)
        )
    else:
        up = Orientation.from_unit_vectors(current_up, target_up)

    return up * forward
