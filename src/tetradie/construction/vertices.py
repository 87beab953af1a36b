"""Reading tetrahedron vertices out of raw mesh position buffers."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from tetradie._constants import GEOMETRY_EPS
from tetradie.errors import DegenerateGeometryError, MalformedGeometryError

# Corners of a regular tetrahedron inscribed in a cube, before scaling.
_UNIT_CORNERS = np.array([
    [1.0, 1.0, 1.0],
    [-1.0, -1.0, 1.0],
    [-1.0, 1.0, -1.0],
    [1.0, -1.0, -1.0],
])

# Triangles of the non-indexed buffer, wound counter-clockwise seen
# from outside the solid.
_BUFFER_TRIANGLES = np.array([
    [2, 1, 0],
    [0, 3, 2],
    [1, 3, 0],
    [2, 3, 1],
])


def tetrahedron_vertices(radius: float = 1.0) -> np.ndarray:
    """Return the four corners of a regular tetrahedron.

    The corners lie on a sphere of *radius* about the origin, in the
    order ``(1, 1, 1)``, ``(-1, -1, 1)``, ``(-1, 1, -1)``,
    ``(1, -1, -1)`` (directions before scaling).

    Raises:
        ValueError: If *radius* is not positive.
    """
    if radius <= 0:
        raise ValueError(f"radius must be positive, got {radius}")
    norms = np.linalg.norm(_UNIT_CORNERS, axis=1)
    return _UNIT_CORNERS / norms[:, np.newaxis] * radius


def tetrahedron_position_buffer(radius: float = 1.0) -> np.ndarray:
    """Return a non-indexed triangle position buffer for a tetrahedron.

    This is the layout a renderer holds for a mesh without an index
    buffer: 4 triangles x 3 vertices x 3 coordinates, flattened to a
    1-D array of 36 floats.  Each corner appears once per triangle
    that touches it.
    """
    corners = tetrahedron_vertices(radius)
    return corners[_BUFFER_TRIANGLES].reshape(-1)


def extract_vertices(
    buffer: Sequence[float] | np.ndarray,
    *,
    tol: float = GEOMETRY_EPS,
) -> np.ndarray:
    """Decode the four unique vertices of a tetrahedron mesh.

    Args:
        buffer: Vertex positions, either a flat sequence of
            ``x, y, z`` floats or an array of shape ``(n, 3)``.
            Repeated vertices (as in a non-indexed triangle buffer)
            are merged.
        tol: Points closer together than this are the same vertex.

    Returns:
        Array of shape ``(4, 3)`` holding the unique vertices in the
        order they first appear in *buffer*.

    Raises:
        MalformedGeometryError: If the buffer is not made of 3D
            points, contains non-finite values, or does not hold
            exactly four distinct points.
    """
    try:
        coords = np.asarray(buffer, dtype=float)
    except (TypeError, ValueError) as exc:
        raise MalformedGeometryError(
            f"vertex buffer is not numeric: {exc}"
        ) from exc

    if coords.ndim == 1:
        if coords.size == 0 or coords.size % 3 != 0:
            raise MalformedGeometryError(
                f"flat vertex buffer length must be a positive multiple "
                f"of 3, got {coords.size}"
            )
        coords = coords.reshape(-1, 3)
    elif coords.ndim != 2 or coords.shape[1] != 3:
        raise MalformedGeometryError(
            f"vertex buffer must have shape (n, 3), got {coords.shape}"
        )

    if not np.all(np.isfinite(coords)):
        raise MalformedGeometryError("vertex buffer contains non-finite values")

    unique: list[np.ndarray] = []
    for point in coords:
        if any(np.linalg.norm(point - kept) < tol for kept in unique):
            continue
        unique.append(point)
        if len(unique) > 4:
            break

    if len(unique) != 4:
        found = "more than 4" if len(unique) > 4 else str(len(unique))
        raise MalformedGeometryError(
            f"expected 4 distinct vertices, found {found}"
        )
    return np.array(unique)


def validate_tetrahedron(vertices: np.ndarray) -> np.ndarray:
    """Check that four points enclose a solid and return them as floats.

    Raises:
        MalformedGeometryError: If *vertices* is not a ``(4, 3)``
            array of finite values.
        DegenerateGeometryError: If the points are coplanar (which
            includes repeated or collinear points) or enclose a
            volume that is near zero relative to their size.
    """
    vertices = np.asarray(vertices, dtype=float)
    if vertices.shape != (4, 3):
        raise MalformedGeometryError(
            f"a tetrahedron needs vertices of shape (4, 3), got {vertices.shape}"
        )
    if not np.all(np.isfinite(vertices)):
        raise MalformedGeometryError("vertices contain non-finite values")

    try:
        hull = ConvexHull(vertices)
    except QhullError as exc:
        raise DegenerateGeometryError(
            f"vertices do not span a solid: {exc}"
        ) from exc
    # Volume scales with the cube of size, so compare against the
    # longest edge rather than an absolute floor.
    edges = vertices[:, np.newaxis, :] - vertices[np.newaxis, :, :]
    max_edge = float(np.max(np.linalg.norm(edges, axis=-1)))
    if hull.volume < GEOMETRY_EPS * max_edge**3:
        raise DegenerateGeometryError(
            f"tetrahedron volume {hull.volume:.3g} is too small for its "
            f"longest edge {max_edge:.3g}"
        )
    return vertices
