"""The fixed face numbering of a tetrahedral die."""

from __future__ import annotations

import numpy as np

from tetradie.model import Face, Vector3

#: Vertex index triples in label order.  Face ``n`` is entry ``n - 1``.
FACE_INDICES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (0, 1, 3),
    (0, 2, 3),
    (1, 2, 3),
)

_FACES: tuple[Face, ...] = tuple(
    Face(indices=indices, label=i + 1) for i, indices in enumerate(FACE_INDICES)
)


def face_catalog() -> tuple[Face, ...]:
    """Return the four faces in label order 1 to 4."""
    return _FACES


def face_points(
    face: Face, vertices: np.ndarray,
) -> tuple[Vector3, Vector3, Vector3]:
    """Look up the three corner points of *face* in *vertices*.

    Args:
        face: The face to resolve.
        vertices: Array of shape ``(4, 3)``.

    Returns:
        The corners in the face's own vertex order.
    """
    i, j, k = face.indices
    return (
        Vector3.from_iterable(vertices[i]),
        Vector3.from_iterable(vertices[j]),
        Vector3.from_iterable(vertices[k]),
    )
