"""Construction: vertex decoding, face numbering, label geometry and animation."""

from tetradie.construction.animation import RotationAnimator
from tetradie.construction.assembly import DieAssembly, compute_placements
from tetradie.construction.faces import FACE_INDICES, face_catalog, face_points
from tetradie.construction.orientation import (
    centroid,
    face_centre,
    label_orientation,
    label_position,
    outward_normal,
)
from tetradie.construction.styles import load_style, save_style
from tetradie.construction.vertices import (
    extract_vertices,
    tetrahedron_position_buffer,
    tetrahedron_vertices,
    validate_tetrahedron,
)

__all__ = [
    "DieAssembly",
    "FACE_INDICES",
    "RotationAnimator",
    "centroid",
    "compute_placements",
    "extract_vertices",
    "face_catalog",
    "face_centre",
    "face_points",
    "label_orientation",
    "label_position",
    "load_style",
    "outward_normal",
    "save_style",
    "tetrahedron_position_buffer",
    "tetrahedron_vertices",
    "validate_tetrahedron",
]
