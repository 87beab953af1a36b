"""Tetradie: label geometry and roll animation for a tetrahedral die.

Tetradie works out where each face's number goes on a four-sided die,
which way the number faces and which way up it reads, and runs the
click-triggered half-turn roll.  A rendering loop supplies vertices,
frame times and clicks; tetradie returns label placements and the
angle to turn the mesh each frame.

Example usage::

    from tetradie import DieAssembly, tetrahedron_vertices

    die = DieAssembly()
    placements = die.build(tetrahedron_vertices())
    die.tick(1 / 60, clicked=True)
    die.render_mpl("die.png")
"""

from tetradie.construction import (
    FACE_INDICES,
    DieAssembly,
    RotationAnimator,
    centroid,
    compute_placements,
    extract_vertices,
    face_catalog,
    face_centre,
    label_orientation,
    label_position,
    load_style,
    outward_normal,
    save_style,
    tetrahedron_position_buffer,
    tetrahedron_vertices,
    validate_tetrahedron,
)
from tetradie.errors import (
    DegenerateGeometryError,
    DieGeometryError,
    InvalidConfigurationError,
    MalformedGeometryError,
)
from tetradie.model import (
    Colour,
    DieStyle,
    Face,
    LabelPlacement,
    Orientation,
    RotationState,
    Vector3,
    normalise_colour,
)

__all__ = [
    "Colour",
    "DegenerateGeometryError",
    "DieAssembly",
    "DieGeometryError",
    "DieStyle",
    "FACE_INDICES",
    "Face",
    "InvalidConfigurationError",
    "LabelPlacement",
    "MalformedGeometryError",
    "Orientation",
    "RotationAnimator",
    "RotationState",
    "Vector3",
    "centroid",
    "compute_placements",
    "extract_vertices",
    "face_catalog",
    "face_centre",
    "label_orientation",
    "label_position",
    "load_style",
    "normalise_colour",
    "outward_normal",
    "save_style",
    "tetrahedron_position_buffer",
    "tetrahedron_vertices",
    "validate_tetrahedron",
]
