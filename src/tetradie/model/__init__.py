"""Core data model for tetradie: vectors, orientations and die state.

Everything is re-exported here so that ``from tetradie.model import
Vector3`` works without knowing the submodule layout.
"""

from tetradie.model.colour import Colour, normalise_colour, rgb_string
from tetradie.model.die_style import DieStyle
from tetradie.model.orientation import Orientation
from tetradie.model.placement import Face, LabelPlacement
from tetradie.model.rotation_state import RotationState
from tetradie.model.vector import Vector3

__all__ = [
    "Colour",
    "DieStyle",
    "Face",
    "LabelPlacement",
    "Orientation",
    "RotationState",
    "Vector3",
    "normalise_colour",
    "rgb_string",
]
