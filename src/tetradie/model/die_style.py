from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

from tetradie._constants import (
    DEFAULT_LABEL_OFFSET,
    DEFAULT_ROTATION_ANGLE,
    DEFAULT_ROTATION_DURATION,
)
from tetradie.errors import InvalidConfigurationError
from tetradie.model.colour import Colour

# Fields holding colours; these round-trip through JSON as lists.
_COLOUR_FIELDS = frozenset({"face_colour", "label_colour"})


@dataclass(frozen=True)
class DieStyle:
    """Construction-time settings for a die.

    Only *label_offset*, *rotation_angle* and *rotation_duration*
    affect the computed geometry and animation.  The colour fields are
    carried through untouched for whichever renderer draws the die.

    Attributes:
        label_offset: Distance in model units that each label sits
            above its face, along the outward normal.  Must be
            positive so the label never falls behind the face.
            Small values (around ``1e-4``) keep labels visually flush;
            larger ones (around ``0.1``) separate them clearly.
        rotation_angle: Angle in radians a click-triggered roll turns
            the die about the vertical axis.
        rotation_duration: Length of a roll in seconds.
        face_colour: Colour of the die's faces.
        label_colour: Colour of the label text.
        font_size: Label glyph height in model units.
        show_label_markers: Whether renderers mark each label anchor
            with a small dot, which helps when checking placement.
        marker_radius: Radius of those markers in model units.

    Raises:
        InvalidConfigurationError: If a distance, size or duration is
            not positive, or the angle is not finite.
    """

    label_offset: float = DEFAULT_LABEL_OFFSET
    rotation_angle: float = DEFAULT_ROTATION_ANGLE
    rotation_duration: float = DEFAULT_ROTATION_DURATION
    face_colour: Colour = "orange"
    label_colour: Colour = "black"
    font_size: float = 0.3
    show_label_markers: bool = False
    marker_radius: float = 0.05

    def __post_init__(self) -> None:
        for name in ("label_offset", "rotation_duration", "font_size", "marker_radius"):
            value = getattr(self, name)
            if not value > 0:
                raise InvalidConfigurationError(
                    f"{name} must be positive, got {value}"
                )
        if not math.isfinite(self.rotation_angle):
            raise InvalidConfigurationError(
                f"rotation_angle must be finite, got {self.rotation_angle}"
            )

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  Colours are
        written as given (tuples become lists), never converted.
        """
        d: dict = {}
        for field in dataclasses.fields(self):
            val = getattr(self, field.name)
            if val == field.default:
                continue
            if field.name in _COLOUR_FIELDS and isinstance(val, tuple):
                val = list(val)
            d[field.name] = val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> DieStyle:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains keys that are not style fields.
        """
        names = {f.name for f in dataclasses.fields(cls)}
        unknown = set(d) - names
        if unknown:
            raise ValueError(f"unknown die style keys: {sorted(unknown)}")
        kwargs: dict = {}
        for key, val in d.items():
            if key in _COLOUR_FIELDS and isinstance(val, list):
                val = tuple(val)
            kwargs[key] = val
        return cls(**kwargs)
