from __future__ import annotations

from dataclasses import dataclass

from tetradie.model.orientation import Orientation
from tetradie.model.vector import Vector3


@dataclass(frozen=True)
class Face:
    """One triangular face of a tetrahedron.

    Attributes:
        indices: Three distinct vertex indices in ``0..3``.  Their
            order is significant: ``indices[0]`` is the vertex the
            label's top points towards.
        label: The number printed on the face (1 to 4).

    Raises:
        ValueError: If the indices are not three distinct values in
            ``0..3`` or the label is outside ``1..4``.
    """

    indices: tuple[int, int, int]
    label: int

    def __post_init__(self) -> None:
        if (
            len(self.indices) != 3
            or len(set(self.indices)) != 3
            or not all(0 <= i <= 3 for i in self.indices)
        ):
            raise ValueError(
                f"face indices must be three distinct values in 0..3, "
                f"got {self.indices}"
            )
        if not 1 <= self.label <= 4:
            raise ValueError(f"face label must be in 1..4, got {self.label}")

    @property
    def text(self) -> str:
        """The label as it is printed on the die."""
        return str(self.label)


@dataclass(frozen=True)
class LabelPlacement:
    """Where and how one face's label is drawn.

    Positions and directions are in the die's local frame, before the
    roll rotation is applied.

    Attributes:
        position: Label anchor, just outside the face plane.
        orientation: Rotation taking the glyph's canonical frame
            (facing ``+z``, top towards ``+y``) onto the face.
        text: The label string, e.g. ``"3"``.
        normal: Outward unit normal of the host face.
        face: The host face.
    """

    position: Vector3
    orientation: Orientation
    text: str
    normal: Vector3
    face: Face
