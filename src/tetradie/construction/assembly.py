"""DieAssembly: label placements plus roll state for one die."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

from tetradie.construction.animation import RotationAnimator
from tetradie.construction.faces import face_catalog, face_points
from tetradie.construction.orientation import (
    centroid,
    face_centre,
    label_orientation,
    label_position,
    outward_normal,
)
from tetradie.construction.vertices import extract_vertices, validate_tetrahedron
from tetradie.model import DieStyle, LabelPlacement, RotationState

if TYPE_CHECKING:
    from matplotlib.figure import Figure


def compute_placements(
    vertices: np.ndarray, label_offset: float,
) -> tuple[LabelPlacement, ...]:
    """Compute the label placement of each face, in label order.

    Args:
        vertices: Tetrahedron corners, shape ``(4, 3)``.
        label_offset: Distance of each label above its face.

    Returns:
        Four :class:`LabelPlacement` objects for faces 1 to 4.

    Raises:
        DegenerateGeometryError: If a face is degenerate.
        InvalidConfigurationError: If *label_offset* is not positive.
    """
    interior = centroid(vertices)
    placements = []
    for face in face_catalog():
        points = face_points(face, vertices)
        centre = face_centre(points)
        normal = outward_normal(points, interior)
        placements.append(LabelPlacement(
            position=label_position(centre, normal, label_offset),
            orientation=label_orientation(centre, interior, points[0]),
            text=face.text,
            normal=normal,
            face=face,
        ))
    return tuple(placements)


class DieAssembly:
    """A tetrahedral die: fixed label geometry and a roll animation.

    Typical use by a rendering loop::

        die = DieAssembly(DieStyle(label_offset=1e-4))
        for placement in die.build(vertices):
            add_text(placement.position, placement.orientation, placement.text)

        # once per frame:
        state = die.tick(dt, clicked=mouse_clicked)
        mesh.rotation.y += die.last_increment

    Args:
        style: Offsets, roll timing and colours.  ``None`` uses the
            defaults.
    """

    def __init__(self, style: DieStyle | None = None) -> None:
        self.style = style if style is not None else DieStyle()
        self.animator = RotationAnimator(
            total_angle=self.style.rotation_angle,
            duration=self.style.rotation_duration,
        )
        self._vertices: np.ndarray | None = None
        self._placements: tuple[LabelPlacement, ...] | None = None

    @classmethod
    def from_position_buffer(
        cls,
        buffer: Sequence[float] | np.ndarray,
        style: DieStyle | None = None,
    ) -> DieAssembly:
        """Create and build a die from a mesh's raw position buffer.

        Raises:
            MalformedGeometryError: If the buffer does not hold
                exactly four distinct points.
            DegenerateGeometryError: If those points are coplanar.
        """
        die = cls(style)
        die.build(extract_vertices(buffer))
        return die

    def build(self, vertices: np.ndarray) -> tuple[LabelPlacement, ...]:
        """Compute and cache the four label placements.

        Called once, when the die's geometry becomes available.  The
        geometry is fixed from then on.

        Args:
            vertices: Tetrahedron corners, shape ``(4, 3)``.

        Returns:
            Four :class:`LabelPlacement` objects for faces 1 to 4.

        Raises:
            RuntimeError: If the die has already been built.
            MalformedGeometryError: If *vertices* is not ``(4, 3)``.
            DegenerateGeometryError: If the vertices are coplanar.
        """
        if self._placements is not None:
            raise RuntimeError("die geometry has already been built")
        checked = validate_tetrahedron(vertices).copy()
        checked.flags.writeable = False
        placements = compute_placements(checked, self.style.label_offset)
        self._vertices = checked
        self._placements = placements
        return placements

    @property
    def is_built(self) -> bool:
        return self._placements is not None

    @property
    def vertices(self) -> np.ndarray:
        """The die's corners, read-only, shape ``(4, 3)``."""
        if self._vertices is None:
            raise RuntimeError("die geometry has not been built yet")
        return self._vertices

    @property
    def placements(self) -> tuple[LabelPlacement, ...]:
        """The cached label placements from :meth:`build`."""
        if self._placements is None:
            raise RuntimeError("die geometry has not been built yet")
        return self._placements

    @property
    def state(self) -> RotationState:
        return self.animator.state

    @property
    def angle(self) -> float:
        """Accumulated roll angle about the vertical axis, in radians."""
        return self.animator.angle

    @property
    def last_increment(self) -> float:
        """Angle added to :attr:`angle` by the most recent :meth:`tick`."""
        return self.animator.last_increment

    def tick(self, dt: float, clicked: bool = False) -> RotationState:
        """Advance one rendering frame.

        A click, if any, is applied before time advances, so the frame
        a roll starts on already turns the die.

        Args:
            dt: Seconds since the previous frame.
            clicked: Whether the die was clicked during this frame.

        Returns:
            The roll state after this frame.
        """
        if clicked:
            self.animator.click()
        self.animator.tick(dt)
        return self.animator.state

    def mesh_rotation(self) -> np.ndarray:
        """3x3 rotation matrix to apply to the mesh this frame."""
        return self.animator.matrix()

    def render_mpl(self, output: str | Path | None = None, **kwargs: Any) -> Figure:
        """Render the die with matplotlib.

        Convenience wrapper around
        :func:`tetradie.rendering.static.render_mpl`; all keyword
        arguments are passed through.
        """
        from tetradie.rendering.static import render_mpl

        return render_mpl(self, output, **kwargs)

    def render_mpl_interactive(self, **kwargs: Any) -> DieAssembly:
        """Open an interactive window; click the die to roll it.

        See :func:`tetradie.rendering.interactive.render_mpl_interactive`.
        """
        from tetradie.rendering.interactive import render_mpl_interactive

        return render_mpl_interactive(self, **kwargs)

    def render_plotly(self, **kwargs: Any):
        """Render the die as a plotly figure (requires plotly).

        See :func:`tetradie.render_plotly.render_plotly`.
        """
        from tetradie.render_plotly import render_plotly

        return render_plotly(self, **kwargs)
