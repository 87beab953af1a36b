"""Depth-sorted drawing of a die onto matplotlib axes."""

from __future__ import annotations

import numpy as np
from matplotlib.axes import Axes
from matplotlib.patches import Circle, Polygon
from matplotlib.path import Path as MPath

from tetradie._constants import UP_AXIS
from tetradie.construction import DieAssembly, face_catalog
from tetradie.model import Vector3, normalise_colour
from tetradie.rendering.projection import screen_angle, to_camera

_UP = Vector3(*UP_AXIS)

# Edge colour is the face colour scaled by this factor.
_EDGE_DARKEN = 0.55

# Margin around the circumscribed sphere, as a fraction of its radius.
_VIEW_PAD = 0.25


def _viewport_extent(die: DieAssembly) -> float:
    """Half-width of a square viewport that holds the die at any roll."""
    radius = float(np.max(np.linalg.norm(die.vertices, axis=1)))
    reach = radius + die.style.label_offset + die.style.marker_radius
    return reach * (1.0 + _VIEW_PAD)


def _points_per_unit(ax: Axes, extent: float) -> float:
    """Typographic points spanned by one model unit on *ax*."""
    fig = ax.get_figure()
    width_in = ax.get_position().width * fig.get_figwidth()
    return width_in * 72.0 / (2.0 * extent)


def _draw_die(
    ax: Axes,
    die: DieAssembly,
    view: np.ndarray,
    *,
    bg_rgb: tuple[float, float, float] = (1.0, 1.0, 1.0),
    viewport_extent: float | None = None,
) -> None:
    """Paint *die* onto *ax* at its current roll angle.

    Faces are filled back to front (painter's algorithm).  Each label
    is drawn right after its face, and only for faces turned towards
    the viewer, so hidden labels never show through.

    Args:
        ax: Axes to draw into.  It is cleared first.
        die: A built die.
        view: 3x3 view rotation.
        bg_rgb: Axes background colour.
        viewport_extent: Half-width of the visible square in model
            units.  ``None`` fits the die.
    """
    extent = viewport_extent if viewport_extent is not None else _viewport_extent(die)
    style = die.style
    mesh_rotation = die.mesh_rotation()

    ax.clear()
    ax.set_facecolor(bg_rgb)
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_aspect("equal")
    ax.axis("off")

    face_rgb = np.array(normalise_colour(style.face_colour))
    edge_rgb = tuple(face_rgb * _EDGE_DARKEN)
    label_rgb = normalise_colour(style.label_colour)
    font_pt = style.font_size * _points_per_unit(ax, extent)

    corners = to_camera(die.vertices, mesh_rotation, view)
    faces = face_catalog()
    depths = [corners[list(face.indices)][:, 2].mean() for face in faces]

    for order, i in enumerate(np.argsort(depths, kind="stable")):
        face = faces[i]
        placement = die.placements[i]
        zorder = 2 * order

        ax.add_patch(Polygon(
            corners[list(face.indices)][:, :2],
            closed=True,
            facecolor=tuple(face_rgb),
            edgecolor=edge_rgb,
            linewidth=1.0,
            zorder=zorder,
        ))

        normal = to_camera(placement.normal.as_array(), mesh_rotation, view)
        if normal[2] <= 0:
            continue

        anchor = to_camera(placement.position.as_array(), mesh_rotation, view)
        up = to_camera(
            placement.orientation.rotate(_UP).as_array(), mesh_rotation, view,
        )
        ax.text(
            anchor[0], anchor[1], placement.text,
            rotation=screen_angle(up),
            rotation_mode="anchor",
            fontsize=font_pt,
            color=label_rgb,
            ha="center",
            va="center",
            zorder=zorder + 1,
        )
        if style.show_label_markers:
            ax.add_patch(Circle(
                (anchor[0], anchor[1]),
                style.marker_radius,
                facecolor="blue",
                edgecolor="none",
                zorder=zorder + 1,
            ))


def _die_contains(die: DieAssembly, view: np.ndarray, x: float, y: float) -> bool:
    """Whether screen point ``(x, y)`` falls on the die's silhouette.

    Coordinates are in the axes' data units, which are camera-space
    model units.  The silhouette is the union of the projected faces
    at the die's current roll angle.
    """
    corners = to_camera(die.vertices, die.mesh_rotation(), view)
    return any(
        MPath(corners[list(face.indices)][:, :2]).contains_point((x, y))
        for face in face_catalog()
    )
