"""Interactive plotly 3D view of a die and its labels."""

from __future__ import annotations

import numpy as np

from tetradie.construction import DieAssembly, face_catalog
from tetradie.model import Colour, rgb_string


def _build_traces(die: DieAssembly):
    """Build the face mesh and label traces at the die's current roll.

    Returns a tuple of ``(mesh_trace, label_trace)``.
    """
    import plotly.graph_objects as go

    rotation = die.mesh_rotation()
    corners = die.vertices @ rotation.T
    i, j, k = np.array([face.indices for face in face_catalog()]).T

    mesh_trace = go.Mesh3d(
        x=corners[:, 0],
        y=corners[:, 1],
        z=corners[:, 2],
        i=i,
        j=j,
        k=k,
        color=rgb_string(die.style.face_colour),
        flatshading=True,
        name="die",
        hoverinfo="skip",
    )

    anchors = np.array([p.position.as_array() for p in die.placements]) @ rotation.T
    label_trace = go.Scatter3d(
        x=anchors[:, 0],
        y=anchors[:, 1],
        z=anchors[:, 2],
        mode="text+markers" if die.style.show_label_markers else "text",
        text=[p.text for p in die.placements],
        textfont=dict(color=rgb_string(die.style.label_colour), size=18),
        marker=dict(size=4, color="blue"),
        name="labels",
        hoverinfo="text",
    )

    return (mesh_trace, label_trace)


def render_plotly(
    die: DieAssembly,
    *,
    background: Colour = "white",
    width: int = 700,
    height: int = 700,
):
    """Render a die as an interactive plotly 3D figure.

    Plotly draws text as screen-facing billboards, so labels appear at
    their anchors but ignore their orientations.

    Args:
        die: A built :class:`DieAssembly`.
        background: Background colour.
        width: Figure width in pixels.
        height: Figure height in pixels.

    Returns:
        A plotly ``Figure`` object.

    Raises:
        ImportError: If plotly is not installed.
        ValueError: If the die has not been built.
    """
    try:
        import plotly.graph_objects as go
    except ImportError:
        raise ImportError(
            "plotly is required for render_plotly(). "
            "Install it with: pip install plotly"
        )

    if not die.is_built:
        raise ValueError("die must be built before it can be rendered")

    fig = go.Figure(data=_build_traces(die))
    bg = rgb_string(background)
    fig.update_layout(
        scene=dict(
            aspectmode="data",
            bgcolor=bg,
        ),
        width=width,
        height=height,
        showlegend=False,
    )
    return fig
