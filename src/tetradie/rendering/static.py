"""Static matplotlib renderer: :func:`render_mpl` entry point."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from tetradie.construction import DieAssembly
from tetradie.model import Colour, normalise_colour
from tetradie.rendering.painter import _draw_die
from tetradie.rendering.projection import DEFAULT_VIEW


def _require_built(die: DieAssembly) -> None:
    if not die.is_built:
        raise ValueError("die must be built before it can be rendered")


def render_mpl(
    die: DieAssembly,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    view: np.ndarray | None = None,
    figsize: tuple[float, float] = (5.0, 5.0),
    dpi: int = 150,
    background: Colour = "white",
    show: bool | None = None,
) -> Figure:
    """Render a die at its current roll angle as a matplotlib figure.

    Example usage::

        die = DieAssembly.from_position_buffer(tetrahedron_position_buffer())
        render_mpl(die, "die.png")

        # Check label anchors:
        die = DieAssembly(DieStyle(show_label_markers=True))
        die.build(tetrahedron_vertices())
        render_mpl(die, "markers.svg")

    Args:
        die: A built :class:`DieAssembly`.
        output: Optional file path to save the figure.  The format is
            inferred from the extension.  Ignored when *ax* is given.
        ax: Optional axes to draw into.  The caller then owns the
            figure, and *output*, *figsize*, *dpi*, *background* and
            *show* are ignored.
        view: 3x3 view rotation.  ``None`` uses a three-quarter view
            that shows three faces.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution for raster output formats.
        background: Background colour.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``, ``False`` when saving.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.

    Raises:
        ValueError: If the die has not been built.
    """
    _require_built(die)
    view = DEFAULT_VIEW if view is None else np.asarray(view, dtype=float)

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_die(ax, die, view, bg_rgb=normalise_colour(ax.get_facecolor()[:3]))
        return fig

    bg_rgb = normalise_colour(background)
    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    fig.set_facecolor(bg_rgb)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)

    _draw_die(ax, die, view, bg_rgb=bg_rgb)

    if output is not None:
        fig.savefig(str(output), dpi=dpi)

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
