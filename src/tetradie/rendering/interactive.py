"""Interactive matplotlib window: click the die to roll it."""

from __future__ import annotations

import time

import matplotlib.pyplot as plt
import numpy as np

from tetradie.construction import DieAssembly
from tetradie.model import Colour, normalise_colour
from tetradie.rendering.painter import _die_contains, _draw_die, _viewport_extent
from tetradie.rendering.projection import DEFAULT_VIEW
from tetradie.rendering.static import _require_built

_FRAME_INTERVAL_MS = 33  # ~30 fps

# Frames longer than this (e.g. after the window was dragged or the
# process stalled) are shortened so the die does not jump.
_MAX_FRAME_DT = 0.25


def _advance_frame(die: DieAssembly, state: dict, now: float) -> bool:
    """Feed one frame's time step and pending click to *die*.

    Mutates *state* (``"last_t"`` and ``"click_pending"``).

    Returns:
        Whether the die turned this frame and needs repainting.
    """
    dt = min(max(now - state["last_t"], 0.0), _MAX_FRAME_DT)
    state["last_t"] = now
    clicked = state["click_pending"]
    state["click_pending"] = False
    die.tick(dt, clicked=clicked)
    return die.last_increment != 0.0


def render_mpl_interactive(
    die: DieAssembly,
    *,
    view: np.ndarray | None = None,
    figsize: tuple[float, float] = (5.0, 5.0),
    dpi: int = 100,
    background: Colour = "white",
) -> DieAssembly:
    """Show the die in a matplotlib window and roll it on click.

    A left click on the die starts a roll.  Clicks on the background
    and clicks during a roll are ignored.  A canvas timer drives the
    animation with wall-clock frame times, so a roll takes the die's
    configured duration regardless of frame rate.

    Args:
        die: A built :class:`DieAssembly`.
        view: 3x3 view rotation.  ``None`` uses the default
            three-quarter view.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Screen resolution.
        background: Background colour.

    Returns:
        *die*, with its roll angle as left when the window closed.

    Raises:
        ValueError: If the die has not been built.
    """
    _require_built(die)
    view = DEFAULT_VIEW if view is None else np.asarray(view, dtype=float)
    bg_rgb = normalise_colour(background)
    extent = _viewport_extent(die)

    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    fig.set_facecolor(bg_rgb)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    _draw_die(ax, die, view, bg_rgb=bg_rgb, viewport_extent=extent)

    state: dict = {
        "last_t": time.monotonic(),
        "click_pending": False,
    }

    def on_press(event):
        if event.inaxes != ax or event.button != 1:
            return
        if not _die_contains(die, view, event.xdata, event.ydata):
            return
        state["click_pending"] = True

    def on_frame():
        if _advance_frame(die, state, time.monotonic()):
            _draw_die(ax, die, view, bg_rgb=bg_rgb, viewport_extent=extent)
            fig.canvas.draw_idle()

    fig.canvas.mpl_connect("button_press_event", on_press)
    timer = fig.canvas.new_timer(interval=_FRAME_INTERVAL_MS)
    timer.add_callback(on_frame)
    timer.start()

    plt.show()
    timer.stop()

    return die
