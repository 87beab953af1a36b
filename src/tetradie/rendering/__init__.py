"""Rendering: depth-sorted matplotlib previews (static and interactive)."""

from tetradie.rendering.interactive import render_mpl_interactive
from tetradie.rendering.static import render_mpl

__all__ = [
    "render_mpl",
    "render_mpl_interactive",
]
