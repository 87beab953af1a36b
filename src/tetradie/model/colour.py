from __future__ import annotations

#: A colour specification for die faces and labels.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"orange"``, ``"#ffa500"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - An RGB tuple or list with values in ``[0, 1]``.
#:
#: The geometry code never inspects colours; only the preview
#: renderers convert them with :func:`normalise_colour`.
Colour = str | float | tuple[float, float, float] | list[float]


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Convert a colour specification to an ``(r, g, b)`` tuple in [0, 1].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, (int, float)) and not isinstance(colour, bool):
        grey = float(colour)
        if not 0.0 <= grey <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {grey}")
        return (grey, grey, grey)

    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(
                f"RGB sequence must have 3 elements, got {len(colour)}"
            )
        rgb = tuple(float(c) for c in colour)
        if not all(0.0 <= c <= 1.0 for c in rgb):
            raise ValueError(f"RGB components must be in [0, 1], got {rgb}")
        return rgb  # type: ignore[return-value]

    if isinstance(colour, str):
        from matplotlib.colors import to_rgb

        try:
            return to_rgb(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}")

    raise ValueError(f"Cannot interpret colour: {colour!r}")


def rgb_string(colour: Colour) -> str:
    """Format a colour as a CSS ``rgb(r, g, b)`` string."""
    r, g, b = normalise_colour(colour)
    return f"rgb({int(r * 255)}, {int(g * 255)}, {int(b * 255)})"
