"""Exceptions raised by tetradie.

All errors derive from :class:`DieGeometryError`, itself a
:class:`ValueError`, so callers that already guard input validation
with ``except ValueError`` keep working.
"""


class DieGeometryError(ValueError):
    """Base class for all tetradie errors."""


class MalformedGeometryError(DieGeometryError):
    """A vertex source did not decode to exactly four distinct points."""


class DegenerateGeometryError(DieGeometryError):
    """The vertices do not span a solid, or a vector could not be normalised."""


class InvalidConfigurationError(DieGeometryError):
    """A configuration value is out of range (e.g. a non-positive offset)."""
