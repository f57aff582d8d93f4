"""Domain error taxonomy."""

from __future__ import annotations


class NoSpawnableCellError(LookupError):
    """Raised when no unoccupied cell with spawnable ground is left."""


class OutOfBoundsError(IndexError):
    """Raised when a coordinate or index outside the grid is dereferenced.

    Public operations check bounds before dereferencing, so seeing this
    means a caller skipped ``in_bounds``/``is_passable``.
    """
