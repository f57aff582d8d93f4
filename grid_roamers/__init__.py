"""Tile-grid simulation of roaming entities on procedurally generated terrain."""

__version__ = "0.1.0"
