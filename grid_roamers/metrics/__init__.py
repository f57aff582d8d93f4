"""Metrics over worlds and game-state snapshots."""

from grid_roamers.metrics.activity import moved_fraction, occupied_count
from grid_roamers.metrics.terrain import (
    TILE_CODES,
    ground_codes,
    passable_graph,
    passable_region_count,
    tile_coverage,
    trampled_fraction,
)

__all__ = [
    "TILE_CODES",
    "ground_codes",
    "moved_fraction",
    "occupied_count",
    "passable_graph",
    "passable_region_count",
    "tile_coverage",
    "trampled_fraction",
]
