"""Configuration layer: constants and typed config dataclasses."""

from grid_roamers.config.constants import (
    CADENCE_PRESETS,
    CELLULAR_PASSES,
    EROSION_PASSES,
    MAX_X,
    MAX_Y,
    NUM_TICKS,
    STONE_FRACTION,
    SWITCH_AFTER_MOVES,
    TERRAIN_WEIGHTS,
)
from grid_roamers.config.types import SimulationConfig, WorldConfig

__all__ = [
    "CADENCE_PRESETS",
    "CELLULAR_PASSES",
    "EROSION_PASSES",
    "MAX_X",
    "MAX_Y",
    "NUM_TICKS",
    "STONE_FRACTION",
    "SWITCH_AFTER_MOVES",
    "SimulationConfig",
    "TERRAIN_WEIGHTS",
    "WorldConfig",
]
