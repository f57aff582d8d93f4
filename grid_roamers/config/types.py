"""Configuration dataclasses for world generation and headless runs.

All frozen dataclasses that parameterise world building and simulation
runs live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from grid_roamers.config.constants import (
    CELLULAR_PASSES,
    EROSION_PASSES,
    MAX_X,
    MAX_Y,
    NUM_TICKS,
    STONE_FRACTION,
)
from grid_roamers.domain.geometry import Grid
from grid_roamers.domain.terrain import TerrainPipeline

__all__ = [
    "SimulationConfig",
    "WorldConfig",
]


@dataclass(frozen=True)
class WorldConfig:
    """Grid size and generation pipeline for a fresh world.

    The ``demo`` pipeline always yields its fixed 16x16 map and ignores
    `width` and `height`.
    """

    width: int = MAX_X
    height: int = MAX_Y
    pipeline: TerrainPipeline = TerrainPipeline.CELLULAR
    stone_fraction: float = STONE_FRACTION
    """Share of cells seeded as Stone by the noise and cellular pipelines."""
    cellular_passes: int = CELLULAR_PASSES
    erosion_passes: int = EROSION_PASSES

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("grid dimensions must be >= 1")
        if not 0.0 <= self.stone_fraction <= 1.0:
            raise ValueError("stone_fraction must be in [0.0, 1.0]")
        if self.cellular_passes < 0:
            raise ValueError("cellular_passes must be >= 0")
        if self.erosion_passes < 0:
            raise ValueError("erosion_passes must be >= 0")

    @property
    def grid(self) -> Grid:
        return Grid(self.width, self.height)


@dataclass(frozen=True)
class SimulationConfig:
    """Headless run: world, population per species, cadence and tick count."""

    world: WorldConfig = field(default_factory=WorldConfig)
    ticks: int = NUM_TICKS
    seed: int = 0
    orcs: int = 0
    trolls: int = 0
    goblins: int = 0
    mimics: int = 0
    cadence: int = 1
    """Acting cadence given to every spawned entity, in ticks per move."""

    def __post_init__(self) -> None:
        if self.ticks < 0:
            raise ValueError("ticks must be >= 0")
        if self.cadence < 1:
            raise ValueError("cadence must be >= 1")
        if min(self.orcs, self.trolls, self.goblins, self.mimics) < 0:
            raise ValueError("population counts must be >= 0")

    @property
    def population(self) -> int:
        return self.orcs + self.trolls + self.goblins + self.mimics
