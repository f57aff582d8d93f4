"""Headless run loop: build a world, spawn a population, step a fixed number of ticks."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from random import Random

from grid_roamers.config.types import SimulationConfig
from grid_roamers.domain.entity import GameState
from grid_roamers.domain.errors import NoSpawnableCellError
from grid_roamers.domain.tiles import Tile
from grid_roamers.metrics.activity import moved_fraction, occupied_count
from grid_roamers.metrics.terrain import passable_region_count, tile_coverage, trampled_fraction
from grid_roamers.simulation.commands import initial_state, spawn
from grid_roamers.simulation.step import step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one headless run."""

    final_state: GameState
    ticks_run: int
    spawned: int
    requested: int
    moved_fractions: tuple[float, ...]
    """Per-tick share of entities that changed cell."""

    def summary(self) -> dict[str, object]:
        """JSON-friendly digest of the run."""
        world = self.final_state.world
        return {
            "grid_width": world.grid.width,
            "grid_height": world.grid.height,
            "ticks_run": self.ticks_run,
            "entities_requested": self.requested,
            "entities_spawned": self.spawned,
            "occupied_cells": occupied_count(self.final_state),
            "tile_coverage": tile_coverage(world),
            "trampled_fraction": _finite_or_none(trampled_fraction(world)),
            "passable_regions": passable_region_count(world),
            "mean_moved_fraction": _mean_ignoring_nan(self.moved_fractions),
        }


def _finite_or_none(value: float) -> float | None:
    return None if math.isnan(value) else value


def _mean_ignoring_nan(values: tuple[float, ...]) -> float | None:
    finite = [value for value in values if not math.isnan(value)]
    if not finite:
        return None
    return sum(finite) / len(finite)


def populate(state: GameState, config: SimulationConfig, rng: Random) -> GameState:
    """Spawn the configured population, stopping a species once the world is full."""
    for species, count in (
        (Tile.ORC, config.orcs),
        (Tile.TROLL, config.trolls),
        (Tile.GOBLIN, config.goblins),
        (Tile.MIMIC, config.mimics),
    ):
        for placed in range(count):
            try:
                state = spawn(state, species, config.cadence, rng)
            except NoSpawnableCellError:
                logger.warning(
                    "no free cell left: placed %d of %d %s", placed, count, species.value
                )
                break
    return state


def run_simulation(config: SimulationConfig) -> SimulationResult:
    """Run `config.ticks` ticks from a fresh world seeded with `config.seed`."""
    rng = Random(config.seed)
    state = populate(initial_state(config.world, rng), config, rng)
    logger.info(
        "running %d ticks on %dx%d %s world with %d entities",
        config.ticks,
        state.world.grid.width,
        state.world.grid.height,
        config.world.pipeline.value,
        len(state.entities),
    )
    fractions: list[float] = []
    for tick in range(config.ticks):
        next_state = step(state, rng)
        fractions.append(moved_fraction(state, next_state))
        logger.debug("tick %d: moved fraction %.3f", tick, fractions[-1])
        state = next_state
    logger.info("finished %d ticks", config.ticks)
    return SimulationResult(
        final_state=state,
        ticks_run=config.ticks,
        spawned=len(state.entities),
        requested=config.population,
        moved_fractions=tuple(fractions),
    )
