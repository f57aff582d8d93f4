"""Commands a caller issues against a ``GameState``: spawn, kill-all, reset, regenerate."""

from __future__ import annotations

import logging
from random import Random

from grid_roamers.config.constants import STONE_FRACTION
from grid_roamers.config.types import WorldConfig
from grid_roamers.domain.acting import ActingState
from grid_roamers.domain.entity import Entity, GameState
from grid_roamers.domain.geometry import Move
from grid_roamers.domain.movement import (
    Bouncing,
    KeepOn,
    Movement,
    SurroundObject,
    SwitchingMovement,
)
from grid_roamers.domain.terrain import build_world, generate_initial_world
from grid_roamers.domain.tiles import Field, Tile
from grid_roamers.domain.world import World

logger = logging.getLogger(__name__)


def default_movement(species: Tile) -> Movement:
    """Initial strategy for a freshly spawned entity of `species`."""
    if species is Tile.ORC:
        return Bouncing(Move.STAY)
    if species is Tile.TROLL:
        return KeepOn(Move.STAY)
    if species is Tile.GOBLIN:
        return SurroundObject(Move.UP, Move.LEFT)
    if species is Tile.MIMIC:
        return SwitchingMovement(Bouncing(Move.STAY))
    raise ValueError(f"{species.value} is not a species")


def spawn(state: GameState, species: Tile, cadence_ticks: int, rng: Random) -> GameState:
    """Add one `species` entity on a random free cell and mark the cell occupied.

    Raises ``NoSpawnableCellError`` when no free cell is left; `state` is
    never modified.
    """
    movement = default_movement(species)
    coordinate = state.world.get_start_coordinate(rng)
    entity = Entity(
        id=f"{species.symbol}{len(state.entities)}",
        tile=species,
        coordinate=coordinate,
        state=ActingState(cadence_ticks),
        movement=movement,
    )
    logger.debug("spawned %s at (%d, %d)", entity.id, coordinate.x, coordinate.y)
    return GameState(
        world=state.world.update(entity, entity),
        entities=state.entities + (entity,),
    )


def kill_all(state: GameState) -> GameState:
    """Drop every entity and restore trampled terrain."""
    logger.debug("removing %d entities", len(state.entities))
    return GameState(world=state.world.clear_entities(), entities=())


def regenerate(config: WorldConfig, rng: Random) -> World:
    """Fresh world from the pipeline selected in `config`."""
    return build_world(config, rng)


def reset(state: GameState, rng: Random, stone_fraction: float = STONE_FRACTION) -> GameState:
    """Replace the world by fresh stone noise on the same grid and drop every entity."""
    logger.debug("resetting %dx%d world", state.world.grid.width, state.world.grid.height)
    return GameState(
        world=generate_initial_world(state.world.grid, rng, stone_fraction),
        entities=(),
    )


def fields(state: GameState) -> tuple[Field, ...]:
    """Cells of the current world in row-major order."""
    return state.world.fields


def initial_state(config: WorldConfig, rng: Random) -> GameState:
    """Empty game on a freshly built world."""
    return GameState(world=regenerate(config, rng), entities=())
