"""One global simulation tick."""

from __future__ import annotations

from dataclasses import replace
from random import Random

from grid_roamers.domain.entity import Entity, GameState
from grid_roamers.domain.movement import compute_next
from grid_roamers.domain.world import World


def advance_entity(entity: Entity, world: World, rng: Random) -> Entity:
    """Tick `entity`'s cadence and, if it may act, consult its movement against `world`."""
    acting = entity.state.tick()
    if not acting.can_act:
        return replace(entity, state=acting)
    movement, coordinate = compute_next(entity.movement, world, entity.coordinate, rng)
    return replace(entity, state=acting, coordinate=coordinate, movement=movement)


def step(state: GameState, rng: Random) -> GameState:
    """Advance every entity once, in storage order.

    Each entity sees the world as already updated by the entities before it
    in the same tick, so the earlier of two entities heading for one cell
    claims it.
    """
    world = state.world
    committed: list[Entity] = []
    for entity in state.entities:
        moved = advance_entity(entity, world, rng)
        world = world.update(entity, moved)
        committed.append(moved)
    return GameState(world=world, entities=tuple(committed))
