"""Entity and game-state snapshot values."""

from __future__ import annotations

from dataclasses import dataclass

from grid_roamers.domain.acting import ActingState
from grid_roamers.domain.geometry import Coordinate
from grid_roamers.domain.movement import Movement
from grid_roamers.domain.tiles import Tile
from grid_roamers.domain.world import World


@dataclass(frozen=True)
class Entity:
    """A roaming agent at one cell, with its cadence and movement strategy."""

    id: str
    tile: Tile
    coordinate: Coordinate
    state: ActingState
    movement: Movement


@dataclass(frozen=True)
class GameState:
    """The world plus its entities in acting order; replaced wholesale each tick."""

    world: World
    entities: tuple[Entity, ...] = ()
