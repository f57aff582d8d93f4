"""Domain layer: grid geometry, tiles, world, movement strategies and terrain."""

from grid_roamers.domain.errors import NoSpawnableCellError, OutOfBoundsError
from grid_roamers.domain.tiles import (
    PASSABLE_GROUND,
    SPAWNABLE_GROUND,
    SPECIES,
    Field,
    Tile,
    fields_from_symbols,
)
from grid_roamers.domain.geometry import NEIGHBOURS, NEIGHBOURS_FOUR, Coordinate, Grid, Move
from grid_roamers.domain.acting import ActingState
from grid_roamers.domain.world import World
from grid_roamers.domain.movement import (
    Bouncing,
    KeepOn,
    Movement,
    SurroundObject,
    SurroundState,
    SwitchingMovement,
    compute_next,
)
from grid_roamers.domain.entity import Entity, GameState
from grid_roamers.domain.terrain import (
    TerrainPass,
    TerrainPipeline,
    apply_cellular_automata,
    apply_pass,
    build_world,
    demo_world,
    dilation,
    erosion,
    generate_cellular_world,
    generate_grass_world,
    generate_initial_world,
    generate_world,
    remove_gnubbels,
)

__all__ = [
    "ActingState",
    "Bouncing",
    "Coordinate",
    "Entity",
    "Field",
    "GameState",
    "Grid",
    "KeepOn",
    "Move",
    "Movement",
    "NEIGHBOURS",
    "NEIGHBOURS_FOUR",
    "NoSpawnableCellError",
    "OutOfBoundsError",
    "PASSABLE_GROUND",
    "SPAWNABLE_GROUND",
    "SPECIES",
    "SurroundObject",
    "SurroundState",
    "SwitchingMovement",
    "TerrainPass",
    "TerrainPipeline",
    "Tile",
    "World",
    "apply_cellular_automata",
    "apply_pass",
    "build_world",
    "compute_next",
    "demo_world",
    "dilation",
    "erosion",
    "fields_from_symbols",
    "generate_cellular_world",
    "generate_grass_world",
    "generate_initial_world",
    "generate_world",
    "remove_gnubbels",
]
