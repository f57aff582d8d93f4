"""Terrain generation and cellular-automata post-processing.

Every pass is a pure ``World -> World`` function that reads only the prior
snapshot, so cells rewritten within one pass never see each other's output.
Cells a pass rewrites come back unoccupied; untouched cells keep their fields.
"""

from __future__ import annotations

from enum import Enum
from random import Random
from typing import TYPE_CHECKING

from grid_roamers.config.constants import (
    BLOCKED_NEIGHBOUR_THRESHOLD,
    CELLULAR_PASSES,
    GNUBBEL_GRASS_THRESHOLD,
    MAX_X,
    MAX_Y,
    STONE_FRACTION,
    TERRAIN_WEIGHTS,
)
from grid_roamers.domain.geometry import Grid
from grid_roamers.domain.tiles import Field, Tile
from grid_roamers.domain.world import World

if TYPE_CHECKING:
    from grid_roamers.config.types import WorldConfig

DEFAULT_GRID = Grid(MAX_X, MAX_Y)

DEMO_MAP: tuple[str, ...] = (
    ".....##.........",
    ".....#......####",
    ".....#..........",
    "................",
    ".......###......",
    "*.....#####.....",
    "......####......",
    "................",
    ".......**.......",
    "......*****.....",
    "....***...****..",
    ".....**..***....",
    "..........****..",
    ".......#........",
    ".......###......",
    ".......#.###....",
)
"""Hand-drawn 16x16 map with stone outcrops and tree clusters."""


class TerrainPass(Enum):
    """Post-processing passes that can be applied on demand."""

    CELLULAR_AUTOMATA = "cellular_automata"
    EROSION = "erosion"
    DILATION = "dilation"
    REMOVE_GNUBBELS = "remove_gnubbels"


class TerrainPipeline(Enum):
    """Ways to produce a fresh world."""

    RANDOM = "random"
    GRASS = "grass"
    NOISE = "noise"
    CELLULAR = "cellular"
    DEMO = "demo"


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


def generate_world(grid: Grid = DEFAULT_GRID, rng: Random | None = None) -> World:
    """Draw every cell independently from ``TERRAIN_WEIGHTS``."""
    rng = rng or Random()
    tiles = [Tile(name) for name, _ in TERRAIN_WEIGHTS]
    weights = [weight for _, weight in TERRAIN_WEIGHTS]
    return World.from_grounds(grid, rng.choices(tiles, weights=weights, k=grid.size))


def generate_grass_world(grid: Grid = DEFAULT_GRID) -> World:
    return World.filled(grid, Tile.GRASS)


def generate_initial_world(
    grid: Grid = DEFAULT_GRID,
    rng: Random | None = None,
    stone_fraction: float = STONE_FRACTION,
) -> World:
    """All-Grass world with ``int(size * stone_fraction)`` distinct cells turned to Stone."""
    if not 0.0 <= stone_fraction <= 1.0:
        raise ValueError("stone_fraction must be in [0.0, 1.0]")
    rng = rng or Random()
    stones = set(rng.sample(range(grid.size), int(grid.size * stone_fraction)))
    return World.from_grounds(
        grid, (Tile.STONE if index in stones else Tile.GRASS for index in range(grid.size))
    )


def generate_cellular_world(
    times: int = CELLULAR_PASSES,
    grid: Grid = DEFAULT_GRID,
    rng: Random | None = None,
    stone_fraction: float = STONE_FRACTION,
) -> World:
    """Noise world smoothed by `times` cellular-automata passes."""
    if times < 0:
        raise ValueError("times must be >= 0")
    world = generate_initial_world(grid, rng, stone_fraction)
    for _ in range(times):
        world = apply_cellular_automata(world)
    return world


def demo_world() -> World:
    return World.from_symbols(DEMO_MAP)


# ---------------------------------------------------------------------------
# Post-processing passes
# ---------------------------------------------------------------------------


def apply_cellular_automata(world: World) -> World:
    """One smoothing pass: Stone where most of the 8-neighbourhood is blocked, else Grass."""
    grid, fields = world.grid, world.fields
    return World.from_grounds(
        grid,
        (
            Tile.STONE
            if grid.blocked_neighbours_of(index, fields) > BLOCKED_NEIGHBOUR_THRESHOLD
            else Tile.GRASS
            for index in range(grid.size)
        ),
    )


def erosion(world: World) -> World:
    """Turn every non-Grass cell touching Grass (8-neighbourhood) into Grass."""
    grid, fields = world.grid, world.fields
    return World(
        grid=grid,
        fields=tuple(
            Field.of(Tile.GRASS)
            if field.ground is not Tile.GRASS
            and any(fields[n].ground is Tile.GRASS for n in grid.neighbours_of(index))
            else field
            for index, field in enumerate(fields)
        ),
    )


def dilation(world: World) -> World:
    """Turn every Grass cell touching non-Grass (8-neighbourhood) into Stone."""
    grid, fields = world.grid, world.fields
    return World(
        grid=grid,
        fields=tuple(
            Field.of(Tile.STONE)
            if field.ground is Tile.GRASS
            and any(fields[n].ground is not Tile.GRASS for n in grid.neighbours_of(index))
            else field
            for index, field in enumerate(fields)
        ),
    )


def remove_gnubbels(world: World) -> World:
    """Turn non-Grass cells with more than two Grass orthogonal neighbours into Grass."""
    grid, fields = world.grid, world.fields
    return World(
        grid=grid,
        fields=tuple(
            Field.of(Tile.GRASS)
            if field.ground is not Tile.GRASS
            and sum(1 for n in grid.neighbours_four_of(index) if fields[n].ground is Tile.GRASS)
            > GNUBBEL_GRASS_THRESHOLD
            else field
            for index, field in enumerate(fields)
        ),
    )


_PASSES = {
    TerrainPass.CELLULAR_AUTOMATA: apply_cellular_automata,
    TerrainPass.EROSION: erosion,
    TerrainPass.DILATION: dilation,
    TerrainPass.REMOVE_GNUBBELS: remove_gnubbels,
}


def parse_terrain_pass(raw: TerrainPass | str) -> TerrainPass:
    """Accept a ``TerrainPass`` or its string value."""
    if isinstance(raw, TerrainPass):
        return raw
    try:
        return TerrainPass(raw)
    except ValueError as exc:
        valid = ", ".join(p.value for p in TerrainPass)
        raise ValueError(f"terrain pass must be one of {valid}") from exc


def apply_pass(world: World, pass_name: TerrainPass | str) -> World:
    """Apply one named post-processing pass.

    Cells the pass rewrites come back unoccupied; run it on a world without
    entities, or clear them first with ``kill_all``.
    """
    return _PASSES[parse_terrain_pass(pass_name)](world)


def build_world(config: WorldConfig, rng: Random) -> World:
    """Produce a fresh world with the pipeline selected in `config`."""
    grid = config.grid
    pipeline = config.pipeline
    if pipeline is TerrainPipeline.RANDOM:
        return generate_world(grid, rng)
    if pipeline is TerrainPipeline.GRASS:
        return generate_grass_world(grid)
    if pipeline is TerrainPipeline.NOISE:
        return generate_initial_world(grid, rng, config.stone_fraction)
    if pipeline is TerrainPipeline.DEMO:
        return demo_world()
    world = generate_cellular_world(config.cellular_passes, grid, rng, config.stone_fraction)
    for _ in range(config.erosion_passes):
        world = erosion(world)
    return world
