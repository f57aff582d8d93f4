"""Terrain metrics: tile coverage, trampling and passable-region connectivity."""

from __future__ import annotations

import networkx as nx
import numpy as np

from grid_roamers.domain.geometry import NEIGHBOURS
from grid_roamers.domain.tiles import Tile
from grid_roamers.domain.world import World

TILE_CODES: dict[Tile, int] = {tile: code for code, tile in enumerate(Tile)}
"""Integer code per tile used by ``ground_codes``."""


def ground_codes(world: World) -> np.ndarray:
    """Return ground tiles as a ``(height, width)`` array of ``TILE_CODES``."""
    codes = np.fromiter(
        (TILE_CODES[field.ground] for field in world.fields),
        dtype=np.int8,
        count=world.grid.size,
    )
    return codes.reshape(world.grid.height, world.grid.width)


def tile_coverage(world: World) -> dict[str, float]:
    """Fraction of cells per ground tile; tiles that never occur are omitted."""
    codes = ground_codes(world)
    counts = np.bincount(codes.ravel(), minlength=len(TILE_CODES))
    return {
        tile.value: float(counts[code]) / codes.size
        for tile, code in TILE_CODES.items()
        if counts[code] > 0
    }


def trampled_fraction(world: World) -> float:
    """Share of grass-like cells (Grass or StompedGrass) that are trampled.

    Returns NaN when the world holds no grass at all.
    """
    codes = ground_codes(world)
    stomped = int(np.count_nonzero(codes == TILE_CODES[Tile.STOMPED_GRASS]))
    grass = int(np.count_nonzero(codes == TILE_CODES[Tile.GRASS]))
    if stomped + grass == 0:
        return float("nan")
    return stomped / (stomped + grass)


def passable_graph(world: World) -> nx.Graph:
    """Graph of cells with walkable ground, 8-connected; occupants are ignored."""
    grid = world.grid
    g = nx.Graph()
    walkable = [
        index for index, field in enumerate(world.fields) if field.ground.is_passable_ground
    ]
    g.add_nodes_from(walkable)
    walkable_set = set(walkable)
    for index in walkable:
        origin = grid.coordinate_of(index)
        for move in NEIGHBOURS:
            target = origin + move
            if not grid.in_bounds(target):
                continue
            neighbour = grid.index_of(target)
            if neighbour in walkable_set:
                g.add_edge(index, neighbour)
    return g


def passable_region_count(world: World) -> int:
    """Number of 8-connected regions of walkable ground."""
    return nx.number_connected_components(passable_graph(world))
