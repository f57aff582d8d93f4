"""Tests for grid_roamers.metrics.terrain."""

from __future__ import annotations

import math

import pytest

from grid_roamers.domain.acting import ActingState
from grid_roamers.domain.entity import Entity
from grid_roamers.domain.geometry import Coordinate, Grid, Move
from grid_roamers.domain.movement import Bouncing
from grid_roamers.domain.tiles import Tile
from grid_roamers.domain.world import World
from grid_roamers.metrics.terrain import (
    TILE_CODES,
    ground_codes,
    passable_graph,
    passable_region_count,
    tile_coverage,
    trampled_fraction,
)


class TestGroundCodes:
    def test_shape_is_height_by_width(self) -> None:
        world = World.from_symbols(["..#", "*.."])
        codes = ground_codes(world)
        assert codes.shape == (2, 3)
        assert codes[0, 2] == TILE_CODES[Tile.STONE]
        assert codes[1, 0] == TILE_CODES[Tile.TREE]

    def test_codes_are_distinct(self) -> None:
        assert len(set(TILE_CODES.values())) == len(TILE_CODES)


class TestTileCoverage:
    def test_fractions(self) -> None:
        coverage = tile_coverage(World.from_symbols(["..#", "..*"]))
        assert coverage == pytest.approx({"grass": 4 / 6, "stone": 1 / 6, "tree": 1 / 6})

    def test_fractions_sum_to_one(self) -> None:
        coverage = tile_coverage(World.from_symbols([".#*x", "...."]))
        assert sum(coverage.values()) == pytest.approx(1.0)
        assert "empty" in coverage


class TestTrampledFraction:
    def test_no_grass_is_nan(self) -> None:
        assert math.isnan(trampled_fraction(World.filled(Grid(2, 2), Tile.STONE)))

    def test_counts_stomped_share(self) -> None:
        world = World.filled(Grid(4, 1), Tile.GRASS)
        orc = Entity("O0", Tile.ORC, Coordinate(0, 0), ActingState(1), Bouncing(Move.STAY))
        moved = Entity("O0", Tile.ORC, Coordinate(1, 0), ActingState(1), Bouncing(Move.RIGHT))
        world = world.update(orc, orc).update(orc, moved)
        assert trampled_fraction(world) == pytest.approx(0.25)


class TestPassableRegions:
    def test_wall_splits_regions(self) -> None:
        world = World.from_symbols([".#.", ".#.", ".#."])
        assert passable_region_count(world) == 2

    def test_diagonal_contact_connects(self) -> None:
        world = World.from_symbols([".#", "#."])
        assert passable_region_count(world) == 1

    def test_solid_world_has_no_regions(self) -> None:
        world = World.filled(Grid(3, 3), Tile.TREE)
        assert passable_region_count(world) == 0

    def test_graph_nodes_are_walkable_indices(self) -> None:
        graph = passable_graph(World.from_symbols(["..", "#."]))
        assert sorted(graph.nodes) == [0, 1, 3]
        assert graph.number_of_edges() == 3
