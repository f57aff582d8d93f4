"""Tests for grid_roamers.simulation.commands."""

from __future__ import annotations

from random import Random

import pytest

from grid_roamers.config.constants import MAX_X, MAX_Y
from grid_roamers.config.types import WorldConfig
from grid_roamers.domain.acting import ActingState
from grid_roamers.domain.entity import GameState
from grid_roamers.domain.errors import NoSpawnableCellError
from grid_roamers.domain.geometry import Grid, Move
from grid_roamers.domain.movement import Bouncing, KeepOn, SurroundObject, SwitchingMovement
from grid_roamers.domain.terrain import TerrainPipeline
from grid_roamers.domain.tiles import Tile
from grid_roamers.domain.world import World
from grid_roamers.simulation import (
    CADENCE_PRESETS,
    default_movement,
    fields,
    initial_state,
    kill_all,
    regenerate,
    reset,
    spawn,
    step,
)


def _grass_state(width: int = 4, height: int = 4) -> GameState:
    return GameState(world=World.filled(Grid(width, height), Tile.GRASS))


class TestDefaultMovement:
    def test_species_strategies(self) -> None:
        assert default_movement(Tile.ORC) == Bouncing(Move.STAY)
        assert default_movement(Tile.TROLL) == KeepOn(Move.STAY)
        assert default_movement(Tile.GOBLIN) == SurroundObject(Move.UP, Move.LEFT)
        assert default_movement(Tile.MIMIC) == SwitchingMovement(Bouncing(Move.STAY))

    def test_rejects_terrain_tile(self) -> None:
        with pytest.raises(ValueError, match="not a species"):
            default_movement(Tile.GRASS)


class TestSpawn:
    def test_places_entity_and_marks_cell(self) -> None:
        state = spawn(_grass_state(), Tile.ORC, CADENCE_PRESETS["normal"], Random(0))
        (entity,) = state.entities
        assert entity.id == "O0"
        assert entity.state == ActingState(2)
        assert state.world.field_at(entity.coordinate).base is Tile.ORC
        assert not state.world.is_passable(entity.coordinate)

    def test_ids_count_existing_entities(self) -> None:
        rng = Random(1)
        state = spawn(_grass_state(), Tile.ORC, 1, rng)
        state = spawn(state, Tile.TROLL, 1, rng)
        state = spawn(state, Tile.GOBLIN, 1, rng)
        assert [e.id for e in state.entities] == ["O0", "T1", "G2"]
        assert len({e.coordinate for e in state.entities}) == 3

    def test_full_world_raises_and_keeps_state(self) -> None:
        state = spawn(_grass_state(1, 1), Tile.ORC, 1, Random(0))
        with pytest.raises(NoSpawnableCellError):
            spawn(state, Tile.TROLL, 1, Random(0))
        assert len(state.entities) == 1

    def test_no_spawnable_ground_raises(self) -> None:
        state = GameState(world=World.filled(Grid(3, 3), Tile.STONE))
        with pytest.raises(NoSpawnableCellError):
            spawn(state, Tile.ORC, 1, Random(0))
        assert state.entities == ()

    def test_rejects_non_species(self) -> None:
        with pytest.raises(ValueError):
            spawn(_grass_state(), Tile.TREE, 1, Random(0))


class TestKillAll:
    def test_clears_entities_and_trampling(self) -> None:
        rng = Random(3)
        state = _grass_state(5, 5)
        for species in (Tile.ORC, Tile.TROLL, Tile.MIMIC):
            state = spawn(state, species, 1, rng)
        for _ in range(5):
            state = step(state, rng)
        assert any(f.ground is Tile.STOMPED_GRASS for f in state.world.fields)

        cleared = kill_all(state)
        assert cleared.entities == ()
        assert all(f.base is Tile.EMPTY for f in cleared.world.fields)
        assert all(f.ground is not Tile.STOMPED_GRASS for f in cleared.world.fields)


class TestWorldCommands:
    def test_reset_keeps_grid_and_drops_entities(self) -> None:
        state = spawn(_grass_state(10, 10), Tile.ORC, 1, Random(0))
        fresh = reset(state, Random(1))
        assert fresh.world.grid == Grid(10, 10)
        assert fresh.entities == ()
        assert [f.ground for f in fresh.world.fields].count(Tile.STONE) == 55

    def test_regenerate_uses_pipeline(self) -> None:
        config = WorldConfig(width=6, height=3, pipeline=TerrainPipeline.GRASS)
        world = regenerate(config, Random(0))
        assert world == World.filled(Grid(6, 3), Tile.GRASS)

    def test_fields_exposes_world_cells(self) -> None:
        state = _grass_state(2, 3)
        assert fields(state) == state.world.fields
        assert len(fields(state)) == 6

    def test_initial_state_field_count_is_stable(self) -> None:
        rng = Random(8)
        state = initial_state(WorldConfig(), rng)
        assert state.entities == ()
        for species in (Tile.ORC, Tile.TROLL, Tile.GOBLIN, Tile.MIMIC):
            state = spawn(state, species, 1, rng)
        for _ in range(5):
            state = step(state, rng)
            assert len(fields(state)) == MAX_X * MAX_Y
