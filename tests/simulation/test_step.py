"""End-to-end tests for grid_roamers.simulation.step."""

from __future__ import annotations

from random import Random

from grid_roamers.domain.acting import ActingState
from grid_roamers.domain.entity import Entity, GameState
from grid_roamers.domain.geometry import Coordinate, Grid, Move
from grid_roamers.domain.movement import Bouncing, Movement, SurroundObject, SurroundState
from grid_roamers.domain.tiles import Tile
from grid_roamers.domain.world import World
from grid_roamers.simulation.step import advance_entity, step


def _entity(
    entity_id: str, x: int, y: int, movement: Movement, cadence: int = 1, tile: Tile = Tile.ORC
) -> Entity:
    return Entity(
        id=entity_id,
        tile=tile,
        coordinate=Coordinate(x, y),
        state=ActingState(cadence),
        movement=movement,
    )


def _place(world: World, *entities: Entity) -> GameState:
    for entity in entities:
        world = world.update(entity, entity)
    return GameState(world=world, entities=entities)


class TestAdvanceEntity:
    def test_waits_for_its_cadence(self) -> None:
        world = World.filled(Grid(3, 3), Tile.GRASS)
        entity = _entity("O0", 1, 1, Bouncing(Move.STAY), cadence=4)
        rng = Random(0)
        entity = advance_entity(entity, world, rng)
        entity = advance_entity(entity, world, rng)
        assert entity.coordinate == Coordinate(1, 1)
        assert entity.movement == Bouncing(Move.STAY)
        entity = advance_entity(entity, world, rng)
        assert entity.coordinate == Coordinate(1, 0)
        assert entity.movement == Bouncing(Move.UP)


class TestStep:
    def test_corridor_bounce_reverses_at_dead_end(self) -> None:
        world = World.from_symbols(["###", "...", "###"])
        state = _place(world, _entity("O0", 0, 1, Bouncing(Move.STAY)))
        rng = Random(11)
        path = []
        for _ in range(4):
            state = step(state, rng)
            entity = state.entities[0]
            path.append((entity.coordinate, entity.movement))
        assert path == [
            (Coordinate(1, 1), Bouncing(Move.RIGHT)),
            (Coordinate(2, 1), Bouncing(Move.RIGHT)),
            (Coordinate(1, 1), Bouncing(Move.LEFT)),
            (Coordinate(0, 1), Bouncing(Move.LEFT)),
        ]

    def test_earlier_entity_claims_contested_cell(self) -> None:
        world = World.filled(Grid(3, 1), Tile.GRASS)
        first = _entity("O0", 0, 0, Bouncing(Move.RIGHT))
        second = _entity("O1", 2, 0, Bouncing(Move.LEFT))
        state = step(_place(world, first, second), Random(0))
        assert state.entities[0].coordinate == Coordinate(1, 0)
        assert state.entities[1].coordinate == Coordinate(2, 0)
        assert state.world.occupied() == [1, 2]

        swapped = step(_place(world, second, first), Random(0))
        assert swapped.entities[0].coordinate == Coordinate(1, 0)
        assert swapped.entities[1].coordinate == Coordinate(0, 0)

    def test_preserves_order_and_field_count(self) -> None:
        world = World.filled(Grid(6, 6), Tile.GRASS)
        state = _place(
            world,
            _entity("O0", 0, 0, Bouncing(Move.STAY)),
            _entity("O1", 5, 5, Bouncing(Move.STAY)),
            _entity("O2", 2, 3, Bouncing(Move.STAY)),
        )
        rng = Random(2)
        for _ in range(10):
            state = step(state, rng)
            assert [e.id for e in state.entities] == ["O0", "O1", "O2"]
            assert len(state.world.fields) == 36
            assert len(state.world.occupied()) == 3

    def test_vacated_cells_are_trampled(self) -> None:
        world = World.filled(Grid(3, 1), Tile.GRASS)
        state = step(_place(world, _entity("O0", 0, 0, Bouncing(Move.RIGHT))), Random(0))
        assert state.world.to_symbols() == [".O;"]

    def test_surround_object_circles_single_stone(self) -> None:
        rows = ["......."] * 7
        rows[2] = "...#..."
        world = World.from_symbols(rows)
        perimeter = 8
        for seed in range(8):
            goblin = _entity(
                "G0", 3, 5, SurroundObject(Move.UP, Move.LEFT), tile=Tile.GOBLIN
            )
            state = _place(world, goblin)
            rng = Random(seed)
            entered = None
            returned = None
            for tick in range(30):
                state = step(state, rng)
                movement = state.entities[0].movement
                assert isinstance(movement, SurroundObject)
                if entered is None and movement.state is SurroundState.SURROUNDING:
                    entered = tick
                elif entered is not None and movement.state is SurroundState.SEARCHING:
                    returned = tick
                    break
            assert entered == 2
            assert returned is not None
            assert returned - entered <= perimeter
