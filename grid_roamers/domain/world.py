"""Immutable tile world with passability and occupancy updates.

Every operation returns a new ``World``; field tuples are never mutated, so
a snapshot handed to a reader stays valid while the next one is computed.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from random import Random
from typing import TYPE_CHECKING

from grid_roamers.domain.errors import NoSpawnableCellError
from grid_roamers.domain.geometry import Coordinate, Grid
from grid_roamers.domain.tiles import Field, Tile, fields_from_symbols

if TYPE_CHECKING:
    from grid_roamers.domain.entity import Entity


@dataclass(frozen=True)
class World:
    """Row-major sequence of ``grid.size`` fields."""

    grid: Grid
    fields: tuple[Field, ...]

    def __post_init__(self) -> None:
        if len(self.fields) != self.grid.size:
            raise ValueError(
                f"world needs {self.grid.size} fields for a "
                f"{self.grid.width}x{self.grid.height} grid, got {len(self.fields)}"
            )

    @classmethod
    def filled(cls, grid: Grid, tile: Tile) -> World:
        """World whose every ground is `tile`."""
        return cls(grid=grid, fields=(Field.of(tile),) * grid.size)

    @classmethod
    def from_grounds(cls, grid: Grid, grounds: Iterable[Tile]) -> World:
        return cls(grid=grid, fields=tuple(Field.of(tile) for tile in grounds))

    @classmethod
    def from_symbols(cls, rows: Sequence[str]) -> World:
        """Build a world from equal-length map rows (``.`` grass, ``#`` stone, ``*`` tree)."""
        if not rows:
            raise ValueError("rows must not be empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("rows must all have the same length")
        fields: list[Field] = []
        for row in rows:
            fields.extend(fields_from_symbols(row))
        return cls(grid=Grid(width, len(rows)), fields=tuple(fields))

    def to_symbols(self) -> list[str]:
        """Render one string per row using the display symbols."""
        width = self.grid.width
        return [
            "".join(field.symbol for field in self.fields[start : start + width])
            for start in range(0, self.grid.size, width)
        ]

    def in_bounds(self, coordinate: Coordinate) -> bool:
        return self.grid.in_bounds(coordinate)

    def field_at(self, coordinate: Coordinate) -> Field:
        return self.fields[self.grid.index_of(coordinate)]

    def is_passable(self, coordinate: Coordinate) -> bool:
        """True for an in-bounds, unoccupied cell with walkable ground."""
        if not self.in_bounds(coordinate):
            return False
        field = self.fields[self.grid.index_of(coordinate)]
        return field.base is Tile.EMPTY and field.ground.is_passable_ground

    def occupied(self) -> list[int]:
        """Indices of cells whose base holds an occupant."""
        return [index for index, field in enumerate(self.fields) if field.base is not Tile.EMPTY]

    def update(self, old: Entity, new: Entity) -> World:
        """Move the occupant from `old.coordinate` to `new.coordinate`.

        The vacated cell is freed and its Grass trampled; an entity that stays
        put only re-marks its own cell.
        """
        new_index = self.grid.index_of(new.coordinate)
        old_index = self.grid.index_of(old.coordinate)
        fields = list(self.fields)
        if old_index != new_index:
            vacated = fields[old_index]
            ground = Tile.STOMPED_GRASS if vacated.ground is Tile.GRASS else vacated.ground
            fields[old_index] = Field(ground=ground, base=Tile.EMPTY)
        fields[new_index] = Field(ground=fields[new_index].ground, base=new.tile)
        return World(grid=self.grid, fields=tuple(fields))

    def clear_entities(self) -> World:
        """Drop every occupant and let trampled grass recover."""
        return World(
            grid=self.grid,
            fields=tuple(
                Field.of(Tile.GRASS if field.ground is Tile.STOMPED_GRASS else field.ground)
                for field in self.fields
            ),
        )

    def get_start_coordinate(self, rng: Random) -> Coordinate:
        """Pick an unoccupied cell with spawnable ground uniformly at random."""
        candidates = [
            index
            for index, field in enumerate(self.fields)
            if field.base is Tile.EMPTY and field.ground.is_spawnable_ground
        ]
        if not candidates:
            raise NoSpawnableCellError("no unoccupied cell with spawnable ground")
        return self.grid.coordinate_of(rng.choice(candidates))
