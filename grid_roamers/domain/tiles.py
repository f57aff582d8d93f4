"""Tile vocabulary and grid cells.

Tile kinds are classified through the named sets below; declaration order
carries no meaning.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Tile(Enum):
    """Terrain kinds (ground layer) and species (base layer)."""

    EMPTY = "empty"
    GRASS = "grass"
    STOMPED_GRASS = "stomped_grass"
    STONE = "stone"
    TREE = "tree"
    ORC = "orc"
    TROLL = "troll"
    GOBLIN = "goblin"
    MIMIC = "mimic"

    @property
    def symbol(self) -> str:
        return TILE_SYMBOLS[self]

    @property
    def is_passable_ground(self) -> bool:
        return self in PASSABLE_GROUND

    @property
    def is_spawnable_ground(self) -> bool:
        return self in SPAWNABLE_GROUND

    @property
    def is_species(self) -> bool:
        return self in SPECIES


TILE_SYMBOLS: dict[Tile, str] = {
    Tile.EMPTY: "",
    Tile.GRASS: ";",
    Tile.STOMPED_GRASS: ".",
    Tile.STONE: "^",
    Tile.TREE: "*",
    Tile.ORC: "O",
    Tile.TROLL: "T",
    Tile.GOBLIN: "G",
    Tile.MIMIC: "M",
}
"""Display symbol per tile."""

PASSABLE_GROUND: frozenset[Tile] = frozenset({Tile.EMPTY, Tile.GRASS, Tile.STOMPED_GRASS})
"""Ground kinds an entity may walk on."""

SPAWNABLE_GROUND: frozenset[Tile] = frozenset({Tile.EMPTY, Tile.GRASS, Tile.STOMPED_GRASS})
"""Ground kinds a new entity may be placed on."""

SPECIES: frozenset[Tile] = frozenset({Tile.ORC, Tile.TROLL, Tile.GOBLIN, Tile.MIMIC})
"""Tiles that represent an entity occupying a cell."""

MAP_LEGEND: dict[str, Tile] = {".": Tile.GRASS, "#": Tile.STONE, "*": Tile.TREE}
"""Characters understood by ``fields_from_symbols``; anything else is Empty."""


@dataclass(frozen=True)
class Field:
    """One grid cell: static ground plus the occupant (Empty when free)."""

    ground: Tile
    base: Tile = Tile.EMPTY

    @classmethod
    def of(cls, tile: Tile) -> Field:
        return cls(ground=tile, base=Tile.EMPTY)

    @property
    def symbol(self) -> str:
        """Occupant symbol if occupied, else ground symbol; Empty renders as a space."""
        tile = self.base if self.base is not Tile.EMPTY else self.ground
        return tile.symbol or " "


def fields_from_symbols(symbols: str) -> list[Field]:
    """Parse one map row using ``MAP_LEGEND``."""
    return [Field.of(MAP_LEGEND.get(char, Tile.EMPTY)) for char in symbols]
