"""Grid geometry: coordinates, moves, bounds and neighbourhoods.

The grid is bounded (no torus): neighbour sets shrink at the edges, and
``blocked_neighbours_of`` counts the missing off-grid cells as walls so the
cellular-automata rule closes the map border.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from grid_roamers.domain.errors import OutOfBoundsError
from grid_roamers.domain.tiles import Field, Tile


class Move(Enum):
    """One-cell step, with y growing downward."""

    STAY = (0, 0)
    UP = (0, -1)
    UP_RIGHT = (1, -1)
    UP_LEFT = (-1, -1)
    DOWN = (0, 1)
    DOWN_RIGHT = (1, 1)
    DOWN_LEFT = (-1, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def reverse(self) -> Move:
        """Opposite axis direction; STAY and diagonals map to STAY."""
        return _REVERSE.get(self, Move.STAY)

    def orthogonal(self) -> tuple[Move, ...]:
        """Perpendicular axis directions; STAY and diagonals map to (STAY,)."""
        return _ORTHOGONAL.get(self, (Move.STAY,))


_REVERSE: dict[Move, Move] = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}

_ORTHOGONAL: dict[Move, tuple[Move, ...]] = {
    Move.UP: (Move.RIGHT, Move.LEFT),
    Move.DOWN: (Move.RIGHT, Move.LEFT),
    Move.RIGHT: (Move.UP, Move.DOWN),
    Move.LEFT: (Move.UP, Move.DOWN),
}

NEIGHBOURS: tuple[Move, ...] = tuple(move for move in Move if move is not Move.STAY)
"""The eight non-Stay moves in declaration order."""

NEIGHBOURS_FOUR: tuple[Move, ...] = (Move.UP, Move.DOWN, Move.RIGHT, Move.LEFT)
"""Orthogonal moves only."""


@dataclass(frozen=True)
class Coordinate:
    """Integer cell position; may lie outside the grid after adding a move."""

    x: int
    y: int

    def __add__(self, move: Move) -> Coordinate:
        return Coordinate(self.x + move.dx, self.y + move.dy)


@dataclass(frozen=True)
class Grid:
    """Bounded rectangular grid addressed by row-major linear index."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("grid dimensions must be >= 1")

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, coordinate: Coordinate) -> bool:
        return 0 <= coordinate.x < self.width and 0 <= coordinate.y < self.height

    def index_of(self, coordinate: Coordinate) -> int:
        if not self.in_bounds(coordinate):
            raise OutOfBoundsError(
                f"({coordinate.x}, {coordinate.y}) out of bounds for "
                f"{self.width}x{self.height} grid"
            )
        return coordinate.y * self.width + coordinate.x

    def coordinate_of(self, index: int) -> Coordinate:
        if not 0 <= index < self.size:
            raise OutOfBoundsError(f"index {index} out of bounds for grid of size {self.size}")
        return Coordinate(index % self.width, index // self.width)

    def _neighbours(self, index: int, moves: tuple[Move, ...]) -> list[int]:
        origin = self.coordinate_of(index)
        result: list[int] = []
        for move in moves:
            target = origin + move
            if self.in_bounds(target):
                result.append(target.y * self.width + target.x)
        return result

    def neighbours_of(self, index: int) -> list[int]:
        """Return in-bounds indices of the 8-neighbourhood of `index`."""
        return self._neighbours(index, NEIGHBOURS)

    def neighbours_four_of(self, index: int) -> list[int]:
        """Return in-bounds indices of the orthogonal neighbourhood of `index`."""
        return self._neighbours(index, NEIGHBOURS_FOUR)

    def blocked_neighbours_of(self, index: int, fields: Sequence[Field]) -> int:
        """Count off-grid neighbours plus in-bounds neighbours whose ground is not Grass."""
        neighbours = self.neighbours_of(index)
        off_grid = len(NEIGHBOURS) - len(neighbours)
        return off_grid + sum(1 for n in neighbours if fields[n].ground is not Tile.GRASS)
