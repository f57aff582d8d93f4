"""Movement strategies as immutable per-entity state machines.

Each strategy is a frozen dataclass holding its own history. ``advance``
returns the successor strategy together with the next coordinate, so an
entity snapshot fully captures its behaviour and no two entities can share
mutable strategy state. Randomness is drawn only from the ``Random`` passed
in, which keeps seeded runs reproducible.

Strategies:

- ``Bouncing``: billiard-ball reflection over orthogonal moves.
- ``KeepOn``: keeps its heading, drifting diagonally, reversing last.
- ``SurroundObject``: searches by bouncing, then follows the wall of the
  first obstacle it hits until it has turned through all four headings.
- ``SwitchingMovement``: swaps in a fresh random strategy periodically.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum
from random import Random
from typing import TYPE_CHECKING, TypeAlias

from grid_roamers.config.constants import SURROUND_WINDOW, SWITCH_AFTER_MOVES
from grid_roamers.domain.geometry import NEIGHBOURS, NEIGHBOURS_FOUR, Coordinate, Move

if TYPE_CHECKING:
    from grid_roamers.domain.world import World


def _first_passable(world: World, current: Coordinate, candidates: Iterable[Move]) -> Move:
    """Return the first candidate leading to a passable cell, else STAY."""
    for move in candidates:
        if world.is_passable(current + move):
            return move
    return Move.STAY


# ---------------------------------------------------------------------------
# Bouncing
# ---------------------------------------------------------------------------

_BOUNCING_PRIORITIES: dict[Move, tuple[tuple[Move, ...], ...]] = {
    Move.UP: (
        (Move.UP, Move.RIGHT, Move.LEFT, Move.DOWN),
        (Move.UP, Move.LEFT, Move.RIGHT, Move.DOWN),
    ),
    Move.DOWN: (
        (Move.DOWN, Move.RIGHT, Move.LEFT, Move.UP),
        (Move.DOWN, Move.LEFT, Move.RIGHT, Move.UP),
    ),
    Move.RIGHT: (
        (Move.RIGHT, Move.UP, Move.DOWN, Move.LEFT),
        (Move.RIGHT, Move.DOWN, Move.UP, Move.LEFT),
    ),
    Move.LEFT: (
        (Move.LEFT, Move.UP, Move.DOWN, Move.RIGHT),
        (Move.LEFT, Move.DOWN, Move.UP, Move.RIGHT),
    ),
    Move.STAY: ((Move.UP, Move.DOWN, Move.RIGHT, Move.LEFT),),
}


@dataclass(frozen=True)
class Bouncing:
    """Go straight; on contact, try a random side, then back."""

    last: Move = Move.STAY

    def __post_init__(self) -> None:
        if self.last not in _BOUNCING_PRIORITIES:
            raise ValueError("Bouncing only tracks STAY or orthogonal moves")

    def advance(
        self, world: World, current: Coordinate, rng: Random
    ) -> tuple[Bouncing, Coordinate]:
        ordering = rng.choice(_BOUNCING_PRIORITIES[self.last])
        move = _first_passable(world, current, ordering)
        return Bouncing(move), current + move


# ---------------------------------------------------------------------------
# KeepOn
# ---------------------------------------------------------------------------

# Tiers: keep heading (with diagonal drift), turn sideways, turn back.
_KEEP_ON_TIERS: dict[Move, tuple[tuple[Move, ...], ...]] = {
    Move.UP: (
        (Move.UP, Move.UP_LEFT, Move.UP_RIGHT),
        (Move.LEFT, Move.RIGHT),
        (Move.DOWN, Move.DOWN_LEFT, Move.DOWN_RIGHT),
    ),
    Move.DOWN: (
        (Move.DOWN, Move.DOWN_LEFT, Move.DOWN_RIGHT),
        (Move.LEFT, Move.RIGHT),
        (Move.UP, Move.UP_LEFT, Move.UP_RIGHT),
    ),
    Move.RIGHT: (
        (Move.RIGHT, Move.UP_RIGHT, Move.DOWN_RIGHT),
        (Move.UP, Move.DOWN),
        (Move.LEFT, Move.UP_LEFT, Move.DOWN_LEFT),
    ),
    Move.LEFT: (
        (Move.LEFT, Move.UP_LEFT, Move.DOWN_LEFT),
        (Move.UP, Move.DOWN),
        (Move.RIGHT, Move.UP_RIGHT, Move.DOWN_RIGHT),
    ),
    Move.UP_RIGHT: (
        (Move.UP, Move.UP_RIGHT, Move.RIGHT),
        (Move.UP_LEFT, Move.DOWN_RIGHT),
        (Move.DOWN, Move.DOWN_LEFT, Move.LEFT),
    ),
    Move.DOWN_LEFT: (
        (Move.DOWN, Move.DOWN_LEFT, Move.LEFT),
        (Move.UP_LEFT, Move.DOWN_RIGHT),
        (Move.UP, Move.UP_RIGHT, Move.RIGHT),
    ),
    Move.UP_LEFT: (
        (Move.UP, Move.UP_LEFT, Move.LEFT),
        (Move.UP_RIGHT, Move.DOWN_LEFT),
        (Move.DOWN, Move.DOWN_RIGHT, Move.RIGHT),
    ),
    Move.DOWN_RIGHT: (
        (Move.DOWN, Move.DOWN_RIGHT, Move.RIGHT),
        (Move.UP_RIGHT, Move.DOWN_LEFT),
        (Move.UP, Move.UP_LEFT, Move.LEFT),
    ),
    Move.STAY: (NEIGHBOURS,),
}


def keep_on_candidates(last: Move, rng: Random) -> list[Move]:
    """Flatten the tiers for `last`, shuffling within each tier."""
    candidates: list[Move] = []
    for tier in _KEEP_ON_TIERS[last]:
        shuffled = list(tier)
        rng.shuffle(shuffled)
        candidates.extend(shuffled)
    return candidates


@dataclass(frozen=True)
class KeepOn:
    """Hold the current heading as long as anything roughly forward is open."""

    last: Move = Move.STAY

    def advance(
        self, world: World, current: Coordinate, rng: Random
    ) -> tuple[KeepOn, Coordinate]:
        move = _first_passable(world, current, keep_on_candidates(self.last, rng))
        return KeepOn(move), current + move


# ---------------------------------------------------------------------------
# SurroundObject
# ---------------------------------------------------------------------------


class SurroundState(Enum):
    """Phase of the wall-following machine."""

    SEARCHING = "searching"
    SURROUNDING = "surrounding"


def _push_heading(headings: tuple[Move, ...], move: Move) -> tuple[Move, ...]:
    # Consecutive repeats collapse: the window records direction changes.
    if headings and headings[-1] is move:
        return headings
    return (headings + (move,))[-SURROUND_WINDOW:]


@dataclass(frozen=True)
class SurroundObject:
    """Bounce until deflected, then trace the obstacle's outline.

    ``last_wall_direction`` points from the entity towards the wall it is
    following. While surrounding, ``headings`` keeps the last few distinct
    headings; once it holds all four orthogonal moves the obstacle has been
    circled and the strategy goes back to searching.
    """

    last_move: Move
    last_wall_direction: Move
    state: SurroundState = SurroundState.SEARCHING
    headings: tuple[Move, ...] = ()
    searcher: Bouncing | None = None
    """Inner searcher; None means a fresh ``Bouncing(last_move)``."""

    @property
    def loop_closed(self) -> bool:
        return set(NEIGHBOURS_FOUR).issubset(self.headings)

    def advance(
        self, world: World, current: Coordinate, rng: Random
    ) -> tuple[SurroundObject, Coordinate]:
        strategy = self
        if strategy.state is SurroundState.SURROUNDING and strategy.loop_closed:
            strategy = replace(
                strategy,
                state=SurroundState.SEARCHING,
                headings=(),
                searcher=Bouncing(strategy.last_move),
            )
        if strategy.state is SurroundState.SEARCHING:
            searcher, proposed = (strategy.searcher or Bouncing(strategy.last_move)).advance(
                world, current, rng
            )
            if proposed == current + strategy.last_move:
                return replace(strategy, searcher=searcher), proposed
            wall_direction = strategy.last_move
            strategy = replace(
                strategy,
                searcher=searcher,
                state=SurroundState.SURROUNDING,
                last_wall_direction=wall_direction,
                last_move=rng.choice(wall_direction.orthogonal()),
            )
        return strategy._follow_wall(world, current)

    def _follow_wall(
        self, world: World, current: Coordinate
    ) -> tuple[SurroundObject, Coordinate]:
        forward_open = world.is_passable(current + self.last_move)
        wall_open = world.is_passable(current + self.last_wall_direction)
        if forward_open and not wall_open:
            # slide along the wall
            move, heading, wall = self.last_move, self.last_move, self.last_wall_direction
        elif wall_open:
            # the wall ended: turn around the corner into it
            move = heading = self.last_wall_direction
            wall = self.last_move.reverse()
        elif not forward_open and world.is_passable(current + self.last_wall_direction.reverse()):
            # inner corner: pivot away from the wall
            move = heading = self.last_wall_direction.reverse()
            wall = self.last_move
        else:
            heading = self.last_move.reverse()
            wall = self.last_wall_direction.reverse()
            move = heading if world.is_passable(current + heading) else Move.STAY
        return (
            replace(
                self,
                last_move=heading,
                last_wall_direction=wall,
                headings=_push_heading(self.headings, move),
            ),
            current + move,
        )


# ---------------------------------------------------------------------------
# SwitchingMovement
# ---------------------------------------------------------------------------


def switch_pool() -> tuple[Movement, ...]:
    """Fresh strategies a ``SwitchingMovement`` chooses from."""
    return (
        Bouncing(Move.UP),
        KeepOn(Move.RIGHT),
        SurroundObject(Move.LEFT, Move.RIGHT),
    )


@dataclass(frozen=True)
class SwitchingMovement:
    """Delegate to `active`, replacing it after ``SWITCH_AFTER_MOVES`` consultations.

    A replacement starts from a fresh pool value; whatever the previous
    strategy had learned is dropped.
    """

    active: Movement
    counted_moves: int = 0

    def advance(
        self, world: World, current: Coordinate, rng: Random
    ) -> tuple[SwitchingMovement, Coordinate]:
        counted = self.counted_moves + 1
        active = self.active
        if counted > SWITCH_AFTER_MOVES:
            counted = 0
            active = rng.choice(switch_pool())
        next_active, coordinate = compute_next(active, world, current, rng)
        return SwitchingMovement(next_active, counted), coordinate


Movement: TypeAlias = Bouncing | KeepOn | SurroundObject | SwitchingMovement
"""Any movement strategy value."""


def compute_next(
    movement: Movement, world: World, current: Coordinate, rng: Random
) -> tuple[Movement, Coordinate]:
    """Ask `movement` for the next coordinate; returns the successor strategy too."""
    return movement.advance(world, current, rng)
