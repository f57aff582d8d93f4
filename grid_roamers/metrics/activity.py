"""Entity activity metrics between consecutive snapshots."""

from __future__ import annotations

from grid_roamers.domain.entity import GameState


def occupied_count(state: GameState) -> int:
    """Number of cells currently holding an occupant."""
    return len(state.world.occupied())


def moved_fraction(prev: GameState, curr: GameState) -> float:
    """Share of entities whose coordinate changed between two snapshots.

    Entities are matched by id; returns NaN when no entity is present in both.
    """
    before = {entity.id: entity.coordinate for entity in prev.entities}
    matched = [entity for entity in curr.entities if entity.id in before]
    if not matched:
        return float("nan")
    moved = sum(1 for entity in matched if entity.coordinate != before[entity.id])
    return moved / len(matched)
