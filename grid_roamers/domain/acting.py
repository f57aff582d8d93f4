"""Per-entity acting cadence."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ActingState:
    """Position within a `ticks`-long cadence; the entity acts on the last position.

    Creation counts as position 1, so ``ActingState(1)`` acts every tick and
    ``ActingState(4)`` acts on the 3rd tick after creation and every 4th tick
    after that.
    """

    ticks: int
    current: int = 1

    def __post_init__(self) -> None:
        if self.ticks < 1:
            raise ValueError("ticks must be >= 1")
        if not 1 <= self.current <= self.ticks:
            raise ValueError("current must be in [1, ticks]")

    @property
    def can_act(self) -> bool:
        return self.current == self.ticks

    def tick(self) -> ActingState:
        return ActingState(self.ticks, self.current + 1 if self.current < self.ticks else 1)
