"""Tests for grid_roamers.domain.acting."""

from __future__ import annotations

import pytest

from grid_roamers.domain.acting import ActingState


class TestActingState:
    @pytest.mark.parametrize("ticks", [1, 2, 4, 7])
    def test_cycle_has_period_ticks(self, ticks: int) -> None:
        start = ActingState(ticks)
        state = start
        acted = 0
        for _ in range(ticks):
            state = state.tick()
            acted += state.can_act
        assert state == start
        assert acted == 1

    def test_single_tick_cadence_always_acts(self) -> None:
        state = ActingState(1)
        for _ in range(5):
            state = state.tick()
            assert state.can_act

    def test_first_action_of_slow_cadence(self) -> None:
        state = ActingState(4)
        history = []
        for _ in range(7):
            state = state.tick()
            history.append(state.can_act)
        assert history == [False, False, True, False, False, False, True]

    def test_rejects_invalid_values(self) -> None:
        with pytest.raises(ValueError):
            ActingState(0)
        with pytest.raises(ValueError):
            ActingState(3, current=4)
        with pytest.raises(ValueError):
            ActingState(3, current=0)
