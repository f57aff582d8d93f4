"""Simulation layer: tick step, commands and the headless run loop."""

from grid_roamers.config.constants import CADENCE_PRESETS
from grid_roamers.domain.terrain import apply_pass
from grid_roamers.simulation.commands import (
    default_movement,
    fields,
    initial_state,
    kill_all,
    regenerate,
    reset,
    spawn,
)
from grid_roamers.simulation.engine import SimulationResult, populate, run_simulation
from grid_roamers.simulation.step import advance_entity, step

__all__ = [
    "CADENCE_PRESETS",
    "SimulationResult",
    "advance_entity",
    "apply_pass",
    "default_movement",
    "fields",
    "initial_state",
    "kill_all",
    "populate",
    "regenerate",
    "reset",
    "run_simulation",
    "spawn",
    "step",
]
