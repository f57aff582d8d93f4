"""Centralized domain constants for the roaming simulation.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

MAX_X = 80
"""Default grid width in cells."""

MAX_Y = 25
"""Default grid height in cells."""

STONE_FRACTION = 0.55
"""Fraction of cells seeded as Stone by the noise generator."""

CELLULAR_PASSES = 3
"""Smoothing passes applied by the default cellular pipeline."""

EROSION_PASSES = 1
"""Erosion passes applied after smoothing by the default cellular pipeline."""

BLOCKED_NEIGHBOUR_THRESHOLD = 4
"""A cell becomes Stone when strictly more neighbours than this are blocked."""

GNUBBEL_GRASS_THRESHOLD = 2
"""A solid cell is removed when strictly more orthogonal neighbours than this are Grass."""

SWITCH_AFTER_MOVES = 100
"""Consultations after which a switching strategy draws a new active strategy."""

SURROUND_WINDOW = 4
"""Number of recent headings remembered by the wall-following strategy."""

TERRAIN_WEIGHTS: tuple[tuple[str, int], ...] = (("tree", 4), ("stone", 1), ("grass", 27))
"""Relative weights (out of 32) for the independent per-cell terrain draw."""

CADENCE_PRESETS: dict[str, int] = {"fast": 1, "normal": 2, "slow": 4}
"""Acting cadences offered for spawning, in ticks per move."""

NUM_TICKS = 200
"""Default number of ticks for a headless run."""
