"""CLI entrypoint for a headless roaming run.

Builds a world, spawns the requested population, steps it for a fixed
number of ticks and prints a JSON summary of the final state. Values resolve
CLI > ``--config`` JSON file > built-in default.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from grid_roamers.config.constants import (
    CADENCE_PRESETS,
    CELLULAR_PASSES,
    EROSION_PASSES,
    MAX_X,
    MAX_Y,
    NUM_TICKS,
    STONE_FRACTION,
)
from grid_roamers.config.types import SimulationConfig, WorldConfig
from grid_roamers.domain.terrain import TerrainPipeline
from grid_roamers.simulation.engine import run_simulation

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
"""Accepted values for ``--log-level``."""

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_pipeline(raw_pipeline: str) -> TerrainPipeline:
    """Parse terrain pipeline from CLI/config."""
    try:
        return TerrainPipeline(raw_pipeline)
    except ValueError as exc:
        valid = ", ".join(p.value for p in TerrainPipeline)
        raise ValueError(f"pipeline must be one of {valid}") from exc


def _parse_cadence(raw_cadence: object) -> int:
    """Accept a preset name (fast, normal, slow) or a positive tick count."""
    if isinstance(raw_cadence, str) and raw_cadence.strip().lower() in CADENCE_PRESETS:
        return CADENCE_PRESETS[raw_cadence.strip().lower()]
    try:
        cadence = _coerce_int(raw_cadence, "cadence")
    except ValueError as exc:
        valid = ", ".join(CADENCE_PRESETS)
        raise ValueError(f"cadence must be one of {valid} or a positive integer") from exc
    if cadence < 1:
        raise ValueError("cadence must be >= 1")
    return cadence


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value, got {raw!r}") from exc
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    """CLI > file > default resolution for boolean flags."""
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """CLI > file > default resolution for integer values."""
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    """CLI > file > default resolution for float values."""
    return _coerce_float(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    """CLI > file > default resolution for string values."""
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run a headless grid-roamers simulation")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument(
        "--pipeline",
        type=str,
        choices=[p.value for p in TerrainPipeline],
        default=None,
    )
    parser.add_argument("--stone-fraction", type=float, default=None)
    parser.add_argument("--cellular-passes", type=int, default=None)
    parser.add_argument("--erosion-passes", type=int, default=None)
    parser.add_argument("--ticks", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--orcs", type=int, default=None)
    parser.add_argument("--trolls", type=int, default=None)
    parser.add_argument("--goblins", type=int, default=None)
    parser.add_argument("--mimics", type=int, default=None)
    parser.add_argument(
        "--cadence",
        type=str,
        default=None,
        help="Ticks per move: fast, normal, slow or a positive integer",
    )
    parser.add_argument(
        "--show-map",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print the final map below the JSON summary",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    return parser


def _build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> SimulationConfig:
    """Resolve every run parameter; raises ``ValueError`` on bad values."""
    world = WorldConfig(
        width=_get_int(args.width, "width", file_cfg, MAX_X),
        height=_get_int(args.height, "height", file_cfg, MAX_Y),
        pipeline=_parse_pipeline(
            _get_str(args.pipeline, "pipeline", file_cfg, TerrainPipeline.CELLULAR.value)
        ),
        stone_fraction=_get_float(args.stone_fraction, "stone_fraction", file_cfg, STONE_FRACTION),
        cellular_passes=_get_int(
            args.cellular_passes, "cellular_passes", file_cfg, CELLULAR_PASSES
        ),
        erosion_passes=_get_int(args.erosion_passes, "erosion_passes", file_cfg, EROSION_PASSES),
    )
    return SimulationConfig(
        world=world,
        ticks=_get_int(args.ticks, "ticks", file_cfg, NUM_TICKS),
        seed=_get_int(args.seed, "seed", file_cfg, 0),
        orcs=_get_int(args.orcs, "orcs", file_cfg, 0),
        trolls=_get_int(args.trolls, "trolls", file_cfg, 0),
        goblins=_get_int(args.goblins, "goblins", file_cfg, 0),
        mimics=_get_int(args.mimics, "mimics", file_cfg, 0),
        cadence=_parse_cadence(_get_val(args.cadence, "cadence", file_cfg, 1)),
    )


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a headless run.

    Supports ``--config path/to/config.json`` for reproducible runs.
    CLI arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must hold a JSON object: {args.config}")

    try:
        log_level = _get_str(args.log_level, "log_level", file_cfg, "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        show_map = _get_bool(args.show_map, "show_map", file_cfg, False)
        config = _build_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("resolved config: %s", config)

    result = run_simulation(config)
    print(json.dumps(result.summary(), ensure_ascii=False, indent=2, allow_nan=False))
    if show_map:
        for row in result.final_state.world.to_symbols():
            print(row)


if __name__ == "__main__":
    main()
