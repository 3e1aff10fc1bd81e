"""CLI entrypoint: run the monkey simulation on a notes file.

Supports ``--config path/to/config.json`` for reproducibility. CLI arguments
override config-file values; config-file values override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from monkey_middle.config.types import SimulationConfig, WorryMode
from monkey_middle.io.parser import load_notes
from monkey_middle.simulation.engine import run_simulation

_MODE_CHOICES = ("relief", "bounded", "both")


def _parse_modes(raw_mode: str) -> tuple[WorryMode, ...]:
    """Parse CLI mode value into the worry modes to run, relief first."""
    if raw_mode == "both":
        return (WorryMode.RELIEF, WorryMode.BOUNDED)
    try:
        return (WorryMode(raw_mode),)
    except ValueError as exc:
        raise ValueError(f"mode must be one of {', '.join(_MODE_CHOICES)}") from exc


def main(argv: list[str] | None = None) -> None:
    """Run the requested mode(s) and print a JSON summary."""
    parser = argparse.ArgumentParser(description="Run the Monkey in the Middle simulation")
    parser.add_argument("--input", type=Path, default=None, help="Monkey notes file")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--mode", type=str, default=None, help="relief, bounded, or both")
    parser.add_argument("--rounds", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--log-level", type=str, default=None)
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        file_cfg = json.loads(Path(args.config).read_text())

    def _get(cli_val: object, key: str, default: object) -> object:
        if cli_val is not None:
            return cli_val
        return file_cfg.get(key, default)

    log_level = str(_get(args.log_level, "log_level", "WARNING")).upper()
    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")

    input_raw = _get(args.input, "input", None)
    if input_raw is None:
        parser.error("--input is required (or set 'input' in the config file)")
    input_path = Path(str(input_raw))
    modes = _parse_modes(str(_get(args.mode, "mode", "both")))
    rounds_raw = _get(args.rounds, "rounds", None)
    rounds = None if rounds_raw is None else int(rounds_raw)  # type: ignore[call-overload]
    if rounds is not None and len(modes) != 1:
        raise ValueError("rounds can only be overridden when a single mode is selected")
    out_dir_raw = _get(args.out_dir, "out_dir", None)
    out_dir = None if out_dir_raw is None else Path(str(out_dir_raw))

    specs = load_notes(input_path)
    runs = []
    for mode in modes:
        result = run_simulation(specs, SimulationConfig.for_mode(mode, rounds), out_dir=out_dir)
        runs.append(result.to_payload())
    print(json.dumps({"runs": runs}, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
