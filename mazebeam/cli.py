"""Evaluate a search agent on generated mazes from a YAML preset.

Usage:
    mazebeam-eval configs/eval/beam.yaml
    mazebeam-eval configs/eval/chokudai.yaml --games 10 agent.time_threshold_ms=5
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mazebeam.config.display import format_config_summary
from mazebeam.config.loader import load_config, split_config_path
from mazebeam.eval.runner import EvalConfig, run_eval


def main(argv: list[str] | None = None) -> int:
    """Run an evaluation from a config file."""
    parser = argparse.ArgumentParser(description="Evaluate a maze agent")
    parser.add_argument("config", type=Path, help="Path to evaluation config YAML")
    parser.add_argument(
        "overrides",
        nargs="*",
        help="Hydra-style overrides, e.g. agent.beam_width=8",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=None,
        help="Override number of games (default: from config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override seed of the first game (default: from config)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Also log search diagnostics")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    config_file = args.config if args.config.suffix else args.config.with_suffix(".yaml")
    if not config_file.exists():
        print(f"Error: Config file not found: {config_file}", file=sys.stderr)
        return 1

    overrides = list(args.overrides)
    if args.games is not None:
        overrides.append(f"++games={args.games}")
    if args.seed is not None:
        overrides.append(f"++seed={args.seed}")

    config_dir, config_name = split_config_path(config_file)
    config = load_config(EvalConfig, config_dir, config_name, overrides=overrides)

    print(format_config_summary(("Game", config.game), ("Agent", config.agent)))
    print()

    result = run_eval(config)
    print(result.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
