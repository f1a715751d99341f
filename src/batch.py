#!/usr/bin/env python3
"""
Batch runner: solve many farm files under several selection modes and
export one CSV row per (farm, mode).

Parameters (via CLI args, defaults from configs.BATCH_CONFIG):
- --farms: directory of farm files, or a comma list of files
- --modes: comma list of selection modes (greedy, ilp)
- --out:   output CSV path

Usage examples:
  python src/batch.py --farms farms --modes greedy,ilp
  python src/batch.py --farms farms/example.txt,farms/bottleneck.txt --modes greedy --out out/bn.csv
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

sys.path.append(os.path.dirname(__file__))

from configs import BATCH_CONFIG
from ant_farm import AntFarm, Config, FarmError, load_layout, solve_farm
from ant_farm.planner import SELECTION_MODES
from ant_farm.reporting import append_result_record, build_result_record
from logging_utils import get_logger, setup_logging

FARM_SUFFIXES = {".txt", ".json"}


def _collect_farms(spec: str) -> List[Path]:
    target = Path(spec)
    if target.is_dir():
        return sorted(p for p in target.iterdir() if p.suffix.lower() in FARM_SUFFIXES)
    return [Path(item) for item in spec.split(",") if item]


def _parse_modes(spec: str) -> List[str]:
    modes = [m.strip() for m in spec.split(",") if m.strip()]
    unknown = [m for m in modes if m not in SELECTION_MODES]
    if unknown:
        raise SystemExit(f"Unknown selection mode(s): {', '.join(unknown)}")
    return modes


def run_one(farm_file: Path, mode: str) -> dict:
    """Solve a single farm and return its CSV record; failures are recorded, not raised."""
    logger = get_logger()
    config = Config(farm_file=str(farm_file), selection_mode=mode, echo_input=False)
    farm = plan = transcript = None
    error = ""
    try:
        farm = AntFarm.from_layout(load_layout(farm_file, max_ants=config.max_ants))
        result = solve_farm(farm, config)
        plan, transcript = result.plan, result.transcript
    except (FarmError, OSError) as exc:
        error = str(exc)
        logger.warning("[batch] %s (%s): %s", farm_file.name, mode, error)
    return build_result_record(farm, plan, transcript, config, error=error)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="AntFarm batch runner")
    parser.add_argument("--farms", default=BATCH_CONFIG["farms"])
    parser.add_argument("--modes", default=BATCH_CONFIG["modes"])
    parser.add_argument("--out", default=BATCH_CONFIG["out"])
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    logger = setup_logging(args.debug)
    farms = _collect_farms(args.farms)
    modes = _parse_modes(args.modes)
    out_csv = Path(args.out)
    if not farms:
        logger.error("No farm files found under %s", args.farms)
        return 1

    failures = 0
    for farm_file in farms:
        for mode in modes:
            record = run_one(farm_file, mode)
            append_result_record(record, out_csv)
            if record.get("error"):
                failures += 1
            else:
                logger.info(
                    "[batch] %-20s mode=%-6s paths=%s/%s turns=%s",
                    farm_file.name,
                    mode,
                    record.get("paths_selected"),
                    record.get("paths_found"),
                    record.get("turns"),
                )
    logger.info("Saved %d rows (%d failed) to %s", len(farms) * len(modes), failures, out_csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
