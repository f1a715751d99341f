"""CLI entrypoint: load a farm, plan routes, simulate and print the transcript."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

CURRENT_DIR = Path(__file__).parent
if str(CURRENT_DIR) not in sys.path:
    sys.path.append(str(CURRENT_DIR))

from configs import RUN_CONFIG
from ant_farm import AntFarm, Config, FarmError, load_layout, solve_farm
from ant_farm.io_utils import prepare_output_dir, save_plan, save_transcript
from ant_farm.planner import SELECTION_MODES
from ant_farm.reporting import (
    append_result_record,
    build_plan_payload,
    build_result_record,
    build_viz_payload,
    summarize_run,
)
from logging_utils import add_file_handler, remove_file_handlers, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="AntFarm router")
    parser.add_argument("farm", nargs="?", default=RUN_CONFIG["farm_file"], help="Path to the farm description")
    parser.add_argument(
        "--selection",
        default=RUN_CONFIG.get("selection_mode", Config().selection_mode),
        choices=list(SELECTION_MODES),
        help="Disjoint path selection backend",
    )
    parser.add_argument("--export", action="store_true", help="Write plan, transcript and visuals to --output-root")
    parser.add_argument("--output-root", default=RUN_CONFIG.get("output_root", Config().output_root))
    parser.add_argument("--no-echo", action="store_true", help="Do not print the farm description before the moves")
    parser.add_argument("--debug", action="store_true", help="Verbose logging on stderr")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    base = Config(
        farm_file=args.farm,
        selection_mode=args.selection,
        ant_prefix=RUN_CONFIG.get("ant_prefix", Config().ant_prefix),
        max_ants=int(RUN_CONFIG.get("max_ants", Config().max_ants)),
        echo_input=not args.no_echo,
        export_artifacts=args.export or bool(RUN_CONFIG.get("export_artifacts", False)),
        output_root=args.output_root,
        debug=args.debug,
    )
    return base.with_env_overrides()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = build_config(args)
    logger = setup_logging(config.debug)
    logger.debug("Global configuration:\n%s", json.dumps(config.to_dict(), ensure_ascii=False, indent=2))

    try:
        logger.debug("[step 1/3] Loading farm %s", config.farm_file)
        layout = load_layout(config.farm_file, max_ants=config.max_ants)
        farm = AntFarm.from_layout(layout)
        logger.debug(
            "Farm stats: ants=%d rooms=%d tunnels=%d start=%s end=%s",
            farm.num_ants,
            farm.room_count,
            farm.tunnel_count,
            layout.start,
            layout.end,
        )

        logger.debug("[step 2/3] Planning and simulating (selection=%s)", config.selection_mode)
        result = solve_farm(farm, config)
    except FarmError as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("ERROR: cannot read farm file: %s", exc)
        return 1

    transcript_text = result.transcript.render()
    if config.echo_input:
        sys.stdout.write(Path(config.farm_file).read_text(encoding="utf-8") + "\n\n")
    sys.stdout.write(transcript_text)

    summary = summarize_run(farm, result.plan, result.transcript)
    logger.info(
        "[step 2/3] %d ants arrived in %d turns over %d paths (expected %d turns)",
        farm.num_ants,
        summary["turns"],
        summary["paths_selected"],
        summary["expected_turns"],
    )

    if config.export_artifacts:
        output_dir = prepare_output_dir(config.output_root, config.farm_file, farm.num_ants, config.selection_mode)
        add_file_handler(output_dir / "run.log")
        plan_path = save_plan(output_dir, build_plan_payload(farm, result.plan, config))
        transcript_path = save_transcript(output_dir, transcript_text)
        logger.info("[step 3/3] Saved plan to %s and transcript to %s", plan_path, transcript_path)

        from ant_farm.visualizer import export_visuals

        payload = build_viz_payload(farm, result.plan, result.transcript)
        artifacts = export_visuals(farm, result.plan, result.transcript, output_dir, payload=payload)
        if artifacts:
            logger.info(
                "[step 3/3] Visualization artifacts: %s",
                ", ".join(f"{key}={path.name}" for key, path in artifacts.items()),
            )
        record = build_result_record(farm, result.plan, result.transcript, config)
        result_csv = Path(config.output_root) / "result.csv"
        append_result_record(record, result_csv)
        logger.info("Run summary appended to %s", result_csv)
        remove_file_handlers()
    return 0


if __name__ == "__main__":
    sys.exit(main())
