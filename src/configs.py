"""
Run configuration for AntFarm.

Defaults for the CLI (main.py) live in RUN_CONFIG and defaults for the
batch runner (batch.py) in BATCH_CONFIG. Any Config field can also be
overridden through an upper-cased environment variable, e.g.
SELECTION_MODE=ilp or ANT_PREFIX=A.
"""

from typing import Dict, Any
import os


_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


RUN_CONFIG: Dict[str, Any] = {
    # Farm description used when no file is given on the command line
    "farm_file": os.environ.get("FARM_FILE", os.path.join(_REPO_ROOT, "farms", "example.txt")),

    # "greedy" (best-seed heuristic) | "ilp" (exact, needs pulp + CBC)
    "selection_mode": "greedy",

    # Transcript token prefix: <prefix><ant id>-<room>
    "ant_prefix": "L",
    "max_ants": 10000,

    # Artifacts (plan.json, transcript.txt, visuals, result.csv)
    "export_artifacts": False,
    "output_root": "out",
}


# === Batch defaults (used by `python src/batch.py`) ===
BATCH_CONFIG: Dict[str, Any] = {
    "farms": os.path.join(_REPO_ROOT, "farms"),
    "modes": "greedy,ilp",
    "out": os.path.join("out", "batch_results.csv"),
}
