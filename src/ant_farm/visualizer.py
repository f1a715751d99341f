"""Visualization export helpers."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from .planner import RoutePlan
from .problem import AntFarm
from .reporting import build_viz_payload
from .simulator import Transcript

import viz


def export_visuals(
    farm: AntFarm,
    plan: RoutePlan,
    transcript: Transcript | None,
    output_dir: Path,
    payload: dict | None = None,
) -> Dict[str, Path]:
    """Render the path map, per-ant Gantt chart and GIF animation for a run."""

    payload = payload or build_viz_payload(farm, plan, transcript)
    if not payload:
        return {}

    artifacts: Dict[str, Path] = {}

    paths_png = output_dir / "paths.png"
    viz.plot_paths(payload, savepath=str(paths_png))
    artifacts["paths"] = paths_png

    if payload.get("positions"):
        gantt_path = output_dir / "gantt.png"
        viz.plot_gantt(payload, savepath=str(gantt_path))
        artifacts["gantt"] = gantt_path

        gif_path = output_dir / "anim.gif"
        viz.animate_gif(payload, savepath=str(gif_path))
        artifacts["gif"] = gif_path

    return artifacts
