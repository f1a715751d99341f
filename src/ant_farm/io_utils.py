"""Helper utilities for saving run artifacts."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict


def _sanitize(segment: str) -> str:
    return "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in segment)


def prepare_output_dir(output_root: str, farm_file: str, num_ants: int, selection_mode: str) -> Path:
    farm_label = _sanitize(Path(farm_file).stem)
    mode_label = _sanitize(selection_mode)
    tag = f"farm_{farm_label}_ants_{num_ants}_sel_{mode_label}"
    output_dir = Path(output_root) / tag
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def save_json(path: Path, payload: Dict[str, Any]) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)


def save_plan(output_dir: Path, plan: Dict[str, Any]) -> Path:
    path = output_dir / "plan.json"
    save_json(path, plan)
    return path


def save_transcript(output_dir: Path, text: str) -> Path:
    path = output_dir / "transcript.txt"
    path.write_text(text, encoding="utf-8")
    return path
