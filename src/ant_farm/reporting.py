"""Post-run reporting helpers for AntFarm."""
from __future__ import annotations

from datetime import datetime
import csv
from pathlib import Path
from typing import Dict, List

from .assigner import ants_on_path, path_loads
from .config import Config
from .planner import RoutePlan
from .problem import AntFarm
from .simulator import Transcript


CSV_FIELDS = [
    "timestamp",
    "farm",
    "ants",
    "rooms",
    "tunnels",
    "selection_mode",
    "paths_found",
    "paths_selected",
    "expected_turns",
    "turns",
    "moves",
    "error",
]


def _path_rows(farm: AntFarm, plan: RoutePlan) -> List[dict]:
    loads = path_loads(plan.assignment)
    rows: List[dict] = []
    for path in plan.selected:
        rows.append(
            {
                "rooms": path.names(farm),
                "length": path.length,
                "ants": loads.get(path, 0),
                "ant_ids": ants_on_path(plan.assignment, path),
            }
        )
    return rows


def summarize_run(farm: AntFarm, plan: RoutePlan, transcript: Transcript | None) -> Dict[str, object]:
    summary: Dict[str, object] = {
        "ants": farm.num_ants,
        "rooms": farm.room_count,
        "tunnels": farm.tunnel_count,
        "paths_found": len(plan.paths),
        "paths_selected": len(plan.selected),
        "paths": _path_rows(farm, plan),
        "expected_turns": plan.expected_turns,
    }
    if transcript is not None:
        summary.update(
            {
                "turns": transcript.turn_count,
                "moves": transcript.move_count,
                "arrival_turns": transcript.arrival_turns(),
            }
        )
    return summary


def build_plan_payload(farm: AntFarm, plan: RoutePlan, config: Config) -> dict:
    return {
        "config": config.to_dict(),
        "start": farm.rooms[farm.start].name if farm.start is not None else None,
        "end": farm.rooms[farm.end].name if farm.end is not None else None,
        "all_paths": [path.names(farm) for path in plan.paths],
        "selected": _path_rows(farm, plan),
        "assignment": {str(aid): path.names(farm) for aid, path in sorted(plan.assignment.items())},
        "expected_turns": plan.expected_turns,
    }


def _positions_per_turn(farm: AntFarm, transcript: Transcript) -> Dict[int, List[str]]:
    start_name = farm.rooms[farm.start].name
    positions: Dict[int, List[str]] = {aid: [start_name] for aid in range(1, farm.num_ants + 1)}
    for turn in transcript.turns:
        moved = {move.ant_id: move.room for move in turn}
        for aid, seq in positions.items():
            seq.append(moved.get(aid, seq[-1]))
    return positions


def build_viz_payload(farm: AntFarm, plan: RoutePlan, transcript: Transcript | None) -> dict:
    if farm.start is None or farm.end is None:
        return {}
    tunnels = [
        (farm.rooms[a].name, farm.rooms[b].name)
        for a, neigh in enumerate(farm.adjacency)
        for b in neigh
        if a < b
    ]
    payload = {
        "coords": {room.name: room.coord for room in farm.rooms},
        "start": farm.rooms[farm.start].name,
        "end": farm.rooms[farm.end].name,
        "tunnels": tunnels,
        "paths": _path_rows(farm, plan),
        "turns": 0,
        "positions": {},
    }
    if transcript is not None:
        payload["turns"] = transcript.turn_count
        payload["positions"] = _positions_per_turn(farm, transcript)
    return payload


def build_result_record(
    farm: AntFarm | None,
    plan: RoutePlan | None,
    transcript: Transcript | None,
    config: Config,
    error: str = "",
) -> Dict[str, object]:
    record: Dict[str, object] = {
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "farm": Path(config.farm_file).stem,
        "selection_mode": config.selection_mode,
        "error": error,
    }
    if farm is not None:
        record.update({"ants": farm.num_ants, "rooms": farm.room_count, "tunnels": farm.tunnel_count})
    if plan is not None:
        record.update(
            {
                "paths_found": len(plan.paths),
                "paths_selected": len(plan.selected),
                "expected_turns": plan.expected_turns,
            }
        )
    if transcript is not None:
        record.update({"turns": transcript.turn_count, "moves": transcript.move_count})
    return record


def append_result_record(record: Dict[str, object], csv_path: Path) -> None:
    if not record:
        return
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    _ensure_header(csv_path)
    with csv_path.open("a", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=CSV_FIELDS)
        writer.writerow({field: record.get(field, "") for field in CSV_FIELDS})


def _ensure_header(csv_path: Path) -> None:
    if not csv_path.exists():
        with csv_path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.DictWriter(handle, fieldnames=CSV_FIELDS)
            writer.writeheader()
        return
    with csv_path.open("r", newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        existing = reader.fieldnames
        if existing == CSV_FIELDS:
            return
        rows = list(reader)
    with csv_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow({field: row.get(field, "") for field in CSV_FIELDS})
