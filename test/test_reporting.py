import csv

import pytest

from ant_farm import AntFarm, Config, load_layout, solve_farm
from ant_farm.reporting import (
    CSV_FIELDS,
    append_result_record,
    build_plan_payload,
    build_result_record,
    build_viz_payload,
    summarize_run,
)


@pytest.fixture
def example_run(farms_dir):
    config = Config(farm_file=str(farms_dir / "example.txt"))
    farm = AntFarm.from_layout(load_layout(config.farm_file))
    return farm, solve_farm(farm, config), config


def test_summary(example_run):
    farm, result, _ = example_run
    summary = summarize_run(farm, result.plan, result.transcript)
    assert summary["paths_found"] == 5
    assert summary["paths_selected"] == 3
    assert summary["turns"] == summary["expected_turns"] == 3
    assert summary["moves"] == 2 + 2 + 3 + 3
    assert [row["ants"] for row in summary["paths"]] == [2, 1, 1]
    assert summary["paths"][0]["rooms"] == ["start", "c1", "end"]
    assert summary["arrival_turns"] == {1: 2, 2: 3, 3: 3, 4: 3}


def test_plan_payload(example_run):
    farm, result, config = example_run
    payload = build_plan_payload(farm, result.plan, config)
    assert payload["start"] == "start"
    assert payload["assignment"]["3"] == ["start", "a1", "a2", "end"]
    assert len(payload["all_paths"]) == 5


def test_viz_payload_positions(example_run):
    farm, result, _ = example_run
    payload = build_viz_payload(farm, result.plan, result.transcript)
    assert payload["turns"] == 3
    assert payload["positions"][2] == ["start", "start", "c1", "end"]
    assert ("start", "a1") in payload["tunnels"]


def test_result_csv_header_repair(example_run, tmp_path):
    farm, result, config = example_run
    csv_path = tmp_path / "result.csv"
    csv_path.write_text("timestamp,farm\nold,legacy\n", encoding="utf-8")
    append_result_record(build_result_record(farm, result.plan, result.transcript, config), csv_path)
    with csv_path.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert list(rows[0].keys()) == CSV_FIELDS
    assert rows[0]["farm"] == "legacy"
    assert rows[1]["farm"] == "example"
    assert rows[1]["turns"] == "3"


def test_visual_exports(example_run, tmp_path):
    pytest.importorskip("matplotlib")
    import matplotlib

    matplotlib.use("Agg")
    from ant_farm.visualizer import export_visuals

    farm, result, _ = example_run
    artifacts = export_visuals(farm, result.plan, result.transcript, tmp_path)
    assert set(artifacts) == {"paths", "gantt", "gif"}
    assert all(path.stat().st_size > 0 for path in artifacts.values())
