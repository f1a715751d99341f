import json

import pytest

from ant_farm import AntFarm, ParseError, load_layout, parse_farm

VALID = """3
##start
start 0 0
mid 1 1
##end
end 2 2
start-mid
mid-end
"""


def _lines(text):
    return text.splitlines(keepends=True)


def test_parse_valid_farm():
    layout = parse_farm(_lines(VALID))
    assert layout.num_ants == 3
    assert layout.rooms == ["start", "mid", "end"]
    assert layout.start == "start"
    assert layout.end == "end"
    assert layout.coords["mid"] == (1, 1)
    assert layout.tunnels == [("start", "mid"), ("mid", "end")]


def test_comments_and_blank_lines_are_skipped():
    text = "2\n# a comment\n\n##start\ns 0 0\n#note\n##end\ne 1 0\n\ns-e\n"
    layout = parse_farm(_lines(text))
    assert layout.start == "s"
    assert layout.end == "e"


def test_start_flag_applies_to_next_room_only():
    text = "1\n##start\na 0 0\nb 1 0\n##end\nc 2 0\na-b\nb-c\n"
    layout = parse_farm(_lines(text))
    assert layout.start == "a"
    assert layout.end == "c"


def test_room_lines_after_tunnels_are_ignored():
    text = "1\n##start\na 0 0\n##end\nb 1 0\na-b\nc 2 0\n"
    layout = parse_farm(_lines(text))
    assert "c" not in layout.rooms


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "empty file"),
        ("abc\n", "invalid number of ants"),
        ("0\n", "number of ants must be positive"),
        ("-4\n", "number of ants must be positive"),
        ("10001\n", "number of ants exceeds maximum limit"),
        ("1\n##start\na 0\n", "invalid room format"),
        ("1\n##start\na 0 0\na 1 1\n", "duplicate room name"),
        ("1\n##start\na x 0\n", "invalid room coordinates"),
        ("1\n##start\na 0 0\n##start\nb 1 1\n", "multiple start rooms defined"),
        ("1\n##end\na 0 0\n##end\nb 1 1\n", "multiple end rooms defined"),
        ("1\n##start\n##end\na 0 0\n", "start and end room must differ"),
        ("1\n##start\na 0 0\n##end\nb 1 1\na-a\n", "invalid link format"),
        ("1\n##start\na 0 0\n##end\nb 1 1\na-b-c\n", "invalid link format"),
        ("1\n##start\na 0 0\n##end\nb 1 1\na-z\n", "link references nonexistent room"),
        ("1\n##start\na 0 0\n##end\nb 1 1\na-b\nb-a\n", "duplicate link"),
        ("1\na 0 0\n##end\nb 1 1\na-b\n", "no start room found"),
        ("1\n##start\na 0 0\nb 1 1\na-b\n", "no end room found"),
    ],
)
def test_parse_errors(text, message):
    with pytest.raises(ParseError) as excinfo:
        parse_farm(_lines(text))
    assert excinfo.value.message == message
    assert str(excinfo.value) == f"ERROR: invalid data format, {message}"


def test_max_ants_is_configurable():
    with pytest.raises(ParseError):
        parse_farm(_lines(VALID), max_ants=2)


def test_load_text_file(tmp_path):
    path = tmp_path / "farm.txt"
    path.write_text(VALID, encoding="utf-8")
    farm = AntFarm.from_layout(load_layout(path))
    assert farm.num_ants == 3
    assert farm.rooms[farm.start].name == "start"
    assert farm.rooms[farm.end].name == "end"


def test_load_json_file(tmp_path):
    path = tmp_path / "farm.json"
    path.write_text(
        json.dumps(
            {
                "ants": 2,
                "rooms": [
                    {"name": "s", "x": 0, "y": 0, "start": True},
                    {"name": "m", "x": 1, "y": 0},
                    {"name": "e", "x": 2, "y": 0, "end": True},
                ],
                "tunnels": [["s", "m"], ["m", "e"]],
            }
        ),
        encoding="utf-8",
    )
    layout = load_layout(path)
    assert layout.num_ants == 2
    assert layout.tunnels == [("s", "m"), ("m", "e")]


def test_json_duplicate_tunnel_rejected(tmp_path):
    path = tmp_path / "farm.json"
    path.write_text(
        json.dumps(
            {
                "ants": 1,
                "rooms": [{"name": "s", "start": True}, {"name": "e", "end": True}],
                "tunnels": [["s", "e"], ["e", "s"]],
            }
        ),
        encoding="utf-8",
    )
    with pytest.raises(ParseError, match="duplicate link"):
        load_layout(path)


def test_shipped_farms_load(farms_dir):
    for path in sorted(farms_dir.iterdir()):
        farm = AntFarm.from_layout(load_layout(path))
        assert farm.num_ants > 0


@pytest.mark.parametrize("name", ["farm.txt", "farm.json"])
def test_invalid_utf8_is_a_parse_error(tmp_path, name):
    path = tmp_path / name
    path.write_bytes(b"1\n##start\ns\xff\xfe 0 0\n")
    with pytest.raises(ParseError) as excinfo:
        load_layout(path)
    assert excinfo.value.message == "invalid encoding"
