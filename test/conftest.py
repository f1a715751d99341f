from pathlib import Path

import pytest

from ant_farm import AntFarm

FARMS_DIR = Path(__file__).resolve().parent.parent / "farms"


def make_farm(rooms, tunnels, ants=1, start="start", end="end"):
    """Build a farm from room names and tunnel pairs; coordinates follow list order."""
    farm = AntFarm(num_ants=ants)
    for i, name in enumerate(rooms):
        farm.add_room(name, (i, 0), is_start=name == start, is_end=name == end)
    for a, b in tunnels:
        farm.add_tunnel(a, b)
    farm.validate()
    return farm


@pytest.fixture
def farms_dir():
    return FARMS_DIR


@pytest.fixture
def linear_farm():
    return make_farm(["start", "middle", "end"], [("start", "middle"), ("middle", "end")])


@pytest.fixture
def parallel_farm():
    return make_farm(
        ["start", "mid1", "mid2", "end"],
        [("start", "mid1"), ("start", "mid2"), ("mid1", "end"), ("mid2", "end")],
        ants=2,
    )
