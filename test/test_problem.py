import pytest

from ant_farm import AntFarm, AntState, ParseError, Path, spawn_ants

from conftest import make_farm


def test_adjacency_is_symmetric(parallel_farm):
    for a, neighbours in enumerate(parallel_farm.adjacency):
        for b in neighbours:
            assert a in parallel_farm.adjacency[b]
    assert parallel_farm.tunnel_count == 4


def test_neighbour_order_follows_insertion(parallel_farm):
    start = parallel_farm.start
    names = [parallel_farm.rooms[i].name for i in parallel_farm.neighbors(start)]
    assert names == ["mid1", "mid2"]


def test_room_flags(linear_farm):
    assert linear_farm.room("start").is_start
    assert linear_farm.room("end").is_end
    assert linear_farm.room("middle").is_interior
    assert not linear_farm.is_interior(linear_farm.start)


@pytest.mark.parametrize(
    "tunnels, message",
    [
        ([("a", "a")], "invalid link format"),
        ([("a", "b"), ("b", "a")], "duplicate link"),
        ([("a", "zz")], "link references nonexistent room"),
    ],
)
def test_bad_tunnels(tunnels, message):
    farm = AntFarm()
    farm.add_room("a", is_start=True)
    farm.add_room("b", is_end=True)
    with pytest.raises(ParseError, match=message):
        for a, b in tunnels:
            farm.add_tunnel(a, b)


def test_single_start_and_end_enforced():
    farm = AntFarm()
    farm.add_room("a", is_start=True)
    with pytest.raises(ParseError, match="multiple start rooms"):
        farm.add_room("b", is_start=True)
    with pytest.raises(ParseError, match="no end room"):
        farm.validate()


def test_room_cannot_be_both_start_and_end():
    farm = AntFarm()
    with pytest.raises(ParseError, match="start and end room must differ"):
        farm.add_room("a", is_start=True, is_end=True)
    assert farm.rooms == []


def test_path_properties(linear_farm):
    path = linear_farm.path_from_names(["start", "middle", "end"])
    assert path.length == 2
    assert path.interior == frozenset({linear_farm.index["middle"]})
    assert path.names(linear_farm) == ["start", "middle", "end"]
    assert Path((0, 1)).interior == frozenset()


def test_spawn_ants_waiting_in_start():
    farm = make_farm(["start", "end"], [("start", "end")], ants=3)
    ants = spawn_ants(farm)
    assert [a.ant_id for a in ants] == [1, 2, 3]
    for ant in ants:
        assert ant.current_room == farm.start
        assert ant.path_index == 0
        assert not ant.has_reached
        assert ant.state is AntState.WAITING


def test_ant_state_transitions(linear_farm):
    ant = spawn_ants(linear_farm)[0]
    ant.path_index = 1
    assert ant.state is AntState.IN_TRANSIT
    ant.path_index = 2
    ant.has_reached = True
    assert ant.state is AntState.ARRIVED
