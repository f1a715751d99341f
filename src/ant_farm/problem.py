"""Domain data structures shared by every pipeline stage."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from .errors import ParseError
from .layout import Layout

Coord = Tuple[int, int]


@dataclass(frozen=True)
class Room:
    index: int
    name: str
    coord: Coord = (0, 0)
    is_start: bool = False
    is_end: bool = False

    @property
    def is_interior(self) -> bool:
        return not (self.is_start or self.is_end)


@dataclass(frozen=True)
class Path:
    """Simple route from the start room to the end room, as room indices."""

    rooms: Tuple[int, ...]

    @property
    def length(self) -> int:
        return len(self.rooms) - 1

    @property
    def interior(self) -> FrozenSet[int]:
        return frozenset(self.rooms[1:-1])

    def names(self, farm: "AntFarm") -> List[str]:
        return [farm.rooms[idx].name for idx in self.rooms]


class AntState(Enum):
    WAITING = "waiting"
    IN_TRANSIT = "in_transit"
    ARRIVED = "arrived"


@dataclass
class Ant:
    ant_id: int
    path: Optional[Path] = None
    path_index: int = 0
    current_room: Optional[int] = None
    has_reached: bool = False

    @property
    def state(self) -> AntState:
        if self.has_reached:
            return AntState.ARRIVED
        if self.path_index == 0:
            return AntState.WAITING
        return AntState.IN_TRANSIT


@dataclass
class AntFarm:
    """Room registry with symmetric adjacency, built once by the loader."""

    num_ants: int = 0
    rooms: List[Room] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)
    adjacency: List[List[int]] = field(default_factory=list)
    start: Optional[int] = None
    end: Optional[int] = None

    @classmethod
    def from_layout(cls, layout: Layout) -> "AntFarm":
        farm = cls(num_ants=layout.num_ants)
        for name in layout.rooms:
            farm.add_room(
                name,
                layout.coords.get(name, (0, 0)),
                is_start=name == layout.start,
                is_end=name == layout.end,
            )
        for a, b in layout.tunnels:
            farm.add_tunnel(a, b)
        farm.validate()
        return farm

    def add_room(self, name: str, coord: Coord = (0, 0), is_start: bool = False, is_end: bool = False) -> Room:
        if name in self.index:
            raise ParseError("duplicate room name")
        if is_start and is_end:
            raise ParseError("start and end room must differ")
        if is_start and self.start is not None:
            raise ParseError("multiple start rooms defined")
        if is_end and self.end is not None:
            raise ParseError("multiple end rooms defined")
        room = Room(len(self.rooms), name, coord, is_start, is_end)
        self.rooms.append(room)
        self.adjacency.append([])
        self.index[name] = room.index
        if is_start:
            self.start = room.index
        if is_end:
            self.end = room.index
        return room

    def add_tunnel(self, a: str, b: str) -> None:
        if a == b:
            raise ParseError("invalid link format")
        if a not in self.index or b not in self.index:
            raise ParseError("link references nonexistent room")
        ia, ib = self.index[a], self.index[b]
        if ib in self.adjacency[ia]:
            raise ParseError("duplicate link")
        self.adjacency[ia].append(ib)
        self.adjacency[ib].append(ia)

    def validate(self) -> None:
        if self.start is None:
            raise ParseError("no start room found")
        if self.end is None:
            raise ParseError("no end room found")

    def room(self, name: str) -> Room:
        return self.rooms[self.index[name]]

    def neighbors(self, idx: int) -> Tuple[int, ...]:
        return tuple(self.adjacency[idx])

    def are_adjacent(self, a: int, b: int) -> bool:
        return b in self.adjacency[a]

    def is_interior(self, idx: int) -> bool:
        return self.rooms[idx].is_interior

    def path_from_names(self, names: Iterable[str]) -> Path:
        return Path(tuple(self.index[name] for name in names))

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def tunnel_count(self) -> int:
        return sum(len(n) for n in self.adjacency) // 2


def spawn_ants(farm: AntFarm) -> List[Ant]:
    """Create ants 1..N waiting in the start room."""
    return [Ant(ant_id=i + 1, current_room=farm.start) for i in range(farm.num_ants)]
