"""Turn-by-turn movement simulation under one-ant-per-room capacity."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from logging_utils import get_logger

from .config import Config
from .errors import InvariantViolation, NoAgentsError, NoPathError
from .problem import Ant, AntFarm, Path


@dataclass(frozen=True)
class Move:
    ant_id: int
    room: str
    arrived: bool = False

    def token(self, prefix: str = "L") -> str:
        return f"{prefix}{self.ant_id}-{self.room}"


@dataclass
class Occupancy:
    """Turn-scoped capacity marks: interior room index -> ant id.

    ``direct_tunnel`` holds the ant that used the start-end tunnel this turn.
    """

    rooms: Dict[int, int] = field(default_factory=dict)
    direct_tunnel: Optional[int] = None


@dataclass
class Transcript:
    turns: List[List[Move]] = field(default_factory=list)
    prefix: str = "L"

    def lines(self) -> List[str]:
        return [" ".join(move.token(self.prefix) for move in turn) for turn in self.turns]

    def render(self) -> str:
        return "".join(line + "\n" for line in self.lines())

    @property
    def turn_count(self) -> int:
        return len(self.turns)

    @property
    def move_count(self) -> int:
        return sum(len(turn) for turn in self.turns)

    def arrival_turns(self) -> Dict[int, int]:
        """Ant id -> 1-based turn in which the ant reached the end room."""
        arrivals: Dict[int, int] = {}
        for turn_no, turn in enumerate(self.turns, 1):
            for move in turn:
                if move.arrived:
                    arrivals[move.ant_id] = turn_no
        return arrivals


def _check_ant(ant: Ant) -> Path:
    if ant.path is None or len(ant.path.rooms) < 2:
        raise InvariantViolation(f"ant {ant.ant_id} has no valid path")
    if ant.current_room is None:
        raise InvariantViolation(f"ant {ant.ant_id} has no current room set")
    if not ant.has_reached:
        if ant.path_index >= ant.path.length:
            raise InvariantViolation(f"ant {ant.ant_id} is at the end of its path but not marked arrived")
        if ant.path.rooms[ant.path_index] != ant.current_room:
            raise InvariantViolation(f"ant {ant.ant_id} is off its path")
    return ant.path


def step_turn(farm: AntFarm, ants: Sequence[Ant], occupancy: Occupancy) -> Tuple[List[Move], Occupancy]:
    """Advance every ant at most one room; ``ants`` must be in ascending id order.

    Marks are updated as ants move, so a room vacated earlier in the turn can
    be entered by a later ant in the same turn.
    """
    moves: List[Move] = []
    for ant in ants:
        path = _check_ant(ant)
        if ant.has_reached:
            continue

        current = ant.current_room
        nxt = path.rooms[ant.path_index + 1]
        if current == farm.start and nxt == farm.end:
            if occupancy.direct_tunnel is not None:
                continue
            occupancy.direct_tunnel = ant.ant_id
        elif nxt != farm.end and nxt in occupancy.rooms:
            continue

        if farm.is_interior(current) and occupancy.rooms.get(current) == ant.ant_id:
            del occupancy.rooms[current]
        if farm.is_interior(nxt):
            occupancy.rooms[nxt] = ant.ant_id

        ant.path_index += 1
        ant.current_room = nxt
        ant.has_reached = nxt == farm.end
        moves.append(Move(ant.ant_id, farm.rooms[nxt].name, ant.has_reached))
    return moves, occupancy


def _check_capacity(farm: AntFarm, ants: Sequence[Ant]) -> None:
    held = Counter(
        ant.current_room
        for ant in ants
        if not ant.has_reached and ant.current_room is not None and farm.is_interior(ant.current_room)
    )
    crowded = [farm.rooms[idx].name for idx, count in held.items() if count > 1]
    if crowded:
        raise InvariantViolation(f"rooms holding more than one ant: {', '.join(sorted(crowded))}")


def bind_paths(ants: Sequence[Ant], assignment: Dict[int, Path]) -> None:
    for ant in ants:
        path = assignment.get(ant.ant_id)
        ant.path = path
        ant.path_index = 0
        ant.current_room = path.rooms[0] if path is not None and path.rooms else None
        ant.has_reached = False


def simulate_movement(
    farm: AntFarm,
    ants: Sequence[Ant],
    assignment: Optional[Dict[int, Path]],
    config: Config | None = None,
) -> Transcript:
    """Run the turn loop until every ant has arrived and return the transcript."""
    config = config or Config()
    logger = get_logger()
    if assignment is None:
        raise NoPathError()
    if not ants:
        raise NoAgentsError()
    if not assignment:
        raise NoPathError()

    ordered = sorted(ants, key=lambda a: a.ant_id)
    bind_paths(ordered, assignment)
    budget = sum(ant.path.length for ant in ordered if ant.path is not None)

    transcript = Transcript(prefix=config.ant_prefix)
    while not all(ant.has_reached for ant in ordered):
        # Interior marks start empty every turn
        moves, _ = step_turn(farm, ordered, Occupancy())
        if not moves:
            raise InvariantViolation(f"no ant could move in turn {transcript.turn_count + 1}")
        _check_capacity(farm, ordered)
        transcript.turns.append(moves)
        if transcript.turn_count > budget:
            raise InvariantViolation(f"simulation exceeded {budget} turns")
        logger.debug("[turn %d] %d moves", transcript.turn_count, len(moves))

    logger.debug("[simulate] %d ants arrived in %d turns", len(ordered), transcript.turn_count)
    return transcript
