"""Farm description loading helpers."""
from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from logging_utils import get_logger

from .errors import ParseError

Coord = Tuple[int, int]

DEFAULT_MAX_ANTS = 10000


@dataclass
class Layout:
    num_ants: int
    rooms: List[str] = field(default_factory=list)
    coords: Dict[str, Coord] = field(default_factory=dict)
    start: Optional[str] = None
    end: Optional[str] = None
    tunnels: List[Tuple[str, str]] = field(default_factory=list)
    _pairs: Set[FrozenSet[str]] = field(default_factory=set, repr=False)

    def add_room(self, name: str, coord: Coord, is_start: bool = False, is_end: bool = False) -> None:
        if name in self.coords:
            raise ParseError("duplicate room name")
        if is_start and is_end:
            raise ParseError("start and end room must differ")
        if is_start:
            if self.start is not None:
                raise ParseError("multiple start rooms defined")
            self.start = name
        if is_end:
            if self.end is not None:
                raise ParseError("multiple end rooms defined")
            self.end = name
        self.rooms.append(name)
        self.coords[name] = coord

    def add_tunnel(self, a: str, b: str) -> None:
        if a == b:
            raise ParseError("invalid link format")
        if a not in self.coords or b not in self.coords:
            raise ParseError("link references nonexistent room")
        pair = frozenset((a, b))
        if pair in self._pairs:
            raise ParseError("duplicate link")
        self.tunnels.append((a, b))
        self._pairs.add(pair)

    def validate(self) -> None:
        if self.start is None:
            raise ParseError("no start room found")
        if self.end is None:
            raise ParseError("no end room found")


@dataclass
class _ParserState:
    expect_start: bool = False
    expect_end: bool = False
    parsing_links: bool = False


def _parse_ant_count(line: Optional[str], max_ants: int) -> int:
    if line is None:
        raise ParseError("empty file")
    try:
        num_ants = int(line.strip())
    except ValueError:
        raise ParseError("invalid number of ants") from None
    if num_ants <= 0:
        raise ParseError("number of ants must be positive")
    if num_ants > max_ants:
        raise ParseError("number of ants exceeds maximum limit")
    return num_ants


def _parse_room(line: str, state: _ParserState, layout: Layout) -> None:
    parts = line.split()
    if len(parts) != 3:
        raise ParseError("invalid room format")
    name = parts[0]
    if name in layout.coords:
        raise ParseError("duplicate room name")
    try:
        coord = (int(parts[1]), int(parts[2]))
    except ValueError:
        raise ParseError("invalid room coordinates") from None
    layout.add_room(name, coord, is_start=state.expect_start, is_end=state.expect_end)


def _parse_link(line: str, layout: Layout) -> None:
    parts = line.strip().split("-")
    if len(parts) != 2 or parts[0] == parts[1]:
        raise ParseError("invalid link format")
    layout.add_tunnel(parts[0], parts[1])


def parse_farm(lines: Iterable[str], max_ants: int = DEFAULT_MAX_ANTS) -> Layout:
    """Parse the textual farm description into a validated :class:`Layout`."""
    logger = get_logger()
    it = iter(lines)
    first = next(it, None)
    layout = Layout(_parse_ant_count(first.rstrip("\r\n") if first is not None else None, max_ants))
    state = _ParserState()

    for lineno, raw in enumerate(it, 2):
        line = raw.rstrip("\r\n")
        if line == "":
            continue
        if line.startswith("#"):
            if line == "##start":
                state.expect_start = True
            elif line == "##end":
                state.expect_end = True
            continue

        if "-" in line:
            state.parsing_links = True
            _parse_link(line, layout)
        elif not state.parsing_links:
            _parse_room(line, state, layout)
        else:
            logger.warning("[layout] line %d ignored after tunnel section started: %r", lineno, line)

        # ##start / ##end only apply to the room line that follows them
        if not state.parsing_links:
            state.expect_start = state.expect_end = False

    layout.validate()
    return layout


def _load_json_layout(raw: dict, max_ants: int) -> Layout:
    if not isinstance(raw, dict):
        raise ParseError("farm JSON must be an object")
    layout = Layout(_parse_ant_count(str(raw.get("ants", "")), max_ants))
    for room in raw.get("rooms", []):
        try:
            name = str(room["name"])
            coord = (int(room.get("x", 0)), int(room.get("y", 0)))
        except (KeyError, TypeError, ValueError):
            raise ParseError("invalid room format") from None
        if "-" in name or name.startswith("#"):
            raise ParseError("invalid room format")
        layout.add_room(name, coord, bool(room.get("start", False)), bool(room.get("end", False)))
    for tunnel in raw.get("tunnels", []):
        if not isinstance(tunnel, (list, tuple)) or len(tunnel) != 2:
            raise ParseError("invalid link format")
        layout.add_tunnel(str(tunnel[0]), str(tunnel[1]))
    layout.validate()
    return layout


def load_layout(path: str | Path, max_ants: int = DEFAULT_MAX_ANTS) -> Layout:
    path = Path(path)
    logger = get_logger()
    logger.debug("[layout] loading %s", path)
    try:
        if path.suffix.lower() == ".json":
            with path.open("r", encoding="utf-8") as handle:
                try:
                    raw = json.load(handle)
                except json.JSONDecodeError as exc:
                    raise ParseError(f"invalid JSON ({exc.msg})") from exc
            return _load_json_layout(raw, max_ants)
        with path.open("r", encoding="utf-8") as handle:
            return parse_farm(handle, max_ants=max_ants)
    except UnicodeDecodeError as exc:
        raise ParseError("invalid encoding") from exc
