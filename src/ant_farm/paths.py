"""Exhaustive enumeration of simple start-to-end paths."""
from __future__ import annotations

from typing import Iterator, List

from logging_utils import get_logger

from .problem import AntFarm, Path


def enumerate_paths(farm: AntFarm) -> List[Path]:
    """Return every simple path from the start room to the end room.

    Depth-first, neighbours tried in stored order. An explicit stack of
    neighbour iterators replaces recursion and a boolean array indexed by room
    replaces identity-keyed visited tracking; discovery order matches the
    recursive formulation. A disconnected farm yields an empty list.
    """
    logger = get_logger()
    start, end = farm.start, farm.end
    paths: List[Path] = []
    if start is None or end is None:
        return paths

    visited = [False] * farm.room_count
    visited[start] = True
    trail: List[int] = [start]
    stack: List[Iterator[int]] = [iter(farm.neighbors(start))]

    while stack:
        nxt = next(stack[-1], None)
        if nxt is None:
            stack.pop()
            visited[trail.pop()] = False
            continue
        if visited[nxt]:
            continue
        if nxt == end:
            paths.append(Path(tuple(trail) + (end,)))
            continue
        visited[nxt] = True
        trail.append(nxt)
        stack.append(iter(farm.neighbors(nxt)))

    logger.debug("[paths] enumerated %d simple paths", len(paths))
    return paths


def is_valid_path(farm: AntFarm, path: Path) -> bool:
    rooms = path.rooms
    if len(rooms) < 2 or rooms[0] != farm.start or rooms[-1] != farm.end:
        return False
    if len(set(rooms)) != len(rooms):
        return False
    return all(farm.are_adjacent(a, b) for a, b in zip(rooms, rooms[1:]))
