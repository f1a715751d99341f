"""Congestion-aware assignment of ants to selected paths."""
from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Sequence

from logging_utils import get_logger

from .errors import NoPathError
from .problem import Ant, Path


def assign_ants(ants: Iterable[Ant], paths: Sequence[Path]) -> Dict[int, Path]:
    """Map each ant id to the path with the lowest ``length + ants already on it``.

    Ties go to the earliest path in ``paths``.
    """
    if not paths:
        raise NoPathError()
    logger = get_logger()
    load = [0] * len(paths)
    assignment: Dict[int, Path] = {}
    for ant in sorted(ants, key=lambda a: a.ant_id):
        best_idx = 0
        best_cost = paths[0].length + load[0]
        for idx in range(1, len(paths)):
            cost = paths[idx].length + load[idx]
            if cost < best_cost:
                best_cost = cost
                best_idx = idx
        assignment[ant.ant_id] = paths[best_idx]
        load[best_idx] += 1
    logger.debug("[assign] ants per path: %s", load)
    return assignment


def path_loads(assignment: Dict[int, Path]) -> Counter:
    return Counter(assignment.values())


def expected_turns(assignment: Dict[int, Path]) -> int:
    """Turns needed when every path streams one ant per turn."""
    loads = path_loads(assignment)
    return max((path.length + count - 1 for path, count in loads.items()), default=0)


def ants_on_path(assignment: Dict[int, Path], path: Path) -> List[int]:
    return sorted(aid for aid, p in assignment.items() if p == path)
