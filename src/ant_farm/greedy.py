"""Greedy selection of interior-disjoint paths."""
from __future__ import annotations

from typing import List, Sequence, Set

from logging_utils import get_logger

from .problem import Path


def sort_paths(paths: Sequence[Path]) -> List[Path]:
    # sorted() is stable: equal lengths keep discovery order
    return sorted(paths, key=lambda p: p.length)


def _grow_from_seed(seed_idx: int, ordered: Sequence[Path]) -> List[Path]:
    chosen = [ordered[seed_idx]]
    taken: Set[int] = set(ordered[seed_idx].interior)
    for idx, path in enumerate(ordered):
        if idx == seed_idx:
            continue
        interior = path.interior
        if taken.isdisjoint(interior):
            chosen.append(path)
            taken |= interior
    return chosen


def select_disjoint_paths(paths: Sequence[Path]) -> List[Path]:
    """Best-seed greedy heuristic.

    Each path, in ascending length order, seeds a candidate set; every other
    path is then scanned in the same order and added when its interior rooms
    are free. The largest candidate wins, the earliest seed on ties. This does
    not guarantee the maximum number of disjoint paths.
    """
    logger = get_logger()
    ordered = sort_paths(paths)
    if not ordered:
        return []

    best: List[Path] = [ordered[0]]
    for seed_idx in range(len(ordered)):
        candidate = _grow_from_seed(seed_idx, ordered)
        if len(candidate) > len(best):
            best = candidate
            logger.debug("[greedy] seed %d -> %d disjoint paths", seed_idx, len(best))
    return best
