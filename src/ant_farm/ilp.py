"""Exact interior-disjoint path selection as a 0/1 integer program.

Requires:
    pip install pulp
"""
from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Sequence

import pulp as pl

from logging_utils import get_logger

from .errors import SolverError
from .greedy import sort_paths
from .problem import Path


def select_disjoint_paths(paths: Sequence[Path], solver=None, verbose: bool = False) -> List[Path]:
    """Maximum-cardinality set of interior-disjoint paths, shortest total length on ties.

    Each path p gets a binary x_p and weight K - length_p with K larger than
    the summed length of all paths, so one extra path always outweighs any
    length difference. Each interior room is used by at most one chosen path.
    The result keeps the ascending-length order of the input.
    """
    logger = get_logger()
    ordered = sort_paths(paths)
    if not ordered:
        return []

    big = sum(p.length for p in ordered) + 1
    prob = pl.LpProblem("Disjoint_Path_Selection", pl.LpMaximize)
    x = pl.LpVariable.dicts("use", range(len(ordered)), lowBound=0, upBound=1, cat=pl.LpBinary)

    prob += pl.lpSum((big - p.length) * x[i] for i, p in enumerate(ordered)), "Paths_then_shortest"

    users: Dict[int, List[int]] = defaultdict(list)
    for i, path in enumerate(ordered):
        for room in path.interior:
            users[room].append(i)
    for room, idxs in users.items():
        if len(idxs) > 1:
            prob += (pl.lpSum(x[i] for i in idxs) <= 1, f"room_cap_{room}")

    solver = solver or pl.PULP_CBC_CMD(msg=verbose)
    try:
        prob.solve(solver)
    except pl.PulpSolverError as exc:
        raise SolverError(f"path selection ILP solver failed: {exc}") from exc
    status = pl.LpStatus[prob.status]
    if status != "Optimal":
        raise SolverError(f"path selection ILP ended with status {status}")

    chosen = [p for i, p in enumerate(ordered) if (x[i].value() or 0.0) > 0.5]
    logger.debug("[ilp] %d candidate paths -> %d selected", len(ordered), len(chosen))
    return chosen
