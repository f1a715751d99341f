"""Planner facade used by the CLI, the batch runner and the tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from logging_utils import get_logger

from .assigner import assign_ants, expected_turns
from .config import Config
from .paths import enumerate_paths
from .problem import Ant, AntFarm, Path, spawn_ants
from .simulator import Transcript, simulate_movement
from . import greedy

SELECTION_MODES = ("greedy", "ilp")


@dataclass
class RoutePlan:
    paths: List[Path] = field(default_factory=list)
    selected: List[Path] = field(default_factory=list)
    assignment: Dict[int, Path] = field(default_factory=dict)

    @property
    def expected_turns(self) -> int:
        return expected_turns(self.assignment)


@dataclass
class RunResult:
    plan: RoutePlan
    ants: List[Ant]
    transcript: Transcript


def select_paths(paths: List[Path], config: Config) -> List[Path]:
    """Select a path-selection backend based on the configuration."""
    mode = config.selection_mode
    if mode == "greedy":
        return greedy.select_disjoint_paths(paths)
    if mode == "ilp":
        # pulp is only needed for this backend
        from . import ilp

        return ilp.select_disjoint_paths(paths, verbose=config.solver_verbose)
    raise ValueError(f"unknown selection mode {mode!r}; expected one of {', '.join(SELECTION_MODES)}")


def plan_routes(farm: AntFarm, ants: List[Ant], config: Config) -> RoutePlan:
    logger = get_logger()
    paths = enumerate_paths(farm)
    selected = select_paths(paths, config)
    logger.info(
        "[plan] %d paths found, %d interior-disjoint selected (mode=%s)",
        len(paths),
        len(selected),
        config.selection_mode,
    )
    assignment = assign_ants(ants, selected)
    return RoutePlan(paths, selected, assignment)


def solve_farm(farm: AntFarm, config: Config | None = None) -> RunResult:
    """Enumerate, select, assign and simulate; errors abort with no partial output."""
    config = config or Config()
    ants = spawn_ants(farm)
    plan = plan_routes(farm, ants, config)
    transcript = simulate_movement(farm, ants, plan.assignment, config)
    return RunResult(plan, ants, transcript)
