"""Public AntFarm package exports."""
from .config import Config
from .errors import FarmError, InvariantViolation, NoAgentsError, NoPathError, ParseError, SolverError
from .layout import Layout, load_layout, parse_farm
from .paths import enumerate_paths
from .assigner import assign_ants, expected_turns
from .planner import RoutePlan, RunResult, plan_routes, select_paths, solve_farm
from .problem import Ant, AntFarm, AntState, Path, Room, spawn_ants
from .simulator import Move, Occupancy, Transcript, simulate_movement, step_turn

__all__ = [
    "Config",
    "FarmError",
    "InvariantViolation",
    "NoAgentsError",
    "NoPathError",
    "ParseError",
    "SolverError",
    "Layout",
    "load_layout",
    "parse_farm",
    "enumerate_paths",
    "assign_ants",
    "expected_turns",
    "RoutePlan",
    "RunResult",
    "plan_routes",
    "select_paths",
    "solve_farm",
    "Ant",
    "AntFarm",
    "AntState",
    "Path",
    "Room",
    "spawn_ants",
    "Move",
    "Occupancy",
    "Transcript",
    "simulate_movement",
    "step_turn",
]
