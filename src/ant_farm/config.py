"""Configuration utilities for AntFarm runs."""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields
import os
from pathlib import Path
from typing import Any, Dict, get_type_hints


def _coerce_value(expected_type: Any, value: str) -> Any:
    """Coerce a string value coming from the environment into ``expected_type``."""
    if expected_type is bool:
        return value.strip().lower() in {"1", "true", "yes", "on"}
    if expected_type is int:
        return int(value)
    if expected_type is float:
        return float(value)
    if expected_type is Path:
        return Path(value)
    return value


@dataclass
class Config:
    """Container for loading, planning and output parameters."""

    farm_file: str = os.path.join("farms", "example.txt")
    selection_mode: str = "greedy"
    ant_prefix: str = "L"
    max_ants: int = 10000
    echo_input: bool = True
    export_artifacts: bool = False
    solver_verbose: bool = False
    output_root: str = "out"
    debug: bool = False

    def with_env_overrides(self) -> "Config":
        """Return a copy of the config with environment overrides applied."""
        data: Dict[str, Any] = asdict(self)
        hints = get_type_hints(type(self))
        for field in fields(self):
            env_key = field.name.upper()
            if env_key in os.environ:
                raw_value = os.environ[env_key]
                data[field.name] = _coerce_value(hints.get(field.name, str), raw_value)
        return Config(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
