"""Error types raised by the AntFarm pipeline."""
from __future__ import annotations


class FarmError(Exception):
    """Base class for every terminal pipeline error."""


class ParseError(FarmError, ValueError):
    """The farm description is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"ERROR: invalid data format, {self.message}"


class NoPathError(FarmError):
    def __init__(self, message: str = "ERROR: no valid path found between start and end") -> None:
        super().__init__(message)


class NoAgentsError(FarmError):
    def __init__(self, message: str = "ERROR: no ants available") -> None:
        super().__init__(message)


class InvariantViolation(FarmError):
    """Simulation state is inconsistent; indicates a defect in an upstream stage."""


class SolverError(FarmError):
    """The ILP selector failed to run or did not reach an optimal solution."""
