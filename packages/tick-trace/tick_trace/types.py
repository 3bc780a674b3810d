"""Shared type aliases, enums and errors for tick-trace."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

Point = tuple[float, float]


class SessionState(str, Enum):
    IDLE = "idle"
    COUNTDOWN = "countdown"
    ACTIVE = "active"
    FINISHED = "finished"


class FinishReason(str, Enum):
    COMPLETED = "completed"
    OUT_OF_BOUNDS = "out_of_bounds"
    TIMED_OUT = "timed_out"


class ScoreTier(IntEnum):
    LOW = 1
    FAIR = 2
    HIGH = 3


@dataclass(frozen=True, slots=True)
class Match:
    """Best curve sample found for a cursor position."""

    best_index: int
    best_distance: float

    def within(self, safe_radius: float) -> bool:
        return self.best_distance <= safe_radius


class CurveError(ValueError):
    """Raised for an empty, malformed or degenerate curve definition."""
