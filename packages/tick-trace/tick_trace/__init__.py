"""tick-trace - Timed path-tracing game core built on discrete clock ticks."""
from __future__ import annotations

from tick_trace import vec
from tick_trace.config import DEFAULT_PATH_DATA, TraceConfig
from tick_trace.curve import Curve, parse_track, sample
from tick_trace.schedule import Scheduler, TaskHandle
from tick_trace.scoring import ResultSummary, display_percent, score_tier
from tick_trace.session import SessionSnapshot, TraceSession
from tick_trace.signals import SignalBus
from tick_trace.tracker import evaluate, search_window
from tick_trace.types import (
    CurveError,
    FinishReason,
    Match,
    Point,
    ScoreTier,
    SessionState,
)

__all__ = [
    "DEFAULT_PATH_DATA",
    "Curve",
    "CurveError",
    "FinishReason",
    "Match",
    "Point",
    "ResultSummary",
    "Scheduler",
    "ScoreTier",
    "SessionSnapshot",
    "SessionState",
    "SignalBus",
    "TaskHandle",
    "TraceConfig",
    "TraceSession",
    "display_percent",
    "evaluate",
    "parse_track",
    "sample",
    "score_tier",
    "search_window",
    "vec",
]
