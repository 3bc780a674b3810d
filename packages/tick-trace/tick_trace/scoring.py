"""Score tiers and result summaries derived from final progress."""
from __future__ import annotations

import math
from dataclasses import dataclass

from tick_trace.types import FinishReason, ScoreTier

HIGH_THRESHOLD = 70.0
FAIR_THRESHOLD = 35.0


def score_tier(progress: float) -> ScoreTier:
    if progress >= HIGH_THRESHOLD:
        return ScoreTier.HIGH
    if progress >= FAIR_THRESHOLD:
        return ScoreTier.FAIR
    return ScoreTier.LOW


def display_percent(progress: float) -> int:
    """Round half up for display. Tracking itself stays floating point."""
    return int(math.floor(progress + 0.5))


@dataclass(frozen=True, slots=True)
class ResultSummary:
    progress: float
    percent: int
    tier: ScoreTier
    reason: FinishReason

    @classmethod
    def build(cls, progress: float, reason: FinishReason) -> ResultSummary:
        return cls(
            progress=progress,
            percent=display_percent(progress),
            tier=score_tier(progress),
            reason=reason,
        )
