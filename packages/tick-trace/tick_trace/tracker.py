"""Progress tracker - bounded-window nearest-sample search."""
from __future__ import annotations

import math

from tick_trace import vec
from tick_trace.curve import Curve
from tick_trace.types import Match, Point

BACKTRACK = 20
LOOKAHEAD = 100


def search_window(
    current_index: int, resolution: int, backtrack: int = BACKTRACK, lookahead: int = LOOKAHEAD,
) -> tuple[int, int]:
    """Inclusive index range searched around the current progress index."""
    return max(0, current_index - backtrack), min(resolution, current_index + lookahead)


def evaluate(
    cursor: Point,
    current_index: int,
    curve: Curve,
    backtrack: int = BACKTRACK,
    lookahead: int = LOOKAHEAD,
) -> Match:
    """Find the closest curve sample to ``cursor`` near ``current_index``.

    Only samples inside the search window are considered, so a pointer
    cannot latch onto a far section of a looping track. Equal distances
    resolve toward the larger index.
    """
    lo, hi = search_window(current_index, curve.resolution, backtrack, lookahead)
    points = curve.points
    best_index = lo
    best_sq = math.inf
    for i in range(lo, hi + 1):
        d = vec.distance_sq(cursor, points[i])
        if d <= best_sq:
            best_sq = d
            best_index = i
    return Match(best_index=best_index, best_distance=math.sqrt(best_sq))
