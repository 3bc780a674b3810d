"""Trace game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PATH_DATA = (
    "M 175 450 C 75 450 50 350 50 300 "
    "C 50 200 200 250 250 150 "
    "C 275 100 200 50 175 50"
)


@dataclass(frozen=True)
class TraceConfig:
    """Immutable tuning for a trace session.

    Attributes:
        path_data: SVG path data for the track centerline.
        resolution: Number of equal arc-length steps; the curve holds
            ``resolution + 1`` samples.
        safe_radius: Maximum distance from the nearest sample before the
            pointer is out of bounds.
        pickup_distance: A pointer-down must land strictly closer than this
            to the player marker to grab it.
        backtrack: Samples searched behind the current progress index.
        lookahead: Samples searched ahead of the current progress index.
        time_limit: Seconds on the game clock once active.
        countdown_ticks: Clock ticks between start and active play.
        completion_threshold: Progress percent at which the run counts as
            complete and snaps to 100.
        flatten_steps: Parameter steps per segment in the arc-length lookup
            table used when sampling.
        stroke_width: Visual track width, for presentation layers.
        player_radius: Visual marker radius, for presentation layers.
        view_box: Width and height of the curve-space canvas.
    """

    path_data: str = DEFAULT_PATH_DATA
    resolution: int = 1000
    safe_radius: float = 22.0
    pickup_distance: float = 40.0
    backtrack: int = 20
    lookahead: int = 100
    time_limit: int = 30
    countdown_ticks: int = 3
    completion_threshold: float = 99.0
    flatten_steps: int = 64
    stroke_width: float = 40.0
    player_radius: float = 12.0
    view_box: tuple[float, float] = (350.0, 500.0)

    def __post_init__(self) -> None:
        if self.resolution < 1:
            raise ValueError("resolution must be positive")
        if self.safe_radius <= 0:
            raise ValueError("safe_radius must be positive")
        if self.pickup_distance <= 0:
            raise ValueError("pickup_distance must be positive")
        if self.backtrack < 0 or self.lookahead < 0:
            raise ValueError("search window bounds must be non-negative")
        if self.time_limit <= 0:
            raise ValueError("time_limit must be positive")
        if self.countdown_ticks <= 0:
            raise ValueError("countdown_ticks must be positive")
        if not 0.0 < self.completion_threshold <= 100.0:
            raise ValueError("completion_threshold must be in (0, 100]")
        if self.flatten_steps < 1:
            raise ValueError("flatten_steps must be positive")
