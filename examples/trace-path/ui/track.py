"""Track, endpoint and player marker rendering."""
from __future__ import annotations

import pygame

from tick_trace import Curve, Point, TraceConfig
from ui.constants import (
    CENTERLINE_COLOR,
    DASH_LEN,
    ENDPOINT_COLOR,
    PLAYER_COLOR,
    PLAYER_RING,
    TRACK_COLOR,
)
from ui.transform import ViewTransform


def draw_track(
    surface: pygame.Surface,
    curve: Curve,
    config: TraceConfig,
    view: ViewTransform,
) -> None:
    """Draw the wide track band, dashed centerline and endpoint dots."""
    screen_pts = [view.to_screen(p) for p in curve.points[::4]]
    screen_pts.append(view.to_screen(curve.end()))
    width = max(1, round(config.stroke_width * view.scale))
    radius = width // 2

    # Round caps and joins: a thick polyline plus a disc on every vertex.
    pygame.draw.lines(surface, TRACK_COLOR, False, screen_pts, width)
    for pt in screen_pts:
        pygame.draw.circle(surface, TRACK_COLOR, pt, radius)

    for i in range(0, len(screen_pts) - 1, DASH_LEN * 2):
        dash = screen_pts[i:i + DASH_LEN + 1]
        if len(dash) > 1:
            pygame.draw.lines(surface, CENTERLINE_COLOR, False, dash, 2)

    dot = max(2, round(6 * view.scale))
    for end in (curve.start(), curve.end()):
        pygame.draw.circle(surface, ENDPOINT_COLOR, view.to_screen(end), dot)


def draw_player(
    surface: pygame.Surface,
    position: Point,
    config: TraceConfig,
    view: ViewTransform,
    grabbing: bool,
) -> None:
    center = view.to_screen(position)
    radius = max(3, round(config.player_radius * view.scale))
    if grabbing:
        radius += 2
    pygame.draw.circle(surface, PLAYER_COLOR, center, radius)
    pygame.draw.circle(surface, PLAYER_RING, center, radius, 2)
