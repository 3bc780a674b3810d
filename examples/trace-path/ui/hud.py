"""Top bar, countdown overlay and result modal."""
from __future__ import annotations

import pygame

from tick_trace import FinishReason, SessionSnapshot, SessionState
from ui.constants import (
    ACCENT_COLOR,
    BG_COLOR,
    BOARD_BORDER,
    MODAL_H,
    MODAL_W,
    OVERLAY_COLOR,
    SCREEN_W,
    TEXT_COLOR,
    TEXT_DIM,
    TOP_BAR_H,
    WARN_COLOR,
)

REASON_LABELS = {
    FinishReason.COMPLETED: "Track complete",
    FinishReason.OUT_OF_BOUNDS: "Left the track",
    FinishReason.TIMED_OUT: "Time is up",
}

TIER_LABELS = {
    1: "Slow down and breathe, next time will be steadier.",
    2: "Good control, a little more patience.",
    3: "Precise and steady hand control.",
}


def draw_top_bar(
    surface: pygame.Surface, font: pygame.font.Font, snap: SessionSnapshot
) -> None:
    pygame.draw.rect(surface, BG_COLOR, (0, 0, SCREEN_W, TOP_BAR_H))
    pygame.draw.line(surface, BOARD_BORDER, (0, TOP_BAR_H), (SCREEN_W, TOP_BAR_H), 2)

    time_color = WARN_COLOR if snap.remaining_time <= 5 else TEXT_COLOR
    surface.blit(font.render(f"{snap.remaining_time}s", True, time_color), (16, 16))

    pct = font.render(f"{snap.progress_percent}%", True, TEXT_COLOR)
    surface.blit(pct, ((SCREEN_W - pct.get_width()) // 2, 16))

    hint = "R restart" if snap.state is not SessionState.FINISHED else "Enter result"
    label = font.render(hint, True, TEXT_DIM)
    surface.blit(label, (SCREEN_W - label.get_width() - 16, 16))


def _dim(surface: pygame.Surface) -> None:
    shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    shade.fill(OVERLAY_COLOR)
    surface.blit(shade, (0, 0))


def draw_start_screen(surface: pygame.Surface, font: pygame.font.Font) -> None:
    _dim(surface)
    lines = [
        "Drag the dot along the glowing track.",
        "Leave the track and the run ends.",
        "Score by distance when time runs out.",
        "",
        "Press Space to start",
    ]
    y = surface.get_height() // 2 - len(lines) * 14
    for line in lines:
        img = font.render(line, True, (255, 255, 255))
        surface.blit(img, ((surface.get_width() - img.get_width()) // 2, y))
        y += 28


def draw_countdown(
    surface: pygame.Surface, big_font: pygame.font.Font, value: int
) -> None:
    _dim(surface)
    img = big_font.render(str(value), True, (255, 255, 255))
    rect = img.get_rect(center=(surface.get_width() // 2, surface.get_height() // 2))
    surface.blit(img, rect)


def draw_result(
    surface: pygame.Surface, font: pygame.font.Font, snap: SessionSnapshot
) -> None:
    _dim(surface)
    x = (surface.get_width() - MODAL_W) // 2
    y = (surface.get_height() - MODAL_H) // 2
    pygame.draw.rect(surface, (255, 255, 255), (x, y, MODAL_W, MODAL_H), border_radius=12)

    tier = int(snap.score_tier) if snap.score_tier is not None else 1
    reason = REASON_LABELS.get(snap.finish_reason, "")
    rows = [
        (reason, TEXT_DIM),
        (f"Completed {snap.progress_percent}% of the track", TEXT_COLOR),
        (f"Score: {tier}", ACCENT_COLOR),
        (TIER_LABELS[tier], TEXT_COLOR),
        ("R play again  /  Esc close", TEXT_DIM),
    ]
    cy = y + 24
    for text, color in rows:
        img = font.render(text, True, color)
        surface.blit(img, (x + (MODAL_W - img.get_width()) // 2, cy))
        cy += 38
