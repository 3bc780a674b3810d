"""Trace Path - drag the marker along a curved track before time runs out.

Exercises tick-trace: curve sampling, the progress tracker and the
session clock.

Controls:
  Space   Start
  R       Restart (any time)
  Enter   Re-open the result card
  Drag    Grab the marker and follow the track
  Esc     Close the result card / quit
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

import pygame

from tick_trace import SessionState, TraceConfig, TraceSession
from ui.constants import BOARD_BG, BOARD_BORDER, BOARD_PAD, FPS, SCREEN_H, SCREEN_W, TICK_SECONDS, TOP_BAR_H
from ui.hud import draw_countdown, draw_result, draw_start_screen, draw_top_bar
from ui.track import draw_player, draw_track
from ui.transform import ViewTransform

logger = logging.getLogger("trace_path")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Trace Path - tick-trace visual demo")
    p.add_argument("--time-limit", type=int, default=30, help="Seconds per run (default: 30)")
    p.add_argument("--safe-radius", type=float, default=22.0,
                   help="Allowed distance from the centerline (default: 22)")
    p.add_argument("--resolution", type=int, default=1000,
                   help="Curve samples (default: 1000)")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def build_session(args: argparse.Namespace) -> TraceSession:
    config = dataclasses.replace(
        TraceConfig(),
        time_limit=args.time_limit,
        safe_radius=args.safe_radius,
        resolution=args.resolution,
    )
    return TraceSession(config)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        session = build_session(args)
    except ValueError as e:
        logger.error("Invalid track configuration: %s", e)
        sys.exit(2)

    session.bus.subscribe(
        "finished",
        lambda name, data: logger.info(
            "Result: %s, %d%%, score %d", data["reason"].value, data["percent"], data["tier"]
        ),
    )
    session.bus.subscribe_all(lambda name, data: logger.debug("%s %s", name, data))

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Trace Path - tick-trace demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("sans", 20)
    big_font = pygame.font.SysFont("sans", 160, bold=True)

    board = (
        BOARD_PAD,
        TOP_BAR_H + BOARD_PAD,
        SCREEN_W - 2 * BOARD_PAD,
        SCREEN_H - TOP_BAR_H - 2 * BOARD_PAD,
    )
    view = ViewTransform.fit(session.config.view_box, board)

    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        if session.state in (SessionState.COUNTDOWN, SessionState.ACTIVE):
            accumulator += dt
        else:
            accumulator = 0.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    if session.result_visible:
                        session.dismiss_result()
                    else:
                        running = False
                elif event.key == pygame.K_SPACE:
                    session.start_session()
                elif event.key == pygame.K_r:
                    session.restart_session()
                    accumulator = 0.0
                elif event.key == pygame.K_RETURN:
                    session.show_result()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                session.on_pointer_down(view.to_curve(event.pos))

            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                session.on_pointer_move(view.to_curve(event.pos))

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                session.on_pointer_up()

            elif event.type == pygame.WINDOWLEAVE:
                session.on_pointer_up()

        # --- Tick ---
        while accumulator >= TICK_SECONDS:
            session.on_clock_tick()
            accumulator -= TICK_SECONDS

        # --- Render ---
        snap = session.snapshot()
        screen.fill(BOARD_BG)
        pygame.draw.rect(screen, BOARD_BORDER, board, 4, border_radius=16)
        draw_track(screen, session.curve, session.config, view)
        draw_player(screen, snap.player_position, session.config, view, snap.grabbing)
        draw_top_bar(screen, font, snap)

        if snap.state is SessionState.IDLE:
            draw_start_screen(screen, font)
        elif snap.state is SessionState.COUNTDOWN:
            draw_countdown(screen, big_font, snap.countdown_value)
        elif snap.result_visible:
            draw_result(screen, font, snap)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
