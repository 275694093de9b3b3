"""Easing Gallery: every ezing curve in one window.

One row per family, one column per variant (_in, _out, _inout). A dot sweeps
each curve from t=0 to t=1 and starts over.

Controls:
  Space   Pause / resume the sweep
  P       Toggle f32 / f64 evaluation
  +/-     Adjust sweep duration
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from ezing import DTYPES, Precision
from ui.constants import (
    BG_COLOR,
    FPS,
    MAX_SWEEP_SECONDS,
    MIN_SWEEP_SECONDS,
    SAMPLES,
    SCREEN_H,
    SCREEN_W,
    SWEEP_SECONDS,
)
from ui.grid import draw_grid
from ui.status import draw_status_bar

logger = logging.getLogger("easing_gallery")


class GalleryState:
    """Holds sweep progress and display settings."""

    def __init__(self, precision: Precision, sweep_seconds: float, samples: int) -> None:
        self.precision: Precision = precision
        self.sweep_seconds = sweep_seconds
        self.samples = samples
        self.paused = False
        self.t = 0.0

    def advance(self, dt: float) -> None:
        if self.paused:
            return
        self.t += dt / self.sweep_seconds
        if self.t > 1.0:
            self.t = 0.0

    def toggle_precision(self) -> None:
        self.precision = "f32" if self.precision == "f64" else "f64"
        logger.info("precision: %s", self.precision)

    def adjust_sweep(self, delta: float) -> None:
        self.sweep_seconds = min(max(self.sweep_seconds + delta, MIN_SWEEP_SECONDS), MAX_SWEEP_SECONDS)
        logger.debug("sweep: %.1fs", self.sweep_seconds)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Easing Gallery -- ezing curve visualizer")
    parser.add_argument("--precision", choices=sorted(DTYPES), default="f64",
                        help="float precision used to evaluate curves (default: f64)")
    parser.add_argument("--samples", type=int, default=SAMPLES,
                        help=f"points per curve (default: {SAMPLES})")
    parser.add_argument("--period", type=float, default=SWEEP_SECONDS,
                        help=f"seconds per sweep of the tracking dot (default: {SWEEP_SECONDS})")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging level (default: INFO)")
    args = parser.parse_args(argv)
    if args.samples < 1:
        parser.error("--samples must be at least 1")
    if args.period <= 0:
        parser.error("--period must be positive")
    return args


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "starting gallery: precision=%s samples=%d period=%.1fs",
        args.precision, args.samples, args.period,
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery - ezing demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState(args.precision, args.period, args.samples)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key == pygame.K_SPACE:
                    state.paused = not state.paused

                elif event.key == pygame.K_p:
                    state.toggle_precision()

                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.adjust_sweep(0.5)

                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.adjust_sweep(-0.5)

        state.advance(dt)

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_grid(screen, font, state.t, state.samples, state.precision)
        draw_status_bar(screen, font, state.precision, state.sweep_seconds, state.paused)
        pygame.display.flip()

    logger.info("gallery closed")
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
