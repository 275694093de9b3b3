"""Easing curve plot renderer."""
from __future__ import annotations

from functools import lru_cache

import pygame

from ezing import EasingFn, Precision, as_precision, sample

from ui.constants import CELL_BG, DOT_COLOR, GUIDE_COLOR, PLOT_MAX, PLOT_MIN, TEXT_DIM


def _to_screen(t: float, v: float, x: int, y: int, w: int, h: int) -> tuple[float, float]:
    span = PLOT_MAX - PLOT_MIN
    return x + t * w, y + h - (v - PLOT_MIN) / span * h


@lru_cache(maxsize=None)
def _curve(
    easing_fn: EasingFn, samples: int, precision: Precision
) -> list[tuple[float, float]]:
    ts, ys = sample(easing_fn, samples, precision)
    return [(float(t), float(v)) for t, v in zip(ts, ys)]


def draw_curve_plot(
    surface: pygame.Surface,
    easing_fn: EasingFn,
    x: int,
    y: int,
    w: int,
    h: int,
    current_t: float,
    color: tuple[int, int, int],
    samples: int,
    precision: Precision,
) -> None:
    """Draw an easing curve with a tracking dot."""
    pygame.draw.rect(surface, CELL_BG, (x, y, w, h))

    # Guides at 0 and 1
    for level in (0.0, 1.0):
        _, gy = _to_screen(0.0, level, x, y, w, h)
        pygame.draw.line(surface, GUIDE_COLOR, (x, gy), (x + w, gy))
    pygame.draw.line(surface, TEXT_DIM, (x, y), (x, y + h))

    points = [_to_screen(t, v, x, y, w, h) for t, v in _curve(easing_fn, samples, precision)]
    pygame.draw.lines(surface, color, False, points, 2)

    if 0.0 <= current_t <= 1.0:
        v = float(easing_fn(as_precision(current_t, precision)))
        dot_x, dot_y = _to_screen(current_t, v, x, y, w, h)
        pygame.draw.circle(surface, DOT_COLOR, (int(dot_x), int(dot_y)), 4)
        pygame.draw.circle(surface, color, (int(dot_x), int(dot_y)), 3)
