"""Bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import SCREEN_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    precision: str,
    sweep_seconds: float,
    paused: bool,
) -> None:
    """Draw current settings and key bindings."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    state = "PAUSED" if paused else "running"
    info = font.render(f"{precision}  sweep {sweep_seconds:.1f}s  {state}", True, TEXT_COLOR)
    surface.blit(info, (8, y + STATUS_H // 2 - info.get_height() // 2))

    keys = "[Space] Pause  [P] Precision  [+/-] Sweep  [Esc] Quit"
    label = font.render(keys, True, TEXT_DIM)
    surface.blit(
        label, (SCREEN_W - label.get_width() - 8, y + STATUS_H // 2 - label.get_height() // 2)
    )
