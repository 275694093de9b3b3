"""Family x variant grid of curve plots."""
from __future__ import annotations

import pygame

from ezing import FAMILIES, VARIANTS, Precision

from ui.constants import (
    CELL_BORDER,
    CELL_H,
    CELL_PAD,
    CELL_W,
    FAMILY_COLORS,
    HEADER_H,
    LABEL_COLOR,
    LABEL_W,
    TEXT_DIM,
)
from ui.curves import draw_curve_plot


def draw_grid(
    surface: pygame.Surface,
    font: pygame.font.Font,
    current_t: float,
    samples: int,
    precision: Precision,
) -> None:
    """Draw one row per family and one column per variant."""
    for col, variant in enumerate(VARIANTS):
        header = font.render(f"_{variant}", True, TEXT_DIM)
        hx = LABEL_W + col * CELL_W + CELL_W // 2 - header.get_width() // 2
        surface.blit(header, (hx, HEADER_H // 2 - header.get_height() // 2))

    for row, (family, fns) in enumerate(FAMILIES.items()):
        row_y = HEADER_H + row * CELL_H
        color = FAMILY_COLORS.get(family, (200, 200, 200))

        label = font.render(family, True, LABEL_COLOR)
        surface.blit(label, (10, row_y + CELL_H // 2 - label.get_height() // 2))

        for col, fn in enumerate(fns):
            cell_x = LABEL_W + col * CELL_W
            draw_curve_plot(
                surface,
                fn,
                cell_x + CELL_PAD,
                row_y + CELL_PAD,
                CELL_W - 2 * CELL_PAD,
                CELL_H - 2 * CELL_PAD,
                current_t,
                color,
                samples,
                precision,
            )
            pygame.draw.rect(surface, CELL_BORDER, (cell_x, row_y, CELL_W, CELL_H), 1)
