"""Layout constants and color definitions."""

# Timing
FPS = 60
SWEEP_SECONDS = 2.0
MIN_SWEEP_SECONDS = 0.5
MAX_SWEEP_SECONDS = 8.0

# Curve sampling
SAMPLES = 100

# Layout dimensions
ROW_COUNT = 10
COL_COUNT = 3
LABEL_W = 80
HEADER_H = 24
CELL_W = 300
CELL_H = 72
CELL_PAD = 4
STATUS_H = 36

SCREEN_W = LABEL_W + CELL_W * COL_COUNT
SCREEN_H = HEADER_H + CELL_H * ROW_COUNT + STATUS_H

# Vertical plot range; elastic and back leave [0, 1]
PLOT_MIN = -0.5
PLOT_MAX = 1.5

# Colors
BG_COLOR = (20, 20, 30)
CELL_BG = (15, 15, 25)
CELL_BORDER = (50, 50, 70)
GUIDE_COLOR = (45, 45, 62)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
DOT_COLOR = (255, 255, 255)

# Family name -> color
FAMILY_COLORS: dict[str, tuple[int, int, int]] = {
    "quad": (0, 220, 220),
    "cubic": (80, 160, 255),
    "quart": (150, 120, 255),
    "quint": (220, 80, 220),
    "sine": (60, 220, 80),
    "circ": (180, 220, 60),
    "expo": (255, 200, 40),
    "elastic": (255, 160, 40),
    "back": (255, 90, 90),
    "bounce": (240, 240, 240),
}
