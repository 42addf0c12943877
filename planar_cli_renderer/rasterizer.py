#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Terminal canvas
# LOG_REF: 2026-10-18
#

import math

# Baselines whose anchor is the bottom edge of the text
_BOTTOM_BASELINES = ('bottom', 'alphabetic', 'ideographic')


def fill_disc(canvas, cx, cy, radius, color_idx=0):
    """Rasterizes a filled circle. Radii under one pixel plot a single dot."""
    if radius < 1.0:
        canvas.set_pixel(int(round(cx)), int(round(cy)), color_idx)
        return

    r2 = radius * radius
    for y in range(int(math.floor(cy - radius)), int(math.ceil(cy + radius)) + 1):
        dy = y - cy
        if dy * dy > r2:
            continue
        half = math.sqrt(r2 - dy * dy)
        for x in range(int(round(cx - half)), int(round(cx + half)) + 1):
            canvas.set_pixel(x, y, color_idx)


def draw_line_dda(canvas, p1, p2, color_idx=0, width=1.0):
    """
    Draws a line using the DDA algorithm.
    Widths above 1.5 pixels stamp a disc of that diameter at every step.
    """
    x1, y1 = int(round(p1[0])), int(round(p1[1]))
    x2, y2 = int(round(p2[0])), int(round(p2[1]))

    if width > 1.5:
        radius = width / 2.0
        plot = lambda x, y: fill_disc(canvas, x, y, radius, color_idx)
    else:
        plot = lambda x, y: canvas.set_pixel(x, y, color_idx)

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        plot(x1, y1)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)
    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(step + 1):
        plot(int(round(cx)), int(round(cy)))
        cx += x_inc; cy += y_inc


def place_text(canvas, text, x, y, color_idx=0, baseline="top"):
    """
    Writes text into the canvas's character overlay, one glyph per cell,
    starting at the cell that holds pixel (x, y). With a bottom-type
    baseline the text sits in the row above y instead.
    """
    py = int(math.floor(y))
    if str(baseline).lower() in _BOTTOM_BASELINES:
        py -= 1
    row = py >> 2
    col = int(math.floor(x)) >> 1
    if row < 0 or row >= len(canvas.grid):
        return
    cols = len(canvas.grid[row])
    for i, ch in enumerate(str(text)):
        c = col + i
        if 0 <= c < cols:
            canvas.text[(row, c)] = (ch, color_idx)
