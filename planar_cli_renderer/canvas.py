#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Terminal canvas
# LOG_REF: 2026-10-18
#

from .rasterizer import draw_line_dda, fill_disc, place_text


class Canvas:
    """
    Terminal draw surface.

    Pixels live in 2x4 cells so one cell maps to one Braille glyph. Each
    cell also remembers the colour of the last pixel drawn into it, and a
    separate overlay holds caption characters, which win over pixels.
    Colours are registered in ``palette`` in first-use order; the palette
    index is what the renderer maps to a curses colour pair.
    """
    __slots__ = ['w', 'h', 'grid', 'c_grid', 'text', 'palette', '_color_ids', '_path']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]
        self.c_grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]
        self.text = {}       # (row, col) -> (char, color index)
        self.palette = []    # color strings
        self._color_ids = {}
        self._path = []      # subpaths, each a list of (x, y)

    @property
    def width(self):
        return self.w

    @property
    def height(self):
        return self.h

    def color_index(self, color) -> int:
        key = str(color)
        idx = self._color_ids.get(key)
        if idx is None:
            idx = len(self.palette)
            self.palette.append(key)
            self._color_ids[key] = idx
        return idx

    def set_pixel(self, x, y, color_idx):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return

        cx, cy = x >> 1, y >> 2
        # Bit index 0-3 for the left column, 4-7 for the right one
        self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))
        self.c_grid[cy][cx] = color_idx

    # ── DrawSurface ─────────────────────────────────────────────────────
    def clear(self, width, height):
        """Clear every cell that overlaps the pixel rectangle (0, 0, width, height)."""
        rows = min(len(self.grid), (max(0, int(height)) + 3) // 4)
        cols = min(len(self.grid[0]), (max(0, int(width)) + 1) // 2)
        for cy in range(rows):
            row, crow = self.grid[cy], self.c_grid[cy]
            for cx in range(cols):
                row[cx] = 0
                crow[cx] = 0
        self.text = {k: v for k, v in self.text.items() if not (k[0] < rows and k[1] < cols)}

    def begin_path(self):
        self._path = []

    def move_to(self, x, y):
        self._path.append([(x, y)])

    def line_to(self, x, y):
        if not self._path:
            self._path.append([(x, y)])
        else:
            self._path[-1].append((x, y))

    def stroke(self, color, width):
        idx = self.color_index(color)
        for sub in self._path:
            if len(sub) == 1:
                continue
            for a, b in zip(sub, sub[1:]):
                draw_line_dda(self, a, b, idx, width)

    def fill_circle(self, x, y, radius, color):
        fill_disc(self, x, y, radius, self.color_index(color))

    def fill_text(self, text, x, y, font, color, baseline="top"):
        # Terminal cells have one font; ``font`` is accepted and ignored.
        place_text(self, text, x, y, self.color_index(color), baseline)


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
