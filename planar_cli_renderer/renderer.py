#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Terminal renderer
# LOG_REF: 2026-10-18
#

import curses

from .canvas import Canvas, render_cell_ascii, render_cell_braille
from .color import init_colors
from .config import RenderConfig


class Renderer:
    """
    Copies a Canvas to a curses screen.

    The canvas occupies the screen from row 1 down; row 0 is left for the
    caller's HUD. Colour pairs are (re)allocated whenever the canvas
    palette has grown since the last frame.
    """

    def __init__(self):
        self.pairs = None

    @staticmethod
    def canvas_size(stdscr):
        """Pixel size of a canvas that fills the screen below the HUD row."""
        th, tw = stdscr.getmaxyx()
        return (tw - 1) * 2, (th - 2) * 4

    def init_colors(self, config: RenderConfig, palette):
        """Allocate curses colour pairs. Call after curses.wrapper init."""
        self.pairs = init_colors(config, palette)

    def present(self, stdscr, canvas: Canvas, config: RenderConfig):
        """
        Output one frame to the curses screen (erase + draw cells + text).

        Does NOT call stdscr.refresh(); the caller does that after its
        own overlay drawing.
        """
        if self.pairs is None or len(self.pairs) < len(canvas.palette):
            self.init_colors(config, canvas.palette)

        th, tw = stdscr.getmaxyx()
        stdscr.erase()

        pairs = self.pairs
        use_color = config.use_color
        cell_char = render_cell_braille if config.use_braille else render_cell_ascii

        def attr_for(c_idx):
            if use_color and c_idx < len(pairs):
                return curses.color_pair(pairs[c_idx])
            return curses.color_pair(0)

        grid = canvas.grid
        c_grid = canvas.c_grid
        for y in range(min(th - 2, len(grid))):
            row_grid = grid[y]
            row_color = c_grid[y]
            for x in range(min(tw - 1, len(row_grid))):
                mask = row_grid[x]
                if mask:
                    try:
                        stdscr.addstr(y + 1, x, cell_char(mask), attr_for(row_color[x]))
                    except curses.error:
                        pass

        for (y, x), (ch, c_idx) in canvas.text.items():
            if y < th - 2 and x < tw - 1:
                try:
                    stdscr.addstr(y + 1, x, ch, attr_for(c_idx) | curses.A_BOLD)
                except curses.error:
                    pass
