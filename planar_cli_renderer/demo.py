#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/demo.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Demo
# LOG_REF: 2026-10-18
#

import curses
import logging
import random
import time

from .canvas import Canvas
from .config import RenderConfig
from .planar_object import PlanarObject
from .renderer import Renderer
from .scene import Scene
from .shapes import axes, centroid, from_obj, regular_polygon, polygon
from .style import Style, SegmentStyle, PointStyle, CaptionStyle
from .transform import Transform

logger = logging.getLogger(__name__)

MOVE_STEP = 0.5
ROTATE_STEP = 15.0
SCALE_STEP = 1.1
SHEAR_STEP = 0.1

_COLORS = ["#D0DD14", "#00C8FF", "#FF5F87", "#87FF5F", "#FFAF00", "#AF87FF"]

AXES_STYLE = Style(SegmentStyle(1, "gray"), PointStyle(1, "gray"),
                   CaptionStyle(color="gray", texts=("O", "X", "Y")))


def object_style(color, texts=()):
    base = Style(SegmentStyle(1, color), PointStyle(3, "white"), CaptionStyle(color=color))
    return base.with_texts(texts)


class DemoApp:
    """
    Interactive harness around a Scene drawn onto a terminal Canvas.

    Every object is kept as an untouched model plus its own accumulated
    Transform. Each frame the scene is refilled with transformed copies,
    so the models never change and transforms never compound by accident.
    """

    def __init__(self, stdscr, args, config: RenderConfig = None):
        self.stdscr = stdscr
        self.running = True

        curses.curs_set(0)
        stdscr.timeout(33)

        self.config = config or RenderConfig.detect_terminal()
        self.renderer = Renderer()

        self.models = []    # list of [PlanarObject, Transform]
        self.selected = 0
        self.guide = axes(4.0, AXES_STYLE)

        if getattr(args, 'model', None):
            self.add_model(from_obj(args.model, object_style(_COLORS[0])))
        else:
            self.add_model(polygon([(0, 0), (2, 0), (2, 2), (0, 2)],
                                   object_style(_COLORS[0], "ABCD")))
            tri = regular_polygon(3, 1.5, (-4, 1), object_style(_COLORS[1], "PQR"))
            self.add_model(tri)

        self.canvas = None
        self.scene = None
        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    def add_model(self, obj: PlanarObject):
        self.models.append([obj, Transform()])
        self.selected = len(self.models) - 1

    def remove_selected(self):
        if not self.models:
            return
        self.models.pop(self.selected)
        self.selected = max(0, min(self.selected, len(self.models) - 1))

    # ────────────────────────────────────────────────────────────────────
    # Scene upkeep
    # ────────────────────────────────────────────────────────────────────
    def _ensure_scene(self):
        """(Re)build canvas and scene when the terminal size changes."""
        w, h = Renderer.canvas_size(self.stdscr)
        if w <= 0 or h <= 0:
            return False
        if self.canvas is None or (self.canvas.w, self.canvas.h) != (w, h):
            self.canvas = Canvas(w, h)
            self.scene = Scene(self.canvas, center=(w / 2, h / 2),
                               scale=self.config.view_scale)
            # Pair ids follow palette order, which a new canvas rebuilds
            self.renderer.pairs = None
            logger.info("Canvas resized to %dx%d", w, h)
        return True

    def _placed(self, index):
        obj, t = self.models[index]
        placed = obj.get_copy()
        placed.apply_transformation(t)
        return placed

    def _refill_scene(self):
        scene = self.scene
        scene.clear_objects()
        scene.add_object(self.guide)
        for i in range(len(self.models)):
            placed = self._placed(i)
            if i == self.selected:
                st = placed.style
                highlight = Style(SegmentStyle(2, st.segments.color), st.points, st.captions)
                placed = PlanarObject(placed.elements(), placed.edges, highlight)
            scene.add_object(placed)

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def _about_center(self, step):
        """Wrap a step so it happens around the selected object's centroid."""
        c = centroid(self._placed(self.selected))
        t = self.models[self.selected][1]
        t.move("x", -c.x).move("y", -c.y)
        step(t)
        t.move("x", c.x).move("y", c.y)

    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        if key == ord('q'):
            self.running = False
            return
        if key == ord(' '):
            sides = random.randint(3, 8)
            color = random.choice(_COLORS)
            labels = [str(i) for i in range(sides)]
            self.add_model(regular_polygon(
                sides, random.uniform(0.5, 2.0),
                (random.uniform(-8, 8), random.uniform(-5, 5)),
                object_style(color, labels)))
            return
        if key == ord('c'):
            self.models.clear()
            self.selected = 0
            return
        if key == ord('b'):
            self.config.use_braille = not self.config.use_braille
            return
        if key == ord('o'):
            self.config.use_color = not self.config.use_color
            self.renderer.pairs = None
            return
        if not self.models:
            return

        t = self.models[self.selected][1]
        if key == ord('\t'):
            self.selected = (self.selected + 1) % len(self.models)
        elif key == ord('x'):
            self.remove_selected()
        elif key == curses.KEY_UP:
            t.move("y", MOVE_STEP)
        elif key == curses.KEY_DOWN:
            t.move("y", -MOVE_STEP)
        elif key == curses.KEY_RIGHT:
            t.move("x", MOVE_STEP)
        elif key == curses.KEY_LEFT:
            t.move("x", -MOVE_STEP)
        elif key == ord('r'):
            self._about_center(lambda s: s.rotate(ROTATE_STEP))
        elif key == ord('R'):
            self._about_center(lambda s: s.rotate(-ROTATE_STEP))
        elif key in (ord('='), ord('+')):
            self._about_center(lambda s: s.scale("x", SCALE_STEP).scale("y", SCALE_STEP))
        elif key == ord('-'):
            self._about_center(lambda s: s.scale("x", 1 / SCALE_STEP).scale("y", 1 / SCALE_STEP))
        elif key == ord('h'):
            self._about_center(lambda s: s.shear("x", SHEAR_STEP))

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def run(self):
        while self.running:
            start_time = time.time()

            self.handle_input()
            if not self._ensure_scene():
                continue

            self._refill_scene()
            self.scene.draw()
            self.renderer.present(self.stdscr, self.canvas, self.config)

            # ── HUD overlay (line 0) ────────────────────────────────────
            th, tw = self.stdscr.getmaxyx()
            self.frame_count += 1
            now = time.time()
            if now - self.last_fps_time >= 1.0:
                self.fps = self.frame_count
                self.frame_count = 0
                self.last_fps_time = now

            ms = (now - start_time) * 1000
            modestr = (f"{'COL' if self.config.use_color else 'MON'} "
                       f"{'BRA' if self.config.use_braille else 'ASC'}")
            hdr = (f" OBJ:{len(self.models)}"
                   f" | SEL:{self.selected + 1 if self.models else '-'}"
                   f" | FPS:{self.fps}"
                   f" | {ms:.1f}ms"
                   f" | [{modestr}] ")
            try:
                self.stdscr.addstr(0, 0, hdr.center(tw - 1, '='),
                                   curses.color_pair(0) | curses.A_BOLD)
            except curses.error:
                pass

            self.stdscr.refresh()


def main(stdscr, args, config=None):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args, config)
    app.run()
