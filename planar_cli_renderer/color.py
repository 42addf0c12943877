#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/color.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Colors
# LOG_REF: 2026-10-18
#

import curses
import logging

logger = logging.getLogger(__name__)

NAMED_COLORS = {
    'black':   (0, 0, 0),
    'red':     (255, 0, 0),
    'green':   (0, 128, 0),
    'lime':    (0, 255, 0),
    'yellow':  (255, 255, 0),
    'blue':    (0, 0, 255),
    'magenta': (255, 0, 255),
    'fuchsia': (255, 0, 255),
    'cyan':    (0, 255, 255),
    'aqua':    (0, 255, 255),
    'white':   (255, 255, 255),
    'gray':    (128, 128, 128),
    'grey':    (128, 128, 128),
    'orange':  (255, 165, 0),
    'purple':  (128, 0, 128),
}


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB', 'RRGGBB' or the short '#RGB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) == 3:
        val = ''.join(ch * 2 for ch in val)
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None


def parse_color(value):
    """Hex string or basic colour name to (r, g, b); None when unknown."""
    if value is None:
        return None
    named = NAMED_COLORS.get(str(value).strip().lower())
    if named is not None:
        return named
    return parse_hex_color(value)


# The 6x6x6 color cube occupies xterm indices 16-231.
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def _dist2(a, b):
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2


def rgb_to_nearest_xterm(r, g, b):
    """Nearest xterm-256 index, searching the color cube and the grayscale ramp."""
    def nearest_level(v):
        return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))

    ri, gi, bi = nearest_level(r), nearest_level(g), nearest_level(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cube_dist = _dist2((r, g, b), (_CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]))

    # Grayscale ramp 232-255: 8, 18, ..., 238
    gray_step = max(0, min(23, ((r + g + b) // 3 - 8 + 5) // 10))
    gv = 8 + gray_step * 10
    gray_dist = _dist2((r, g, b), (gv, gv, gv))

    return 232 + gray_step if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Nearest basic ANSI colour (0-7), for terminals with only 8 colours."""
    return min(range(8), key=lambda i: _dist2((r, g, b), _ANSI8[i]))


def init_colors(config, palette, default_rgb=(255, 255, 255)):
    """
    Allocate one curses colour pair per palette entry.

    Color mode cascade:
      1. True color  - can_change_color(): init_color() with exact RGB
      2. xterm-256   - nearest xterm-256 index
      3. 8-color     - basic ANSI palette approximation
      4. Mono        - pair 0 everywhere
    Returns a list of pair ids, one per palette index.
    """
    mono = [0] * len(palette)
    if not config.use_color:
        return mono

    try:
        if not curses.has_colors():
            return mono
        curses.start_color()
    except curses.error:
        return mono

    bg = curses.COLOR_BLACK
    try:
        curses.use_default_colors()
        bg = -1
    except curses.error:
        pass

    num_colors = getattr(curses, 'COLORS', 8)
    max_pairs = getattr(curses, 'COLOR_PAIRS', 64)
    try:
        can_redefine = curses.can_change_color()
    except curses.error:
        can_redefine = False

    pairs = []
    for i, color in enumerate(palette):
        rgb = parse_color(color)
        if rgb is None:
            logger.warning("Unknown colour %r, using default", color)
            rgb = default_rgb
        pair_id = i + 1
        if pair_id >= max_pairs:
            pairs.append(0)
            continue

        if can_redefine and num_colors >= 256:
            slot = 16 + i
            try:
                curses.init_color(slot, *(c * 1000 // 255 for c in rgb))
            except curses.error:
                slot = rgb_to_nearest_xterm(*rgb)
        elif num_colors >= 256:
            slot = rgb_to_nearest_xterm(*rgb)
        elif num_colors >= 8:
            slot = rgb_to_nearest_ansi8(*rgb)
        else:
            pairs.append(0)
            continue

        try:
            curses.init_pair(pair_id, slot, bg)
            pairs.append(pair_id)
        except curses.error:
            pairs.append(0)

    return pairs
