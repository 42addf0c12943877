#!/usr/bin/env python3
#
# PROJECT: planar-cli-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Demo
# LOG_REF: 2026-10-18
#

import curses
import argparse
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from planar_cli_renderer.config import RenderConfig
from planar_cli_renderer.demo import main as demo_main
from planar_cli_renderer.log import setup_logging


def parse_args(argv=None):
    epilog = """\
keys:
  Tab select   arrows move   r/R rotate   +/- scale   h shear
  space add polygon   x remove   c clear   b braille   o colour   q quit

examples:
  %(prog)s                          Square and triangle demo
  %(prog)s outline.obj              Load the outline of an OBJ model
  %(prog)s --scale 20 --ascii       Zoomed in, ASCII cells
  %(prog)s --log-file demo.log --log-level DEBUG
"""
    parser = argparse.ArgumentParser(
        description="CLI 2D Scene Renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to .obj file (x/y of v records, l and f)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--scale", type=float, default=None,
                        help="Canvas pixels per world unit (default: 8)")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file")
    parser.add_argument("--log-level", default=None,
                        help="DEBUG, INFO, WARNING, ERROR (default: $PLANAR_LOG_LEVEL or WARNING)")
    return parser.parse_args(argv)


def build_config(args) -> RenderConfig:
    config = RenderConfig.detect_terminal()
    if args.no_color:
        config.use_color = False
    if args.ascii:
        config.use_braille = False
    return RenderConfig(
        use_color=config.use_color,
        use_braille=config.use_braille,
        view_scale=args.scale if args.scale is not None else config.view_scale,
        log_level=args.log_level or config.log_level,
    )


if __name__ == "__main__":
    args = parse_args()
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    setup_logging(config.logging_level, args.log_file)
    try:
        curses.wrapper(lambda s: demo_main(s, args, config))
    except KeyboardInterrupt:
        pass
