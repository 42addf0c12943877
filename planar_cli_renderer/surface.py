#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/surface.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Draw surface
# LOG_REF: 2026-10-18
#

from typing import Protocol, runtime_checkable


@runtime_checkable
class DrawSurface(Protocol):
    """
    What a Scene draws on. Coordinates are screen pixels, y growing down.

    Paths follow the usual canvas model: ``begin_path`` starts an empty
    path, ``move_to`` opens a subpath, ``line_to`` extends it and
    ``stroke`` draws every subpath of the current path at once.
    """
    width: int
    height: int

    def clear(self, width: int, height: int) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self, color: str, width: float) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None: ...

    def fill_text(self, text: str, x: float, y: float, font: str, color: str,
                  baseline: str = "top") -> None: ...
