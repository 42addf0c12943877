#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/style.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Style
# LOG_REF: 2026-10-18
#

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Tuple

from .errors import IncompleteStyle


@dataclass(frozen=True)
class SegmentStyle:
    width: float = 1.0
    color: str = "#FFFFFF"


@dataclass(frozen=True)
class PointStyle:
    width: float = 3.0
    color: str = "#FFFFFF"


@dataclass(frozen=True)
class CaptionStyle:
    font: str = "10px monospace"
    color: str = "#FFFFFF"
    texts: Tuple[str, ...] = ()

    def __post_init__(self):
        # Keep the value immutable even when handed a list
        object.__setattr__(self, 'texts', tuple(str(t) for t in (self.texts or ())))


_GROUPS = (
    ('segments', SegmentStyle),
    ('points', PointStyle),
    ('captions', CaptionStyle),
)


@dataclass(frozen=True)
class Style:
    """Visual settings of a planar object: one group per drawable primitive."""
    segments: SegmentStyle = field(default_factory=SegmentStyle)
    points: PointStyle = field(default_factory=PointStyle)
    captions: CaptionStyle = field(default_factory=CaptionStyle)

    def __post_init__(self):
        for name, group_cls in _GROUPS:
            if not isinstance(getattr(self, name), group_cls):
                raise IncompleteStyle(
                    f"Style group '{name}' must be a {group_cls.__name__}")

    @classmethod
    def from_mapping(cls, settings) -> 'Style':
        """
        Build a Style from the nested dictionary form:

            {"segments": {"width": 2, "color": "#00FF00"},
             "points":   {"width": 4, "color": "red"},
             "captions": {"font": "10px serif", "color": "white",
                          "texts": ["A", "B"]}}

        Every group must be present and non-empty. Missing fields inside a
        group take the defaults.
        """
        if isinstance(settings, Style):
            return settings
        if not isinstance(settings, Mapping):
            raise IncompleteStyle(
                "Settings should have three properties: segments, points and captions")

        groups = {}
        for name, group_cls in _GROUPS:
            group = settings.get(name)
            if not group:
                raise IncompleteStyle(f"Settings are missing the '{name}' group")
            if isinstance(group, group_cls):
                groups[name] = group
            elif isinstance(group, Mapping):
                known = {k: v for k, v in group.items()
                         if k in group_cls.__dataclass_fields__ and v is not None}
                groups[name] = group_cls(**known)
            else:
                raise IncompleteStyle(f"Style group '{name}' must be a mapping")
        return cls(**groups)

    def with_texts(self, texts) -> 'Style':
        """Copy of this style with a different caption text list."""
        c = self.captions
        return Style(self.segments, self.points, CaptionStyle(c.font, c.color, tuple(texts)))


DEFAULT_STYLE = Style()
