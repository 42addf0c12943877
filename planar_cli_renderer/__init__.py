#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Package layout
# LOG_REF: 2026-10-18
#

from .errors import (PlanarRenderError, InvalidVertexShape, InvalidEdgeShape,
                     InvalidEdgeIndex, IncompleteStyle, InvalidDrawSurface,
                     InvalidTransformArgument)
from .math_utils import Vec2, Matrix
from .style import Style, SegmentStyle, PointStyle, CaptionStyle, DEFAULT_STYLE
from .transform import Transform
from .planar_object import PlanarObject, Segment, SegmentSet, PointSet, CaptionSet
from .surface import DrawSurface
from .scene import Scene
from .config import RenderConfig
from .canvas import Canvas

__version__ = "0.1.0"
