#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/errors.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Errors
# LOG_REF: 2026-10-18
#

class PlanarRenderError(Exception):
    """Base error of the renderer. Carries a stable error code."""
    code = "cg-000"

    def __init__(self, message: str):
        super().__init__(f"{message} ({self.code})")
        self.message = message


class InvalidVertexShape(PlanarRenderError):
    """Vertex matrix does not have three columns."""
    code = "cg-ob-001"


class InvalidEdgeShape(PlanarRenderError):
    """Edge list is not a list of index pairs."""
    code = "cg-ob-002"


class InvalidEdgeIndex(InvalidEdgeShape):
    """An edge references a vertex row that does not exist."""
    code = "cg-ob-004"


class IncompleteStyle(PlanarRenderError):
    """Style descriptor lacks one of segments, points or captions."""
    code = "cg-ob-003"


class InvalidTransformArgument(PlanarRenderError, TypeError):
    """Something other than a Transform was applied to an object."""
    code = "cg-ob-005"


class InvalidDrawSurface(PlanarRenderError):
    """Scene was given a handle that cannot be drawn on."""
    code = "cg-sc-001"
