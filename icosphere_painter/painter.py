"""
Painter's algorithm renderer

Triangles are drawn back to front, each one painting over whatever lies
behind it, so no depth buffer is needed.

Limitations:
    Every triangle is ordered by the depth of a single vertex (its first
    one), with one global sort. That is only reliable for a convex shape
    seen from outside, such as the icosphere, where faces never overlap in
    an order-dependent way. Non-convex or interpenetrating geometry will
    show sorting artifacts.
"""

import logging
import math
from typing import List, NamedTuple, Optional, Tuple

from .config import RenderConfig
from .geometry_utils.transforms import project_points, to_viewport, transform_points

logger = logging.getLogger(__name__)


class TransformedTriangle(NamedTuple):
    """A triangle projected to surface pixels for one frame."""

    points: Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]
    depth: float


def project_triangles(triangles, matrix, config: RenderConfig):
    """
    Transform and project triangles for one frame.

    Args:
        triangles: Tensor of shape [F, 3, 3]
        matrix: 4x4 transform from build_transform
        config: Render settings (viewport size, scale, w_epsilon)

    Returns:
        visible: List of TransformedTriangle, in input order, whose depth
            is the pre-divide z of the first vertex
        skipped: Number of triangles dropped because a vertex had |w| ~ 0
    """
    homogeneous = transform_points(triangles, matrix)  # [F, 3, 4]
    xy, depth, valid = project_points(homogeneous, epsilon=config.w_epsilon)
    screen = to_viewport(xy, config.scale, config.width, config.height)

    keep = valid.all(dim=-1)
    visible = [
        TransformedTriangle(
            points=tuple(tuple(point) for point in corners),
            depth=first_depth,
        )
        for corners, first_depth in zip(
            screen[keep].tolist(), depth[keep][:, 0].tolist()
        )
    ]
    skipped = int((~keep).sum().item())
    return visible, skipped


def sort_by_depth(triangles: List[TransformedTriangle]) -> List[TransformedTriangle]:
    """Farthest first. Stable: equal depths keep their input order."""
    return sorted(triangles, key=lambda triangle: triangle.depth, reverse=True)


class PainterRenderer:
    """Issues the draw calls for one frame of the icosphere view."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config if config is not None else RenderConfig()

    def draw_triangle(self, surface, triangle: TransformedTriangle):
        (x0, y0), (x1, y1), (x2, y2) = triangle.points
        surface.begin_path()
        surface.move_to(x0, y0)
        surface.line_to(x1, y1)
        surface.line_to(x2, y2)
        surface.close_path()
        surface.fill(self.config.fill_color)
        surface.stroke(self.config.stroke_color, self.config.line_width)

    def draw_reference_circle(self, surface):
        surface.begin_path()
        surface.arc(
            self.config.width / 2,
            self.config.height / 2,
            self.config.circle_radius,
            0.0,
            2 * math.pi,
        )
        surface.stroke(self.config.reference_color, self.config.line_width)

    def draw(self, surface, triangles: List[TransformedTriangle]):
        """
        Paint triangles back to front, then the reference circle.

        Args:
            surface: DrawingSurface to draw on
            triangles: Projected triangles in any order

        Returns:
            The triangles in the order they were painted
        """
        ordered = sort_by_depth(triangles)
        for triangle in ordered:
            self.draw_triangle(surface, triangle)
        self.draw_reference_circle(surface)
        return ordered
