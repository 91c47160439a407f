"""
Icosphere view: wires the mesh, transform and painter together.

The control layer owns the angles and calls ``on_orientation_changed``
whenever they move; each call is one complete, synchronous frame.
"""

import logging

from .axes_overlay import draw_axes
from .config import RenderConfig, RotationState
from .geometry_utils.icosphere import generate_icosphere
from .geometry_utils.transforms import build_transform
from .painter import PainterRenderer, project_triangles

logger = logging.getLogger(__name__)


class IcosphereView:
    """Owns the icosphere mesh and renders it for any orientation."""

    def __init__(self, surface, config=None, mesh=None):
        """
        Args:
            surface: DrawingSurface receiving the draw calls
            config: RenderConfig, defaults used when None
            mesh: Prebuilt TriangleMesh; built from config.subdivision_level
                when None
        """
        self.surface = surface
        self.config = config if config is not None else RenderConfig()
        self.mesh = (
            mesh
            if mesh is not None
            else generate_icosphere(level=self.config.subdivision_level)
        )
        self.renderer = PainterRenderer(self.config)
        self.rotation = RotationState()

    def on_orientation_changed(self, angle_x, angle_y, angle_z):
        """Validate the new angles and render a frame with them."""
        self.rotation = RotationState(angle_x=angle_x, angle_y=angle_y, angle_z=angle_z)
        return self.render()

    def render(self):
        """
        Draw the current orientation onto the surface.

        Returns:
            The TransformedTriangles in painting order
        """
        config = self.config
        matrix = build_transform(
            self.rotation.angle_x,
            self.rotation.angle_y,
            self.rotation.angle_z,
            config.perspective,
            dtype=self.mesh.dtype,
        )
        triangles, skipped = project_triangles(self.mesh.triangles, matrix, config)

        self.surface.clear(config.width, config.height)
        ordered = self.renderer.draw(self.surface, triangles)
        if config.show_axes:
            draw_axes(self.surface, self.rotation, config)

        logger.debug(
            "Rendered frame at %s: drawn=%d, skipped=%d",
            self.rotation.model_dump(),
            len(ordered),
            skipped,
        )
        return ordered
