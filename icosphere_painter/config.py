"""Render settings and view orientation, validated with pydantic."""

from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

Color = Union[str, Tuple[float, float, float, float]]


class RenderConfig(BaseModel):
    """Fixed startup configuration for the icosphere view."""

    model_config = ConfigDict(frozen=True)

    # Surface size in pixels
    width: int = Field(600, gt=0)
    height: int = Field(600, gt=0)
    # Pixels per scene unit (radius of the unit sphere on screen)
    scale: float = Field(250.0, gt=0)

    # Mesh
    subdivision_level: int = Field(3, ge=0, le=7)

    # Projection
    perspective: float = 0.1
    w_epsilon: float = Field(1e-9, gt=0)

    # Triangle style
    fill_color: Color = (200 / 255, 200 / 255, 220 / 255, 0.75)
    stroke_color: Color = "gray"
    line_width: float = Field(0.625, ge=0)

    # Reference circle, in pixels around the surface centre. None traces the
    # unit sphere outline (radius = scale)
    reference_radius: Optional[float] = Field(None, gt=0)
    reference_color: Color = "gray"

    # Orientation gizmo
    show_axes: bool = False
    axes_perspective: float = -1 / 3
    axes_offset: float = 0.2
    axes_length: float = Field(1.5, gt=0)
    axes_half_width: float = Field(0.025, gt=0)
    axes_color: Color = (20 / 255, 40 / 255, 40 / 255, 0.5)

    @property
    def circle_radius(self) -> float:
        if self.reference_radius is None:
            return self.scale
        return self.reference_radius


class RotationState(BaseModel):
    """Current view orientation, one angle in degrees per axis."""

    model_config = ConfigDict(frozen=True)

    angle_x: float = Field(0.0, ge=0, le=360)
    angle_y: float = Field(0.0, ge=0, le=360)
    angle_z: float = Field(0.0, ge=0, le=360)
