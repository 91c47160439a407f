"""
Orientation gizmo: three thin filled bars along the model X, Y and Z axes,
drawn with the view rotation and a strong perspective so it reads as 3D.
"""

import torch

from .config import RenderConfig, RotationState
from .geometry_utils.transforms import (
    build_transform,
    perspective_matrix,
    project_points,
    transform_points,
    translation_matrix,
)


def axis_quads(length, half_width, dtype=torch.float64):
    """
    Corner points of the three axis bars.

    Returns:
        Tensor of shape [3, 4, 3] (axis, corner, xyz), X then Y then Z
    """
    L, h = length, half_width
    return torch.tensor(
        [
            [[0, -h, 0], [L, -h, 0], [L, h, 0], [0, h, 0]],
            [[-h, 0, 0], [-h, L, 0], [h, L, 0], [h, 0, 0]],
            [[-h, 0, 0], [-h, 0, L], [h, 0, L], [h, 0, 0]],
        ],
        dtype=dtype,
    )


def draw_axes(surface, rotation: RotationState, config: RenderConfig):
    """
    Fill the three axis bars onto the surface.

    Returns:
        Number of bars drawn (bars touching the perspective plane are skipped)
    """
    # Rotate, shift the gizmo origin off the optical axis, then apply
    # perspective to the rotated and shifted z
    rotate = build_transform(
        rotation.angle_x, rotation.angle_y, rotation.angle_z, 0.0
    )
    shift = translation_matrix(-config.axes_offset, config.axes_offset, 0.0)
    matrix = perspective_matrix(config.axes_perspective) @ shift @ rotate
    quads = axis_quads(config.axes_length, config.axes_half_width)
    xy, _, valid = project_points(
        transform_points(quads, matrix), epsilon=config.w_epsilon
    )

    # Undo the shift on screen, so only the perspective skew remains
    offset = torch.tensor([config.axes_offset, -config.axes_offset], dtype=xy.dtype)
    center = torch.tensor([config.width / 2, config.height / 2], dtype=xy.dtype)
    screen = center + config.scale * (xy + offset)

    drawn = 0
    for corners, ok in zip(screen.tolist(), valid.all(dim=-1).tolist()):
        if not ok:
            continue
        surface.begin_path()
        surface.move_to(*corners[0])
        for x, y in corners[1:]:
            surface.line_to(x, y)
        surface.close_path()
        surface.fill(config.axes_color)
        drawn += 1
    return drawn
