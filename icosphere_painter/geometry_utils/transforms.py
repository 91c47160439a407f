"""
Transformation utilities implemented in pure PyTorch

This module builds 4x4 homogeneous transforms from three rotation angles and
a perspective coefficient, and applies them to points. Matrices act on
column vectors: p' = M @ p.
"""

import math
from typing import Optional

import torch

from .points import Point2, Point3, Point4

# |w| at or below this marks a point on the perspective plane
W_EPSILON = 1e-9


def rotation_matrix_x(degrees, dtype=torch.float64):
    """
    Create homogeneous rotation matrix for rotation around X axis.

    Args:
        degrees: Rotation angle in degrees (right-handed)

    Returns:
        4x4 rotation matrix
    """
    cos = math.cos(math.radians(degrees))
    sin = math.sin(math.radians(degrees))

    R = torch.eye(4, dtype=dtype)
    R[1, 1] = cos
    R[1, 2] = -sin
    R[2, 1] = sin
    R[2, 2] = cos

    return R


def rotation_matrix_y(degrees, dtype=torch.float64):
    """
    Create homogeneous rotation matrix for rotation around Y axis.

    Args:
        degrees: Rotation angle in degrees (right-handed)

    Returns:
        4x4 rotation matrix
    """
    cos = math.cos(math.radians(degrees))
    sin = math.sin(math.radians(degrees))

    R = torch.eye(4, dtype=dtype)
    R[0, 0] = cos
    R[0, 2] = sin
    R[2, 0] = -sin
    R[2, 2] = cos

    return R


def rotation_matrix_z(degrees, dtype=torch.float64):
    """
    Create homogeneous rotation matrix for rotation around Z axis.

    Args:
        degrees: Rotation angle in degrees (right-handed)

    Returns:
        4x4 rotation matrix
    """
    cos = math.cos(math.radians(degrees))
    sin = math.sin(math.radians(degrees))

    R = torch.eye(4, dtype=dtype)
    R[0, 0] = cos
    R[0, 1] = -sin
    R[1, 0] = sin
    R[1, 1] = cos

    return R


def translation_matrix(dx, dy, dz, dtype=torch.float64):
    """4x4 translation by (dx, dy, dz)."""
    T = torch.eye(4, dtype=dtype)
    T[0, 3] = dx
    T[1, 3] = dy
    T[2, 3] = dz
    return T


def perspective_matrix(perspective, dtype=torch.float64):
    """
    4x4 perspective term: w = 1 + perspective * z of the incoming point.

    A viewer at distance d along +z corresponds to perspective = -1 / d.
    """
    P = torch.eye(4, dtype=dtype)
    P[3, 2] = perspective
    return P


def build_transform(angle_x, angle_y, angle_z, perspective, dtype=torch.float64):
    """
    Compose the view rotation with a perspective term.

    Points are rotated around Y first, then around Z, then around X. The
    perspective coefficient is then written into the bottom row of the
    composed matrix (entry [3, 2]), giving w = 1 + perspective * z where z
    is the model-space z of the point.

    Args:
        angle_x: Rotation around X in degrees
        angle_y: Rotation around Y in degrees
        angle_z: Rotation around Z in degrees
        perspective: Perspective coefficient, 0 for orthographic

    Returns:
        4x4 transform matrix
    """
    M = (
        rotation_matrix_x(angle_x, dtype)
        @ rotation_matrix_z(angle_z, dtype)
        @ rotation_matrix_y(angle_y, dtype)
    )
    M[3, 2] = perspective
    return M


def transform_points(points, matrix):
    """
    Apply a homogeneous transform to 3D points.

    Args:
        points: Tensor of shape [..., 3]
        matrix: Tensor of shape [4, 4]

    Returns:
        Homogeneous points of shape [..., 4], before the perspective divide
    """
    ones = torch.ones_like(points[..., :1])
    homogeneous = torch.cat([points, ones], dim=-1)
    return torch.matmul(homogeneous, matrix.transpose(-1, -2))


def project_points(points, epsilon=W_EPSILON):
    """
    Perspective divide.

    Args:
        points: Homogeneous points of shape [..., 4]
        epsilon: Smallest usable |w|

    Returns:
        xy: [..., 2] x and y divided by w (left at the raw values where invalid)
        depth: [...] z before the divide
        valid: [...] bool, False where |w| <= epsilon
    """
    w = points[..., 3]
    valid = w.abs() > epsilon
    safe_w = torch.where(valid, w, torch.ones_like(w))
    xy = points[..., :2] / safe_w.unsqueeze(-1)
    return xy, points[..., 2], valid


def to_viewport(xy, scale, width, height):
    """Map scene units to surface pixels, origin at the surface centre."""
    center = torch.tensor([width / 2, height / 2], dtype=xy.dtype)
    return center + scale * xy


def transform_point(matrix, point: Point3) -> Point4:
    """Single-point version of transform_points."""
    out = transform_points(point.to_tensor(dtype=matrix.dtype), matrix)
    return Point4(*out.tolist())


def project_point(point: Point4, epsilon=W_EPSILON) -> Optional[Point2]:
    """
    Single-point perspective divide.

    Returns:
        The divided (x, y), or None when the point sits on the perspective
        plane and cannot be drawn this frame
    """
    if abs(point.w) <= epsilon:
        return None
    return Point2(point.x / point.w, point.y / point.w)
