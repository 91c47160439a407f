"""
Tests for rotation composition, perspective and projection.
"""

import math

import pytest
import torch

from icosphere_painter.geometry_utils.points import Point2, Point3
from icosphere_painter.geometry_utils.transforms import (
    build_transform,
    project_point,
    project_points,
    rotation_matrix_x,
    rotation_matrix_y,
    rotation_matrix_z,
    to_viewport,
    transform_point,
    transform_points,
)


def assert_point_close(actual, expected, atol=1e-12):
    assert actual == pytest.approx(expected, abs=atol), f"{actual} != {expected}"


def test_zero_angles_without_perspective_is_identity():
    M = build_transform(0, 0, 0, 0.0)
    assert torch.allclose(M, torch.eye(4, dtype=torch.float64))


def test_right_handed_axes():
    x_axis = Point3(1.0, 0.0, 0.0)
    y_axis = Point3(0.0, 1.0, 0.0)
    z_axis = Point3(0.0, 0.0, 1.0)
    assert_point_close(tuple(transform_point(rotation_matrix_z(90), x_axis)), (0, 1, 0, 1))
    assert_point_close(tuple(transform_point(rotation_matrix_x(90), y_axis)), (0, 0, 1, 1))
    assert_point_close(tuple(transform_point(rotation_matrix_y(90), z_axis)), (1, 0, 0, 1))


def test_rotation_order_matters():
    point = Point3(1.0, 0.0, 0.0)
    about_x = transform_point(build_transform(90, 0, 0, 0.0), point)
    about_y = transform_point(build_transform(0, 90, 0, 0.0), point)
    assert_point_close(tuple(about_x), (1, 0, 0, 1))
    assert_point_close(tuple(about_y), (0, 0, -1, 1))
    assert tuple(about_x) != pytest.approx(tuple(about_y), abs=1e-6)


def test_composition_is_y_then_z_then_x():
    M = build_transform(90, 90, 90, 0.0)
    expected = rotation_matrix_x(90) @ rotation_matrix_z(90) @ rotation_matrix_y(90)
    assert torch.allclose(M, expected)

    # (1,0,0) -Y-> (0,0,-1) -Z-> (0,0,-1) -X-> (0,1,0)
    out = transform_point(M, Point3(1.0, 0.0, 0.0))
    assert_point_close(tuple(out), (0, 1, 0, 1))


def test_perspective_entry_uses_model_z():
    M = build_transform(0, 90, 0, 0.1)
    assert M[3, 2].item() == pytest.approx(0.1)
    # (0,0,1) rotates onto the x axis, w still follows the unrotated z
    out = transform_point(M, Point3(0.0, 0.0, 1.0))
    assert_point_close(tuple(out), (1, 0, 0, 1.1))


def test_rotation_preserves_length():
    torch.manual_seed(0)
    points = torch.randn(50, 3, dtype=torch.float64)
    M = build_transform(17, 123, 301, 0.0)
    rotated = transform_points(points, M)
    assert torch.allclose(rotated[:, 3], torch.ones(50, dtype=torch.float64))
    assert torch.allclose(
        torch.linalg.vector_norm(rotated[:, :3], dim=-1),
        torch.linalg.vector_norm(points, dim=-1),
    )


def test_front_point_projects_to_canvas_center():
    M = build_transform(0, 0, 0, 0.1)
    homogeneous = transform_point(M, Point3(0.0, 0.0, 1.0))
    assert homogeneous.w == pytest.approx(1.1)
    assert homogeneous.z == pytest.approx(1.0), "depth is z before the divide"

    xy = project_point(homogeneous)
    assert xy == Point2(0.0, 0.0)
    screen = to_viewport(torch.tensor([xy], dtype=torch.float64), 250.0, 600, 600)
    assert screen[0].tolist() == pytest.approx([300.0, 300.0])


def test_perspective_divide():
    M = build_transform(0, 0, 0, 0.5)
    xy, depth, valid = project_points(
        transform_points(torch.tensor([[1.0, 2.0, 2.0]], dtype=torch.float64), M)
    )
    # w = 1 + 0.5 * 2 = 2
    assert xy[0].tolist() == pytest.approx([0.5, 1.0])
    assert depth[0].item() == pytest.approx(2.0)
    assert valid[0].item()


def test_degenerate_w_is_flagged_not_raised():
    M = build_transform(0, 0, 0, 1.0)
    points = torch.tensor([[0.0, 0.0, -1.0], [0.0, 0.0, 1.0]], dtype=torch.float64)
    xy, depth, valid = project_points(transform_points(points, M))
    assert valid.tolist() == [False, True]
    assert torch.isfinite(xy).all()

    assert project_point(transform_point(M, Point3(0.0, 0.0, -1.0))) is None


def test_batched_shapes():
    triangles = torch.zeros(7, 3, 3, dtype=torch.float64)
    homogeneous = transform_points(triangles, build_transform(10, 20, 30, 0.1))
    assert homogeneous.shape == (7, 3, 4)
    xy, depth, valid = project_points(homogeneous)
    assert xy.shape == (7, 3, 2)
    assert depth.shape == (7, 3)
    assert valid.shape == (7, 3)


def test_full_turn_returns_home():
    M = build_transform(360, 360, 360, 0.0)
    assert torch.allclose(M, torch.eye(4, dtype=torch.float64), atol=1e-12)
    assert math.isclose(M[0, 0].item(), 1.0)
