"""
Tests for depth sorting and draw-call generation.
"""

import math

import torch

from icosphere_painter.config import RenderConfig
from icosphere_painter.geometry_utils.transforms import build_transform
from icosphere_painter.painter import (
    PainterRenderer,
    TransformedTriangle,
    project_triangles,
    sort_by_depth,
)
from icosphere_painter.surfaces import RecordingSurface

TRIANGLE_OPS = [
    "begin_path",
    "move_to",
    "line_to",
    "line_to",
    "close_path",
    "fill",
    "stroke",
]
CIRCLE_OPS = ["begin_path", "arc", "stroke"]


def make_triangle(tag, depth):
    """Triangle whose first x coordinate identifies it."""
    return TransformedTriangle(
        points=((float(tag), 0.0), (1.0, 1.0), (0.0, 1.0)), depth=depth
    )


def test_sort_descending():
    triangles = [make_triangle(i, d) for i, d in enumerate([3, 1, 2])]
    assert [t.depth for t in sort_by_depth(triangles)] == [3, 2, 1]


def test_sort_is_stable():
    triangles = [
        make_triangle(0, 1.0),
        make_triangle(1, 5.0),
        make_triangle(2, 1.0),
        make_triangle(3, 5.0),
    ]
    ordered = sort_by_depth(triangles)
    assert [t.points[0][0] for t in ordered] == [1.0, 3.0, 0.0, 2.0]


def test_draw_back_to_front_then_circle():
    surface = RecordingSurface()
    renderer = PainterRenderer()
    triangles = [make_triangle(0, -0.5), make_triangle(1, 0.9), make_triangle(2, 0.1)]

    ordered = renderer.draw(surface, triangles)

    assert surface.ops() == TRIANGLE_OPS * 3 + CIRCLE_OPS
    first_points = [c.args[0] for c in surface.commands if c.op == "move_to"]
    assert first_points == [1.0, 2.0, 0.0], "farthest triangle must be painted first"
    assert [t.depth for t in ordered] == [0.9, 0.1, -0.5]


def test_draw_styles_come_from_config():
    config = RenderConfig(fill_color="red", stroke_color="blue", line_width=2.0)
    surface = RecordingSurface()
    PainterRenderer(config).draw(surface, [make_triangle(0, 0.0)])

    fills = [c.args for c in surface.commands if c.op == "fill"]
    strokes = [c.args for c in surface.commands if c.op == "stroke"]
    assert fills == [("red",)]
    assert strokes[0] == ("blue", 2.0)


def test_empty_input_draws_only_reference_circle():
    surface = RecordingSurface()
    PainterRenderer().draw(surface, [])
    assert surface.ops() == CIRCLE_OPS

    arc = surface.commands[1]
    assert arc.args == (300.0, 300.0, 250.0, 0.0, 2 * math.pi)


def test_reference_circle_traces_sphere_rim():
    config = RenderConfig()
    # (1, 0, 0) sits on the rim at z = 0, where w = 1
    rim = torch.tensor([[[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [-1.0, 0.0, 0.0]]])
    visible, _ = project_triangles(
        rim.double(), build_transform(0, 0, 0, config.perspective), config
    )
    x, y = visible[0].points[0]
    radius = math.hypot(x - config.width / 2, y - config.height / 2)

    surface = RecordingSurface()
    PainterRenderer(config).draw(surface, [])
    assert surface.commands[1].args[2] == radius


def test_reference_radius_override():
    surface = RecordingSurface()
    PainterRenderer(RenderConfig(reference_radius=200.0)).draw(surface, [])
    assert surface.commands[1].args[2] == 200.0


def test_project_triangles_keeps_first_vertex_depth():
    config = RenderConfig()
    triangles = torch.tensor(
        [
            [[0.0, 0.0, 1.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]],
            [[0.0, 0.0, -1.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]],
        ],
        dtype=torch.float64,
    )
    visible, skipped = project_triangles(triangles, build_transform(0, 0, 0, 0.1), config)

    assert skipped == 0
    assert [t.depth for t in visible] == [1.0, -1.0]
    # First corner of the first triangle is (0, 0, 1): the surface centre
    assert visible[0].points[0] == (300.0, 300.0)
    # (1, 0, 0) has w = 1, so it lands one scale unit to the right
    assert visible[0].points[1] == (550.0, 300.0)


def test_project_triangles_skips_degenerate_w():
    config = RenderConfig(perspective=1.0)
    triangles = torch.tensor(
        [
            [[0.0, 0.0, -1.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]],
            [[0.0, 0.0, 1.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]],
        ],
        dtype=torch.float64,
    )
    matrix = build_transform(0, 0, 0, config.perspective)
    visible, skipped = project_triangles(triangles, matrix, config)

    assert skipped == 1
    assert len(visible) == 1
    assert visible[0].depth == 1.0


if __name__ == "__main__":
    test_sort_descending()
    test_sort_is_stable()
    test_draw_back_to_front_then_circle()
    print("All painter tests passed!")
