"""
Icosphere generation utilities implemented in pure PyTorch

This module builds geodesic spheres by repeatedly splitting the faces of a
regular icosahedron and pushing the new vertices back onto the unit sphere.
"""

import logging
import math

import torch

from .mesh import TriangleMesh
from .points import normalize

logger = logging.getLogger(__name__)

# Icosahedron faces, as indices into ICOSAHEDRON_VERTICES
ICOSAHEDRON_FACES = (
    (0, 11, 5),
    (0, 5, 1),
    (0, 1, 7),
    (0, 7, 10),
    (0, 10, 11),
    (1, 5, 9),
    (5, 11, 4),
    (11, 10, 2),
    (10, 7, 6),
    (7, 1, 8),
    (3, 9, 4),
    (3, 4, 2),
    (3, 2, 6),
    (3, 6, 8),
    (3, 8, 9),
    (4, 9, 5),
    (2, 4, 11),
    (6, 2, 10),
    (8, 6, 7),
    (9, 8, 1),
)


def icosahedron_vertices(dtype=torch.float64):
    """
    The 12 vertices of a regular icosahedron, on the unit sphere.

    Returns:
        Tensor of shape [12, 3]
    """
    # Golden ratio for icosahedron construction
    phi = (1 + math.sqrt(5)) / 2

    vertices = torch.tensor(
        [
            [-1, phi, 0],
            [1, phi, 0],
            [-1, -phi, 0],
            [1, -phi, 0],
            [0, -1, phi],
            [0, 1, phi],
            [0, -1, -phi],
            [0, 1, -phi],
            [phi, 0, -1],
            [phi, 0, 1],
            [-phi, 0, -1],
            [-phi, 0, 1],
        ],
        dtype=dtype,
    )
    return normalize(vertices)


def icosahedron_triangles(dtype=torch.float64):
    """
    The 20 faces of the unit icosahedron as explicit triangles.

    Returns:
        Tensor of shape [20, 3, 3]
    """
    vertices = icosahedron_vertices(dtype=dtype)
    faces = torch.tensor(ICOSAHEDRON_FACES, dtype=torch.long)
    return vertices[faces]


def subdivide_triangles(triangles, spherical=True):
    """
    Split every triangle into 4 by inserting its edge midpoints.

    For a face (a, b, c) the children are (a, ab, ca), (ab, b, bc),
    (ca, bc, c) and the centre face (ab, bc, ca), emitted in that order and
    grouped by parent face. Midpoints are the plain average of the two
    endpoints; with ``spherical`` they are then scaled to unit length, which
    is what turns the refinement into a geodesic one.

    Args:
        triangles: Tensor of shape [F, 3, 3]
        spherical: Project the midpoints onto the unit sphere

    Returns:
        Tensor of shape [4 * F, 3, 3]

    Raises:
        NumericDegeneracyError: if a midpoint lands on the origin
    """
    a, b, c = triangles.unbind(dim=1)

    ab = (a + b) / 2.0
    bc = (b + c) / 2.0
    ca = (c + a) / 2.0
    if spherical:
        ab, bc, ca = normalize(ab), normalize(bc), normalize(ca)

    children = torch.stack(
        [
            torch.stack([a, ab, ca], dim=1),
            torch.stack([ab, b, bc], dim=1),
            torch.stack([ca, bc, c], dim=1),
            torch.stack([ab, bc, ca], dim=1),
        ],
        dim=1,
    )  # [F, 4, 3, 3]
    return children.reshape(-1, 3, 3)


class IcoSphere:
    """
    A geodesic sphere mesh at a fixed level of detail.

    The mesh is built once in the constructor and never rebuilt; callers
    share ``icosphere.mesh`` across renders.
    """

    def __init__(self, level=3, dtype=torch.float64):
        """
        Initialize the icosphere.

        Args:
            level: Subdivision level (0 = icosahedron, each level subdivides faces)
            dtype: Floating point type of the vertex data
        """
        if level < 0:
            raise ValueError(f"Subdivision level must be >= 0, got {level}")
        self.level = level

        triangles = icosahedron_triangles(dtype=dtype)
        for _ in range(level):
            triangles = subdivide_triangles(triangles)

        self.mesh = TriangleMesh(triangles)
        logger.info(
            "Built icosphere: level=%d, triangles=%d", level, len(self.mesh)
        )


def generate_icosphere(level=3, dtype=torch.float64):
    """
    Generate an icosphere mesh.

    Args:
        level: Subdivision level (0 = icosahedron, each level subdivides faces)
        dtype: Floating point type of the vertex data

    Returns:
        TriangleMesh with 20 * 4**level triangles
    """
    return IcoSphere(level=level, dtype=dtype).mesh
