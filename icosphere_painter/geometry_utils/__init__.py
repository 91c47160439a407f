"""
Geometry utilities for the icosphere renderer.

Point primitives, the icosphere mesh builder and the rotation/perspective
transforms, all implemented in pure PyTorch.
"""

from .icosphere import IcoSphere, generate_icosphere, subdivide_triangles
from .mesh import TriangleMesh
from .points import NumericDegeneracyError, Point2, Point3, Point4, normalize
from .transforms import build_transform, project_points, transform_points

__all__ = [
    "IcoSphere",
    "generate_icosphere",
    "subdivide_triangles",
    "TriangleMesh",
    "NumericDegeneracyError",
    "Point2",
    "Point3",
    "Point4",
    "normalize",
    "build_transform",
    "project_points",
    "transform_points",
]
