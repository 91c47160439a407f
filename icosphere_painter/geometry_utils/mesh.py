"""
Triangle mesh container

Stores a mesh as a "triangle soup": a tensor of shape [F, 3, 3] where every
face carries its own copy of its three corner points. Shared vertices are
shared by value, so no face can disturb another one.
"""

import torch


class TriangleMesh:
    """
    An immutable collection of triangles.

    The triangle tensor is copied on construction and on every read, so a
    mesh built at startup can be handed to any number of renders without
    being altered by them.
    """

    def __init__(self, triangles):
        """
        Args:
            triangles: Tensor of shape [F, 3, 3] (face, corner, xyz)
        """
        triangles = torch.as_tensor(triangles)
        if triangles.ndim != 3 or triangles.shape[1:] != (3, 3):
            raise ValueError(
                f"Triangles must have shape [F, 3, 3], got {tuple(triangles.shape)}"
            )
        self._triangles = triangles.detach().clone()

    def __len__(self):
        return self._triangles.shape[0]

    def __repr__(self):
        return f"TriangleMesh(num_triangles={len(self)}, dtype={self.dtype})"

    @property
    def dtype(self):
        return self._triangles.dtype

    @property
    def triangles(self):
        """Copy of the [F, 3, 3] triangle tensor."""
        return self._triangles.clone()

    def vertices(self):
        """All corner points, one row per face corner: [F * 3, 3]."""
        return self._triangles.reshape(-1, 3).clone()

    def to_indexed(self, decimals=9):
        """
        Deduplicate shared corners into an indexed mesh.

        Args:
            decimals: Rounding applied before comparing points

        Returns:
            vertices: Tensor of shape [V, 3]
            faces: Long tensor of shape [F, 3] indexing into vertices
        """
        corners = torch.round(self._triangles.reshape(-1, 3), decimals=decimals)
        vertices, inverse = torch.unique(corners, dim=0, return_inverse=True)
        faces = inverse.reshape(-1, 3)
        return vertices, faces

    def planar_area(self):
        """Total area of the flat triangles."""
        a, b, c = self._triangles.unbind(dim=1)
        cross = torch.linalg.cross(b - a, c - a, dim=-1)
        return 0.5 * torch.linalg.vector_norm(cross, dim=-1).sum().item()

    def max_radius_deviation(self):
        """Largest distance of any corner from the unit sphere."""
        norms = torch.linalg.vector_norm(self._triangles, dim=-1)
        return (norms - 1.0).abs().max().item()
