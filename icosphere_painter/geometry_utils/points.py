"""
Point and vector primitives

Small value types for single points plus the batched normalization used by
the icosphere construction. Batched data lives in float64 torch tensors of
shape [..., 3].
"""

import math
from typing import NamedTuple

import torch

# Norms below this are treated as a zero vector
NORM_EPSILON = 1e-12


class NumericDegeneracyError(ValueError):
    """Raised when a vector is too short to be normalized."""


class Point2(NamedTuple):
    x: float
    y: float


class Point3(NamedTuple):
    x: float
    y: float
    z: float

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Point3":
        length = self.norm()
        if length < NORM_EPSILON:
            raise NumericDegeneracyError(
                f"Cannot normalize near-zero vector {tuple(self)} (norm={length:.3e})"
            )
        return Point3(self.x / length, self.y / length, self.z / length)

    def midpoint(self, other: "Point3") -> "Point3":
        """Arithmetic (chord) midpoint, not projected onto the sphere."""
        return Point3(
            (self.x + other.x) / 2, (self.y + other.y) / 2, (self.z + other.z) / 2
        )

    def to_tensor(self, dtype=torch.float64) -> torch.Tensor:
        return torch.tensor(tuple(self), dtype=dtype)


class Point4(NamedTuple):
    """Homogeneous point after a 4x4 transform, before the perspective divide."""

    x: float
    y: float
    z: float
    w: float


def normalize(vectors: torch.Tensor) -> torch.Tensor:
    """
    Scale vectors to unit length.

    Args:
        vectors: Tensor of shape [..., 3]

    Returns:
        Tensor of the same shape with every row of norm 1

    Raises:
        NumericDegeneracyError: if any vector has a norm below NORM_EPSILON
    """
    norms = torch.linalg.vector_norm(vectors, dim=-1, keepdim=True)
    degenerate = norms.squeeze(-1) < NORM_EPSILON
    if degenerate.any():
        bad = vectors[degenerate]
        raise NumericDegeneracyError(
            f"Cannot normalize {bad.shape[0]} near-zero vector(s), "
            f"first is {bad[0].tolist()}"
        )
    return vectors / norms
