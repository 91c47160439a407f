"""
icosphere_painter: a geodesic sphere drawn with the painter's algorithm
"""

from .config import RenderConfig, RotationState
from .painter import PainterRenderer, TransformedTriangle
from .surfaces import DrawingSurface, MatplotlibSurface, RecordingSurface
from .view import IcosphereView

__all__ = [
    "RenderConfig",
    "RotationState",
    "PainterRenderer",
    "TransformedTriangle",
    "DrawingSurface",
    "MatplotlibSurface",
    "RecordingSurface",
    "IcosphereView",
]
