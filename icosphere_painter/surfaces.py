"""
Drawing surfaces

A drawing surface is the only thing the renderer talks to. It follows the
usual 2D canvas path model: build a path with move_to/line_to/arc, then fill
and/or stroke it. Coordinates are pixels with the origin in the top-left
corner and y growing downwards.
"""

import math
from typing import Any, List, NamedTuple, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import PathPatch
from matplotlib.path import Path


class DrawingSurface:
    """Minimal vector-path drawing contract."""

    def clear(self, width, height):
        raise NotImplementedError

    def begin_path(self):
        raise NotImplementedError

    def move_to(self, x, y):
        raise NotImplementedError

    def line_to(self, x, y):
        raise NotImplementedError

    def close_path(self):
        raise NotImplementedError

    def arc(self, x, y, radius, start_angle, end_angle):
        raise NotImplementedError

    def fill(self, color):
        raise NotImplementedError

    def stroke(self, color, line_width):
        raise NotImplementedError


class DrawCommand(NamedTuple):
    op: str
    args: Tuple[Any, ...] = ()


class RecordingSurface(DrawingSurface):
    """Keeps every call as a DrawCommand, in call order."""

    def __init__(self):
        self.commands: List[DrawCommand] = []

    def _record(self, op, *args):
        self.commands.append(DrawCommand(op, args))

    def clear(self, width, height):
        self.commands = []
        self._record("clear", width, height)

    def begin_path(self):
        self._record("begin_path")

    def move_to(self, x, y):
        self._record("move_to", x, y)

    def line_to(self, x, y):
        self._record("line_to", x, y)

    def close_path(self):
        self._record("close_path")

    def arc(self, x, y, radius, start_angle, end_angle):
        self._record("arc", x, y, radius, start_angle, end_angle)

    def fill(self, color):
        self._record("fill", color)

    def stroke(self, color, line_width):
        self._record("stroke", color, line_width)

    def ops(self):
        """Just the operation names, handy for checking draw order."""
        return [command.op for command in self.commands]


class MatplotlibSurface(DrawingSurface):
    """
    Renders paths onto a matplotlib figure.

    Each fill or stroke becomes one PathPatch, added in call order so later
    patches paint over earlier ones.
    """

    # Segments used to approximate a full circle
    ARC_SEGMENTS = 128

    def __init__(self, dpi=100):
        self.dpi = dpi
        self.fig = None
        self.ax = None
        self._vertices = []
        self._codes = []
        self._subpath_start = None

    def clear(self, width, height):
        if self.fig is None:
            self.fig, self.ax = plt.subplots(
                figsize=(width / self.dpi, height / self.dpi), dpi=self.dpi
            )
            self.fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
        self.ax.cla()
        self.ax.set_xlim(0, width)
        # Flip y so it grows downwards like a canvas
        self.ax.set_ylim(height, 0)
        self.ax.set_aspect("equal")
        self.ax.axis("off")
        self.begin_path()

    def begin_path(self):
        self._vertices = []
        self._codes = []
        self._subpath_start = None

    def move_to(self, x, y):
        self._vertices.append((x, y))
        self._codes.append(Path.MOVETO)
        self._subpath_start = (x, y)

    def line_to(self, x, y):
        if self._subpath_start is None:
            self.move_to(x, y)
            return
        self._vertices.append((x, y))
        self._codes.append(Path.LINETO)

    def close_path(self):
        if self._subpath_start is None:
            return
        self._vertices.append(self._subpath_start)
        self._codes.append(Path.CLOSEPOLY)

    def arc(self, x, y, radius, start_angle, end_angle):
        sweep = abs(end_angle - start_angle)
        steps = max(2, int(math.ceil(self.ARC_SEGMENTS * sweep / (2 * math.pi))))
        for t in np.linspace(start_angle, end_angle, steps + 1):
            self.line_to(x + radius * math.cos(t), y + radius * math.sin(t))

    def _path(self):
        return Path(np.asarray(self._vertices, dtype=float), self._codes)

    def fill(self, color):
        if not self._vertices:
            return
        patch = PathPatch(self._path(), facecolor=color, edgecolor="none")
        self.ax.add_patch(patch)

    def stroke(self, color, line_width):
        if not self._vertices:
            return
        patch = PathPatch(
            self._path(), facecolor="none", edgecolor=color, linewidth=line_width
        )
        self.ax.add_patch(patch)

    def save(self, path):
        if self.fig is None:
            raise RuntimeError("Nothing to save: call clear() before save()")
        self.fig.savefig(path, dpi=self.dpi)

    def close(self):
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
