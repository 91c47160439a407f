"""
Render the icosphere at a few fixed orientations and save them as PNGs.

To run:
   python visualize_icosphere.py
"""

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

from icosphere_painter import IcosphereView, MatplotlibSurface, RenderConfig


def render_orientations(orientations, config, output_dir):
    """Render each (angle_x, angle_y, angle_z) to output_dir/icosphere_<x>_<y>_<z>.png"""
    output_dir = Path(output_dir)
    output_dir.mkdir(exist_ok=True)

    surface = MatplotlibSurface()
    view = IcosphereView(surface, config=config)
    print(f"Mesh ready: {len(view.mesh)} triangles")

    try:
        for angle_x, angle_y, angle_z in orientations:
            ordered = view.on_orientation_changed(angle_x, angle_y, angle_z)
            path = output_dir / f"icosphere_{angle_x}_{angle_y}_{angle_z}.png"
            surface.save(path)
            print(f"Saved {path} ({len(ordered)} triangles)")
    finally:
        surface.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    # Mesh and projection
    subdivision_level = 3  # 20 * 4**3 = 1280 triangles
    perspective = 0.1  # Perspective coefficient written into the matrix

    # Overlay
    show_axes = True  # Draw the orientation gizmo

    # Orientations to render, degrees around X, Y, Z
    orientations = [
        (0, 0, 0),
        (30, 45, 0),
        (90, 0, 0),
        (0, 90, 0),
        (45, 45, 45),
    ]

    config = RenderConfig(
        subdivision_level=subdivision_level,
        perspective=perspective,
        show_axes=show_axes,
    )
    render_orientations(orientations, config, Path(__file__).parent / "output")
