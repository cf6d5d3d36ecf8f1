"""
Grid layout and compositing split into geometry and canvas modules.

The package exposes the most commonly used entry points directly.
"""

from __future__ import annotations

from . import canvas, layout
from .canvas import Canvas, cell_in_bounds, cell_origin, cell_overlaps, paste
from .layout import cell_position, compute_geometry, grid_side, iter_cells

__all__ = [
    "Canvas",
    "canvas",
    "cell_in_bounds",
    "cell_origin",
    "cell_overlaps",
    "cell_position",
    "compute_geometry",
    "grid_side",
    "iter_cells",
    "layout",
    "paste",
]
