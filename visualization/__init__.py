"""
Visualization Tools

Provides drawing utilities for:
- Edge maps
- Hough lines
- Rotated tile renders and full-image previews
"""

from .draw_lines import recolor_edges, draw_polar_lines
from .save_outputs import (
    rotate_image,
    render_lines,
    render_tile,
    save_tile_render,
    save_whole_image_outputs,
)

__all__ = [
    "recolor_edges",
    "draw_polar_lines",
    "rotate_image",
    "render_lines",
    "render_tile",
    "save_tile_render",
    "save_whole_image_outputs",
]
