"""
Visualization utilities for rendering Hough lines.

This module provides:
    • recolor_edges(edges, edge_color, background_color)
    • draw_polar_lines(img, lines, color, thickness)

It is used by:
    - visualization.save_outputs
"""

import cv2
import numpy as np
from typing import List, Tuple
from models.polar_line import PolarLine


# ---------------------------------------------------------------------
#  Edge map → 3-channel image
# ---------------------------------------------------------------------

def recolor_edges(
    edges: np.ndarray,
    edge_color: Tuple[int, int, int] = (255, 255, 255),
    background_color: Tuple[int, int, int] = (0, 0, 0)
):
    """
    Maps every non-zero edge pixel to edge_color and everything else to
    background_color, returning a new BGR image.
    """
    h, w = edges.shape[:2]
    image = np.empty((h, w, 3), dtype=np.uint8)
    image[:] = background_color
    image[edges > 0] = edge_color
    return image


# ---------------------------------------------------------------------
#  Draw infinite polar lines across the whole image
# ---------------------------------------------------------------------

def draw_polar_lines(
    image,
    lines: List[PolarLine],
    color: Tuple[int, int, int] = (0, 255, 0),
    thickness: int = 1
):
    """
    Draws each PolarLine from border to border.

    Args:
        image: BGR numpy array (modified in-place)
        lines: list of PolarLine objects
        color: (B, G, R)
        thickness: pixel width
    """
    h, w = image.shape[:2]
    # Long enough to cross the image from any foot point cv2.line may clip
    length = 2 * (h + w)

    for ln in lines:
        p1, p2 = ln.endpoints(length)
        cv2.line(image, p1, p2, color, thickness)

    return image
