"""
Centralized rendering and output-saving utilities for the tile scanner.

This module provides:
    • rotate_image(...)
    • render_lines(...)
    • render_tile(...)
    • save_tile_render(...)
    • save_whole_image_outputs(...)

Uses draw modules to visualize and utils.image_io for filesystem handling.
"""

import math
import os

import cv2
import numpy as np
from typing import List

from config import (
    get_active_params,
    GREY_OUTPUT_NAME,
    CANNY_OUTPUT_NAME,
    LINES_OUTPUT_NAME,
)
from models.polar_line import PolarLine
from models.tile import Tile

from visualization.draw_lines import recolor_edges, draw_polar_lines
from utils.image_io import save_image, ensure_output_dir, tile_output_path


# -------------------------------------------------------------------------
#   Rendering steps
# -------------------------------------------------------------------------

def rotate_image(image: np.ndarray, theta: float, fill=(255, 255, 255)):
    """
    Rotates `image` clockwise by `theta` radians about (w // 2, h // 2),
    sampling nearest neighbours and filling uncovered pixels with `fill`.
    The output keeps the input size.
    """
    h, w = image.shape[:2]
    center = (float(w // 2), float(h // 2))

    # getRotationMatrix2D treats positive angles as counter-clockwise
    matrix = cv2.getRotationMatrix2D(center, -math.degrees(theta), 1.0)

    return cv2.warpAffine(
        image,
        matrix,
        (w, h),
        flags=cv2.INTER_NEAREST,
        borderMode=cv2.BORDER_CONSTANT,
        borderValue=fill,
    )


def render_lines(edges: np.ndarray, lines: List[PolarLine], params=None):
    """
    Lines in the accent color over a black/white copy of the edge map.
    """
    if params is None:
        params = get_active_params()

    vis = recolor_edges(edges, params["COLOR_EDGE"], params["COLOR_BACKGROUND"])
    draw_polar_lines(vis, lines, params["COLOR_LINE"])
    return vis


def render_tile(edges: np.ndarray, lines: List[PolarLine], median_angle: float, params=None):
    """
    Line overlay rotated by pi - radians(median_angle), which turns the
    median line direction upright.
    """
    if params is None:
        params = get_active_params()

    vis = render_lines(edges, lines, params)
    theta = math.pi - math.radians(median_angle)
    return rotate_image(vis, theta, params["COLOR_FILL"])


# -------------------------------------------------------------------------
#   Save functions (used by the tile analyzer and main.py)
# -------------------------------------------------------------------------

def save_tile_render(
    output_dir: str,
    tile: Tile,
    edges: np.ndarray,
    lines: List[PolarLine],
    median_angle: float,
    params=None
):
    """
    Renders one accepted tile and saves it as img_<row>_<col>.png.

    Returns the written path.
    """
    rotated = render_tile(edges, lines, median_angle, params)
    return save_image(tile_output_path(output_dir, tile.row, tile.col), rotated)


def save_whole_image_outputs(
    output_dir: str,
    image: np.ndarray,
    edges: np.ndarray,
    lines: List[PolarLine],
    params=None
):
    """
    Saves the full-image preview artifacts.

    Example output:
        grey.png
        canny.png
        lines.png
    """
    ensure_output_dir(output_dir)

    return [
        save_image(os.path.join(output_dir, GREY_OUTPUT_NAME), image),
        save_image(os.path.join(output_dir, CANNY_OUTPUT_NAME), edges),
        save_image(os.path.join(output_dir, LINES_OUTPUT_NAME), render_lines(edges, lines, params)),
    ]
