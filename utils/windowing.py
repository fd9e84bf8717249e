"""
Sliding-window helpers for the tile scanner.

This module provides:
    • window_positions(dimension, box_size)
    • iter_windows(width, height, box_size)
    • extract_tile(image, tile)
"""

from typing import Iterator, List

import numpy as np

from models.tile import Tile


def window_positions(dimension: int, box_size: int) -> List[int]:
    """
    Top-left offsets along one axis with 50% overlap.

    There are (dimension // box_size) * 2 steps of box_size // 2 pixels;
    every offset is clamped to dimension - box_size - 1 so no window
    runs past the far edge.

    Example:
        window_positions(2000, 750) -> [0, 375, 750, 1125]
        window_positions(1600, 750) -> [0, 375, 750, 849]
    """
    if box_size < 2:
        raise ValueError(f"Box size must be at least 2 pixels, got {box_size}")
    if dimension <= box_size:
        raise ValueError(
            f"Image dimension {dimension} must be larger than the box size {box_size}"
        )

    stride = box_size // 2
    max_pos = dimension - box_size - 1
    steps = dimension // box_size * 2

    return [min(i * stride, max_pos) for i in range(steps)]


def iter_windows(width: int, height: int, box_size: int) -> Iterator[Tile]:
    """
    Yields every Tile of the scan, column by column.
    """
    xs = window_positions(width, box_size)
    ys = window_positions(height, box_size)

    for col, x in enumerate(xs):
        for row, y in enumerate(ys):
            yield Tile(x=x, y=y, width=box_size, height=box_size, row=row, col=col)


def extract_tile(image: np.ndarray, tile: Tile) -> np.ndarray:
    """
    Returns an independently owned, contiguous copy of the tile's pixels.
    """
    x0, y0, x1, y1 = tile.bounds
    h, w = image.shape[:2]
    if x0 < 0 or y0 < 0 or x1 > w or y1 > h:
        raise ValueError(f"{tile} lies outside a {w}x{h} image")

    return image[y0:y1, x0:x1].copy()
