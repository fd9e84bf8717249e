"""
Image I/O utilities for the barcode tile scanner.

This module provides:
    • load_grayscale_image(path)
    • ensure_output_dir(path)
    • save_image(path, image)
    • tile_output_path(output_dir, row, col)

Handles all filesystem interaction in a consistent, testable way.
Failures raise instead of returning None so the caller can abort the scan.
"""

import os

import cv2
import numpy as np

from config import TILE_OUTPUT_PATTERN


class ImageLoadError(IOError):
    """Input image is missing, not a regular file, or cannot be decoded."""


class ImageSaveError(IOError):
    """cv2.imwrite reported failure."""


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_grayscale_image(path: str) -> np.ndarray:
    """
    Loads an image from disk as a single-channel uint8 array.

    Raises:
        ImageLoadError: if `path` is not a regular file or decoding fails.
    """
    if not os.path.isfile(path):
        raise ImageLoadError(f"Input file does not exist: {path}")

    img = cv2.imread(path, cv2.IMREAD_GRAYSCALE)
    if img is None:
        raise ImageLoadError(f"Could not load image at {path}")

    return img


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.isdir(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise ImageSaveError(f"Failed to save image to {path}")
    return path


def tile_output_path(output_dir: str, row: int, col: int) -> str:
    """
    'out', 2, 1 → 'out/img_2_1.png'
    """
    return os.path.join(output_dir, TILE_OUTPUT_PATTERN.format(row=row, col=col))
