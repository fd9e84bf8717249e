"""
Utility Functions

Provides angle clustering, sliding-window iteration and image I/O
utilities used across detectors.
"""

from .clustering import (
    merge_angle_clusters,
    dominant_cluster,
    barcode_probability,
    vector_median,
)
from .windowing import window_positions, iter_windows, extract_tile
from .image_io import (
    ImageLoadError,
    ImageSaveError,
    load_grayscale_image,
    ensure_output_dir,
    save_image,
    tile_output_path,
)

__all__ = [
    "merge_angle_clusters",
    "dominant_cluster",
    "barcode_probability",
    "vector_median",
    "window_positions",
    "iter_windows",
    "extract_tile",
    "ImageLoadError",
    "ImageSaveError",
    "load_grayscale_image",
    "ensure_output_dir",
    "save_image",
    "tile_output_path",
]
