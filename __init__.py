"""
Barcode Tile Scanner Package

Slides an overlapping window across a large grayscale image and scores
each window for barcode-like structure:

- Sliding-window tiling
- Edge detection (Canny) & line detection (Hough)
- Angle clustering, median angle & barcode probability
- Rotated renders of accepted tiles
"""
__all__ = [
    "config",
    "main",
    "detectors",
    "models",
    "utils",
    "visualization",
]
