"""
Detectors Package

Contains the detection modules used in the barcode tile scanner:
- Edge detection
- Line detection
- Per-tile analysis and the full sliding-window scan
"""

from .edge_detector import detect_edges
from .line_detector import detect_lines, suppress_nearby_lines
from .tile_analyzer import score_angles, analyze_tile, scan_image

__all__ = [
    "detect_edges",
    "detect_lines",
    "suppress_nearby_lines",
    "score_angles",
    "analyze_tile",
    "scan_image",
]
