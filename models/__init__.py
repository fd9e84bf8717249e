"""
Data Models

Defines the core data structures:
- PolarLine
- Tile
- AngleCluster
- TileVerdict
"""

from .polar_line import PolarLine
from .tile import Tile, AngleCluster, TileVerdict

__all__ = ["PolarLine", "Tile", "AngleCluster", "TileVerdict"]
