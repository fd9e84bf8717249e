from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Tile:
    """
    A square window of the source image.

    (x, y) is the top-left pixel; (row, col) are the window's grid indices
    from the sliding-window iterator and are what output files are named by.
    """

    x: int
    y: int
    width: int
    height: int
    row: int
    col: int

    @property
    def bounds(self):
        """(x0, y0, x1, y1) with x1/y1 exclusive."""
        return self.x, self.y, self.x + self.width, self.y + self.height


@dataclass
class AngleCluster:
    """
    A run of sorted angles merged onto one seed angle.
    """

    seed: int
    count: int = 1


@dataclass
class TileVerdict:
    """
    Positive result for one tile.
    """

    tile: Tile
    median_angle: float
    probability: int
    dominant_angle: int
    output_path: Optional[str] = None

    def __repr__(self):
        return (
            f"TileVerdict(row={self.tile.row}, col={self.tile.col}, "
            f"prob={self.probability}, median={self.median_angle}, "
            f"dominant={self.dominant_angle})"
        )
