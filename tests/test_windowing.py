import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from models.tile import Tile
from utils.windowing import extract_tile, iter_windows, window_positions


def test_positions_for_2000_with_750_box():
    positions = window_positions(2000, 750)

    assert positions == [0, 375, 750, 1125]
    assert all(p <= 2000 - 750 - 1 for p in positions)
    assert all(p + 750 <= 2000 for p in positions)


def test_positions_clamp_to_far_edge():
    assert window_positions(1600, 750) == [0, 375, 750, 849]


def test_positions_odd_box_size_uses_floor_stride():
    assert window_positions(25, 5) == [0, 2, 4, 6, 8, 10, 12, 14, 16, 18]


@pytest.mark.parametrize("dimension", [500, 749, 750])
def test_positions_reject_small_dimensions(dimension):
    with pytest.raises(ValueError):
        window_positions(dimension, 750)


def test_positions_reject_degenerate_box():
    with pytest.raises(ValueError):
        window_positions(100, 1)


def test_iter_windows_grid_and_order():
    tiles = list(iter_windows(2000, 2000, 750))

    assert len(tiles) == 16
    assert tiles[0] == Tile(x=0, y=0, width=750, height=750, row=0, col=0)
    # column-major: y advances first
    assert tiles[1] == Tile(x=0, y=375, width=750, height=750, row=1, col=0)
    assert tiles[4] == Tile(x=375, y=0, width=750, height=750, row=0, col=1)
    assert tiles[-1].bounds == (1125, 1125, 1875, 1875)


def test_iter_windows_non_square_image():
    tiles = list(iter_windows(1600, 800, 750))

    assert len(tiles) == 4 * 2
    assert {t.y for t in tiles} == {0, 49}
    assert {t.x for t in tiles} == {0, 375, 750, 849}


def test_extract_tile_returns_independent_copy():
    image = np.arange(100, dtype=np.uint8).reshape(10, 10)
    tile = Tile(x=2, y=3, width=4, height=4, row=0, col=0)

    pixels = extract_tile(image, tile)

    assert pixels.shape == (4, 4)
    assert pixels[0, 0] == image[3, 2]
    assert not np.shares_memory(pixels, image)
    assert pixels.flags["C_CONTIGUOUS"]
    assert pixels.flags["OWNDATA"]

    pixels[:] = 0
    assert image[3, 2] == 32


def test_extract_tile_rejects_out_of_bounds():
    image = np.zeros((10, 10), dtype=np.uint8)

    with pytest.raises(ValueError):
        extract_tile(image, Tile(x=8, y=0, width=4, height=4, row=0, col=0))
