"""
Tile-by-tile barcode scan.

For every window produced by utils.windowing:
  1. copy the tile out of the source image
  2. Canny edges
  3. Hough lines
  4. sorted angles → median + (probability, dominant angle)
  5. probability > DECISION_THRESHOLD → render & save the tile

The edge detector, line detector and renderer are passed in as callables so
each tile only ever touches its own pixel copy.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import numpy as np

from config import get_active_params
from models.tile import Tile, TileVerdict
from detectors.edge_detector import detect_edges
from detectors.line_detector import detect_lines
from utils.clustering import barcode_probability, vector_median
from utils.windowing import iter_windows, extract_tile
from visualization.save_outputs import save_tile_render


def score_angles(angles, params=None):
    """
    angles: ascending list of line angles for one tile.

    Returns (median_angle, probability, dominant_angle).
    """
    if params is None:
        params = get_active_params()

    median = float(vector_median(angles, params["MEDIAN_CONVENTIONAL"]))
    probability, dominant = barcode_probability(angles, params)
    return median, probability, dominant


def analyze_tile(
    image: np.ndarray,
    tile: Tile,
    output_dir: Optional[str],
    params=None,
    edge_detector=detect_edges,
    line_detector=detect_lines,
    renderer=save_tile_render,
) -> Optional[TileVerdict]:
    """
    Runs the full per-tile pipeline.

    Returns a TileVerdict only when the tile is accepted; tiles with no
    lines, or with a probability at or below the threshold, return None.
    The renderer is skipped when output_dir is None.
    """
    if params is None:
        params = get_active_params()

    pixels = extract_tile(image, tile)

    edges = edge_detector(pixels, params["CANNY_LOW"], params["CANNY_HIGH"])
    lines = line_detector(edges, params["VOTE_THRESHOLD"], params["SUPPRESSION_RADIUS"])
    if not lines:
        return None

    angles = sorted(line.angle_in_degrees for line in lines)
    median, probability, dominant = score_angles(angles, params)

    if params["VERBOSE"]:
        print(
            f"[INFO] Tile ({tile.row}, {tile.col}) at ({tile.x}, {tile.y}): "
            f"barcode probability {probability}, most frequent angle {dominant}"
        )

    if probability <= params["DECISION_THRESHOLD"]:
        return None

    verdict = TileVerdict(
        tile=tile,
        median_angle=median,
        probability=probability,
        dominant_angle=dominant,
    )

    if output_dir is not None:
        verdict.output_path = renderer(output_dir, tile, edges, lines, median, params)

    return verdict


def scan_image(
    image: np.ndarray,
    output_dir: Optional[str],
    params=None,
    edge_detector=detect_edges,
    line_detector=detect_lines,
    renderer=save_tile_render,
) -> List[TileVerdict]:
    """
    Slides a BOX_SIZE window with 50% overlap over the whole image.

    Returns the accepted verdicts in scan order (column by column). With
    WORKERS > 1 tiles are analyzed on a thread pool; the order of the result
    and the output file names do not depend on completion order.
    """
    if params is None:
        params = get_active_params()

    h, w = image.shape[:2]
    tiles = list(iter_windows(w, h, params["BOX_SIZE"]))

    def run(tile):
        return analyze_tile(
            image,
            tile,
            output_dir,
            params,
            edge_detector=edge_detector,
            line_detector=line_detector,
            renderer=renderer,
        )

    workers = max(1, int(params["WORKERS"]))
    if workers == 1:
        results = [run(tile) for tile in tiles]
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(run, tiles))

    return [verdict for verdict in results if verdict is not None]
