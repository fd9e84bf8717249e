import argparse
import sys

from utils.image_io import (
    ImageLoadError,
    ImageSaveError,
    load_grayscale_image,
    ensure_output_dir,
)
from detectors.edge_detector import detect_edges
from detectors.line_detector import detect_lines
from detectors.tile_analyzer import scan_image

from visualization.save_outputs import save_whole_image_outputs

from config import WHOLE_IMAGE_MODE, get_active_params


def process_image(image, output_dir: str, params=None):
    """
    Runs the sliding-window scan over one grayscale image:
      1. Window iteration (50% overlap)
      2. Edge detection (Canny) per tile
      3. Line detection (Hough) per tile
      4. Median angle & barcode probability
      5. Render & save every accepted tile
    """
    if params is None:
        params = get_active_params(whole_image=False)

    h, w = image.shape[:2]
    print(f"\n=== Scanning {w}x{h} image with {params['BOX_SIZE']}px tiles ===")

    verdicts = scan_image(image, output_dir, params)

    if not verdicts:
        print("[WARN] No tile exceeded the barcode threshold.")
    for verdict in verdicts:
        print(f"[OK] Saved {verdict.output_path} (probability {verdict.probability})")

    return verdicts


def render_whole_image(image, output_dir: str, params=None):
    """
    Single full-image preview:
      1. Save the grayscale input
      2. Edge detection (Canny), save edge map
      3. Line detection (Hough), save lines over edges
    """
    if params is None:
        params = get_active_params(whole_image=True)

    edges = detect_edges(image, params["CANNY_LOW"], params["CANNY_HIGH"])
    lines = detect_lines(edges, params["VOTE_THRESHOLD"], params["SUPPRESSION_RADIUS"])
    if not lines:
        print("[WARN] No lines detected in the full image.")

    paths = save_whole_image_outputs(output_dir, image, edges, lines, params)
    print(f"[OK] Saved {len(lines)} lines to {paths[-1]}")
    return paths


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Scan a grayscale image for barcode-like tiles"
    )
    parser.add_argument("input_path", help="Image file to scan")
    parser.add_argument("output_dir", help="Directory for rendered tiles (created if missing)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main entry point:
      - Creates the output directory
      - Loads the input image as grayscale
      - Scans it tile by tile (or renders the whole-image preview)
    """
    args = _parse_args(argv)

    try:
        ensure_output_dir(args.output_dir)
        image = load_grayscale_image(args.input_path)

        if WHOLE_IMAGE_MODE:
            render_whole_image(image, args.output_dir)
        else:
            process_image(image, args.output_dir)
    except (ImageLoadError, ImageSaveError, OSError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    print("\n=== Scan complete ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
