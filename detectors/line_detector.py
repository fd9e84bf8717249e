import cv2
import numpy as np

from models.polar_line import PolarLine


def suppress_nearby_lines(lines, suppression_radius):
    """
    Greedy non-maximum suppression in (r, angle) space.

    `lines` must be ordered strongest first, which is how cv2.HoughLines
    returns them. A line is dropped when a stronger line already kept lies
    within `suppression_radius` in both r (pixels) and angle (degrees).
    """
    if suppression_radius <= 0:
        return list(lines)

    kept = []
    for line in lines:
        if any(line.is_near(other, suppression_radius) for other in kept):
            continue
        kept.append(line)

    return kept


def detect_lines(edges, vote_threshold, suppression_radius):
    """
    Detects straight lines with the standard Hough transform at 1 pixel and
    1 degree resolution, wraps them as PolarLine objects and applies
    suppression_radius.

    Parameters
    ----------
    edges : np.ndarray
        Binary uint8 edge map (non-zero = edge).
    vote_threshold : int
        Minimum accumulator votes for a line to be reported.
    suppression_radius : int
        Neighbourhood in which only the strongest line is kept.

    Returns
    -------
    list[PolarLine]
        Possibly empty.
    """
    detected = cv2.HoughLines(edges, 1, np.pi / 180, int(vote_threshold))

    if detected is None:
        return []

    lines = [PolarLine.from_hough(rho, theta) for rho, theta in detected.reshape(-1, 2)]

    return suppress_nearby_lines(lines, suppression_radius)
