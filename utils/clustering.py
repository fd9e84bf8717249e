"""
This module provides:
    • merge_angle_clusters()
    • dominant_cluster()
    • barcode_probability()
    • vector_median()

All functions expect their input sorted ascending.
"""

from typing import List, Sequence, Tuple

from config import get_active_params
from models.tile import AngleCluster


# -------------------------------------------------------------------------
#  SEQUENTIAL ANGLE MERGE
# -------------------------------------------------------------------------

def merge_angle_clusters(angles: Sequence[int], batch_size: int) -> List[AngleCluster]:
    """
    Single forward sweep over sorted angles.

    An angle within `batch_size` of the running seed is counted against that
    seed; otherwise it becomes the new seed. Merged angles are compared
    against the seed, not against their predecessor.

    Example (batch_size=5):
        [10, 13, 17, 40] -> [(10, 2), (17, 1), (40, 1)]
    """
    if not angles:
        raise ValueError("Cannot cluster an empty angle list")

    counts = {}
    last = angles[0]

    for angle in angles:
        if angle - last <= batch_size:
            angle = last
        last = angle
        counts[angle] = counts.get(angle, 0) + 1

    return [AngleCluster(seed, count) for seed, count in counts.items()]


def dominant_cluster(clusters: List[AngleCluster]) -> AngleCluster:
    """
    Highest count wins; ties go to the lowest seed angle.
    """
    return min(clusters, key=lambda c: (-c.count, c.seed))


# -------------------------------------------------------------------------
#  BARCODE PROBABILITY
# -------------------------------------------------------------------------

def barcode_probability(angles: Sequence[int], params=None) -> Tuple[int, int]:
    """
    Returns (probability, dominant_angle) for a sorted list of line angles.

    probability = highest_freq * 100 // (PROB_HIGH_THRESH - PROB_LOW_THRESH),
    clamped into [0, 100].
    """
    if params is None:
        params = get_active_params()

    divisor = params["PROB_HIGH_THRESH"] - params["PROB_LOW_THRESH"]
    if divisor <= 0:
        raise ValueError(
            f"PROB_HIGH_THRESH must exceed PROB_LOW_THRESH (got divisor {divisor})"
        )

    clusters = merge_angle_clusters(angles, params["BATCH_SIZE"])
    best = dominant_cluster(clusters)

    prob = best.count * 100 // divisor
    return min(100, max(prob, 0)), best.seed


# -------------------------------------------------------------------------
#  MEDIAN
# -------------------------------------------------------------------------

def vector_median(values: Sequence[int], conventional: bool = False):
    """
    Median of an ascending sequence.

    Odd length returns the middle element. For even length the legacy rule
    averages the upper-middle element with itself minus one:

        (v[n//2] - 1 + v[n//2]) // 2        e.g. [10, 20] -> 19

    With conventional=True the two middle elements are averaged instead:

        (v[n//2 - 1] + v[n//2]) / 2          e.g. [10, 20] -> 15.0
    """
    n = len(values)
    if n == 0:
        raise ValueError("Cannot take the median of an empty sequence")

    mid = n // 2
    if n % 2 == 1:
        return values[mid]

    if conventional:
        return (values[mid - 1] + values[mid]) / 2
    return (values[mid] - 1 + values[mid]) // 2
