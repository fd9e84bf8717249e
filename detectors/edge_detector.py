import cv2
import numpy as np


def detect_edges(image_gray, low_threshold, high_threshold):
    """
    Canny edge map of a grayscale tile.

    Parameters
    ----------
    image_gray : np.ndarray
        Single-channel uint8 image.
    low_threshold, high_threshold : float
        Hysteresis thresholds passed straight to cv2.Canny.

    Returns
    -------
    np.ndarray
        uint8 map of the same shape, 255 on edges and 0 elsewhere.
    """
    if image_gray.ndim == 3:
        image_gray = cv2.cvtColor(image_gray, cv2.COLOR_BGR2GRAY)
    if image_gray.dtype != np.uint8:
        image_gray = image_gray.astype(np.uint8)

    return cv2.Canny(image_gray, low_threshold, high_threshold)
