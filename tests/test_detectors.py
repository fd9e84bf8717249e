import math
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from detectors.edge_detector import detect_edges
from detectors.line_detector import detect_lines, suppress_nearby_lines
from models.polar_line import PolarLine


def test_polar_line_from_hough_rounds_to_degrees():
    assert PolarLine.from_hough(10.0, 0.0).angle_in_degrees == 0
    assert PolarLine.from_hough(5.0, np.pi / 2).angle_in_degrees == 90
    assert PolarLine.from_hough(5.0, math.radians(44.6)).angle_in_degrees == 45


def test_polar_line_wraps_180_to_0():
    line = PolarLine.from_hough(-5.0, math.radians(179.7))

    assert line.angle_in_degrees == 0
    assert line.r == 5.0


def test_polar_line_repr_depends_only_on_geometry():
    assert repr(PolarLine(5, 90)) == "PolarLine(r=5.0, angle=90)"
    assert repr(PolarLine(5, 90)) == repr(PolarLine.from_hough(5.0, np.pi / 2))
    assert not hasattr(PolarLine, "id_num")


def test_polar_line_endpoints_lie_on_line():
    line = PolarLine(20, 30)
    for x, y in line.endpoints(100):
        assert abs(x * math.cos(line.theta) + y * math.sin(line.theta) - 20) < 1.5


def test_suppression_keeps_strongest_in_neighbourhood():
    strong = PolarLine(100, 90)
    close = PolarLine(103, 92)
    far = PolarLine(200, 90)

    kept = suppress_nearby_lines([strong, close, far], 8)

    assert kept == [strong, far]


def test_suppression_disabled_with_zero_radius():
    lines = [PolarLine(100, 90), PolarLine(100, 90)]
    assert suppress_nearby_lines(lines, 0) == lines


def test_detect_lines_horizontal_edge():
    edges = np.zeros((200, 200), dtype=np.uint8)
    edges[50, :] = 255

    lines = detect_lines(edges, 150, 8)

    assert lines
    assert any(ln.angle_in_degrees == 90 and abs(ln.r - 50) <= 1 for ln in lines)
    # everything else is suppressed around the one real line
    assert len(lines) == 1


def test_detect_lines_vertical_edge():
    edges = np.zeros((200, 200), dtype=np.uint8)
    edges[:, 30] = 255

    lines = detect_lines(edges, 150, 8)

    assert [ln.angle_in_degrees for ln in lines] == [0]


def test_detect_lines_blank_edge_map():
    edges = np.zeros((100, 100), dtype=np.uint8)
    assert detect_lines(edges, 10, 8) == []


def test_detect_edges_binary_same_shape():
    image = np.zeros((60, 80), dtype=np.uint8)
    image[20:40, 20:60] = 255

    edges = detect_edges(image, 1.0, 175.0)

    assert edges.shape == image.shape
    assert edges.dtype == np.uint8
    assert set(np.unique(edges)) <= {0, 255}
    assert edges.any()
    assert not edges[30, 40]


def test_detect_edges_flat_image_has_no_edges():
    image = np.full((50, 50), 128, dtype=np.uint8)
    assert not detect_edges(image, 1.0, 175.0).any()
