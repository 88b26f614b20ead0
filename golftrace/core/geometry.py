"""Axis-aligned box math on center-based boxes."""

import math

from golftrace.core.models import Box


def intersection_area(a: Box, b: Box) -> float:
    """Area shared by two boxes, 0.0 when they are disjoint."""
    a_min_x, a_max_x = a.center_x - a.width / 2, a.center_x + a.width / 2
    a_min_y, a_max_y = a.center_y - a.height / 2, a.center_y + a.height / 2
    b_min_x, b_max_x = b.center_x - b.width / 2, b.center_x + b.width / 2
    b_min_y, b_max_y = b.center_y - b.height / 2, b.center_y + b.height / 2

    w = max(0.0, min(a_max_x, b_max_x) - max(a_min_x, b_min_x))
    h = max(0.0, min(a_max_y, b_max_y) - max(a_min_y, b_min_y))
    return w * h


def area(box: Box) -> float:
    return box.width * box.height


def union_area(a: Box, b: Box) -> float:
    return area(a) + area(b) - intersection_area(a, b)


def iou(a: Box, b: Box) -> float:
    """
    Intersection over union of two boxes.

    Returns NaN when both boxes have zero area (the union is empty).
    Callers that rank candidates should treat NaN as no overlap.
    """
    union = union_area(a, b)
    if union == 0:
        return math.nan
    return intersection_area(a, b) / union


def center_distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])
