"""
This module provides:
    - points_close
    - distance
    - midpoint
    - bounding_box
    - is_between          (hexagon test, with tolerance from config)
    - point_in_polygon    (even-odd ray casting)
    - point_on_polygon_edge
    - angle_between
"""

import math
from typing import Sequence, Tuple

import numpy as np

from linepuzzle.config import get_active_params

Point2D = Tuple[float, float]


# ----------------------------------------------------------------------
#  POINT COMPARISON (AUTO-TOLERANCE FROM CONFIG)
# ----------------------------------------------------------------------

def points_close(p: Point2D, q: Point2D, tolerance=None) -> bool:
    """
    Returns True if two points coincide within the position tolerance.
    With EXACT_MODE the tolerance is 0 and this is plain equality.
    """
    if tolerance is None:
        tolerance = get_active_params()["POSITION_TOLERANCE"]
    return abs(p[0] - q[0]) <= tolerance and abs(p[1] - q[1]) <= tolerance


def values_close(a: float, b: float, tolerance=None) -> bool:
    if tolerance is None:
        tolerance = get_active_params()["POSITION_TOLERANCE"]
    return abs(a - b) <= tolerance


def distance(p: Point2D, q: Point2D) -> float:
    return math.dist(p, q)


def midpoint(p: Point2D, q: Point2D) -> Point2D:
    return ((p[0] + q[0]) / 2.0, (p[1] + q[1]) / 2.0)


# ----------------------------------------------------------------------
#  BOUNDING BOX
# ----------------------------------------------------------------------

def bounding_box(points: Sequence[Point2D]) -> Tuple[Point2D, Point2D]:
    """
    Axis-aligned bounding box of a point set.

    Returns:
        (low, high) corners as (x, y) tuples
    """
    xy = np.asarray(points, dtype=float)
    if xy.size == 0:
        raise ValueError("Cannot compute the bounding box of an empty point set")

    low = xy.min(axis=0)
    high = xy.max(axis=0)
    return (float(low[0]), float(low[1])), (float(high[0]), float(high[1]))


# ----------------------------------------------------------------------
#  COLLINEARITY (HEXAGON TEST)
# ----------------------------------------------------------------------

def is_between(a: Point2D, p: Point2D, b: Point2D, tolerance=None) -> bool:
    """
    True if p lies on the segment a-b:

        dist(a, p) + dist(p, b) == dist(a, b)

    compared within COLLINEAR_TOLERANCE instead of exact float equality.
    """
    if tolerance is None:
        tolerance = get_active_params()["COLLINEAR_TOLERANCE"]
    detour = distance(a, p) + distance(p, b) - distance(a, b)
    return detour <= tolerance


# ----------------------------------------------------------------------
#  POLYGON MEMBERSHIP
# ----------------------------------------------------------------------

def point_in_polygon(p: Point2D, polygon: Sequence[Point2D]) -> bool:
    """
    Even-odd ray casting against a closed polygon.

    The polygon may repeat its first vertex at the end; the repeated edge
    has zero length and never toggles the result.

    Points exactly on an edge are not reliably classified; use
    point_on_polygon_edge() when that matters.
    """
    xy = np.asarray(polygon, dtype=float)
    if len(xy) < 3:
        return False

    px, py = p
    xi, yi = xy[:, 0], xy[:, 1]
    # previous vertex for every vertex (wraps around)
    xj, yj = np.roll(xi, 1), np.roll(yi, 1)

    straddles = ((yi < py) & (yj >= py)) | ((yj < py) & (yi >= py))
    if not np.any(straddles):
        return False

    # only straddling edges have yj != yi, so the division is safe there
    with np.errstate(divide="ignore", invalid="ignore"):
        cross_x = xi + (py - yi) / (yj - yi) * (xj - xi)

    crossings = np.count_nonzero(straddles & (cross_x < px))
    return bool(crossings % 2)


def point_on_polygon_edge(p: Point2D, polygon: Sequence[Point2D], tolerance=None) -> bool:
    """
    True if p lies on any edge of the polygon (within COLLINEAR_TOLERANCE).
    """
    if tolerance is None:
        tolerance = get_active_params()["COLLINEAR_TOLERANCE"]

    n = len(polygon)
    for i in range(n):
        a = polygon[i - 1]
        b = polygon[i]
        if is_between(a, p, b, tolerance):
            return True
    return False


# ----------------------------------------------------------------------
#  ANGLES
# ----------------------------------------------------------------------

def angle_between(v1: Point2D, v2: Point2D) -> float:
    """
    Unsigned angle in degrees between two vectors, in [0, 180].
    A zero-length vector gives 180 so it never wins a "most aligned" search.
    """
    n1 = math.hypot(*v1)
    n2 = math.hypot(*v2)
    if n1 == 0 or n2 == 0:
        return 180.0

    dot = v1[0] * v2[0] + v1[1] * v2[1]
    cross = v1[0] * v2[1] - v1[1] * v2[0]
    # exactly 0 or 180 for parallel vectors
    return math.degrees(math.atan2(abs(cross), dot))
