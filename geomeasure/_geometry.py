"""
Internal module defining the planar primitives behind geomeasure.topology.

Points are treated as planar (x, y) = (longitude, latitude) pairs; no
spherical correction is applied.
"""

from enum import IntEnum
from typing import List, Sequence, Tuple

import numpy as np

from geomeasure.coordinates import Point


class Orientation(IntEnum):
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTERCLOCKWISE = 1


def cross_product(p1: Point, p2: Point, p3: Point) -> float:
    """
    2D cross product (p2 - p1) x (p3 - p2), i.e. z-component of their 3D cross product.

    Args:
        p1: (Point)
            The first point

        p2: (Point)
            The second point, shared by both vectors

        p3: (Point)
            The third point

    Returns:
        a positive value if p1 -> p2 -> p3 makes a counter-clockwise turn, negative
        for a clockwise turn, and zero if the points are collinear.
    """
    return (
        (p2.lon - p1.lon) * (p3.lat - p2.lat) -
        (p2.lat - p1.lat) * (p3.lon - p2.lon)
    )


def orientation(p1: Point, p2: Point, p3: Point) -> Orientation:
    """Classifies the turn p1 -> p2 -> p3; only an exact zero is collinear"""
    val = cross_product(p1, p2, p3)
    if val == 0:
        return Orientation.COLLINEAR

    return Orientation.COUNTERCLOCKWISE if val > 0 else Orientation.CLOCKWISE


def is_point_on_segment(p: Point, q: Point, r: Point) -> bool:
    """
    Given three collinear points, tests whether q lies on the segment p-r
    (i.e. within its bounding box).
    """
    return (
        min(p.lon, r.lon) <= q.lon <= max(p.lon, r.lon) and
        min(p.lat, r.lat) <= q.lat <= max(p.lat, r.lat)
    )


def do_bounds_overlap(bounds1: Tuple[float, float], bounds2: Tuple[float, float]) -> bool:
    """
    Test whether two ranges (on the same axis) overlap

    Args:
        bounds1:
            A two-tuple of floats, representing the range of values across the axis
        bounds2:
            Another two-tuple of floats

    Returns:
        True if the ranges overlap, False if not
    """
    return max([bounds1[0], bounds2[0]]) <= min([bounds1[1], bounds2[1]])


def ring_bounds(ring: Sequence[Point]) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    The bounding box of a ring as ((min lon, max lon), (min lat, max lat))
    """
    arr = np.array([p.to_float(reverse=True) for p in ring])
    mins, maxs = arr.min(axis=0), arr.max(axis=0)
    return (float(mins[0]), float(maxs[0])), (float(mins[1]), float(maxs[1]))


def ring_edges(ring: Sequence[Point]) -> List[Tuple[Point, Point]]:
    """
    The edges of an open ring, including the implicit closing edge from the
    last vertex back to the first.
    """
    return list(zip(ring, [*ring[1:], ring[0]]))
