"""
Planar topology tests between points, segments and polygons.

Latitude/longitude are used directly as planar coordinates, which is adequate
for shapes small enough that curvature can be ignored and which do not cross
the antimeridian.

Polygons are implicitly closed: the edge from the last vertex back to the
first is always part of the ring, and a ring supplied already closed (last
vertex equal to the first) is treated identically.
"""

__all__ = ['point_in_polygon', 'polygons_overlap', 'segments_intersect']

from typing import Sequence

from geomeasure._geometry import (
    Orientation, do_bounds_overlap, is_point_on_segment, orientation, ring_bounds, ring_edges
)
from geomeasure.coordinates import Point
from geomeasure.parsers import parse_point, parse_polygon
from geomeasure.typing import PointLike, PolygonLike


def _ring_contains(ring: Sequence[Point], point: Point) -> bool:
    """Ray casting along the longitude axis; each crossed edge flips parity"""
    inside = False
    j = len(ring) - 1
    for i, vertex in enumerate(ring):
        prev = ring[j]
        if (vertex.lat > point.lat) != (prev.lat > point.lat):
            crossing_lon = (
                (prev.lon - vertex.lon) * (point.lat - vertex.lat) / (prev.lat - vertex.lat)
                + vertex.lon
            )
            if point.lon < crossing_lon:
                inside = not inside
        j = i

    return inside


def _segments_intersect(a1: Point, a2: Point, b1: Point, b2: Point) -> bool:
    o1 = orientation(a1, a2, b1)
    o2 = orientation(a1, a2, b2)
    o3 = orientation(b1, b2, a1)
    o4 = orientation(b1, b2, a2)

    if o1 != o2 and o3 != o4:
        return True

    # Collinear touching / overlapping
    collinear = Orientation.COLLINEAR
    return (
        (o1 == collinear and is_point_on_segment(a1, b1, a2)) or
        (o2 == collinear and is_point_on_segment(a1, b2, a2)) or
        (o3 == collinear and is_point_on_segment(b1, a1, b2)) or
        (o4 == collinear and is_point_on_segment(b1, a2, b2))
    )


def point_in_polygon(point: PointLike, polygon: PolygonLike) -> bool:
    """
    Tests whether a point falls inside a polygon, using ray casting. O(n) in
    the number of vertices.

    Points lying exactly on an edge or vertex may be reported either way, and
    results for self-intersecting polygons are undefined.

    Args:
        point:
            A Point, or anything parsers.parse_point() accepts

        polygon:
            At least three vertices, or anything parsers.parse_polygon() accepts

    Returns:
        bool
    """
    return _ring_contains(parse_polygon(polygon), parse_point(point))


def segments_intersect(a1: PointLike, a2: PointLike, b1: PointLike, b2: PointLike) -> bool:
    """
    Tests whether segment a1-a2 intersects segment b1-b2, including segments
    that merely touch and collinear segments that overlap. Identical segments
    intersect.

    Args:
        a1, a2:
            Endpoints of the first segment

        b1, b2:
            Endpoints of the second segment

    Returns:
        bool
    """
    return _segments_intersect(
        parse_point(a1), parse_point(a2), parse_point(b1), parse_point(b2)
    )


def polygons_overlap(polygon_a: PolygonLike, polygon_b: PolygonLike) -> bool:
    """
    Tests whether two polygons share any area (or touch).

    Runs in two phases: any vertex of one polygon inside the other, then any
    pair of edges intersecting. The first catches full nesting, where no edges
    cross; the second catches interpenetrating shapes where no vertex of either
    lies inside the other. O(n*m).

    Args:
        polygon_a:
            The first polygon

        polygon_b:
            The second polygon

    Returns:
        bool
    """
    ring_a, ring_b = parse_polygon(polygon_a), parse_polygon(polygon_b)

    bounds_a, bounds_b = ring_bounds(ring_a), ring_bounds(ring_b)
    if not (
        do_bounds_overlap(bounds_a[0], bounds_b[0]) and
        do_bounds_overlap(bounds_a[1], bounds_b[1])
    ):
        return False

    if any(_ring_contains(ring_b, vertex) for vertex in ring_a):
        return True

    if any(_ring_contains(ring_a, vertex) for vertex in ring_b):
        return True

    return any(
        _segments_intersect(*edge_a, *edge_b)
        for edge_a in ring_edges(ring_a)
        for edge_b in ring_edges(ring_b)
    )
