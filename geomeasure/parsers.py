"""
Module for parsing caller-supplied shapes into geomeasure Points.

Accepted point shapes:
    - Point(lat, lon)
    - {'lat': .., 'lon': ..} or {'latitude': .., 'longitude': ..}
    - {'y': .., 'x': ..}, where y is the latitude
    - [lat, lon]

Accepted point sequences are lists of any of the above, or a flat list of
numbers [lat1, lon1, lat2, lon2, ...].
"""

__all__ = ['parse_point', 'parse_points', 'parse_polygon']

from typing import Any, List, Mapping, Sequence

import numpy as np

from geomeasure.coordinates import Point
from geomeasure.exceptions import TypeMismatch
from geomeasure.utils.functions import is_real_number
from geomeasure.utils.logging import LOGGER

_KEY_PAIRS = (
    ('lat', 'lon'),
    ('latitude', 'longitude'),
    ('y', 'x'),
)


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, (Sequence, np.ndarray)) and not isinstance(obj, (str, bytes))


def parse_point(obj: Any) -> Point:
    """
    Resolve a point-like object into a Point.

    Args:
        obj:
            A Point, a lat/lon (or y/x) mapping, or a [lat, lon] pair

    Raises:
        TypeMismatch: the object cannot be read as a point

    Returns:
        Point
    """
    if isinstance(obj, Point):
        return obj

    if isinstance(obj, Mapping):
        for lat_key, lon_key in _KEY_PAIRS:
            if lat_key in obj and lon_key in obj:
                return Point(obj[lat_key], obj[lon_key])

        raise TypeMismatch(
            f'Point mapping must contain lat/lon, latitude/longitude or y/x keys; got {list(obj)}'
        )

    if _is_sequence(obj):
        if len(obj) != 2:
            raise TypeMismatch(f'Point sequence must be [lat, lon], got {len(obj)} values')

        return Point(obj[0], obj[1])

    raise TypeMismatch(f'Cannot interpret {type(obj).__name__} as a point')


def parse_points(obj: Any) -> List[Point]:
    """
    Resolve an ordered sequence of point-like objects, or a flat sequence of
    numbers in [lat, lon, lat, lon, ...] order, into a list of Points.

    Args:
        obj:
            The sequence to parse

    Raises:
        TypeMismatch: the object cannot be read as a sequence of points

    Returns:
        List[Point]
    """
    if not _is_sequence(obj):
        raise TypeMismatch(f'Expected a sequence of points, got {type(obj).__name__}')

    if len(obj) and all(is_real_number(x) for x in obj):
        if len(obj) % 2:
            raise TypeMismatch(
                f'A flat coordinate sequence needs an even number of values, got {len(obj)}'
            )

        return [Point(obj[i], obj[i + 1]) for i in range(0, len(obj), 2)]

    return [parse_point(x) for x in obj]


def parse_polygon(obj: Any) -> List[Point]:
    """
    Resolve a polygon into its open ring of vertices. A trailing vertex equal
    to the first is dropped, since the closing edge is always implicit.

    Args:
        obj:
            Anything parse_points() accepts

    Raises:
        TypeMismatch: fewer than three distinct vertices

    Returns:
        List[Point]
    """
    ring = parse_points(obj)
    if len(ring) > 1 and ring[0] == ring[-1]:
        LOGGER.debug('Dropping duplicated closing vertex %s', ring[-1])
        ring = ring[:-1]

    if len(set(ring)) < 3:
        raise TypeMismatch(f'A polygon needs at least 3 distinct vertices, got {len(set(ring))}')

    return ring
