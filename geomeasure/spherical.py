"""
Great-circle calculations on a spherical earth (mean radius 6371 km).

Faster and simpler than the ellipsoidal solutions in geomeasure.geodesic and
within ~0.5% of them away from antipodal points.
"""

__all__ = [
    'SphericalResult', 'generate_points', 'haversine_bearing', 'haversine_destination',
    'haversine_distance', 'path_distance', 'spherical_distance',
]

import math
from typing import List, NamedTuple, Sequence

import numpy as np

from geomeasure._const import DEFAULT_POINT_SPACING_METERS, EARTH_RADIUS_KM, EARTH_RADIUS_METERS
from geomeasure.coordinates import Point
from geomeasure.typing import Number
from geomeasure.utils.functions import normalize_bearing, normalize_longitude, round_half_up
from geomeasure.utils.validation import validate_inputs


class SphericalResult(NamedTuple):
    distance_km: float
    bearing_deg: float


def _central_angle(p1: Point, p2: Point) -> float:
    """Haversine central angle, in radians"""
    lat1, lon1 = p1.radians
    lat2, lon2 = p2.radians

    d_lat, d_lon = lat2 - lat1, lon2 - lon1
    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2)

    # Rounding can push a a hair outside [0, 1] for antipodal or out-of-range points
    a = max(0.0, min(1.0, a))
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


@validate_inputs
def haversine_distance(p1: Point, p2: Point) -> float:
    """
    Calculate the great-circle distance between two points using the Haversine
    formula.

    Args:
        p1:
            A Point

        p2:
            A second Point

    Returns:
        (float) the distance in kilometers, rounded to 2 decimal places
    """
    return round_half_up(EARTH_RADIUS_KM * _central_angle(p1, p2), 2)


@validate_inputs
def haversine_bearing(p1: Point, p2: Point) -> float:
    """
    Calculate the initial bearing (forward azimuth) from p1 towards p2 along
    the great circle.

    Args:
        p1:
            The start Point

        p2:
            The finish Point

    Returns:
        (float) the bearing in degrees [0, 360)
    """
    lat1, lon1 = p1.radians
    lat2, lon2 = p2.radians
    d_lon = lon2 - lon1

    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)

    return normalize_bearing(math.degrees(math.atan2(y, x)))


def spherical_distance(p1: Point, p2: Point) -> SphericalResult:
    """
    Haversine distance (km, 2 decimal places) and initial bearing (degrees)
    between two points.
    """
    return SphericalResult(haversine_distance(p1, p2), haversine_bearing(p1, p2))


@validate_inputs
def haversine_destination(p1: Point, bearing_deg: Number, distance_meters: Number) -> Point:
    """
    Given a start location, a direction of travel (in degrees clockwise from
    North), and a distance of travel, returns the finish location on a
    spherical earth.

    Args:
        p1:
            The starting location

        bearing_deg:
            The heading, in degrees

        distance_meters:
            The amount of movement, in meters

    Returns:
        Point, with longitude in (-180, 180]
    """
    lat1, lon1 = p1.radians
    bearing = math.radians(bearing_deg)
    ang_dist = distance_meters / EARTH_RADIUS_METERS

    lat2 = math.asin(math.sin(lat1) * math.cos(ang_dist) +
                     math.cos(lat1) * math.sin(ang_dist) * math.cos(bearing))
    lon2 = lon1 + math.atan2(math.sin(bearing) * math.sin(ang_dist) * math.cos(lat1),
                             math.cos(ang_dist) - math.sin(lat1) * math.sin(lat2))

    return Point(math.degrees(lat2), normalize_longitude(math.degrees(lon2)))


@validate_inputs
def generate_points(
    p1: Point,
    p2: Point,
    spacing_meters: Number = DEFAULT_POINT_SPACING_METERS,
) -> List[Point]:
    """
    Generates intermediate points from p1 towards p2, one every spacing_meters,
    following the initial great-circle bearing from p1. Neither endpoint is
    included; no point is placed at or beyond the distance to p2.

    Args:
        p1:
            The start Point

        p2:
            The finish Point

        spacing_meters:
            (Default 100) Distance between consecutive generated points

    Returns:
        List[Point]
    """
    if spacing_meters <= 0:
        raise ValueError(f'Point spacing must be positive, not {spacing_meters}')

    total_meters = EARTH_RADIUS_METERS * _central_angle(p1, p2)
    bearing = haversine_bearing(p1, p2)

    return [
        haversine_destination(p1, bearing, float(offset))
        for offset in np.arange(spacing_meters, total_meters, spacing_meters)
    ]


def path_distance(points: Sequence[Point]) -> float:
    """
    Total great-circle length of an ordered path of points (e.g. a trip),
    summing the unrounded Haversine legs.

    Args:
        points:
            An ordered sequence of Points

    Returns:
        (float) the path length in kilometers, rounded to 2 decimal places
    """
    if len(points) < 2:
        return 0.0

    coords = np.radians(np.array([p.to_float() for p in points]))
    lat, lon = coords[:, 0], coords[:, 1]
    d_lat, d_lon = np.diff(lat), np.diff(lon)

    a = np.sin(d_lat / 2) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(d_lon / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    legs = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return round_half_up(float(EARTH_RADIUS_KM * legs.sum()), 2)
