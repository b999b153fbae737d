"""
One-call distance calculation between two points.

Dispatches to the spherical (haversine) or ellipsoidal (vincenty) solution and
optionally derives speed over an elapsed time.
"""

__all__ = ['DistanceResult', 'distance']

from types import MappingProxyType
from typing import Literal, NamedTuple, Optional, Tuple

from geomeasure.conversion import DISTANCE_UNITS, convert_from_meters
from geomeasure.ellipsoids import WGS84, Ellipsoid
from geomeasure.exceptions import ConvergenceFailure, TypeMismatch
from geomeasure.geodesic import geodesic_inverse
from geomeasure.parsers import parse_point
from geomeasure.spherical import spherical_distance
from geomeasure.speed import SpeedResult, derive_speed
from geomeasure.typing import Number, PointLike
from geomeasure.utils.functions import round_half_up
from geomeasure.utils.logging import LOGGER


class DistanceResult(NamedTuple):
    """
    distance is expressed in `unit`; distance_km is always kilometers. speed
    is only present when an elapsed time was supplied.
    """
    distance: float
    unit: str
    method: str
    bearing_deg: float
    distance_km: float
    elapsed_seconds: Optional[float] = None
    speed: Optional[SpeedResult] = None


def _haversine(p1, p2, ellipsoid: Ellipsoid) -> Tuple[float, float]:  # pylint: disable=unused-argument
    result = spherical_distance(p1, p2)
    return result.distance_km, result.bearing_deg


def _vincenty(p1, p2, ellipsoid: Ellipsoid) -> Tuple[float, float]:
    result = geodesic_inverse(p1, p2, ellipsoid)
    return round_half_up(result.distance_meters / 1000, 6), result.initial_bearing_deg


_ALGORITHMS = MappingProxyType({
    'haversine': _haversine,
    'vincenty': _vincenty,
})


def distance(
    p1: PointLike,
    p2: PointLike,
    method: Literal['haversine', 'vincenty'] = 'haversine',
    unit: str = 'km',
    elapsed_seconds: Optional[Number] = None,
    ellipsoid: Ellipsoid = WGS84,
    fallback_to_haversine: bool = False,
) -> DistanceResult:
    """
    Calculate the distance and initial bearing between two points.

    Args:
        p1:
            The start point; a Point or anything parsers.parse_point() accepts

        p2:
            The finish point

        method: (str)
            (Default 'haversine') 'haversine' (spherical, km to 2 decimal places)
            or 'vincenty' (ellipsoidal, millimeter precision)

        unit: (str)
            (Default 'km') One of 'km', 'm', 'mi', 'nmi', 'ft', 'yd'

        elapsed_seconds:
            (Optional) Time taken to travel between the points; when given,
            the result carries speed and pace

        ellipsoid: (Ellipsoid)
            (Default WGS84) Reference ellipsoid for the vincenty method

        fallback_to_haversine: (bool)
            (Default False) If the vincenty method fails to converge, return
            the haversine result instead of raising ConvergenceFailure

    Returns:
        DistanceResult
    """
    for name, value in (('method', method), ('unit', unit)):
        if not isinstance(value, str):
            raise TypeMismatch(f'{name} must be a string, not {type(value).__name__}')

    if method not in _ALGORITHMS:
        raise ValueError(f"Unknown method '{method}'. Options: {list(_ALGORITHMS.keys())}")

    if unit.lower() not in DISTANCE_UNITS:
        raise ValueError(f"Unknown unit '{unit}'. Options: {list(DISTANCE_UNITS.keys())}")

    p1, p2 = parse_point(p1), parse_point(p2)
    try:
        distance_km, bearing = _ALGORITHMS[method](p1, p2, ellipsoid)
    except ConvergenceFailure:
        if not fallback_to_haversine:
            raise

        LOGGER.warning('Vincenty failed to converge for %s -> %s; using haversine', p1, p2)
        method = 'haversine'
        distance_km, bearing = _haversine(p1, p2, ellipsoid)

    value = distance_km if unit.lower() == 'km' else convert_from_meters(distance_km * 1000, unit)
    speed = None
    if elapsed_seconds is not None:
        speed = derive_speed(distance_km, elapsed_seconds)

    return DistanceResult(
        distance=value,
        unit=unit.lower(),
        method=method,
        bearing_deg=bearing,
        distance_km=distance_km,
        elapsed_seconds=elapsed_seconds,
        speed=speed,
    )
