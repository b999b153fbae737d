"""Geodetic distances, bearings and planar polygon topology"""

from geomeasure._version import __version__  # noqa: F401
from geomeasure.utils.logging import LOGGER
from geomeasure.coordinates import Point
from geomeasure.ellipsoids import DATUMS, ELLIPSOIDS, WGS84, Datum, Ellipsoid, get_datum, get_ellipsoid
from geomeasure.exceptions import ConvergenceFailure, GeoMeasureError, InvalidDuration, TypeMismatch
from geomeasure.spherical import spherical_distance
from geomeasure.geodesic import geodesic_direct, geodesic_inverse
from geomeasure.speed import derive_speed
from geomeasure.topology import point_in_polygon, polygons_overlap, segments_intersect
from geomeasure.distance import distance

__all__ = [
    'ConvergenceFailure',
    'DATUMS',
    'Datum',
    'ELLIPSOIDS',
    'Ellipsoid',
    'GeoMeasureError',
    'InvalidDuration',
    'LOGGER',
    'Point',
    'TypeMismatch',
    'WGS84',
    'derive_speed',
    'distance',
    'geodesic_direct',
    'geodesic_inverse',
    'get_datum',
    'get_ellipsoid',
    'point_in_polygon',
    'polygons_overlap',
    'segments_intersect',
    'spherical_distance',
]
