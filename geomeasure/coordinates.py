"""
Representation of a specific point on earth
"""

__all__ = ['Point']

import math
from typing import Tuple

from geomeasure.exceptions import TypeMismatch
from geomeasure.utils.functions import is_real_number, round_half_up
from geomeasure.utils.logging import warn_once


class Point:
    """
    An immutable latitude/longitude pair, in decimal degrees.

    Values outside [-90, 90] / [-180, 180] are accepted with a warning; the
    calculations will not fail on them but their results are not meaningful.
    """

    __slots__ = ('_lat', '_lon')

    def __init__(self, lat: float, lon: float):
        for name, value in (('lat', lat), ('lon', lon)):
            if not is_real_number(value):
                raise TypeMismatch(f'Point {name} must be a finite number, not {value!r}')

        if not -90 <= lat <= 90 or not -180 <= lon <= 180:
            warn_once(
                'Point (%s, %s) falls outside the valid latitude/longitude range; '
                'results for such points are undefined.',
                lat, lon
            )

        object.__setattr__(self, '_lat', float(lat))
        object.__setattr__(self, '_lon', float(lon))

    def __setattr__(self, key, value):
        raise AttributeError('Point is immutable')

    def __delattr__(self, item):
        raise AttributeError('Point is immutable')

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False

        return self._lat == other._lat and self._lon == other._lon

    def __hash__(self):
        return hash((self._lat, self._lon))

    def __repr__(self):
        return f'<Point({self._lat}, {self._lon})>'

    def __reduce__(self):
        return Point, (self._lat, self._lon)

    @property
    def lat(self) -> float:
        """Latitude, in degrees"""
        return self._lat

    @property
    def lon(self) -> float:
        """Longitude, in degrees"""
        return self._lon

    @property
    def radians(self) -> Tuple[float, float]:
        """The (latitude, longitude) pair converted to radians"""
        return math.radians(self._lat), math.radians(self._lon)

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a Point from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))

        Returns:
            Point
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return Point(convert(lat), convert(lon))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert this point to (latitude, longitude) tuples of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted values as ((degrees, minutes, seconds, hemisphere), (...))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self._lat), 'N' if self._lat >= 0 else 'S'),
            (*convert(self._lon), 'E' if self._lon >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple[float, float]
        """
        if reverse:
            return self._lon, self._lat

        return self._lat, self._lon
