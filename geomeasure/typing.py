"""Module for geomeasure type hinting"""

__all__ = ['Number', 'PointLike', 'PolygonLike']

from typing import Mapping, Sequence, Union

from geomeasure.coordinates import Point

Number = Union[int, float]

# Anything parsers.parse_point() understands
PointLike = Union[Point, Mapping[str, Number], Sequence[Number]]

# Anything parsers.parse_polygon() understands, including flat [lat, lon, lat, lon, ...]
PolygonLike = Union[Sequence[PointLike], Sequence[Number]]
