"""
Reference ellipsoids and geodetic datums.

Flattening f = (a - b) / a; at least one of each ellipsoid's parameters is
derived from its defining constants. Datum Helmert parameters are carried for
reference only - no calculation in geomeasure transforms between datums.
"""

__all__ = [
    'DATUMS', 'ELLIPSOIDS', 'WGS84', 'Datum', 'Ellipsoid', 'HelmertTransform',
    'get_datum', 'get_ellipsoid',
]

import math
from types import MappingProxyType
from typing import Mapping, NamedTuple


class Ellipsoid:
    """
    Semi-major axis a (meters), semi-minor axis b (meters) and flattening f.

    Immutable. f must agree with (a - b) / a.
    """

    __slots__ = ('_a', '_b', '_f')

    def __init__(self, a: float, b: float, f: float):
        if not math.isclose(f, (a - b) / a, rel_tol=1e-5):
            raise ValueError(f'Flattening {f} is inconsistent with a={a}, b={b}')

        object.__setattr__(self, '_a', float(a))
        object.__setattr__(self, '_b', float(b))
        object.__setattr__(self, '_f', float(f))

    def __setattr__(self, key, value):
        raise AttributeError('Ellipsoid is immutable')

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (self._a, self._b, self._f) == (other._a, other._b, other._f)

    def __hash__(self):
        return hash((self._a, self._b, self._f))

    def __repr__(self):
        return f'<Ellipsoid(a={self._a}, b={self._b}, f=1/{1 / self._f:.9f})>'

    def __reduce__(self):
        return Ellipsoid, (self._a, self._b, self._f)

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def f(self) -> float:
        return self._f

    @property
    def second_eccentricity_sq(self) -> float:
        """(a² - b²) / b², the factor applied to cos²α to obtain u²"""
        return (self._a ** 2 - self._b ** 2) / self._b ** 2


class HelmertTransform(NamedTuple):
    """Seven-parameter transform: translations in meters, rotations in arc-seconds, scale in ppm"""
    tx: float = 0.0
    ty: float = 0.0
    tz: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0
    s: float = 0.0


class Datum(NamedTuple):
    ellipsoid: Ellipsoid
    transform: HelmertTransform = HelmertTransform()


ELLIPSOIDS: Mapping[str, Ellipsoid] = MappingProxyType({
    'WGS84': Ellipsoid(6378137.0, 6356752.314245, 1 / 298.257223563),
    'GRS80': Ellipsoid(6378137.0, 6356752.314140, 1 / 298.257222101),
    'Airy1830': Ellipsoid(6377563.396, 6356256.909, 1 / 299.3249646),
    'AiryModified': Ellipsoid(6377340.189, 6356034.448, 1 / 299.3249646),
    'Bessel1841': Ellipsoid(6377397.155, 6356078.962818, 1 / 299.1528128),
    'Clarke1866': Ellipsoid(6378206.4, 6356583.8, 1 / 294.978698214),
    'Intl1924': Ellipsoid(6378388.0, 6356911.946, 1 / 297),  # aka Hayford
    'WGS72': Ellipsoid(6378135.0, 6356750.5, 1 / 298.26),
})

WGS84 = ELLIPSOIDS['WGS84']

DATUMS: Mapping[str, Datum] = MappingProxyType({
    'WGS84': Datum(ELLIPSOIDS['WGS84']),
    # (2009); functionally equivalent to WGS84
    'NAD83': Datum(
        ELLIPSOIDS['GRS80'],
        HelmertTransform(1.004, -1.910, -0.515, 0.0267, 0.00034, 0.011, -0.0015)
    ),
    'OSGB36': Datum(
        ELLIPSOIDS['Airy1830'],
        HelmertTransform(-446.448, 125.157, -542.060, -0.1502, -0.2470, -0.8421, 20.4894)
    ),
    'ED50': Datum(
        ELLIPSOIDS['Intl1924'],
        HelmertTransform(89.5, 93.8, 123.1, 0.0, 0.0, 0.156, -1.2)
    ),
    'Irl1975': Datum(
        ELLIPSOIDS['AiryModified'],
        HelmertTransform(-482.530, 130.596, -564.557, -1.042, -0.214, -0.631, -8.150)
    ),
    'TokyoJapan': Datum(
        ELLIPSOIDS['Bessel1841'],
        HelmertTransform(148, -507, -685, 0, 0, 0, 0)
    ),
    'NAD27': Datum(
        ELLIPSOIDS['Clarke1866'],
        HelmertTransform(8, -160, -176, 0, 0, 0, 0)
    ),
    'WGS72': Datum(
        ELLIPSOIDS['WGS72'],
        HelmertTransform(0, 0, -4.5, 0, 0, 0.554, -0.22)
    ),
})


def get_ellipsoid(name: str) -> Ellipsoid:
    """
    Look up a reference ellipsoid by name, e.g. 'GRS80'

    Args:
        name:
            The catalog name of the ellipsoid

    Returns:
        Ellipsoid
    """
    if name not in ELLIPSOIDS:
        raise KeyError(f"Unknown ellipsoid '{name}'. Options: {list(ELLIPSOIDS.keys())}")

    return ELLIPSOIDS[name]


def get_datum(name: str) -> Datum:
    """Look up a geodetic datum by name, e.g. 'OSGB36'"""
    if name not in DATUMS:
        raise KeyError(f"Unknown datum '{name}'. Options: {list(DATUMS.keys())}")

    return DATUMS[name]
