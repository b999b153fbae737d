"""Module for miscellaneous multi-use functions"""

__all__ = ['is_real_number', 'normalize_bearing', 'normalize_longitude', 'round_half_up']

import math
from numbers import Real


def is_real_number(value) -> bool:
    """True for finite ints and floats; booleans are rejected"""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False

    return math.isfinite(value)


def normalize_bearing(degrees: float) -> float:
    """
    Wraps an angle in degrees into the range [0, 360).

    Args:
        degrees:
            Any angle, in degrees

    Returns:
        float
    """
    bearing = degrees % 360
    # -1e-17 % 360 yields exactly 360.0
    return 0.0 if bearing == 360 else bearing


def normalize_longitude(degrees: float) -> float:
    """
    Wraps a longitude in degrees into the range (-180, 180].

    Args:
        degrees:
            Any longitude, in degrees

    Returns:
        float
    """
    lon = (degrees + 180) % 360 - 180
    return 180.0 if lon == -180 else lon


def round_half_up(value: float, precision: int) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)
