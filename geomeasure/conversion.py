"""
Module for unit conversions
"""
__all__ = ['DISTANCE_UNITS', 'SPEED_UNITS', 'convert_from_meters', 'convert_to_meters', 'convert_to_mps']

from types import MappingProxyType

# Meters per unit
DISTANCE_UNITS = MappingProxyType({
    'm': 1.0,
    'km': 1000.0,
    'mi': 1609.344,
    'nmi': 1852.0,
    'ft': 0.3048,
    'yd': 0.9144,
})

# Meters per second per unit
SPEED_UNITS = MappingProxyType({
    'mps': 1.0,
    'kph': 1000 / 3600,
    'mph': 0.44704,
    'kn': 1852 / 3600,
})


def _factor(table, unit: str) -> float:
    unit = unit.lower()
    if unit not in table:
        raise ValueError(f"Unknown unit '{unit}'. Options: {list(table.keys())}")

    return table[unit]


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer = 'km', mile = 'mi',
        nautical mile = 'nmi', feet = 'ft', yard = 'yd').

    Returns:
        float: The distance in meters.
    """
    return distance * _factor(DISTANCE_UNITS, unit)


def convert_from_meters(distance: float, unit: str) -> float:
    """Converts a distance in meters to the given unit (see convert_to_meters)"""
    return distance / _factor(DISTANCE_UNITS, unit)


def convert_to_mps(speed: float, unit: str) -> float:
    """
    Converts speed from different units to meters per second (m/s).

    Args:
        speed (float): Speed value.
        unit (str): Speed unit (kilometer per hour = 'kph', mile per hour = 'mph',
        knot = 'kn', meters per second = 'mps').

    Returns:
        float: Speed in meters per second.
    """
    return speed * _factor(SPEED_UNITS, unit)
