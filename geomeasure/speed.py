"""Speed and pace derived from a travelled distance and the time it took"""

__all__ = ['SpeedResult', 'derive_speed', 'pace_per_km']

from typing import NamedTuple, Optional, Tuple

from geomeasure._const import KPH_TO_MPH, SECONDS_PER_HOUR
from geomeasure.exceptions import InvalidDuration
from geomeasure.typing import Number
from geomeasure.utils.functions import round_half_up
from geomeasure.utils.validation import validate_inputs


class SpeedResult(NamedTuple):
    """
    speed_mpk is the pace as "<minutes>:<seconds>" per kilometer, e.g. "4:54.22".
    Pace fields are None when no distance was covered.
    """
    speed_kph: float
    speed_mph: float
    speed_mpk: Optional[str]
    pace_minutes: Optional[int]
    pace_seconds: Optional[float]


def pace_per_km(speed_kph: float) -> Tuple[int, float]:
    """
    Splits the time needed to cover one kilometer at speed_kph into whole
    minutes and remaining seconds (2 decimal places).

    Args:
        speed_kph:
            A positive speed in kilometers per hour

    Returns:
        Tuple[int, float] of (minutes, seconds)
    """
    if speed_kph <= 0:
        raise ValueError(f'Pace is undefined for a speed of {speed_kph} kph')

    total_minutes = 60 / speed_kph
    minutes = int(total_minutes)
    seconds = round_half_up((total_minutes - minutes) * 60, 2)
    if seconds >= 60:
        minutes, seconds = minutes + 1, 0.0

    return minutes, seconds


@validate_inputs
def derive_speed(distance_km: Number, elapsed_seconds: Number) -> SpeedResult:
    """
    Derive speed in kilometers and miles per hour, and pace in minutes per
    kilometer, from a distance and the elapsed time.

    Args:
        distance_km:
            Distance travelled, in kilometers

        elapsed_seconds:
            Time taken, in seconds. Must be positive.

    Raises:
        InvalidDuration: elapsed_seconds is zero or negative
        ValueError: distance_km is negative

    Returns:
        SpeedResult
    """
    if elapsed_seconds <= 0:
        raise InvalidDuration(f'Elapsed time must be positive, not {elapsed_seconds} seconds')

    if distance_km < 0:
        raise ValueError(f'Distance must not be negative, not {distance_km} km')

    speed_kph = distance_km / (elapsed_seconds / SECONDS_PER_HOUR)
    speed_mph = speed_kph * KPH_TO_MPH

    if speed_kph == 0:
        return SpeedResult(0.0, 0.0, None, None, None)

    minutes, seconds = pace_per_km(speed_kph)
    return SpeedResult(speed_kph, speed_mph, f'{minutes}:{seconds:05.2f}', minutes, seconds)
