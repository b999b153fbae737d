import pytest
from pytest import approx

from geomeasure import InvalidDuration, TypeMismatch
from geomeasure.speed import *


def test_derive_speed():
    # Finnmark to Oslo in five days
    result = derive_speed(1468.28, 432_000)
    assert result.speed_kph == approx(12.235667, abs=1e-6)
    assert result.speed_mph == approx(7.602888, abs=1e-5)
    assert result.speed_mpk == '4:54.22'
    assert result.pace_minutes == 4
    assert result.pace_seconds == 54.22

    result = derive_speed(10, 3600)
    assert result.speed_kph == 10.
    assert result.speed_mph == approx(6.21371)
    assert result.speed_mpk == '6:00.00'
    assert (result.pace_minutes, result.pace_seconds) == (6, 0.)

    # Seconds are zero-padded
    assert derive_speed(15, 3300).speed_mpk == '3:40.00'


def test_derive_speed_no_distance():
    assert derive_speed(0, 60) == SpeedResult(0., 0., None, None, None)


def test_derive_speed_invalid_duration():
    with pytest.raises(InvalidDuration):
        derive_speed(10, 0)

    with pytest.raises(InvalidDuration):
        derive_speed(10, -3600)

    # Also a ValueError
    with pytest.raises(ValueError):
        derive_speed(10, 0)


def test_derive_speed_negative_distance():
    with pytest.raises(ValueError):
        derive_speed(-1, 3600)


def test_derive_speed_type_mismatch():
    for distance_km, elapsed in [('10', 3600), (10, '3600'), (None, 3600),
                                 (10, float('nan')), (float('inf'), 3600), (10, True)]:
        with pytest.raises(TypeMismatch):
            derive_speed(distance_km, elapsed)


def test_pace_per_km():
    assert pace_per_km(12.) == (5, 0.)
    assert pace_per_km(10.) == (6, 0.)
    assert pace_per_km(7.5) == (8, 0.)
    assert pace_per_km(13.) == (4, 36.92)

    # Seconds that round up to a full minute roll over
    assert pace_per_km(60 / 4.99999) == (5, 0.)

    with pytest.raises(ValueError):
        pace_per_km(0.)
