import pytest
from pytest import approx

from geomeasure import Point, TypeMismatch
from geomeasure.spherical import *

from tests.functions import FINNMARK, OSLO, assert_points_equal


def test_haversine_distance():
    assert haversine_distance(FINNMARK, OSLO) == 1468.28

    # Sourced from haversine package, rounded to 10 meters
    assert haversine_distance(Point(0.0, 0.0), Point(1.0, 1.0)) == 157.25
    assert haversine_distance(Point(0.0, 0.0), Point(0.001, 0.001)) == 0.16

    # Antimeridian test
    assert haversine_distance(Point(0., 179.), Point(0., -179.)) == 222.39


def test_haversine_distance_symmetry():
    assert haversine_distance(FINNMARK, OSLO) == haversine_distance(OSLO, FINNMARK)
    assert spherical_distance(FINNMARK, OSLO).distance_km == \
        spherical_distance(OSLO, FINNMARK).distance_km


def test_haversine_distance_edge_cases():
    assert haversine_distance(FINNMARK, FINNMARK) == 0.

    # Antipodal - half the circumference, no domain error
    assert haversine_distance(Point(0., 0.), Point(0., 180.)) == 20015.09
    assert haversine_distance(Point(90., 0.), Point(-90., 0.)) == 20015.09


def test_haversine_bearing():
    assert haversine_bearing(FINNMARK, OSLO) == approx(227.73850889751841, abs=1e-9)
    assert haversine_bearing(Point(0.0, 0.0), Point(0.001, 0.001)) == approx(45., abs=1e-6)
    assert haversine_bearing(Point(0., 0.), Point(-1., 0.)) == approx(180.)
    assert haversine_bearing(Point(0., 0.), Point(0., -1.)) == approx(270.)
    assert haversine_bearing(Point(0., 0.), Point(1., 0.)) == 0.

    # Close to the ellipsoidal initial bearing of 227.77
    assert haversine_bearing(FINNMARK, OSLO) == approx(227.77, abs=0.05)


def test_spherical_distance():
    result = spherical_distance(FINNMARK, OSLO)
    assert result == SphericalResult(1468.28, haversine_bearing(FINNMARK, OSLO))
    assert result.bearing_deg == approx(227.73850889751841, abs=1e-9)

    with pytest.raises(TypeMismatch):
        spherical_distance({'lat': 0., 'lon': 0.}, OSLO)


def test_haversine_destination():
    assert_points_equal(
        haversine_destination(Point(0.0, 0.0), 45., 111_000),
        Point(0.7058494, 0.7059029),
    )

    assert_points_equal(
        haversine_destination(Point(70., 30.), 360, 10_000),
        Point(70.08993216059186, 30.),
        abs_tol=1e-9
    )

    # Crosses the antimeridian
    dest = haversine_destination(Point(0., 179.5), 90, 111_194.93)
    assert_points_equal(dest, Point(0., -179.5), abs_tol=1e-6)

    with pytest.raises(TypeMismatch):
        haversine_destination(Point(0., 0.), '90', 100)


def test_generate_points():
    start, finish = Point(70., 30.), Point(70.01, 30.01)
    bearing = haversine_bearing(start, finish)
    assert bearing == approx(18.873, abs=5e-3)

    points = generate_points(start, finish)
    assert len(points) == 11

    # Flat-earth estimate of 100m along the initial bearing
    assert_points_equal(points[0], Point(70.000851, 30.000851), abs_tol=1e-6)
    for i, point in enumerate(points, start=1):
        assert_points_equal(point, haversine_destination(start, bearing, 100. * i), abs_tol=1e-12)
        assert haversine_distance(start, point) == round(0.1 * i, 2)

    points = generate_points(start, finish, 300)
    assert len(points) == 3
    assert_points_equal(points[0], Point(70.002553, 30.002552), abs_tol=1e-6)
    for i, point in enumerate(points, start=1):
        assert_points_equal(point, haversine_destination(start, bearing, 300. * i), abs_tol=1e-12)

    # Spacing longer than the whole distance
    assert generate_points(start, finish, 5_000) == []

    with pytest.raises(ValueError):
        generate_points(start, finish, 0)


def test_path_distance():
    assert path_distance([FINNMARK, OSLO]) == 1468.28
    assert path_distance([Point(0., 0.), Point(0., 1.), Point(0., 2.)]) == 222.39
    assert path_distance([FINNMARK]) == 0.
    assert path_distance([]) == 0.

    # Out and back
    assert path_distance([FINNMARK, OSLO, FINNMARK]) == approx(2 * 1468.2753, abs=0.01)


def test_out_of_range_points():
    # (91, 0) and (89, 180) describe the same place; rounding leaves the
    # haversine term fractionally negative
    p1, p2 = Point(91., 0.), Point(89., 180.)
    assert spherical_distance(p1, p2).distance_km == approx(0., abs=0.01)
    assert path_distance([p1, p2]) == approx(0., abs=0.01)
    assert path_distance([p1, p2, p1]) == approx(0., abs=0.01)
