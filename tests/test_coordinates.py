import copy
import pickle

import pytest

from geomeasure import Point, TypeMismatch


def test_point_init():
    p = Point(1., 2.)
    assert p.lat == 1.
    assert p.lon == 2.

    # ints are stored as floats
    p = Point(1, 2)
    assert isinstance(p.lat, float)
    assert p.to_float() == (1.0, 2.0)


def test_point_init_rejects_non_numbers():
    for bad in ('1.0', None, True, float('nan'), float('inf'), [1.]):
        with pytest.raises(TypeMismatch):
            Point(bad, 0.)

        with pytest.raises(TypeMismatch):
            Point(0., bad)

    # TypeMismatch is also a TypeError
    with pytest.raises(TypeError):
        Point('a', 'b')


def test_point_out_of_range_warns(caplog, monkeypatch):
    monkeypatch.setattr('geomeasure.utils.logging._WARNED', set())

    p = Point(91., 200.)
    assert p.lat == 91.
    assert p.lon == 200.
    assert 'outside the valid latitude/longitude range' in caplog.text

    caplog.clear()
    Point(0., 0.)
    assert caplog.text == ''


def test_point_immutable():
    p = Point(1., 2.)
    with pytest.raises(AttributeError):
        p.lat = 5.

    with pytest.raises(AttributeError):
        p._lon = 5.

    with pytest.raises(AttributeError):
        del p.lat


def test_point_eq():
    assert Point(0., 0.) == Point(0., 0.)
    assert Point(0, 0) == Point(0., 0.)
    assert Point(0., 0.) != Point(1., 0.)
    assert Point(0., 0.) != (0., 0.)


def test_point_hash():
    points = [
        Point(0., 0.),
        Point(0., 0.),
        Point(1., 1.)
    ]
    assert len(set(points)) == 2
    assert Point(1., 1.) in set(points)


def test_point_repr():
    assert repr(Point(1, 2.5)) == '<Point(1.0, 2.5)>'


def test_point_copy_and_pickle():
    p = Point(1., 2.)
    assert copy.deepcopy(p) == p
    assert pickle.loads(pickle.dumps(p)) == p


def test_point_radians():
    lat, lon = Point(180. / 2, -45.).radians
    assert lat == pytest.approx(1.5707963267948966)
    assert lon == pytest.approx(-0.7853981633974483)


def test_point_to_float():
    assert Point(1., 2.).to_float() == (1., 2.)
    assert Point(1., 2.).to_float(reverse=True) == (2., 1.)


def test_point_dms():
    p = Point(10.5, -20.25)
    assert p.to_dms() == ((10, 30, 0.0, 'N'), (20, 15, 0.0, 'W'))
    assert Point.from_dms((10, 30, 0, 'N'), (20, 15, 0, 'W')) == p

    assert Point.from_dms((0, 0, 36, 'S'), (0, 0, 36, 'E')) == Point(-0.01, 0.01)
