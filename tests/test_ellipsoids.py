import pytest

from geomeasure.ellipsoids import *


def test_catalog_contents():
    assert set(ELLIPSOIDS) == {
        'WGS84', 'GRS80', 'Airy1830', 'AiryModified', 'Bessel1841',
        'Clarke1866', 'Intl1924', 'WGS72'
    }
    assert set(DATUMS) == {
        'WGS84', 'NAD83', 'OSGB36', 'ED50', 'Irl1975', 'TokyoJapan', 'NAD27', 'WGS72'
    }


def test_wgs84():
    assert WGS84.a == 6378137.
    assert WGS84.b == 6356752.314245
    assert WGS84.f == 1 / 298.257223563
    assert get_ellipsoid('WGS84') is WGS84


def test_flattening_invariant():
    for ellipsoid in ELLIPSOIDS.values():
        assert ellipsoid.f == pytest.approx((ellipsoid.a - ellipsoid.b) / ellipsoid.a, rel=1e-5)

    with pytest.raises(ValueError):
        Ellipsoid(6378137., 6356752.314245, 1 / 150)


def test_ellipsoid_immutable():
    with pytest.raises(AttributeError):
        WGS84.a = 1.

    with pytest.raises(TypeError):
        ELLIPSOIDS['Mine'] = WGS84


def test_ellipsoid_eq():
    assert Ellipsoid(6378137., 6356752.314245, 1 / 298.257223563) == WGS84
    assert get_ellipsoid('GRS80') != WGS84
    assert WGS84 != (WGS84.a, WGS84.b, WGS84.f)
    assert len({WGS84, get_ellipsoid('WGS84'), get_ellipsoid('GRS80')}) == 2


def test_second_eccentricity():
    assert WGS84.second_eccentricity_sq == pytest.approx(0.00673949674227, rel=1e-9)


def test_datums():
    nad83 = get_datum('NAD83')
    assert nad83.ellipsoid == get_ellipsoid('GRS80')
    assert nad83.transform.tx == 1.004
    assert nad83.transform.s == -0.0015

    assert get_datum('WGS84').transform == HelmertTransform()
    assert get_datum('OSGB36').ellipsoid == get_ellipsoid('Airy1830')


def test_unknown_names():
    with pytest.raises(KeyError):
        get_ellipsoid('Flat')

    with pytest.raises(KeyError):
        get_datum('Flat')
