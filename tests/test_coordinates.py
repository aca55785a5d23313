"""Tests for coordinate frames and transforms."""

from __future__ import annotations

import pytest

from celestial_tools.angles import Degree, Hour, Sign
from celestial_tools.coordinates import (
    EclipticCoordinates,
    EquatorialCoordinates,
    GalacticCoordinates,
    GeographicCoordinates,
    north_ecliptic_pole,
)
from celestial_tools.julian_day import J2000, JulianDay
from celestial_tools.nutation import mean_obliquity, nutation


def test_mean_obliquity_at_j2000() -> None:
    """Mean obliquity at J2000 is 23 deg 26' 21.448"."""
    assert mean_obliquity(0.0).value == pytest.approx(23 + 26 / 60 + 21.448 / 3600)


def test_nutation_meeus_22a() -> None:
    """1987 April 10 0h TD: dpsi -3.788", deps +9.443" (low-precision series)."""
    dpsi, deps = nutation(JulianDay(2446895.5).julian_centuries)
    assert dpsi.arcseconds == pytest.approx(-3.788, abs=0.5)
    assert deps.arcseconds == pytest.approx(9.443, abs=0.5)


def test_equatorial_to_ecliptic_meeus_13a() -> None:
    """Pollux: alpha 7h45m18.946s, delta +28 01 34.26 -> lambda 113.2156, beta 6.6842."""
    pollux = EquatorialCoordinates(
        Hour.from_sexagesimal(Sign.PLUS, 7, 45, 18.946),
        Degree.from_sexagesimal(Sign.PLUS, 28, 1, 34.26),
    )
    ecliptic = pollux.to_ecliptic(obliquity=Degree(23.4392911))
    assert ecliptic.longitude.value == pytest.approx(113.215630, abs=1e-5)
    assert ecliptic.latitude.value == pytest.approx(6.684170, abs=1e-5)


def test_ecliptic_round_trip() -> None:
    """Equatorial -> ecliptic -> equatorial recovers the input."""
    coords = EquatorialCoordinates(Hour(16.9), Degree(-39.85))
    jd = JulianDay.from_calendar(2017, 6, 14)
    back = coords.to_ecliptic(jd).to_equatorial(jd)
    assert back.right_ascension.is_close(coords.right_ascension, Hour(1e-9))
    assert back.declination.value == pytest.approx(coords.declination.value, abs=1e-9)


def test_horizontal_meeus_13b() -> None:
    """Venus seen from Washington on 1987 April 10 19:21 UT: A 68.0337, h 15.1249."""
    venus = EquatorialCoordinates(
        Hour.from_sexagesimal(Sign.PLUS, 23, 9, 16.641),
        Degree.from_sexagesimal(Sign.MINUS, 6, 43, 11.61),
    )
    washington = GeographicCoordinates(
        Degree.from_sexagesimal(Sign.PLUS, 77, 3, 56),
        Degree.from_sexagesimal(Sign.PLUS, 38, 55, 17),
    )
    jd = JulianDay.from_calendar(1987, 4, 10, 19, 21, 0)
    horizontal = venus.to_horizontal(washington, jd)
    assert horizontal.azimuth.value == pytest.approx(68.0337, abs=0.01)
    assert horizontal.altitude.value == pytest.approx(15.1249, abs=0.01)
    assert horizontal.azimuth_from_north.value == pytest.approx(248.0337, abs=0.01)

    back = horizontal.to_equatorial(washington, jd)
    assert back.right_ascension.is_close(venus.right_ascension, Hour(1e-8))
    assert back.declination.value == pytest.approx(venus.declination.value, abs=1e-8)


def test_galactic_centre() -> None:
    """l = b = 0 maps to RA 266.405, Dec -28.936 and back."""
    centre = GalacticCoordinates(Degree(0.0), Degree(0.0)).to_equatorial()
    assert centre.right_ascension.in_degrees.value == pytest.approx(266.405, abs=0.01)
    assert centre.declination.value == pytest.approx(-28.936, abs=0.01)
    galactic = centre.to_galactic()
    assert galactic.longitude.is_close(Degree(0.0), Degree(1e-8))
    assert galactic.latitude.value == pytest.approx(0.0, abs=1e-8)


def test_north_ecliptic_pole() -> None:
    """The ecliptic pole sits at 18h and 90 deg minus the obliquity, at ecliptic latitude 90."""
    pole = north_ecliptic_pole(J2000)
    assert pole.right_ascension == Hour(18.0)
    assert pole.to_ecliptic(J2000).latitude.value == pytest.approx(90.0, abs=1e-6)


def test_separation() -> None:
    """Angular distance between two points on the equator."""
    a = EquatorialCoordinates(Hour(0.0), Degree(0.0))
    b = EquatorialCoordinates(Hour(6.0), Degree(0.0))
    assert a.separation(b).value == pytest.approx(90.0)


def test_east_longitude_conversion() -> None:
    """East-positive input is stored west-positive."""
    geo = GeographicCoordinates.from_east_longitude(Degree(23.68), Degree(70.66))
    assert geo.longitude == Degree(-23.68)
    assert geo.east_longitude == Degree(23.68)


def test_alpha_delta_aliases() -> None:
    """alpha/delta are the right ascension and declination."""
    coords = EquatorialCoordinates(Hour(1.0), Degree(2.0))
    assert coords.alpha == Hour(1.0)
    assert coords.delta == Degree(2.0)
    assert isinstance(coords.to_ecliptic(), EclipticCoordinates)
