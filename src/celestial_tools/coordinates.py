"""Coordinate frames and closed-form transforms between them (Meeus ch. 13).

Transforms rotate unit vectors and read angles back with two-argument
arctangents, so every result lands in the right quadrant and non-finite input
propagates instead of raising. Longitudes on Earth are measured positively
westward; horizontal azimuth is measured westward from the south.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from celestial_tools.angles import Degree, Hour
from celestial_tools.constants import (
    ECLIPTIC_POLE_RA_HOURS,
    GALACTIC_NCP_LONGITUDE_DEG,
    GALACTIC_POLE_DEC_DEG,
    GALACTIC_POLE_RA_DEG,
    HALF_CIRCLE_DEGREES,
)
from celestial_tools.julian_day import J2000, JulianDay
from celestial_tools.nutation import true_obliquity


def _unit_vector(lon: float, lat: float) -> np.ndarray:
    """Unit vector for spherical longitude/latitude in radians."""
    c = math.cos(lat)
    return np.array([c * math.cos(lon), c * math.sin(lon), math.sin(lat)], dtype=np.float64)


def _spherical(vec: np.ndarray) -> tuple[float, float]:
    """(longitude, latitude) in radians of a vector; longitude in (-pi, pi]."""
    x, y, z = (float(v) for v in vec)
    return (math.atan2(y, x), math.atan2(z, math.hypot(x, y)))


def _rotation_x(angle: float) -> np.ndarray:
    """Frame rotation about the x axis by angle (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, s], [0.0, -s, c]], dtype=np.float64)


def _horizon_matrix(latitude: float) -> np.ndarray:
    """Hour-angle frame to horizon frame (x toward south, y toward west)."""
    s, c = math.sin(latitude), math.cos(latitude)
    return np.array([[s, 0.0, -c], [0.0, 1.0, 0.0], [c, 0.0, s]], dtype=np.float64)


def obliquity_at(julian_day: JulianDay) -> Degree:
    """True obliquity of the ecliptic at the given day count."""
    return true_obliquity(julian_day.julian_centuries)


@dataclass(frozen=True)
class GeographicCoordinates:
    """Observer location: longitude positive westward, latitude positive north."""

    longitude: Degree
    latitude: Degree
    altitude_m: float = 0.0

    @classmethod
    def from_east_longitude(
        cls, longitude: Degree, latitude: Degree, altitude_m: float = 0.0
    ) -> GeographicCoordinates:
        """Build from the more common east-positive longitude."""
        return cls(-longitude, latitude, altitude_m)

    @property
    def east_longitude(self) -> Degree:
        return -self.longitude


@dataclass(frozen=True)
class EclipticCoordinates:
    """Ecliptic longitude (lambda) and latitude (beta)."""

    longitude: Degree
    latitude: Degree

    def to_equatorial(
        self, julian_day: JulianDay = J2000, *, obliquity: Degree | None = None
    ) -> EquatorialCoordinates:
        """Rotate into the equatorial frame (Meeus 13.3, 13.4).

        Parameters:
            julian_day: Day count used for the obliquity when none is given.
            obliquity: Explicit obliquity of the ecliptic.
        """
        eps = obliquity if obliquity is not None else obliquity_at(julian_day)
        vec = _rotation_x(-eps.radians) @ _unit_vector(self.longitude.radians, self.latitude.radians)
        ra, dec = _spherical(vec)
        return EquatorialCoordinates(Hour.from_radians(ra).reduced(), Degree.from_radians(dec))


@dataclass(frozen=True)
class HorizontalCoordinates:
    """Azimuth (westward from the south) and altitude above the horizon."""

    azimuth: Degree
    altitude: Degree

    @property
    def azimuth_from_north(self) -> Degree:
        """Azimuth measured eastward from the north (navigation convention)."""
        return (self.azimuth + HALF_CIRCLE_DEGREES).reduced()

    def to_equatorial(
        self, geographic: GeographicCoordinates, julian_day: JulianDay
    ) -> EquatorialCoordinates:
        """Inverse of EquatorialCoordinates.to_horizontal."""
        lat = geographic.latitude.radians
        vec = _horizon_matrix(lat).T @ _unit_vector(self.azimuth.radians, self.altitude.radians)
        hour_angle, dec = _spherical(vec)
        lst = julian_day.apparent_local_sidereal_time(geographic.longitude)
        ra = (lst - Hour.from_radians(hour_angle).value).reduced()
        return EquatorialCoordinates(ra, Degree.from_radians(dec))


@dataclass(frozen=True)
class GalacticCoordinates:
    """Galactic longitude and latitude (IAU J2000 definition)."""

    longitude: Degree
    latitude: Degree

    def to_equatorial(self) -> EquatorialCoordinates:
        """Equatorial J2000 coordinates of this galactic position."""
        pole_dec = math.radians(GALACTIC_POLE_DEC_DEG)
        dl = math.radians(GALACTIC_NCP_LONGITUDE_DEG) - self.longitude.radians
        b = self.latitude.radians
        y = math.cos(b) * math.sin(dl)
        x = math.sin(b) * math.cos(pole_dec) - math.cos(b) * math.sin(pole_dec) * math.cos(dl)
        z = math.sin(b) * math.sin(pole_dec) + math.cos(b) * math.cos(pole_dec) * math.cos(dl)
        ra = Degree(GALACTIC_POLE_RA_DEG) + Degree.from_radians(math.atan2(y, x))
        dec = Degree.from_radians(math.atan2(z, math.hypot(x, y)))
        return EquatorialCoordinates(ra.reduced().in_hours, dec)


@dataclass(frozen=True)
class EquatorialCoordinates:
    """Right ascension (hours) and declination (degrees)."""

    right_ascension: Hour
    declination: Degree

    @property
    def alpha(self) -> Hour:
        return self.right_ascension

    @property
    def delta(self) -> Degree:
        return self.declination

    def to_ecliptic(
        self, julian_day: JulianDay = J2000, *, obliquity: Degree | None = None
    ) -> EclipticCoordinates:
        """Rotate into the ecliptic frame (Meeus 13.1, 13.2).

        Parameters:
            julian_day: Day count used for the obliquity when none is given.
            obliquity: Explicit obliquity of the ecliptic.
        """
        eps = obliquity if obliquity is not None else obliquity_at(julian_day)
        vec = _rotation_x(eps.radians) @ _unit_vector(
            self.right_ascension.radians, self.declination.radians
        )
        lon, lat = _spherical(vec)
        return EclipticCoordinates(Degree.from_radians(lon).reduced(), Degree.from_radians(lat))

    def hour_angle(self, geographic: GeographicCoordinates, julian_day: JulianDay) -> Hour:
        """Local hour angle H = LST - alpha, reduced to (-12h, 12h]."""
        lst = julian_day.apparent_local_sidereal_time(geographic.longitude)
        return (lst - self.right_ascension).reduced_to_pm12()

    def to_horizontal(
        self, geographic: GeographicCoordinates, julian_day: JulianDay
    ) -> HorizontalCoordinates:
        """Azimuth and altitude for an observer (Meeus 13.5, 13.6)."""
        hour_angle = self.hour_angle(geographic, julian_day)
        vec = _horizon_matrix(geographic.latitude.radians) @ _unit_vector(
            hour_angle.radians, self.declination.radians
        )
        az, alt = _spherical(vec)
        return HorizontalCoordinates(Degree.from_radians(az).reduced(), Degree.from_radians(alt))

    def to_galactic(self) -> GalacticCoordinates:
        """Galactic coordinates, assuming J2000 equatorial input."""
        pole_dec = math.radians(GALACTIC_POLE_DEC_DEG)
        da = self.right_ascension.radians - math.radians(GALACTIC_POLE_RA_DEG)
        dec = self.declination.radians
        y = math.cos(dec) * math.sin(da)
        x = math.sin(dec) * math.cos(pole_dec) - math.cos(dec) * math.sin(pole_dec) * math.cos(da)
        z = math.sin(dec) * math.sin(pole_dec) + math.cos(dec) * math.cos(pole_dec) * math.cos(da)
        lon = Degree(GALACTIC_NCP_LONGITUDE_DEG) - Degree.from_radians(math.atan2(y, x))
        lat = Degree.from_radians(math.atan2(z, math.hypot(x, y)))
        return GalacticCoordinates(lon.reduced(), lat)

    def separation(self, other: EquatorialCoordinates) -> Degree:
        """Angular distance to another equatorial position."""
        a = _unit_vector(self.right_ascension.radians, self.declination.radians)
        b = _unit_vector(other.right_ascension.radians, other.declination.radians)
        return Degree.from_radians(math.atan2(float(np.linalg.norm(np.cross(a, b))), float(a @ b)))


def north_ecliptic_pole(julian_day: JulianDay = J2000) -> EquatorialCoordinates:
    """Equatorial position of the north ecliptic pole (18h, 90 deg - obliquity)."""
    eps = obliquity_at(julian_day)
    return EquatorialCoordinates(Hour(ECLIPTIC_POLE_RA_HOURS), Degree(90.0) - eps)
