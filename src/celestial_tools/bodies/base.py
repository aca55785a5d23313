"""Celestial body capability and the angles derived from it.

Anything with a day count and equatorial coordinates at that day count is a
celestial body. The functions below only use that capability, so planets,
the Sun, catalog stars, and any future kind of object share them unchanged.
"""

from __future__ import annotations

import math
from typing import Protocol, runtime_checkable

from celestial_tools.angles import Degree
from celestial_tools.coordinates import (
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
    obliquity_at,
)
from celestial_tools.diurnal import DiurnalArc, RiseTransitSet, diurnal_arc, rise_transit_set
from celestial_tools.julian_day import JulianDay


@runtime_checkable
class CelestialBody(Protocol):
    """Capability: equatorial coordinates at a day count."""

    @property
    def julian_day(self) -> JulianDay: ...

    @property
    def equatorial_coordinates(self) -> EquatorialCoordinates: ...


def horizontal_coordinates(
    body: CelestialBody, geographic: GeographicCoordinates
) -> HorizontalCoordinates:
    """Azimuth and altitude of the body for the observer at the body's day count."""
    return body.equatorial_coordinates.to_horizontal(geographic, body.julian_day)


def parallactic_angle(body: CelestialBody, geographic: GeographicCoordinates) -> Degree:
    """Angle at the body between the zenith and the north celestial pole (Meeus 14.1).

    Parameters:
        body: Any celestial body.
        geographic: Observer location.

    Returns:
        Parallactic angle in (-180, 180]; negative before the meridian passage.
    """
    coords = body.equatorial_coordinates
    hour_angle = coords.hour_angle(geographic, body.julian_day).radians
    lat = geographic.latitude.radians
    dec = coords.declination.radians
    q = math.atan2(
        math.sin(hour_angle),
        math.tan(lat) * math.cos(dec) - math.sin(dec) * math.cos(hour_angle),
    )
    return Degree.from_radians(q).reduced_to_pm180()


def ecliptic_longitude_on_horizon(
    body: CelestialBody, geographic: GeographicCoordinates
) -> Degree:
    """Ecliptic longitude of one of the two ecliptic points on the horizon (Meeus 14.2).

    The other point is 180 degrees away. Depends only on the day count and the
    observer, not on the body's position.
    """
    theta = body.julian_day.apparent_local_sidereal_time(geographic.longitude).radians
    eps = obliquity_at(body.julian_day).radians
    lat = geographic.latitude.radians
    lon = math.atan2(
        -math.cos(theta),
        math.sin(eps) * math.tan(lat) + math.cos(eps) * math.sin(theta),
    )
    return Degree.from_radians(lon).reduced()


def angle_between_ecliptic_and_horizon(
    body: CelestialBody, geographic: GeographicCoordinates
) -> Degree:
    """Angle between the ecliptic and the horizon (Meeus 14.3)."""
    theta = body.julian_day.apparent_local_sidereal_time(geographic.longitude).radians
    eps = obliquity_at(body.julian_day).radians
    lat = geographic.latitude.radians
    cos_i = math.cos(eps) * math.sin(lat) - math.sin(eps) * math.cos(lat) * math.sin(theta)
    if abs(cos_i) > 1.0:
        cos_i = math.copysign(1.0, cos_i)
    return Degree.from_radians(math.acos(cos_i))


def angle_between_north_celestial_pole_and_north_pole_of_ecliptic(
    body: CelestialBody, geographic: GeographicCoordinates
) -> Degree:
    """Angle at the body between the directions to the two north poles.

    The north ecliptic pole sits at (18h, 90 - obliquity); the angle follows
    from the body's ecliptic coordinates (Meeus ch. 14). The observer location
    does not enter the spherical triangle.

    Returns:
        Angle in [0, 360).
    """
    del geographic
    eps = obliquity_at(body.julian_day)
    ecliptic = body.equatorial_coordinates.to_ecliptic(obliquity=eps)
    lon = ecliptic.longitude.radians
    lat = ecliptic.latitude.radians
    tan_eps = math.tan(eps.radians)
    angle = math.atan2(
        math.cos(lon) * tan_eps,
        math.sin(lat) * math.sin(lon) * tan_eps - math.cos(lat),
    )
    return Degree.from_radians(angle).reduced()


def diurnal_arc_angle(
    body: CelestialBody, altitude: Degree, geographic: GeographicCoordinates
) -> DiurnalArc:
    """Half diurnal arc of the body above the given altitude on its day."""
    return diurnal_arc(altitude, geographic.latitude, body.equatorial_coordinates.declination)


class DerivedAnglesMixin:
    """Method access to the derived angles for concrete body classes."""

    def horizontal_coordinates(
        self: CelestialBody, geographic: GeographicCoordinates
    ) -> HorizontalCoordinates:
        return horizontal_coordinates(self, geographic)

    def parallactic_angle(self: CelestialBody, geographic: GeographicCoordinates) -> Degree:
        return parallactic_angle(self, geographic)

    def ecliptic_longitude_on_horizon(
        self: CelestialBody, geographic: GeographicCoordinates
    ) -> Degree:
        return ecliptic_longitude_on_horizon(self, geographic)

    def angle_between_ecliptic_and_horizon(
        self: CelestialBody, geographic: GeographicCoordinates
    ) -> Degree:
        return angle_between_ecliptic_and_horizon(self, geographic)

    def angle_between_north_celestial_pole_and_north_pole_of_ecliptic(
        self: CelestialBody, geographic: GeographicCoordinates
    ) -> Degree:
        return angle_between_north_celestial_pole_and_north_pole_of_ecliptic(self, geographic)

    def diurnal_arc_angle(
        self: CelestialBody, altitude: Degree, geographic: GeographicCoordinates
    ) -> DiurnalArc:
        return diurnal_arc_angle(self, altitude, geographic)

    def rise_transit_set(
        self: CelestialBody, geographic: GeographicCoordinates, altitude: Degree | None = None
    ) -> RiseTransitSet:
        return rise_transit_set(self, geographic, altitude)
