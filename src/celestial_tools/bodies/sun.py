"""Low-precision analytic solar coordinates (Meeus ch. 25), accurate to ~0.01 deg."""

from __future__ import annotations

import math

from celestial_tools.angles import Degree
from celestial_tools.bodies.solar_system import BodyId
from celestial_tools.coordinates import EclipticCoordinates, EquatorialCoordinates
from celestial_tools.julian_day import JulianDay
from celestial_tools.nutation import mean_obliquity


def solar_ecliptic_longitude(t: float) -> tuple[Degree, Degree]:
    """Apparent ecliptic longitude of the Sun and the matching apparent obliquity.

    Parameters:
        t: Julian centuries since J2000.0.

    Returns:
        (apparent_longitude, apparent_obliquity).
    """
    mean_longitude = 280.46646 + 36000.76983 * t + 0.0003032 * t * t
    anomaly = math.radians(357.52911 + 35999.05029 * t - 0.0001537 * t * t)
    center = (
        (1.914602 - 0.004817 * t - 0.000014 * t * t) * math.sin(anomaly)
        + (0.019993 - 0.000101 * t) * math.sin(2.0 * anomaly)
        + 0.000289 * math.sin(3.0 * anomaly)
    )
    omega = math.radians(125.04 - 1934.136 * t)
    apparent = mean_longitude + center - 0.00569 - 0.00478 * math.sin(omega)
    obliquity = mean_obliquity(t) + 0.00256 * math.cos(omega)
    return (Degree(apparent).reduced(), obliquity)


class SolarTheory:
    """Ephemeris source for the Sun that needs no kernels."""

    def equatorial_coordinates(self, body: BodyId, julian_day: JulianDay) -> EquatorialCoordinates:
        if body is not BodyId.SUN:
            raise ValueError(f'SolarTheory only provides the Sun, not {body.name.title()}')
        longitude, obliquity = solar_ecliptic_longitude(julian_day.julian_centuries)
        return EclipticCoordinates(longitude, Degree(0.0)).to_equatorial(obliquity=obliquity)
