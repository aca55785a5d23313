"""Celestial bodies: the capability protocol, derived angles, and concrete bodies."""

from celestial_tools.bodies.base import (
    CelestialBody,
    DerivedAnglesMixin,
    angle_between_ecliptic_and_horizon,
    angle_between_north_celestial_pole_and_north_pole_of_ecliptic,
    diurnal_arc_angle,
    ecliptic_longitude_on_horizon,
    horizontal_coordinates,
    parallactic_angle,
)
from celestial_tools.bodies.objects import AstronomicalObject
from celestial_tools.bodies.solar_system import (
    BodyId,
    EphemerisSource,
    SolarSystemBody,
    default_ephemeris,
    parse_body,
)
from celestial_tools.bodies.sun import SolarTheory, solar_ecliptic_longitude

__all__ = [
    'AstronomicalObject',
    'BodyId',
    'CelestialBody',
    'DerivedAnglesMixin',
    'EphemerisSource',
    'SolarSystemBody',
    'SolarTheory',
    'angle_between_ecliptic_and_horizon',
    'angle_between_north_celestial_pole_and_north_pole_of_ecliptic',
    'default_ephemeris',
    'diurnal_arc_angle',
    'ecliptic_longitude_on_horizon',
    'horizontal_coordinates',
    'parallactic_angle',
    'parse_body',
    'solar_ecliptic_longitude',
]
