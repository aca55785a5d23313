"""Diurnal arc resolver and rise/transit/set instants (Meeus ch. 15)."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from celestial_tools.angles import Degree, Hour
from celestial_tools.constants import (
    DEGREES_PER_CIRCLE,
    GMST_COEFFS,
    GRAZING_TOLERANCE,
    STANDARD_ALTITUDE_STARS,
)
from celestial_tools.julian_day import JulianDay

if TYPE_CHECKING:
    from celestial_tools.bodies.base import CelestialBody
    from celestial_tools.coordinates import GeographicCoordinates

logger = logging.getLogger(__name__)

# Sidereal degrees per solar day.
_SIDEREAL_RATE = GMST_COEFFS[1]


class DiurnalArcStatus(Enum):
    """Outcome of a diurnal arc computation."""

    VALID = 'valid'
    ALWAYS_ABOVE_ALTITUDE = 'always above altitude'
    ALWAYS_BELOW_ALTITUDE = 'always below altitude'


@dataclass(frozen=True)
class DiurnalArc:
    """Half diurnal arc (hour angle from meridian to crossing) or a terminal status.

    ``angle`` is set only when ``status`` is VALID.
    """

    status: DiurnalArcStatus
    angle: Degree | None = None

    @property
    def is_valid(self) -> bool:
        return self.status is DiurnalArcStatus.VALID

    @property
    def hours(self) -> Hour:
        """Half arc as an hour angle.

        Raises:
            ValueError: If the body never crosses the altitude.
        """
        if self.angle is None:
            raise ValueError(f'No diurnal arc: {self.status.value}')
        return self.angle.in_hours

    @property
    def full_arc(self) -> Degree:
        """Whole arc above the altitude (twice the half arc)."""
        if self.angle is None:
            raise ValueError(f'No diurnal arc: {self.status.value}')
        return self.angle * 2.0


def diurnal_arc(target_altitude: Degree, latitude: Degree, declination: Degree) -> DiurnalArc:
    """Resolve the half diurnal arc above target_altitude.

    cos H = (sin h - sin phi sin delta) / (cos phi cos delta). A cosine below -1
    means the body never sinks to the altitude; above +1 it never reaches it.
    Exactly +-1 (grazing) is valid and gives 0 or 180 degrees.

    Parameters:
        target_altitude: Altitude to cross (e.g. 0 or a standard altitude).
        latitude: Observer latitude.
        declination: Body declination.

    Returns:
        DiurnalArc with the half arc in [0, 180] or a terminal status.
    """
    lat = latitude.radians
    dec = declination.radians
    cos_h = (math.sin(target_altitude.radians) - math.sin(lat) * math.sin(dec)) / (
        math.cos(lat) * math.cos(dec)
    )
    if cos_h < -1.0 - GRAZING_TOLERANCE:
        return DiurnalArc(DiurnalArcStatus.ALWAYS_ABOVE_ALTITUDE)
    if cos_h > 1.0 + GRAZING_TOLERANCE:
        return DiurnalArc(DiurnalArcStatus.ALWAYS_BELOW_ALTITUDE)
    if abs(cos_h) > 1.0:
        cos_h = math.copysign(1.0, cos_h)
    return DiurnalArc(DiurnalArcStatus.VALID, Degree.from_radians(math.acos(cos_h)))


@dataclass(frozen=True)
class RiseTransitSet:
    """Transit instant and, when the arc is valid, rise and set instants."""

    transit: JulianDay
    rising: JulianDay | None
    setting: JulianDay | None
    arc: DiurnalArc


def _day_fraction(degrees: float) -> float:
    """Sidereal angle converted to a fraction of a solar day, reduced to [0, 1)."""
    return (degrees / _SIDEREAL_RATE) % 1.0


def rise_transit_set(
    body: CelestialBody,
    geographic: GeographicCoordinates,
    altitude: Degree | None = None,
) -> RiseTransitSet:
    """Estimate transit, rise, and set on the body's UT day (one pass, no iteration).

    Uses the body's coordinates at its own day count and the apparent sidereal
    time at 0h UT of that day. Accuracy is a few minutes for slow bodies.

    Parameters:
        body: Any celestial body.
        geographic: Observer location (longitude positive westward).
        altitude: Altitude defining rise/set; defaults to the standard
            altitude for stars (-0.5667 degrees).

    Returns:
        RiseTransitSet; rising and setting are None for terminal arcs.
    """
    if altitude is None:
        altitude = Degree(STANDARD_ALTITUDE_STARS)
    coords = body.equatorial_coordinates
    midnight = body.julian_day.midnight()
    theta0 = midnight.apparent_greenwich_sidereal_time().in_degrees.value
    ra = coords.right_ascension.in_degrees.value
    transit_angle = (ra + geographic.longitude.value - theta0) % DEGREES_PER_CIRCLE
    m0 = _day_fraction(transit_angle)
    arc = diurnal_arc(altitude, geographic.latitude, coords.declination)
    if arc.angle is None:
        logger.debug('No rise/set for declination %s: %s', coords.declination, arc.status.value)
        return RiseTransitSet(midnight + m0, None, None, arc)
    half = arc.angle.value
    rising = midnight + _day_fraction(transit_angle - half)
    setting = midnight + _day_fraction(transit_angle + half)
    return RiseTransitSet(midnight + m0, rising, setting, arc)
