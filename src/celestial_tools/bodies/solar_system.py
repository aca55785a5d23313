"""Solar-system bodies: identities, ephemeris sources, and the body value type."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from celestial_tools.angles import Degree
from celestial_tools.bodies.base import DerivedAnglesMixin
from celestial_tools.constants import (
    EARTH_ID,
    JUPITER_ID,
    MARS_ID,
    MERCURY_ID,
    MOON_ID,
    NEPTUNE_ID,
    PLUTO_ID,
    SATURN_ID,
    STANDARD_ALTITUDE_SUN,
    SUN_ID,
    URANUS_ID,
    VENUS_ID,
)
from celestial_tools.coordinates import EquatorialCoordinates, GeographicCoordinates
from celestial_tools.diurnal import RiseTransitSet, rise_transit_set
from celestial_tools.julian_day import JulianDay

if TYPE_CHECKING:
    from celestial_tools.phenomena import PhenomenonKind

logger = logging.getLogger(__name__)


class BodyId(Enum):
    """Solar-system body identity; the value is the NAIF ID."""

    SUN = SUN_ID
    MOON = MOON_ID
    MERCURY = MERCURY_ID
    VENUS = VENUS_ID
    EARTH = EARTH_ID
    MARS = MARS_ID
    JUPITER = JUPITER_ID
    SATURN = SATURN_ID
    URANUS = URANUS_ID
    NEPTUNE = NEPTUNE_ID
    PLUTO = PLUTO_ID

    @property
    def naif_id(self) -> int:
        return self.value


# Case-insensitive body name -> BodyId for CLI input.
BODY_NAME_TO_ID: dict[str, BodyId] = {b.name.lower(): b for b in BodyId}


def parse_body(value: str) -> BodyId:
    """Parse a body name or NAIF ID (e.g. 'venus', '299').

    Raises:
        ValueError: If the name or ID is unknown.
    """
    key = value.strip().lower()
    if key in BODY_NAME_TO_ID:
        return BODY_NAME_TO_ID[key]
    try:
        return BodyId(int(key))
    except ValueError:
        raise ValueError(
            f'Unknown body {value!r}; expected one of {", ".join(BODY_NAME_TO_ID)} or a NAIF ID'
        ) from None


class EphemerisSource(Protocol):
    """Provider of geocentric equatorial coordinates for moving bodies."""

    def equatorial_coordinates(
        self, body: BodyId, julian_day: JulianDay
    ) -> EquatorialCoordinates: ...


def default_ephemeris(body: BodyId) -> EphemerisSource:
    """Analytic theory for the Sun, SPICE kernels for everything else."""
    if body is BodyId.SUN:
        from celestial_tools.bodies.sun import SolarTheory

        return SolarTheory()
    logger.debug('Using SPICE ephemeris for %s', body.name)
    from celestial_tools.spice.geometry import SpiceEphemeris

    return SpiceEphemeris()


@dataclass(frozen=True)
class SolarSystemBody(DerivedAnglesMixin):
    """A solar-system body observed from Earth's center at a day count."""

    body: BodyId
    julian_day: JulianDay
    ephemeris: EphemerisSource | None = field(default=None, compare=False, repr=False)

    @property
    def equatorial_coordinates(self) -> EquatorialCoordinates:
        source = self.ephemeris if self.ephemeris is not None else default_ephemeris(self.body)
        return source.equatorial_coordinates(self.body, self.julian_day)

    def at(self, julian_day: JulianDay) -> SolarSystemBody:
        """Same body (and ephemeris source) at another day count."""
        return SolarSystemBody(self.body, julian_day, self.ephemeris)

    def _phenomenon(self, kind: PhenomenonKind, mean: bool) -> JulianDay:
        from celestial_tools import phenomena

        return phenomena.find(self.body, kind, self.julian_day.decimal_year, mean=mean)

    def inferior_conjunction(self, mean: bool = True) -> JulianDay:
        """Inferior conjunction nearest the body's day count (opposition for outer planets)."""
        from celestial_tools.phenomena import PhenomenonKind

        return self._phenomenon(PhenomenonKind.INFERIOR_CONJUNCTION, mean)

    def superior_conjunction(self, mean: bool = True) -> JulianDay:
        """Superior conjunction nearest the body's day count."""
        from celestial_tools.phenomena import PhenomenonKind

        return self._phenomenon(PhenomenonKind.SUPERIOR_CONJUNCTION, mean)

    def opposition(self, mean: bool = True) -> JulianDay:
        """Opposition nearest the body's day count (outer planets only)."""
        from celestial_tools.phenomena import PhenomenonKind

        return self._phenomenon(PhenomenonKind.OPPOSITION, mean)

    def conjunction(self, mean: bool = True) -> JulianDay:
        """Conjunction with the Sun nearest the body's day count (outer planets only)."""
        from celestial_tools.phenomena import PhenomenonKind

        return self._phenomenon(PhenomenonKind.CONJUNCTION, mean)

    def rise_transit_set(
        self, geographic: GeographicCoordinates, altitude: Degree | None = None
    ) -> RiseTransitSet:
        """Rise/transit/set on the body's day; the Sun defaults to its standard altitude."""
        if altitude is None and self.body is BodyId.SUN:
            altitude = Degree(STANDARD_ALTITUDE_SUN)
        return rise_transit_set(self, geographic, altitude)
