"""Fixed catalog objects (stars, clusters, galaxies)."""

from __future__ import annotations

from dataclasses import dataclass

from celestial_tools.bodies.base import DerivedAnglesMixin
from celestial_tools.coordinates import EquatorialCoordinates
from celestial_tools.julian_day import J2000, JulianDay


@dataclass(frozen=True)
class AstronomicalObject(DerivedAnglesMixin):
    """Object with fixed equatorial coordinates, observed at a day count."""

    name: str
    coordinates: EquatorialCoordinates
    julian_day: JulianDay = J2000

    @property
    def equatorial_coordinates(self) -> EquatorialCoordinates:
        return self.coordinates

    def at(self, julian_day: JulianDay) -> AstronomicalObject:
        """Same object observed at another day count."""
        return AstronomicalObject(self.name, self.coordinates, julian_day)
