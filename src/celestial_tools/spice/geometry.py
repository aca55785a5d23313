"""Geocentric apparent RA/Dec of solar-system bodies from SPICE kernels."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import cspyce

from celestial_tools.angles import Degree, Hour
from celestial_tools.constants import EARTH_ID, NAIF_BARYCENTER_IDS
from celestial_tools.coordinates import EquatorialCoordinates
from celestial_tools.spice.load import load_spice_kernels
from celestial_tools.time_utils import utc_to_et

if TYPE_CHECKING:
    from celestial_tools.bodies.solar_system import BodyId
    from celestial_tools.julian_day import JulianDay

logger = logging.getLogger(__name__)


def ephemeris_id(naif_id: int) -> int:
    """NAIF ID to query in a planetary SPK (barycenter for Mars..Pluto)."""
    return NAIF_BARYCENTER_IDS.get(naif_id, naif_id)


def body_radec(et: float, naif_id: int) -> tuple[float, float]:
    """Geocentric J2000 RA and Dec of body (radians), corrected for LT+S.

    Parameters:
        et: Ephemeris time (TDB seconds past J2000).
        naif_id: Body NAIF ID.

    Returns:
        (ra, dec) in radians.
    """
    obs_pv = cspyce.spkssb(EARTH_ID, et, 'J2000')
    body_dpv, _ = cspyce.spkapp(ephemeris_id(naif_id), et, 'J2000', obs_pv[:6], 'LT+S')
    _, ra, dec = cspyce.recrad(body_dpv[:3])
    return (ra, dec)


class SpiceEphemeris:
    """Ephemeris source backed by the cspyce kernel pool."""

    def equatorial_coordinates(self, body: BodyId, julian_day: JulianDay) -> EquatorialCoordinates:
        """Apparent geocentric equatorial coordinates of body at julian_day.

        Raises:
            RuntimeError: If the kernels cannot be loaded.
        """
        ok, reason = load_spice_kernels()
        if not ok:
            raise RuntimeError(f'SPICE ephemeris unavailable: {reason}')
        day, sec = julian_day.day_sec()
        et = utc_to_et(day, sec)
        ra, dec = body_radec(et, body.naif_id)
        logger.debug('%s at ET %.3f: ra=%.9f dec=%.9f rad', body.name, et, ra, dec)
        return EquatorialCoordinates(Hour.from_radians(ra).reduced(), Degree.from_radians(dec))
