"""Star catalog reader producing fixed astronomical objects."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from celestial_tools.angle_utils import parse_degree, parse_hour
from celestial_tools.bodies.objects import AstronomicalObject
from celestial_tools.coordinates import EquatorialCoordinates
from celestial_tools.julian_day import J2000, JulianDay

logger = logging.getLogger(__name__)


def _next_data_line(f: TextIO) -> str:
    """Next non-comment line stripped, or '' at end of file."""
    while True:
        line = f.readline()
        if not line:
            return ''
        line = line.strip()
        if line and not line.startswith('!'):
            return line


def read_stars(
    filepath: str | Path,
    max_stars: int = 100,
    julian_day: JulianDay = J2000,
) -> list[AstronomicalObject]:
    """Read a star list from file.

    Format: for each star, a line with the name, then RA (hours or "h m s"),
    then Dec (degrees or "d m s"). Lines starting with '!' and blank lines are
    skipped. Entries whose RA or Dec cannot be parsed are skipped with a warning.

    Parameters:
        filepath: Path to star catalog file.
        max_stars: Maximum number of stars to read.
        julian_day: Day count the returned objects are observed at.

    Returns:
        List of AstronomicalObject in file order.
    """
    path = Path(filepath)
    stars: list[AstronomicalObject] = []
    with path.open() as f:
        while len(stars) < max_stars:
            name = _next_data_line(f)
            if not name:
                break
            ra_line = _next_data_line(f)
            dec_line = _next_data_line(f)
            if not dec_line:
                logger.warning('%s: incomplete entry for %r at end of file', path, name)
                break
            ra = parse_hour(ra_line)
            dec = parse_degree(dec_line)
            if ra is None or dec is None:
                logger.warning('%s: cannot parse RA %r / Dec %r for %r', path, ra_line, dec_line, name)
                continue
            coords = EquatorialCoordinates(ra, dec)
            stars.append(AstronomicalObject(name, coords, julian_day))
    return stars
