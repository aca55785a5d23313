"""CLI entry point: celestial-tools phenomena|parallactic|diurnal-arc|catalog subcommands."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, cast

from celestial_tools.angle_utils import parse_degree, parse_hour
from celestial_tools.angles import Degree, Hour
from celestial_tools.bodies import AstronomicalObject, BodyId, CelestialBody, SolarSystemBody, parse_body
from celestial_tools.config import get_log_level_name
from celestial_tools.constants import STANDARD_ALTITUDE_STARS
from celestial_tools.coordinates import EquatorialCoordinates, GeographicCoordinates
from celestial_tools.diurnal import diurnal_arc
from celestial_tools.julian_day import JulianDay
from celestial_tools.phenomena import PhenomenonKind, find
from celestial_tools.stars import read_stars
from celestial_tools.time_utils import parse_datetime

logger = logging.getLogger(__name__)

_KIND_CHOICES = {kind.name.lower().replace('_', '-'): kind for kind in PhenomenonKind}


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or CELESTIAL_TOOLS_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = get_log_level_name()
    if env_level is not None:
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _degree_arg(value: str) -> Degree:
    angle = parse_degree(value)
    if angle is None:
        raise argparse.ArgumentTypeError(f'invalid angle: {value!r}')
    return angle


def _hour_arg(value: str) -> Hour:
    angle = parse_hour(value)
    if angle is None:
        raise argparse.ArgumentTypeError(f'invalid right ascension: {value!r}')
    return angle


def _body_arg(value: str) -> BodyId:
    try:
        return parse_body(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _julian_day_from_string(value: str) -> JulianDay:
    """Parse a date/time string or a bare Julian Day number.

    Raises:
        ValueError: If the string is neither.
    """
    try:
        return JulianDay(float(value))
    except ValueError:
        pass
    parsed = parse_datetime(value)
    if parsed is None:
        raise ValueError(f'Invalid date/time: {value!r}')
    return JulianDay.from_day_sec(*parsed)


def _geographic(args: argparse.Namespace) -> GeographicCoordinates:
    if args.lon_dir == 'west':
        return GeographicCoordinates(args.longitude, args.latitude)
    return GeographicCoordinates.from_east_longitude(args.longitude, args.latitude)


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--longitude', type=_degree_arg, required=True, help='Observer longitude (deg or "d m s")'
    )
    parser.add_argument(
        '--latitude', type=_degree_arg, required=True, help='Observer latitude (deg or "d m s")'
    )
    parser.add_argument('--lon-dir', type=str, default='east', choices=['east', 'west'])


def _format_jd(jd: JulianDay) -> str:
    y, m, d, hh, mm, ss = jd.calendar()
    return f'{jd.value:.6f}  {y:04d}-{m:02d}-{d:02d} {hh:02d}:{mm:02d}:{ss:06.3f}'


def _phenomena_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print the mean or true epoch of a planetary phenomenon.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    kind = _KIND_CHOICES[args.kind]
    try:
        year = args.year
        if year is None:
            year = _julian_day_from_string(args.date).decimal_year
        jd = find(args.body, kind, year, mean=not args.true)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    print(_format_jd(jd))
    return 0


def _target(args: argparse.Namespace, jd: JulianDay) -> CelestialBody:
    if args.body is not None:
        return SolarSystemBody(args.body, jd)
    if args.ra is None or args.dec is None:
        raise ValueError('Give either --body or both --ra and --dec')
    return AstronomicalObject('target', EquatorialCoordinates(args.ra, args.dec), jd)


def _parallactic_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print the parallactic angle (and, with --details, the horizon angles)."""
    try:
        jd = _julian_day_from_string(args.date)
        body = _target(args, jd)
        geo = _geographic(args)
        q = body.parallactic_angle(geo)
        print(f'parallactic_angle {q.value:.6f}')
        if args.details:
            horizontal = body.horizontal_coordinates(geo)
            print(f'azimuth {horizontal.azimuth_from_north.value:.6f}')
            print(f'altitude {horizontal.altitude.value:.6f}')
            print(f'ecliptic_longitude_on_horizon {body.ecliptic_longitude_on_horizon(geo).value:.6f}')
            print(
                'angle_between_ecliptic_and_horizon '
                f'{body.angle_between_ecliptic_and_horizon(geo).value:.6f}'
            )
            pole = body.angle_between_north_celestial_pole_and_north_pole_of_ecliptic(geo)
            print(f'angle_between_poles {pole.value:.6f}')
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


def _diurnal_arc_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print the half diurnal arc in degrees and hours, or the terminal status."""
    arc = diurnal_arc(args.altitude, args.latitude, args.dec)
    if not arc.is_valid:
        print(arc.status.value)
        return 0
    print(f'{arc.angle.value:.6f} deg  {arc.hours.value:.6f} h')
    return 0


def _catalog_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """List stars from a catalog file with decimal RA (hours) and Dec (degrees)."""
    try:
        stars = read_stars(args.file, max_stars=args.max_stars)
    except OSError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    for star in stars:
        coords = star.equatorial_coordinates
        print(f'{star.name}\t{coords.right_ascension.value:.6f}\t{coords.declination.value:.6f}')
    return 0


def main() -> int:
    """Entry point for celestial-tools CLI.

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='celestial-tools',
        description='Planetary phenomena, parallactic angle, diurnal arcs, and star catalogs.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    phen_parser = subparsers.add_parser('phenomena', help='Conjunction or opposition epoch')
    phen_parser.add_argument('--body', type=_body_arg, required=True, help='Planet name or NAIF ID')
    phen_parser.add_argument(
        '--kind', type=str, required=True, choices=sorted(_KIND_CHOICES), help='Phenomenon'
    )
    when = phen_parser.add_mutually_exclusive_group(required=True)
    when.add_argument('--year', type=float, help='Decimal year, e.g. 1993.75')
    when.add_argument('--date', type=str, help='Date/time string or Julian Day')
    phen_parser.add_argument(
        '--true', action='store_true', help='Apply periodic terms (default: mean epoch)'
    )
    phen_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    phen_parser.set_defaults(func=_phenomena_cmd)

    par_parser = subparsers.add_parser('parallactic', help='Parallactic and horizon angles')
    par_parser.add_argument('--date', type=str, required=True, help='UT date/time or Julian Day')
    par_parser.add_argument('--body', type=_body_arg, default=None, help='Solar-system body')
    par_parser.add_argument('--ra', type=_hour_arg, default=None, help='Right ascension (h m s)')
    par_parser.add_argument('--dec', type=_degree_arg, default=None, help='Declination (d m s)')
    _add_location_args(par_parser)
    par_parser.add_argument(
        '--details', action='store_true', help='Also print horizon and ecliptic angles'
    )
    par_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    par_parser.set_defaults(func=_parallactic_cmd)

    arc_parser = subparsers.add_parser('diurnal-arc', help='Half diurnal arc above an altitude')
    arc_parser.add_argument('--dec', type=_degree_arg, required=True, help='Declination')
    arc_parser.add_argument('--latitude', type=_degree_arg, required=True, help='Latitude')
    arc_parser.add_argument(
        '--altitude',
        type=_degree_arg,
        default=Degree(STANDARD_ALTITUDE_STARS),
        help='Target altitude (default: standard altitude for stars)',
    )
    arc_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    arc_parser.set_defaults(func=_diurnal_arc_cmd)

    cat_parser = subparsers.add_parser('catalog', help='List a star catalog file')
    cat_parser.add_argument('file', type=str, help='Catalog file (name, RA, Dec lines)')
    cat_parser.add_argument('--max-stars', type=int, default=100, help='Maximum entries')
    cat_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    cat_parser.set_defaults(func=_catalog_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return cast(int, args.func(parser, args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
