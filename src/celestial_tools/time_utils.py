"""Time conversion wrappers around rms-julian (calendar dates, UTC/TAI/TDB)."""

from __future__ import annotations

import logging
import re

import julian

from celestial_tools.config import get_leapsecs_path

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def _ensure_leapsecs() -> None:
    """Load the leap seconds kernel if not already loaded.

    rms-julian requires a NAIF LSK (e.g. naif0012.tls). If the configured file
    is missing or not in LSK format, falls back to rms-julian's bundled LSK.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    # UTC handling consistent with SPICE ephemeris time.
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    try:
        julian.load_lsk(path)
        _leapsecs_loaded = True
    except (OSError, KeyError, ValueError) as e:
        logger.info(
            'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
            path,
            e,
        )
        try:
            julian.load_lsk()
        except Exception as fallback_err:
            logger.error(
                'Fallback to rms-julian bundled LSK failed: %s',
                fallback_err,
                exc_info=True,
            )
            raise
        _leapsecs_loaded = True


def parse_datetime(string: str) -> tuple[int, float] | None:
    """Parse a date/time string to UTC (day, sec).

    Parameters:
        string: Date/time string (format accepted by rms-julian); a trailing
            ISO "Z" is accepted.

    Returns:
        (day, sec) where day is days since 2000-01-01 and sec is seconds within
        that day; None on parse failure.
    """
    _ensure_leapsecs()
    candidate_strings = [string]
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not parse the ISO UTC suffix.
        candidate_strings.append(stripped[:-1])
    if re.fullmatch(r'\d{4}-\d{1,2}-\d{1,2}', stripped):
        candidate_strings.append(f'{stripped} 00:00:00')
    for candidate in candidate_strings:
        try:
            result = julian.day_sec_from_string(candidate)
            day, sec = result[0], result[1]
            return (int(day), float(sec))
        except (ValueError, TypeError, LookupError, OSError):
            continue
    return None


def day_from_ymd(year: int, month: int, day: int) -> int:
    """Convert a calendar date to days since 2000-01-01.

    Parameters:
        year, month, day: Calendar date.

    Returns:
        Day number (negative before 2000).
    """
    return int(julian.day_from_ymd(year, month, day))


def ymd_from_day(day: int) -> tuple[int, int, int]:
    """Convert days since 2000-01-01 to a calendar date.

    Parameters:
        day: Day number.

    Returns:
        (year, month, day).
    """
    y, m, d = julian.ymd_from_day(day)
    return (int(y), int(m), int(d))


def hms_from_sec(sec: float) -> tuple[int, int, float]:
    """Convert seconds within a day to (hour, minute, second).

    Parameters:
        sec: Seconds within day (0..86400).

    Returns:
        (hour, minute, second).
    """
    h, m, s = julian.hms_from_sec(sec)
    return (int(h), int(m), float(s))


def tai_from_day_sec(day: int, sec: float) -> float:
    """Convert UTC (day, sec) to TAI seconds.

    Parameters:
        day: Days since 2000-01-01.
        sec: Seconds within that day.

    Returns:
        TAI in seconds.
    """
    _ensure_leapsecs()
    return float(julian.tai_from_day_sec(day, sec))


def tdb_from_tai(tai: float) -> float:
    """Convert TAI to TDB seconds (ephemeris time for SPICE).

    Parameters:
        tai: TAI in seconds.

    Returns:
        TDB in seconds.
    """
    return float(julian.tdb_from_tai(tai))


def utc_to_et(day: int, sec: float) -> float:
    """Convert UTC (day, sec) to ET (TDB) seconds for SPICE.

    Parameters:
        day: Days since 2000-01-01.
        sec: Seconds within day.

    Returns:
        ET (TDB) in seconds.
    """
    tai = tai_from_day_sec(day, sec)
    return tdb_from_tai(tai)
