"""Julian Day: the continuous day count every computation is indexed by."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from numpy.polynomial import polynomial

from celestial_tools.angles import Degree, Hour
from celestial_tools.constants import (
    DAYS_PER_JULIAN_CENTURY,
    GMST_COEFFS,
    JD_DAY0,
    JD_J2000,
    MJD_OFFSET,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from celestial_tools.nutation import nutation, true_obliquity
from celestial_tools.time_utils import day_from_ymd, hms_from_sec, ymd_from_day


@dataclass(frozen=True, order=True)
class JulianDay:
    """Days elapsed since noon of 4713 BC January 1 (Julian calendar).

    Subtracting two Julian Days gives an interval in days; adding a number of
    days gives a new Julian Day. Calendar conversion is delegated to
    rms-julian, whose day 0 is 2000-01-01 (JD 2451544.5).
    """

    value: float

    @classmethod
    def from_calendar(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0.0,
    ) -> JulianDay:
        """Build from a UT calendar date and time of day."""
        days = day_from_ymd(year, month, day)
        sec = hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
        return cls(JD_DAY0 + days + sec / SECONDS_PER_DAY)

    @classmethod
    def from_datetime(cls, dt: datetime) -> JulianDay:
        """Build from a datetime; naive values are taken as UTC."""
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return cls.from_calendar(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second + dt.microsecond / 1e6,
        )

    @classmethod
    def from_day_sec(cls, day: int, sec: float) -> JulianDay:
        """Build from an rms-julian (day, sec) pair."""
        return cls(JD_DAY0 + day + sec / SECONDS_PER_DAY)

    def day_sec(self) -> tuple[int, float]:
        """Return the rms-julian (day, sec) pair for this instant."""
        offset = self.value - JD_DAY0
        day = math.floor(offset)
        sec = (offset - day) * SECONDS_PER_DAY
        if sec >= SECONDS_PER_DAY:
            day += 1
            sec -= SECONDS_PER_DAY
        return (int(day), sec)

    def calendar(self) -> tuple[int, int, int, int, int, float]:
        """Return (year, month, day, hour, minute, second) in UT."""
        day, sec = self.day_sec()
        y, m, d = ymd_from_day(day)
        hh, mm, ss = hms_from_sec(sec)
        return (y, m, d, hh, mm, ss)

    def to_datetime(self) -> datetime:
        """Return an aware UTC datetime (years 1..9999 only)."""
        y, m, d, hh, mm, ss = self.calendar()
        return datetime(y, m, d, tzinfo=timezone.utc) + timedelta(
            hours=hh, minutes=mm, seconds=ss
        )

    @property
    def modified(self) -> float:
        """Modified Julian Day."""
        return self.value - MJD_OFFSET

    @property
    def julian_centuries(self) -> float:
        """Julian centuries since J2000.0."""
        return (self.value - JD_J2000) / DAYS_PER_JULIAN_CENTURY

    @property
    def decimal_year(self) -> float:
        """Calendar year plus the elapsed fraction of that year."""
        year = self.calendar()[0]
        start = JulianDay.from_calendar(year, 1, 1).value
        end = JulianDay.from_calendar(year + 1, 1, 1).value
        return year + (self.value - start) / (end - start)

    def midnight(self) -> JulianDay:
        """Return 0h UT of the same civil day."""
        return JulianDay(math.floor(self.value - 0.5) + 0.5)

    def mean_greenwich_sidereal_time(self) -> Hour:
        """Greenwich mean sidereal time (Meeus 12.4), reduced to [0, 24)."""
        d = self.value - JD_J2000
        t = d / DAYS_PER_JULIAN_CENTURY
        c0, c1, c2, c3 = GMST_COEFFS
        theta = c0 + c1 * d + float(polynomial.polyval(t, (0.0, 0.0, c2, c3)))
        return Degree(theta).reduced().in_hours

    def apparent_greenwich_sidereal_time(self) -> Hour:
        """Mean sidereal time corrected by the equation of the equinoxes."""
        t = self.julian_centuries
        dpsi, _ = nutation(t)
        correction = dpsi.value * math.cos(true_obliquity(t).radians)
        mean = self.mean_greenwich_sidereal_time()
        return (mean + Degree(correction).in_hours.value).reduced()

    def mean_local_sidereal_time(self, longitude: Degree) -> Hour:
        """Local mean sidereal time; longitude is measured positively westward."""
        return (self.mean_greenwich_sidereal_time() - longitude.in_hours.value).reduced()

    def apparent_local_sidereal_time(self, longitude: Degree) -> Hour:
        """Local apparent sidereal time; longitude is measured positively westward."""
        return (self.apparent_greenwich_sidereal_time() - longitude.in_hours.value).reduced()

    def __add__(self, days: object) -> JulianDay:
        if not isinstance(days, numbers.Real):
            return NotImplemented
        return JulianDay(self.value + float(days))

    __radd__ = __add__

    def __sub__(self, other: object) -> JulianDay | float:
        if isinstance(other, JulianDay):
            return self.value - other.value
        if isinstance(other, numbers.Real):
            return JulianDay(self.value - float(other))
        return NotImplemented

    def __float__(self) -> float:
        return float(self.value)


J2000 = JulianDay(JD_J2000)
