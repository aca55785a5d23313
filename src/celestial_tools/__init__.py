"""Positional astronomy computations on Julian Days and celestial coordinates.

The package provides:
- Angle and day-count primitives (Degree, Hour, JulianDay) with calendar
  conversion through rms-julian
- Coordinate transforms between equatorial, ecliptic, horizontal, and galactic frames
- Derived angles for any celestial body: parallactic angle, ecliptic/horizon
  angles, diurnal arcs, rise/transit/set
- Planetary phenomena (conjunctions, oppositions) from mean elements and periodic terms

Planet positions come from SPICE kernels via cspyce; the Sun also has a
built-in analytic theory.
"""

__all__: list[str] = []
