"""Obliquity of the ecliptic and low-precision nutation (Meeus ch. 22).

All functions take T, Julian centuries since J2000.0.
"""

from __future__ import annotations

import math

from numpy.polynomial import polynomial

from celestial_tools.angles import Degree, arcseconds
from celestial_tools.constants import OBLIQUITY_ARCSEC


def mean_obliquity(t: float) -> Degree:
    """Mean obliquity of the ecliptic (IAU polynomial, Meeus 22.2)."""
    return arcseconds(float(polynomial.polyval(t, OBLIQUITY_ARCSEC)))


def nutation(t: float) -> tuple[Degree, Degree]:
    """Nutation in longitude and in obliquity, accurate to about 0.5".

    Parameters:
        t: Julian centuries since J2000.0.

    Returns:
        (delta_psi, delta_epsilon).
    """
    omega = math.radians(125.04452 - 1934.136261 * t + 0.0020708 * t * t + t**3 / 450000.0)
    sun_lon = math.radians(280.4665 + 36000.7698 * t)
    moon_lon = math.radians(218.3165 + 481267.8813 * t)
    dpsi = (
        -17.20 * math.sin(omega)
        - 1.32 * math.sin(2.0 * sun_lon)
        - 0.23 * math.sin(2.0 * moon_lon)
        + 0.21 * math.sin(2.0 * omega)
    )
    deps = (
        9.20 * math.cos(omega)
        + 0.57 * math.cos(2.0 * sun_lon)
        + 0.10 * math.cos(2.0 * moon_lon)
        - 0.09 * math.cos(2.0 * omega)
    )
    return (arcseconds(dpsi), arcseconds(deps))


def true_obliquity(t: float) -> Degree:
    """Mean obliquity plus nutation in obliquity."""
    return mean_obliquity(t) + nutation(t)[1]
